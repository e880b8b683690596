"""
Legacy Parts API Middleware
===========================

The parts endpoints used to live under ``/api/parts/``. That alias still
routes to the same views, but every response through it is marked
deprecated and points at its ``/api/v1/parts/`` successor.

Enable in MIDDLEWARE after all other middleware.
"""

import logging

from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)


class LegacyPartsAPIMiddleware(MiddlewareMixin):
    """
    Headers added to legacy responses:
        Deprecation: true
        Sunset: 2027-06-01T00:00:00Z
        Link: </api/v1/parts/...>; rel="successor-version"
        X-API-Warn: human-readable notice
    """

    LEGACY_PREFIX = "/api/parts/"
    CURRENT_PREFIX = "/api/v1/parts/"

    # Date the unversioned alias is removed
    SUNSET_DATE = "2027-06-01T00:00:00Z"

    def process_response(self, request, response):
        path = request.path
        if not path.startswith(self.LEGACY_PREFIX):
            return response

        successor = self.CURRENT_PREFIX + path[len(self.LEGACY_PREFIX):]
        response["Deprecation"] = "true"
        response["Sunset"] = self.SUNSET_DATE
        response["Link"] = f'<{successor}>; rel="successor-version"'
        response["X-API-Warn"] = f"{self.LEGACY_PREFIX} is deprecated, use {successor}"
        logger.debug(f"Legacy parts API hit: {path}")
        return response
