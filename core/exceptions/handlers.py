"""
DRF Exception Handler
=====================

Every error leaving the parts API has one envelope::

    {"error": "<code>", "message": "<human text>", "detail": {...}}

``PartsFormError`` subtypes supply the envelope themselves. DRF's own
exceptions (malformed JSON, throttling, unknown routes, ...) are reshaped
into it so clients only parse one format.

Registered in ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``.
"""

import logging

from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from .base import PartsFormError, ServiceError

logger = logging.getLogger(__name__)


def _request_path(context) -> str:
    request = context.get("request")
    return getattr(request, "path", "?")


# Django's own Http404 / PermissionDenied carry no DRF code
_STATUS_CODES = {403: "permission_denied", 404: "not_found"}


def _drf_envelope(exc, response: Response) -> dict:
    code = exc.get_codes() if isinstance(exc, APIException) else None
    if not isinstance(code, str):
        code = _STATUS_CODES.get(response.status_code, "invalid")
    if isinstance(response.data, dict) and set(response.data) == {"detail"}:
        return {"error": code, "message": str(response.data["detail"])}
    return {"error": code, "message": "Invalid request", "detail": response.data}


def partsform_exception_handler(exc, context):
    """
    Map an exception raised inside a view onto the shared error envelope.

    Returns None for exceptions DRF does not know either, which lets Django
    turn them into a 500 after they are logged.
    """
    path = _request_path(context)

    if isinstance(exc, PartsFormError):
        # Upstream failures are ours to look at, bad input is the client's
        log = logger.error if isinstance(exc, ServiceError) else logger.warning
        log("%s on %s: %s %s", exc.error_code, path, exc.message, exc.details or "")
        return Response(exc.to_dict(), status=exc.status_code)

    response = drf_exception_handler(exc, context)
    if response is None:
        logger.exception("Unhandled exception on %s", path)
        return None

    response.data = _drf_envelope(exc, response)
    return response
