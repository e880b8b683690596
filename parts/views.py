"""
Parts Views

API endpoints for query understanding and candidate filtering.
"""

import hashlib
from functools import lru_cache

from django.core.cache import cache
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import ValidationError
from partsform.config import get_config

from .query_sanitizer import sanitize_query, validate_query
from .serializers import SearchRequestSerializer
from .services import PartsSearchService


@lru_cache(maxsize=1)
def get_search_service() -> PartsSearchService:
    """Configured service, built on first use."""
    return PartsSearchService.from_config(get_config())


def _intent_cache_key(query: str) -> str:
    return f"parts:intent:{hashlib.md5(query.lower().encode()).hexdigest()}"


class IntentView(APIView):
    """
    Parse a free-text parts query.

    GET /api/v1/parts/intent/?q=<query>

    Response includes:
        - intent: the merged ParsedIntent (camelCase)
        - filters / sort / limit / requestedQuantity / meta
    """
    permission_classes = [AllowAny]

    def get(self, request):
        query = sanitize_query(request.query_params.get("q", ""))
        error = validate_query(query)
        if error:
            raise ValidationError(error, field="q")

        # ── Cache lookup ─────────────────────────────
        cache_key = _intent_cache_key(query)
        cached = cache.get(cache_key)
        if cached:
            return Response({**cached, "_cached": True})

        service = get_search_service()
        analysis = service.safe_analyze(query)
        shaped = service.shaper.shape(
            analysis.intent,
            parse_time_ms=analysis.parse_time_ms,
            enhance_time_ms=analysis.enhance_time_ms,
            enhanced=analysis.enhanced,
        )
        response_data = {"intent": analysis.intent.to_dict(), **shaped.to_dict()}

        cache.set(cache_key, response_data, timeout=get_config().search.intent_cache_ttl)
        return Response(response_data)


class SearchView(APIView):
    """
    Parse a query and filter the posted candidate parts with it.

    POST /api/v1/parts/search/
    Body: {"query": "bosch brake pads under $500", "parts": [{...}, ...]}

    Response includes the intent, matching parts, the filter trace,
    stock statistics and a human-readable message.
    """
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = SearchRequestSerializer(data=request.data)
        if not serializer.is_valid():
            raise ValidationError("Invalid search request", errors=serializer.errors)

        query = sanitize_query(serializer.validated_data["query"])
        error = validate_query(query, param="query")
        if error:
            raise ValidationError(error, field="query")

        result = get_search_service().search(query, serializer.validated_data["parts"])
        return Response(result.to_dict())


class HealthView(APIView):
    """
    Health check for load balancers.

    GET /api/v1/parts/health/
    """
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({
            "status": "healthy",
            "service": "partsform-search",
            "version": "1.0.0",
            "engine": get_search_service().get_status(),
        })
