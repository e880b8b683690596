"""
PartsForm URL Configuration
"""

from django.urls import path, include
from django.http import JsonResponse


def api_root(request):
    """API root - minimal public surface."""
    return JsonResponse({
        "service": "PartsForm Search API",
        "version": "1.0.0",
        "notice": "Use /api/v1/ prefix. Unversioned /api/ is deprecated.",
        "endpoints": {
            "intent": "/api/v1/parts/intent/?q=<query>",
            "search": "/api/v1/parts/search/",
            "health": "/api/v1/parts/health/",
        },
        "example": "/api/v1/parts/intent/?q=bosch+brake+pads+under+$500",
    })


urlpatterns = [
    path("api/", api_root, name="api-root"),

    # ── Versioned API (canonical) ─────────────────────────────────────
    path("api/v1/parts/", include("parts.urls")),

    # ── Legacy unversioned API (deprecated, kept for backward compat) ─
    path("api/parts/", include(("parts.urls", "parts"), namespace="parts-legacy")),
]
