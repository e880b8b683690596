"""
Tests for the parts-search HTTP endpoints

Runs in-process through DRF's APIClient; the enhancer is switched off
by the root conftest.

Run with: python -m pytest parts/tests/test_views.py -v
"""

import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from core.middleware.deprecation import LegacyPartsAPIMiddleware
from parts import views
from parts.services import PartsSearchService
from parts.services.intent_enhancer import IntentEnhancer

API_V1 = "/api/v1/parts"


class StaticReplyClient:
    """Duck-typed ``LLMClient`` that always answers with the same text."""

    model = "fake-model"
    is_configured = True

    def __init__(self, reply):
        self.reply = reply

    def complete(self, prompt, system=None):
        return self.reply


@pytest.fixture
def client():
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def parts():
    return [
        {"partNumber": "0986494524", "description": "Brake pad set", "category": "brake",
         "brand": "Bosch", "price": 320, "quantity": 14},
        {"partNumber": "301486", "description": "Brake pad kit", "category": "brake",
         "brand": "Valeo", "price": 150, "quantity": 9},
        {"partNumber": "W 712/75", "description": "Oil filter", "category": "filter",
         "brand": "MANN-FILTER", "price": None, "quantity": 40},
    ]


# =============================================================================
# Intent endpoint
# =============================================================================

class TestIntentView:

    def test_parses_query(self, client):
        response = client.get(f"{API_V1}/intent/", {"q": "top 5 Toyota filters"})

        assert response.status_code == 200
        data = response.json()
        assert data["intent"]["topN"] == 5
        assert data["intent"]["vehicleBrand"] == "TOYOTA"
        assert data["limit"] == 5
        assert data["filters"]["categories"] == ["filter"]
        assert data["meta"]["enhanced"] is False
        assert "_cached" not in data

    def test_second_call_is_cached(self, client):
        client.get(f"{API_V1}/intent/", {"q": "cheapest Bosch brake pads in stock"})
        response = client.get(f"{API_V1}/intent/", {"q": "Cheapest BOSCH brake pads in stock"})

        data = response.json()
        assert data["_cached"] is True
        assert data["sort"]["preference"] == "price_asc"

    def test_chinese_query(self, client):
        response = client.get(f"{API_V1}/intent/", {"q": "在库便宜的刹车片"})

        data = response.json()
        assert data["intent"]["categories"] == ["brake"]
        assert data["intent"]["maxPrice"] == 100
        assert data["intent"]["requireInStock"] is True
        assert data["meta"]["detectedLanguage"] == "zh"

    def test_missing_query(self, client):
        response = client.get(f"{API_V1}/intent/")

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "validation_error"
        assert data["detail"] == {"field": "q"}

    @pytest.mark.parametrize("query", ["   ", "???", "<b></b>"])
    def test_rejects_queries_without_content(self, client, query):
        assert client.get(f"{API_V1}/intent/", {"q": query}).status_code == 400

    def test_failing_analysis_still_answers(self, client, monkeypatch):
        service = PartsSearchService()

        def explode(query):
            raise RuntimeError("parser state corrupted")

        monkeypatch.setattr(service, "analyze", explode)
        monkeypatch.setattr(views, "get_search_service", lambda: service)

        response = client.get(f"{API_V1}/intent/", {"q": "brake pads"})

        assert response.status_code == 200
        data = response.json()
        assert data["intent"]["originalQuery"] == "brake pads"
        assert data["intent"]["categories"] == []

    def test_overflowing_model_reply_keeps_local_intent(self, client, monkeypatch):
        enhancer = IntentEnhancer(client=StaticReplyClient('{"topN": 1e999}'), timeout=2.0)
        service = PartsSearchService(enhancer=enhancer, skip_enhance_when_confident=False)
        monkeypatch.setattr(views, "get_search_service", lambda: service)

        response = client.get(f"{API_V1}/intent/", {"q": "toyota brake pads"})

        assert response.status_code == 200
        data = response.json()
        assert data["intent"]["vehicleBrand"] == "TOYOTA"
        assert data["intent"]["topN"] is None
        assert "brake" in data["intent"]["categories"]
        enhancer.close()


# =============================================================================
# Search endpoint
# =============================================================================

class TestSearchView:

    def test_filters_posted_parts(self, client, parts):
        response = client.post(
            f"{API_V1}/search/",
            {"query": "bosch brake pads under $500 in stock", "parts": parts},
            format="json",
        )

        assert response.status_code == 200
        data = response.json()
        assert [p["partNumber"] for p in data["parts"]] == ["0986494524"]
        assert data["trace"]["totalReceived"] == 3
        assert data["message"].startswith("Found 1 parts (filtered by: price ≤ $500 USD (1835 AED)")
        assert data["meta"]["total_results"] == 1

    def test_unpriced_parts_survive_max_price(self, client, parts):
        response = client.post(
            f"{API_V1}/search/", {"query": "under $10", "parts": parts}, format="json",
        )
        assert "W 712/75" in [p["partNumber"] for p in response.json()["parts"]]

    def test_parts_are_optional(self, client):
        response = client.post(f"{API_V1}/search/", {"query": "brake pads"}, format="json")
        assert response.status_code == 200
        assert response.json()["parts"] == []

    def test_missing_query(self, client, parts):
        response = client.post(f"{API_V1}/search/", {"parts": parts}, format="json")
        assert response.status_code == 400
        assert "query" in response.json()["detail"]["errors"]

    def test_parts_must_be_records(self, client):
        response = client.post(
            f"{API_V1}/search/", {"query": "brake pads", "parts": ["not a record"]}, format="json",
        )
        assert response.status_code == 400

    def test_record_field_types_are_checked(self, client):
        response = client.post(
            f"{API_V1}/search/",
            {"query": "brake pads", "parts": [{"brand": ["Bosch", "Valeo"]}]},
            format="json",
        )
        assert response.status_code == 400

    def test_punctuation_query(self, client, parts):
        response = client.post(f"{API_V1}/search/", {"query": "!!!", "parts": parts}, format="json")
        assert response.status_code == 400
        assert response.json()["detail"] == {"field": "query"}
        assert "'query'" in response.json()["message"]

    def test_malformed_json_uses_error_envelope(self, client):
        response = client.post(
            f"{API_V1}/search/", data='{"query": "brake pads",', content_type="application/json",
        )

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "parse_error"
        assert "JSON parse error" in data["message"]

    def test_wrong_method_uses_error_envelope(self, client):
        response = client.get(f"{API_V1}/search/")

        assert response.status_code == 405
        assert response.json()["error"] == "method_not_allowed"


# =============================================================================
# Health, root and legacy routes
# =============================================================================

class TestServiceRoutes:

    def test_health(self, client):
        response = client.get(f"{API_V1}/health/")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["engine"]["enhancer"] == {"configured": False}
        assert "Deprecation" not in response

    def test_api_root(self, client):
        data = client.get("/api/").json()
        assert data["endpoints"]["search"] == "/api/v1/parts/search/"

    def test_legacy_alias_is_deprecated(self, client):
        response = client.get("/api/parts/intent/", {"q": "brake pads"})

        assert response.status_code == 200
        assert response["Deprecation"] == "true"
        assert response["Sunset"] == LegacyPartsAPIMiddleware.SUNSET_DATE
        assert response["Link"] == '</api/v1/parts/intent/>; rel="successor-version"'
