"""
Tests for the Parts Search orchestrator

Run with: python -m pytest parts/tests/test_orchestrator.py -v
"""

import pytest

from parts.services import filter_parts, parse_intent
from parts.services.intent import Confidence, ParsedIntent
from parts.services.intent_enhancer import IntentEnhancer
from parts.services.orchestrator import PartsSearchService
from partsform.config import AppConfig, LLMConfig


class FakeEnhancer:
    """Duck-typed ``IntentEnhancer``."""

    def __init__(self, reply=None, available=True, error=None):
        self.reply = reply
        self.is_available = available
        self.error = error
        self.calls = []

    def enhance(self, query, local_intent, learned_context=None):
        self.calls.append((query, local_intent))
        if self.error:
            raise self.error
        return self.reply

    def get_status(self):
        return {"configured": True, "circuit_open": not self.is_available}


class StaticReplyClient:
    """Duck-typed ``LLMClient`` that always answers with the same text."""

    model = "fake-model"
    is_configured = True

    def __init__(self, reply):
        self.reply = reply

    def complete(self, prompt, system=None):
        return self.reply


@pytest.fixture
def parts():
    return [
        {"partNumber": "0986494524", "description": "Brake pad set", "category": "brake",
         "brand": "Bosch", "price": 320, "quantity": 14},
        {"partNumber": "0986494525", "description": "Brake pad set rear", "category": "brake",
         "brand": "Bosch", "price": 2600, "quantity": 3},
        {"partNumber": "301486", "description": "Brake pad kit", "category": "brake",
         "brand": "Valeo", "price": 150, "quantity": 9},
        {"partNumber": "0986494526", "description": "Brake pads", "category": "brake",
         "brand": "Bosch", "price": 200, "quantity": 0},
    ]


class TestAnalyze:

    def test_without_enhancer(self):
        service = PartsSearchService()
        analysis = service.analyze("top 5 Toyota filters")
        assert analysis.enhanced is False
        assert analysis.intent == analysis.local_intent
        assert analysis.intent.top_n == 5
        assert analysis.parse_time_ms >= 0

    def test_high_confidence_skips_enhancer(self):
        enhancer = FakeEnhancer(reply=ParsedIntent(top_n=9))
        service = PartsSearchService(enhancer=enhancer)

        analysis = service.analyze("find best 3 for RC0009")

        assert analysis.local_intent.confidence == Confidence.HIGH
        assert enhancer.calls == []
        assert analysis.intent.top_n == 3

    def test_skip_can_be_turned_off(self):
        enhancer = FakeEnhancer(reply=ParsedIntent(parts_brands=("BOSCH",)))
        service = PartsSearchService(enhancer=enhancer, skip_enhance_when_confident=False)

        analysis = service.analyze("find best 3 for RC0009")

        assert len(enhancer.calls) == 1
        assert analysis.intent.parts_brands == ("BOSCH",)

    def test_enhancer_result_is_merged_local_first(self):
        reply = ParsedIntent(parts_brands=("BOSCH",), categories=("pad",), top_n=7, confidence=Confidence.HIGH)
        enhancer = FakeEnhancer(reply=reply)
        service = PartsSearchService(enhancer=enhancer)

        analysis = service.analyze("brake pads")

        assert analysis.local_intent.confidence != Confidence.HIGH
        assert enhancer.calls[0][0] == "brake pads"
        assert analysis.enhanced is True
        assert analysis.intent.categories[0] == "brake"
        assert "pad" in analysis.intent.categories
        assert analysis.intent.parts_brands == ("BOSCH",)
        assert analysis.intent.top_n == 7
        assert analysis.intent.confidence == Confidence.HIGH

    def test_enhancer_failure_keeps_local_intent(self):
        enhancer = FakeEnhancer(reply=None)
        analysis = PartsSearchService(enhancer=enhancer).analyze("brake pads")
        assert len(enhancer.calls) == 1
        assert analysis.enhanced is False
        assert analysis.intent == analysis.local_intent

    def test_unavailable_enhancer_is_not_called(self):
        enhancer = FakeEnhancer(available=False)
        PartsSearchService(enhancer=enhancer).analyze("brake pads")
        assert enhancer.calls == []

    @pytest.mark.parametrize("query", ["", "   ", None])
    def test_empty_query_never_reaches_enhancer(self, query):
        enhancer = FakeEnhancer(reply=ParsedIntent(top_n=4))
        intent = PartsSearchService(enhancer=enhancer).parse_intent(query)
        assert enhancer.calls == []
        assert intent.top_n is None
        assert intent.search_keywords == ()


class TestNeverRaises:

    def test_parse_intent_swallows_enhancer_errors(self):
        service = PartsSearchService(enhancer=FakeEnhancer(error=RuntimeError("boom")))
        intent = service.parse_intent("brake pads")
        assert isinstance(intent, ParsedIntent)
        assert intent.original_query == "brake pads"

    def test_search_survives_enhancer_errors(self, parts):
        service = PartsSearchService(enhancer=FakeEnhancer(error=RuntimeError("boom")))
        result = service.search("brake pads", parts)
        local_only = PartsSearchService().search("brake pads", parts)

        assert "brake" in result.intent.categories
        assert result.intent == local_only.intent
        assert [p["partNumber"] for p in result.parts] == [p["partNumber"] for p in local_only.parts]
        assert result.message == local_only.message

    def test_raising_enhancer_keeps_local_intent(self):
        service = PartsSearchService(
            enhancer=FakeEnhancer(error=OverflowError("cannot convert float infinity to integer")),
            skip_enhance_when_confident=False,
        )
        analysis = service.analyze("toyota brake pads")
        assert analysis.enhanced is False
        assert analysis.intent == analysis.local_intent
        assert analysis.intent.vehicle_brand == "TOYOTA"

    def test_overflowing_model_reply_keeps_local_intent(self):
        enhancer = IntentEnhancer(client=StaticReplyClient('{"topN": 1e999}'), timeout=2.0)
        service = PartsSearchService(enhancer=enhancer, skip_enhance_when_confident=False)

        intent = service.parse_intent("toyota brake pads")

        assert intent.vehicle_brand == "TOYOTA"
        assert "brake" in intent.categories
        assert intent.top_n is None
        enhancer.close()


class TestSearch:

    def test_search_end_to_end(self, parts):
        result = PartsSearchService().search("bosch brake pads under $500 in stock", parts)

        assert [p["partNumber"] for p in result.parts] == ["0986494524"]
        assert result.message.startswith(
            "Found 1 parts (filtered by: price ≤ $500 USD (1835 AED), in stock, brands: BOSCH"
        )
        assert result.stock_stats == {"highStock": 1, "inStock": 1, "lowStock": 0, "outOfStock": 0}

    def test_to_dict(self, parts):
        data = PartsSearchService().search("top 5 bosch brake pads", parts).to_dict()

        assert set(data) == {"intent", "shaped", "parts", "trace", "stockStats", "message", "meta"}
        assert data["shaped"]["limit"] == 5
        assert data["intent"]["topN"] == 5
        assert data["trace"]["stages"]["topN"].startswith("top 5 after ranking")
        assert data["meta"]["total_results"] == len(data["parts"])

    def test_shape(self):
        shaped = PartsSearchService().shape("cheapest Bosch brake pads in stock")
        assert shaped.sort["preference"] == "price_asc"
        assert shaped.filters["brands"] == ["BOSCH"]
        assert shaped.filters["stock"] == "in_stock"
        assert shaped.meta["enhanced"] is False

    def test_filter_does_not_parse(self, parts):
        service = PartsSearchService()
        result = service.filter(parts, ParsedIntent(require_high_stock=True))
        assert len(result.matching) == 1


class TestModuleApi:

    def test_parse_intent(self):
        intent = parse_intent("top 5 Toyota filters")
        assert intent.vehicle_brand == "TOYOTA"
        assert intent.categories == ("filter",)
        assert intent.top_n == 5

    def test_filter_parts(self, parts):
        result = filter_parts(parts, ParsedIntent(parts_brands=("VALEO",)))
        assert [p["partNumber"] for p in result.matching] == ["301486"]


class TestFromConfig:

    def test_disabled_llm_builds_no_enhancer(self):
        app_config = AppConfig(llm=LLMConfig(api_key="sk-test", enabled=False))
        service = PartsSearchService.from_config(app_config)
        assert service.enhancer is None
        assert service.get_status()["enhancer"] == {"configured": False}

    def test_configured_llm_builds_enhancer(self):
        app_config = AppConfig(llm=LLMConfig(api_key="sk-test", enabled=True, timeout=3.0))
        service = PartsSearchService.from_config(app_config)
        try:
            assert service.enhancer.timeout == 3.0
            assert service.enhancer.client.is_configured is True
            assert service.get_status()["enhancer"]["model"] == "gpt-4o-mini"
        finally:
            service.enhancer.close()

    def test_status(self):
        status = PartsSearchService().get_status()
        assert status["storage_currency"] == "AED"
        assert "hits" in status["parser_cache"]
