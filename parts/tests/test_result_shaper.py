"""
Tests for the Result Shaper

Run with: python -m pytest parts/tests/test_result_shaper.py -v
"""

import pytest

from parts.services.filter_pipeline import FilterPipeline
from parts.services.intent import Condition, Confidence, Currency, ParsedIntent, SortPreference
from parts.services.result_shaper import SORT_CRITERIA, ResultShaper


@pytest.fixture
def shaper():
    return ResultShaper()


class TestBuildFilters:

    def test_empty_intent_has_no_filters(self, shaper):
        assert shaper.build_filters(ParsedIntent()) == {}

    def test_populated_fields_only(self, shaper):
        intent = ParsedIntent(
            part_numbers=("RC0009",),
            parts_brands=("BOSCH",),
            vehicle_brand="TOYOTA",
            max_price=500.0,
            require_in_stock=True,
            oem=True,
            condition=Condition.NEW,
        )
        assert shaper.build_filters(intent) == {
            "partNumbers": ["RC0009"],
            "vehicleBrand": "TOYOTA",
            "brands": ["BOSCH"],
            "price": {"currency": "USD", "max": 500.0},
            "stock": "in_stock",
            "oem": True,
            "condition": "new",
        }

    def test_price_range(self, shaper):
        intent = ParsedIntent(min_price=140.0, max_price=260.0, price_currency=Currency.EUR)
        assert shaper.build_filters(intent)["price"] == {"currency": "EUR", "min": 140.0, "max": 260.0}

    def test_high_stock_wins(self, shaper):
        intent = ParsedIntent(require_in_stock=True, require_high_stock=True)
        assert shaper.build_filters(intent)["stock"] == "high_stock"

    def test_fast_delivery_without_days(self, shaper):
        filters = shaper.build_filters(ParsedIntent(fast_delivery=True))
        assert filters["deliveryDays"] == 5
        assert filters["fastDelivery"] is True

    def test_explicit_delivery_days(self, shaper):
        filters = shaper.build_filters(ParsedIntent(max_delivery_days=14))
        assert filters == {"deliveryDays": 14}

    def test_vehicle_year_range(self, shaper):
        filters = shaper.build_filters(ParsedIntent(vehicle_year_min=2010, vehicle_year_max=2015))
        assert filters["vehicleYearRange"] == {"min": 2010, "max": 2015}


class TestBuildSort:

    def test_no_preference(self, shaper):
        assert shaper.build_sort(None) is None

    def test_single_preference(self, shaper):
        assert shaper.build_sort(SortPreference.PRICE_ASC) == {
            "preference": "price_asc", "sortBy": "price", "sortOrder": "asc",
        }

    def test_composite_preference_lists_weighted_criteria(self, shaper):
        sort = shaper.build_sort(SortPreference.PRICE_AND_DELIVERY)
        assert sort["sortBy"] == "price"
        assert sort["criteria"] == [
            {"field": "price", "order": "asc", "weight": 0.5},
            {"field": "deliveryDays", "order": "asc", "weight": 0.5},
        ]

    def test_every_preference_has_criteria(self):
        assert set(SORT_CRITERIA) == set(SortPreference)


class TestShape:

    def test_limit_quantity_and_meta(self, shaper):
        intent = ParsedIntent(
            top_n=5, vehicle_brand="TOYOTA", categories=("filter",),
            confidence=Confidence.HIGH, summary="Top 5 Toyota filters",
        )
        shaped = shaper.shape(intent, parse_time_ms=1.2, enhance_time_ms=0.0, enhanced=False)

        assert shaped.limit == 5
        assert shaped.requested_quantity is None
        assert shaped.meta == {
            "parseTimeMs": 1.2,
            "enhanceTimeMs": 0.0,
            "enhanced": False,
            "confidence": "HIGH",
            "detectedLanguage": "en",
            "summary": "Top 5 Toyota filters",
        }
        assert shaped.to_dict()["filters"] == {"categories": ["filter"], "vehicleBrand": "TOYOTA"}


class TestSummaries:

    def test_stock_stats(self, shaper):
        parts = [{"quantity": 0}, {"quantity": 3}, {"quantity": "15"}, {"quantity": None}, {}]
        assert shaper.stock_stats(parts) == {
            "highStock": 1, "inStock": 2, "lowStock": 1, "outOfStock": 3,
        }

    def test_message_without_trace(self, shaper):
        assert shaper.build_message(0) == "Found 0 parts"

    def test_message_lists_applied_filters(self, shaper):
        records = [
            {"brand": "Bosch", "price": 100, "quantity": 5},
            {"brand": "Valeo", "price": 900, "quantity": 5},
        ]
        intent = ParsedIntent(parts_brands=("BOSCH",), max_price=500.0, require_in_stock=True)
        result = FilterPipeline().run(records, intent)

        assert shaper.build_message(len(result.matching), result.trace) == (
            "Found 1 parts (filtered by: price ≤ $500 USD (1835 AED), in stock, brands: BOSCH)"
        )

    def test_message_ignores_top_n_marker(self, shaper):
        result = FilterPipeline().run([{"price": 1}], ParsedIntent(top_n=3))
        assert shaper.build_message(1, result.trace) == "Found 1 parts"
