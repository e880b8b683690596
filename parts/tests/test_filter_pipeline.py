"""
Tests for the Filter Pipeline and its FilterTrace

Prices in the fixtures are in the storage currency (AED).

Run with: python -m pytest parts/tests/test_filter_pipeline.py -v
"""

import copy

import pytest

from parts.services.filter_pipeline import FilterPipeline, FilterTrace, as_number
from parts.services.intent import Condition, Currency, ParsedIntent
from parts.services.query_parser import LocalIntentParser


@pytest.fixture
def pipeline():
    return FilterPipeline()


@pytest.fixture
def catalog():
    return [
        {"partNumber": "04465-33450", "description": "Front brake pad set", "category": "brake",
         "brand": "Bosch", "price": 180, "quantity": 25, "deliveryDays": 3, "origin": "DE",
         "condition": "new", "supplier": "Toyota parts hub"},
        {"partNumber": "W 712/75", "description": "Oil filter", "category": "filter",
         "brand": "MANN-FILTER", "price": 35, "quantity": 4, "deliveryDays": 7, "origin": "DE",
         "condition": "new"},
        {"partNumber": "90915-YZZD3", "description": "Toyota oil filter", "category": "filter",
         "brand": "Toyota", "price": 60, "quantity": 0, "deliveryDays": 2, "origin": "JP",
         "condition": "new"},
        {"partNumber": "DF4465", "description": "Brake disc", "category": "brake",
         "brand": "Denso", "price": 2400, "quantity": 12, "origin": "CN", "condition": "used",
         "tags": ["rotor", "front"]},
        {"partNumber": "X-1", "description": "Spark plug", "category": "ignition",
         "brand": None, "quantity": 100},
    ]


def numbers(result):
    return [p["partNumber"] for p in result.matching]


# =============================================================================
# Stages
# =============================================================================

class TestStages:

    def test_empty_intent_keeps_everything(self, pipeline, catalog):
        result = pipeline.run(catalog, ParsedIntent())
        assert len(result.matching) == len(catalog)
        assert result.trace.stage_results == ()

    def test_keywords_match_description_category_and_tags(self, pipeline, catalog):
        result = pipeline.run(catalog, ParsedIntent(search_keywords=("rotor",), categories=("filter",)))
        assert numbers(result) == ["W 712/75", "90915-YZZD3", "DF4465"]

    def test_keywords_skipped_with_part_numbers(self, pipeline, catalog):
        intent = ParsedIntent(part_numbers=("DF4465",), categories=("brake",))
        result = pipeline.run(catalog, intent)
        assert "keywords" not in result.trace.stages
        assert len(result.matching) == len(catalog)

    def test_vehicle_brand_searches_supplier_and_description(self, pipeline, catalog):
        result = pipeline.run(catalog, ParsedIntent(vehicle_brand="TOYOTA"))
        assert numbers(result) == ["04465-33450", "90915-YZZD3"]

    def test_parts_brand_is_bidirectional(self, pipeline, catalog):
        result = pipeline.run(catalog, ParsedIntent(parts_brands=("MANN", "BOSCH")))
        assert numbers(result) == ["04465-33450", "W 712/75"]

    def test_parts_brand_fails_missing_brand(self, pipeline, catalog):
        result = pipeline.run(catalog, ParsedIntent(parts_brands=("DENSO",)))
        assert numbers(result) == ["DF4465"]

    def test_max_price_converts_threshold(self, pipeline, catalog):
        # 50 USD = 183.5 AED
        result = pipeline.run(catalog, ParsedIntent(max_price=50))
        assert numbers(result) == ["04465-33450", "W 712/75", "90915-YZZD3", "X-1"]
        assert result.trace.description_of("maxPrice") == "≤ $50 USD (183.5 AED)"

    def test_min_price_drops_unpriced(self, pipeline, catalog):
        result = pipeline.run(catalog, ParsedIntent(min_price=100, price_currency=Currency.EUR))
        assert numbers(result) == ["DF4465"]

    def test_price_as_string(self, pipeline):
        records = [{"partNumber": "A", "price": "1,200.50"}, {"partNumber": "B", "price": "n/a"}]
        result = pipeline.run(records, ParsedIntent(min_price=100))
        assert numbers(result) == ["A"]

    def test_in_stock(self, pipeline, catalog):
        result = pipeline.run(catalog, ParsedIntent(require_in_stock=True))
        assert numbers(result) == ["04465-33450", "W 712/75", "DF4465", "X-1"]

    def test_high_stock_supersedes_in_stock(self, pipeline, catalog):
        result = pipeline.run(catalog, ParsedIntent(require_in_stock=True, require_high_stock=True))
        assert numbers(result) == ["04465-33450", "DF4465", "X-1"]
        assert result.trace.description_of("stock") == "high stock ≥ 10"

    def test_fast_delivery_defaults_to_five_days(self, pipeline, catalog):
        result = pipeline.run(catalog, ParsedIntent(fast_delivery=True))
        assert "W 712/75" not in numbers(result)
        # Missing delivery estimates pass
        assert "DF4465" in numbers(result)
        assert result.trace.description_of("delivery") == "≤ 5 days delivery"

    def test_explicit_delivery_days_win(self, pipeline, catalog):
        result = pipeline.run(catalog, ParsedIntent(fast_delivery=True, max_delivery_days=2))
        assert numbers(result) == ["90915-YZZD3", "DF4465", "X-1"]

    def test_exclude_brands_keeps_unknown_brand(self, pipeline, catalog):
        result = pipeline.run(catalog, ParsedIntent(exclude_brands=("BOSCH", "DENSO")))
        assert numbers(result) == ["W 712/75", "90915-YZZD3", "X-1"]

    def test_exclude_origins_keeps_missing_origin(self, pipeline, catalog):
        result = pipeline.run(catalog, ParsedIntent(exclude_origins=("CN",)))
        assert "DF4465" not in numbers(result)
        assert "X-1" in numbers(result)

    def test_supplier_origin_drops_missing_origin(self, pipeline, catalog):
        result = pipeline.run(catalog, ParsedIntent(supplier_origin="DE"))
        assert numbers(result) == ["04465-33450", "W 712/75"]

    def test_condition_drops_missing_condition(self, pipeline, catalog):
        result = pipeline.run(catalog, ParsedIntent(condition=Condition.USED))
        assert numbers(result) == ["DF4465"]

    def test_quantity_requires_enough_units(self, pipeline, catalog):
        result = pipeline.run(catalog, ParsedIntent(requested_quantity=20))
        assert numbers(result) == ["04465-33450", "X-1"]
        assert result.trace.description_of("quantity") == "≥ 20 units"

    def test_quantity_of_one_is_not_a_filter(self, pipeline, catalog):
        result = pipeline.run(catalog, ParsedIntent(requested_quantity=1))
        assert "quantity" not in result.trace.stages

    def test_top_n_is_a_marker_only(self, pipeline, catalog):
        result = pipeline.run(catalog, ParsedIntent(top_n=2, requested_quantity=20))
        assert len(result.matching) == len(catalog)
        assert "quantity" not in result.trace.stages
        assert result.trace.stages["topN"] == "top 2 after ranking (5 → 5)"


# =============================================================================
# Pipeline properties
# =============================================================================

class TestPipelineProperties:

    def test_missing_prices_pass_max_filter(self, pipeline):
        """100 records: 40 priced under the limit, 60 without a price."""
        records = [{"partNumber": f"P{i}", "price": 100 + i} for i in range(40)]
        records += [{"partNumber": f"N{i}"} for i in range(60)]

        result = pipeline.run(records, ParsedIntent(max_price=500))

        assert len(result.matching) == 100
        assert result.trace.excluded == 0

    def test_only_prices_above_the_limit_are_removed(self, pipeline):
        records = [{"partNumber": f"P{i}", "price": 1000 + i * 100} for i in range(20)]
        records += [{"partNumber": f"N{i}", "price": None} for i in range(10)]

        result = pipeline.run(records, ParsedIntent(max_price=500))  # 1835 AED

        assert len(result.matching) == 9 + 10

    def test_idempotent(self, pipeline, catalog):
        intent = LocalIntentParser().parse("bosch brake pads in stock under $100 delivery in 5 days")
        once = pipeline.run(catalog, intent)
        twice = pipeline.run(list(once.matching), intent)
        assert list(twice.matching) == list(once.matching)

    def test_monotonic_narrowing(self, pipeline, catalog):
        intent = ParsedIntent(
            categories=("brake", "filter"), max_price=700, require_in_stock=True,
            exclude_origins=("CN",), fast_delivery=True,
        )
        result = pipeline.run(catalog, intent)
        previous = len(catalog)
        for stage in result.trace.stage_results:
            assert stage.before == previous
            assert stage.after <= stage.before
            previous = stage.after
        assert previous == result.trace.matching

    def test_stage_order(self, pipeline, catalog):
        intent = ParsedIntent(
            search_keywords=("filter",), vehicle_brand="TOYOTA", max_price=100,
            require_in_stock=True, requested_quantity=3,
        )
        result = pipeline.run(catalog, intent)
        assert list(result.trace.stages) == ["keywords", "vehicleBrand", "maxPrice", "stock", "quantity"]

    def test_candidates_are_not_mutated(self, pipeline, catalog):
        snapshot = copy.deepcopy(catalog)
        pipeline.run(catalog, ParsedIntent(max_price=10, require_high_stock=True))
        assert catalog == snapshot

    @pytest.mark.parametrize("candidates", [None, [], ["not a record", 42]])
    def test_empty_input(self, pipeline, candidates):
        result = pipeline.run(candidates, ParsedIntent(max_price=10))
        assert result.matching == ()
        assert result.trace.total_received == 0


# =============================================================================
# Trace
# =============================================================================

class TestFilterTrace:

    def test_to_dict(self, pipeline, catalog):
        result = pipeline.run(catalog, ParsedIntent(max_price=500, require_in_stock=True))
        data = result.trace.to_dict()

        assert data["totalReceived"] == 5
        assert data["matching"] == 3
        assert data["excluded"] == 2
        assert data["stages"] == {
            "maxPrice": "≤ $500 USD (1835 AED) (5 → 4)",
            "stock": "in stock (4 → 3)",
        }
        assert data["filterTimeMs"] >= 0

    def test_stages_are_read_only(self):
        trace = FilterTrace()
        with pytest.raises(TypeError):
            trace.stages["keywords"] = "x"

    def test_result_to_dict_copies_records(self, pipeline, catalog):
        data = pipeline.run(catalog, ParsedIntent()).to_dict()
        assert data["matching"][0] == catalog[0]
        assert data["matching"][0] is not catalog[0]


class TestAsNumber:

    @pytest.mark.parametrize("value, expected", [
        (12, 12.0), ("7.5", 7.5), ("1,000", 1000.0), (None, None), (True, None),
        ("abc", None), (float("nan"), None), ("inf", None),
    ])
    def test_as_number(self, value, expected):
        assert as_number(value) == expected
