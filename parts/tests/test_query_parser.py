"""
Tests for the Local Intent Parser

Run with: python -m pytest parts/tests/test_query_parser.py -v
"""

import pytest

from parts.services.intent import (
    Condition,
    Confidence,
    Currency,
    Language,
    ParsedIntent,
    SortPreference,
)
from parts.services.query_parser import LocalIntentParser, build_summary, score_confidence


@pytest.fixture
def parser():
    return LocalIntentParser()


class TestExampleScenarios:
    """Reference queries and their expected intents."""

    def test_best_n_for_part_number(self, parser):
        intent = parser.parse("find best 3 for RC0009")
        assert intent.part_numbers == ("RC0009",)
        assert intent.top_n == 3
        assert intent.search_keywords == ()
        assert intent.requested_quantity is None

    def test_cheapest_brand_category_in_stock(self, parser):
        intent = parser.parse("cheapest Bosch brake pads in stock")
        assert intent.parts_brands == ("BOSCH",)
        assert intent.categories == ("brake",)
        assert intent.sort_preference == SortPreference.PRICE_ASC
        assert intent.require_in_stock is True
        assert intent.vehicle_brand is None

    def test_units_part_number_price_fast_delivery(self, parser):
        intent = parser.parse("need 50 units of 06A115561B under $10 fast delivery")
        assert intent.part_numbers == ("06A115561B",)
        assert intent.requested_quantity == 50
        assert intent.max_price == 10
        assert intent.price_currency == Currency.USD
        assert intent.fast_delivery is True
        assert intent.top_n is None

    def test_top_n_vehicle_brand_category(self, parser):
        intent = parser.parse("top 5 Toyota filters")
        assert intent.vehicle_brand == "TOYOTA"
        assert intent.categories == ("filter",)
        assert intent.top_n == 5
        assert intent.parts_brands == ()

    def test_chinese_query_matches_english_equivalent(self, parser):
        chinese = parser.parse("在库便宜的刹车片")
        english = parser.parse("cheap in stock brake pads")

        assert chinese.detected_language == Language.ZH
        assert chinese.categories == ("brake",)
        assert chinese.max_price == 100
        assert chinese.require_in_stock is True
        for attr in ("categories", "max_price", "require_in_stock", "sort_preference", "search_keywords"):
            assert getattr(chinese, attr) == getattr(english, attr)


class TestPriceExtraction:

    def test_max_price(self, parser):
        assert parser.parse("brake pads under 500").max_price == 500

    def test_min_price(self, parser):
        intent = parser.parse("oil filter over 100")
        assert intent.min_price == 100
        assert intent.max_price is None

    def test_explicit_range(self, parser):
        intent = parser.parse("alternator between 200 and 400")
        assert (intent.min_price, intent.max_price) == (200, 400)

    def test_approximate_price_is_thirty_percent_band(self, parser):
        intent = parser.parse("radiator around 200")
        assert intent.min_price == pytest.approx(140)
        assert intent.max_price == pytest.approx(260)

    def test_thousands_multiplier(self, parser):
        assert parser.parse("alternator under 5k").max_price == 5000

    def test_symbol_sets_currency(self, parser):
        intent = parser.parse("bosch filter €50")
        assert intent.max_price == 50
        assert intent.price_currency == Currency.EUR

    def test_yen_is_jpy_for_english_queries(self, parser):
        intent = parser.parse("¥5000 brake pads")
        assert intent.max_price == 5000
        assert intent.price_currency == Currency.JPY

    def test_yen_is_cny_for_chinese_queries(self, parser):
        intent = parser.parse("¥5000刹车片")
        assert intent.max_price == 5000
        assert intent.price_currency == Currency.CNY

    def test_cheap_without_number(self, parser):
        intent = parser.parse("cheap spark plugs")
        assert intent.max_price == 100
        assert intent.sort_preference == SortPreference.PRICE_ASC

    def test_premium_without_number(self, parser):
        intent = parser.parse("premium brake discs")
        assert intent.min_price == 500
        assert intent.premium_quality is True

    def test_qualitative_words_never_override_numbers(self, parser):
        assert parser.parse("cheap brake pads under 300").max_price == 300

    def test_default_currency(self, parser):
        assert parser.parse("brake pads").price_currency == Currency.USD


class TestResultCountVersusQuantity:
    """topN (rows to show) and requestedQuantity (units needed) never mix."""

    def test_show_me_n_options(self, parser):
        intent = parser.parse("show me 10 options for oil filter")
        assert intent.top_n == 10
        assert intent.requested_quantity is None

    def test_qty_colon(self, parser):
        intent = parser.parse("qty: 20 brake pads")
        assert intent.requested_quantity == 20
        assert intent.top_n is None

    def test_both_in_one_query(self, parser):
        intent = parser.parse("top 3 suppliers need 50 units")
        assert intent.top_n == 3
        assert intent.requested_quantity == 50

    def test_x_quantity(self, parser):
        intent = parser.parse("brake pads x5")
        assert intent.requested_quantity == 5
        assert intent.vehicle_model is None

    def test_pcs_suffix_is_quantity_not_part_number(self, parser):
        intent = parser.parse("100pcs brake pads")
        assert intent.requested_quantity == 100
        assert intent.part_numbers == ()

    def test_bulk_defaults_to_hundred(self, parser):
        assert parser.parse("bulk oil filters").requested_quantity == 100

    def test_top_n_below_two_is_ignored(self, parser):
        assert parser.parse("best 1 filter").top_n is None

    def test_equal_values_keep_only_top_n(self, parser):
        intent = parser.parse("top 5 need 5 units")
        assert intent.top_n == 5
        assert intent.requested_quantity is None


class TestBrandsAndVehicles:

    def test_vehicle_and_parts_brand(self, parser):
        intent = parser.parse("toyota bosch brake pads")
        assert intent.vehicle_brand == "TOYOTA"
        assert intent.parts_brands == ("BOSCH",)

    def test_model_implies_make(self, parser):
        intent = parser.parse("corolla brake pads")
        assert intent.vehicle_model == "COROLLA"
        assert intent.vehicle_brand == "TOYOTA"

    def test_quantity_like_model_with_make(self, parser):
        intent = parser.parse("bmw x5 brake pads")
        assert intent.vehicle_model == "X5"
        assert intent.vehicle_brand == "BMW"
        assert intent.requested_quantity is None

    def test_typo_brand_is_recognized(self, parser):
        assert parser.parse("bosh filter").parts_brands == ("BOSCH",)

    @pytest.mark.parametrize("query", [
        "toyota toyota parts",
        "bosch bosch toyota",
        "mercedes benz bosch denso filters",
        "bmw x5 brembo brake discs without bmw",
    ])
    def test_brand_disjointness(self, parser, query):
        intent = parser.parse(query)
        assert intent.vehicle_brand not in intent.parts_brands
        assert not set(intent.parts_brands) & set(intent.exclude_brands)


class TestExclusionsAndOrigin:

    def test_excluded_brands(self, parser):
        intent = parser.parse("brake pads without bosch or valeo")
        assert intent.exclude_brands == ("BOSCH", "VALEO")
        assert intent.parts_brands == ()

    def test_excluded_brand_alias(self, parser):
        assert parser.parse("filters except mann").exclude_brands == ("MANN",)

    @pytest.mark.parametrize("query", [
        "brake pads except front",
        "brake pads excluding rear",
        "shock absorber except left side",
        "brake discs except used",
    ])
    def test_position_and_condition_words_are_not_brands(self, parser, query):
        intent = parser.parse(query)
        assert intent.exclude_brands == ()
        assert intent.parts_brands == ()

    def test_unlisted_maker_after_except(self, parser):
        assert parser.parse("oil filter except zorvex").exclude_brands == ("ZORVEX",)

    def test_excluded_origin(self, parser):
        intent = parser.parse("no chinese brake pads")
        assert intent.exclude_origins == ("CN",)
        assert intent.supplier_origin is None

    def test_supplier_origin(self, parser):
        assert parser.parse("brake pads made in germany").supplier_origin == "DE"


class TestDelivery:

    def test_within_days(self, parser):
        intent = parser.parse("oil filter within 3 days")
        assert intent.max_delivery_days == 3
        assert intent.max_price is None

    def test_weeks(self, parser):
        assert parser.parse("clutch kit within 2 weeks").max_delivery_days == 14

    def test_same_day(self, parser):
        intent = parser.parse("brake pads same day delivery")
        assert intent.max_delivery_days == 1
        assert intent.fast_delivery is True

    def test_fast_without_days(self, parser):
        intent = parser.parse("fast delivery oil filter")
        assert intent.fast_delivery is True
        assert intent.max_delivery_days is None


class TestPartNumbers:

    def test_separated_code_clears_keywords(self, parser):
        intent = parser.parse("90915-YZZD3 oil filter")
        assert intent.part_numbers == ("90915-YZZD3",)
        assert intent.search_keywords == ()
        assert intent.categories == ("filter",)

    def test_words_without_digits_are_not_codes(self, parser):
        assert parser.parse("brake caliper").part_numbers == ()


class TestSortPreference:

    def test_sort_by_criterion(self, parser):
        assert parser.parse("brake pads sort by delivery").sort_preference == SortPreference.DELIVERY_ASC

    def test_typo_tolerant_criterion(self, parser):
        assert parser.parse("sort by prcie").sort_preference == SortPreference.PRICE_ASC

    def test_composite_criteria(self, parser):
        intent = parser.parse("filters based on price and delivery")
        assert intent.sort_preference == SortPreference.PRICE_AND_DELIVERY

    def test_composite_superlatives(self, parser):
        intent = parser.parse("best price and fastest delivery")
        assert intent.sort_preference == SortPreference.PRICE_AND_DELIVERY
        assert intent.top_n is None

    def test_most_stock(self, parser):
        assert parser.parse("oil filter with most stock").sort_preference == SortPreference.QUANTITY_DESC


class TestFlagsAndVocabularies:

    def test_quality_flags(self, parser):
        intent = parser.parse("genuine brake pads with warranty from a certified supplier")
        assert intent.oem is True
        assert intent.require_warranty is True
        assert intent.certified_supplier is True
        assert intent.aftermarket is False

    def test_high_stock_implies_in_stock(self, parser):
        intent = parser.parse("brake pads with high stock")
        assert intent.require_high_stock is True
        assert intent.require_in_stock is True

    def test_condition(self, parser):
        assert parser.parse("used alternator").condition == Condition.USED

    def test_year_range_and_model(self, parser):
        intent = parser.parse("brake pads for corolla 2010-2015")
        assert (intent.vehicle_year_min, intent.vehicle_year_max) == (2010, 2015)
        assert intent.has_price_filter is False

    def test_bare_year(self, parser):
        intent = parser.parse("2018 camry")
        assert intent.vehicle_year == 2018
        assert intent.part_numbers == ()

    def test_open_ended_year(self, parser):
        intent = parser.parse("civic 2015+")
        assert intent.vehicle_year_min == 2015
        assert intent.min_price is None

    def test_small_vocabularies(self, parser):
        intent = parser.parse("diesel truck heavy duty")
        assert intent.fuel_type == "diesel"
        assert intent.vehicle_type == "truck"
        assert intent.application == "heavy-duty"


class TestKeywordsConfidenceSummary:

    def test_free_words_become_keywords(self, parser):
        assert parser.parse("hello world").search_keywords == ("hello", "world")

    def test_keyword_cap(self):
        intent = LocalIntentParser(max_keywords=3).parse("alpha beta gamma delta epsilon")
        assert intent.search_keywords == ("alpha", "beta", "gamma")

    def test_confidence_levels(self, parser):
        assert parser.parse("RC0009").confidence == Confidence.HIGH
        assert parser.parse("brake pads").confidence == Confidence.MEDIUM
        assert parser.parse("hello").confidence == Confidence.LOW

    def test_score_confidence_counts_signals(self):
        intent = ParsedIntent(vehicle_brand="TOYOTA", categories=("filter",), top_n=5)
        assert score_confidence(intent) == Confidence.HIGH

    def test_summary_built_from_fields(self, parser):
        summary = parser.parse("top 5 Toyota filters").summary
        assert "Categories: filter" in summary
        assert "Vehicle: TOYOTA" in summary
        assert "Top 5 results" in summary

    def test_summary_for_empty_intent(self):
        assert build_summary(ParsedIntent()) == "General parts search"


class TestTotality:
    """Any input yields a complete intent without raising."""

    @pytest.mark.parametrize("query", [
        "", "   ", "\n\t", "???", "$$$", "💥🔧", "x" * 2000,
        "тормозные колодки", "فحمات الفرامل", "ブレーキパッド 在庫", "브레이크 패드",
        "bosch 刹车片 под 500", "between and", "under", "top", "qty:", "1-2-3-4-5",
    ])
    def test_parse_never_raises(self, parser, query):
        intent = parser.parse(query)
        assert isinstance(intent, ParsedIntent)
        assert isinstance(intent.search_keywords, tuple)
        assert isinstance(intent.confidence, Confidence)
        assert intent.summary
        if intent.top_n is not None:
            assert intent.top_n != intent.requested_quantity

    def test_extraction_is_cached(self):
        parser = LocalIntentParser()
        parser.parse("brake pads")
        parser.parse("brake pads")
        assert parser.cache_info().hits == 1
