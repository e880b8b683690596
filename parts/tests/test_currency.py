"""
Tests for price-threshold currency conversion

Run with: python -m pytest parts/tests/test_currency.py -v
"""

import pytest

from parts.services.currency import (
    EXCHANGE_RATES,
    as_currency,
    convert,
    describe_threshold,
    format_amount,
    to_storage,
)
from parts.services.intent import Currency


class TestConvert:

    def test_usd_to_aed(self):
        assert convert(100, Currency.USD, Currency.AED) == pytest.approx(367.0)

    def test_same_currency_is_identity(self):
        assert convert(42.5, "EUR", "eur") == 42.5

    def test_cross_rate_goes_through_usd(self):
        assert convert(92, Currency.EUR, Currency.GBP) == pytest.approx(79.0)

    def test_unknown_currency_falls_back_to_usd(self):
        assert as_currency("doubloons") == Currency.USD
        assert convert(10, "doubloons", Currency.AED) == pytest.approx(36.7)

    def test_to_storage_defaults_to_aed(self):
        assert to_storage(500, Currency.USD) == pytest.approx(1835.0)

    def test_to_storage_passes_none_through(self):
        assert to_storage(None, Currency.USD) is None

    def test_to_storage_custom_currency(self):
        assert to_storage(100, Currency.USD, storage_currency="EUR") == pytest.approx(92.0)

    @pytest.mark.parametrize("currency", list(EXCHANGE_RATES))
    def test_threshold_and_price_conversion_agree(self, currency):
        """Converting the threshold or converting the prices selects the same records."""
        stored_prices = [5.0, 48.0, 367.0, 1200.0, 9999.0, 250000.0]
        threshold = 250.0

        storage_threshold = to_storage(threshold, currency)
        by_threshold = [p for p in stored_prices if p <= storage_threshold]
        by_price = [p for p in stored_prices if convert(p, Currency.AED, currency) <= threshold]

        assert by_threshold == by_price


class TestFormatting:

    @pytest.mark.parametrize("amount, expected", [
        (500.0, "500"),
        (1835.004, "1835"),
        (12.5, "12.5"),
        (0.1 + 0.2, "0.3"),
    ])
    def test_format_amount(self, amount, expected):
        assert format_amount(amount) == expected

    def test_describe_threshold_shows_storage_amount(self):
        assert describe_threshold("≤", 500, Currency.USD) == "≤ $500 USD (1835 AED)"

    def test_describe_threshold_same_currency(self):
        assert describe_threshold("≥", 200, Currency.AED) == "≥ 200 AED"

    def test_describe_threshold_euro_symbol(self):
        assert describe_threshold("≤", 100, "EUR").startswith("≤ €100 EUR (")
