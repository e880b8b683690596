"""
Currency conversion for price filters.

Inventory prices are stored in a single storage currency (AED by default)
while buyers type prices in whatever currency they think in (USD by
default). Price thresholds are converted to the storage currency before
comparison; stored prices are never touched.

Rates are fixed and approximate (units per 1 USD). Live pricing is the
frontend's job.
"""

import logging
from typing import Optional, Union

from .intent import Currency, parse_enum

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_CURRENCY = Currency.AED

EXCHANGE_RATES = {
    Currency.USD: 1.0,
    Currency.AED: 3.67,   # 1 USD = 3.67 AED
    Currency.EUR: 0.92,
    Currency.GBP: 0.79,
    Currency.JPY: 149.5,
    Currency.CNY: 7.24,
    Currency.SAR: 3.75,
    Currency.INR: 83.1,
    Currency.RUB: 92.0,
    Currency.KRW: 1330.0,
    Currency.TRY: 32.0,
    Currency.PLN: 4.0,
    Currency.BRL: 5.0,
}

CURRENCY_SYMBOLS = {
    Currency.USD: "$",
    Currency.EUR: "€",
    Currency.GBP: "£",
    Currency.JPY: "¥",
    Currency.CNY: "¥",
    Currency.INR: "₹",
    Currency.RUB: "₽",
    Currency.KRW: "₩",
    Currency.TRY: "₺",
}

CurrencyLike = Union[Currency, str, None]


def as_currency(value: CurrencyLike, default: Currency = Currency.USD) -> Currency:
    return parse_enum(Currency, value) or default


def convert(amount: float, from_currency: CurrencyLike, to_currency: CurrencyLike) -> float:
    """
    Convert ``amount`` between currencies through USD. Unrounded, so that
    converting a threshold and converting the prices compare identically.
    """
    source = as_currency(from_currency)
    target = as_currency(to_currency)
    if source is target:
        return float(amount)
    return float(amount) / EXCHANGE_RATES[source] * EXCHANGE_RATES[target]


def to_storage(
    amount: Optional[float],
    currency: CurrencyLike,
    storage_currency: CurrencyLike = DEFAULT_STORAGE_CURRENCY,
) -> Optional[float]:
    if amount is None:
        return None
    return convert(amount, currency, as_currency(storage_currency, DEFAULT_STORAGE_CURRENCY))


def format_amount(amount: float) -> str:
    """500.0 -> '500', 1835.004 -> '1835', 12.5 -> '12.5'"""
    rounded = round(float(amount), 2)
    if rounded.is_integer():
        return str(int(rounded))
    return f"{rounded:.2f}".rstrip("0").rstrip(".")


def describe_threshold(
    operator: str,
    amount: float,
    currency: CurrencyLike,
    storage_currency: CurrencyLike = DEFAULT_STORAGE_CURRENCY,
) -> str:
    """
    Human-readable threshold, e.g. ``≤ $500 USD (1835 AED)``. The storage
    amount is only shown when the currencies differ.
    """
    source = as_currency(currency)
    storage = as_currency(storage_currency, DEFAULT_STORAGE_CURRENCY)
    symbol = CURRENCY_SYMBOLS.get(source, "")
    text = f"{operator} {symbol}{format_amount(amount)} {source.value}"
    if source is not storage:
        text += f" ({format_amount(convert(amount, source, storage))} {storage.value})"
    return text
