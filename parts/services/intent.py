"""
Parsed Intent Model
===================

The structured interpretation of a free-text parts query.

``ParsedIntent`` is frozen and always structurally complete: every field
exists with a default, so the filter pipeline can consume any instance
without checks. Rule families write into a mutable ``IntentDraft`` which
is frozen once parsing is done.

Wire format (``to_dict``) uses camelCase keys, e.g. ``searchKeywords``,
``partNumbers``, ``vehicleBrand``, ``topN``.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple


# =============================================================================
# Closed enums
# =============================================================================

class SortPreference(str, Enum):
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    QUANTITY_ASC = "quantity_asc"
    QUANTITY_DESC = "quantity_desc"
    STOCK_PRIORITY = "stock_priority"
    DELIVERY_ASC = "delivery_asc"
    WEIGHT_ASC = "weight_asc"
    QUALITY_DESC = "quality_desc"
    PRICE_AND_DELIVERY = "price_and_delivery"
    PRICE_AND_QTY = "price_and_qty"
    DELIVERY_AND_QTY = "delivery_and_qty"
    PRICE_AND_STOCK = "price_and_stock"

    @property
    def is_composite(self) -> bool:
        return "_and_" in self.value


class Confidence(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class Currency(str, Enum):
    USD = "USD"
    AED = "AED"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    CNY = "CNY"
    SAR = "SAR"
    INR = "INR"
    RUB = "RUB"
    KRW = "KRW"
    TRY = "TRY"
    PLN = "PLN"
    BRL = "BRL"


class Condition(str, Enum):
    NEW = "new"
    USED = "used"


class Language(str, Enum):
    EN = "en"
    DE = "de"
    FR = "fr"
    ES = "es"
    PT = "pt"
    IT = "it"
    NL = "nl"
    PL = "pl"
    TR = "tr"
    RU = "ru"
    AR = "ar"
    ZH = "zh"
    JA = "ja"
    KO = "ko"


def parse_enum(enum_cls, value):
    """Map a loose string (any case) onto ``enum_cls``; None when unknown."""
    if value is None:
        return None
    if isinstance(value, enum_cls):
        return value
    text = str(value).strip()
    for candidate in (text, text.lower(), text.upper()):
        try:
            return enum_cls(candidate)
        except ValueError:
            continue
    try:
        return enum_cls[text.upper()]
    except KeyError:
        return None


# =============================================================================
# ParsedIntent
# =============================================================================

# Python attribute -> wire key, in wire order
_WIRE_NAMES = {
    "search_keywords": "searchKeywords",
    "part_numbers": "partNumbers",
    "vehicle_brand": "vehicleBrand",
    "vehicle_model": "vehicleModel",
    "parts_brands": "partsBrands",
    "categories": "categories",
    "max_price": "maxPrice",
    "min_price": "minPrice",
    "price_currency": "priceCurrency",
    "require_in_stock": "requireInStock",
    "require_high_stock": "requireHighStock",
    "fast_delivery": "fastDelivery",
    "max_delivery_days": "maxDeliveryDays",
    "oem": "oem",
    "aftermarket": "aftermarket",
    "premium_quality": "premiumQuality",
    "require_warranty": "requireWarranty",
    "certified_supplier": "certifiedSupplier",
    "requested_quantity": "requestedQuantity",
    "top_n": "topN",
    "exclude_brands": "excludeBrands",
    "exclude_origins": "excludeOrigins",
    "supplier_origin": "supplierOrigin",
    "supplier_type": "supplierType",
    "compare_mode": "compareMode",
    "find_alternatives": "findAlternatives",
    "vehicle_year": "vehicleYear",
    "vehicle_year_min": "vehicleYearMin",
    "vehicle_year_max": "vehicleYearMax",
    "condition": "condition",
    "fuel_type": "fuelType",
    "vehicle_type": "vehicleType",
    "application": "application",
    "sort_preference": "sortPreference",
    "confidence": "confidence",
    "summary": "summary",
    "detected_language": "detectedLanguage",
    "original_query": "originalQuery",
}

SET_FIELDS = (
    "search_keywords", "part_numbers", "parts_brands", "categories",
    "exclude_brands", "exclude_origins",
)

FLAG_FIELDS = (
    "require_in_stock", "require_high_stock", "fast_delivery",
    "oem", "aftermarket", "premium_quality", "require_warranty",
    "certified_supplier", "compare_mode", "find_alternatives",
)


@dataclass(frozen=True)
class ParsedIntent:
    """Structured, immutable query intent. Every field is always present."""

    search_keywords: Tuple[str, ...] = ()
    part_numbers: Tuple[str, ...] = ()
    vehicle_brand: Optional[str] = None
    vehicle_model: Optional[str] = None
    parts_brands: Tuple[str, ...] = ()
    categories: Tuple[str, ...] = ()

    max_price: Optional[float] = None
    min_price: Optional[float] = None
    price_currency: Currency = Currency.USD

    require_in_stock: bool = False
    require_high_stock: bool = False
    fast_delivery: bool = False
    max_delivery_days: Optional[int] = None

    oem: bool = False
    aftermarket: bool = False
    premium_quality: bool = False
    require_warranty: bool = False
    certified_supplier: bool = False

    requested_quantity: Optional[int] = None
    top_n: Optional[int] = None

    exclude_brands: Tuple[str, ...] = ()
    exclude_origins: Tuple[str, ...] = ()
    supplier_origin: Optional[str] = None
    supplier_type: Optional[str] = None

    compare_mode: bool = False
    find_alternatives: bool = False

    vehicle_year: Optional[int] = None
    vehicle_year_min: Optional[int] = None
    vehicle_year_max: Optional[int] = None

    condition: Optional[Condition] = None
    fuel_type: Optional[str] = None
    vehicle_type: Optional[str] = None
    application: Optional[str] = None

    sort_preference: Optional[SortPreference] = None
    confidence: Confidence = Confidence.LOW
    summary: str = ""

    detected_language: Language = Language.EN
    original_query: str = ""

    @property
    def has_price_filter(self) -> bool:
        return self.min_price is not None or self.max_price is not None

    @property
    def has_vehicle_year(self) -> bool:
        return any(v is not None for v in (self.vehicle_year, self.vehicle_year_min, self.vehicle_year_max))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with camelCase keys; enums become their string values."""
        result = {}
        for attr, wire in _WIRE_NAMES.items():
            value = getattr(self, attr)
            if isinstance(value, Enum):
                value = value.value
            elif isinstance(value, tuple):
                value = list(value)
            result[wire] = value
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParsedIntent":
        """
        Build an intent from a loosely-typed camelCase payload (e.g. a
        language-model response). Unknown keys are ignored and values of
        the wrong type fall back to the field default.
        """
        wire_to_attr = {wire: attr for attr, wire in _WIRE_NAMES.items()}
        draft = IntentDraft()
        for key, value in (data or {}).items():
            attr = wire_to_attr.get(key, key if key in _WIRE_NAMES else None)
            if attr is None or value is None:
                continue
            if attr in SET_FIELDS:
                values = _as_str_list(value)
                if attr in ("part_numbers", "parts_brands", "exclude_brands", "exclude_origins"):
                    values = [v.upper() for v in values]
                elif attr in ("search_keywords", "categories"):
                    values = [v.lower() for v in values]
                getattr(draft, attr).extend(values)
            elif attr in FLAG_FIELDS:
                setattr(draft, attr, _as_bool(value))
            elif attr in ("max_price", "min_price"):
                amount = _as_float(value)
                setattr(draft, attr, amount if amount is not None and amount >= 0 else None)
            elif attr in ("max_delivery_days", "requested_quantity", "top_n",
                          "vehicle_year", "vehicle_year_min", "vehicle_year_max"):
                number = _as_int(value)
                setattr(draft, attr, number if number is not None and number >= 0 else None)
            elif attr == "price_currency":
                draft.price_currency = parse_enum(Currency, value) or Currency.USD
            elif attr == "condition":
                draft.condition = parse_enum(Condition, value)
            elif attr == "sort_preference":
                draft.sort_preference = parse_enum(SortPreference, value)
            elif attr == "confidence":
                draft.confidence = parse_enum(Confidence, value) or Confidence.LOW
            elif attr == "detected_language":
                draft.detected_language = parse_enum(Language, value) or Language.EN
            elif attr in ("vehicle_brand", "vehicle_model", "supplier_origin"):
                text = str(value).strip()
                setattr(draft, attr, text.upper() or None)
            elif attr in ("summary", "original_query"):
                setattr(draft, attr, str(value).strip())
            else:
                setattr(draft, attr, str(value).strip().lower() or None)
        if draft.requested_quantity is not None and draft.requested_quantity < 1:
            draft.requested_quantity = None
        if draft.top_n is not None and draft.top_n < 2:
            draft.top_n = None
        return draft.freeze()


# =============================================================================
# IntentDraft
# =============================================================================

def _fresh_lists():
    return field(default_factory=list)


@dataclass
class IntentDraft:
    """
    Mutable accumulator the rule families write into.

    Mirrors ``ParsedIntent`` with lists instead of tuples, plus the set of
    character spans already claimed by a rule so that later families do
    not reinterpret the same text (e.g. a price is never a part number).
    """

    search_keywords: List[str] = _fresh_lists()
    part_numbers: List[str] = _fresh_lists()
    vehicle_brand: Optional[str] = None
    vehicle_model: Optional[str] = None
    parts_brands: List[str] = _fresh_lists()
    categories: List[str] = _fresh_lists()
    max_price: Optional[float] = None
    min_price: Optional[float] = None
    price_currency: Currency = Currency.USD
    require_in_stock: bool = False
    require_high_stock: bool = False
    fast_delivery: bool = False
    max_delivery_days: Optional[int] = None
    oem: bool = False
    aftermarket: bool = False
    premium_quality: bool = False
    require_warranty: bool = False
    certified_supplier: bool = False
    requested_quantity: Optional[int] = None
    top_n: Optional[int] = None
    exclude_brands: List[str] = _fresh_lists()
    exclude_origins: List[str] = _fresh_lists()
    supplier_origin: Optional[str] = None
    supplier_type: Optional[str] = None
    compare_mode: bool = False
    find_alternatives: bool = False
    vehicle_year: Optional[int] = None
    vehicle_year_min: Optional[int] = None
    vehicle_year_max: Optional[int] = None
    condition: Optional[Condition] = None
    fuel_type: Optional[str] = None
    vehicle_type: Optional[str] = None
    application: Optional[str] = None
    sort_preference: Optional[SortPreference] = None
    confidence: Confidence = Confidence.LOW
    summary: str = ""
    detected_language: Language = Language.EN
    original_query: str = ""

    claimed: List[Tuple[int, int]] = _fresh_lists()

    def claim(self, start: int, end: int) -> None:
        self.claimed.append((start, end))

    def is_claimed(self, start: int, end: int) -> bool:
        return any(start < c_end and c_start < end for c_start, c_end in self.claimed)

    def freeze(self) -> ParsedIntent:
        """Produce the immutable intent, enforcing the cross-field invariants."""
        values = {}
        for f in fields(ParsedIntent):
            value = getattr(self, f.name)
            if f.name in SET_FIELDS:
                value = ordered_unique(value)
            values[f.name] = value

        if values["part_numbers"]:
            values["search_keywords"] = ()
        if values["require_high_stock"]:
            values["require_in_stock"] = True
        if values["vehicle_brand"]:
            values["parts_brands"] = tuple(b for b in values["parts_brands"] if b != values["vehicle_brand"])
        if values["exclude_brands"]:
            excluded = set(values["exclude_brands"])
            values["parts_brands"] = tuple(b for b in values["parts_brands"] if b not in excluded)
        if values["top_n"] is not None and values["top_n"] == values["requested_quantity"]:
            values["requested_quantity"] = None
        return ParsedIntent(**values)


# =============================================================================
# Helpers
# =============================================================================

def ordered_unique(items: Iterable[str]) -> Tuple[str, ...]:
    """De-duplicate while keeping first-seen order; drops empty strings."""
    seen = set()
    result = []
    for item in items:
        if item and item not in seen:
            seen.add(item)
            result.append(item)
    return tuple(result)


def _as_str_list(value) -> List[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple, set)):
        return []
    return [str(v).strip() for v in value if isinstance(v, (str, int, float)) and str(v).strip()]


def _as_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1")
    return bool(value)


def _as_float(value) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        number = float(str(value).replace(",", "").strip())
    except (TypeError, ValueError):
        return None
    # NaN and overflowed literals such as 1e999
    if number != number or number in (float("inf"), float("-inf")):
        return None
    return number


def _as_int(value) -> Optional[int]:
    number = _as_float(value)
    return int(number) if number is not None else None
