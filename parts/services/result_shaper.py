"""
Result Shaper

Turns the merged ``ParsedIntent`` into the caller-facing contract
(filters / sort / limit / meta) and builds the summary pieces of a search
response: stock statistics and the "Found N parts (filtered by: ...)"
message.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .filter_pipeline import HIGH_STOCK_THRESHOLD, FilterTrace, as_number
from .intent import ParsedIntent, SortPreference

# preference -> ((field, order, weight), ...)
SORT_CRITERIA = {
    SortPreference.PRICE_ASC: (("price", "asc", 1.0),),
    SortPreference.PRICE_DESC: (("price", "desc", 1.0),),
    SortPreference.QUANTITY_ASC: (("quantity", "asc", 1.0),),
    SortPreference.QUANTITY_DESC: (("quantity", "desc", 1.0),),
    SortPreference.STOCK_PRIORITY: (("stock", "desc", 1.0),),
    SortPreference.DELIVERY_ASC: (("deliveryDays", "asc", 1.0),),
    SortPreference.WEIGHT_ASC: (("weight", "asc", 1.0),),
    SortPreference.QUALITY_DESC: (("quality", "desc", 1.0),),
    SortPreference.PRICE_AND_DELIVERY: (("price", "asc", 0.5), ("deliveryDays", "asc", 0.5)),
    SortPreference.PRICE_AND_QTY: (("price", "asc", 0.5), ("quantity", "desc", 0.5)),
    SortPreference.DELIVERY_AND_QTY: (("deliveryDays", "asc", 0.5), ("quantity", "desc", 0.5)),
    SortPreference.PRICE_AND_STOCK: (("price", "asc", 0.5), ("stock", "desc", 0.5)),
}

_QUALITY_FLAGS = (
    ("oem", "oem"),
    ("aftermarket", "aftermarket"),
    ("premium_quality", "premiumQuality"),
    ("require_warranty", "requireWarranty"),
    ("certified_supplier", "certifiedSupplier"),
)


@dataclass(frozen=True)
class ShapedIntent:
    """What a search caller (ranking, UI) consumes."""
    filters: Dict[str, Any] = field(default_factory=dict)
    sort: Optional[Dict[str, Any]] = None
    limit: Optional[int] = None
    requested_quantity: Optional[int] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filters": self.filters,
            "sort": self.sort,
            "limit": self.limit,
            "requestedQuantity": self.requested_quantity,
            "meta": self.meta,
        }


class ResultShaper:
    """Stateless; one shared instance is fine."""

    def __init__(self, fast_delivery_days: int = 5, high_stock_threshold: int = HIGH_STOCK_THRESHOLD):
        self.fast_delivery_days = fast_delivery_days
        self.high_stock_threshold = high_stock_threshold

    def shape(
        self,
        intent: ParsedIntent,
        parse_time_ms: float = 0.0,
        enhance_time_ms: float = 0.0,
        enhanced: bool = False,
    ) -> ShapedIntent:
        return ShapedIntent(
            filters=self.build_filters(intent),
            sort=self.build_sort(intent.sort_preference),
            limit=intent.top_n,
            requested_quantity=intent.requested_quantity,
            meta={
                "parseTimeMs": parse_time_ms,
                "enhanceTimeMs": enhance_time_ms,
                "enhanced": enhanced,
                "confidence": intent.confidence.value,
                "detectedLanguage": intent.detected_language.value,
                "summary": intent.summary,
            },
        )

    def build_filters(self, intent: ParsedIntent) -> Dict[str, Any]:
        """camelCase filter dict holding only populated values."""
        filters: Dict[str, Any] = {}

        if intent.part_numbers:
            filters["partNumbers"] = list(intent.part_numbers)
        if intent.search_keywords:
            filters["searchKeywords"] = list(intent.search_keywords)
        if intent.categories:
            filters["categories"] = list(intent.categories)
        if intent.vehicle_brand:
            filters["vehicleBrand"] = intent.vehicle_brand
        if intent.vehicle_model:
            filters["vehicleModel"] = intent.vehicle_model
        if intent.parts_brands:
            filters["brands"] = list(intent.parts_brands)

        if intent.has_price_filter:
            price = {"currency": intent.price_currency.value}
            if intent.min_price is not None:
                price["min"] = intent.min_price
            if intent.max_price is not None:
                price["max"] = intent.max_price
            filters["price"] = price

        if intent.require_high_stock:
            filters["stock"] = "high_stock"
        elif intent.require_in_stock:
            filters["stock"] = "in_stock"

        if intent.max_delivery_days is not None:
            filters["deliveryDays"] = intent.max_delivery_days
        elif intent.fast_delivery:
            filters["deliveryDays"] = self.fast_delivery_days
        if intent.fast_delivery:
            filters["fastDelivery"] = True

        for attr, key in _QUALITY_FLAGS:
            if getattr(intent, attr):
                filters[key] = True

        if intent.exclude_brands:
            filters["excludeBrands"] = list(intent.exclude_brands)
        if intent.exclude_origins:
            filters["excludeOrigins"] = list(intent.exclude_origins)
        if intent.supplier_origin:
            filters["supplierOrigin"] = intent.supplier_origin
        if intent.supplier_type:
            filters["supplierType"] = intent.supplier_type
        if intent.condition is not None:
            filters["condition"] = intent.condition.value

        if intent.vehicle_year is not None:
            filters["vehicleYear"] = intent.vehicle_year
        if intent.vehicle_year_min is not None or intent.vehicle_year_max is not None:
            filters["vehicleYearRange"] = {"min": intent.vehicle_year_min, "max": intent.vehicle_year_max}
        for attr, key in (("fuel_type", "fuelType"), ("vehicle_type", "vehicleType"), ("application", "application")):
            if getattr(intent, attr):
                filters[key] = getattr(intent, attr)

        if intent.compare_mode:
            filters["compareMode"] = True
        if intent.find_alternatives:
            filters["findAlternatives"] = True
        return filters

    @staticmethod
    def build_sort(preference: Optional[SortPreference]) -> Optional[Dict[str, Any]]:
        if preference is None:
            return None
        criteria = SORT_CRITERIA[preference]
        sort_by, sort_order, _ = criteria[0]
        result = {"preference": preference.value, "sortBy": sort_by, "sortOrder": sort_order}
        if preference.is_composite:
            result["criteria"] = [
                {"field": name, "order": order, "weight": weight} for name, order, weight in criteria
            ]
        return result

    def stock_stats(self, matching: Sequence[Dict[str, Any]]) -> Dict[str, int]:
        quantities = [as_number(p.get("quantity")) or 0 for p in matching]
        threshold = self.high_stock_threshold
        return {
            "highStock": sum(1 for q in quantities if q >= threshold),
            "inStock": sum(1 for q in quantities if q > 0),
            "lowStock": sum(1 for q in quantities if 0 < q < threshold),
            "outOfStock": sum(1 for q in quantities if q <= 0),
        }

    @staticmethod
    def build_message(count: int, trace: Optional[FilterTrace] = None) -> str:
        """``Found 12 parts (filtered by: price ≤ $500 USD (1835 AED), in stock, brands: BOSCH)``"""
        message = f"Found {count} parts"
        if trace is None:
            return message

        applied: List[str] = []
        for name, template in _MESSAGE_STAGES:
            description = trace.description_of(name)
            if description:
                applied.append(template.format(description))
        if applied:
            message += f" (filtered by: {', '.join(applied)})"
        return message


_MESSAGE_STAGES: Tuple[Tuple[str, str], ...] = (
    ("minPrice", "price {}"),
    ("maxPrice", "price {}"),
    ("stock", "{}"),
    ("partsBrands", "brands: {}"),
    ("vehicleBrand", "vehicle: {}"),
    ("delivery", "{}"),
    ("keywords", "keywords: {}"),
    ("excludeBrands", "{}"),
    ("excludeOrigins", "{}"),
    ("supplierOrigin", "{}"),
    ("condition", "condition: {}"),
    ("quantity", "{}"),
)


result_shaper = ResultShaper()
