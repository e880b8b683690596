"""
Filter Pipeline

Deterministic, explainable narrowing of candidate part records by a
``ParsedIntent``. Code only, no model calls.

Stages (in order, each only when the intent asks for it):
1. keywords        - any keyword/category in description, category, code or tags
                     (skipped when part numbers are present)
2. vehicleBrand    - make found in brand / description / supplier
3. partsBrands     - bidirectional substring on the record brand
4. minPrice/maxPrice - thresholds converted to the storage currency
5. stock           - high stock (>= 10) supersedes in stock (> 0)
6. delivery        - explicit max days, else 5 for "fast delivery"
7. excludeBrands / excludeOrigins
8. supplierOrigin / condition
9. quantity        - only when requested quantity > 1 and no topN
10. topN           - trace marker only, truncation happens after ranking

Unknown values: a missing price passes a max filter and fails a min
filter, a missing delivery estimate passes, a missing brand fails an
active brand filter but passes an exclusion, missing stock / origin /
condition fail an active filter.

Candidates are never mutated; every stage returns a new list.
"""

import logging
import time
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from .currency import DEFAULT_STORAGE_CURRENCY, describe_threshold, to_storage
from .gazetteers import brand_match_terms
from .intent import ParsedIntent

logger = logging.getLogger(__name__)

PartRecord = Mapping[str, Any]

HIGH_STOCK_THRESHOLD = 10
FAST_DELIVERY_DAYS = 5

_TEXT_FIELDS = ("description", "category", "subcategory", "partNumber")


# =============================================================================
# RESULT TYPES
# =============================================================================

@dataclass(frozen=True)
class StageResult:
    """One applied stage: what it did and how many candidates survived."""
    name: str
    description: str
    before: int
    after: int

    @property
    def removed(self) -> int:
        return self.before - self.after

    def __str__(self) -> str:
        return f"{self.description} ({self.before} → {self.after})"


@dataclass(frozen=True)
class FilterTrace:
    """Ordered, read-only record of a pipeline run."""
    total_received: int = 0
    matching: int = 0
    filter_time_ms: float = 0.0
    stage_results: Tuple[StageResult, ...] = ()

    @property
    def excluded(self) -> int:
        return self.total_received - self.matching

    @property
    def stages(self) -> Mapping[str, str]:
        return MappingProxyType({stage.name: str(stage) for stage in self.stage_results})

    def description_of(self, name: str) -> Optional[str]:
        for stage in self.stage_results:
            if stage.name == name:
                return stage.description
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalReceived": self.total_received,
            "matching": self.matching,
            "excluded": self.excluded,
            "filterTimeMs": self.filter_time_ms,
            "stages": dict(self.stages),
        }


@dataclass(frozen=True)
class FilterResult:
    matching: Tuple[PartRecord, ...] = ()
    trace: FilterTrace = field(default_factory=FilterTrace)

    def to_dict(self) -> Dict[str, Any]:
        return {"matching": [dict(p) for p in self.matching], "trace": self.trace.to_dict()}


# =============================================================================
# FIELD READERS (never raise)
# =============================================================================

def as_number(value) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(str(value).replace(",", "").strip())
    except (TypeError, ValueError):
        return None
    if number != number or number in (float("inf"), float("-inf")):
        return None
    return number


def _text(record: PartRecord, key: str) -> str:
    value = record.get(key)
    if value is None:
        return ""
    return str(value).lower()


def _haystack(record: PartRecord) -> str:
    parts = [_text(record, key) for key in _TEXT_FIELDS]
    tags = record.get("tags")
    if isinstance(tags, (list, tuple, set)):
        parts.extend(str(t).lower() for t in tags if t is not None)
    elif tags:
        parts.append(str(tags).lower())
    return " ".join(p for p in parts if p)


# =============================================================================
# PIPELINE
# =============================================================================

class FilterPipeline:
    """
    Applies an intent to a candidate list.

    Args:
        storage_currency: Currency inventory prices are stored in (default: AED)
        high_stock_threshold: Units for "high stock" (default: 10)
        fast_delivery_days: Day limit for "fast delivery" without a number (default: 5)
    """

    def __init__(
        self,
        storage_currency=DEFAULT_STORAGE_CURRENCY,
        high_stock_threshold: int = HIGH_STOCK_THRESHOLD,
        fast_delivery_days: int = FAST_DELIVERY_DAYS,
    ):
        self.storage_currency = storage_currency
        self.high_stock_threshold = high_stock_threshold
        self.fast_delivery_days = fast_delivery_days

    @classmethod
    def from_config(cls, app_config=None) -> "FilterPipeline":
        if app_config is None:
            from partsform.config import get_config
            app_config = get_config()
        return cls(
            storage_currency=app_config.search.storage_currency,
            high_stock_threshold=app_config.search.high_stock_threshold,
            fast_delivery_days=app_config.search.fast_delivery_days,
        )

    def run(self, candidates: Optional[Sequence[PartRecord]], intent: ParsedIntent) -> FilterResult:
        """Filter ``candidates`` by ``intent``. Never raises."""
        start = time.perf_counter()
        records = [c for c in (candidates or []) if isinstance(c, Mapping)]
        total = len(records)
        if total == 0:
            return FilterResult()

        stages: List[StageResult] = []
        for name, description, predicate in self._plan(intent):
            before = len(records)
            try:
                records = [r for r in records if predicate(r)]
            except Exception as e:
                # A stage that cannot run leaves the candidates untouched
                logger.error(f"Filter stage {name} failed: {e}", exc_info=True)
            stages.append(StageResult(name, description, before, len(records)))

        if intent.top_n is not None:
            stages.append(StageResult("topN", f"top {intent.top_n} after ranking", len(records), len(records)))

        trace = FilterTrace(
            total_received=total,
            matching=len(records),
            filter_time_ms=round((time.perf_counter() - start) * 1000, 2),
            stage_results=tuple(stages),
        )
        logger.debug(f"Filtered {total} → {len(records)} parts in {trace.filter_time_ms}ms")
        return FilterResult(matching=tuple(records), trace=trace)

    # ── Stage plan ──────────────────────────────────────────────

    def _plan(self, intent: ParsedIntent) -> List[Tuple[str, str, Callable[[PartRecord], bool]]]:
        plan = []

        terms = [t.lower() for t in list(intent.search_keywords) + list(intent.categories) if t]
        if terms and not intent.part_numbers:
            plan.append(("keywords", ", ".join(terms), self._keyword_predicate(terms)))

        if intent.vehicle_brand:
            plan.append(("vehicleBrand", intent.vehicle_brand, self._vehicle_brand_predicate(intent.vehicle_brand)))

        if intent.parts_brands:
            plan.append((
                "partsBrands", ", ".join(intent.parts_brands),
                self._parts_brand_predicate(intent.parts_brands),
            ))

        if intent.min_price is not None:
            threshold = to_storage(intent.min_price, intent.price_currency, self.storage_currency)
            plan.append((
                "minPrice",
                describe_threshold("≥", intent.min_price, intent.price_currency, self.storage_currency),
                self._min_price_predicate(threshold),
            ))
        if intent.max_price is not None:
            threshold = to_storage(intent.max_price, intent.price_currency, self.storage_currency)
            plan.append((
                "maxPrice",
                describe_threshold("≤", intent.max_price, intent.price_currency, self.storage_currency),
                self._max_price_predicate(threshold),
            ))

        if intent.require_high_stock:
            plan.append((
                "stock", f"high stock ≥ {self.high_stock_threshold}",
                self._stock_predicate(self.high_stock_threshold),
            ))
        elif intent.require_in_stock:
            plan.append(("stock", "in stock", self._stock_predicate(1)))

        max_days = intent.max_delivery_days
        if max_days is None and intent.fast_delivery:
            max_days = self.fast_delivery_days
        if max_days is not None:
            plan.append(("delivery", f"≤ {max_days} days delivery", self._delivery_predicate(max_days)))

        if intent.exclude_brands:
            plan.append((
                "excludeBrands", "not " + ", ".join(intent.exclude_brands),
                self._exclude_brand_predicate(intent.exclude_brands),
            ))
        if intent.exclude_origins:
            excluded = frozenset(code.upper() for code in intent.exclude_origins)
            plan.append((
                "excludeOrigins", "not from " + ", ".join(intent.exclude_origins),
                lambda r: _text(r, "origin").upper() not in excluded,
            ))

        if intent.supplier_origin:
            origin = intent.supplier_origin.upper()
            plan.append(("supplierOrigin", f"from {origin}", lambda r: _text(r, "origin").upper() == origin))
        if intent.condition is not None:
            condition = intent.condition.value
            plan.append(("condition", condition, lambda r: _text(r, "condition") == condition))

        quantity = intent.requested_quantity
        if quantity is not None and quantity > 1 and intent.top_n is None:
            plan.append(("quantity", f"≥ {quantity} units", self._stock_predicate(quantity)))

        return plan

    # ── Predicates ──────────────────────────────────────────────

    @staticmethod
    def _keyword_predicate(terms: List[str]) -> Callable[[PartRecord], bool]:
        def matches(record: PartRecord) -> bool:
            haystack = _haystack(record)
            return any(term in haystack for term in terms)
        return matches

    @staticmethod
    def _vehicle_brand_predicate(brand: str) -> Callable[[PartRecord], bool]:
        terms = brand_match_terms(brand.upper())

        def matches(record: PartRecord) -> bool:
            text = " ".join((_text(record, "brand"), _text(record, "description"), _text(record, "supplier")))
            return any(term in text for term in terms)
        return matches

    @staticmethod
    def _parts_brand_predicate(brands: Sequence[str]) -> Callable[[PartRecord], bool]:
        wanted = [brand_match_terms(b.upper()) for b in brands]

        def matches(record: PartRecord) -> bool:
            record_brand = _text(record, "brand").strip()
            if not record_brand:
                return False
            for terms in wanted:
                for term in terms:
                    if term in record_brand:
                        return True
                    # Record brand may abbreviate the query brand ("mann" for "mann-filter")
                    if len(record_brand) >= 2 and record_brand in term:
                        return True
            return False
        return matches

    @staticmethod
    def _exclude_brand_predicate(brands: Sequence[str]) -> Callable[[PartRecord], bool]:
        unwanted = [term for b in brands for term in brand_match_terms(b.upper())]

        def keeps(record: PartRecord) -> bool:
            record_brand = _text(record, "brand").strip()
            if not record_brand:
                return True
            return not any(term in record_brand for term in unwanted)
        return keeps

    @staticmethod
    def _min_price_predicate(threshold: float) -> Callable[[PartRecord], bool]:
        def matches(record: PartRecord) -> bool:
            price = as_number(record.get("price"))
            return price is not None and price >= threshold
        return matches

    @staticmethod
    def _max_price_predicate(threshold: float) -> Callable[[PartRecord], bool]:
        def matches(record: PartRecord) -> bool:
            price = as_number(record.get("price"))
            return price is None or price <= threshold
        return matches

    @staticmethod
    def _stock_predicate(minimum: int) -> Callable[[PartRecord], bool]:
        def matches(record: PartRecord) -> bool:
            quantity = as_number(record.get("quantity"))
            return quantity is not None and quantity >= minimum
        return matches

    @staticmethod
    def _delivery_predicate(max_days: int) -> Callable[[PartRecord], bool]:
        def matches(record: PartRecord) -> bool:
            days = as_number(record.get("deliveryDays"))
            return days is None or days <= max_days
        return matches


# Singleton instance
filter_pipeline = FilterPipeline()
