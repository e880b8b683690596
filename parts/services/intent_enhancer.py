"""
Intent Enhancer

Optional recall booster on top of the local parser. The language model is
taught the same rule taxonomy as ``query_parser`` and asked for a JSON
intent; its answer is merged local-first, so the system behaves exactly
like the local parser whenever the model is slow, down or unconfigured.

Pipeline:
1. Short-circuit when the client has no credentials or the circuit is open
2. Build the prompt (taxonomy + local intent + learned context)
3. Run the call on a worker thread, wait at most ``timeout`` seconds
4. Lenient-decode the answer into a ``ParsedIntent``
5. ``merge_intents(local, enhanced)``

The loser of the timeout race is abandoned, not cancelled: the worker
finishes in the background and its result is dropped.
"""

import concurrent.futures
import json
import time
from dataclasses import fields, replace
from typing import Optional

from core.exceptions import LLMResponseError, LLMTimeoutError, PartsFormError
from core.services import BaseService

from .intent import (
    FLAG_FIELDS,
    SET_FIELDS,
    IntentDraft,
    ParsedIntent,
    SortPreference,
    ordered_unique,
)
from .learning import LearnedContext, LearningSource, NullLearningSource
from .lenient_json import lenient_loads
from .llm_client import LLMClient

DEFAULT_TIMEOUT_SECONDS = 12.0

# Scalars the enhancer may fill only when the local parser left them empty
FILLABLE_SCALARS = (
    "vehicle_brand", "vehicle_model", "max_delivery_days", "supplier_origin",
    "supplier_type", "vehicle_year", "vehicle_year_min", "vehicle_year_max",
    "condition", "fuel_type", "vehicle_type", "application", "sort_preference",
)


SYSTEM_PROMPT = (
    "You are an automotive and industrial spare-parts search assistant. "
    "You turn a buyer's free-text query into a JSON search intent. "
    "Reply with a single JSON object and nothing else."
)

TAXONOMY_PROMPT = """Extract the search intent of this parts query.

QUERY: "{query}"

RULES:
- partNumbers: any alphanumeric code with at least one digit and length >= 4 (e.g. RC0009, 06A115561B). Upper-case them.
- searchKeywords: only when there are NO part numbers; English part words, no filler.
- vehicleBrand: the car/truck MAKE the part is for (TOYOTA, BMW, ...). Never also list it in partsBrands.
- partsBrands: part MANUFACTURERS (BOSCH, VALEO, DENSO, ...).
- categories: short tags such as brake, filter, engine, suspension, electrical, cooling.
- minPrice / maxPrice / priceCurrency: "under 500" is maxPrice 500, "over 100" is minPrice 100,
  "around 200" is minPrice 140 and maxPrice 260. "cheap" alone is maxPrice 100, "premium" alone is minPrice 500.
- topN: how many RESULTS / suppliers / options to show ("best 3", "top 5", "show me 10 options"). Only values >= 2.
- requestedQuantity: how many UNITS the buyer needs ("need 50 units", "qty: 20", "x5"). Never the same number as topN.
- requireInStock / requireHighStock / fastDelivery / maxDeliveryDays
- oem / aftermarket / premiumQuality / requireWarranty / certifiedSupplier
- excludeBrands (brand names after without / except / no), excludeOrigins (ISO country codes)
- supplierOrigin (ISO country code), condition (new | used)
- vehicleModel, vehicleYear, vehicleYearMin, vehicleYearMax, fuelType, vehicleType, application, supplierType
- compareMode, findAlternatives
- sortPreference: one of {sort_values}
- confidence: HIGH | MEDIUM | LOW
- summary: one short sentence describing what the buyer wants.

The local rule-based parser already produced:
{local_intent}

Correct and complete it. Use the camelCase keys above; omit fields you cannot infer.{learning}
"""


class IntentEnhancer(BaseService):
    """
    Language-model intent enhancement with a hard time budget.

    Args:
        client: Injected ``LLMClient``; an unconfigured client disables enhancement
        timeout: Seconds to wait for the model before giving up (default: 12)
        learning_source: Read-only learned-preferences store
        max_workers: Size of the worker pool owned by this enhancer

    Includes a circuit breaker: after 3 consecutive failures the model is
    bypassed for 60 seconds.
    """

    MAX_CONSECUTIVE_FAILURES = 3
    CIRCUIT_COOLDOWN_SECONDS = 60

    def __init__(
        self,
        client: Optional[LLMClient] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        learning_source: Optional[LearningSource] = None,
        max_workers: int = 4,
    ):
        self.client = client or LLMClient()
        self.timeout = timeout
        self.learning_source = learning_source or NullLearningSource()
        self._executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="intent-enhancer"
        )
        self._consecutive_failures = 0
        self._circuit_open_until: Optional[float] = None

    @classmethod
    def from_config(cls, app_config=None, learning_source=None) -> "IntentEnhancer":
        if app_config is None:
            from partsform.config import get_config
            app_config = get_config()
        return cls(
            client=LLMClient.from_config(app_config.llm),
            timeout=app_config.llm.timeout,
            learning_source=learning_source,
            max_workers=app_config.llm.max_workers,
        )

    @property
    def is_available(self) -> bool:
        return self.client.is_configured and not self._is_circuit_open()

    # ── Public API ──────────────────────────────────────────────

    def enhance(
        self,
        query: str,
        local_intent: ParsedIntent,
        learned_context: Optional[LearnedContext] = None,
    ) -> Optional[ParsedIntent]:
        """
        Ask the language model for an intent. Never raises.

        Returns:
            The model's intent (not yet merged), or None on any failure
        """
        if not self.client.is_configured:
            return None
        if self._is_circuit_open():
            self.logger.debug("Enhancer circuit open, skipping")
            return None

        if learned_context is None:
            learned_context = self._learned_context(query)

        start = time.perf_counter()
        try:
            prompt = self.build_prompt(query, local_intent, learned_context)
            future = self._executor.submit(self.client.complete, prompt, SYSTEM_PROMPT)
            raw = future.result(timeout=self.timeout)
            enhanced = self._decode(raw, local_intent)
        except concurrent.futures.TimeoutError:
            self._on_failure(LLMTimeoutError(f"No answer within {self.timeout}s", timeout=self.timeout))
            return None
        except PartsFormError as e:
            self._on_failure(e)
            return None
        except Exception as e:
            self._on_failure(e)
            return None

        self._on_success()
        self.logger.info(f"Intent enhanced in {self.elapsed_ms(start)}ms for {query[:60]!r}")
        return enhanced

    def build_prompt(
        self,
        query: str,
        local_intent: ParsedIntent,
        learned_context: Optional[LearnedContext] = None,
    ) -> str:
        local = {k: v for k, v in local_intent.to_dict().items()
                 if v not in (None, [], False, "") and k not in ("originalQuery", "summary")}
        return TAXONOMY_PROMPT.format(
            query=query.replace('"', "'"),
            sort_values=", ".join(p.value for p in SortPreference),
            local_intent=json.dumps(local, ensure_ascii=False),
            learning=self._learning_prompt(learned_context),
        )

    def get_status(self) -> dict:
        return {
            "configured": self.client.is_configured,
            "model": self.client.model,
            "timeout": self.timeout,
            "circuit_open": self._is_circuit_open(),
            "consecutive_failures": self._consecutive_failures,
        }

    def close(self):
        """Release the worker pool without waiting for abandoned calls."""
        self._executor.shutdown(wait=False)

    # ── Internals ───────────────────────────────────────────────

    def _learned_context(self, query: str) -> Optional[LearnedContext]:
        try:
            return self.learning_source.get_learned_context(query)
        except Exception as e:
            self.logger.debug(f"Learned context unavailable: {e}")
            return None

    def _learning_prompt(self, learned_context: Optional[LearnedContext]) -> str:
        # A broken learning source costs the hints, not the model call
        try:
            return self.learning_source.generate_learning_prompt(learned_context) or ""
        except Exception as e:
            self.logger.warning(f"Learning prompt unavailable: {e}")
            return ""

    def _decode(self, raw: Optional[str], local_intent: ParsedIntent) -> ParsedIntent:
        """Model text → ParsedIntent; raises LLMResponseError when unusable."""
        data = lenient_loads(raw)
        if data is None:
            raise LLMResponseError("Model output held no JSON object", length=len(raw or ""))

        enhanced = ParsedIntent.from_dict(data)
        if "confidence" not in data:
            enhanced = replace(enhanced, confidence=local_intent.confidence)
        return replace(
            enhanced,
            detected_language=local_intent.detected_language,
            original_query=local_intent.original_query,
        )

    # ── Circuit breaker internals ───────────────────────────────

    def _is_circuit_open(self) -> bool:
        if self._circuit_open_until is None:
            return False
        if time.time() >= self._circuit_open_until:
            # Cooldown expired, try the model again
            self._circuit_open_until = None
            self._consecutive_failures = 0
            self.logger.info("Enhancer circuit breaker reset")
            return False
        return True

    def _on_success(self):
        self._consecutive_failures = 0

    def _on_failure(self, error: Exception):
        self._consecutive_failures += 1
        self.logger.warning(
            f"Intent enhancement failed ({self._consecutive_failures}/"
            f"{self.MAX_CONSECUTIVE_FAILURES}): {type(error).__name__}: {error}"
        )
        if self._consecutive_failures >= self.MAX_CONSECUTIVE_FAILURES:
            self._circuit_open_until = time.time() + self.CIRCUIT_COOLDOWN_SECONDS
            self.logger.warning(
                f"Enhancer circuit breaker OPEN for {self.CIRCUIT_COOLDOWN_SECONDS}s"
            )


# =============================================================================
# MERGE POLICY
# =============================================================================

def merge_intents(local: ParsedIntent, enhanced: Optional[ParsedIntent]) -> ParsedIntent:
    """
    Merge an enhancer intent into the local one, local-first.

    - set fields: union, local order first
    - price: enhancer pair only when local found no price at all
    - flags: logical OR
    - requested quantity: enhancer fills an empty local value
    - topN: enhancer fills an empty local value when >= 2; an equal quantity is cleared
    - other scalars: enhancer fills empty local values
    - summary: the longer one; confidence: the enhancer's
    """
    if enhanced is None:
        return local

    values = {f.name: getattr(local, f.name) for f in fields(ParsedIntent)}

    for name in SET_FIELDS:
        values[name] = list(ordered_unique(getattr(local, name) + getattr(enhanced, name)))

    if not local.has_price_filter and enhanced.has_price_filter:
        values["min_price"] = enhanced.min_price
        values["max_price"] = enhanced.max_price
        values["price_currency"] = enhanced.price_currency

    for name in FLAG_FIELDS:
        values[name] = getattr(local, name) or getattr(enhanced, name)

    if local.requested_quantity is None and enhanced.requested_quantity:
        values["requested_quantity"] = enhanced.requested_quantity
    if local.top_n is None and enhanced.top_n is not None and enhanced.top_n >= 2:
        values["top_n"] = enhanced.top_n

    for name in FILLABLE_SCALARS:
        if values[name] is None and getattr(enhanced, name) is not None:
            values[name] = getattr(enhanced, name)

    if len(enhanced.summary or "") > len(local.summary or ""):
        values["summary"] = enhanced.summary
    values["confidence"] = enhanced.confidence

    # freeze() re-applies brand disjointness, quantity/topN and keyword rules
    return IntentDraft(**values).freeze()
