"""
Parts Search Orchestrator

Public entry points of the query-understanding engine.

Pipeline:
1. Normalize the raw query (language, dictionary translation, typos)
2. Local rule-based extraction
3. Optional language-model enhancement, bounded by its timeout
4. Local-first merge
5. Shape the merged intent for callers
6. Filter the caller's candidate records, with a trace

Nothing here raises to the caller: the worst outcome of an internal
failure is a less enriched intent.

Example:
    from parts.services import search_service

    result = search_service.search("bosch brake pads under $500 in stock", parts)
    result.to_dict()["message"]
    # "Found 3 parts (filtered by: price ≤ $500 USD (1835 AED), in stock, brands: BOSCH)"
"""

import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from core.services import BaseService

from .filter_pipeline import FilterPipeline, FilterResult, PartRecord
from .intent import Confidence, ParsedIntent
from .intent_enhancer import IntentEnhancer, merge_intents
from .normalizer import normalize
from .query_parser import LocalIntentParser, local_parser
from .result_shaper import ResultShaper, ShapedIntent


@dataclass(frozen=True)
class IntentAnalysis:
    """Merged intent plus how it was obtained."""
    intent: ParsedIntent
    local_intent: ParsedIntent
    parse_time_ms: float = 0.0
    enhance_time_ms: float = 0.0
    enhanced: bool = False


@dataclass(frozen=True)
class SearchResult:
    """Container for one search: intent, shaped contract and filtered parts."""
    intent: ParsedIntent
    shaped: ShapedIntent
    result: FilterResult
    stock_stats: Dict[str, int]
    message: str
    search_time_ms: float

    @property
    def parts(self) -> List[Dict[str, Any]]:
        return [dict(p) for p in self.result.matching]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "intent": self.intent.to_dict(),
            "shaped": self.shaped.to_dict(),
            "parts": self.parts,
            "trace": self.result.trace.to_dict(),
            "stockStats": self.stock_stats,
            "message": self.message,
            "meta": {
                "total_results": len(self.result.matching),
                "search_time_ms": self.search_time_ms,
            },
        }


class PartsSearchService(BaseService):
    """
    Runs the whole engine for one query.

    Args:
        parser: Local rule-based parser (default: shared ``local_parser``)
        enhancer: Language-model enhancer; None disables enhancement
        pipeline: Filter pipeline
        shaper: Result shaper
        skip_enhance_when_confident: Do not call the model when the local
            parse is already HIGH confidence
    """

    def __init__(
        self,
        parser: Optional[LocalIntentParser] = None,
        enhancer: Optional[IntentEnhancer] = None,
        pipeline: Optional[FilterPipeline] = None,
        shaper: Optional[ResultShaper] = None,
        skip_enhance_when_confident: bool = True,
    ):
        self.parser = parser or local_parser
        self.enhancer = enhancer
        self.pipeline = pipeline or FilterPipeline()
        self.shaper = shaper or ResultShaper(
            fast_delivery_days=self.pipeline.fast_delivery_days,
            high_stock_threshold=self.pipeline.high_stock_threshold,
        )
        self.skip_enhance_when_confident = skip_enhance_when_confident

    @classmethod
    def from_config(cls, app_config=None, learning_source=None) -> "PartsSearchService":
        if app_config is None:
            from partsform.config import get_config
            app_config = get_config()
        enhancer = None
        if app_config.llm.is_configured:
            enhancer = IntentEnhancer.from_config(app_config, learning_source=learning_source)
        return cls(
            parser=LocalIntentParser(max_keywords=app_config.search.max_keywords),
            enhancer=enhancer,
            pipeline=FilterPipeline.from_config(app_config),
            skip_enhance_when_confident=app_config.llm.skip_when_confident,
        )

    # ── Public API ──────────────────────────────────────────────

    def analyze(self, query: str) -> IntentAnalysis:
        """Normalize, parse locally, optionally enhance and merge."""
        start = time.perf_counter()
        normalized = normalize(query)
        local_intent = self.parser.extract(
            normalized.canonical, normalized.original, normalized.detected_language
        )
        parse_time_ms = self.elapsed_ms(start)

        if not self._should_enhance(normalized.canonical, local_intent):
            return IntentAnalysis(local_intent, local_intent, parse_time_ms=parse_time_ms)

        enhance_start = time.perf_counter()
        try:
            enhanced = self.enhancer.enhance(normalized.original, local_intent)
        except Exception as e:
            self.logger.warning(f"Enhancer raised, keeping local intent: {e}", exc_info=True)
            enhanced = None
        enhance_time_ms = self.elapsed_ms(enhance_start)
        if enhanced is None:
            return IntentAnalysis(
                local_intent, local_intent,
                parse_time_ms=parse_time_ms, enhance_time_ms=enhance_time_ms,
            )

        return IntentAnalysis(
            intent=merge_intents(local_intent, enhanced),
            local_intent=local_intent,
            parse_time_ms=parse_time_ms,
            enhance_time_ms=enhance_time_ms,
            enhanced=True,
        )

    def safe_analyze(self, query: str) -> IntentAnalysis:
        """``analyze`` that never raises; an internal failure yields an empty intent."""
        try:
            return self.analyze(query)
        except Exception as e:
            self.logger.error(f"Intent analysis failed for {str(query)[:80]!r}: {e}", exc_info=True)
            fallback = ParsedIntent(original_query=query if isinstance(query, str) else "")
            return IntentAnalysis(fallback, fallback)

    def parse_intent(self, query: str) -> ParsedIntent:
        """Merged intent for ``query``. Never raises."""
        return self.safe_analyze(query).intent

    def shape(self, query: str) -> ShapedIntent:
        analysis = self.safe_analyze(query)
        return self.shaper.shape(
            analysis.intent,
            parse_time_ms=analysis.parse_time_ms,
            enhance_time_ms=analysis.enhance_time_ms,
            enhanced=analysis.enhanced,
        )

    def filter(self, candidates: Optional[Sequence[PartRecord]], intent: ParsedIntent) -> FilterResult:
        return self.pipeline.run(candidates, intent)

    def search(self, query: str, candidates: Optional[Sequence[PartRecord]]) -> SearchResult:
        """
        Parse ``query`` and filter ``candidates`` with it.

        Returns:
            SearchResult with the intent, the shaped contract, the matching
            parts with their trace, stock statistics and a summary message
        """
        start = time.perf_counter()
        analysis = self.safe_analyze(query)
        shaped = self.shaper.shape(
            analysis.intent,
            parse_time_ms=analysis.parse_time_ms,
            enhance_time_ms=analysis.enhance_time_ms,
            enhanced=analysis.enhanced,
        )
        result = self.filter(candidates, analysis.intent)

        search_time_ms = self.elapsed_ms(start)
        self.logger.info(
            f"Search {str(query)[:60]!r}: {result.trace.total_received} → "
            f"{result.trace.matching} parts in {search_time_ms}ms "
            f"(confidence={analysis.intent.confidence.value}, enhanced={analysis.enhanced})"
        )
        return SearchResult(
            intent=analysis.intent,
            shaped=shaped,
            result=result,
            stock_stats=self.shaper.stock_stats(result.matching),
            message=self.shaper.build_message(len(result.matching), result.trace),
            search_time_ms=search_time_ms,
        )

    def get_status(self) -> dict:
        return {
            "parser_cache": self.parser.cache_info()._asdict(),
            "enhancer": self.enhancer.get_status() if self.enhancer else {"configured": False},
            "storage_currency": getattr(self.pipeline.storage_currency, "value", self.pipeline.storage_currency),
        }

    # ── Internals ───────────────────────────────────────────────

    def _should_enhance(self, canonical: str, local_intent: ParsedIntent) -> bool:
        if self.enhancer is None or not canonical:
            return False
        if self.skip_enhance_when_confident and local_intent.confidence is Confidence.HIGH:
            self.logger.debug("Local parse is HIGH confidence, enhancer skipped")
            return False
        return self.enhancer.is_available


# Singleton instance, local parsing only. Views build a configured one.
search_service = PartsSearchService()


def parse_intent(query: str) -> ParsedIntent:
    return search_service.parse_intent(query)


def filter_parts(candidates: Optional[Sequence[PartRecord]], intent: ParsedIntent) -> FilterResult:
    return search_service.filter(candidates, intent)
