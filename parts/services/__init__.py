# Services package
from .intent import (
    ParsedIntent,
    IntentDraft,
    SortPreference,
    Confidence,
    Currency,
    Condition,
    Language,
)
from .normalizer import normalize, NormalizedQuery
from .query_parser import local_parser, LocalIntentParser, extract_intent
from .intent_enhancer import IntentEnhancer, merge_intents
from .llm_client import LLMClient
from .learning import LearningSource, LearnedContext, NullLearningSource, InMemoryLearningSource
from .filter_pipeline import filter_pipeline, FilterPipeline, FilterResult, FilterTrace
from .result_shaper import result_shaper, ResultShaper, ShapedIntent
from .orchestrator import (
    search_service,
    PartsSearchService,
    SearchResult,
    IntentAnalysis,
    parse_intent,
    filter_parts,
)

__all__ = [
    # Intent model
    "ParsedIntent",
    "IntentDraft",
    "SortPreference",
    "Confidence",
    "Currency",
    "Condition",
    "Language",
    # Normalizer
    "normalize",
    "NormalizedQuery",
    # Local parser
    "local_parser",
    "LocalIntentParser",
    "extract_intent",
    # Enhancer
    "IntentEnhancer",
    "merge_intents",
    "LLMClient",
    "LearningSource",
    "LearnedContext",
    "NullLearningSource",
    "InMemoryLearningSource",
    # Filtering
    "filter_pipeline",
    "FilterPipeline",
    "FilterResult",
    "FilterTrace",
    # Shaping
    "result_shaper",
    "ResultShaper",
    "ShapedIntent",
    # Orchestrator
    "search_service",
    "PartsSearchService",
    "SearchResult",
    "IntentAnalysis",
    "parse_intent",
    "filter_parts",
]
