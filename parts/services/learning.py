"""
Learning collaborator interface.

Learned preferences (effective keywords, synonyms, better phrasings of
failed queries) live in an external store. This module defines the read
side the enhancer consumes, plus two implementations: a no-op default and
an in-memory source used by tests and local development.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class LearnedContext:
    """What previous searches taught us about a query."""
    has_prior_learning: bool = False
    suggested_keywords: List[str] = field(default_factory=list)
    synonyms: Dict[str, List[str]] = field(default_factory=dict)
    better_alternative: Optional[str] = None
    hints: List[str] = field(default_factory=list)
    confidence: float = 0.0


class LearningSource(ABC):
    """Read-only view of the learned-preferences store."""

    @abstractmethod
    def get_learned_context(self, query: str) -> LearnedContext:
        ...

    def generate_learning_prompt(self, context: LearnedContext) -> str:
        return generate_learning_prompt(context)


class NullLearningSource(LearningSource):
    """Default source: nothing learned, ever."""

    def get_learned_context(self, query: str) -> LearnedContext:
        return LearnedContext()


class InMemoryLearningSource(LearningSource):
    """
    Dictionary-backed source.

    Args:
        patterns: word -> keywords that worked for it
        synonyms: word -> synonyms seen in refinements
        failures: normalized failed query -> the refinement that succeeded
    """

    def __init__(
        self,
        patterns: Optional[Dict[str, List[str]]] = None,
        synonyms: Optional[Dict[str, List[str]]] = None,
        failures: Optional[Dict[str, str]] = None,
    ):
        self.patterns = patterns or {}
        self.synonyms = synonyms or {}
        self.failures = failures or {}

    def get_learned_context(self, query: str) -> LearnedContext:
        normalized = (query or "").lower().strip()
        context = LearnedContext()

        if normalized in self.failures:
            context.better_alternative = self.failures[normalized]
            context.has_prior_learning = True
            context.hints.append(
                f'Previous searches for "{query}" worked better as "{context.better_alternative}"'
            )

        for word in normalized.split():
            if self.patterns.get(word):
                context.suggested_keywords.extend(self.patterns[word])
                context.has_prior_learning = True
            if self.synonyms.get(word):
                context.synonyms[word] = list(self.synonyms[word])
                context.has_prior_learning = True

        if context.has_prior_learning:
            context.confidence = 0.9 if context.better_alternative else 0.6
        return context


def generate_learning_prompt(context: Optional[LearnedContext]) -> str:
    """Prompt block appended to the enhancer prompt; empty when nothing was learned."""
    if context is None or not context.has_prior_learning:
        return ""

    lines = ["", "", "LEARNED CONTEXT FROM PREVIOUS SEARCHES:"]
    if context.better_alternative:
        lines.append(f'- IMPORTANT: Similar queries worked better as: "{context.better_alternative}"')
    if context.suggested_keywords:
        lines.append(f"- Effective keywords from past searches: {', '.join(context.suggested_keywords)}")
    if context.synonyms:
        lines.append("- Learned synonyms:")
        for word, synonyms in context.synonyms.items():
            lines.append(f'  "{word}" often means: {", ".join(synonyms[:3])}')
    if context.hints:
        lines.append("- Hints from past searches:")
        for hint in context.hints[:3]:
            lines.append(f"  • {hint}")
    lines.append("")
    lines.append("Use this learned context to better understand what the user wants.")
    return "\n".join(lines) + "\n"
