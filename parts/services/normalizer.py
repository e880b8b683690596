"""
Lexical Normalizer

Rewrites a raw, possibly multilingual and typo-ridden parts query into a
canonical lowercase English-ish token stream before any intent rule runs.

Pipeline:
1. Unicode NFKC folding (full-width digits, compatibility forms) + lowercase
2. Language detection (Unicode blocks, then diacritics + stop words)
3. Dictionary substitution for non-English queries
4. Typo correction (all languages)
5. Whitespace collapse

Example:
    >>> normalize("Bremsbeläge günstig für Golf").canonical
    'brake pads cheap for golf'
"""

import logging
import re
import unicodedata
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .intent import Language
from .lexicon import DOMAIN_DICTIONARY, TYPO_CORRECTIONS

logger = logging.getLogger(__name__)


# =============================================================================
# LANGUAGE DETECTION
# =============================================================================

# Checked in order; kana must win over the shared CJK ideographs
_SCRIPT_RULES = [
    (Language.JA, re.compile(r"[\u3040-\u30ff]")),
    (Language.KO, re.compile(r"[\uac00-\ud7af\u1100-\u11ff\u3130-\u318f]")),
    (Language.ZH, re.compile(r"[\u4e00-\u9fff\u3400-\u4dbf]")),
    (Language.AR, re.compile(r"[\u0600-\u06ff\u0750-\u077f]")),
    (Language.RU, re.compile(r"[\u0400-\u04ff]")),
]

# Languages written without spaces between words
_UNSPACED = frozenset({Language.ZH, Language.JA, Language.KO})

_DIACRITICS = {
    Language.DE: "äöüß",
    Language.FR: "àâæçéèêëîïôœùûÿ",
    Language.ES: "áéíñóúü¿¡",
    Language.PT: "ãõâêôáéíóúàç",
    Language.IT: "àèéìòù",
    Language.PL: "ąćęłńóśźż",
    Language.TR: "çğıöşüİ",
}

_STOP_WORDS = {
    Language.EN: frozenset({
        "the", "for", "with", "and", "of", "in", "to", "me", "my", "is", "a", "an",
        "need", "want", "show", "find", "under", "best", "top",
    }),
    Language.DE: frozenset({
        "der", "die", "das", "und", "für", "mit", "ich", "nicht", "ein", "eine",
        "den", "dem", "zu", "von", "auf", "ist", "bitte",
    }),
    Language.FR: frozenset({
        "le", "la", "les", "des", "pour", "avec", "je", "une", "du", "et", "au",
        "aux", "est", "pas", "sur", "moins",
    }),
    Language.ES: frozenset({
        "el", "los", "las", "para", "con", "una", "del", "y", "que", "por", "es",
        "un", "al", "mi", "quiero",
    }),
    Language.PT: frozenset({
        "o", "os", "as", "para", "com", "uma", "do", "da", "não", "em", "um",
        "dos", "das", "eu", "quero",
    }),
    Language.IT: frozenset({
        "il", "gli", "per", "con", "una", "di", "che", "sono", "non", "lo", "della",
        "dei", "delle", "voglio",
    }),
    Language.NL: frozenset({
        "de", "het", "een", "voor", "met", "en", "ik", "niet", "van", "zijn", "wil",
        "graag",
    }),
    Language.PL: frozenset({
        "i", "w", "na", "dla", "z", "nie", "się", "jest", "do", "od", "chcę",
    }),
    Language.TR: frozenset({
        "ve", "için", "bir", "ile", "bu", "çok", "var", "mı", "mi", "istiyorum",
    }),
}

# Ties go to the language listed first
_LATIN_LANGUAGES = (
    Language.DE, Language.FR, Language.ES, Language.PT,
    Language.IT, Language.NL, Language.PL, Language.TR,
)

_WORD_RE = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)?")


def _build_substitutions() -> Dict[Language, Tuple[re.Pattern, Dict[str, str]]]:
    """One alternation per language, longest surface form first."""
    table = {}
    by_language: Dict[Language, Dict[str, str]] = {}
    for concept, forms_by_language in DOMAIN_DICTIONARY.items():
        for language, forms in forms_by_language.items():
            for form in forms:
                by_language.setdefault(language, {}).setdefault(form.lower(), concept)

    for language, forms in by_language.items():
        body = "|".join(re.escape(f) for f in sorted(forms, key=len, reverse=True))
        if language in _UNSPACED:
            pattern = re.compile(f"({body})")
        else:
            pattern = re.compile(rf"(?<!\w)({body})(?!\w)", re.IGNORECASE)
        table[language] = (pattern, forms)
    return table


_SUBSTITUTIONS = _build_substitutions()

_LATIN_DICTIONARY_WORDS = {
    language: frozenset(
        word for form in forms for word in form.split()
    )
    for language, (_, forms) in _SUBSTITUTIONS.items()
    if language in _LATIN_LANGUAGES
}

_TYPO_PATTERN = re.compile(
    r"(?<!\w)(" + "|".join(
        re.escape(t) for t in sorted(TYPO_CORRECTIONS, key=len, reverse=True)
    ) + r")(?!\w)",
    re.IGNORECASE,
)

_WHITESPACE_RE = re.compile(r"\s+")


# =============================================================================
# RESULT
# =============================================================================

@dataclass(frozen=True)
class NormalizedQuery:
    """Canonical form of a query plus what was detected along the way."""

    canonical: str
    original: str
    detected_language: Language = Language.EN

    def to_dict(self) -> dict:
        return {
            "canonical": self.canonical,
            "original": self.original,
            "detectedLanguage": self.detected_language.value,
        }


# =============================================================================
# PUBLIC API
# =============================================================================

def detect_language(text: str) -> Language:
    """
    Detect the query language.

    Non-Latin scripts are decided by Unicode block. Latin-script languages
    are scored (diacritic hit = 2, stop word or dictionary word = 1) and
    must beat both the English stop-word score and a minimum of 2.
    """
    for language, pattern in _SCRIPT_RULES:
        if pattern.search(text):
            return language

    lowered = text.lower()
    words = _WORD_RE.findall(lowered)
    if not words:
        return Language.EN

    english_score = sum(1 for w in words if w in _STOP_WORDS[Language.EN])
    best_language, best_score = Language.EN, 0
    for language in _LATIN_LANGUAGES:
        score = 2 * sum(1 for ch in lowered if ch in _DIACRITICS.get(language, ""))
        score += sum(1 for w in words if w in _STOP_WORDS[language])
        score += sum(1 for w in words if w in _LATIN_DICTIONARY_WORDS.get(language, ()))
        if score > best_score:
            best_language, best_score = language, score

    if best_score >= 2 and best_score > english_score:
        return best_language
    return Language.EN


def translate_terms(text: str, language: Language) -> str:
    """Replace every dictionary surface form of ``language`` with its English concept."""
    entry = _SUBSTITUTIONS.get(language)
    if entry is None:
        return text
    pattern, forms = entry

    if language in _UNSPACED:
        return pattern.sub(lambda m: f" {forms[m.group(1).lower()]} ", text)
    return pattern.sub(lambda m: forms[m.group(1).lower()], text)


def correct_typos(text: str) -> str:
    return _TYPO_PATTERN.sub(lambda m: TYPO_CORRECTIONS[m.group(1).lower()], text)


def normalize(raw_query: str) -> NormalizedQuery:
    """
    Normalize a raw query. Never raises; unknown input yields an empty
    English canonical form.
    """
    if raw_query is None:
        raw_query = ""
    elif not isinstance(raw_query, str):
        raw_query = str(raw_query)

    try:
        folded = unicodedata.normalize("NFKC", raw_query).lower()
        language = detect_language(folded)
        canonical = folded
        if language is not Language.EN:
            canonical = translate_terms(canonical, language)
        canonical = correct_typos(canonical)
        canonical = _WHITESPACE_RE.sub(" ", canonical).strip()
    except Exception as e:
        logger.warning(f"Normalization failed for {raw_query[:80]!r}: {e}")
        return NormalizedQuery(
            canonical=_WHITESPACE_RE.sub(" ", raw_query.lower()).strip(),
            original=raw_query,
        )

    if language is not Language.EN:
        logger.debug(f"Normalized [{language.value}] {raw_query!r} -> {canonical!r}")
    return NormalizedQuery(canonical=canonical, original=raw_query, detected_language=language)


def tokenize(text: str) -> List[str]:
    """Split a canonical query into word tokens (keeps hyphen/slash joined codes)."""
    return re.findall(r"[\w][\w\-/.]*[\w]|[\w]", text)
