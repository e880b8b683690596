"""
Query cleanup for the parts-search views.

Buyers paste queries from spreadsheets, e-mails and chat apps in many
scripts. Before a query reaches the intent engine it is unescaped,
stripped of markup, control characters and invisible formatting marks,
whitespace-collapsed and truncated. Letters of any script are kept.
"""

import html
import re
from typing import Optional

MAX_QUERY_LENGTH = 500  # characters

_TAG_RE = re.compile(r"<[^>]+>")
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
# Zero-width and bidi marks that ride along with pasted Arabic / CJK text
_INVISIBLE_RE = re.compile(r"[\u200b-\u200f\u202a-\u202e\u2060-\u2064\ufeff]")
_WHITESPACE_RE = re.compile(r"\s+")
# A letter or digit in any script
_CONTENT_RE = re.compile(r"[^\W_]")


def sanitize_query(raw) -> str:
    """
    Clean a raw query string; anything that is not a string becomes "".

    The query is truncated to ``MAX_QUERY_LENGTH`` after cleanup, so an
    over-long query is shortened rather than rejected.
    """
    if not raw or not isinstance(raw, str):
        return ""

    q = html.unescape(raw)
    q = _TAG_RE.sub("", q)
    q = _CONTROL_RE.sub("", q)
    q = _INVISIBLE_RE.sub("", q)
    q = _WHITESPACE_RE.sub(" ", q).strip()
    return q[:MAX_QUERY_LENGTH]


def validate_query(query: str, param: str = "q") -> Optional[str]:
    """
    Check a sanitized query.

    Args:
        query: Output of ``sanitize_query``
        param: Request field the query came from, named in the error

    Returns:
        An error message, or None when the query is usable
    """
    if not query:
        return f"Missing required parameter '{param}' (search query)"
    if len(query) > MAX_QUERY_LENGTH:
        return f"'{param}' must be at most {MAX_QUERY_LENGTH} characters long"
    if not _CONTENT_RE.search(query):
        return f"'{param}' must contain at least one letter or digit (any script)"
    return None
