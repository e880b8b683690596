"""
Lenient JSON decoding for language-model output.

Models are asked for a bare JSON object but routinely wrap it in markdown
fences, prepend prose, or stop mid-object. Layered fallbacks:

1. Strict ``json.loads``
2. Same, after stripping code fences
3. First balanced ``{...}`` object in the text
4. Structural repair (trailing commas, unterminated string, unclosed brackets)
5. ``None``

Only JSON objects are returned; arrays and scalars count as failure.
"""

import json
import logging
import re
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json|JSON)?\s*(.*?)\s*```", re.DOTALL)
_OPEN_FENCE_RE = re.compile(r"^\s*```(?:json|JSON)?\s*")
_TRAILING_COMMA_RE = re.compile(r",\s*([}\]])")
# Object members that were cut off before their value
_DANGLING_KEY_RE = re.compile(r'(?:,\s*"[^"]*"\s*:?|(?<=\{)\s*"[^"]*"\s*:?|,|:)\s*$')
_DANGLING_COMMA_RE = re.compile(r",\s*$")


def _loads_object(text: str) -> Optional[Dict[str, Any]]:
    try:
        value = json.loads(text)
    except (TypeError, ValueError):
        return None
    return value if isinstance(value, dict) else None


def strip_fences(text: str) -> str:
    """Body of the first fenced block, or the text minus a dangling opening fence."""
    match = _FENCE_RE.search(text)
    if match:
        return match.group(1)
    return _OPEN_FENCE_RE.sub("", text).strip()


def extract_balanced_object(text: str) -> Optional[str]:
    """
    Return the first complete ``{...}`` span, respecting string literals
    and escapes. None when no object closes.
    """
    start = text.find("{")
    if start == -1:
        return None

    # Any later "{" sits inside this object, so one scan decides
    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        ch = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start:index + 1]
    return None


def repair_json(text: str) -> str:
    """
    Close whatever the text left open: an unterminated string, then the
    bracket stack in reverse order. Trailing commas are dropped.
    """
    start = text.find("{")
    if start == -1:
        return text
    text = text[start:]

    stack = []
    in_string = False
    escaped = False
    for ch in text:
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch in "{[":
            stack.append("}" if ch == "{" else "]")
        elif ch in "}]" and stack and stack[-1] == ch:
            stack.pop()

    repaired = text
    if in_string:
        repaired += '"'
    repaired = repaired.rstrip()
    # A dangling key or separator cannot be completed, drop it
    if stack and stack[-1] == "}":
        repaired = _DANGLING_KEY_RE.sub("", repaired)
    else:
        repaired = _DANGLING_COMMA_RE.sub("", repaired)
    repaired += "".join(reversed(stack))
    return _TRAILING_COMMA_RE.sub(r"\1", repaired)


def lenient_loads(text: Optional[str]) -> Optional[Dict[str, Any]]:
    """Best-effort decode of a JSON object out of free text. Never raises."""
    if not text or not isinstance(text, str):
        return None

    result = _loads_object(text)
    if result is not None:
        return result

    unfenced = strip_fences(text)
    result = _loads_object(unfenced)
    if result is not None:
        return result

    balanced = extract_balanced_object(unfenced)
    if balanced is not None:
        result = _loads_object(balanced) or _loads_object(_TRAILING_COMMA_RE.sub(r"\1", balanced))
        if result is not None:
            return result

    result = _loads_object(repair_json(unfenced))
    if result is not None:
        logger.debug("Recovered JSON object through structural repair")
        return result

    logger.debug(f"No JSON object recoverable from model output ({len(text)} chars)")
    return None
