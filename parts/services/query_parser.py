"""
Local Intent Parser

Pure, deterministic rule engine turning a normalized parts query into a
fully-populated ``ParsedIntent``. No I/O, no network, never raises.

Architecture:
1. Contextual vehicle years ("2010-2015", "2018+", "before 2005")
2. Exclusions ("without bosch or valeo", "no chinese") resolved through the brand / origin tables
3. Brand disambiguation (vehicle makes vs parts manufacturers, never both)
4. Vehicle model (resolves the make when none was named)
5. Price (range, approximate ±30%, max, min, bare amounts) + currency scan
6. Result count (topN) and unit quantity (requestedQuantity), kept disjoint
7. Delivery days, bare vehicle year
8. Part numbers (any unclaimed token with a digit, length >= 4)
9. Categories (longest phrase first) with related-keyword expansion
10. Sort preference, stock / delivery / quality flags, qualitative price words
11. Origin, condition, fuel, vehicle type, application, supplier type
12. Keywords, confidence, summary

Every rule that matches claims its character span on the draft so that a
later family never reinterprets the same text (a price is never a part
number, an excluded brand is never a wanted brand).

Example:
    >>> parser = LocalIntentParser()
    >>> intent = parser.parse("top 5 Toyota filters")
    >>> intent.vehicle_brand, intent.categories, intent.top_n
    ('TOYOTA', ('filter',), 5)
"""

import logging
import re
from dataclasses import replace
from functools import lru_cache
from typing import List, Optional, Tuple

from .gazetteers import (
    APPLICATION_PATTERN, APPLICATIONS,
    CATEGORY_KEYWORDS, CATEGORY_PATTERN,
    FUEL_PATTERN, FUEL_TYPES,
    ORIGIN_ALIASES,
    PARTS_BRAND_ALIASES, PARTS_BRAND_PATTERN,
    SUPPLIER_TYPE_PATTERN, SUPPLIER_TYPES,
    VEHICLE_BRAND_ALIASES, VEHICLE_BRAND_PATTERN,
    VEHICLE_MODEL_PATTERN, VEHICLE_MODELS,
    VEHICLE_TYPE_PATTERN, VEHICLE_TYPES,
    alias_pattern,
    get_brand_canonical,
    get_category_tag,
    get_parts_brand_canonical,
    get_vehicle_brand_canonical,
)
from .intent import (
    Condition,
    Confidence,
    Currency,
    IntentDraft,
    Language,
    ParsedIntent,
    SortPreference,
)
from .normalizer import normalize

logger = logging.getLogger(__name__)

MAX_KEYWORDS = 10
TOP_N_RANGE = (2, 50)
MAX_QUANTITY = 100000
BULK_DEFAULT_QUANTITY = 100
APPROX_PRICE_BAND = 0.30

CHEAP_MAX_PRICE = 100.0
MID_RANGE_PRICE = (100.0, 500.0)
PREMIUM_MIN_PRICE = 500.0


# =============================================================================
# SHARED REGEX FRAGMENTS
# =============================================================================

CURRENCY_SYMBOLS = {
    "$": Currency.USD, "€": Currency.EUR, "£": Currency.GBP, "₹": Currency.INR,
    "₽": Currency.RUB, "₩": Currency.KRW, "₺": Currency.TRY,
    "¥": None,  # JPY or CNY, decided by language
}

CURRENCY_WORDS = {
    "usd": Currency.USD, "us$": Currency.USD, "dollar": Currency.USD,
    "dollars": Currency.USD, "bucks": Currency.USD,
    "aed": Currency.AED, "dhs": Currency.AED, "dirham": Currency.AED, "dirhams": Currency.AED,
    "eur": Currency.EUR, "euro": Currency.EUR, "euros": Currency.EUR,
    "gbp": Currency.GBP, "pound": Currency.GBP, "pounds": Currency.GBP, "quid": Currency.GBP,
    "jpy": Currency.JPY, "yen": Currency.JPY,
    "cny": Currency.CNY, "rmb": Currency.CNY, "yuan": Currency.CNY,
    "sar": Currency.SAR, "riyal": Currency.SAR, "riyals": Currency.SAR,
    "inr": Currency.INR, "rupee": Currency.INR, "rupees": Currency.INR,
    "rub": Currency.RUB, "ruble": Currency.RUB, "rubles": Currency.RUB,
    "rouble": Currency.RUB, "roubles": Currency.RUB,
    "krw": Currency.KRW, "won": Currency.KRW,
    "try": Currency.TRY, "lira": Currency.TRY,
    "pln": Currency.PLN, "zloty": Currency.PLN, "zł": Currency.PLN,
    "brl": Currency.BRL, "reais": Currency.BRL,
}

# Ordinary English words; only trusted right next to an amount
AMBIGUOUS_CURRENCY_WORDS = frozenset({"won", "try", "pound", "pounds", "rub", "sar", "dhs", "bucks"})

_SYM = "[" + re.escape("".join(CURRENCY_SYMBOLS)) + "]"
_CUR_WORD = "(?:" + "|".join(
    re.escape(w) for w in sorted(CURRENCY_WORDS, key=len, reverse=True)
) + ")"
_CUR = r"(?:" + _SYM + r"|\b" + _CUR_WORD + r"(?!\w))"
_PREFIX = r"(?:" + _CUR + r"\s*)?"
_SUFFIX = r"(?:\s*" + _CUR + r")?"

_UNITS = (
    r"(?:days?|d|business|working|weeks?|wks?|hours?|hrs?|h|units?|pcs|pc|pieces?|items?"
    r"|sets?|pairs?|nos|x|%|years?|yrs?|km|miles?|mi|kg|lbs?|mm|cm|ml|l|v|w)"
)
_RESULT_NOUNS = (
    r"(?:results?|options?|suppliers?|offers?|choices?|matches?|listings?|sellers?"
    r"|vendors?|quotes?|picks?|alternatives?|deals?)"
)
_NOT_UNIT = r"(?!\s*(?:" + _UNITS + "|" + _RESULT_NOUNS + r")(?!\w))"
_NOT_QTY_OR_MONEY = r"(?!\s*(?:" + _UNITS + "|" + _CUR_WORD + r")(?!\w))(?!\s*" + _SYM + ")"

_YEAR = r"(19[5-9]\d|20[0-4]\d)"
_NOT_MONEY = r"(?!\s*" + _CUR + r")(?!\s*(?:-|–|to)\s*\d)"

_WORD_NUMBERS = {"a": 1, "an": 1, "one": 1, "two": 2, "three": 3, "four": 4, "five": 5}


def _num(name: str) -> str:
    """Amount with thousands separators and an optional ``k`` multiplier."""
    return (
        rf"(?P<{name}>\d{{1,3}}(?:,\d{{3}})+(?:\.\d+)?|\d+(?:\.\d+)?)"
        rf"\s?(?P<{name}_k>k)?(?!\w)"
    )


def _amount(match: re.Match, name: str = "amount") -> Optional[float]:
    try:
        value = float(match.group(name).replace(",", ""))
    except (TypeError, ValueError):
        return None
    if match.group(f"{name}_k"):
        value *= 1000
    return value


def _fmt(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:.2f}"


# =============================================================================
# LOCAL INTENT PARSER
# =============================================================================

class LocalIntentParser:
    """
    Rule-based intent extraction over the canonical (normalized) query.

    Each rule family is an ordered list of compiled patterns (or
    ``(pattern, effect)`` pairs); inside a family the first match wins.
    """

    # ─── Vehicle years ───────────────────────────────────────────

    _YEAR_RANGE_PATTERN = re.compile(
        r"(?<![\w.])(?:between\s+|from\s+)?" + _YEAR + r"\s*(?:-|–|to|and|until)\s*" + _YEAR
        + r"(?![\w.])" + r"(?!\s*" + _CUR + ")"
    )
    _YEAR_MIN_PATTERNS = [
        re.compile(r"\b(?:from|since|after|newer\s+than|later\s+than)\s+" + _YEAR + r"(?!\w)" + _NOT_MONEY),
        re.compile(r"(?<![\w.])" + _YEAR + r"\s*(?:\+|and\s+(?:newer|later|up|above)|or\s+(?:newer|later)|onwards?)"),
    ]
    _YEAR_MAX_PATTERNS = [
        re.compile(r"\b(?:before|until|older\s+than|pre)[\s-]+" + _YEAR + r"(?!\w)" + _NOT_MONEY),
        re.compile(r"(?<![\w.])" + _YEAR + r"\s+(?:and|or)\s+(?:older|earlier|below)\b"),
    ]
    _BARE_YEAR_PATTERN = re.compile(r"(?<![\w.$€£¥])" + _YEAR + r"(?![\w.])" + r"(?!\s*" + _CUR + ")")

    # ─── Exclusions ──────────────────────────────────────────────

    _EXCLUSION_TRIGGER = re.compile(
        r"\b(except\s+for|except|exclud(?:e|ing)|avoid(?:ing)?|other\s+than|anything\s+but"
        r"|without|but\s+not|not\s+from|not|no|non)(?:\s+|-)(?:any\s+)?"
    )
    _STRONG_TRIGGERS = frozenset({
        "except", "except for", "exclude", "excluding", "avoid", "avoiding",
        "other than", "anything but",
    })
    _EXCLUSION_CONNECTORS = frozenset({
        "or", "and", "nor", ",", "from", "made", "in", "brand", "brands", "the", "any",
    })
    # Words that follow "except" / "excluding" without naming a maker
    _EXCLUSION_NON_BRANDS = frozenset({
        "front", "rear", "left", "right", "upper", "lower", "inner", "outer",
        "side", "driver", "passenger", "top", "bottom", "center", "centre",
        "new", "used", "refurbished", "genuine", "original", "oem", "aftermarket",
        "cheap", "expensive", "red", "black", "white", "small", "large",
    })
    _EXCLUSION_TOKEN = re.compile(r"[\w&.'-]+|,")

    # ─── Vehicle model ───────────────────────────────────────────

    _QUANTITY_LIKE_MODEL = re.compile(r"^x\d+$", re.IGNORECASE)

    # ─── Price ───────────────────────────────────────────────────

    _RANGE_PATTERNS = [
        re.compile(r"\bbetween\s+" + _PREFIX + _num("low") + _SUFFIX + r"\s*(?:and|to|-|–)\s*"
                   + _PREFIX + _num("high") + _NOT_UNIT + _SUFFIX),
        re.compile(r"\bfrom\s+" + _PREFIX + _num("low") + _SUFFIX + r"\s*(?:to|-|–|until)\s*"
                   + _PREFIX + _num("high") + _NOT_UNIT + _SUFFIX),
        re.compile(r"\bprice(?:\s+range)?\s*:?\s*" + _PREFIX + _num("low") + r"\s*(?:-|–|to)\s*"
                   + _PREFIX + _num("high") + _NOT_UNIT + _SUFFIX),
        re.compile(_SYM + r"\s*" + _num("low") + r"\s*(?:-|–|to)\s*" + _SYM + r"?\s*"
                   + _num("high") + _NOT_UNIT + _SUFFIX),
        re.compile(r"(?<![\w.-])" + _num("low") + r"\s*(?:-|–|to)\s*" + _num("high") + r"\s*" + _CUR),
    ]

    _APPROX_PATTERN = re.compile(
        r"(?:\b(?:around|about|approximately|approx\.?|roughly|circa|close\s+to)\s*|~\s*)"
        + _PREFIX + _num("amount") + _NOT_UNIT + _SUFFIX
    )

    _MAX_PRICE_PATTERNS = [
        re.compile(
            r"\b(?:under|below|less\s+than|cheaper\s+than|lower\s+than|up\s+to|upto|no\s+more\s+than"
            r"|not\s+more\s+than|not\s+over|at\s+most|max(?:imum)?(?:\s+price)?(?:\s+of)?"
            r"|budget(?:\s+is)?(?:\s+of)?|within(?:\s+a)?(?:\s+budget\s+of)?|price\s+limit(?:\s+of)?)"
            r"\s*:?\s*" + _PREFIX + _num("amount") + _NOT_UNIT + _SUFFIX
        ),
        re.compile(r"(?:<=?|≤)\s*" + _PREFIX + _num("amount") + _NOT_UNIT + _SUFFIX),
        re.compile(
            r"(?<![\w.])" + _PREFIX + _num("amount") + _NOT_UNIT + _SUFFIX
            + r"\s*(?:or\s+less|or\s+below|or\s+under|or\s+cheaper|and\s+under|and\s+below"
            r"|max(?:imum)?|at\s+most|tops)\b"
        ),
    ]

    _MIN_PRICE_PATTERNS = [
        re.compile(
            r"\b(?:over|above|more\s+than|greater\s+than|higher\s+than|at\s+least|no\s+less\s+than"
            r"|not\s+less\s+than|min(?:imum)?(?:\s+price)?(?:\s+of)?|starting\s+(?:at|from))"
            r"\s*:?\s*" + _PREFIX + _num("amount") + _NOT_UNIT + _SUFFIX
        ),
        re.compile(r"(?:>=?|≥)\s*" + _PREFIX + _num("amount") + _NOT_UNIT + _SUFFIX),
        re.compile(
            r"(?<![\w.])" + _PREFIX + _num("amount") + _SUFFIX
            + r"\s*(?:or\s+more|and\s+up|and\s+above|and\s+over|or\s+above|plus|\+)(?!\w)" + _NOT_UNIT
        ),
    ]

    _BARE_PRICE_PATTERNS = [
        re.compile(_SYM + r"\s*" + _num("amount") + _NOT_UNIT),
        re.compile(r"(?<![\w.])" + _num("amount") + r"\s*\b" + _CUR_WORD + r"(?!\w)"),
    ]

    _CURRENCY_NEAR_AMOUNT = re.compile(
        r"(" + _SYM + r"|\b" + _CUR_WORD + r")\s*\d|\d(?:[\d,.]*)\s?k?\s*(" + _SYM + r"|\b"
        + _CUR_WORD + r")(?!\w)"
    )
    _CURRENCY_ANYWHERE = re.compile(r"(" + _SYM + r")|\b(" + _CUR_WORD + r")(?!\w)")

    _CHEAP_PATTERN = re.compile(
        r"(?<!not )(?<!too )\b(?:cheap|budget|affordable|inexpensive|low[- ]cost|low[- ]priced?"
        r"|economy|economical|bargain)\b"
    )
    _MID_RANGE_PATTERN = re.compile(
        r"\b(?:mid[- ]?range|mid[- ]priced|moderately\s+priced|moderate\s+price|medium[- ]priced?"
        r"|reasonabl[ey]\s+priced|average\s+price)\b"
    )
    _EXPENSIVE_PATTERN = re.compile(
        r"(?<!most )(?<!least )(?<!not )(?<!too )\b(?:expensive|premium|high[- ]end|luxury"
        r"|top[- ]of[- ]the[- ]line|top[- ]end)\b"
    )

    # ─── Result count vs unit quantity ───────────────────────────

    _TOP_N_PATTERNS = [
        re.compile(r"\b(?:best|top)\s+(\d{1,3})(?!\w)" + _NOT_QTY_OR_MONEY),
        re.compile(
            r"\b(?:show(?:\s+me)?|get(?:\s+me)?|find(?:\s+me)?|give\s+me|list|display|return|compare)\s+"
            r"(?:the\s+)?(?:top\s+|best\s+|cheapest\s+|fastest\s+)?(\d{1,3})\s+(?:[\w-]+\s+){0,3}?"
            + _RESULT_NOUNS + r"\b"
        ),
        re.compile(
            r"\b(?:first|limit(?:ed)?\s+to|only\s+show|show\s+only|just\s+show|at\s+most"
            r"|max(?:imum)?(?:\s+of)?)\s+(\d{1,3})(?!\w)" + _NOT_QTY_OR_MONEY
        ),
        re.compile(
            r"(?<![\w.])(\d{1,3})\s+(?:best|top|cheapest|fastest|different|cheap)\s+(?:[\w-]+\s+){0,3}?"
            + _RESULT_NOUNS + r"\b"
        ),
        re.compile(r"(?<![\w.])(\d{1,3})\s+" + _RESULT_NOUNS + r"\b"),
    ]

    _QUANTITY_PATTERNS = [
        re.compile(
            r"\b(?:qty|quantity|moq|min(?:imum)?\s+order(?:\s+quantity)?)\s*(?:of|:|=|is)?\s*(\d{1,6})(?!\w)"
        ),
        re.compile(
            r"\b(?:need|want|order(?:ing)?|buy(?:ing)?|require|purchase|looking\s+for|get)\s+(\d{1,6})\s*"
            r"(?:x\s+)?(?:units?|pcs|pc|pieces?|items?|sets?|pairs?|nos|of)\b"
        ),
        re.compile(r"(?<![\w.])(\d{1,6})\s*(?:units?|pcs|pc|pieces?|items?|sets?|pairs?|nos)\b"),
        re.compile(r"(?<![\w.])x\s?(\d{1,6})(?!\w)"),
        re.compile(r"(?<![\w.])(\d{1,6})\s?x(?!\w)"),
    ]
    _BULK_PATTERN = re.compile(
        r"\b(?:in\s+bulk|bulk|wholesale|large\s+quantit(?:y|ies)|big\s+order|volume\s+order)\b"
    )

    # ─── Delivery ────────────────────────────────────────────────

    _DELIVERY_DAY_RULES = [
        (re.compile(
            r"\b(?:within|in|under|less\s+than|max(?:imum)?|up\s+to|no\s+more\s+than|at\s+most|by)\s+"
            r"(\d{1,3}|a|one|two|three|four|five)\s*(?:business\s+|working\s+)?(?:days?|d)\b"), 1),
        (re.compile(
            r"(?<![\w.])(\d{1,3})\s*-?\s*(?:business\s+|working\s+)?days?\s+"
            r"(?:delivery|shipping|ship|dispatch|lead\s+time|or\s+less|max(?:imum)?|within|or\s+sooner)\b"), 1),
        (re.compile(
            r"\b(?:delivery|deliver(?:ed)?|shipping|ship(?:ped)?|dispatch(?:ed)?|lead\s+time|eta|arrive)\s+"
            r"(?:time\s+)?(?:in|within|under|of|:)?\s*(?:less\s+than\s+|max\s+)?(\d{1,3})\s*"
            r"(?:business\s+|working\s+)?days?\b"), 1),
        (re.compile(
            r"\b(?:within|in|under|less\s+than|up\s+to)\s+(\d{1,2}|a|one|two|three|four)\s+weeks?\b"), 7),
        (re.compile(r"(?<![\w.])(\d{1,2})\s*-?\s*weeks?\s+(?:delivery|shipping|lead\s+time)\b"), 7),
    ]
    _DELIVERY_PHRASE_RULES = [
        (re.compile(r"\b(?:same[- ]day|today)\b"), 1),
        (re.compile(r"\b(?:next[- ]day|overnight|tomorrow|24\s*h(?:ours?|rs?)?)\b"), 1),
        (re.compile(r"\b(?:48\s*h(?:ours?|rs?)?|two[- ]day)\b"), 2),
        (re.compile(r"\bthis\s+week\b"), 7),
    ]

    # ─── Part numbers ────────────────────────────────────────────

    _PART_NUMBER_TOKEN = re.compile(r"(?<![a-z0-9])([a-z0-9]+(?:[-./][a-z0-9]+)*)(?![a-z0-9])")
    _UNIT_SUFFIXED = re.compile(
        r"^\d+(?:\.\d+)?(?:k|x|pcs|pc|units?|days?|d|h|hrs?|wks?|kg|mm|cm|km|ml|l|v|w|nm|st|nd|rd|th)$"
    )
    _PLAIN_DECIMAL = re.compile(r"^\d+\.\d+$")

    # ─── Sort preference ─────────────────────────────────────────

    _CRITERIA = [
        ("price", r"(?:prices?|pricing|pric|prcie|prce|prise|pirce|priec|costs?)"),
        ("delivery", r"(?:delivery\s+time|delivery|delivry|delivey|delivary|dilivery|delievery|deliverry"
                     r"|devlivery|delevery|delvery|deliver|shipping|lead\s+time|eta|speed)"),
        ("qty", r"(?:qty|quantity|quantities|units|volume)"),
        ("stock", r"(?:stock|availability|inventory)"),
        ("weight", r"(?:weight)"),
        ("quality", r"(?:quality|ratings?|reviews?)"),
    ]
    _CRITERION = "(" + "|".join(regex for _, regex in _CRITERIA) + ")"
    _CRITERION_LOOKUP = [(name, re.compile(regex + "$")) for name, regex in _CRITERIA]
    _SORT_LEAD = (
        r"\b(?:sort(?:ed)?\s+by|order(?:ed)?\s+by|rank(?:ed)?\s+by|based\s+on|by|prioriti[sz](?:e|ing)"
        r"|considering|focus\s+on|optimi[sz]e\s+for)\s+(?:the\s+)?(?:best\s+|lowest\s+|fastest\s+|most\s+)?"
    )
    _COMPOSITE_SORT_PATTERN = re.compile(
        _SORT_LEAD + _CRITERION + r"\s*(?:and|&|,|\+|then|plus|with)\s*(?:the\s+)?"
        r"(?:best\s+|lowest\s+|fastest\s+|most\s+)?" + _CRITERION + r"\b"
    )
    _SINGLE_SORT_PATTERN = re.compile(_SORT_LEAD + _CRITERION + r"\b")

    _CRITERION_SORT = {
        "price": SortPreference.PRICE_ASC,
        "delivery": SortPreference.DELIVERY_ASC,
        "qty": SortPreference.QUANTITY_DESC,
        "stock": SortPreference.STOCK_PRIORITY,
        "weight": SortPreference.WEIGHT_ASC,
        "quality": SortPreference.QUALITY_DESC,
    }
    _COMPOSITE_SORT = {
        frozenset({"price", "delivery"}): SortPreference.PRICE_AND_DELIVERY,
        frozenset({"price", "qty"}): SortPreference.PRICE_AND_QTY,
        frozenset({"price", "stock"}): SortPreference.PRICE_AND_STOCK,
        frozenset({"delivery", "qty"}): SortPreference.DELIVERY_AND_QTY,
        frozenset({"delivery", "stock"}): SortPreference.DELIVERY_AND_QTY,
    }

    _CHEAPEST = r"(?:cheapest|lowest\s+price[sd]?|best\s+price[sd]?|least\s+expensive|lowest\s+cost|most\s+affordable)"
    _FASTEST = r"(?:fastest|quickest|soonest|earliest)(?:\s+(?:delivery|shipping))?"
    _MOST_STOCK = r"(?:most|highest|largest|biggest)\s+(?:stock|availability|inventory|quantity|qty|units)"
    _JOIN = r"\s+(?:and|&|with|but|\+)\s+(?:the\s+)?"

    _SUPERLATIVE_COMPOSITE_RULES = [
        (re.compile(r"\b" + _CHEAPEST + _JOIN + _FASTEST + r"\b"), SortPreference.PRICE_AND_DELIVERY),
        (re.compile(r"\b" + _FASTEST + _JOIN + _CHEAPEST + r"\b"), SortPreference.PRICE_AND_DELIVERY),
        (re.compile(r"\b" + _CHEAPEST + _JOIN + _MOST_STOCK + r"\b"), SortPreference.PRICE_AND_STOCK),
        (re.compile(r"\b" + _MOST_STOCK + _JOIN + _CHEAPEST + r"\b"), SortPreference.PRICE_AND_STOCK),
        (re.compile(r"\b" + _FASTEST + _JOIN + _MOST_STOCK + r"\b"), SortPreference.DELIVERY_AND_QTY),
    ]
    _SUPERLATIVE_RULES = [
        (re.compile(r"\b(?:most\s+expensive|highest\s+price[sd]?|priciest|price\s+high\s+to\s+low"
                    r"|expensive\s+first)\b"), SortPreference.PRICE_DESC),
        (re.compile(r"\b" + _CHEAPEST + r"\b|\bprice\s+low\s+to\s+high\b|\bcheap(?:er|est)?\s+first\b"),
         SortPreference.PRICE_ASC),
        (re.compile(r"\b" + _FASTEST + r"\b"), SortPreference.DELIVERY_ASC),
        (re.compile(r"\b" + _MOST_STOCK + r"\b"), SortPreference.QUANTITY_DESC),
        (re.compile(r"\b(?:least|lowest|smallest)\s+(?:stock|quantity|qty)\b"), SortPreference.QUANTITY_ASC),
        (re.compile(r"\b(?:lightest|lowest\s+weight|least\s+weight)\b"), SortPreference.WEIGHT_ASC),
        (re.compile(r"\b(?:best|highest|top)[- ](?:quality|rated)\b"), SortPreference.QUALITY_DESC),
        (re.compile(r"\b(?:in[- ]stock|available)\s+(?:first|on\s+top)\b"
                    r"|\bprioriti[sz]e\s+(?:in[- ]stock|availability)\b"), SortPreference.STOCK_PRIORITY),
    ]

    # ─── Stock / delivery / quality flags ────────────────────────

    _HIGH_STOCK_PATTERN = re.compile(
        r"\b(?:(?:high|large|big|good|plenty\s+of|lots?\s+of|ample|sufficient|deep)\s+"
        r"(?:stock|inventory|availability)|well[- ]stocked|high[- ]stock|in\s+large\s+quantit(?:y|ies))\b"
    )
    _IN_STOCK_PATTERN = re.compile(
        r"\b(?:in[- ]stock|on\s+stock|available(?:\s+now)?|availability|on\s+hand|ready\s+to\s+ship"
        r"|ready\s+stock|ships?\s+(?:now|today|immediately)|stocked|in\s+inventory)\b"
    )

    _FLAG_RULES = [
        ("oem", re.compile(
            r"(?<!non-)(?<!non )(?<!not )\b(?:oem|oe|genuine|original(?:\s+equipment)?|factory\s+original"
            r"|authentic)\b")),
        ("aftermarket", re.compile(
            r"\b(?:aftermarket|after-market|non[- ]?oem|not\s+oem|generic|third[- ]party|replica"
            r"|imitation)\b")),
        ("premium_quality", re.compile(
            r"\b(?:premium|high[- ]quality|top[- ]quality|best\s+quality|highest\s+quality|superior\s+quality"
            r"|high[- ]grade|top[- ]grade|quality\s+parts?)\b")),
        ("require_warranty", re.compile(
            r"\b(?:warrant(?:y|ies|ied|eed)|guarantee[ds]?)\b")),
        ("certified_supplier", re.compile(
            r"\b(?:certified|verified|trusted|reputable|authori[sz]ed|approved|accredited|iso[\s-]?9001"
            r"|iatf[\s-]?16949)(?:\s+(?:suppliers?|sellers?|vendors?|dealers?|distributors?|sources?))?\b")),
        ("fast_delivery", re.compile(
            r"\b(?:fast|quick(?:ly)?|express|rapid|urgent(?:ly)?|asap|expedited?|speedy|same[- ]day"
            r"|next[- ]day|overnight|immediate(?:ly)?|rush|emergency)"
            r"(?:\s+(?:delivery|shipping|dispatch|shipment))?\b")),
        ("compare_mode", re.compile(
            r"\b(?:compare|comparison|comparing|versus|vs|side\s+by\s+side)\b")),
        ("find_alternatives", re.compile(
            r"\b(?:alternatives?|substitutes?|equivalents?|interchangeable|interchange|cross[- ]?ref(?:erence)?"
            r"|similar\s+(?:to|parts?)|replacements?\s+for|instead\s+of|other\s+options)\b")),
    ]

    # ─── Origin / condition ──────────────────────────────────────

    _ORIGIN_ALTERNATION = "|".join(
        re.escape(a) for a in sorted(ORIGIN_ALIASES, key=len, reverse=True)
    )
    _ORIGIN_CONTEXT_PATTERN = re.compile(
        r"\b(?:made\s+in|manufactured\s+in|produced\s+in|built\s+in|sourced\s+from|shipped\s+from"
        r"|originating\s+from|origin(?:\s+from|\s+in|:)?|(?:suppliers?|sellers?|vendors?)\s+(?:from|in)|from)"
        r"\s+(?:the\s+)?(" + _ORIGIN_ALTERNATION + r")(?![\w])"
    )
    _ORIGIN_ADJECTIVE_PATTERN = alias_pattern(
        a for a in ORIGIN_ALIASES if a.endswith(("an", "ese", "ish", "ch", "ai"))
    )

    _CONDITION_RULES = [
        (re.compile(r"\b(?:brand[- ]new|new\s+old\s+stock|unused|new)\b"), Condition.NEW),
        (re.compile(r"\b(?:used|second[- ]hand|pre[- ]owned|refurbished|remanufactured|reman|rebuilt"
                    r"|salvage[d]?|recycled|dismantled)\b"), Condition.USED),
    ]

    # ─── Keywords ────────────────────────────────────────────────

    NOISE_WORDS = frozenset({
        "a", "an", "the", "for", "of", "to", "in", "on", "at", "by", "with", "and", "or", "from",
        "me", "my", "i", "we", "us", "you", "your", "our", "is", "are", "be", "it", "its", "this",
        "that", "these", "those", "some", "any", "all", "please", "can", "could", "would", "will",
        "need", "needs", "want", "wants", "looking", "look", "find", "search", "show", "get", "give",
        "list", "buy", "purchase", "order", "require", "required", "best", "top", "good", "great",
        "part", "parts", "spare", "spares", "autoparts", "item", "items", "product", "products",
        "supplier", "suppliers", "seller", "sellers", "vendor", "vendors", "result", "results",
        "option", "options", "price", "prices", "cost", "quality", "stock", "delivery", "shipping",
        "days", "day", "units", "unit", "pcs", "piece", "pieces", "qty", "quantity", "only", "also",
        "just", "like", "than", "more", "less", "under", "over", "between", "around", "about",
        "within", "max", "min", "per", "each", "which", "what", "where", "who", "how", "do", "does",
        "have", "has", "fit", "fits", "fitting", "vehicle", "vehicles", "model", "year", "make",
        "brand", "brands", "type", "kind", "sort", "sorted", "based", "first", "then", "other",
        "cheap", "cheaper", "cheapest", "fast", "faster", "fastest", "available", "set", "new",
        "used", "want", "not", "no", "without", "except", "exclude", "currency", "offer", "offers",
        "deal", "deals", "compare", "alternative", "alternatives", "made", "s",
    } | set(CURRENCY_WORDS))

    _KEYWORD_TOKEN = re.compile(r"[\w][\w'-]*")

    def __init__(self, max_keywords: int = MAX_KEYWORDS, cache_size: int = 512):
        """
        Args:
            max_keywords: Cap on ``search_keywords`` (default: 10)
            cache_size: Number of recent extractions kept (LRU)
        """
        self.max_keywords = max_keywords
        self._cached_extract = lru_cache(maxsize=cache_size)(self._extract)

    # ─── Public API ──────────────────────────────────────────────

    def parse(self, raw_query: str) -> ParsedIntent:
        """Normalize ``raw_query`` and extract its intent."""
        normalized = normalize(raw_query)
        return self.extract(normalized.canonical, normalized.original, normalized.detected_language)

    def extract(
        self,
        canonical: str,
        original: str = "",
        detected_language: Language = Language.EN,
    ) -> ParsedIntent:
        """Extract the intent of an already-normalized query (cached)."""
        return self._cached_extract(canonical or "", original or "", detected_language)

    def cache_info(self):
        return self._cached_extract.cache_info()

    # ─── Core extraction ─────────────────────────────────────────

    def _extract(self, canonical: str, original: str, detected_language: Language) -> ParsedIntent:
        text = canonical.lower()
        draft = IntentDraft(detected_language=detected_language, original_query=original or canonical)

        try:
            self._extract_year_ranges(text, draft)
            self._extract_exclusions(text, draft)
            self._extract_brands(text, draft)
            self._extract_vehicle_model(text, draft)
            self._extract_price(text, draft)
            self._extract_currency(text, original, draft)
            self._extract_top_n(text, draft)
            self._extract_quantity(text, draft)
            self._extract_delivery_days(text, draft)
            self._extract_bare_year(text, draft)
            self._extract_part_numbers(text, draft)
            self._extract_categories(text, draft)
            self._extract_sort(text, draft)
            self._extract_flags(text, draft)
            self._extract_qualitative_price(text, draft)
            self._extract_origin(text, draft)
            self._extract_condition(text, draft)
            self._extract_vocabularies(text, draft)
            self._extract_keywords(text, draft)
        except Exception as e:
            # Rules are total over strings; keep whatever was extracted so far
            logger.error(f"Intent extraction failed for {canonical[:80]!r}: {e}", exc_info=True)

        intent = draft.freeze()
        intent = replace(intent, confidence=score_confidence(intent))
        return replace(intent, summary=build_summary(intent))

    # ─── Helpers ─────────────────────────────────────────────────

    @staticmethod
    def _find(pattern: re.Pattern, text: str, draft: IntentDraft) -> Optional[re.Match]:
        """First match of ``pattern`` not overlapping an already-claimed span."""
        for match in pattern.finditer(text):
            if not draft.is_claimed(*match.span()):
                return match
        return None

    # ─── Vehicle years ───────────────────────────────────────────

    def _extract_year_ranges(self, text: str, draft: IntentDraft):
        match = self._find(self._YEAR_RANGE_PATTERN, text, draft)
        if match:
            low, high = sorted((int(match.group(1)), int(match.group(2))))
            draft.vehicle_year_min, draft.vehicle_year_max = low, high
            draft.claim(*match.span())
            return

        for pattern in self._YEAR_MIN_PATTERNS:
            match = self._find(pattern, text, draft)
            if match:
                draft.vehicle_year_min = int(match.group(1))
                draft.claim(*match.span())
                break
        for pattern in self._YEAR_MAX_PATTERNS:
            match = self._find(pattern, text, draft)
            if match:
                draft.vehicle_year_max = int(match.group(1))
                draft.claim(*match.span())
                break

    def _extract_bare_year(self, text: str, draft: IntentDraft):
        if draft.vehicle_year_min or draft.vehicle_year_max:
            return
        match = self._find(self._BARE_YEAR_PATTERN, text, draft)
        if match:
            draft.vehicle_year = int(match.group(1))
            draft.claim(*match.span())

    # ─── Exclusions ──────────────────────────────────────────────

    def _extract_exclusions(self, text: str, draft: IntentDraft):
        for trigger in self._EXCLUSION_TRIGGER.finditer(text):
            if draft.is_claimed(*trigger.span()):
                continue
            trigger_word = re.sub(r"\s+", " ", trigger.group(1))
            strong = trigger_word in self._STRONG_TRIGGERS
            tokens = [
                (m.group(0), trigger.end() + m.start(), trigger.end() + m.end())
                for m in self._EXCLUSION_TOKEN.finditer(text[trigger.end():])
            ][:8]

            resolved_any = False
            i = 0
            while i < len(tokens):
                word, start, end = tokens[i]
                if word in self._EXCLUSION_CONNECTORS:
                    i += 1
                    continue
                resolved = None
                if i + 1 < len(tokens):
                    bigram = f"{word} {tokens[i + 1][0]}"
                    resolved = self._resolve_exclusion(bigram)
                    if resolved:
                        end = tokens[i + 1][2]
                        i += 1
                if not resolved:
                    resolved = self._resolve_exclusion(word)

                if resolved:
                    kind, code = resolved
                    target = draft.exclude_brands if kind == "brand" else draft.exclude_origins
                    target.append(code)
                    draft.claim(start, end)
                    resolved_any = True
                elif (
                    strong
                    and not resolved_any
                    and word.isalpha()
                    and word not in self.NOISE_WORDS
                    and word not in self._EXCLUSION_NON_BRANDS
                    and get_category_tag(word) is None
                ):
                    draft.exclude_brands.append(word.upper())
                    draft.claim(start, end)
                    resolved_any = True
                    break
                else:
                    break
                i += 1

            if resolved_any:
                draft.claim(*trigger.span())

    @staticmethod
    def _resolve_exclusion(phrase: str) -> Optional[Tuple[str, str]]:
        phrase = phrase.strip(".,'")
        brand = get_brand_canonical(phrase) if (
            phrase in VEHICLE_BRAND_ALIASES or phrase in PARTS_BRAND_ALIASES
        ) else None
        if brand:
            return "brand", brand
        origin = ORIGIN_ALIASES.get(phrase)
        if origin:
            return "origin", origin
        return None

    # ─── Brands / model ──────────────────────────────────────────

    def _extract_brands(self, text: str, draft: IntentDraft):
        for match in VEHICLE_BRAND_PATTERN.finditer(text):
            if draft.is_claimed(*match.span()):
                continue
            canonical = get_vehicle_brand_canonical(match.group(1))
            if canonical and draft.vehicle_brand is None:
                draft.vehicle_brand = canonical
            draft.claim(*match.span())

        for match in PARTS_BRAND_PATTERN.finditer(text):
            if draft.is_claimed(*match.span()):
                continue
            canonical = get_parts_brand_canonical(match.group(1))
            if canonical:
                draft.parts_brands.append(canonical)
            draft.claim(*match.span())

    def _extract_vehicle_model(self, text: str, draft: IntentDraft):
        for match in VEHICLE_MODEL_PATTERN.finditer(text):
            if draft.is_claimed(*match.span()):
                continue
            model, make = VEHICLE_MODELS[match.group(1).lower()]
            # "x5" reads as five units unless the make was named too
            if self._QUANTITY_LIKE_MODEL.match(match.group(1)) and draft.vehicle_brand != make:
                continue
            draft.vehicle_model = model
            if draft.vehicle_brand is None:
                draft.vehicle_brand = make
            draft.claim(*match.span())
            return

    # ─── Price ───────────────────────────────────────────────────

    def _extract_price(self, text: str, draft: IntentDraft):
        for pattern in self._RANGE_PATTERNS:
            match = self._find(pattern, text, draft)
            if match:
                low, high = _amount(match, "low"), _amount(match, "high")
                if low is not None and high is not None:
                    low, high = sorted((low, high))
                    draft.min_price, draft.max_price = low, high
                    draft.claim(*match.span())
                    return

        match = self._find(self._APPROX_PATTERN, text, draft)
        if match:
            center = _amount(match)
            if center is not None:
                draft.min_price = round(center * (1 - APPROX_PRICE_BAND), 2)
                draft.max_price = round(center * (1 + APPROX_PRICE_BAND), 2)
                draft.claim(*match.span())
                return

        for pattern in self._MAX_PRICE_PATTERNS:
            match = self._find(pattern, text, draft)
            if match:
                draft.max_price = _amount(match)
                draft.claim(*match.span())
                break

        for pattern in self._MIN_PRICE_PATTERNS:
            match = self._find(pattern, text, draft)
            if match:
                draft.min_price = _amount(match)
                draft.claim(*match.span())
                break

        if draft.min_price is None and draft.max_price is None:
            for pattern in self._BARE_PRICE_PATTERNS:
                match = self._find(pattern, text, draft)
                if match:
                    draft.max_price = _amount(match)
                    draft.claim(*match.span())
                    break

        if (
            draft.min_price is not None
            and draft.max_price is not None
            and draft.min_price > draft.max_price
        ):
            draft.min_price, draft.max_price = draft.max_price, draft.min_price

    def _extract_currency(self, text: str, original: str, draft: IntentDraft):
        """Currency next to an amount wins, then any symbol, then unambiguous words."""
        match = self._CURRENCY_NEAR_AMOUNT.search(text)
        if match:
            token = match.group(1) or match.group(2)
            draft.price_currency = self._currency_of(token, draft.detected_language)
            return

        for source in (text, original.lower()):
            for match in self._CURRENCY_ANYWHERE.finditer(source):
                symbol, word = match.group(1), match.group(2)
                if symbol:
                    draft.price_currency = self._currency_of(symbol, draft.detected_language)
                    return
                if word and word not in AMBIGUOUS_CURRENCY_WORDS:
                    draft.price_currency = CURRENCY_WORDS[word]
                    return

    @staticmethod
    def _currency_of(token: str, language: Language) -> Currency:
        token = token.lower()
        if token == "¥":
            return Currency.CNY if language is Language.ZH else Currency.JPY
        return CURRENCY_SYMBOLS.get(token) or CURRENCY_WORDS.get(token) or Currency.USD

    def _extract_qualitative_price(self, text: str, draft: IntentDraft):
        if draft.min_price is not None or draft.max_price is not None:
            return

        match = self._find(self._CHEAP_PATTERN, text, draft)
        if match:
            draft.max_price = CHEAP_MAX_PRICE
            if draft.sort_preference is None:
                draft.sort_preference = SortPreference.PRICE_ASC
            draft.claim(*match.span())
            return

        match = self._find(self._MID_RANGE_PATTERN, text, draft)
        if match:
            draft.min_price, draft.max_price = MID_RANGE_PRICE
            draft.claim(*match.span())
            return

        match = self._EXPENSIVE_PATTERN.search(text)
        if match:
            draft.min_price = PREMIUM_MIN_PRICE
            draft.claim(*match.span())

    # ─── Result count / quantity ─────────────────────────────────

    def _extract_top_n(self, text: str, draft: IntentDraft):
        low, high = TOP_N_RANGE
        for pattern in self._TOP_N_PATTERNS:
            # Only the number itself has to be free; the noun phrase may hold a brand
            match = next(
                (m for m in pattern.finditer(text) if not draft.is_claimed(*m.span(1))),
                None,
            )
            if match:
                value = int(match.group(1))
                if low <= value <= high:
                    draft.top_n = value
                    draft.claim(*match.span(1))
                return

    def _extract_quantity(self, text: str, draft: IntentDraft):
        for pattern in self._QUANTITY_PATTERNS:
            match = self._find(pattern, text, draft)
            if match:
                value = int(match.group(1))
                if 1 <= value <= MAX_QUANTITY:
                    draft.requested_quantity = value
                    draft.claim(*match.span())
                    return

        match = self._find(self._BULK_PATTERN, text, draft)
        if match:
            draft.requested_quantity = BULK_DEFAULT_QUANTITY
            draft.claim(*match.span())

    # ─── Delivery ────────────────────────────────────────────────

    def _extract_delivery_days(self, text: str, draft: IntentDraft):
        for pattern, multiplier in self._DELIVERY_DAY_RULES:
            match = self._find(pattern, text, draft)
            if match:
                raw = match.group(1)
                count = _WORD_NUMBERS.get(raw) or int(raw)
                days = count * multiplier
                if 1 <= days <= 365:
                    draft.max_delivery_days = days
                    draft.claim(*match.span())
                    return

        for pattern, days in self._DELIVERY_PHRASE_RULES:
            match = self._find(pattern, text, draft)
            if match:
                draft.max_delivery_days = days
                draft.fast_delivery = True
                draft.claim(*match.span())
                return

    # ─── Part numbers ────────────────────────────────────────────

    def _extract_part_numbers(self, text: str, draft: IntentDraft):
        for match in self._PART_NUMBER_TOKEN.finditer(text):
            token = match.group(1).strip(".")
            if len(token) < 4 or not any(ch.isdigit() for ch in token):
                continue
            if draft.is_claimed(*match.span()):
                continue
            if self._UNIT_SUFFIXED.match(token) or self._PLAIN_DECIMAL.match(token):
                continue
            draft.part_numbers.append(token.upper())
            draft.claim(*match.span())

    # ─── Categories ──────────────────────────────────────────────

    def _extract_categories(self, text: str, draft: IntentDraft):
        for match in CATEGORY_PATTERN.finditer(text):
            if draft.is_claimed(*match.span()):
                continue
            phrase = match.group(1).lower()
            tag = get_category_tag(phrase)
            if tag:
                draft.categories.append(tag)
                draft.search_keywords.append(phrase)
            draft.claim(*match.span())

    # ─── Sort preference ─────────────────────────────────────────

    def _criterion(self, phrase: str) -> Optional[str]:
        phrase = re.sub(r"\s+", " ", phrase.strip())
        for name, pattern in self._CRITERION_LOOKUP:
            if pattern.match(phrase):
                return name
        return None

    def _extract_sort(self, text: str, draft: IntentDraft):
        match = self._find(self._COMPOSITE_SORT_PATTERN, text, draft)
        if match:
            pair = frozenset({self._criterion(match.group(1)), self._criterion(match.group(2))})
            preference = self._COMPOSITE_SORT.get(pair)
            if preference is None:
                preference = self._CRITERION_SORT.get(self._criterion(match.group(1)))
            if preference:
                draft.sort_preference = preference
                draft.claim(*match.span())
                return

        for rules in (self._SUPERLATIVE_COMPOSITE_RULES, self._SUPERLATIVE_RULES):
            for pattern, preference in rules:
                match = self._find(pattern, text, draft)
                if match:
                    draft.sort_preference = preference
                    draft.claim(*match.span())
                    return

        match = self._find(self._SINGLE_SORT_PATTERN, text, draft)
        if match:
            preference = self._CRITERION_SORT.get(self._criterion(match.group(1)))
            if preference:
                draft.sort_preference = preference
                draft.claim(*match.span())

    # ─── Flags ───────────────────────────────────────────────────

    def _extract_flags(self, text: str, draft: IntentDraft):
        match = self._HIGH_STOCK_PATTERN.search(text)
        if match:
            draft.require_high_stock = True
            draft.require_in_stock = True
            draft.claim(*match.span())
        match = self._find(self._IN_STOCK_PATTERN, text, draft)
        if match:
            draft.require_in_stock = True
            draft.claim(*match.span())

        for attr, pattern in self._FLAG_RULES:
            match = pattern.search(text)
            if match:
                setattr(draft, attr, True)
                draft.claim(*match.span())

    # ─── Origin / condition / vocabularies ───────────────────────

    def _extract_origin(self, text: str, draft: IntentDraft):
        match = self._find(self._ORIGIN_CONTEXT_PATTERN, text, draft)
        if match is None:
            match = self._find(self._ORIGIN_ADJECTIVE_PATTERN, text, draft)
        if match:
            code = ORIGIN_ALIASES.get(match.group(1).lower())
            if code and code not in draft.exclude_origins:
                draft.supplier_origin = code
                draft.claim(*match.span())

    def _extract_condition(self, text: str, draft: IntentDraft):
        for pattern, condition in self._CONDITION_RULES:
            match = self._find(pattern, text, draft)
            if match:
                draft.condition = condition
                draft.claim(*match.span())
                return

    def _extract_vocabularies(self, text: str, draft: IntentDraft):
        for attr, pattern, table in (
            ("fuel_type", FUEL_PATTERN, FUEL_TYPES),
            ("vehicle_type", VEHICLE_TYPE_PATTERN, VEHICLE_TYPES),
            ("application", APPLICATION_PATTERN, APPLICATIONS),
            ("supplier_type", SUPPLIER_TYPE_PATTERN, SUPPLIER_TYPES),
        ):
            match = self._find(pattern, text, draft)
            if match:
                setattr(draft, attr, table[match.group(1).lower()])
                draft.claim(*match.span())

    # ─── Keywords ────────────────────────────────────────────────

    def _extract_keywords(self, text: str, draft: IntentDraft):
        """Content words left after every claimed span and noise word is removed."""
        masked = list(text)
        for start, end in draft.claimed:
            masked[start:end] = " " * (end - start)
        remaining = "".join(masked)

        words: List[str] = []
        for token in self._KEYWORD_TOKEN.findall(remaining):
            token = token.strip("'-")
            if (
                len(token) < 2
                or not token.isascii()
                or token.isdigit()
                or token in self.NOISE_WORDS
            ):
                continue
            words.append(token)

        expansions = [kw for tag in draft.categories for kw in CATEGORY_KEYWORDS.get(tag, ())]
        keywords = draft.search_keywords + words + expansions

        seen = set()
        unique = []
        for keyword in keywords:
            if keyword not in seen:
                seen.add(keyword)
                unique.append(keyword)
        draft.search_keywords = unique[: self.max_keywords]


# =============================================================================
# CONFIDENCE & SUMMARY
# =============================================================================

def structured_signals(intent: ParsedIntent) -> int:
    """Number of structured (non-keyword) signals the intent carries."""
    signals = [
        intent.part_numbers,
        intent.vehicle_brand,
        intent.vehicle_model,
        intent.parts_brands,
        intent.categories,
        intent.has_price_filter,
        intent.require_in_stock,
        intent.fast_delivery or intent.max_delivery_days is not None,
        intent.oem or intent.aftermarket or intent.premium_quality,
        intent.require_warranty or intent.certified_supplier,
        intent.requested_quantity is not None,
        intent.top_n is not None,
        intent.sort_preference is not None,
        intent.exclude_brands or intent.exclude_origins,
        intent.supplier_origin,
        intent.condition is not None,
        intent.has_vehicle_year,
    ]
    return sum(1 for signal in signals if signal)


def score_confidence(intent: ParsedIntent) -> Confidence:
    if intent.part_numbers:
        return Confidence.HIGH
    signals = structured_signals(intent)
    if signals >= 3:
        return Confidence.HIGH
    if signals >= 1:
        return Confidence.MEDIUM
    return Confidence.LOW


def build_summary(intent: ParsedIntent) -> str:
    """
    Human-readable summary assembled only from populated fields, in a
    fixed clause order. Never looks at the query text.
    """
    clauses = []

    if intent.part_numbers:
        clauses.append(f"Part numbers: {', '.join(intent.part_numbers)}")
    if intent.categories:
        clauses.append(f"Categories: {', '.join(intent.categories)}")
    elif intent.search_keywords:
        clauses.append(f"Search: {' '.join(intent.search_keywords[:3])}")

    vehicle = " ".join(
        str(v) for v in (intent.vehicle_brand, intent.vehicle_model, intent.vehicle_year) if v
    )
    if intent.vehicle_year_min or intent.vehicle_year_max:
        years = f"{intent.vehicle_year_min or ''}-{intent.vehicle_year_max or ''}"
        vehicle = f"{vehicle} {years}".strip()
    if vehicle:
        clauses.append(f"Vehicle: {vehicle}")
    if intent.parts_brands:
        clauses.append(f"Brands: {', '.join(intent.parts_brands)}")

    currency = intent.price_currency.value
    if intent.min_price is not None and intent.max_price is not None:
        clauses.append(f"Price: {_fmt(intent.min_price)}-{_fmt(intent.max_price)} {currency}")
    elif intent.max_price is not None:
        clauses.append(f"Price: ≤ {_fmt(intent.max_price)} {currency}")
    elif intent.min_price is not None:
        clauses.append(f"Price: ≥ {_fmt(intent.min_price)} {currency}")

    if intent.require_high_stock:
        clauses.append("High stock")
    elif intent.require_in_stock:
        clauses.append("In stock")
    if intent.max_delivery_days is not None:
        clauses.append(f"Delivery ≤ {intent.max_delivery_days} days")
    elif intent.fast_delivery:
        clauses.append("Fast delivery")

    for attr, label in (
        ("oem", "OEM"),
        ("aftermarket", "Aftermarket"),
        ("premium_quality", "Premium quality"),
        ("require_warranty", "Warranty"),
        ("certified_supplier", "Certified supplier"),
    ):
        if getattr(intent, attr):
            clauses.append(label)

    if intent.requested_quantity is not None:
        clauses.append(f"Quantity: {intent.requested_quantity} units")
    if intent.top_n is not None:
        clauses.append(f"Top {intent.top_n} results")
    if intent.exclude_brands or intent.exclude_origins:
        clauses.append(f"Excluding: {', '.join(intent.exclude_brands + intent.exclude_origins)}")
    if intent.supplier_origin:
        clauses.append(f"Origin: {intent.supplier_origin}")
    if intent.condition is not None:
        clauses.append(f"Condition: {intent.condition.value}")
    for attr, label in (
        ("fuel_type", "Fuel"),
        ("vehicle_type", "Vehicle type"),
        ("application", "Application"),
        ("supplier_type", "Supplier type"),
    ):
        value = getattr(intent, attr)
        if value:
            clauses.append(f"{label}: {value}")
    if intent.sort_preference is not None:
        clauses.append(f"Sorted by {intent.sort_preference.value}")
    if intent.compare_mode:
        clauses.append("Compare mode")
    if intent.find_alternatives:
        clauses.append("Find alternatives")

    return "; ".join(clauses) if clauses else "General parts search"


# =============================================================================
# MODULE-LEVEL ENTRY POINT
# =============================================================================

local_parser = LocalIntentParser()


def extract_intent(
    canonical: str,
    original: str = "",
    detected_language: Language = Language.EN,
) -> ParsedIntent:
    """Extract intent from a normalized query with the shared parser."""
    return local_parser.extract(canonical, original, detected_language)
