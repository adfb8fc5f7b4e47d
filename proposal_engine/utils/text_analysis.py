"""
Consolidated Text Analysis Utilities

Single source of truth for:
- Number extraction from free-form budget/duration text
- Keyword detection
- Amount formatting for estimate strings
- Half-up rounding shared by the matcher and the scorer
"""
import re
import math
import logging
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

# Thousands separators inside a number ("5,000" -> "5000")
_THOUSANDS_SEPARATOR = re.compile(r"(?<=\d),(?=\d{3}\b)")
_DIGIT_RUN = re.compile(r"\d+")
# Longer runs are identifiers or noise, not amounts
MAX_NUMBER_DIGITS = 15


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def extract_numbers(text: Optional[str]) -> List[int]:
    """
    Extract every digit run from text as integers.

    Thousands separators are folded first so "$1,500" yields [1500]
    rather than [1, 500]. Runs longer than MAX_NUMBER_DIGITS are skipped.

    Args:
        text: Budget, duration or any free-form text

    Returns:
        Integers in order of appearance (empty list when none)
    """
    if not text:
        return []
    folded = _THOUSANDS_SEPARATOR.sub("", text)
    return [int(n) for n in _DIGIT_RUN.findall(folded) if len(n) <= MAX_NUMBER_DIGITS]


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """Case-sensitive substring check; callers lower-case first."""
    return any(kw in text for kw in keywords)


def count_keywords(text: str, keywords: Iterable[str]) -> int:
    """Number of distinct keywords present in text as substrings."""
    return sum(1 for kw in keywords if kw in text)


def format_amount(value: float) -> str:
    """
    Format a money/rate amount without a trailing ".0".

    >>> format_amount(30.0)
    '30'
    >>> format_amount(1350.5)
    '1350.5'
    """
    rounded = round(float(value), 2)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.2f}".rstrip("0").rstrip(".")


def first_sentence(text: Optional[str]) -> str:
    """Text up to the first period, stripped."""
    if not text:
        return ""
    return text.split(".")[0].strip()
