"""
Timeline Estimator

Normalizes a free-form duration ("2 weeks", "less than 1 month",
"40 hours", "ASAP") into a human-readable range. Durations are converted to
an estimated day count, adjusted for "less than"/"more than" style
modifiers, then mapped back to a bucket label.
"""
import math
import logging
from typing import Optional

from proposal_engine.domain.constants import (
    SHRINK_MODIFIERS,
    GROW_MODIFIERS,
    SHRINK_FACTOR,
    GROW_FACTOR,
    WORK_HOURS_PER_DAY,
    DAYS_PER_WEEK,
    DAYS_PER_MONTH,
    DEFAULT_DAYS_FOR_HOURS,
    DEFAULT_DAYS,
    DEFAULT_WEEKS,
    DEFAULT_MONTHS,
    URGENT_TIMELINE_KEYWORDS,
    QUICK_TIMELINE_KEYWORDS,
    FLEXIBLE_TIMELINE_KEYWORDS,
    TIMELINE_PLACEHOLDER,
)
from proposal_engine.utils.text_analysis import contains_any, extract_numbers

logger = logging.getLogger(__name__)


def estimate_timeline_days(duration: str) -> Optional[int]:
    """
    Estimated working days for a duration, or None when no unit is found.

    A missing (or zero) number falls back to a per-unit default.
    """
    duration_lower = (duration or "").lower().strip()
    numbers = extract_numbers(duration_lower)
    first_number = numbers[0] if numbers else None

    if "hour" in duration_lower:
        days = math.ceil(first_number / WORK_HOURS_PER_DAY) if first_number else DEFAULT_DAYS_FOR_HOURS
    elif "day" in duration_lower:
        days = first_number or DEFAULT_DAYS
    elif "week" in duration_lower:
        days = (first_number or DEFAULT_WEEKS) * DAYS_PER_WEEK
    elif "month" in duration_lower:
        days = (first_number or DEFAULT_MONTHS) * DAYS_PER_MONTH
    else:
        return None

    if contains_any(duration_lower, SHRINK_MODIFIERS):
        days = math.floor(days * SHRINK_FACTOR)
    elif contains_any(duration_lower, GROW_MODIFIERS):
        days = math.ceil(days * GROW_FACTOR)
    return days


def format_timeline_days(days: int) -> str:
    """Map a day count to its bucket label."""
    if days <= 1:
        return "1-2 days"
    if days <= 3:
        return "2-3 days"
    if days <= 7:
        return f"{max(1, days - 2)}-{days + 1} days"
    if days <= 14:
        return "1-2 weeks" if days <= 10 else "2 weeks"
    if days <= 30:
        weeks = math.ceil(days / DAYS_PER_WEEK)
        if weeks > 3:
            return f"{weeks}-{weeks + 1} weeks"
        if days % DAYS_PER_WEEK == 0:
            return f"{weeks} weeks"
        return f"{weeks - 1}-{weeks} weeks"
    if days <= 60:
        return "4-8 weeks"
    return f"{math.ceil(days / DAYS_PER_MONTH)} months"


def extract_timeline_estimate(duration: str) -> str:
    """
    Human-readable timeline estimate for a job duration.

    Args:
        duration: Duration text as typed by the client

    Returns:
        Bucket label, a phrase-based guess ("1-3 days" for ASAP), the
        original text, or "Timeline to be discussed" when blank
    """
    days = estimate_timeline_days(duration)
    if days is not None:
        return format_timeline_days(days)

    duration_lower = (duration or "").lower()
    if contains_any(duration_lower, URGENT_TIMELINE_KEYWORDS):
        return "1-3 days"
    if contains_any(duration_lower, QUICK_TIMELINE_KEYWORDS):
        return "3-7 days"
    if contains_any(duration_lower, FLEXIBLE_TIMELINE_KEYWORDS):
        return "Flexible timeline"

    return (duration or "").strip() or TIMELINE_PLACEHOLDER
