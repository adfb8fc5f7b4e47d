"""
Budget Estimator

Turns a client's free-form budget ("$25-50/hour", "$2000/month",
"$500 fixed") and the freelancer's hourly rate into a readable estimate
with pricing advice. Never raises: unparseable budgets come back as-is or
as a "to be discussed" placeholder.
"""
import math
import logging
from typing import Optional

from proposal_engine.domain.constants import (
    BudgetType,
    HOURLY_BUDGET_MARKERS,
    MONTHLY_BUDGET_MARKERS,
    MONTHLY_ASSUMED_HOURS,
    UNDER_RANGE_RATE_BUMP,
    FIXED_MIN_REASONABLE_HOURS,
    FIXED_PRICE_DISCOUNT,
    BUDGET_PLACEHOLDER,
)
from proposal_engine.utils.text_analysis import (
    contains_any,
    extract_numbers,
    format_amount as fmt,
    round_half_up,
)

logger = logging.getLogger(__name__)


def classify_budget(budget_text: str) -> BudgetType:
    """Hourly, monthly or (by default) fixed."""
    budget_lower = (budget_text or "").lower()
    if contains_any(budget_lower, HOURLY_BUDGET_MARKERS):
        return BudgetType.HOURLY
    if contains_any(budget_lower, MONTHLY_BUDGET_MARKERS):
        return BudgetType.MONTHLY
    return BudgetType.FIXED


def _hourly_estimate(min_budget: int, max_budget: Optional[int], rate: float) -> str:
    if max_budget is None:
        if rate > min_budget:
            return f"${min_budget}/hour (Client offers ${min_budget}/hour - consider matching their rate)"
        if rate == min_budget:
            return f"${min_budget}/hour (Perfect match with client's budget)"
        return f"${min_budget}/hour (You can charge up to ${min_budget}/hour)"

    budget_range = f"${min_budget}-${max_budget}/hour"
    if rate > max_budget:
        return f"{budget_range} (Suggested: ${max_budget}/hour to be competitive)"
    if min_budget <= rate <= max_budget:
        return f"{budget_range} (Your rate: ${fmt(rate)}/hour fits perfectly)"
    suggested_rate = min(rate + UNDER_RANGE_RATE_BUMP, max_budget)
    return f"{budget_range} (You can charge up to ${fmt(suggested_rate)}/hour)"


def _monthly_estimate(min_budget: int, max_budget: Optional[int], rate: float) -> str:
    budget_label = f"${min_budget}-${max_budget}/monthly" if max_budget else f"${min_budget}/monthly"
    if rate <= 0:
        return budget_label

    monthly_budget = max_budget or min_budget
    client_hourly_equivalent = monthly_budget / MONTHLY_ASSUMED_HOURS

    if rate > client_hourly_equivalent:
        max_hours = math.floor(monthly_budget / rate)
        return f"{budget_label} (You can work ~{max_hours}h/month at ${fmt(rate)}/hr)"

    total_earnings = min(rate * MONTHLY_ASSUMED_HOURS, monthly_budget)
    hours = math.floor(total_earnings / rate)
    return f"{budget_label} (~{hours}h at ${fmt(rate)}/hr = ${fmt(total_earnings)})"


def _fixed_estimate(min_budget: int, max_budget: Optional[int], rate: float) -> str:
    budget_label = f"${min_budget}-${max_budget}" if max_budget else f"${min_budget}"
    if rate <= 0:
        return f"{budget_label} fixed project"

    fixed_budget = max_budget or min_budget
    avg_budget = (min_budget + max_budget) / 2 if max_budget else min_budget

    if rate * FIXED_MIN_REASONABLE_HOURS > fixed_budget:
        max_affordable_hours = math.floor(fixed_budget / rate)
        if max_budget:
            suggested_price = min(avg_budget, fixed_budget * FIXED_PRICE_DISCOUNT)
            return (
                f"{budget_label} fixed (Consider fixed price of ${fmt(suggested_price)} "
                f"vs {max_affordable_hours}h at ${fmt(rate)}/hr)"
            )
        return f"{budget_label} fixed (Consider this fixed price vs {max_affordable_hours}h at ${fmt(rate)}/hr)"

    estimated_hours = round_half_up(avg_budget / rate)
    return f"{budget_label} fixed (~{estimated_hours}h at ${fmt(rate)}/hr = ${fmt(estimated_hours * rate)})"


def extract_budget_estimate(budget_text: str, hourly_rate: float) -> str:
    """
    Build a budget estimate string with pricing advice.

    The first number found is the minimum, the second (if any) the maximum.

    Args:
        budget_text: Client budget as typed, unit embedded
        hourly_rate: Freelancer hourly rate

    Returns:
        Human-readable estimate; the original text or a placeholder when
        no number can be extracted
    """
    numbers = extract_numbers(budget_text)
    if not numbers:
        return (budget_text or "").strip() or BUDGET_PLACEHOLDER

    min_budget = numbers[0]
    max_budget = numbers[1] if len(numbers) > 1 else None
    rate = hourly_rate or 0
    budget_type = classify_budget(budget_text)

    if budget_type == BudgetType.HOURLY:
        return _hourly_estimate(min_budget, max_budget, rate)
    if budget_type == BudgetType.MONTHLY:
        return _monthly_estimate(min_budget, max_budget, rate)
    return _fixed_estimate(min_budget, max_budget, rate)
