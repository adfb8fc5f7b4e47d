"""
Centralized Constants for the Proposal Match Engine

SINGLE SOURCE OF TRUTH for thresholds, weights and keyword lists used by
the matcher, the scorer and the estimators. Phrase variants used in
proposal text live with the composer.
"""

from typing import Dict, Tuple
from enum import Enum


# =============================================================================
# SHARED ENUMS
# =============================================================================

class MatchType(str, Enum):
    """How a job skill was judged equivalent to a profile skill."""
    EXACT = "exact"
    CONTAINS = "contains"
    SIMILAR = "similar"
    MISSING = "missing"


class ProposalLength(str, Enum):
    """Requested proposal length."""
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class BudgetType(str, Enum):
    """Budget classification derived from free-form budget text."""
    HOURLY = "hourly"
    MONTHLY = "monthly"
    FIXED = "fixed"


# =============================================================================
# SKILL MATCHING
# =============================================================================

# Minimum similarity (0-100) for a pair of skills to count as a match
SIMILARITY_THRESHOLD: int = 70

EXACT_MATCH_SIMILARITY: int = 100
CONTAINS_EQUAL_LENGTH_SIMILARITY: int = 95
CONTAINS_MATCH_SIMILARITY: int = 85


# =============================================================================
# MATCH SCORE WEIGHTS
# =============================================================================
# Sub-scores are expressed in points out of 100

SKILLS_WEIGHT: float = 0.5          # skill match percentage * 0.5 -> max 50
EXPERIENCE_MAX_POINTS: int = 25
PORTFOLIO_MAX_POINTS: int = 15
RATE_MAX_POINTS: int = 10
TOTAL_POINTS: int = 100

# (minimum years, points), checked top-down
EXPERIENCE_YEAR_TIERS: Tuple[Tuple[int, int], ...] = (
    (5, 25),
    (3, 20),
    (1, 15),
)
EXPERIENCE_BASE_POINTS: int = 10

EXPERIENCE_KEYWORDS: Tuple[str, ...] = (
    "experience", "project", "client", "development", "work", "built", "created"
)
EXPERIENCE_POINTS_PER_KEYWORD: int = 4

PORTFOLIO_FULL_CREDIT_ITEMS: int = 3    # strictly more than this gets full points
PORTFOLIO_POINTS_PER_ITEM: int = 4

HOURLY_OVER_BUDGET_TOLERANCE: float = 1.2
IMPLIED_RATE_TOLERANCE: float = 1.5
RATE_POINTS_WITHIN_BUDGET: int = 10
RATE_POINTS_SLIGHTLY_OVER: int = 6
RATE_POINTS_OVER_BUDGET: int = 2
RATE_POINTS_FIXED_OVER: int = 5

# Hours assumed when converting a non-hourly budget to an hourly rate
MONTHLY_ASSUMED_HOURS: int = 80
FIXED_ASSUMED_HOURS: int = 20

# Score bounds
SCORE_MIN: int = 60
SCORE_MAX: int = 97
VARIATION_SCORE_MIN: int = 65
VARIATION_SCORE_MAX: int = 98
SCORE_VARIATION: int = 3


# =============================================================================
# BUDGET ESTIMATION
# =============================================================================

HOURLY_BUDGET_MARKERS: Tuple[str, ...] = ("/hour", "per hour")
MONTHLY_BUDGET_MARKERS: Tuple[str, ...] = ("/month", "monthly")

# Rate bump suggested when the freelancer is below the client's range
UNDER_RANGE_RATE_BUMP: int = 5
# Fixed projects shorter than this many hours at the freelancer's rate
# are considered too small for hourly pricing
FIXED_MIN_REASONABLE_HOURS: int = 10
FIXED_PRICE_DISCOUNT: float = 0.9

BUDGET_PLACEHOLDER: str = "Budget to be discussed based on scope"


# =============================================================================
# TIMELINE ESTIMATION
# =============================================================================

SHRINK_MODIFIERS: Tuple[str, ...] = (
    "less than", "under", "within", "maximum", "max", "up to"
)
GROW_MODIFIERS: Tuple[str, ...] = (
    "more than", "over", "minimum", "min", "at least"
)
SHRINK_FACTOR: float = 0.8
GROW_FACTOR: float = 1.2

WORK_HOURS_PER_DAY: int = 8
DAYS_PER_WEEK: int = 7
DAYS_PER_MONTH: int = 30

# Day counts used when a unit appears without a number
DEFAULT_DAYS_FOR_HOURS: int = 7
DEFAULT_DAYS: int = 7
DEFAULT_WEEKS: int = 2
DEFAULT_MONTHS: int = 1

URGENT_TIMELINE_KEYWORDS: Tuple[str, ...] = ("asap", "urgent", "immediately")
QUICK_TIMELINE_KEYWORDS: Tuple[str, ...] = ("quick", "fast")
FLEXIBLE_TIMELINE_KEYWORDS: Tuple[str, ...] = ("flexible",)

TIMELINE_PLACEHOLDER: str = "Timeline to be discussed"


# =============================================================================
# PROPOSAL LENGTH TARGETS
# =============================================================================

LENGTH_WORD_TARGETS: Dict[str, Tuple[int, int]] = {
    ProposalLength.SHORT.value: (150, 250),
    ProposalLength.MEDIUM.value: (250, 400),
    ProposalLength.LONG.value: (400, 600),
}

MAX_KEY_POINTS: int = 4
MAX_HIGHLIGHTED_SKILLS: int = 3
