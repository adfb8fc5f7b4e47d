"""
Match Score Calculator

Combines four weighted signals into a single 0-100 match percentage:

    skills      50 points  (skill match percentage * 0.5)
    experience  25 points  (years of experience or experience keywords)
    portfolio   15 points  (number of portfolio items)
    rate        10 points  (freelancer rate vs. client budget)

The result is clamped to a realistic band, [60, 97] normally or [65, 98]
when controlled variation is requested on regeneration.
"""
import re
import random
import logging
from dataclasses import dataclass
from typing import Optional

from proposal_engine.domain import constants as C
from proposal_engine.utils.skill_matching import SkillMatchResult, calculate_skill_match
from proposal_engine.utils.text_analysis import count_keywords, extract_numbers, round_half_up

logger = logging.getLogger(__name__)

_YEARS_PATTERN = re.compile(r"(\d+)\+?\s*(year|yr)", re.IGNORECASE)


@dataclass
class ScoreBreakdown:
    """Weighted sub-scores, each already expressed in points out of 100."""
    skills: float
    experience: int
    portfolio: int
    rate: int

    @property
    def total(self) -> float:
        return self.skills + self.experience + self.portfolio + self.rate

    @property
    def percentage(self) -> int:
        return round_half_up(self.total / C.TOTAL_POINTS * 100)

    def describe(self) -> str:
        return (
            f"skills={self.skills:.1f}/50 experience={self.experience}/{C.EXPERIENCE_MAX_POINTS} "
            f"portfolio={self.portfolio}/{C.PORTFOLIO_MAX_POINTS} rate={self.rate}/{C.RATE_MAX_POINTS}"
        )


def score_experience(experience_text: str) -> int:
    """
    Experience sub-score (0-25).

    "N years"/"N+ yrs" anywhere in the text decides the tier; without it,
    each distinct experience keyword present is worth 4 points.
    """
    text = (experience_text or "").lower()
    year_match = _YEARS_PATTERN.search(text)
    if year_match:
        years = int(year_match.group(1))
        for min_years, points in C.EXPERIENCE_YEAR_TIERS:
            if years >= min_years:
                return points
        return C.EXPERIENCE_BASE_POINTS

    keyword_count = count_keywords(text, C.EXPERIENCE_KEYWORDS)
    return min(C.EXPERIENCE_MAX_POINTS, keyword_count * C.EXPERIENCE_POINTS_PER_KEYWORD)


def score_portfolio(item_count: int) -> int:
    """Portfolio sub-score (0-15)."""
    if item_count > C.PORTFOLIO_FULL_CREDIT_ITEMS:
        return C.PORTFOLIO_MAX_POINTS
    return item_count * C.PORTFOLIO_POINTS_PER_ITEM


def score_rate(hourly_rate: float, budget_text: str) -> int:
    """
    Rate competitiveness sub-score (0-10).

    Hourly budgets compare directly against the highest figure; monthly and
    fixed budgets are converted to an implied hourly rate first. Budgets
    without numbers get full points.
    """
    numbers = extract_numbers(budget_text)
    if not numbers:
        return C.RATE_MAX_POINTS

    client_max = max(numbers)
    budget_lower = budget_text.lower()

    if "/hour" in budget_lower:
        if hourly_rate <= client_max:
            return C.RATE_POINTS_WITHIN_BUDGET
        if hourly_rate <= client_max * C.HOURLY_OVER_BUDGET_TOLERANCE:
            return C.RATE_POINTS_SLIGHTLY_OVER
        return C.RATE_POINTS_OVER_BUDGET

    assumed_hours = C.MONTHLY_ASSUMED_HOURS if "month" in budget_lower else C.FIXED_ASSUMED_HOURS
    implied_hourly = client_max / assumed_hours
    if hourly_rate <= implied_hourly * C.IMPLIED_RATE_TOLERANCE:
        return C.RATE_POINTS_WITHIN_BUDGET
    return C.RATE_POINTS_FIXED_OVER


def calculate_score_breakdown(profile, job, skill_match: SkillMatchResult) -> ScoreBreakdown:
    """Compute the four weighted sub-scores for a profile/job pair."""
    return ScoreBreakdown(
        skills=skill_match.percentage * C.SKILLS_WEIGHT,
        experience=score_experience(profile.experience),
        portfolio=score_portfolio(len(profile.portfolio)),
        rate=score_rate(profile.hourly_rate, job.budget),
    )


def calculate_match_score(
    profile,
    job,
    skill_match: Optional[SkillMatchResult] = None,
    add_variation: bool = False,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Overall match percentage for a profile/job pair.

    Args:
        profile: FreelancerProfile (skills, experience, portfolio, hourly_rate)
        job: JobPosting (skills_required, budget)
        skill_match: Precomputed skill match; computed here when omitted
        add_variation: Perturb by a random offset in [-3, +3] (regeneration)
        rng: Random source for the variation

    Returns:
        Integer score in [60, 97], or [65, 98] with variation
    """
    if skill_match is None:
        skill_match = calculate_skill_match(profile.skills, job.skills_required)

    breakdown = calculate_score_breakdown(profile, job, skill_match)
    final_score = breakdown.percentage

    if add_variation:
        rng = rng or random.Random()
        final_score += rng.randint(-C.SCORE_VARIATION, C.SCORE_VARIATION)
        final_score = max(C.VARIATION_SCORE_MIN, min(C.VARIATION_SCORE_MAX, final_score))
    else:
        final_score = max(C.SCORE_MIN, min(C.SCORE_MAX, final_score))

    logger.debug(f"[MatchScore] {breakdown.describe()} -> {final_score}")
    return final_score
