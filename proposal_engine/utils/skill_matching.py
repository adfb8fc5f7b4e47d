"""
Skill Matching

Fuzzy matching between a freelancer's skills and a job's required skills.

Each pair of skills is normalized and classified in priority order:
1. exact     - normalized strings are equal (similarity 100)
2. contains  - one normalized string contains the other (95 or 85)
3. similar   - Levenshtein similarity >= 70
Anything else is not a match.
"""
import re
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from rapidfuzz.distance import Levenshtein

from proposal_engine.domain.constants import (
    MatchType,
    SIMILARITY_THRESHOLD,
    EXACT_MATCH_SIMILARITY,
    CONTAINS_EQUAL_LENGTH_SIMILARITY,
    CONTAINS_MATCH_SIMILARITY,
)
from proposal_engine.utils.text_analysis import round_half_up

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[._\-\s]+")
_JS_SUFFIX = re.compile(r"js$")


@dataclass
class SkillCandidate:
    """A job skill accepted as a match for one profile skill."""
    skill: str
    similarity: int
    match_type: str


@dataclass
class SkillMatchDetail:
    """Best match found for one required job skill."""
    job_skill: str
    similarity: int
    match_type: str
    profile_skill: Optional[str] = None


@dataclass
class SkillMatchResult:
    """Aggregate skill match between a profile and a job."""
    matches: List[str] = field(default_factory=list)           # matched job skills
    missing_skills: List[str] = field(default_factory=list)
    percentage: float = 0.0
    details: List[SkillMatchDetail] = field(default_factory=list)

    @property
    def matched_profile_skills(self) -> List[str]:
        """Profile skills used by matches, de-duplicated, in job skill order."""
        seen = []
        for detail in self.details:
            if detail.profile_skill and detail.profile_skill not in seen:
                seen.append(detail.profile_skill)
        return seen


def normalize_skill(skill: str) -> str:
    """
    Canonicalize a skill string for comparison.

    Lower-cases, removes dots/underscores/dashes/whitespace and rewrites a
    trailing "js" to "javascript" ("React.JS" -> "reactjavascript").
    """
    if not skill:
        return ""
    normalized = _SEPARATORS.sub("", skill.lower())
    normalized = _JS_SUFFIX.sub("javascript", normalized)
    return normalized.strip()


def levenshtein_distance(str1: str, str2: str) -> int:
    """Edit distance with unit insert/delete/substitute costs."""
    return Levenshtein.distance(str1, str2)


def calculate_string_similarity(str1: str, str2: str) -> int:
    """
    Similarity percentage (0-100) derived from edit distance.

    Two empty strings are identical (100); an empty string against a
    non-empty one scores 0.
    """
    max_len = max(len(str1), len(str2))
    if max_len == 0:
        return 100
    distance = levenshtein_distance(str1, str2)
    return round_half_up((max_len - distance) / max_len * 100)


def classify_skill_pair(normalized_a: str, normalized_b: str) -> Tuple[Optional[str], int]:
    """
    Classify two already-normalized skills.

    Returns:
        (match_type, similarity); match_type is None when the pair is not
        a match, in which case similarity is the raw edit similarity.
    """
    if normalized_a == normalized_b:
        return MatchType.EXACT.value, EXACT_MATCH_SIMILARITY

    if normalized_a and normalized_b and (
        normalized_a in normalized_b or normalized_b in normalized_a
    ):
        if len(normalized_a) == len(normalized_b):
            return MatchType.CONTAINS.value, CONTAINS_EQUAL_LENGTH_SIMILARITY
        return MatchType.CONTAINS.value, CONTAINS_MATCH_SIMILARITY

    similarity = calculate_string_similarity(normalized_a, normalized_b)
    if similarity >= SIMILARITY_THRESHOLD:
        return MatchType.SIMILAR.value, similarity
    return None, similarity


def find_skill_matches(profile_skill: str, job_skills: Sequence[str]) -> List[SkillCandidate]:
    """
    Match one profile skill against a list of job skills.

    Returns:
        Accepted candidates, best similarity first (stable for ties)
    """
    normalized_profile = normalize_skill(profile_skill)
    matches = []

    for job_skill in job_skills:
        match_type, similarity = classify_skill_pair(normalized_profile, normalize_skill(job_skill))
        if match_type is not None:
            matches.append(SkillCandidate(skill=job_skill, similarity=similarity, match_type=match_type))

    return sorted(matches, key=lambda m: m.similarity, reverse=True)


def calculate_skill_match(profile_skills: Sequence[str], job_skills: Sequence[str]) -> SkillMatchResult:
    """
    Find the best profile skill for every required job skill.

    The first profile skill reaching the highest similarity wins ties.
    A job skill is matched when its best similarity is >= 70; otherwise it
    is reported missing with the best sub-threshold similarity seen.

    Args:
        profile_skills: Freelancer skills (any order, duplicates allowed)
        job_skills: Skills required by the job

    Returns:
        SkillMatchResult with matched/missing lists, percentage and details
    """
    result = SkillMatchResult()
    normalized_profile = [(skill, normalize_skill(skill)) for skill in profile_skills]

    for job_skill in job_skills:
        normalized_job = normalize_skill(job_skill)
        best: Optional[SkillMatchDetail] = None
        best_rejected = 0

        for profile_skill, normalized in normalized_profile:
            match_type, similarity = classify_skill_pair(normalized, normalized_job)
            if match_type is None:
                best_rejected = max(best_rejected, similarity)
                continue
            if best is None or similarity > best.similarity:
                best = SkillMatchDetail(
                    job_skill=job_skill,
                    similarity=similarity,
                    match_type=match_type,
                    profile_skill=profile_skill,
                )

        if best is not None and best.similarity >= SIMILARITY_THRESHOLD:
            result.matches.append(job_skill)
            result.details.append(best)
        else:
            result.missing_skills.append(job_skill)
            result.details.append(SkillMatchDetail(
                job_skill=job_skill,
                similarity=best_rejected,
                match_type=MatchType.MISSING.value,
            ))

    if job_skills:
        result.percentage = len(result.matches) / len(job_skills) * 100

    logger.debug(
        f"[SkillMatch] {len(result.matches)}/{len(job_skills)} matched "
        f"({result.percentage:.0f}%) | Missing: {', '.join(result.missing_skills) or 'None'}"
    )
    return result
