"""
Tests for skill normalization, string similarity and skill matching.
"""
import pytest

from proposal_engine.utils.skill_matching import (
    calculate_skill_match,
    calculate_string_similarity,
    classify_skill_pair,
    find_skill_matches,
    levenshtein_distance,
    normalize_skill,
)


# =============================================================================
# NORMALIZATION
# =============================================================================

def test_normalize_collapses_case_and_separators():
    assert normalize_skill("React.JS") == normalize_skill("reactjs") == normalize_skill("react js")
    assert normalize_skill("React.JS") == "reactjavascript"
    assert normalize_skill("Node_js") == "nodejavascript"
    assert normalize_skill("Ruby on Rails") == "rubyonrails"
    assert normalize_skill("C-Sharp") == "csharp"


def test_normalize_empty_string():
    assert normalize_skill("") == ""
    assert normalize_skill("  . - _ ") == ""


@pytest.mark.parametrize("skill", ["React.JS", "JS", "Vue", "node js", "Next.js", "JavaScript", "", "A_B-C d"])
def test_normalize_is_idempotent(skill):
    once = normalize_skill(skill)
    assert normalize_skill(once) == once


# =============================================================================
# STRING SIMILARITY
# =============================================================================

def test_levenshtein_classic_example():
    assert levenshtein_distance("kitten", "sitting") == 3
    assert levenshtein_distance("", "abc") == 3
    assert levenshtein_distance("flask", "flask") == 0


def test_similarity_percentage():
    # 7 chars, 3 edits -> 4/7 = 57.1%
    assert calculate_string_similarity("kitten", "sitting") == 57
    assert calculate_string_similarity("javascript", "javscript") == 90
    assert calculate_string_similarity("python", "python") == 100


def test_similarity_rounds_halves_up():
    # 8 chars, 3 edits -> 62.5%
    assert calculate_string_similarity("abcdefgh", "abcdexyz") == 63


def test_similarity_empty_strings():
    assert calculate_string_similarity("", "") == 100
    assert calculate_string_similarity("", "react") == 0
    assert calculate_string_similarity("react", "") == 0


@pytest.mark.parametrize("a,b", [
    ("kitten", "sitting"),
    ("postgresql", "mysql"),
    ("", "go"),
    ("typescript", "javascript"),
])
def test_similarity_is_symmetric(a, b):
    assert calculate_string_similarity(a, b) == calculate_string_similarity(b, a)


# =============================================================================
# PAIR CLASSIFICATION
# =============================================================================

def test_exact_match_after_normalization():
    match_type, similarity = classify_skill_pair(normalize_skill("Node.js"), normalize_skill("node js"))
    assert match_type == "exact"
    assert similarity == 100


def test_contains_match():
    assert classify_skill_pair("react", "reactnative") == ("contains", 85)
    assert classify_skill_pair("reactnative", "react") == ("contains", 85)


def test_similar_match_needs_threshold():
    assert classify_skill_pair("javascript", "javscript") == ("similar", 90)
    match_type, similarity = classify_skill_pair("python", "react")
    assert match_type is None
    assert similarity < 70


def test_empty_side_never_contains():
    match_type, _ = classify_skill_pair("", "react")
    assert match_type is None


def test_find_skill_matches_sorted_best_first():
    matches = find_skill_matches("React", ["React Native", "Vue", "react"])
    assert [m.skill for m in matches] == ["react", "React Native"]
    assert [m.match_type for m in matches] == ["exact", "contains"]
    assert [m.similarity for m in matches] == [100, 85]


# =============================================================================
# AGGREGATE SKILL MATCH
# =============================================================================

def test_scenario_react_node_vs_react_python():
    result = calculate_skill_match(["React", "Node.js"], ["React", "Python"])

    assert result.matches == ["React"]
    assert result.missing_skills == ["Python"]
    assert result.percentage == 50

    react, python = result.details
    assert react.match_type == "exact"
    assert react.profile_skill == "React"
    assert react.similarity == 100
    assert python.match_type == "missing"
    assert python.profile_skill is None
    assert python.similarity < 70


def test_all_required_skills_present_is_100_percent():
    result = calculate_skill_match(["reactjs", "Type Script", "AWS"], ["React.JS", "TypeScript"])
    assert result.percentage == 100
    assert result.missing_skills == []


def test_no_required_skills_is_zero_percent():
    result = calculate_skill_match(["React"], [])
    assert result.percentage == 0
    assert result.matches == []
    assert result.details == []


def test_no_profile_skills_reports_everything_missing():
    result = calculate_skill_match([], ["React", "Python"])
    assert result.missing_skills == ["React", "Python"]
    assert all(d.similarity == 0 for d in result.details)
    assert result.percentage == 0


def test_missing_skill_keeps_best_sub_threshold_similarity():
    result = calculate_skill_match(["Rust", "Ruby"], ["Rubik"])
    detail = result.details[0]
    assert detail.match_type == "missing"
    assert detail.similarity == calculate_string_similarity("ruby", "rubik")


def test_tie_goes_to_first_profile_skill():
    result = calculate_skill_match(["JS", "JavaScript"], ["javascript"])
    assert result.details[0].profile_skill == "JS"
    assert result.details[0].match_type == "exact"


def test_better_later_match_replaces_earlier_one():
    result = calculate_skill_match(["React Native", "React"], ["React"])
    assert result.details[0].profile_skill == "React"
    assert result.details[0].similarity == 100


def test_percentage_bounds():
    result = calculate_skill_match(["Python", "Django"], ["Python", "Django", "Docker", "AWS"])
    assert 0 <= result.percentage <= 100
    assert result.percentage == 50


def test_matched_profile_skills_deduplicated():
    result = calculate_skill_match(["React", "Python"], ["React", "React.js", "Python"])
    assert result.matched_profile_skills == ["React", "Python"]


@pytest.mark.parametrize("a,b,expected", [
    ("kitten", "sitting", 3),
    ("javascript", "javscript", 1),
    ("flask", "flisk", 1),
    ("postgresql", "mysql", 7),
])
def test_levenshtein_counts_substitutions_as_one_edit(a, b, expected):
    assert levenshtein_distance(a, b) == expected
