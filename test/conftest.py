"""
Shared fixtures for the proposal engine test suite.
"""
import pytest

from proposal_engine.models.proposal_schema import (
    FreelancerProfile,
    JobPosting,
    ProposalPreferences,
)


class ScriptedRandom:
    """Random source returning pre-scripted values, for pinning variant choices."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randrange(self, n):
        self.calls.append(("randrange", n))
        value = self.values.pop(0)
        assert 0 <= value < n, f"scripted value {value} out of range for randrange({n})"
        return value

    def randint(self, a, b):
        self.calls.append(("randint", a, b))
        value = self.values.pop(0)
        assert a <= value <= b, f"scripted value {value} out of range for randint({a}, {b})"
        return value


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture
def sample_profile():
    return FreelancerProfile(
        name="Jane Doe",
        title="Full Stack Developer",
        skills=["React", "Node.js"],
        experience="6 years building web apps for startups. Led several client projects.",
        portfolio=["https://example.com/shop", "https://example.com/dashboard"],
        hourly_rate=30,
        bio="I build fast, reliable web apps.",
        specializations=["SaaS dashboards"],
    )


@pytest.fixture
def sample_job():
    return JobPosting(
        title="React Analytics Dashboard",
        description="We need someone to build an analytics dashboard for our sales team.",
        budget="$25-50/hour",
        duration="less than 2 weeks",
        skills_required=["React", "Python"],
    )


@pytest.fixture
def medium_preferences():
    return ProposalPreferences(tone="professional", length="medium")
