"""
Tests for the proposal prompt and sampling parameters.
"""
from proposal_engine.models.proposal_schema import ProposalPreferences
from proposal_engine.utils.prompt_engine import GenerationParams, PromptEngine


def test_word_targets():
    assert PromptEngine.word_target("short") == "150-250 word"
    assert PromptEngine.word_target("medium") == "250-400 word"
    assert PromptEngine.word_target("long") == "400-600 word"
    assert PromptEngine.word_target("epic") == "250-400 word"


def test_prompt_contains_job_and_profile(sample_profile, sample_job, medium_preferences):
    prompt = PromptEngine().build_proposal_prompt(sample_profile, sample_job, medium_preferences, generation_seed=42)

    assert "Title: React Analytics Dashboard" in prompt
    assert "Budget: $25-50/hour" in prompt
    assert "Skills Required: React, Python" in prompt
    assert "Timeline: less than 2 weeks" in prompt
    assert "Name: Jane Doe" in prompt
    assert "Skills: React, Node.js" in prompt
    assert "Rate: $30/hour" in prompt
    assert "Specializations: SaaS dashboards" in prompt


def test_prompt_tone_and_length(sample_profile, sample_job):
    preferences = ProposalPreferences(tone="friendly", length="long")
    prompt = PromptEngine().build_proposal_prompt(sample_profile, sample_job, preferences, generation_seed=1)

    assert "- Tone: friendly (Warm and approachable." in prompt
    assert "- Length: long" in prompt
    assert "Write a 400-600 word proposal" in prompt


def test_unknown_tone_passed_through(sample_profile, sample_job):
    preferences = ProposalPreferences(tone="witty")
    prompt = PromptEngine().build_proposal_prompt(sample_profile, sample_job, preferences, generation_seed=1)

    assert "- Tone: witty\n" in prompt


def test_generation_seed_tags_prompt(sample_profile, sample_job, medium_preferences, scripted_random):
    prompt = PromptEngine().build_proposal_prompt(sample_profile, sample_job, medium_preferences, generation_seed=7)
    assert "GENERATION #7 - Create a UNIQUE variation" in prompt

    rng = scripted_random([512])
    prompt = PromptEngine(rng=rng).build_proposal_prompt(sample_profile, sample_job, medium_preferences)
    assert "GENERATION #512" in prompt
    assert rng.calls == [("randrange", 1000)]


def test_generation_params_defaults():
    params = GenerationParams()
    assert params.to_dict() == {
        "temperature": 0.9,
        "top_p": 0.9,
        "frequency_penalty": 0.5,
        "presence_penalty": 0.3,
        "max_tokens": 1500,
    }


def test_generation_params_from_settings(monkeypatch):
    from proposal_engine.config import settings

    monkeypatch.setattr(settings, "PROPOSAL_TEMPERATURE", 0.4)
    monkeypatch.setattr(settings, "PROPOSAL_MAX_TOKENS", 800)

    params = GenerationParams.from_settings()
    assert params.temperature == 0.4
    assert params.max_tokens == 800
