"""
Prompt Engine for Proposal Generation

Handles:
- Prompt building from the job posting and freelancer profile
- Tone and length guidance
- A per-generation uniqueness instruction so regenerations differ
- Sampling parameters passed to the text-generation service

This separates prompt logic from the service for better maintainability.
"""

import random
import logging
from typing import Dict, Optional
from dataclasses import dataclass, asdict

from proposal_engine.config import settings
from proposal_engine.domain.constants import LENGTH_WORD_TARGETS, ProposalLength
from proposal_engine.utils.text_analysis import format_amount

logger = logging.getLogger(__name__)


@dataclass
class GenerationParams:
    """Sampling parameters for the text-generation call"""
    temperature: float = 0.9
    top_p: float = 0.9
    frequency_penalty: float = 0.5
    presence_penalty: float = 0.3
    max_tokens: int = 1500

    @classmethod
    def from_settings(cls) -> "GenerationParams":
        return cls(
            temperature=settings.PROPOSAL_TEMPERATURE,
            top_p=settings.PROPOSAL_TOP_P,
            frequency_penalty=settings.PROPOSAL_FREQUENCY_PENALTY,
            presence_penalty=settings.PROPOSAL_PRESENCE_PENALTY,
            max_tokens=settings.PROPOSAL_MAX_TOKENS,
        )

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


class PromptEngine:
    """
    Builds the proposal-writing prompt.

    The prompt asks for a hook grounded in the job post, the 2-3 most
    relevant skills, the client's pain points, an approach, deliverables
    and a call to action, at the requested tone and length.
    """

    # Extra guidance for common tones; any other tone is passed through as-is
    TONE_INSTRUCTIONS = {
        "professional": "Formal yet warm, structured, clear call-to-action at the end.",
        "friendly": "Warm and approachable. Show personality, collaborative language, genuine interest.",
        "confident": "Convey strong confidence in abilities without overpromising.",
        "casual": "Conversational and relatable, short paragraphs, direct communication.",
        "enthusiastic": "Show genuine excitement with positive, energetic language.",
    }

    OPENING_HOOK_HINTS = ("I noticed", "I see you're looking for", "Your project caught my attention")

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    @staticmethod
    def word_target(length: str) -> str:
        """Word range for a proposal length ("250-400 word" for medium)."""
        low, high = LENGTH_WORD_TARGETS.get(length, LENGTH_WORD_TARGETS[ProposalLength.MEDIUM.value])
        return f"{low}-{high} word"

    def _build_job_section(self, job) -> str:
        return f"""JOB DETAILS:
Title: {job.title}
Description: {job.description}
Budget: {job.budget}
Skills Required: {', '.join(job.skills_required)}
Timeline: {job.duration}"""

    def _build_profile_section(self, profile) -> str:
        return f"""FREELANCER PROFILE:
Name: {profile.name}
Title: {profile.title}
Skills: {', '.join(profile.skills)}
Rate: ${format_amount(profile.hourly_rate)}/hour
Experience: {profile.experience}
Specializations: {', '.join(profile.specializations)}"""

    def _build_guidelines(self, tone: str, length: str) -> str:
        tone_guide = self.TONE_INSTRUCTIONS.get(tone.lower(), "")
        tone_line = f"- Tone: {tone}" + (f" ({tone_guide})" if tone_guide else "")
        return f"""WRITING GUIDELINES:
{tone_line}
- Length: {length}
- Start with a hook that shows you READ and UNDERSTOOD the specific job requirements
- Highlight 2-3 most relevant skills/experiences that match the job
- Address the client's pain points or challenges mentioned in the job description
- Provide a brief solution approach or methodology
- Include specific deliverables or outcomes you'll provide
- End with a clear call to action
- Avoid generic phrases like "I'm excited about this opportunity"
- Don't just list skills - show HOW you'll solve their specific problem"""

    def build_proposal_prompt(
        self,
        profile,
        job,
        preferences,
        generation_seed: Optional[int] = None,
    ) -> str:
        """
        Build the prompt for one proposal generation.

        Args:
            profile: FreelancerProfile
            job: JobPosting
            preferences: ProposalPreferences (tone, length)
            generation_seed: Number tagging this generation; random when omitted

        Returns:
            Prompt text for the text-generation service
        """
        if generation_seed is None:
            generation_seed = self.rng.randrange(1000)

        logger.debug(
            f"[PromptEngine] Building proposal prompt (tone={preferences.tone}, "
            f"length={preferences.length}, generation=#{generation_seed})"
        )

        hooks = ", ".join(f'"{hint}"' for hint in self.OPENING_HOOK_HINTS)
        return f"""You are an expert Upwork proposal writer who creates personalized, winning proposals. Based on the job and freelancer details below, write a compelling proposal.

{self._build_job_section(job)}

{self._build_profile_section(profile)}

{self._build_guidelines(preferences.tone, preferences.length)}

IMPORTANT: Make this proposal feel like it was written specifically for THIS job, not a template. Reference specific details from the job description and explain exactly how your background makes you the right fit.

Write a {self.word_target(preferences.length)} proposal that stands out from generic applications.

GENERATION #{generation_seed} - Create a UNIQUE variation. Use different:
- Opening hooks (avoid "I've reviewed", try {hooks})
- Structure and flow
- Specific examples and approaches
- Closing statements

Make this proposal feel distinctly different from previous versions while maintaining quality."""
