"""
Proposal Service

Business logic for proposal generation, including:
- Input validation
- Skill matching (computed once per request)
- Match scoring with optional controlled variation
- Budget and timeline estimates
- Key points
- Proposal prose from the text-generation service, with a templated
  fallback when the service is unavailable or fails
"""
import random
import logging
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from proposal_engine.models.proposal_schema import GenerateProposalRequest, GeneratedProposal
from proposal_engine.utils.budget_estimator import extract_budget_estimate
from proposal_engine.utils.exceptions import ProposalValidationError
from proposal_engine.utils.match_scoring import calculate_match_score
from proposal_engine.utils.prompt_engine import GenerationParams, PromptEngine
from proposal_engine.utils.proposal_composer import ProposalComposer
from proposal_engine.utils.skill_matching import calculate_skill_match
from proposal_engine.utils.timeline_estimator import extract_timeline_estimate

logger = logging.getLogger(__name__)


class ProposalService:
    """
    Service for proposal generation.

    Orchestrates:
    - Skill matching and match scoring
    - Budget/timeline estimators
    - ProposalComposer for key points and fallback proposals
    - PromptEngine + text-generation service for proposal prose
    """

    def __init__(
        self,
        openai_service=None,
        composer: Optional[ProposalComposer] = None,
        prompt_engine: Optional[PromptEngine] = None,
        generation_params: Optional[GenerationParams] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize with dependencies.

        Args:
            openai_service: Anything with generate_text(prompt, **sampling); None
                means every proposal uses the fallback template
            composer: Key point / fallback composer
            prompt_engine: Builds the generation prompt
            generation_params: Sampling parameters for the generation call
            rng: Random source shared by score variation, phrasing and prompts
        """
        self.rng = rng or random.Random()
        self.openai_service = openai_service
        self.composer = composer or ProposalComposer(rng=self.rng)
        self.prompt_engine = prompt_engine or PromptEngine(rng=self.rng)
        self.generation_params = generation_params or GenerationParams()

    @staticmethod
    def _validate_request(
        request: Union[GenerateProposalRequest, Dict[str, Any], None]
    ) -> GenerateProposalRequest:
        if request is None:
            raise ProposalValidationError("Proposal request is required")
        if isinstance(request, GenerateProposalRequest):
            return request
        if not isinstance(request, dict):
            raise ProposalValidationError(f"Unsupported request type: {type(request).__name__}")
        try:
            return GenerateProposalRequest.model_validate(request)
        except ValidationError as e:
            first = e.errors()[0] if e.errors() else {}
            field = ".".join(str(part) for part in first.get("loc", ()))
            raise ProposalValidationError(
                f"Invalid proposal request: {first.get('msg', str(e))}",
                field=field or None,
                details={"errors": e.errors(include_url=False, include_context=False, include_input=False)},
                cause=e,
            ) from e

    def generate_proposal(
        self,
        request: Union[GenerateProposalRequest, Dict[str, Any]],
    ) -> GeneratedProposal:
        """
        Generate a complete proposal result for one profile/job pair.

        Steps:
        1. Validate the request
        2. Match skills once
        3. Score the match (variation on regeneration)
        4. Estimate budget and timeline
        5. Build key points
        6. Generate prose, or fall back to the template

        Args:
            request: GenerateProposalRequest or equivalent dict

        Returns:
            GeneratedProposal, always fully populated

        Raises:
            ProposalValidationError: If profile or job is missing or invalid
        """
        request = self._validate_request(request)
        profile, job = request.profile, request.job
        add_variation = request.force_regenerate

        logger.info(f"[ProposalService] Generating proposal for '{job.title}' with profile '{profile.name}'")

        skill_match = calculate_skill_match(profile.skills, job.skills_required)
        match_score = calculate_match_score(
            profile, job, skill_match=skill_match, add_variation=add_variation, rng=self.rng
        )
        estimated_budget = extract_budget_estimate(job.budget, profile.hourly_rate)
        timeline = extract_timeline_estimate(job.duration)
        key_points = self.composer.generate_key_points(profile, job, skill_match, add_variation=add_variation)

        proposal_text = self._generate_proposal_text(request, skill_match)

        logger.info(
            f"[ProposalService] Done: score={match_score}, "
            f"matched={len(skill_match.matches)}/{len(job.skills_required)}, "
            f"missing={skill_match.missing_skills}"
        )

        return GeneratedProposal(
            proposal=proposal_text,
            estimated_budget=estimated_budget,
            timeline=timeline,
            key_points=key_points,
            match_score=match_score,
            missing_skills=skill_match.missing_skills,
        )

    def _generate_proposal_text(self, request: GenerateProposalRequest, skill_match) -> str:
        """Proposal prose from the generation service, or the fallback template."""
        profile, job, preferences = request.profile, request.job, request.preferences

        if self.openai_service is None:
            logger.info("[ProposalService] No text-generation service configured, using fallback")
            return self.composer.generate_fallback_proposal(profile, job, preferences, skill_match)

        prompt = self.prompt_engine.build_proposal_prompt(profile, job, preferences)
        try:
            text = self.openai_service.generate_text(prompt, **self.generation_params.to_dict())
        except Exception as e:
            logger.warning(f"[ProposalService] Text generation failed, using fallback: {e}")
            return self.composer.generate_fallback_proposal(profile, job, preferences, skill_match)

        if not text or not text.strip():
            logger.warning("[ProposalService] Text generation returned nothing, using fallback")
            return self.composer.generate_fallback_proposal(profile, job, preferences, skill_match)
        return text.strip()


# Singleton instance getter
_service_instance: Optional[ProposalService] = None


def get_proposal_service(openai_service=None) -> ProposalService:
    """
    Get or create singleton ProposalService instance.

    Args:
        openai_service: Text-generation service; wired from settings when omitted

    Returns:
        ProposalService instance
    """
    global _service_instance

    if _service_instance is None:
        if openai_service is None:
            from proposal_engine.utils.openai_service import build_openai_service
            openai_service = build_openai_service()
        _service_instance = ProposalService(
            openai_service=openai_service,
            generation_params=GenerationParams.from_settings(),
        )
    elif openai_service is not None:
        # Update dependencies if provided
        _service_instance.openai_service = openai_service

    return _service_instance
