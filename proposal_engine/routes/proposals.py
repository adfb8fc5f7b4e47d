"""
Proposal Generation Routes

Single endpoint for proposal generation from:
- A freelancer profile
- A job posting (title, description, budget, duration, skills)
- Writing preferences (tone, length)

Returns the proposal text together with budget/timeline estimates, key
points, a match score and the job skills the profile is missing.
"""

import logging
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from proposal_engine.models.proposal_schema import GenerateProposalRequest, GeneratedProposal
from proposal_engine.services.proposal_service import ProposalService, get_proposal_service
from proposal_engine.utils.exceptions import ProposalValidationError

logger = logging.getLogger(__name__)

# Initialize router
router = APIRouter(prefix="/api", tags=["proposals"])


def provide_proposal_service() -> ProposalService:
    """Dependency returning the shared ProposalService."""
    return get_proposal_service()


# ===================== MAIN ENDPOINT =====================

@router.post(
    "/generate-proposal",
    response_model=GeneratedProposal,
    status_code=200,
    summary="Generate a proposal for a job from a freelancer profile",
    responses={
        200: {"description": "Proposal generated successfully"},
        400: {"description": "Invalid profile or job data"},
        500: {"description": "Generation error"}
    }
)
def generate_proposal(
    request: GenerateProposalRequest,
    proposal_service: ProposalService = Depends(provide_proposal_service),
):
    """
    Generate a proposal for one job.

    Set `forceRegenerate` to get a re-worded proposal, varied key points and
    a slightly varied match score.

    **Request Example:**
    ```json
    {
        "userProfile": {
            "name": "Jane Doe",
            "title": "Full Stack Developer",
            "skills": ["React", "Node.js"],
            "experience": "6 years building web apps for startups.",
            "portfolio": ["https://example.com/shop"],
            "hourlyRate": 30
        },
        "jobData": {
            "title": "React dashboard",
            "description": "Build an analytics dashboard",
            "budget": "$25-50/hour",
            "duration": "less than 2 weeks",
            "skillsRequired": ["React", "Python"]
        },
        "preferences": {"tone": "professional", "length": "medium"}
    }
    ```
    """
    try:
        logger.info(f"[ProposalAPI] Generating proposal for '{request.job.title}'")
        return proposal_service.generate_proposal(request)
    except ProposalValidationError as e:
        logger.warning(f"[ProposalAPI] Invalid request: {e.message}")
        raise HTTPException(status_code=400, detail=e.to_dict())
    except Exception as e:
        logger.error(f"[ProposalAPI] Error generating proposal: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to generate proposal")


# ===================== DEPRECATED =====================

@router.post("/analyze-job", status_code=410, include_in_schema=False)
def analyze_job():
    """Job URL analysis was replaced by manual job entry."""
    return JSONResponse(
        status_code=410,
        content={"error": "This endpoint is deprecated. Please use manual job entry instead."},
    )
