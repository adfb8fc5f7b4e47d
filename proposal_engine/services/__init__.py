"""
Application Services - Business Logic Layer

Services contain business logic extracted from route handlers,
coordinating the matching/scoring utilities and external services.
"""

from proposal_engine.services.proposal_service import ProposalService, get_proposal_service

__all__ = [
    "ProposalService",
    "get_proposal_service",
]
