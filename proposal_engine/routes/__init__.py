"""
Routes package - exports all API routers
"""
from proposal_engine.routes.proposals import router as proposals_router

__all__ = ["proposals_router"]
