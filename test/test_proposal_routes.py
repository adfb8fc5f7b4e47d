"""
Tests for the HTTP endpoints.
"""
import random

import pytest
from fastapi.testclient import TestClient

from main import app
from proposal_engine.routes.proposals import provide_proposal_service
from proposal_engine.services.proposal_service import ProposalService
from proposal_engine.utils.exceptions import ProposalValidationError


PAYLOAD = {
    "userProfile": {
        "name": "Jane Doe",
        "title": "Full Stack Developer",
        "skills": ["React", "Node.js"],
        "experience": "6 years building web apps for startups.",
        "portfolio": ["https://example.com/shop", "https://example.com/dashboard"],
        "hourlyRate": 30,
    },
    "jobData": {
        "title": "React Analytics Dashboard",
        "description": "Build an analytics dashboard",
        "budget": "$25-50/hour",
        "duration": "less than 2 weeks",
        "skillsRequired": ["React", "Python"],
    },
    "preferences": {"tone": "professional", "length": "medium"},
}


class RaisingService:
    def __init__(self, error):
        self.error = error

    def generate_proposal(self, request):
        raise self.error


@pytest.fixture
def client():
    app.dependency_overrides[provide_proposal_service] = lambda: ProposalService(rng=random.Random(0))
    yield TestClient(app)
    app.dependency_overrides.clear()


def override_service(service):
    app.dependency_overrides[provide_proposal_service] = lambda: service


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    body = response.json()
    assert body["service"] == "Proposal Match Engine"
    assert body["text_generation"] in ("enabled", "fallback")


def test_generate_proposal(client):
    response = client.post("/api/generate-proposal", json=PAYLOAD)

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"proposal", "estimatedBudget", "timeline", "keyPoints", "matchScore", "missingSkills"}
    assert body["missingSkills"] == ["Python"]
    assert body["matchScore"] == 68
    assert body["timeline"] == "2 weeks"
    assert body["estimatedBudget"].startswith("$25-$50/hour")
    assert "Jane Doe" in body["proposal"]


def test_generate_proposal_snake_case_keys(client):
    payload = {"profile": PAYLOAD["userProfile"], "job": PAYLOAD["jobData"]}
    response = client.post("/api/generate-proposal", json=payload)
    assert response.status_code == 200


def test_missing_job_is_unprocessable(client):
    response = client.post("/api/generate-proposal", json={"userProfile": PAYLOAD["userProfile"]})
    assert response.status_code == 422


def test_service_validation_error_is_bad_request(client):
    override_service(RaisingService(ProposalValidationError("Job title cannot be blank", field="job.title")))

    response = client.post("/api/generate-proposal", json=PAYLOAD)

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["error_code"] == "VALIDATION_ERROR"
    assert detail["details"]["field"] == "job.title"


def test_unexpected_error_is_server_error(client):
    override_service(RaisingService(RuntimeError("boom")))

    response = client.post("/api/generate-proposal", json=PAYLOAD)

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to generate proposal"


def test_analyze_job_is_gone(client):
    response = client.post("/api/analyze-job", json={"url": "https://example.com/job"})
    assert response.status_code == 410
    assert "deprecated" in response.json()["error"]


def test_infinite_hourly_rate_is_unprocessable(client):
    body = '{"userProfile": {"name": "A", "hourlyRate": Infinity}, "jobData": {"title": "T", "budget": "$500"}}'

    response = client.post(
        "/api/generate-proposal",
        content=body,
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 422
    locations = [error["loc"] for error in response.json()["detail"]]
    assert ["body", "userProfile", "hourlyRate"] in locations
