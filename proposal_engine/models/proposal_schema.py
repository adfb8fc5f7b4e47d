"""
Pydantic schemas for proposal generation

Defines request/response models for:
- Freelancer profile and job posting input
- Writing preferences
- Generated proposal output

Python attributes are snake_case; the wire format is camelCase and both
spellings are accepted on input.
"""
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from proposal_engine.domain.constants import ProposalLength


class SkillsValidator:
    """Validator for skill-like string lists"""

    @staticmethod
    def clean_list(values: Optional[List[str]]) -> List[str]:
        """Strip entries and drop blank ones"""
        if not values:
            return []
        cleaned = (str(v).strip() for v in values if v is not None)
        return [v for v in cleaned if v]


class CamelModel(BaseModel):
    """Base model accepting snake_case and camelCase field names."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ===================== REQUEST SCHEMAS =====================

class FreelancerProfile(CamelModel):
    """Freelancer profile used for matching and proposal writing"""
    name: str = Field(..., min_length=1, description="Freelancer name")
    title: str = Field("", description="Professional title")
    skills: List[str] = Field(default_factory=list, description="Skills (unordered)")
    experience: str = Field("", description="Free-text experience description")
    portfolio: List[str] = Field(default_factory=list, description="Portfolio items or URLs")
    hourly_rate: float = Field(0, ge=0, allow_inf_nan=False, description="Hourly rate in USD")
    bio: str = Field("", description="Short bio")
    specializations: List[str] = Field(default_factory=list, description="Specializations")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Profile name cannot be blank")
        return v.strip()

    @field_validator("skills", "portfolio", "specializations", mode="before")
    @classmethod
    def clean_lists(cls, v):
        return SkillsValidator.clean_list(v)

    @field_validator("title", "experience", "bio", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v


class ClientInfo(CamelModel):
    """Client metadata, opaque to matching and scoring"""
    rating: str = ""
    total_spent: str = ""
    location: str = ""

    @field_validator("rating", "total_spent", "location", mode="before")
    @classmethod
    def to_text(cls, v):
        return "" if v is None else str(v)


class JobPosting(CamelModel):
    """Job posting the proposal is written for"""
    title: str = Field(..., min_length=1, description="Job title")
    description: str = Field("", description="Full job description")
    budget: str = Field("", description="Budget text, unit embedded (e.g. '$25-50/hour')")
    duration: str = Field("", description="Duration text (e.g. 'less than 2 weeks')")
    skills_required: List[str] = Field(default_factory=list, description="Required skills")
    client_info: ClientInfo = Field(default_factory=ClientInfo)
    posted_time: str = ""
    proposals_count: str = ""
    url: str = ""

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Job title cannot be blank")
        return v.strip()

    @field_validator("skills_required", mode="before")
    @classmethod
    def clean_skills(cls, v):
        return SkillsValidator.clean_list(v)

    @field_validator("description", "budget", "duration", "posted_time", "proposals_count", "url", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        if v is None:
            return ""
        return str(v)


class ProposalPreferences(CamelModel):
    """Writing preferences"""
    tone: str = Field("professional", description="Tone, e.g. professional, friendly, confident")
    length: str = Field(ProposalLength.MEDIUM.value, description="short, medium or long")

    @field_validator("length", mode="before")
    @classmethod
    def normalize_length(cls, v):
        value = str(v or ProposalLength.MEDIUM.value).strip().lower()
        if value not in {item.value for item in ProposalLength}:
            return ProposalLength.MEDIUM.value
        return value


class GenerateProposalRequest(CamelModel):
    """Request to generate a proposal for one profile/job pair"""
    # The web client posts 'userProfile' / 'jobData'
    profile: FreelancerProfile = Field(..., validation_alias=AliasChoices("profile", "userProfile"))
    job: JobPosting = Field(..., validation_alias=AliasChoices("job", "jobData"))
    preferences: ProposalPreferences = Field(default_factory=ProposalPreferences)
    force_regenerate: bool = Field(False, description="Apply controlled variation (regeneration)")


# ===================== RESPONSE SCHEMAS =====================

class GeneratedProposal(CamelModel):
    """Complete proposal result returned to the caller"""
    proposal: str
    estimated_budget: str
    timeline: str
    key_points: List[str] = Field(default_factory=list)
    match_score: int = Field(..., ge=0, le=100)
    missing_skills: List[str] = Field(default_factory=list)
