"""Core domain models for profiles, job postings, and candidates.

This module defines the records the matching engine consumes:
- Profile: job seeker profile used as the anchor when ranking jobs
- Opportunity: job posting, ranked for a profile or used as the anchor when ranking candidates
- Candidate: job seeker as seen by an employer (profile plus remote/position fields)

Records are immutable. Rows from the data layer may carry extra columns
(company name, logo, saved flags...); those are kept so they flow through to
the ranked output untouched.
"""

from typing import List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

RecordId = Union[int, str]


def _clean_string(v: Optional[str]) -> Optional[str]:
    """Strip a string, mapping blank values to None."""
    if v is None:
        return None
    stripped = str(v).strip()
    return stripped if stripped else None


def _clean_string_list(v) -> List[str]:
    """Strip every entry of a list, dropping blanks. None becomes an empty list."""
    if v is None:
        return []
    if isinstance(v, str):
        v = [v]
    cleaned = []
    for item in v:
        if item is None:
            continue
        stripped = str(item).strip()
        if stripped:
            cleaned.append(stripped)
    return cleaned


class Profile(BaseModel):
    """Job seeker profile.

    Optional fields model data the seeker has not filled in yet. A factor
    whose inputs are missing is skipped during scoring rather than scored as
    a mismatch, so None here is meaningful and distinct from 0.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        json_schema_extra={"example": {
            "id": 42,
            "skills": ["JavaScript", "React"],
            "experience_years": 3,
            "city": "Almaty",
            "country": "Kazakhstan",
            "desired_salary_min": 400000,
            "desired_salary_max": 600000,
            "salary_currency": "KZT",
            "preferred_categories": ["it"],
            "languages": ["Russian", "English"],
        }},
    )

    id: Optional[RecordId] = Field(
        None, validation_alias=AliasChoices("id", "user_id"), description="Opaque user identifier"
    )
    skills: List[str] = Field(default_factory=list, description="Skills listed on the profile")
    experience_years: Optional[int] = Field(None, ge=0, description="Years of experience")
    city: Optional[str] = Field(None, description="City of residence")
    country: Optional[str] = Field(None, description="Country of residence")
    desired_salary_min: Optional[float] = Field(None, ge=0, description="Desired salary floor")
    desired_salary_max: Optional[float] = Field(None, ge=0, description="Desired salary ceiling")
    salary_currency: Optional[str] = Field(None, description="Currency of the desired salary")
    preferred_categories: List[str] = Field(
        default_factory=list, description="Job categories the seeker is interested in"
    )
    preferred_job_types: List[str] = Field(
        default_factory=list, description="Preferred job types (full_time, contract...)"
    )
    languages: List[str] = Field(default_factory=list, description="Spoken languages")

    @field_validator("city", "country", "salary_currency", mode="before")
    @classmethod
    def strip_strings(cls, v: Optional[str]) -> Optional[str]:
        """Strip whitespace; blank strings become None."""
        return _clean_string(v)

    @field_validator(
        "skills", "preferred_categories", "preferred_job_types", "languages", mode="before"
    )
    @classmethod
    def clean_lists(cls, v) -> List[str]:
        """Strip list entries and drop blanks."""
        return _clean_string_list(v)


class Candidate(Profile):
    """Job seeker as ranked for an employer's job posting."""

    model_config = ConfigDict(
        json_schema_extra={"example": {
            "id": 7,
            "skills": ["Python", "Django"],
            "experience_years": 5,
            "city": "Astana",
            "country": "Kazakhstan",
            "languages": ["English", "Kazakh"],
            "open_to_remote": True,
            "current_position": "Backend Developer",
        }},
    )

    open_to_remote: bool = Field(False, description="Whether the candidate accepts remote work")
    current_position: Optional[str] = Field(None, description="Current job title")
    headline: Optional[str] = Field(None, description="Profile headline")
    is_open_to_work: Optional[bool] = Field(None, description="Open-to-work flag")

    @field_validator("open_to_remote", mode="before")
    @classmethod
    def default_open_to_remote(cls, v) -> bool:
        """Treat a missing flag as not open to remote."""
        return False if v is None else v

    @field_validator("current_position", "headline", mode="before")
    @classmethod
    def strip_candidate_strings(cls, v: Optional[str]) -> Optional[str]:
        """Strip whitespace; blank strings become None."""
        return _clean_string(v)


class Opportunity(BaseModel):
    """Job posting.

    Accepts both the Python field names and the column names used by the job
    board's database (skills_required, experience_years_min, languages_required).
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        json_schema_extra={"example": {
            "id": 1001,
            "title": "Frontend Developer",
            "skills_required": ["JavaScript", "React", "TypeScript"],
            "experience_years_min": 2,
            "city": "Almaty",
            "country": "Kazakhstan",
            "is_remote": False,
            "salary_min": 450000,
            "salary_max": 700000,
            "salary_currency": "KZT",
            "category": "it",
            "languages_required": ["Russian"],
        }},
    )

    id: Optional[RecordId] = Field(
        None, validation_alias=AliasChoices("id", "job_id"), description="Opaque job identifier"
    )
    title: Optional[str] = Field(None, description="Job title")
    required_skills: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("required_skills", "skills_required"),
        description="Skills the job requires",
    )
    min_experience_years: Optional[int] = Field(
        None,
        ge=0,
        validation_alias=AliasChoices("min_experience_years", "experience_years_min"),
        description="Minimum years of experience",
    )
    city: Optional[str] = Field(None, description="Job city")
    country: Optional[str] = Field(None, description="Job country")
    is_remote: bool = Field(False, description="Whether the job can be done remotely")
    salary_min: Optional[float] = Field(None, ge=0, description="Salary range lower bound")
    salary_max: Optional[float] = Field(None, ge=0, description="Salary range upper bound")
    salary_currency: Optional[str] = Field(None, description="Currency of the salary range")
    category: Optional[str] = Field(None, description="Job category")
    required_languages: Optional[List[str]] = Field(
        None,
        validation_alias=AliasChoices("required_languages", "languages_required"),
        description="Languages the job requires",
    )

    @field_validator("title", "city", "country", "salary_currency", "category", mode="before")
    @classmethod
    def strip_strings(cls, v: Optional[str]) -> Optional[str]:
        """Strip whitespace; blank strings become None."""
        return _clean_string(v)

    @field_validator("required_skills", mode="before")
    @classmethod
    def clean_lists(cls, v) -> List[str]:
        """Strip list entries and drop blanks."""
        return _clean_string_list(v)

    @field_validator("required_languages", mode="before")
    @classmethod
    def clean_required_languages(cls, v) -> Optional[List[str]]:
        """Like clean_lists, but None (not stated) stays distinct from []."""
        if v is None:
            return None
        return _clean_string_list(v)

    @field_validator("is_remote", mode="before")
    @classmethod
    def default_is_remote(cls, v) -> bool:
        """Treat a missing flag as on-site."""
        return False if v is None else v
