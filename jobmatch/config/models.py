"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class SkillMatchStrategy(str, Enum):
    """How a required skill is compared with profile skills."""

    CONTAINMENT = "containment"
    EXACT = "exact"


class MatchVariant(str, Enum):
    """Which side of the job board a ranking request comes from."""

    JOB_SEEKER = "job_seeker"
    EMPLOYER = "employer"


TOTAL_WEIGHT = 100


class ScoringWeights(BaseModel):
    """Maximum points per factor for one scoring variant.

    salary_or_language_weight is the salary factor for the job seeker variant
    and the languages factor for the employer variant. A weight of 0 disables
    the factor.
    """

    skills_weight: int = Field(40, ge=0, le=TOTAL_WEIGHT, description="Skills factor weight")
    experience_weight: int = Field(
        20, ge=0, le=TOTAL_WEIGHT, description="Experience factor weight"
    )
    location_weight: int = Field(15, ge=0, le=TOTAL_WEIGHT, description="Location factor weight")
    salary_or_language_weight: int = Field(
        15, ge=0, le=TOTAL_WEIGHT, description="Salary (job seeker) or languages (employer) weight"
    )
    category_weight: int = Field(10, ge=0, le=TOTAL_WEIGHT, description="Category factor weight")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_total(self):
        """Weights must add up to exactly 100 so scores stay on a 0-100 scale."""
        if self.total != TOTAL_WEIGHT:
            raise ValueError(
                f"Scoring weights must sum to {TOTAL_WEIGHT}, got {self.total}"
            )
        return self

    @property
    def total(self) -> int:
        """Sum of all factor weights."""
        return (
            self.skills_weight
            + self.experience_weight
            + self.location_weight
            + self.salary_or_language_weight
            + self.category_weight
        )

    @classmethod
    def job_seeker_defaults(cls) -> "ScoringWeights":
        """Weights for ranking jobs against a job seeker profile."""
        return cls(
            skills_weight=40,
            experience_weight=20,
            location_weight=15,
            salary_or_language_weight=15,
            category_weight=10,
        )

    @classmethod
    def employer_defaults(cls) -> "ScoringWeights":
        """Weights for ranking candidates against a job posting."""
        return cls(
            skills_weight=50,
            experience_weight=25,
            location_weight=15,
            salary_or_language_weight=10,
            category_weight=0,
        )


class VariantConfig(BaseModel):
    """Settings for one ranking variant.

    A partial weights block is merged onto the variant's default weights, so
    a config file only has to list the weights it changes (as long as the
    result still sums to 100).
    """

    weights: ScoringWeights = Field(
        default_factory=ScoringWeights.job_seeker_defaults, description="Factor weights"
    )
    default_limit: int = Field(10, ge=1, description="Results returned when no limit is requested")

    @classmethod
    def base_weights(cls) -> ScoringWeights:
        """Weights that a partial weights block is merged onto."""
        return ScoringWeights.job_seeker_defaults()

    @model_validator(mode="before")
    @classmethod
    def merge_partial_weights(cls, data: Any) -> Any:
        """Fill weights missing from the config file with the variant defaults."""
        if isinstance(data, dict) and isinstance(data.get("weights"), dict):
            merged = {**cls.base_weights().model_dump(), **data["weights"]}
            data = {**data, "weights": merged}
        return data


class JobSeekerConfig(VariantConfig):
    """Job recommendations: top 10 jobs by default."""


class EmployerConfig(VariantConfig):
    """Candidate recommendations: top 20 candidates by default."""

    weights: ScoringWeights = Field(
        default_factory=ScoringWeights.employer_defaults, description="Factor weights"
    )
    default_limit: int = Field(20, ge=1, description="Results returned when no limit is requested")

    @classmethod
    def base_weights(cls) -> ScoringWeights:
        """Weights that a partial weights block is merged onto."""
        return ScoringWeights.employer_defaults()


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True}


class AppConfig(BaseModel):
    """Root configuration object for the matching engine.

    Every field has a default reproducing the stock scoring rules, so
    AppConfig() is a valid configuration.
    """

    job_seeker: JobSeekerConfig = Field(
        default_factory=JobSeekerConfig,
        description="Ranking jobs for a job seeker",
    )
    employer: EmployerConfig = Field(
        default_factory=EmployerConfig,
        description="Ranking candidates for an employer",
    )
    skill_matching: SkillMatchStrategy = Field(
        SkillMatchStrategy.CONTAINMENT,
        description="Skill matching strategy (containment or exact)",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    model_config = {"use_enum_values": True}

    @field_validator("skill_matching", mode="before")
    @classmethod
    def normalize_skill_matching(cls, v):
        """Accept the strategy name in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    def get_variant(self, variant: MatchVariant) -> VariantConfig:
        """Get the settings block for a variant."""
        if MatchVariant(variant) == MatchVariant.EMPLOYER:
            return self.employer
        return self.job_seeker

    def resolve_limit(self, variant: MatchVariant, requested: Optional[int] = None) -> int:
        """Return the requested limit, or the variant's default_limit for None.

        Requested values are passed through untouched; the ranker validates them.
        """
        if requested is None:
            return self.get_variant(variant).default_limit
        return requested
