"""Match scoring engine.

This module implements the two scoring variants:
1. JobMatchScorer: ranks job postings for a job seeker (skills, experience,
   location, salary, category)
2. CandidateMatchScorer: ranks candidates for an employer's job posting
   (skills, experience, location, languages, optional category)

Scorers are pure: they hold only immutable configuration, do no I/O and can
be shared between concurrent requests.
"""

import logging
from typing import Any, List, Optional, Type

from pydantic import BaseModel, ValidationError

from jobmatch.config.models import ScoringWeights
from jobmatch.domain.models import Candidate, Opportunity, Profile

from .exceptions import InvalidInputError
from .models import FactorContribution, MatchResult
from .scoring import (
    EMPLOYER_EXPERIENCE_REFERENCE,
    JOB_SEEKER_EXPERIENCE_REFERENCE,
    employer_experience_points,
    job_seeker_experience_points,
    score_category,
    score_experience,
    score_languages,
    score_location,
    score_salary,
    score_skills,
)
from .strategies import SkillMatcher, containment_match

logger = logging.getLogger(__name__)


def coerce_record(value: Any, model: Type[BaseModel], role: str) -> BaseModel:
    """Return value as an instance of model.

    Instances of the model pass through untouched. Mappings and other model
    instances (e.g. a Candidate where a Profile is expected) are validated.

    Args:
        value: Record supplied by the caller
        model: Expected domain model
        role: Name used in error messages ("anchor", "candidate")

    Raises:
        InvalidInputError: If value is None or cannot be read as model
    """
    if value is None:
        raise InvalidInputError(f"{role} record is missing", field=role)
    if isinstance(value, model):
        return value
    if isinstance(value, BaseModel):
        value = value.model_dump()
    if not isinstance(value, dict):
        raise InvalidInputError(
            f"{role} record must be a {model.__name__} or a mapping, got {type(value).__name__}",
            field=role,
        )
    try:
        return model.model_validate(value)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise InvalidInputError(
            f"{role} record is not a valid {model.__name__}: {problems}", field=role
        ) from e


class BaseMatchScorer:
    """Shared plumbing for the scoring variants.

    Subclasses set anchor_model and record_model, and implement _factors().
    """

    anchor_model: Type[BaseModel] = BaseModel
    record_model: Type[BaseModel] = BaseModel
    default_weights: ScoringWeights = None

    def __init__(
        self,
        weights: Optional[ScoringWeights] = None,
        skill_matcher: SkillMatcher = containment_match,
        logger_instance: logging.Logger = None,
    ):
        """Initialize a scorer.

        Args:
            weights: Factor weights (defaults to the variant's stock weights)
            skill_matcher: Strategy deciding whether a required skill is covered
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.weights = weights or self.default_weights
        self.skill_matcher = skill_matcher
        self.logger = logger_instance or logger

    def score(self, anchor: Any, record: Any) -> MatchResult:
        """Score one record against the anchor.

        Missing optional fields skip the affected factor; they never raise.

        Args:
            anchor: Anchor record (model instance or mapping)
            record: Record to score (model instance or mapping)

        Returns:
            MatchResult with the contributing factors

        Raises:
            InvalidInputError: If the anchor or record is missing or malformed
        """
        anchor = coerce_record(anchor, self.anchor_model, "anchor")
        record = coerce_record(record, self.record_model, "record")
        return self.score_validated(anchor, record)

    def score_validated(self, anchor: BaseModel, record: BaseModel) -> MatchResult:
        """Score records already known to be of the right types."""
        factors = [f for f in self._factors(anchor, record) if f is not None]
        result = MatchResult.from_factors(factors)

        self.logger.debug(
            f"Scored record {getattr(record, 'id', None)}: {result.total_score}",
            extra={
                "event": "matching.record.scored",
                "record_id": getattr(record, "id", None),
                "total_score": result.total_score,
                "factors": result.factor_names,
            },
        )
        return result

    def _factors(self, anchor: BaseModel, record: BaseModel) -> List[Optional[FactorContribution]]:
        raise NotImplementedError


class JobMatchScorer(BaseMatchScorer):
    """Scores job postings for a job seeker.

    Factors (stock weights): skills 40, experience 20, location 15,
    salary 15, category 10.
    """

    anchor_model = Profile
    record_model = Opportunity
    default_weights = ScoringWeights.job_seeker_defaults()

    def _factors(
        self, profile: Profile, job: Opportunity
    ) -> List[Optional[FactorContribution]]:
        w = self.weights
        return [
            score_skills(profile.skills, job.required_skills, w.skills_weight, self.skill_matcher),
            score_experience(
                profile.experience_years,
                job.min_experience_years,
                w.experience_weight,
                job_seeker_experience_points,
                JOB_SEEKER_EXPERIENCE_REFERENCE,
            ),
            score_location(
                profile.city,
                profile.country,
                job.city,
                job.country,
                remote_match=job.is_remote,
                weight=w.location_weight,
            ),
            score_salary(
                profile.desired_salary_min,
                job.salary_max,
                w.salary_or_language_weight,
                desired_currency=profile.salary_currency,
                offered_currency=job.salary_currency,
            ),
            score_category(job.category, profile.preferred_categories, w.category_weight),
        ]


class CandidateMatchScorer(BaseMatchScorer):
    """Scores candidates for an employer's job posting.

    Factors (stock weights): skills 50, experience 25, location 15,
    languages 10. Category is only scored if given a non-zero weight.
    """

    anchor_model = Opportunity
    record_model = Candidate
    default_weights = ScoringWeights.employer_defaults()

    def _factors(
        self, job: Opportunity, candidate: Candidate
    ) -> List[Optional[FactorContribution]]:
        w = self.weights
        return [
            score_skills(
                candidate.skills, job.required_skills, w.skills_weight, self.skill_matcher
            ),
            score_experience(
                candidate.experience_years,
                job.min_experience_years,
                w.experience_weight,
                employer_experience_points,
                EMPLOYER_EXPERIENCE_REFERENCE,
            ),
            score_location(
                candidate.city,
                candidate.country,
                job.city,
                job.country,
                remote_match=candidate.open_to_remote and job.is_remote,
                weight=w.location_weight,
            ),
            score_languages(
                candidate.languages, job.required_languages, w.salary_or_language_weight
            ),
            score_category(job.category, candidate.preferred_categories, w.category_weight),
        ]
