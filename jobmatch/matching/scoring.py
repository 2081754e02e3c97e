"""Factor scoring functions.

Each function scores one factor and returns a FactorContribution, or None
when the factor does not apply:
- its inputs are missing on either side (the factor is skipped, never an error)
- its weight is 0 (the factor is disabled)
- for location, category and languages: nothing matched

Tiered factors define their points against a reference weight (the stock
weight of the factor). A configured weight scales every tier proportionally.
"""

from typing import Callable, List, Optional, Sequence

from .models import (
    FACTOR_CATEGORY,
    FACTOR_EXPERIENCE,
    FACTOR_LANGUAGES,
    FACTOR_LOCATION,
    FACTOR_SALARY,
    FACTOR_SKILLS,
    FactorContribution,
)
from .strategies import SkillMatcher, containment_match

ExperienceTiers = Callable[[int], int]

JOB_SEEKER_EXPERIENCE_REFERENCE = 20
EMPLOYER_EXPERIENCE_REFERENCE = 25
LOCATION_REFERENCE = 15
SALARY_REFERENCE = 15

SAME_CITY_POINTS = 15
SAME_COUNTRY_POINTS = 10
REMOTE_POINTS = 15


def _scale(points: float, weight: int, reference: int) -> float:
    """Scale tier points defined against the reference weight to the actual weight."""
    if weight == reference:
        return float(points)
    return points * weight / reference


def _same_place(left: Optional[str], right: Optional[str]) -> bool:
    """Case-insensitive equality of two place names. Missing values never match."""
    if left is None or right is None:
        return False
    return left.casefold() == right.casefold()


def job_seeker_experience_points(delta: int) -> int:
    """Experience points (out of 20) for a job seeker looking at a job.

    delta is the seeker's years minus the job's minimum.
    """
    if 0 <= delta <= 2:
        return 20
    if 2 < delta <= 5:
        # Overqualified but acceptable
        return 15
    if -1 <= delta < 0:
        return 10
    return 0


def employer_experience_points(delta: int) -> int:
    """Experience points (out of 25) for a candidate seen by an employer.

    Unlike the job seeker side, overqualification is never penalized to zero.
    """
    if 0 <= delta <= 3:
        return 25
    if delta > 3:
        return 20
    if delta >= -1:
        return 15
    return 0


def salary_points(ratio: float) -> int:
    """Salary points (out of 15) for offered maximum / desired minimum."""
    if 1.0 <= ratio <= 1.3:
        return 15
    if ratio > 1.3:
        # Better than expected
        return 12
    if ratio >= 0.8:
        return 8
    return 0


def score_skills(
    profile_skills: Sequence[str],
    required_skills: Sequence[str],
    weight: int,
    matcher: SkillMatcher = containment_match,
) -> Optional[FactorContribution]:
    """Score the share of required skills covered by the profile.

    Skipped when either side lists no skills.

    Args:
        profile_skills: Skills on the profile or candidate
        required_skills: Skills the job requires
        weight: Points awarded when every required skill matches
        matcher: Strategy deciding whether one required skill is covered

    Returns:
        FactorContribution with score = matched / required * weight, or None
    """
    if weight <= 0 or not profile_skills or not required_skills:
        return None

    candidate_skills = [s.lower() for s in profile_skills]
    required = [s.lower() for s in required_skills]
    matched: List[str] = [skill for skill in required if matcher(skill, candidate_skills)]

    return FactorContribution(
        factor=FACTOR_SKILLS,
        score=(len(matched) / len(required)) * weight,
        details={
            "matched": matched,
            "matched_count": len(matched),
            "required_count": len(required),
        },
    )


def score_experience(
    years: Optional[int],
    required_years: Optional[int],
    weight: int,
    tiers: ExperienceTiers,
    reference: int,
) -> Optional[FactorContribution]:
    """Score experience against the job's minimum.

    Both values must be present; 0 years is a real value, not a missing one.
    The contribution is listed even when it scores 0 so the caller can show
    the experience gap.

    Args:
        years: Years of experience of the profile or candidate
        required_years: Minimum years the job requires
        weight: Configured experience weight
        tiers: Maps the experience delta to points out of the reference weight
        reference: Weight the tier points are defined against
    """
    if weight <= 0 or years is None or required_years is None:
        return None

    delta = years - required_years
    return FactorContribution(
        factor=FACTOR_EXPERIENCE,
        score=_scale(tiers(delta), weight, reference),
        details={"years": years, "required_years": required_years, "delta": delta},
    )


def score_location(
    city: Optional[str],
    country: Optional[str],
    job_city: Optional[str],
    job_country: Optional[str],
    remote_match: bool,
    weight: int,
) -> Optional[FactorContribution]:
    """Score location with a priority chain: same city, same country, remote.

    The first rule that matches wins; rules never stack.

    Args:
        city: City of the profile or candidate
        country: Country of the profile or candidate
        job_city: City of the job
        job_country: Country of the job
        remote_match: Whether remote work satisfies both sides
        weight: Configured location weight
    """
    if weight <= 0:
        return None

    if _same_place(city, job_city):
        match_type, points, value = "same_city", SAME_CITY_POINTS, job_city
    elif _same_place(country, job_country):
        match_type, points, value = "same_country", SAME_COUNTRY_POINTS, job_country
    elif remote_match:
        match_type, points, value = "remote", REMOTE_POINTS, None
    else:
        return None

    details = {"match_type": match_type}
    if value is not None:
        details["value"] = value
    return FactorContribution(
        factor=FACTOR_LOCATION,
        score=_scale(points, weight, LOCATION_REFERENCE),
        details=details,
    )


def score_salary(
    desired_min: Optional[float],
    offered_max: Optional[float],
    weight: int,
    desired_currency: Optional[str] = None,
    offered_currency: Optional[str] = None,
) -> Optional[FactorContribution]:
    """Score the job's salary ceiling against the desired floor.

    Skipped when either amount is missing, when the desired floor is 0 (the
    ratio is undefined), or when both currencies are given and differ.
    """
    if weight <= 0 or desired_min is None or offered_max is None or desired_min <= 0:
        return None
    if (
        desired_currency is not None
        and offered_currency is not None
        and desired_currency.upper() != offered_currency.upper()
    ):
        return None

    ratio = offered_max / desired_min
    return FactorContribution(
        factor=FACTOR_SALARY,
        score=_scale(salary_points(ratio), weight, SALARY_REFERENCE),
        details={"ratio": ratio, "desired_min": desired_min, "offered_max": offered_max},
    )


def score_category(
    category: Optional[str],
    preferred_categories: Sequence[str],
    weight: int,
) -> Optional[FactorContribution]:
    """Award the full weight when the job's category is a preferred one."""
    if weight <= 0 or category is None:
        return None

    preferred = {c.casefold() for c in preferred_categories}
    if category.casefold() not in preferred:
        return None
    return FactorContribution(
        factor=FACTOR_CATEGORY,
        score=float(weight),
        details={"matched": category},
    )


def score_languages(
    languages: Sequence[str],
    required_languages: Optional[Sequence[str]],
    weight: int,
) -> Optional[FactorContribution]:
    """All-or-nothing language check.

    Awards the full weight only when every required language is spoken
    (case-insensitive exact match). An empty requirement list is met by
    everyone; None means the job never stated its languages and skips the
    factor.
    """
    if weight <= 0 or required_languages is None:
        return None

    spoken = {lang.casefold() for lang in languages}
    matched = [lang for lang in required_languages if lang.casefold() in spoken]
    if len(matched) != len(required_languages):
        return None
    return FactorContribution(
        factor=FACTOR_LANGUAGES,
        score=float(weight),
        details={"matched": matched},
    )
