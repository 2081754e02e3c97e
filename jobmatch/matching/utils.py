"""Utility functions for preparing ranked results for downstream consumers.

This module provides helpers for building the API response payloads, the
profile completeness summary shown next to job recommendations, and the rows
the data layer stores in its recommendation log.
"""

from typing import Any, Dict, List, Optional, Sequence

from jobmatch.domain.models import Opportunity, Profile

from .models import RankedMatch

# Profile fields that feed a job seeker -> job factor
SCORED_PROFILE_FIELDS = (
    "skills",
    "experience_years",
    "city",
    "country",
    "desired_salary_min",
    "preferred_categories",
)


def build_match_payload(ranked: RankedMatch) -> Dict[str, Any]:
    """Build the API payload for one ranked record.

    The record's own fields (including any extra columns the data layer
    supplied) are kept, and the match annotation is appended.

    Args:
        ranked: RankedMatch from the ranker

    Returns:
        Dict with all record fields plus:
        - match_score: Total score (0-100)
        - match_percentage: Same value as match_score
        - match_factors: List of factor dicts (factor, evidence, score)
    """
    payload = ranked.record.model_dump(mode="json")
    payload["match_score"] = ranked.result.total_score
    payload["match_percentage"] = ranked.result.match_percentage
    payload["match_factors"] = [f.to_dict() for f in ranked.result.factors]
    return payload


def assess_profile_completeness(profile: Profile) -> Dict[str, Any]:
    """Summarize how much of a job seeker profile the scorer can use.

    A profile is complete when it lists skills and years of experience.
    missing_fields lists every scored field that is empty, so the UI can
    prompt the seeker to fill it in.

    Returns:
        Dict with has_complete_profile (bool) and missing_fields (list of names)
    """
    missing = []
    for name in SCORED_PROFILE_FIELDS:
        value = getattr(profile, name)
        if value is None or (isinstance(value, list) and not value):
            missing.append(name)

    return {
        "has_complete_profile": bool(profile.skills) and profile.experience_years is not None,
        "missing_fields": missing,
    }


def build_job_recommendations_response(
    profile: Profile, ranked: Sequence[RankedMatch]
) -> Dict[str, Any]:
    """Build the response for a job seeker's recommendations request."""
    return {
        "recommendations": [build_match_payload(item) for item in ranked],
        "user_profile": assess_profile_completeness(profile),
    }


def build_candidate_recommendations_response(
    job: Opportunity,
    ranked: Sequence[RankedMatch],
    total_candidates: Optional[int] = None,
) -> Dict[str, Any]:
    """Build the response for an employer's candidate recommendations request.

    Args:
        job: The job posting candidates were ranked for
        ranked: Ranked candidates
        total_candidates: Size of the scored pool (defaults to len(ranked))
    """
    return {
        "job_title": job.title,
        "candidates": [build_match_payload(item) for item in ranked],
        "total_candidates": len(ranked) if total_candidates is None else total_candidates,
    }


def build_recommendation_log_entries(
    user_id: Any, ranked: Sequence[RankedMatch]
) -> List[Dict[str, Any]]:
    """Build the rows recording which jobs were recommended to a user.

    Records without an id cannot be logged and are left out.
    """
    return [
        {"user_id": user_id, "job_id": item.record.id, "match_score": item.match_score}
        for item in ranked
        if item.record.id is not None
    ]
