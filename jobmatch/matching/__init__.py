"""Recommendation scoring engine for the job board.

This module provides:
- JobMatchScorer / CandidateMatchScorer: score one record against an anchor
- Ranker: score, sort and truncate a candidate set
- MatchResult / FactorContribution / RankedMatch: result structures
- Utility functions for building API payloads and recommendation log rows
"""

from .engine import CandidateMatchScorer, JobMatchScorer
from .exceptions import InvalidInputError, MatchingError
from .models import FactorContribution, MatchResult, RankedMatch
from .ranker import (
    Ranker,
    build_candidate_ranker,
    build_job_ranker,
    rank_candidates_for_job,
    rank_jobs_for_profile,
)
from .strategies import containment_match, exact_match, get_skill_matcher
from .utils import (
    assess_profile_completeness,
    build_candidate_recommendations_response,
    build_job_recommendations_response,
    build_match_payload,
    build_recommendation_log_entries,
)

__all__ = [
    "JobMatchScorer",
    "CandidateMatchScorer",
    "Ranker",
    "build_job_ranker",
    "build_candidate_ranker",
    "rank_jobs_for_profile",
    "rank_candidates_for_job",
    "MatchResult",
    "FactorContribution",
    "RankedMatch",
    "MatchingError",
    "InvalidInputError",
    "containment_match",
    "exact_match",
    "get_skill_matcher",
    "build_match_payload",
    "assess_profile_completeness",
    "build_job_recommendations_response",
    "build_candidate_recommendations_response",
    "build_recommendation_log_entries",
]
