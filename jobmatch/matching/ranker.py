"""Ranking of candidate sets against one anchor.

The ranker scores every record against the anchor, sorts by score
(descending, stable: equal scores keep their input order) and keeps the top N.
It is fail-fast: one invalid record rejects the whole batch.
"""

from typing import Any, List, Optional, Sequence

from jobmatch.config.models import AppConfig, MatchVariant
from jobmatch.logging import get_logger
from jobmatch.logging.context import log_context

from .engine import BaseMatchScorer, CandidateMatchScorer, JobMatchScorer, coerce_record
from .exceptions import InvalidInputError
from .models import RankedMatch
from .strategies import get_skill_matcher

logger = get_logger(__name__, component="ranker")


def validate_limit(limit: Any) -> int:
    """Check that limit is a positive integer.

    Raises:
        InvalidInputError: If limit is not an int (bools rejected) or is <= 0
    """
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise InvalidInputError(
            f"limit must be a positive integer, got {limit!r}", field="limit"
        )
    if limit <= 0:
        raise InvalidInputError(f"limit must be a positive integer, got {limit}", field="limit")
    return limit


class Ranker:
    """Applies a scorer to a candidate set and returns the top matches."""

    def __init__(self, scorer: BaseMatchScorer, variant: MatchVariant = MatchVariant.JOB_SEEKER):
        """Initialize Ranker.

        Args:
            scorer: Scorer used for every record
            variant: Label for logs (job_seeker or employer)
        """
        self.scorer = scorer
        self.variant = MatchVariant(variant)

    def rank(self, anchor: Any, records: Sequence[Any], limit: int) -> List[RankedMatch]:
        """Score, sort and truncate.

        Algorithm:
        1. Validate limit and anchor (nothing is scored if either is invalid)
        2. Coerce every record into the scorer's record model
        3. Score each record against the anchor
        4. Stable sort by total score, descending
        5. Keep the first `limit` entries

        Args:
            anchor: Profile (ranking jobs) or Opportunity (ranking candidates)
            records: Records to rank; may be empty
            limit: Maximum number of results (positive integer)

        Returns:
            At most min(limit, len(records)) RankedMatch entries, best first

        Raises:
            InvalidInputError: If limit, anchor or any record is invalid
        """
        try:
            limit = validate_limit(limit)
            anchor = coerce_record(anchor, self.scorer.anchor_model, "anchor")
            if records is None:
                records = []
            validated = [
                coerce_record(record, self.scorer.record_model, f"record[{index}]")
                for index, record in enumerate(records)
            ]
        except InvalidInputError as e:
            logger.warning(
                f"Ranking request rejected: {e}",
                extra={
                    "event": "ranking.rejected",
                    "variant": self.variant.value,
                    "field": e.field,
                },
            )
            raise

        with log_context(variant=self.variant.value, anchor_id=getattr(anchor, "id", None)):
            ranked = [
                RankedMatch(record=record, result=self.scorer.score_validated(anchor, record))
                for record in validated
            ]
            # sorted() is stable, so ties keep their input order
            ranked = sorted(ranked, key=lambda item: item.result.total_score, reverse=True)
            top = ranked[:limit]

            logger.info(
                f"Ranked {len(validated)} records, returning {len(top)}",
                extra={
                    "event": "ranking.completed",
                    "scored_count": len(validated),
                    "returned_count": len(top),
                    "limit": limit,
                    "top_score": top[0].match_score if top else None,
                },
            )
        return top


def build_job_ranker(config: Optional[AppConfig] = None) -> Ranker:
    """Build a ranker that ranks jobs for a job seeker."""
    config = config or AppConfig()
    scorer = JobMatchScorer(
        weights=config.job_seeker.weights,
        skill_matcher=get_skill_matcher(config.skill_matching),
    )
    return Ranker(scorer, variant=MatchVariant.JOB_SEEKER)


def build_candidate_ranker(config: Optional[AppConfig] = None) -> Ranker:
    """Build a ranker that ranks candidates for a job posting."""
    config = config or AppConfig()
    scorer = CandidateMatchScorer(
        weights=config.employer.weights,
        skill_matcher=get_skill_matcher(config.skill_matching),
    )
    return Ranker(scorer, variant=MatchVariant.EMPLOYER)


def rank_jobs_for_profile(
    profile: Any,
    jobs: Sequence[Any],
    limit: Optional[int] = None,
    config: Optional[AppConfig] = None,
) -> List[RankedMatch]:
    """Rank jobs for a job seeker.

    limit defaults to the configured default_limit; any positive limit is honored.
    """
    config = config or AppConfig()
    resolved = config.resolve_limit(MatchVariant.JOB_SEEKER, limit)
    return build_job_ranker(config).rank(profile, jobs, resolved)


def rank_candidates_for_job(
    job: Any,
    candidates: Sequence[Any],
    limit: Optional[int] = None,
    config: Optional[AppConfig] = None,
) -> List[RankedMatch]:
    """Rank candidates for an employer's job posting.

    limit defaults to the configured default_limit; any positive limit is honored.
    """
    config = config or AppConfig()
    resolved = config.resolve_limit(MatchVariant.EMPLOYER, limit)
    return build_candidate_ranker(config).rank(job, candidates, resolved)
