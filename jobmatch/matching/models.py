"""Data models for match results.

This module defines the structures produced by the scorers and the ranker.
They are derived per call and never persisted.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from jobmatch.domain.models import Candidate, Opportunity

FACTOR_SKILLS = "skills"
FACTOR_EXPERIENCE = "experience"
FACTOR_LOCATION = "location"
FACTOR_SALARY = "salary"
FACTOR_CATEGORY = "category"
FACTOR_LANGUAGES = "languages"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Scores are never negative, so this is the same as rounding halves up.
    Python's round() rounds halves to even, which would turn 2.5 into 2.
    """
    if value < 0:
        return -round_half_up(-value)
    return int(value + 0.5)


@dataclass(frozen=True)
class FactorContribution:
    """Points awarded by one scoring factor.

    Attributes:
        factor: Factor name (skills, experience, location, salary, category, languages)
        score: Points contributed, before rounding
        details: Raw evidence for the score (matched skills, experience delta, ...)
    """

    factor: str
    score: float
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten into a single dict: factor name, evidence, score."""
        return {"factor": self.factor, **self.details, "score": self.score}


@dataclass(frozen=True)
class MatchResult:
    """Compatibility between one anchor and one opportunity or candidate.

    Attributes:
        total_score: Sum of factor scores rounded to the nearest integer (0-100)
        match_percentage: Same value as total_score
        factors: Contributions of the factors that applied, in evaluation order
    """

    total_score: int
    match_percentage: int
    factors: List[FactorContribution] = field(default_factory=list)

    @classmethod
    def from_factors(cls, factors: List[FactorContribution]) -> "MatchResult":
        """Build a result whose totals are derived from the factors."""
        total = round_half_up(sum(f.score for f in factors))
        return cls(total_score=total, match_percentage=total, factors=list(factors))

    def get_factor(self, name: str) -> Optional[FactorContribution]:
        """Return the contribution for a factor, or None if it was skipped."""
        for contribution in self.factors:
            if contribution.factor == name:
                return contribution
        return None

    @property
    def factor_names(self) -> List[str]:
        """Names of the factors that contributed, in order."""
        return [f.factor for f in self.factors]


@dataclass(frozen=True)
class RankedMatch:
    """A ranked record decorated with its match result.

    The wrapped record is the caller's record, untouched.

    Attributes:
        record: Opportunity (when ranking jobs) or Candidate (when ranking candidates)
        result: MatchResult for the record against the anchor
    """

    record: Union[Opportunity, Candidate]
    result: MatchResult

    @property
    def match_score(self) -> int:
        """Convenience accessor for the total score."""
        return self.result.total_score
