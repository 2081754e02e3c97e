"""Domain models for the matching engine."""

from .models import Candidate, Opportunity, Profile

__all__ = ["Profile", "Opportunity", "Candidate"]
