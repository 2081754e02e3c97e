"""Job Board Matching Engine.

Deterministic, rule-based scoring that ranks job postings against a job
seeker's profile and candidates against a job posting.
"""

__version__ = "1.0.0"
