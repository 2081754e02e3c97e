"""Shared fixtures for the test suite."""

import logging

import pytest

from jobmatch.domain.models import Candidate, Opportunity, Profile
from jobmatch.logging.config import ContextualFilter
from jobmatch.logging.context import clear_log_context

ENV_VARS = ("LOG_LEVEL", "LOG_FORMAT", "ENVIRONMENT", "JOBMATCH_CONFIG")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every environment variable the engine reads."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture(autouse=True)
def clean_log_context():
    """Keep logging context from leaking between tests."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def seeker_profile():
    """Job seeker with every scored field filled in."""
    return Profile(
        id=42,
        skills=["JavaScript", "React", "Node.js"],
        experience_years=3,
        city="Almaty",
        country="Kazakhstan",
        desired_salary_min=500000,
        desired_salary_max=700000,
        salary_currency="KZT",
        preferred_categories=["it"],
        languages=["Russian", "English"],
    )


@pytest.fixture
def frontend_job():
    """Job that fits seeker_profile on every factor."""
    return Opportunity(
        id=1,
        title="Frontend Developer",
        required_skills=["JavaScript", "React"],
        min_experience_years=2,
        city="Almaty",
        country="Kazakhstan",
        salary_min=450000,
        salary_max=600000,
        salary_currency="KZT",
        category="it",
        required_languages=["Russian"],
    )


@pytest.fixture
def backend_candidate():
    """Candidate for employer-side tests."""
    return Candidate(
        id=7,
        skills=["Python", "SQL", "Django"],
        experience_years=4,
        city="Astana",
        country="Kazakhstan",
        languages=["English", "Russian"],
        open_to_remote=True,
        current_position="Backend Developer",
    )


@pytest.fixture
def restore_root_logger():
    """Undo configure_logging() changes to the root logger."""
    root_logger = logging.getLogger()
    level = root_logger.level

    yield root_logger

    for handler in list(root_logger.handlers):
        if any(isinstance(f, ContextualFilter) for f in handler.filters):
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)
