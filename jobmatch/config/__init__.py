"""Configuration management for the matching engine."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config, validate_config_file
from .models import (
    AppConfig,
    EmployerConfig,
    JobSeekerConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
    MatchVariant,
    ScoringWeights,
    SkillMatchStrategy,
    VariantConfig,
)

__all__ = [
    # Loader functions
    "load_config",
    "validate_config_file",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "VariantConfig",
    "JobSeekerConfig",
    "EmployerConfig",
    "ScoringWeights",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "MatchVariant",
    "SkillMatchStrategy",
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
