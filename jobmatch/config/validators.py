"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List

# Above this a single factor decides most rankings on its own
DOMINANT_WEIGHT = 70
LARGE_DEFAULT_LIMIT = 500

# Factors that are off in the stock configuration and not worth a warning
DISABLED_BY_DEFAULT = {("employer", "category_weight")}

VARIANT_KEYS = {"weights", "default_limit"}


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for potential issues and return warnings.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    for variant in ("job_seeker", "employer"):
        section = config_dict.get(variant)
        if not isinstance(section, dict):
            continue

        for key in sorted(set(section) - VARIANT_KEYS):
            warning_messages.append(f"Unknown setting {variant}.{key} is ignored")

        weights = section.get("weights")
        if isinstance(weights, dict):
            for name, value in weights.items():
                if not isinstance(value, int):
                    continue
                if value == 0 and (variant, name) not in DISABLED_BY_DEFAULT:
                    warning_messages.append(
                        f"{variant}.weights.{name} is 0; this factor will never contribute"
                    )
                elif value >= DOMINANT_WEIGHT:
                    warning_messages.append(
                        f"{variant}.weights.{name} is {value}; this factor will dominate rankings"
                    )

        default_limit = section.get("default_limit")
        if isinstance(default_limit, int) and default_limit > LARGE_DEFAULT_LIMIT:
            warning_messages.append(
                f"Large {variant}.default_limit ({default_limit}) may make ranking responses slow"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
