"""Configuration loader for the matching engine."""

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from .exceptions import ConfigurationError
from .models import AppConfig
from .validators import check_for_warnings, emit_warnings

DEFAULT_CONFIG_LOCATIONS = (
    Path("config.yaml"),
    Path("config") / "config.yaml",
)


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load and validate configuration from a YAML file.

    Config file location:
    1. Use config_path if given (must exist)
    2. Try config.yaml in the current directory
    3. Try ./config/config.yaml
    4. Fall back to the stock configuration (AppConfig defaults)

    Args:
        config_path: Optional path to configuration file

    Returns:
        Validated AppConfig

    Raises:
        ConfigurationError: If the file cannot be read, parsed or validated
    """
    config_file = _find_config_file(config_path)
    if config_file is None:
        return AppConfig()

    try:
        with open(config_file, "r") as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse YAML configuration: {e}",
            suggestions=[
                "Check YAML syntax in your config file",
                "Ensure proper indentation (use spaces, not tabs)",
            ],
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read configuration file: {e}",
            suggestions=[
                f"Ensure {config_file} is readable",
                "Check file permissions",
            ],
        ) from e

    # An empty file means "stock configuration"
    if config_dict is None:
        return AppConfig()

    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            "Configuration file must contain a mapping at the top level",
            suggestions=["Review config.example.yaml for the expected layout"],
        )

    warnings = check_for_warnings(config_dict)
    if warnings:
        emit_warnings(warnings)

    try:
        return AppConfig.model_validate(config_dict)
    except ValidationError as e:
        raise ConfigurationError(
            "Configuration validation failed",
            errors=format_validation_errors(e),
            suggestions=[
                "Review config.example.yaml for correct format",
                "Make sure the weights of each variant add up to 100",
                "Verify field types match the expected schema",
            ],
        ) from e


def format_validation_errors(error: ValidationError) -> List[str]:
    """Turn pydantic validation errors into one readable line each."""
    messages = []
    for err in error.errors():
        field_path = " -> ".join(str(loc) for loc in err["loc"]) or "(root)"
        error_type = err["type"]

        if error_type == "missing":
            messages.append(f"Missing required field: {field_path}")
        elif error_type in ("string_type", "int_type", "int_parsing", "bool_type", "list_type"):
            expected_type = error_type.split("_")[0]
            messages.append(
                f"Invalid type for '{field_path}': expected {expected_type}, got {err.get('input')!r}"
            )
        elif "enum" in error_type:
            messages.append(f"Invalid value for '{field_path}': {err['msg']}")
        else:
            messages.append(f"{field_path}: {err['msg']}")
    return messages


def _find_config_file(config_path: Optional[Path] = None) -> Optional[Path]:
    """
    Find the configuration file.

    Args:
        config_path: Optional explicit path to config file

    Returns:
        Path to configuration file, or None if no file exists in the default locations

    Raises:
        ConfigurationError: If an explicit path was given and does not exist
    """
    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(
                f"Specified configuration file not found: {config_path}",
                suggestions=[
                    f"Ensure {config_path} exists",
                    "Copy config.example.yaml to config.yaml",
                ],
            )
        return config_path

    for candidate in DEFAULT_CONFIG_LOCATIONS:
        if candidate.exists():
            return candidate
    return None


def validate_config_file(config_path: Path) -> bool:
    """
    Validate a configuration file, printing the outcome.

    Useful for pre-deployment checks.

    Args:
        config_path: Path to configuration file

    Returns:
        True if valid, False otherwise
    """
    try:
        load_config(config_path)
    except ConfigurationError as e:
        print(f"✗ Configuration validation failed:\n{e}")
        return False
    print(f"✓ Configuration file {config_path} is valid")
    return True
