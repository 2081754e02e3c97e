#!/usr/bin/env python3
"""Validate a matching configuration file before deploying it.

Usage: python verify_config.py [path]   (default: config.example.yaml)
"""

import sys
from pathlib import Path

from jobmatch.config import load_config, validate_config_file


def verify_config(config_file: Path) -> bool:
    """Validate config_file and print the effective weights and default limits."""
    if not validate_config_file(config_file):
        return False

    config = load_config(config_file)
    for name in ("job_seeker", "employer"):
        variant = getattr(config, name)
        weights = variant.weights
        print(
            f"  - {name}: skills {weights.skills_weight}, experience {weights.experience_weight}, "
            f"location {weights.location_weight}, "
            f"salary/languages {weights.salary_or_language_weight}, "
            f"category {weights.category_weight}"
        )
        print(f"    default limit: {variant.default_limit}")
    print(f"  - Skill matching: {config.skill_matching}")
    return True


if __name__ == "__main__":
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("config.example.yaml")
    sys.exit(0 if verify_config(path) else 1)
