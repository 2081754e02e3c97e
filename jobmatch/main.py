"""Command-line entry point: rank a request file and print the response as JSON.

The request file (YAML or JSON) holds one anchor and the records to rank:

    mode: jobs            # jobs (rank jobs for a profile) or candidates
    anchor: {...}         # profile for "jobs", job posting for "candidates"
    records: [...]        # job postings for "jobs", candidates for "candidates"
    limit: 10             # optional
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from dotenv import load_dotenv

from jobmatch.config.environment import EnvironmentConfig, load_environment_config
from jobmatch.config.exceptions import ConfigurationError
from jobmatch.config.loader import load_config
from jobmatch.config.models import AppConfig
from jobmatch.domain.models import Opportunity, Profile
from jobmatch.logging import get_logger
from jobmatch.logging.config import configure_logging
from jobmatch.logging.context import log_context
from jobmatch.matching.exceptions import InvalidInputError
from jobmatch.matching.ranker import rank_candidates_for_job, rank_jobs_for_profile
from jobmatch.matching.utils import (
    build_candidate_recommendations_response,
    build_job_recommendations_response,
)

logger = get_logger(__name__, component="cli")

MODES = ("jobs", "candidates")

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_CONFIG_ERROR = 2


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and resolve logging settings.

    Config file priority: CLI flag > JOBMATCH_CONFIG > default locations.
    Log level priority: CLI flag > LOG_LEVEL > config file.

    Returns:
        Tuple of (AppConfig, EnvironmentConfig) with log_level and log_format resolved

    Raises:
        ConfigurationError: If configuration is invalid
    """
    env_config = load_environment_config()
    app_config = load_config(config_path or env_config.config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = app_config.logging.level

    if not env_config.log_format:
        env_config.log_format = app_config.logging.format

    return app_config, env_config


def load_ranking_request(input_path: Path) -> Dict[str, Any]:
    """
    Read a ranking request file.

    Raises:
        InvalidInputError: If the file is missing, unparsable or has the wrong shape
    """
    try:
        with open(input_path, "r") as f:
            request = yaml.safe_load(f)
    except OSError as e:
        raise InvalidInputError(f"Cannot read request file {input_path}: {e}", field="input") from e
    except yaml.YAMLError as e:
        raise InvalidInputError(f"Cannot parse request file {input_path}: {e}", field="input") from e

    if not isinstance(request, dict):
        raise InvalidInputError("Request file must contain a mapping", field="input")
    if not isinstance(request.get("records") or [], list):
        raise InvalidInputError("'records' must be a list", field="records")
    return request


def run_request(
    request: Dict[str, Any],
    app_config: AppConfig,
    mode: str,
    limit: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Rank a parsed request and build the response envelope.

    Args:
        request: Parsed request (anchor, records, optional limit)
        app_config: Scoring configuration
        mode: "jobs" or "candidates"
        limit: Limit override (takes precedence over the request's limit)

    Raises:
        InvalidInputError: If the request is invalid
    """
    records: List[Any] = request.get("records") or []
    if limit is None:
        limit = request.get("limit")
    anchor = request.get("anchor")

    if mode == "jobs":
        ranked = rank_jobs_for_profile(anchor, records, limit=limit, config=app_config)
        profile = anchor if isinstance(anchor, Profile) else Profile.model_validate(anchor)
        return build_job_recommendations_response(profile, ranked)

    ranked = rank_candidates_for_job(anchor, records, limit=limit, config=app_config)
    job = anchor if isinstance(anchor, Opportunity) else Opportunity.model_validate(anchor)
    return build_candidate_recommendations_response(job, ranked, total_candidates=len(records))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 success, 1 invalid input, 2 configuration error).
    """
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Job board matching - rank jobs for a profile or candidates for a job"
    )
    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Path to the ranking request (YAML or JSON)",
    )
    parser.add_argument(
        "--mode",
        choices=MODES,
        default=None,
        help="What to rank (overrides the request's 'mode'; default: jobs)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of results (default: configured default_limit)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )

    args = parser.parse_args(argv)

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level)
    except ConfigurationError as e:
        print(f"Configuration error:\n{e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    configure_logging(
        level=env_config.log_level,
        format_type=env_config.log_format,
        environment=env_config.environment,
    )

    try:
        request = load_ranking_request(args.input)
        mode = args.mode or str(request.get("mode") or "jobs").strip().lower()
        if mode not in MODES:
            raise InvalidInputError(
                f"Unknown mode '{mode}'. Must be one of: {', '.join(MODES)}", field="mode"
            )

        with log_context(request_file=str(args.input), mode=mode):
            response = run_request(request, app_config, mode, limit=args.limit)
    except InvalidInputError as e:
        logger.error(
            f"Invalid ranking request: {e}",
            extra={"event": "cli.request.invalid", "field": e.field},
        )
        return EXIT_INVALID_INPUT

    print(json.dumps(response, indent=2, ensure_ascii=False))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
