"""Structured logging helpers for the matching engine."""

import logging
from typing import Optional, Union


class ComponentLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that tags records with a component and keeps call-site extras."""

    def process(self, msg, kwargs):
        """Merge the adapter's component into the call's extra (call wins on conflict)."""
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(
    name: str, component: Optional[str] = None
) -> Union[logging.Logger, ComponentLoggerAdapter]:
    """Get a logger, optionally tagging every record with a component field.

    Args:
        name: Logger name (typically __name__)
        component: Optional component identifier (e.g. "ranker", "cli")

    Returns:
        Logger or ComponentLoggerAdapter instance

    Example:
        >>> logger = get_logger(__name__, component="ranker")
        >>> logger.info("Ranking completed", extra={"event": "ranking.completed"})
    """
    logger = logging.getLogger(name)
    if component:
        return ComponentLoggerAdapter(logger, {"component": component})
    return logger
