"""Per-request fields for structured logs.

The CLI and the ranker open a scope around each ranking request; every
record logged inside it picks up the scope's fields through ContextualFilter.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator

_request_fields: ContextVar[Dict[str, Any]] = ContextVar("jobmatch_request_fields", default={})


def get_log_context() -> Dict[str, Any]:
    """Fields of the innermost open scope (a copy)."""
    return dict(_request_fields.get())


@contextmanager
def log_context(**fields: Any) -> Iterator[Dict[str, Any]]:
    """Attach fields to log records emitted inside the with block.

    Nested scopes inherit the outer fields and may override them. Fields
    whose value is None are left out, so an anchor without an id does not
    log anchor_id=None.
    """
    merged = {**_request_fields.get()}
    merged.update((key, value) for key, value in fields.items() if value is not None)
    token = _request_fields.set(merged)
    try:
        yield dict(merged)
    finally:
        _request_fields.reset(token)


def clear_log_context() -> None:
    """Forget every open scope in the current context."""
    _request_fields.set({})
