"""Matching engine exceptions.

All matching exceptions inherit from MatchingError so callers can catch every
engine failure with a single except clause.
"""


class MatchingError(Exception):
    """Base exception for all matching engine errors."""

    pass


class InvalidInputError(MatchingError):
    """Raised when a ranking request is structurally invalid.

    Examples:
    - Anchor record missing entirely (None)
    - Anchor or candidate row that cannot be read as the expected record type
    - Limit that is not a positive integer

    Missing optional fields are NOT invalid input: the affected factor is
    skipped instead.
    """

    def __init__(self, message: str, field: str = None) -> None:
        """Initialize with the offending field, if known.

        Args:
            message: Human-readable error message
            field: Name of the argument or field that was rejected
        """
        super().__init__(message)
        self.field = field
