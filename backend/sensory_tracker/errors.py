"""Domain errors raised by the core.

The HTTP layer alone decides which status code each one maps to.
"""

from typing import Optional


class TrackerError(Exception):
    """Base class for every error raised by the tracker core."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TrackerError):
    """Input is malformed: a missing field, a wrong type, or a value outside its enum."""

    def __init__(self, message: str, violations: Optional[list[str]] = None):
        super().__init__(message)
        self.violations = violations or [message]


class NotFoundError(TrackerError):
    """A referenced entity id does not exist."""


class UnexpectedError(TrackerError):
    """Any other internal fault."""
