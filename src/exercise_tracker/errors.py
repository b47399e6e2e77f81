"""Error types raised by the exercise tracker services."""


class TrackerError(Exception):
    """Base error carrying a message safe to return to API callers."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TrackerError):
    """A required field is missing or empty."""


class NotFoundError(TrackerError):
    """The requested user does not exist."""


class FormatError(TrackerError):
    """A field is present but cannot be parsed."""
