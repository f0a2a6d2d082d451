"""Exceptions raised by taskboard codecs and operations."""


class TaskboardError(Exception):
    """Base class for taskboard errors."""


class ParseError(TaskboardError):
    """Text is not a valid JSON board document."""


class ValidationError(TaskboardError):
    """Input is structurally valid but cannot be accepted.

    Raised for CSV files missing required headers (listed in ``missing``)
    and for ticket statuses a mutation does not allow.
    """

    def __init__(self, message: str, missing: list[str] | None = None) -> None:
        super().__init__(message)
        self.missing = missing or []


class FormatError(TaskboardError):
    """An unsupported board file encoding was requested."""
