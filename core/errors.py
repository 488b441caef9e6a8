"""Error types for the tag cloud pipeline.

Every failure is surfaced immediately - nothing is retried or silently skipped.
"""

from typing import Optional


class TagCloudError(Exception):
    """Base class for all tag cloud errors."""


class SourceUnavailableError(TagCloudError, OSError):
    """Raised when the input text cannot be opened or read."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = str(path)
        self.reason = reason
        message = f"Cannot read input file: '{self.path}'"
        if reason:
            message += f" ({reason})"
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]


class InvalidCountError(TagCloudError, ValueError):
    """Raised when the requested number of words is not a positive integer."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Word count must be a positive integer, got: {value!r}")


class SinkUnavailableError(TagCloudError, OSError):
    """Raised when the output file cannot be created or written."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = str(path)
        self.reason = reason
        message = f"Cannot write output file: '{self.path}'"
        if reason:
            message += f" ({reason})"
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]


def require_positive_count(value) -> int:
    """Validate a requested word count.

    Args:
        value: Requested number of words (int or numeric string)

    Returns:
        The count as int

    Raises:
        InvalidCountError: If value is not an integer greater than 0
    """
    if isinstance(value, bool):
        raise InvalidCountError(value)
    try:
        count = int(value)
    except (TypeError, ValueError):
        raise InvalidCountError(value) from None
    if isinstance(value, float) and value != count:
        raise InvalidCountError(value)
    if count <= 0:
        raise InvalidCountError(value)
    return count
