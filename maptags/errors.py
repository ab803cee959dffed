"""Exceptions raised by the tag board core."""

from typing import Any, Dict, Optional


class TagBoardError(Exception):
    """Base exception for all tag board errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidStateError(TagBoardError):
    """Raised when an operation is attempted in a state that forbids it."""


class IndexOutOfRangeError(TagBoardError, IndexError):
    """Raised when a tag or page index falls outside the valid bounds."""

    def __init__(self, index: int, size: int, what: str = "tag"):
        super().__init__(
            f"{what} index {index} out of range",
            {"index": index, "size": size},
        )
        self.index = index
        self.size = size


class PreconditionNotMetError(TagBoardError):
    """Raised when an activation is not structurally eligible for a build.

    This is a recognised skip rather than a failure; callers are expected to
    catch it and leave the board unbuilt for the rest of the session.
    """
