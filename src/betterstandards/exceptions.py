"""Library exceptions.

All betterstandards exceptions inherit from BetterStandardsError.
"""
from __future__ import annotations

from typing import Any


class BetterStandardsError(Exception):
    """Base exception for betterstandards errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class UnwrapError(BetterStandardsError, RuntimeError):
    """Raised when unwrap() or expect() is called on a Failure.

    This signals a programming error and is not meant to be caught. It is
    never captured by Result.of().
    """

    def __init__(self, message: str, error: Any = None) -> None:
        super().__init__(message)
        self.error = error


class FilterError(BetterStandardsError, LookupError):
    """Error value carried by the Failure that Result.filter() produces."""


class EnumeratorExhaustedError(BetterStandardsError, LookupError):
    def __init__(self, consumed: int) -> None:
        super().__init__("Enumerator is exhausted", {"consumed": consumed})
        self.consumed = consumed
