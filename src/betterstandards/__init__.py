"""Better Standards.

A Result type with Success and Failure variants for explicit error handling,
and indexed iteration helpers.
"""
from __future__ import annotations

__version__ = "0.1.0"

from betterstandards.container import Failure, Result, Success, all_ok, if_ok
from betterstandards.exceptions import (
    BetterStandardsError,
    EnumeratorExhaustedError,
    FilterError,
    UnwrapError,
)
from betterstandards.iterator import Enumerable, Enumerator, Indexed

__all__ = [
    "__version__",
    # Result
    "Result",
    "Success",
    "Failure",
    "all_ok",
    "if_ok",
    # Iteration
    "Enumerable",
    "Enumerator",
    "Indexed",
    # Exceptions
    "BetterStandardsError",
    "UnwrapError",
    "FilterError",
    "EnumeratorExhaustedError",
]
