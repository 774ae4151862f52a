"""Helpers for working with several results at once."""
from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, overload

from betterstandards.container.result import Result

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")

MIN_RESULTS = 2
MAX_RESULTS = 4


def all_ok(*results: Result[Any, Any]) -> bool:
    """Return True if every given result is a Success."""
    return all(result.is_ok() for result in results)


@overload
def if_ok(
    action: Callable[[A, B], Any],
    first: Result[A, Any],
    second: Result[B, Any],
    /,
) -> None: ...


@overload
def if_ok(
    action: Callable[[A, B, C], Any],
    first: Result[A, Any],
    second: Result[B, Any],
    third: Result[C, Any],
    /,
) -> None: ...


@overload
def if_ok(
    action: Callable[[A, B, C, D], Any],
    first: Result[A, Any],
    second: Result[B, Any],
    third: Result[C, Any],
    fourth: Result[D, Any],
    /,
) -> None: ...


def if_ok(action: Callable[..., Any], /, *results: Result[Any, Any]) -> None:
    """Call action with the unwrapped values if every result is a Success.

    If any result is a Failure nothing happens: the action is not called and
    no error is reported.

    Args:
        action: Callable taking one argument per result
        *results: Two to four results

    Raises:
        TypeError: If fewer than two or more than four results are given
    """
    if not MIN_RESULTS <= len(results) <= MAX_RESULTS:
        raise TypeError(
            f"if_ok() takes {MIN_RESULTS} to {MAX_RESULTS} results, "
            f"got {len(results)}"
        )
    if all_ok(*results):
        action(*(result.unwrap() for result in results))
