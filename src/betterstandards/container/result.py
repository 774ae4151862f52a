"""Result pattern for explicit error handling.

Provides the Success and Failure variants of Result to replace exception-based
control flow. A Result is immutable: every operation that would change its
state returns a new object instead.

Example:
    >>> parsed = Result.of(lambda: int("102b"))
    >>> parsed.is_err()
    True
    >>> parsed.map(lambda n: n * 2).or_else(0)
    0
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar, overload

from betterstandards.exceptions import FilterError, UnwrapError
from betterstandards.shared import config
from betterstandards.shared.logging import get_logger

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

logger = get_logger(__name__)

# Never converted into a Failure by Result.of()
_UNCAPTURED = (MemoryError, UnwrapError)


def _log_captured(exc: Exception) -> None:
    if config.settings.log_captured_failures:
        logger.debug(
            "Captured failure",
            error_type=type(exc).__name__,
            error=str(exc),
        )


class Result(ABC, Generic[T, E]):
    """Either a Success holding a value of type T or a Failure holding an E.

    Result has exactly two subclasses, Success and Failure. Both are frozen
    dataclasses, compare structurally and support pattern matching::

        match result:
            case Success(value):
                ...
            case Failure(error):
                ...

    Callbacks passed to any operation are called synchronously, at most once,
    and only for the variant they belong to.
    """

    __slots__ = ()

    # =========================================================================
    # Construction
    # =========================================================================
    @staticmethod
    def of(supplier: Callable[[], U]) -> Result[U, Exception]:
        """Evaluate a supplier and capture its outcome.

        Args:
            supplier: Zero-argument callable that may raise

        Returns:
            Success with the returned value, or Failure with the raised
            exception. MemoryError, UnwrapError and BaseExceptions that are
            not Exceptions propagate instead.
        """
        try:
            return Success(supplier())
        except _UNCAPTURED:
            raise
        except Exception as exc:
            _log_captured(exc)
            return Failure(exc)

    @staticmethod
    def of_action(action: Callable[[], Any]) -> Result[None, Exception]:
        """Run a side-effecting action and capture its outcome.

        Same capture rules as of(); the action's return value is discarded
        and success yields an empty Success.
        """
        try:
            action()
        except _UNCAPTURED:
            raise
        except Exception as exc:
            _log_captured(exc)
            return Failure(exc)
        return Success.empty()

    # =========================================================================
    # Inspection
    # =========================================================================
    @abstractmethod
    def is_ok(self) -> bool:
        """Return True if this is a Success."""

    @abstractmethod
    def is_err(self) -> bool:
        """Return True if this is a Failure."""

    @abstractmethod
    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        """Return True if this is a Success whose value satisfies predicate.

        The predicate is not called on a Failure.
        """

    @abstractmethod
    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        """Return True if this is a Failure whose error satisfies predicate.

        The predicate is not called on a Success.
        """

    @abstractmethod
    def if_ok(self, action: Callable[[T], Any]) -> None:
        """Call action with the value if this is a Success."""

    @abstractmethod
    def if_err(self, action: Callable[[E], Any]) -> None:
        """Call action with the error if this is a Failure."""

    @abstractmethod
    def match(
        self,
        ok_action: Callable[[T], U],
        err_action: Callable[[E], U],
    ) -> U:
        """Call exactly one of the two actions, depending on the variant.

        Args:
            ok_action: Called with the value of a Success
            err_action: Called with the error of a Failure

        Returns:
            Whatever the called action returns
        """

    # =========================================================================
    # Extraction
    # =========================================================================
    @abstractmethod
    def unwrap(self) -> T:
        """Return the value of a Success.

        Raises:
            UnwrapError: If this is a Failure. This is a programming error,
                check the variant first or use expect()/or_else().
        """

    @abstractmethod
    def expect(self, message: str) -> T:
        """Return the value of a Success, like unwrap().

        Meant for call sites where a Failure is logically impossible.

        Args:
            message: Message of the UnwrapError raised on a Failure

        Raises:
            UnwrapError: If this is a Failure
        """

    @abstractmethod
    def or_else(self, default: T) -> T:
        """Return the value of a Success, otherwise default."""

    @abstractmethod
    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """Return the value of a Success, otherwise supplier().

        The supplier is only called on a Failure.
        """

    @abstractmethod
    def or_(self, supplier: Callable[[], Result[T, E]]) -> Result[T, E]:
        """Return this Result if it is a Success, otherwise supplier().

        Allows fallback chains of fallible computations without unwrapping.
        """

    @abstractmethod
    def ok(self) -> T | None:
        """Return the value of a Success, None for a Failure."""

    @abstractmethod
    def err(self) -> E | None:
        """Return the error of a Failure, None for a Success."""

    # =========================================================================
    # Transformation
    # =========================================================================
    @abstractmethod
    def map(self, func: Callable[[T], U]) -> Result[U, E]:
        """Map the value of a Success, leaving a Failure untouched.

        ``r.map(lambda x: x) == r`` and
        ``r.map(f).map(g) == r.map(lambda x: g(f(x)))``.
        """

    @abstractmethod
    def flat_map(self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a fallible step onto a Success.

        Returns ``func(value)`` for a Success and the same Failure otherwise.
        Success is the unit: ``Success(v).flat_map(f) == f(v)`` and
        ``r.flat_map(Success) == r``.
        """

    @abstractmethod
    def map_ok(self, func: Callable[[T], U]) -> U | None:
        """Return func(value) for a Success, None for a Failure."""

    @abstractmethod
    def map_err(self, func: Callable[[E], F]) -> F | None:
        """Return func(error) for a Failure, None for a Success.

        Unlike map(), this does not return a Result. Use map_err_result()
        to transform the error and keep the container.
        """

    @abstractmethod
    def map_err_result(self, func: Callable[[E], F]) -> Result[T, F]:
        """Map the error of a Failure, leaving a Success untouched."""

    @abstractmethod
    def map_or(self, func: Callable[[T], U], default: U) -> U:
        """Return func(value) for a Success, otherwise default."""

    @abstractmethod
    def map_or_else(
        self,
        ok_mapper: Callable[[T], U],
        err_mapper: Callable[[E], U],
    ) -> U:
        """Return ok_mapper(value) for a Success, err_mapper(error) otherwise."""

    @abstractmethod
    def peek_ok(self, action: Callable[[T], Any]) -> Result[T, E]:
        """Call action with the value of a Success and return self."""

    @abstractmethod
    def peek_err(self, action: Callable[[E], Any]) -> Result[T, E]:
        """Call action with the error of a Failure and return self."""

    @abstractmethod
    def to_void(self) -> Result[None, E]:
        """Discard the value of a Success, leaving a Failure untouched."""

    @abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> Result[T, FilterError]:
        """Keep a Success only if its value satisfies predicate.

        Returns:
            The same Success if predicate(value) holds, otherwise a Failure
            holding a FilterError. A Failure always becomes a Failure holding
            a FilterError; its original error is not carried over and the
            predicate is not called.
        """

    @overload
    def stream(self) -> Iterator[T]: ...

    @overload
    def stream(self, flat_mapper: Callable[[T], Iterable[U]]) -> Iterator[U]: ...

    @abstractmethod
    def stream(
        self, flat_mapper: Callable[[T], Iterable[Any]] | None = None
    ) -> Iterator[Any]:
        """Return a single-pass iterator over the value.

        Args:
            flat_mapper: Optional function applied to the value; its result
                is flattened into the iterator

        Returns:
            One element (or the mapped elements) for a Success, nothing for
            a Failure
        """

    def __iter__(self) -> Iterator[T]:
        return self.stream()


@dataclass(frozen=True, slots=True, repr=False)
class Success(Result[T, E]):
    """Successful result."""

    value: T

    @classmethod
    def of(cls, value: T) -> Success[T, E]:  # type: ignore[override]
        """Create a Success holding value."""
        return cls(value)

    @classmethod
    def empty(cls) -> Success[None, E]:
        """Create a Success without payload."""
        return cls(None)

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        return bool(predicate(self.value))

    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        return False

    def if_ok(self, action: Callable[[T], Any]) -> None:
        action(self.value)

    def if_err(self, action: Callable[[E], Any]) -> None:
        return None

    def match(self, ok_action: Callable[[T], U], err_action: Callable[[E], U]) -> U:
        return ok_action(self.value)

    def unwrap(self) -> T:
        return self.value

    def expect(self, message: str) -> T:
        return self.value

    def or_else(self, default: T) -> T:
        return self.value

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        return self.value

    def or_(self, supplier: Callable[[], Result[T, E]]) -> Result[T, E]:
        return self

    def ok(self) -> T | None:
        return self.value

    def err(self) -> E | None:
        return None

    def map(self, func: Callable[[T], U]) -> Result[U, E]:
        return Success(func(self.value))

    def flat_map(self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return func(self.value)

    def map_ok(self, func: Callable[[T], U]) -> U | None:
        return func(self.value)

    def map_err(self, func: Callable[[E], F]) -> F | None:
        return None

    def map_err_result(self, func: Callable[[E], F]) -> Result[T, F]:
        return Success(self.value)

    def map_or(self, func: Callable[[T], U], default: U) -> U:
        return func(self.value)

    def map_or_else(self, ok_mapper: Callable[[T], U], err_mapper: Callable[[E], U]) -> U:
        return ok_mapper(self.value)

    def peek_ok(self, action: Callable[[T], Any]) -> Result[T, E]:
        action(self.value)
        return self

    def peek_err(self, action: Callable[[E], Any]) -> Result[T, E]:
        return self

    def to_void(self) -> Result[None, E]:
        return Success.empty()

    def filter(self, predicate: Callable[[T], bool]) -> Result[T, FilterError]:
        if predicate(self.value):
            return Success(self.value)
        return Failure(
            FilterError(
                "Success value did not satisfy the condition",
                {"value": self.value},
            )
        )

    def stream(
        self, flat_mapper: Callable[[T], Iterable[Any]] | None = None
    ) -> Iterator[Any]:
        if flat_mapper is None:
            return iter((self.value,))
        return iter(flat_mapper(self.value))

    def __repr__(self) -> str:
        return f"Success({self.value!r})"

    def __str__(self) -> str:
        return f"Success({self.value})"


@dataclass(frozen=True, slots=True, repr=False)
class Failure(Result[T, E]):
    """Failed result."""

    error: E

    @classmethod
    def of(cls, error: E) -> Failure[T, E]:  # type: ignore[override]
        """Create a Failure holding error."""
        return cls(error)

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        return False

    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        return bool(predicate(self.error))

    def if_ok(self, action: Callable[[T], Any]) -> None:
        return None

    def if_err(self, action: Callable[[E], Any]) -> None:
        action(self.error)

    def match(self, ok_action: Callable[[T], U], err_action: Callable[[E], U]) -> U:
        return err_action(self.error)

    def unwrap(self) -> NoReturn:
        self._raise(f"Called unwrap() on Failure: {self.error!r}")

    def expect(self, message: str) -> NoReturn:
        self._raise(message)

    def _raise(self, message: str) -> NoReturn:
        if isinstance(self.error, BaseException):
            raise UnwrapError(message, self.error) from self.error
        raise UnwrapError(message, self.error)

    def or_else(self, default: T) -> T:
        return default

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        return supplier()

    def or_(self, supplier: Callable[[], Result[T, E]]) -> Result[T, E]:
        return supplier()

    def ok(self) -> T | None:
        return None

    def err(self) -> E | None:
        return self.error

    def map(self, func: Callable[[T], U]) -> Result[U, E]:
        return Failure(self.error)

    def flat_map(self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return Failure(self.error)

    def map_ok(self, func: Callable[[T], U]) -> U | None:
        return None

    def map_err(self, func: Callable[[E], F]) -> F | None:
        return func(self.error)

    def map_err_result(self, func: Callable[[E], F]) -> Result[T, F]:
        return Failure(func(self.error))

    def map_or(self, func: Callable[[T], U], default: U) -> U:
        return default

    def map_or_else(self, ok_mapper: Callable[[T], U], err_mapper: Callable[[E], U]) -> U:
        return err_mapper(self.error)

    def peek_ok(self, action: Callable[[T], Any]) -> Result[T, E]:
        return self

    def peek_err(self, action: Callable[[E], Any]) -> Result[T, E]:
        action(self.error)
        return self

    def to_void(self) -> Result[None, E]:
        return Failure(self.error)

    def filter(self, predicate: Callable[[T], bool]) -> Result[T, FilterError]:
        return Failure(FilterError("Cannot filter a Failure"))

    def stream(
        self, flat_mapper: Callable[[T], Iterable[Any]] | None = None
    ) -> Iterator[Any]:
        return iter(())

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"

    def __str__(self) -> str:
        return f"Failure({self.error})"
