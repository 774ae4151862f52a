"""Indexed iteration.

An Enumerator is a cursor producing (index, element) pairs over a source,
with the index starting at 0. An Enumerable hands out a fresh Enumerator for
every traversal.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, NamedTuple, TypeVar

from betterstandards.exceptions import EnumeratorExhaustedError

T = TypeVar("T")

_MISSING: Any = object()


class Indexed(NamedTuple, Generic[T]):
    """An element together with its zero-based position."""

    index: int
    value: T


class Enumerator(Generic[T]):
    """Pull cursor over (index, element) pairs.

    Example:
        >>> cursor = Enumerator(["a", "b"])
        >>> cursor.next()
        Indexed(index=0, value='a')
        >>> cursor.has_next()
        True
    """

    def __init__(self, source: Iterable[T]) -> None:
        self._source = iter(source)
        self._index = 0
        self._lookahead: Any = _MISSING

    @classmethod
    def from_iterator(cls, source: Iterator[T]) -> Enumerator[T]:
        """Create an Enumerator that consumes source."""
        return cls(source)

    @property
    def index(self) -> int:
        """Index the next pair will carry."""
        return self._index

    def has_next(self) -> bool:
        """Report whether another pair is available, without consuming it."""
        if self._lookahead is _MISSING:
            self._lookahead = next(self._source, _MISSING)
        return self._lookahead is not _MISSING

    def next(self) -> Indexed[T]:
        """Consume and return the next pair.

        Raises:
            EnumeratorExhaustedError: If has_next() is False
        """
        if not self.has_next():
            raise EnumeratorExhaustedError(self._index)
        value, self._lookahead = self._lookahead, _MISSING
        pair = Indexed(self._index, value)
        self._index += 1
        return pair

    def into_iterator(self) -> Iterator[T]:
        """Drop the indices, yielding the remaining bare elements."""
        return (pair.value for pair in self)

    def __iter__(self) -> Iterator[Indexed[T]]:
        return self

    def __next__(self) -> Indexed[T]:
        try:
            return self.next()
        except EnumeratorExhaustedError:
            raise StopIteration from None


class _Elements(Generic[T]):
    """Re-iterable view of an Enumerable without indices."""

    def __init__(self, enumerable: Enumerable[T]) -> None:
        self._enumerable = enumerable

    def __iter__(self) -> Iterator[T]:
        return self._enumerable.enumerator().into_iterator()


class Enumerable(Generic[T]):
    """Source of independent Enumerators.

    Iterating an Enumerable yields Indexed pairs. Each traversal starts over
    at index 0, as long as the underlying source can be iterated again.
    """

    def __init__(self, factory: Callable[[], Enumerator[T]]) -> None:
        self._factory = factory

    @classmethod
    def from_iterable(cls, source: Iterable[T]) -> Enumerable[T]:
        """Create an Enumerable over a re-iterable source such as a list."""
        return cls(lambda: Enumerator(source))

    def enumerator(self) -> Enumerator[T]:
        """Return a fresh Enumerator."""
        return self._factory()

    def into_iterable(self) -> Iterable[T]:
        """Return a re-iterable view of the bare elements."""
        return _Elements(self)

    def __iter__(self) -> Iterator[Indexed[T]]:
        return self.enumerator()
