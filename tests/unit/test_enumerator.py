"""Tests for indexed iteration."""
from __future__ import annotations

import pytest

from betterstandards.exceptions import EnumeratorExhaustedError
from betterstandards.iterator import Enumerable, Enumerator, Indexed


class TestEnumerator:
    """Tests for Enumerator."""

    def test_pairs_in_order(self) -> None:
        """Test pulling every pair, then exhaustion."""
        cursor = Enumerator(["a", "b", "c"])
        assert cursor.next() == (0, "a")
        assert cursor.next() == (1, "b")
        assert cursor.next() == (2, "c")
        assert not cursor.has_next()
        with pytest.raises(EnumeratorExhaustedError) as excinfo:
            cursor.next()
        assert excinfo.value.consumed == 3

    def test_has_next_does_not_consume(self) -> None:
        """Test that looking ahead keeps the element."""
        cursor = Enumerator.from_iterator(iter(["x"]))
        assert cursor.has_next()
        assert cursor.has_next()
        assert cursor.next() == Indexed(index=0, value="x")
        assert not cursor.has_next()

    def test_empty_source(self) -> None:
        """Test an enumerator without elements."""
        cursor = Enumerator([])
        assert not cursor.has_next()
        with pytest.raises(EnumeratorExhaustedError):
            cursor.next()

    def test_none_elements(self) -> None:
        """Test that None is an ordinary element."""
        assert list(Enumerator([None, None])) == [(0, None), (1, None)]

    def test_index_property(self) -> None:
        """Test the index of the next pair."""
        cursor = Enumerator("ab")
        assert cursor.index == 0
        cursor.next()
        assert cursor.index == 1

    def test_iterator_protocol(self) -> None:
        """Test use in a for loop."""
        pairs = [(i, v) for i, v in Enumerator("xyz")]
        assert pairs == [(0, "x"), (1, "y"), (2, "z")]

    def test_indexed_fields(self) -> None:
        """Test named access to a pair."""
        pair = Enumerator(["a"]).next()
        assert pair.index == 0
        assert pair.value == "a"

    def test_into_iterator(self) -> None:
        """Test dropping the indices of the remaining elements."""
        cursor = Enumerator(["a", "b", "c"])
        cursor.next()
        assert list(cursor.into_iterator()) == ["b", "c"]


class TestEnumerable:
    """Tests for Enumerable."""

    def test_independent_traversals(self) -> None:
        """Test that each enumerator starts over at index 0."""
        enumerable = Enumerable.from_iterable(["a", "b"])
        first = enumerable.enumerator()
        first.next()
        second = enumerable.enumerator()
        assert second.next() == (0, "a")
        assert first.next() == (1, "b")

    def test_iteration_yields_pairs(self) -> None:
        """Test iterating an enumerable twice."""
        enumerable = Enumerable.from_iterable(["a", "b"])
        assert list(enumerable) == [(0, "a"), (1, "b")]
        assert list(enumerable) == [(0, "a"), (1, "b")]

    def test_into_iterable(self) -> None:
        """Test projecting back to bare elements."""
        elements = Enumerable.from_iterable(("a", "b", "c")).into_iterable()
        assert list(elements) == ["a", "b", "c"]
        assert list(elements) == ["a", "b", "c"]

    def test_custom_factory(self) -> None:
        """Test an enumerable built from an enumerator factory."""
        enumerable = Enumerable(lambda: Enumerator(range(2)))
        assert [pair.value for pair in enumerable] == [0, 1]
