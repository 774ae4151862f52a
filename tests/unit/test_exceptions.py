"""Tests for library exceptions."""
from __future__ import annotations

import pytest

from betterstandards.exceptions import (
    BetterStandardsError,
    EnumeratorExhaustedError,
    FilterError,
    UnwrapError,
)


class TestExceptions:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        "error,builtin",
        [
            (UnwrapError("x"), RuntimeError),
            (FilterError("x"), LookupError),
            (EnumeratorExhaustedError(0), LookupError),
        ],
    )
    def test_hierarchy(self, error: BetterStandardsError, builtin: type[Exception]) -> None:
        """Test that every error is a library error and a builtin error."""
        assert isinstance(error, BetterStandardsError)
        assert isinstance(error, builtin)

    def test_str_with_details(self) -> None:
        """Test rendering of details."""
        assert str(BetterStandardsError("failed")) == "failed"
        assert str(BetterStandardsError("failed", {"a": 1})) == "failed - {'a': 1}"

    def test_unwrap_error_keeps_error(self) -> None:
        """Test that UnwrapError carries the Failure's error."""
        error = UnwrapError("Called unwrap() on Failure", "boom")
        assert error.error == "boom"
        assert error.details == {}

    def test_exhausted_details(self) -> None:
        """Test the consumed count of an exhausted enumerator."""
        error = EnumeratorExhaustedError(3)
        assert error.consumed == 3
        assert str(error) == "Enumerator is exhausted - {'consumed': 3}"
