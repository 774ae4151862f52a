"""Indexed iteration: Enumerator and Enumerable."""
from __future__ import annotations

from betterstandards.iterator.enumerator import Enumerable, Enumerator, Indexed

__all__ = [
    "Enumerable",
    "Enumerator",
    "Indexed",
]
