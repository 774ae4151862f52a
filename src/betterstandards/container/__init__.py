"""Containers.

Result and its Success/Failure variants, plus helpers for several results.
"""
from __future__ import annotations

from betterstandards.container.result import Failure, Result, Success
from betterstandards.container.results import all_ok, if_ok

__all__ = [
    "Failure",
    "Result",
    "Success",
    "all_ok",
    "if_ok",
]
