"""Shared module.

Cross-cutting concerns: configuration and logging.
"""
from betterstandards.shared.config import Settings, get_settings, settings
from betterstandards.shared.logging import configure_logging, get_logger

__all__ = [
    "Settings",
    "configure_logging",
    "get_logger",
    "get_settings",
    "settings",
]
