"""Pytest configuration and fixtures."""
from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
import structlog

from betterstandards.container.result import Failure, Success
from betterstandards.shared import config
from betterstandards.shared import logging as bs_logging
from betterstandards.shared.config import Settings


@pytest.fixture
def test_settings() -> Settings:
    """Settings with logging enabled at debug level."""
    return Settings(
        log_level="DEBUG",
        log_format="json",
        log_captured_failures=True,
    )


@pytest.fixture
def capture_failures_logged(monkeypatch: pytest.MonkeyPatch) -> None:
    """Turn on logging of failures captured by Result.of()."""
    monkeypatch.setattr(config.settings, "log_captured_failures", True)


@pytest.fixture
def fresh_logging(monkeypatch: pytest.MonkeyPatch) -> Generator[logging.Logger, None, None]:
    """Allow configure_logging() to run again and undo it afterwards."""
    monkeypatch.setattr(bs_logging, "_configured", False)
    package_logger = logging.getLogger("betterstandards")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield package_logger
    for handler in list(package_logger.handlers):
        if handler not in handlers:
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def success() -> Success[int, str]:
    """A Success holding 42."""
    return Success(42)


@pytest.fixture
def failure() -> Failure[int, str]:
    """A Failure holding an error message."""
    return Failure("boom")
