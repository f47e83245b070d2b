"""Shared fixtures for the siteroutes test suite."""

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo handlers and levels the CLI entry points install."""
    package_logger = logging.getLogger("siteroutes")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    for handler in package_logger.handlers[:]:
        if handler not in handlers:
            package_logger.removeHandler(handler)
    package_logger.setLevel(level)
