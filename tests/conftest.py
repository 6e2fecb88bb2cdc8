"""Shared pytest configuration."""

import sys
from collections.abc import Iterator

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger() -> Iterator[None]:
    """Restore the default loguru handler after CLI tests replace it."""
    yield
    logger.remove()
    logger.add(sys.stderr)
