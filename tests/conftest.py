"""Shared test fixtures."""

from __future__ import annotations

import logging

import pytest
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def _restore_package_logger():
    logger = logging.getLogger("formstyler")
    handlers = list(logger.handlers)
    propagate = logger.propagate
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.propagate = propagate
    logger.setLevel(level)


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
