"""Shared pytest fixtures for graphy tests."""

import logging
from collections.abc import Iterator

import pytest

from graphy.core import environment
from graphy.core.environment import GRAPHY_ENV_VAR, GRAPHY_TRACE_PARSE_VAR
from graphy.core.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test with no graphy configuration in the environment."""
    monkeypatch.delenv(GRAPHY_ENV_VAR, raising=False)
    monkeypatch.delenv(GRAPHY_TRACE_PARSE_VAR, raising=False)
    monkeypatch.setattr(environment, "_warned_trace_values", set())


@pytest.fixture
def graphy_logger() -> Iterator[logging.Logger]:
    """The ``graphy`` logger, restored to its library defaults afterwards."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if handler not in saved_handlers:
            handler.close()
    for handler in saved_handlers:
        logger.addHandler(handler)
    logger.setLevel(saved_level)
