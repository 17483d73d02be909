"""Pytest configuration and fixtures."""

import logging

import pytest

from moka.report import Report


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up per-run moka loggers after each test to prevent name collisions."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("moka_")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def lines():
    """Collects echoed lines instead of writing them to the terminal."""
    return []


@pytest.fixture
def report(lines) -> Report:
    return Report(echo=lines.append, color=False)
