"""Pytest configuration and fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Drop handlers from pavlov loggers after each test so setup_logger can be reused."""
    yield

    loggers_to_reset = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("pavlov")
    ]

    for name in loggers_to_reset:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
