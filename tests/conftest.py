"""Shared pytest fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_metagen_logger():
    """Drop handlers and levels left behind by CLI runs."""
    yield
    logger = logging.getLogger("metagen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
