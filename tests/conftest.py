"""Shared fixtures for wordpicker tests."""

import io

import pytest
from loguru import logger


@pytest.fixture
def log_capture():
    """Capture loguru messages at DEBUG and above into a StringIO."""
    buffer = io.StringIO()
    handler_id = logger.add(buffer, level="DEBUG", format="{message}")
    yield buffer
    logger.remove(handler_id)


@pytest.fixture
def animal_words():
    """Words with pairwise distinct phonetic codes."""
    return ["apple", "banana", "crab", "dog", "eagle", "fox", "goat", "horse"]
