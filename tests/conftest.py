"""Shared pytest fixtures."""

import pytest

from config.settings import get_settings
from truncation.policy import reset_defaults


@pytest.fixture(autouse=True)
def restore_truncation_defaults():
    """Undo ``setup`` calls and settings overrides made by a test."""
    yield
    get_settings.cache_clear()
    reset_defaults()
