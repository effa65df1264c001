"""Shared fixtures for the visualizer tests."""

import pytest

from config import Settings


@pytest.fixture
def instant():
    """Settings with a zero step delay so async runs finish immediately."""
    return Settings(min_delay_ms=0, max_delay_ms=0)
