"""Shared pytest fixtures for the Voice Notes test suite.

Provides sample recordings and keeps the cached settings isolated between
tests so environment overrides never leak.
"""

import pytest

from voice_notes.core.config import get_settings
from voice_notes.core.models import Recording

# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Clear the ``get_settings`` cache before and after every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# Recording Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def untitled_recording():
    """A recording with only a transcript and no title.

    Returns:
        Recording: file ``rec1.m4a`` with transcript "Hello".
    """
    return Recording(file_name="rec1.m4a", transcript="Hello")


@pytest.fixture
def meeting_recording():
    """A titled recording with a markdown summary and no transcript.

    Returns:
        Recording: title "Meeting" with summary "## Notes\\n- do X".
    """
    return Recording(file_name="meeting.m4a", title="Meeting", summary="## Notes\n- do X")
