"""
Voice Notes text helpers.

Titles, share text, markdown prettifying, and to-do detection for
voice-recording transcripts.
"""

from voice_notes.core.models import Recording, RecordingStatus, ShareText
from voice_notes.core.text_helpers import (
    build_share_text,
    is_likely_action,
    make_share_text,
    prettify_markdown_to_plain,
    smart_title,
)

__version__ = "0.1.0"

__all__ = [
    "Recording",
    "RecordingStatus",
    "ShareText",
    "build_share_text",
    "is_likely_action",
    "make_share_text",
    "prettify_markdown_to_plain",
    "smart_title",
]
