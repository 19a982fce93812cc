"""
Pydantic v2 models shared by the text helpers.

Recording — read-only snapshot of one voice recording
ShareText — ordered, labeled sections of a shareable text block
"""

from datetime import UTC, datetime
from enum import StrEnum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ---------------------------------------------------------------------------
# Recording
# ---------------------------------------------------------------------------


class RecordingStatus(StrEnum):
    """Processing states a recording moves through."""

    idle = "idle"
    transcribing = "transcribing"
    transcribing_paused = "transcribing_paused"
    summarizing = "summarizing"
    summarizing_paused = "summarizing_paused"
    done = "done"
    failed = "failed"

    @property
    def is_processing(self) -> bool:
        return self in _PROCESSING_STATES

    @property
    def is_paused(self) -> bool:
        return self in (
            RecordingStatus.transcribing_paused,
            RecordingStatus.summarizing_paused,
        )


_PROCESSING_STATES = frozenset(
    {
        RecordingStatus.transcribing,
        RecordingStatus.transcribing_paused,
        RecordingStatus.summarizing,
        RecordingStatus.summarizing_paused,
    }
)


class Recording(BaseModel):
    """Immutable snapshot of a recording's metadata and derived text.

    Only ``title``, ``file_name``, ``transcript`` and ``summary`` are read
    by the text helpers; the remaining fields mirror what the app stores
    alongside each audio file.
    """

    model_config = ConfigDict(frozen=True)

    file_name: str
    title: str = ""
    transcript: str | None = None
    summary: str | None = None

    id: UUID = Field(default_factory=uuid4)
    date: datetime = Field(default_factory=lambda: datetime.now(UTC))
    duration: float = Field(default=0.0, ge=0)
    status: RecordingStatus = RecordingStatus.idle
    language_hint: str | None = None
    tags: list[str] = Field(default_factory=list)

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, tags: list[str]) -> list[str]:
        """Trim tags, drop blanks and case-insensitive duplicates (first spelling wins)."""
        seen: set[str] = set()
        normalized: list[str] = []
        for tag in tags:
            cleaned = tag.strip()
            key = cleaned.lower()
            if cleaned and key not in seen:
                seen.add(key)
                normalized.append(cleaned)
        return normalized

    @property
    def display_name(self) -> str:
        """The title if set, otherwise the audio file name."""
        return self.title or self.file_name

    @property
    def has_content_to_share(self) -> bool:
        """True when there is a non-empty transcript or summary."""
        return bool(self.transcript) or bool(self.summary)

    def share_text(self) -> str:
        """Render this recording with ``make_share_text``."""
        from voice_notes.core.text_helpers import make_share_text

        return make_share_text(self)


# ---------------------------------------------------------------------------
# Share text
# ---------------------------------------------------------------------------


SECTION_SEPARATOR = "\n\n"


class ShareText(BaseModel):
    """Ordered sections of a shareable text block, one blank line apart."""

    sections: list[str] = Field(default_factory=list)

    def render(self) -> str:
        """Join the sections with a blank line between them."""
        return SECTION_SEPARATOR.join(self.sections)
