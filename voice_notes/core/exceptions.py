"""
Voice Notes exception hierarchy.

The text helpers are total over their string inputs; these exceptions
only signal caller mistakes such as out-of-range arguments. All of them
inherit from VoiceNotesError so callers can catch a single base class.
"""

from datetime import UTC, datetime


class VoiceNotesError(Exception):
    """Base exception for all Voice Notes errors."""

    def __init__(
        self,
        detail: str = "An unexpected error occurred",
        code: str = "VOICE_NOTES_ERROR",
    ) -> None:
        self.detail = detail
        self.code = code
        self.timestamp = datetime.now(UTC).isoformat()
        super().__init__(detail)


class InvalidArgumentError(VoiceNotesError):
    """Raised when a helper receives an argument outside its valid range."""

    def __init__(self, argument: str, detail: str) -> None:
        self.argument = argument
        super().__init__(
            detail=f"Invalid {argument}: {detail}",
            code="INVALID_ARGUMENT",
        )
