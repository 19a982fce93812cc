"""Text helpers for recording titles, share text, and action detection.

All helpers are pure functions over strings. Case handling and the
letter/digit tests are Unicode-aware so non-English transcripts behave
the same as English ones.
"""

import logging
import re
import unicodedata

from voice_notes.core.config import get_settings
from voice_notes.core.exceptions import InvalidArgumentError
from voice_notes.core.models import Recording, ShareText

logger = logging.getLogger(__name__)

# Horizontal whitespace only, so no pattern can run onto the next line.
_HEADER_RE = re.compile(r"^[^\S\r\n]*#{1,6}[^\S\r\n]*([^\r\n]+)(?=\r?$)", re.MULTILINE)
_BULLET_RE = re.compile(r"^[^\S\r\n]*[-*][^\S\r\n]+", re.MULTILINE)

BULLET = "• "
SUMMARY_LABEL = "Samenvatting"  # Dutch for "Summary"

ACTION_VERBS: tuple[str, ...] = (
    "call",
    "email",
    "buy",
    "order",
    "pick up",
    "schedule",
    "book",
    "send",
    "review",
    "prepare",
    "follow up",
    "check",
    "research",
    "plan",
    "clean",
    "paint",
    "fix",
    "update",
    "create",
    "write",
    "meet",
    "ask",
    "decide",
    "pay",
    "install",
    "contact",
    "reach out",
    "set up",
    "organize",
    "arrange",
    "confirm",
    "cancel",
    "remind",
    "notify",
    "submit",
    "complete",
    "finish",
    "start",
    "begin",
    "purchase",
    "get",
    "obtain",
    "reserve",
    "make",
    "do",
    "handle",
    "process",
    "deliver",
    "ship",
    "visit",
    "go to",
    "attend",
    "join",
    "participate",
)

TASK_PATTERNS: tuple[str, ...] = (
    " to-do ",
    " todo ",
    "task:",
    "todo:",
    "action:",
    "reminder:",
    "need to ",
    "should ",
    "must ",
    "have to ",
    "remember to ",
)

QUESTION_WORDS: tuple[str, ...] = ("when ", "how ", "who ")


# ---------------------------------------------------------------------------
# Titles
# ---------------------------------------------------------------------------


def _split_words(text: str) -> list[str]:
    """Split text into runs of letters and digits.

    Combining marks (vowel signs, viramas, accents) continue the current
    word; every other character separates words and is dropped.
    """
    words: list[str] = []
    current: list[str] = []
    for char in text:
        major = unicodedata.category(char)[0]
        if major in ("L", "N") or (major == "M" and current):
            current.append(char)
        elif current:
            words.append("".join(current))
            current = []
    if current:
        words.append("".join(current))
    return words


def smart_title(text: str, max_words: int | None = None) -> str:
    """Derive a short, capitalized title from transcript text.

    Only the first sentence (up to the first period) is considered. Words
    are runs of letters or digits; punctuation and other symbols are dropped.

    Args:
        text: Raw, possibly multi-line transcript text.
        max_words: Maximum number of words to keep. ``None`` uses the
            configured ``title_max_words`` (7 by default).

    Returns:
        The title-cased first words, or the configured fallback title
        ("Nieuwe opname") when the text contains no words.

    Raises:
        InvalidArgumentError: If ``max_words`` is negative.
    """
    settings = get_settings()
    if max_words is None:
        max_words = settings.title_max_words
    elif max_words < 0:
        raise InvalidArgumentError("max_words", f"must be >= 0, got {max_words}")

    flattened = unicodedata.normalize("NFC", text).replace("\n", " ")
    first_sentence = next((part for part in flattened.split(".") if part), flattened)
    title = " ".join(_split_words(first_sentence)[:max_words]).strip()

    if not title:
        logger.debug("No words found for title, using fallback %r", settings.fallback_title)
        return settings.fallback_title
    return " ".join(word.capitalize() for word in title.split(" "))


# ---------------------------------------------------------------------------
# Markdown → plain text
# ---------------------------------------------------------------------------


def prettify_markdown_to_plain(markdown: str) -> str:
    """Turn markdown headers into ``**bold**`` lines and list markers into bullets."""
    text = _HEADER_RE.sub(r"**\1**", markdown)
    return _BULLET_RE.sub(BULLET, text)


# ---------------------------------------------------------------------------
# Share text
# ---------------------------------------------------------------------------


def build_share_text(
    recording: Recording,
    override_transcript: str | None = None,
    override_summary: str | None = None,
) -> ShareText:
    """Collect the labeled sections shared for a recording.

    Overrides replace the recording's own transcript / summary whenever
    they are not ``None``; an empty override therefore hides the section.
    """
    name = recording.title or recording.file_name
    sections = [f"File: {name}"]

    transcript = override_transcript if override_transcript is not None else recording.transcript
    summary = override_summary if override_summary is not None else recording.summary

    if transcript:
        sections.append(f"Transcript:\n{transcript}")
    if summary:
        sections.append(f"{SUMMARY_LABEL}:\n{prettify_markdown_to_plain(summary)}")

    logger.debug("Built share text for %r with %d sections", name, len(sections))
    return ShareText(sections=sections)


def make_share_text(
    recording: Recording,
    override_transcript: str | None = None,
    override_summary: str | None = None,
) -> str:
    """Render a recording as a single shareable text block."""
    return build_share_text(recording, override_transcript, override_summary).render()


# ---------------------------------------------------------------------------
# Action detection
# ---------------------------------------------------------------------------


def is_likely_action(text: str) -> bool:
    """Heuristically decide whether a line of text reads like a to-do item.

    Rules are checked in order:
    1. Starts with (or is exactly) a known action verb phrase.
    2. Contains a task marker such as "todo:" or "need to".
    3. Is a when/how/who question.
    """
    s = text.strip().lower()
    if not s:
        return False

    for verb in ACTION_VERBS:
        if s == verb or s.startswith(verb + " "):
            logger.debug("Action verb %r matched %r", verb, s)
            return True

    for pattern in TASK_PATTERNS:
        if pattern in s or s.startswith(pattern.strip()):
            logger.debug("Task pattern %r matched %r", pattern, s)
            return True

    if s.endswith("?") and any(word in s for word in QUESTION_WORDS):
        logger.debug("Question heuristic matched %r", s)
        return True

    return False
