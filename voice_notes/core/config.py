"""
Text-helper configuration via pydantic-settings.

Loads values from the environment or a .env file with defaults matching
the app's built-in behaviour. Use ``get_settings()`` to obtain the cached
singleton instance.
"""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Voice Notes text-helper settings loaded from environment / .env file.

    Field names map to ``VOICE_NOTES_``-prefixed env var names
    (case-insensitive).

    Attributes:
        title_max_words: Default number of words kept by ``smart_title``.
        fallback_title: Title returned when the transcript has no words.
        log_level: Python logging level for the ``voice_notes`` logger.
    """

    model_config = SettingsConfigDict(
        env_prefix="VOICE_NOTES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Silently ignore unrecognized env vars
    )

    # --- Titles ---
    title_max_words: int = Field(default=7, ge=0)
    fallback_title: str = "Nieuwe opname"  # Dutch for "New recording"

    # --- Application ---
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings singleton.

    Uses ``functools.lru_cache`` so the .env file is read only once.
    Subsequent calls return the same ``Settings`` instance.

    Returns:
        Settings: The package-wide configuration object.
    """
    return Settings()


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Apply the configured log level to the package logger and return it."""
    settings = settings or get_settings()
    pkg_logger = logging.getLogger("voice_notes")
    pkg_logger.setLevel(settings.log_level.upper())
    return pkg_logger
