"""App constants and utilities."""

from .constants import (
    AI_FALLBACK_TEXT,
    AI_SEPARATOR,
    APP_NAME,
    APP_ORG,
    DEFAULT_FILE_NAME,
    REMOVABLE_CHARACTERS,
    SETTINGS_TEXT,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "SETTINGS_TEXT",
    "DEFAULT_FILE_NAME",
    "REMOVABLE_CHARACTERS",
    "AI_FALLBACK_TEXT",
    "AI_SEPARATOR",
]
