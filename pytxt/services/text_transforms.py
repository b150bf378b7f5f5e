"""Pure string transforms behind the cleanup actions."""

from __future__ import annotations

import re

from pytxt.utils.constants import REMOVABLE_CHARACTERS

_WHITESPACE_RUN = re.compile(r"\s+")
_WHITESPACE = re.compile(r"\s")


def remove_character(text: str, char: str) -> str:
    """Delete every literal occurrence of `char`, which must be one of REMOVABLE_CHARACTERS."""
    if char not in REMOVABLE_CHARACTERS:
        raise ValueError(f"Character {char!r} is not removable")
    return text.replace(char, "")


def remove_extra_spaces(text: str) -> str:
    return _WHITESPACE_RUN.sub(" ", text)


def remove_all_spaces(text: str) -> str:
    return _WHITESPACE.sub("", text)
