from __future__ import annotations

import logging

from pytxt.utils.constants import LOG_FORMAT


def resolve_level(name: str | None, default: int = logging.INFO) -> int:
    """Map a level name like "debug" to its logging constant; unknown names give `default`."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(level: str | int | None = None) -> None:
    """Configure root logging once for the desktop app (stream handler, plain format)."""
    lvl = level if isinstance(level, int) else resolve_level(level)
    logging.basicConfig(level=lvl, format=LOG_FORMAT)
    logging.getLogger().setLevel(lvl)
    # urllib3 is chatty at DEBUG and would echo the keyed request URL
    logging.getLogger("urllib3").setLevel(max(lvl, logging.WARNING))
