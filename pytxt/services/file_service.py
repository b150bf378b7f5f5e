from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from pytxt.domain.interfaces import IFileService

logger = logging.getLogger(__name__)


class FileService(IFileService):
    """Exports the buffer as a UTF-8 plain-text file."""

    def write_text_atomic(self, path: Path, text: str) -> None:
        """Write via QSaveFile so a failed save leaves any existing file intact."""
        out = QSaveFile(str(path))
        if not out.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open {path} for writing: {out.errorString()}")
        out.write(text.encode("utf-8"))
        if not out.commit():
            raise OSError(f"Could not save {path}: {out.errorString()}")
        logger.info("Wrote %d characters to %s", len(text), path)
