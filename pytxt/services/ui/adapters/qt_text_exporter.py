from __future__ import annotations

import logging
from typing import Any

from pytxt.domain.interfaces import IFileService, ITextExporter
from pytxt.services.ui.ports.dialogs import IFileDialogService
from pytxt.services.ui.ports.messages import IMessageService

logger = logging.getLogger(__name__)

TEXT_FILTER = "Text (*.txt);;All files (*)"


class QtTextExporter(ITextExporter):
    """
    Desktop counterpart of a browser download: asks where to put `file_name`,
    then writes the text atomically. Failures are reported here, not raised.
    """

    def __init__(
        self,
        files: IFileService,
        dialogs: IFileDialogService,
        messages: IMessageService,
        parent: Any | None = None,
    ) -> None:
        self._files = files
        self._dialogs = dialogs
        self._messages = messages
        self.parent = parent

    def export_text(self, text: str, file_name: str) -> None:
        path = self._dialogs.get_save_file(self.parent, "Save As", file_name, TEXT_FILTER)
        if not path:
            logger.debug("Save cancelled")
            return
        try:
            self._files.write_text_atomic(path, text)
        except OSError as e:
            logger.error("Save to %s failed: %s", path, e)
            self._messages.error(self.parent, "Save Error", f"Failed to save file:\n{e}")
