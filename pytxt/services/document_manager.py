from __future__ import annotations

import logging
from collections.abc import Callable

from pytxt.domain.errors import StorageError
from pytxt.domain.interfaces import IClipboard, IDocumentStore, ITextExporter
from pytxt.domain.models import Document
from pytxt.services import text_transforms
from pytxt.utils.constants import AI_SEPARATOR, DEFAULT_FILE_NAME

logger = logging.getLogger(__name__)

TextListener = Callable[[str], None]


class DocumentStateManager:
    """
    Owns the buffer and the export file name.

    Every mutation goes through `set_text`, which writes through to the store
    and then notifies listeners. Store failures are logged, never raised.
    """

    def __init__(
        self,
        store: IDocumentStore,
        *,
        exporter: ITextExporter | None = None,
        clipboard: IClipboard | None = None,
        file_name: str = DEFAULT_FILE_NAME,
    ) -> None:
        self._store = store
        self._exporter = exporter
        self._clipboard = clipboard
        self._listeners: list[TextListener] = []
        self.doc = Document(text=self._load_initial(), file_name=file_name)

    def _load_initial(self) -> str:
        try:
            text = self._store.load()
        except Exception:
            logger.exception("Failed to read persisted text; starting empty")
            return ""
        return text or ""

    # ---------- Queries ----------

    @property
    def text(self) -> str:
        return self.doc.text

    @property
    def file_name(self) -> str:
        return self.doc.file_name

    # ---------- Listeners ----------

    def subscribe(self, listener: TextListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: TextListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ---------- Mutations ----------

    def set_text(self, new_text: str) -> None:
        self.doc.text = new_text
        self._persist(new_text)
        for listener in list(self._listeners):
            listener(new_text)

    def clear(self) -> None:
        self.set_text("")

    def remove_character(self, char: str) -> None:
        self.set_text(text_transforms.remove_character(self.doc.text, char))

    def remove_extra_spaces(self) -> None:
        self.set_text(text_transforms.remove_extra_spaces(self.doc.text))

    def remove_all_spaces(self) -> None:
        self.set_text(text_transforms.remove_all_spaces(self.doc.text))

    def append(self, text: str, separator: str = AI_SEPARATOR) -> None:
        self.set_text(f"{self.doc.text}{separator}{text}")

    def set_file_name(self, name: str) -> None:
        self.doc.file_name = name

    # ---------- Collaborators ----------

    def export_as_file(self, file_name: str | None = None) -> None:
        if self._exporter is None:
            logger.warning("No exporter configured; export skipped")
            return
        self._exporter.export_text(self.doc.text, file_name or self.doc.file_name)

    def copy_to_clipboard(self) -> None:
        if self._clipboard is None:
            logger.warning("No clipboard configured; copy skipped")
            return
        self._clipboard.set_text(self.doc.text)

    # ---------- Internal ----------

    def _persist(self, text: str) -> None:
        try:
            self._store.save(text)
        except StorageError as e:
            logger.warning("Buffer kept in memory only: %s", e)
