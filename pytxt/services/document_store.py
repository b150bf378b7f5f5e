from __future__ import annotations

import logging

from PyQt6.QtCore import QSettings

from pytxt.domain.errors import StorageError
from pytxt.domain.interfaces import IDocumentStore
from pytxt.utils.constants import SETTINGS_TEXT

logger = logging.getLogger(__name__)


class SettingsDocumentStore(IDocumentStore):
    """Persist the editor buffer under one QSettings key."""

    def __init__(self, qsettings: QSettings, key: str = SETTINGS_TEXT) -> None:
        self._s = qsettings
        self._key = key

    def load(self) -> str | None:
        if not self._s.contains(self._key):
            return None
        v = self._s.value(self._key, "", type=str)
        return v if isinstance(v, str) else None

    def save(self, text: str) -> None:
        self._s.setValue(self._key, text)
        self._s.sync()
        status = self._s.status()
        if status != QSettings.Status.NoError:
            raise StorageError(f"Could not write {self._key!r} to settings ({status.name})")
        logger.debug("Persisted %d characters to %s", len(text), self._key)


class InMemoryDocumentStore(IDocumentStore):
    """Process-local store; used headless and in tests."""

    def __init__(self, initial: str | None = None) -> None:
        self.value: str | None = initial
        self.saves = 0

    def load(self) -> str | None:
        return self.value

    def save(self, text: str) -> None:
        self.value = text
        self.saves += 1
