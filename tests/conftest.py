from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from pathlib import Path
from typing import Any

import pytest
from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QApplication

from pytxt.domain.models import GeneratedText, GenerationResult
from pytxt.services.document_manager import DocumentStateManager
from pytxt.services.document_store import InMemoryDocumentStore, SettingsDocumentStore
from pytxt.services.enhancement_service import EnhancementService
from pytxt.services.file_service import FileService


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        if created:
            app.quit()


# --- Fakes shared across modules ---


class FakeClient:
    """IGenerationClient double: returns a queued result or raises a queued error."""

    def __init__(self, result: GenerationResult | None = None, error: Exception | None = None):
        self.result = result if result is not None else GeneratedText(" world!")
        self.error = error
        self.prompts: list[str] = []

    def generate(self, prompt: str) -> GenerationResult:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.result


class FakeMessages:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str, str]] = []

    def warning(self, parent: Any | None, title: str, text: str) -> None:
        self.calls.append(("warning", title, text))

    def error(self, parent: Any | None, title: str, text: str) -> None:
        self.calls.append(("error", title, text))


class FakeClipboard:
    def __init__(self) -> None:
        self.text: str | None = None

    def set_text(self, text: str) -> None:
        self.text = text


class FakeExporter:
    def __init__(self) -> None:
        self.exports: list[tuple[str, str]] = []

    def export_text(self, text: str, file_name: str) -> None:
        self.exports.append((text, file_name))


# --- Other common fixtures ---


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_store(qsettings: QSettings) -> SettingsDocumentStore:
    return SettingsDocumentStore(qsettings)


@pytest.fixture()
def memory_store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture()
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture()
def exporter() -> FakeExporter:
    return FakeExporter()


@pytest.fixture()
def documents(memory_store, exporter, clipboard) -> DocumentStateManager:
    return DocumentStateManager(memory_store, exporter=exporter, clipboard=clipboard)


@pytest.fixture()
def client() -> FakeClient:
    return FakeClient()


@pytest.fixture()
def enhancer(documents, client) -> EnhancementService:
    return EnhancementService(documents, client)


@pytest.fixture()
def messages() -> FakeMessages:
    return FakeMessages()


@pytest.fixture()
def file_service() -> FileService:
    return FileService()
