from __future__ import annotations

from .qt_clipboard import QtClipboard
from .qt_dialogs import QtFileDialogService
from .qt_messages import QtMessageService
from .qt_text_exporter import QtTextExporter

__all__ = [
    "QtClipboard",
    "QtFileDialogService",
    "QtMessageService",
    "QtTextExporter",
]
