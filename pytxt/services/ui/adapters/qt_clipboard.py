from __future__ import annotations

from PyQt6.QtGui import QGuiApplication

from pytxt.domain.interfaces import IClipboard


class QtClipboard(IClipboard):
    """System clipboard via the running QGuiApplication."""

    def set_text(self, text: str) -> None:
        QGuiApplication.clipboard().setText(text)
