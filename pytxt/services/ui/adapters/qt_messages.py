from __future__ import annotations

import logging
from typing import Any

from PyQt6.QtWidgets import QMessageBox

from pytxt.services.ui.ports.messages import IMessageService

logger = logging.getLogger(__name__)


class QtMessageService(IMessageService):
    """Modal QMessageBox alerts; every alert is mirrored to the log."""

    def warning(self, parent: Any | None, title: str, text: str) -> None:
        logger.warning("%s: %s", title, text)
        QMessageBox.warning(parent, title, text)

    def error(self, parent: Any | None, title: str, text: str) -> None:
        logger.error("%s: %s", title, text)
        QMessageBox.critical(parent, title, text)
