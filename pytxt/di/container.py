from __future__ import annotations

import logging

from PyQt6.QtCore import QSettings

from pytxt.domain.interfaces import (
    IClipboard,
    IDocumentStore,
    IFileService,
    IGenerationClient,
    ITextExporter,
)
from pytxt.services.document_manager import DocumentStateManager
from pytxt.services.document_store import SettingsDocumentStore
from pytxt.services.enhancement_service import EnhancementService
from pytxt.services.file_service import FileService
from pytxt.services.gemini_client import GeminiClient, GeminiSettings
from pytxt.services.ui.adapters import (
    QtClipboard,
    QtFileDialogService,
    QtMessageService,
    QtTextExporter,
)
from pytxt.services.ui.enhancement_worker import QtEnhancementRunner
from pytxt.services.ui.main_window import MainWindow
from pytxt.services.ui.ports import IFileDialogService, IMessageService
from pytxt.services.ui.presenters.main_presenter import EnhancementRunner, MainPresenter
from pytxt.utils.constants import APP_NAME, APP_ORG

logger = logging.getLogger(__name__)


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds the document manager + enhancement service over them
      - Builds a MainWindow with its presenter attached
    """

    def __init__(
        self,
        *,
        store: IDocumentStore | None = None,
        qsettings: QSettings | None = None,
        client: IGenerationClient | None = None,
        gemini: GeminiSettings | None = None,
        files: IFileService | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
        clipboard: IClipboard | None = None,
        exporter: ITextExporter | None = None,
        runner: EnhancementRunner | None = None,
    ) -> None:
        self.file_service: IFileService = files or FileService()
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()
        self.clipboard: IClipboard = clipboard or QtClipboard()
        self.exporter: ITextExporter = exporter or QtTextExporter(
            self.file_service, self.dialogs, self.messages
        )
        self.store: IDocumentStore = store or SettingsDocumentStore(qsettings or QSettings())
        self.client: IGenerationClient = client or GeminiClient(gemini or GeminiSettings())
        self.runner = runner

        self.documents = DocumentStateManager(
            self.store, exporter=self.exporter, clipboard=self.clipboard
        )
        self.enhancer = EnhancementService(self.documents, self.client)

    # ---------- Class helpers ----------

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        gemini: GeminiSettings | None = None,
        organization: str = APP_ORG,
        application: str = APP_NAME,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(qsettings=qsettings, gemini=gemini)

    # ---------- UI factories ----------

    def build_main_presenter(self, view: MainWindow) -> MainPresenter:
        runner = self.runner or QtEnhancementRunner(view)
        return MainPresenter(
            view=view,
            documents=self.documents,
            enhancer=self.enhancer,
            messages=self.messages,
            runner=runner,
            parent=view,
        )

    def build_main_window(self, *, app_title: str = APP_NAME) -> MainWindow:
        window = MainWindow(app_title=app_title)
        if isinstance(self.exporter, QtTextExporter):
            self.exporter.parent = window
        window.attach_presenter(self.build_main_presenter(window))
        logger.debug("Main window built with %d persisted characters", len(self.documents.text))
        return window
