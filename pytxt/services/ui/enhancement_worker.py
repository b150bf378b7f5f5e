from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QObject, QThread, pyqtSignal, pyqtSlot

from pytxt.domain.interfaces import IGenerationClient
from pytxt.domain.models import GenerationResult

ResultCallback = Callable[[GenerationResult], None]
ErrorCallback = Callable[[Exception], None]


class EnhancementWorker(QThread):
    """
    Runs one generation request off the UI thread.

    Emits exactly one of `result_ready(GenerationResult)` or
    `error_occurred(Exception)`; the exception object is forwarded as-is so
    the receiver can read its provider message.
    """

    result_ready = pyqtSignal(object)
    error_occurred = pyqtSignal(object)

    def __init__(self, client: IGenerationClient, prompt: str, parent: QObject | None = None):
        super().__init__(parent)
        self.client = client
        self.prompt = prompt

    def run(self) -> None:
        try:
            result = self.client.generate(self.prompt)
        except Exception as e:  # forwarded to the UI thread, not swallowed
            self.error_occurred.emit(e)
            return
        self.result_ready.emit(result)


class QtEnhancementRunner(QObject):
    """
    Starts an EnhancementWorker and delivers its outcome back on this object's
    (UI) thread through queued slots.
    """

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._worker: EnhancementWorker | None = None
        self._on_result: ResultCallback | None = None
        self._on_error: ErrorCallback | None = None

    def __call__(
        self,
        client: IGenerationClient,
        prompt: str,
        on_result: ResultCallback,
        on_error: ErrorCallback,
    ) -> None:
        self._on_result = on_result
        self._on_error = on_error
        worker = EnhancementWorker(client, prompt)
        worker.result_ready.connect(self._deliver_result)
        worker.error_occurred.connect(self._deliver_error)
        worker.finished.connect(self._release)
        self._worker = worker
        worker.start()

    @pyqtSlot(object)
    def _deliver_result(self, result: object) -> None:
        if self._on_result is not None:
            self._on_result(result)  # type: ignore[arg-type]

    @pyqtSlot(object)
    def _deliver_error(self, error: object) -> None:
        if self._on_error is not None:
            self._on_error(error)  # type: ignore[arg-type]

    @pyqtSlot()
    def _release(self) -> None:
        if self._worker is not None:
            self._worker.deleteLater()
            self._worker = None
