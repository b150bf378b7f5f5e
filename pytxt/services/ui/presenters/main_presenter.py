from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from pytxt.domain.errors import EnhancementInProgressError, ValidationError
from pytxt.domain.interfaces import IGenerationClient
from pytxt.domain.models import EnhancementState, GenerationResult
from pytxt.services.document_manager import DocumentStateManager
from pytxt.services.enhancement_service import EnhancementService
from pytxt.services.ui.ports.messages import IMessageService

logger = logging.getLogger(__name__)

AI_TITLE = "Write with AI"

EnhancementRunner = Callable[
    [
        IGenerationClient,
        str,
        Callable[[GenerationResult], None],
        Callable[[Exception], None],
    ],
    None,
]


def run_inline(
    client: IGenerationClient,
    prompt: str,
    on_result: Callable[[GenerationResult], None],
    on_error: Callable[[Exception], None],
) -> None:
    """Runner that blocks the caller; for headless use and tests."""
    try:
        result = client.generate(prompt)
    except Exception as e:
        on_error(e)
        return
    on_result(result)


@runtime_checkable
class IMainView(Protocol):
    """Very small surface for a passive view (implemented by the Qt MainWindow)."""

    # editor
    def get_editor_text(self) -> str: ...
    def set_editor_text(self, text: str) -> None: ...
    def set_file_name(self, name: str) -> None: ...

    # chrome
    def set_loading(self, loading: bool) -> None: ...
    def set_dark_mode(self, dark: bool) -> None: ...
    def show_status(self, text: str, msec: int = 3000) -> None: ...


class MainPresenter:
    """
    Turns view intents into DocumentStateManager / EnhancementService calls
    and pushes resulting state back into the view.
    """

    def __init__(
        self,
        view: IMainView,
        documents: DocumentStateManager,
        enhancer: EnhancementService,
        messages: IMessageService,
        *,
        runner: EnhancementRunner = run_inline,
        parent: Any | None = None,
    ) -> None:
        self.view = view
        self.documents = documents
        self.enhancer = enhancer
        self.messages = messages
        self.runner = runner
        self.parent = parent
        self.dark_mode = False

        documents.subscribe(self._on_document_changed)
        enhancer.subscribe(self._on_enhancement_state)

        view.set_editor_text(documents.text)
        view.set_file_name(documents.file_name)
        view.set_loading(enhancer.is_loading)
        view.set_dark_mode(self.dark_mode)

    # ---------- Editor ----------

    def on_text_edited(self, text: str) -> None:
        self.documents.set_text(text)

    def on_file_name_edited(self, name: str) -> None:
        self.documents.set_file_name(name)

    def remove_character(self, char: str) -> None:
        self.documents.remove_character(char)

    def remove_extra_spaces(self) -> None:
        self.documents.remove_extra_spaces()

    def remove_all_spaces(self) -> None:
        self.documents.remove_all_spaces()

    def clear(self) -> None:
        self.documents.clear()

    def save(self) -> None:
        self.documents.export_as_file()

    def copy(self) -> None:
        self.documents.copy_to_clipboard()
        self.view.show_status("Copied to clipboard", 2000)

    def toggle_theme(self) -> None:
        self.dark_mode = not self.dark_mode
        self.view.set_dark_mode(self.dark_mode)

    # ---------- AI ----------

    def write_with_ai(self) -> None:
        try:
            prompt = self.enhancer.begin()
        except ValidationError as e:
            self.messages.warning(self.parent, AI_TITLE, e.user_message)
            return
        except EnhancementInProgressError:
            self.view.show_status("Already writing with AI…", 2000)
            return
        try:
            self.runner(self.enhancer.client, prompt, self._on_ai_result, self._on_ai_error)
        except Exception as e:
            # The request never started; leave REQUESTING so the trigger re-enables
            logger.exception("Could not start enhancement request")
            self._on_ai_error(e)

    def _on_ai_result(self, result: GenerationResult) -> None:
        self.enhancer.complete(result)
        self.view.show_status("AI text appended", 3000)

    def _on_ai_error(self, error: Exception) -> None:
        message = self.enhancer.fail(error)
        self.messages.error(self.parent, AI_TITLE, message)

    # ---------- Model -> view ----------

    def _on_document_changed(self, text: str) -> None:
        if self.view.get_editor_text() != text:
            self.view.set_editor_text(text)

    def _on_enhancement_state(self, state: EnhancementState) -> None:
        self.view.set_loading(state is EnhancementState.REQUESTING)
