from __future__ import annotations

import logging
from collections.abc import Callable

from pytxt.domain.errors import EditorError, EnhancementInProgressError, ValidationError
from pytxt.domain.interfaces import IGenerationClient
from pytxt.domain.models import EnhancementState, GenerationResult
from pytxt.services.document_manager import DocumentStateManager
from pytxt.services.gemini_response import result_text_or_fallback

logger = logging.getLogger(__name__)

StateListener = Callable[[EnhancementState], None]

EMPTY_INPUT_MESSAGE = "Please enter some text to enhance with AI."
ERROR_PREFIX = "Error using Gemini AI: "


class EnhancementService:
    """
    Two-state machine around the generation call.

    `begin()` guards re-entry and validates the buffer, `complete()` applies the
    result (the only place the buffer changes), `fail()` returns to IDLE with
    the buffer untouched. The network call itself happens between `begin` and
    `complete`/`fail`, on whatever thread the caller chooses.
    """

    def __init__(self, documents: DocumentStateManager, client: IGenerationClient) -> None:
        self._documents = documents
        self._client = client
        self._state = EnhancementState.IDLE
        self._listeners: list[StateListener] = []

    @property
    def client(self) -> IGenerationClient:
        return self._client

    @property
    def state(self) -> EnhancementState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return self._state is EnhancementState.REQUESTING

    def subscribe(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def begin(self) -> str:
        if self.is_loading:
            raise EnhancementInProgressError("An enhancement request is already running")
        prompt = self._documents.text
        if not prompt:
            raise ValidationError("No input text", user_message=EMPTY_INPUT_MESSAGE)
        self._set_state(EnhancementState.REQUESTING)
        return prompt

    def complete(self, result: GenerationResult) -> None:
        try:
            self._documents.append(result_text_or_fallback(result))
        finally:
            self._set_state(EnhancementState.IDLE)

    def fail(self, error: Exception) -> str:
        self._set_state(EnhancementState.IDLE)
        return self.error_message(error)

    @staticmethod
    def error_message(error: Exception) -> str:
        detail = getattr(error, "provider_message", None) or str(error)
        return f"{ERROR_PREFIX}{detail}"

    def enhance(self) -> str | None:
        """
        Run the whole request on the calling thread.

        Returns None on success, or the user-facing error message. Raises
        ValidationError / EnhancementInProgressError from `begin()`.
        """
        prompt = self.begin()
        try:
            result = self._client.generate(prompt)
        except EditorError as e:
            return self.fail(e)
        except Exception as e:
            logger.exception("Unexpected failure during generation")
            return self.fail(e)
        self.complete(result)
        return None

    def _set_state(self, state: EnhancementState) -> None:
        if state is self._state:
            return
        logger.debug("Enhancement state %s -> %s", self._state.name, state.name)
        self._state = state
        for listener in list(self._listeners):
            listener(state)
