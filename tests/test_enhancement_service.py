import pytest

from conftest import FakeClient
from pytxt.domain.errors import (
    EnhancementInProgressError,
    TransportError,
    UpstreamError,
    ValidationError,
)
from pytxt.domain.models import EmptyGeneration, EnhancementState, GeneratedText, MalformedGeneration
from pytxt.services.enhancement_service import EMPTY_INPUT_MESSAGE, EnhancementService


def test_empty_buffer_is_rejected_without_network_call(enhancer, client, documents):
    with pytest.raises(ValidationError) as ei:
        enhancer.enhance()
    assert ei.value.user_message == EMPTY_INPUT_MESSAGE
    assert client.prompts == []
    assert documents.text == ""
    assert enhancer.state is EnhancementState.IDLE


def test_success_appends_after_blank_line(enhancer, client, documents, memory_store):
    documents.set_text("Hello")
    assert enhancer.enhance() is None
    assert client.prompts == ["Hello"]
    assert documents.text == "Hello\n\n world!"
    assert memory_store.value == "Hello\n\n world!"
    assert enhancer.is_loading is False


@pytest.mark.parametrize("result", [EmptyGeneration(), MalformedGeneration("no candidates")])
def test_missing_content_appends_fallback(documents, result):
    documents.set_text("Hi")
    EnhancementService(documents, FakeClient(result=result)).enhance()
    assert documents.text == "Hi\n\nNo response from AI."


def test_upstream_failure_leaves_buffer_and_reports(documents, memory_store):
    documents.set_text("Hi")
    saves = memory_store.saves
    err = UpstreamError("Gemini returned HTTP 500", status_code=500, provider_message="Internal error")
    service = EnhancementService(documents, FakeClient(error=err))

    message = service.enhance()

    assert message == "Error using Gemini AI: Internal error"
    assert documents.text == "Hi"
    assert memory_store.saves == saves
    assert service.state is EnhancementState.IDLE


def test_failure_without_provider_message_uses_error_text(documents):
    documents.set_text("Hi")
    service = EnhancementService(documents, FakeClient(error=TransportError("Network down")))
    assert service.enhance() == "Error using Gemini AI: Network down"


def test_reentry_is_rejected_without_second_call(enhancer, client, documents):
    documents.set_text("Hi")
    prompt = enhancer.begin()
    assert prompt == "Hi"
    assert enhancer.state is EnhancementState.REQUESTING

    with pytest.raises(EnhancementInProgressError):
        enhancer.begin()
    with pytest.raises(EnhancementInProgressError):
        enhancer.enhance()
    assert client.prompts == []

    enhancer.complete(GeneratedText("!"))
    assert enhancer.state is EnhancementState.IDLE
    assert documents.text == "Hi\n\n!"


def test_state_listeners_see_requesting_then_idle(enhancer, documents):
    seen = []
    enhancer.subscribe(seen.append)
    documents.set_text("x")
    enhancer.enhance()
    assert seen == [EnhancementState.REQUESTING, EnhancementState.IDLE]


def test_buffer_edits_during_request_are_kept(enhancer, documents):
    documents.set_text("draft")
    enhancer.begin()
    documents.set_text("draft, edited")
    enhancer.complete(GeneratedText("more"))
    assert documents.text == "draft, edited\n\nmore"


def test_unexpected_exception_is_reported_and_returns_idle(documents):
    documents.set_text("x")
    service = EnhancementService(documents, FakeClient(error=RuntimeError("boom")))
    assert service.enhance() == "Error using Gemini AI: boom"
    assert service.state is EnhancementState.IDLE
    assert documents.text == "x"
