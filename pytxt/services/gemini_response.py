"""
Typed extraction of generated text from a Gemini `generateContent` body.

Only the first candidate's first part is read. A structurally incomplete body
and a genuinely empty generation are kept apart here even though the editor
currently treats both the same way (see `result_text_or_fallback`).
"""

from __future__ import annotations

import logging
from typing import Any

from pytxt.domain.models import (
    EmptyGeneration,
    GeneratedText,
    GenerationResult,
    MalformedGeneration,
)
from pytxt.utils.constants import AI_FALLBACK_TEXT

logger = logging.getLogger(__name__)


def parse_generation_response(payload: Any) -> GenerationResult:
    if not isinstance(payload, dict):
        return MalformedGeneration("response body is not an object")

    candidates = payload.get("candidates")
    if candidates is None:
        return MalformedGeneration("response has no 'candidates'")
    if not isinstance(candidates, list):
        return MalformedGeneration("'candidates' is not a list")
    if not candidates:
        return EmptyGeneration()

    first = candidates[0]
    content = first.get("content") if isinstance(first, dict) else None
    if not isinstance(content, dict):
        return MalformedGeneration("first candidate has no 'content'")

    parts = content.get("parts")
    if not isinstance(parts, list):
        return MalformedGeneration("candidate content has no 'parts'")
    if not parts:
        return EmptyGeneration()

    part = parts[0]
    text = part.get("text") if isinstance(part, dict) else None
    if not isinstance(text, str):
        return MalformedGeneration("first part has no 'text'")
    if not text:
        return EmptyGeneration()
    return GeneratedText(text)


def result_text_or_fallback(result: GenerationResult) -> str:
    """The one place where empty and malformed results become the fallback string."""
    if isinstance(result, GeneratedText):
        return result.text
    if isinstance(result, MalformedGeneration):
        # TODO: promote to UpstreamError once we know Gemini never omits parts on success
        logger.warning("Malformed generation response (%s); using fallback text", result.reason)
    else:
        logger.info("Empty generation response; using fallback text")
    return AI_FALLBACK_TEXT
