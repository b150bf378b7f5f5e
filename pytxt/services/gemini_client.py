from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

import requests

from pytxt.domain.errors import AuthenticationError, TransportError, UpstreamError
from pytxt.domain.interfaces import IGenerationClient
from pytxt.domain.models import GenerationResult
from pytxt.services.gemini_response import parse_generation_response
from pytxt.utils.constants import GEMINI_BASE_URL, GEMINI_MODEL

logger = logging.getLogger(__name__)

_AUTH_STATUSES = {"UNAUTHENTICATED", "PERMISSION_DENIED"}
_KEY_PARAM = re.compile(r"key=[^&\s'\")]+")


@dataclass(frozen=True)
class GeminiSettings:
    api_key: str = ""
    model: str = GEMINI_MODEL
    base_url: str = GEMINI_BASE_URL
    timeout: float | None = None  # None: no timeout beyond the transport's own

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/models/{self.model}:generateContent"

    @property
    def has_key(self) -> bool:
        return bool(self.api_key and self.api_key.strip())


def mask_key(key: str) -> str:
    if not key:
        return "***EMPTY***"
    return f"{key[:4]}***" if len(key) > 4 else "***"


def redact_key(text: str, key: str) -> str:
    """Strip the credential from `text`; requests puts the full keyed URL in its errors."""
    if key:
        text = text.replace(key, mask_key(key))
    return _KEY_PARAM.sub("key=***", text)


def _provider_error(response: requests.Response) -> dict[str, Any]:
    """The `error` object of a Google API error body, or {} if the body has none."""
    try:
        body = response.json()
    except ValueError:
        return {}
    err = body.get("error") if isinstance(body, dict) else None
    return err if isinstance(err, dict) else {}


def _is_auth_failure(status_code: int, error: dict[str, Any]) -> bool:
    if status_code in (401, 403):
        return True
    if error.get("status") in _AUTH_STATUSES:
        return True
    # Gemini answers an invalid key with 400 INVALID_ARGUMENT + reason API_KEY_INVALID
    for detail in error.get("details") or []:
        if isinstance(detail, dict) and detail.get("reason") == "API_KEY_INVALID":
            return True
    return False


class GeminiClient(IGenerationClient):
    """
    Calls the Gemini `generateContent` REST endpoint with the key in the query string.

    One request per call: no retry, no streaming. Error mapping:
      - 401/403 or an auth-flavoured provider error -> AuthenticationError
      - any other non-2xx, or a 2xx body that is not JSON -> UpstreamError
      - requests.RequestException                       -> TransportError
    """

    def __init__(self, settings: GeminiSettings) -> None:
        self.settings = settings
        logger.info(
            "Gemini client ready: model=%s key=%s",
            settings.model,
            mask_key(settings.api_key),
        )

    def build_payload(self, prompt: str) -> dict[str, Any]:
        return {"contents": [{"parts": [{"text": prompt}]}]}

    def generate(self, prompt: str) -> GenerationResult:
        if not self.settings.has_key:
            logger.warning("Calling Gemini without an API key; expect a rejection")

        logger.info("Requesting generation for %d-character prompt", len(prompt))
        try:
            response = requests.post(
                self.settings.endpoint,
                params={"key": self.settings.api_key},
                json=self.build_payload(prompt),
                headers={"Content-Type": "application/json"},
                timeout=self.settings.timeout,
            )
        except requests.RequestException as e:
            detail = redact_key(str(e), self.settings.api_key)
            raise TransportError(f"Network error contacting Gemini: {detail}") from e

        if not response.ok:
            error = _provider_error(response)
            message = error.get("message") if isinstance(error.get("message"), str) else None
            summary = f"Gemini returned HTTP {response.status_code}"
            if _is_auth_failure(response.status_code, error):
                raise AuthenticationError(summary, provider_message=message)
            raise UpstreamError(summary, status_code=response.status_code, provider_message=message)

        try:
            body = response.json()
        except ValueError as e:
            raise UpstreamError(
                "Gemini returned a body that is not JSON", status_code=response.status_code
            ) from e

        return parse_generation_response(body)
