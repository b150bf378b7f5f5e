"""
Error taxonomy for the editor.

Every error logs itself once on construction; callers decide how to surface
`user_message` (the presenter shows it in a message box).
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class EditorError(Exception):
    """Base class for all editor errors."""

    log_level: int = logging.ERROR

    def __init__(self, message: str, *, user_message: str | None = None) -> None:
        super().__init__(message)
        self.user_message = user_message or message
        logger.log(self.log_level, "[%s] %s", type(self).__name__, message)


class ValidationError(EditorError):
    """User input cannot be acted on (e.g. enhancing an empty buffer)."""

    log_level = logging.WARNING


class EnhancementInProgressError(EditorError):
    """A second enhancement was requested while one is still in flight."""

    log_level = logging.INFO


class StorageError(EditorError):
    """The persistent store could not be written."""


class GenerationError(EditorError):
    """
    Base for failures of the generation endpoint.

    `provider_message` holds the provider's own error text when the response
    carried one; it is preferred when building the user-facing message.
    """

    def __init__(self, message: str, *, provider_message: str | None = None) -> None:
        self.provider_message = provider_message
        super().__init__(message, user_message=provider_message or message)


class AuthenticationError(GenerationError):
    """The endpoint rejected the credential."""


class UpstreamError(GenerationError):
    """Non-success status or an unreadable body from the endpoint."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        provider_message: str | None = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(message, provider_message=provider_message)


class TransportError(GenerationError):
    """Network-level failure before any response arrived."""
