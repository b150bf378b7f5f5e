from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from pytxt.domain.models import GenerationResult


class IDocumentStore(Protocol):
    """Single-key persistent store for the editor buffer."""

    def load(self) -> str | None: ...

    def save(self, text: str) -> None:
        """Persist `text`. Raises StorageError when the backend refuses the write."""
        ...


class IGenerationClient(Protocol):
    """Requests a model-generated continuation for a prompt."""

    def generate(self, prompt: str) -> GenerationResult:
        """
        Raises AuthenticationError, UpstreamError or TransportError on failure.
        A well-formed but empty response is a result, not an error.
        """
        ...


class IFileService(Protocol):
    """Writes text files atomically."""

    def write_text_atomic(self, path: Path, text: str) -> None: ...


@runtime_checkable
class IClipboard(Protocol):
    def set_text(self, text: str) -> None: ...


@runtime_checkable
class ITextExporter(Protocol):
    """Turns buffer text into a local plain-text file named `file_name`. Fire-and-forget."""

    def export_text(self, text: str, file_name: str) -> None: ...


class IConfigService(Protocol):
    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_float(
        self, section: str, key: str, default: float | None = None
    ) -> float | None: ...
    def app_version(self) -> str: ...


class IAppConfig(IConfigService, Protocol):
    def get_version(self) -> str: ...
