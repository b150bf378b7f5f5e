"""Domain layer: interfaces, errors and simple models (dataclasses)."""

from .errors import (
    AuthenticationError,
    EditorError,
    EnhancementInProgressError,
    GenerationError,
    StorageError,
    TransportError,
    UpstreamError,
    ValidationError,
)
from .interfaces import (
    IClipboard,
    IDocumentStore,
    IFileService,
    IGenerationClient,
    ITextExporter,
)
from .models import (
    Document,
    EmptyGeneration,
    EnhancementState,
    GeneratedText,
    GenerationResult,
    MalformedGeneration,
)

__all__ = [
    "Document",
    "EnhancementState",
    "GeneratedText",
    "EmptyGeneration",
    "MalformedGeneration",
    "GenerationResult",
    "IDocumentStore",
    "IGenerationClient",
    "IFileService",
    "IClipboard",
    "ITextExporter",
    "EditorError",
    "ValidationError",
    "EnhancementInProgressError",
    "StorageError",
    "GenerationError",
    "AuthenticationError",
    "UpstreamError",
    "TransportError",
]
