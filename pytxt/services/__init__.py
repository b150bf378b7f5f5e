"""Concrete service implementations."""

from .document_manager import DocumentStateManager
from .document_store import InMemoryDocumentStore, SettingsDocumentStore
from .enhancement_service import EnhancementService
from .file_service import FileService
from .gemini_client import GeminiClient, GeminiSettings

__all__ = [
    "DocumentStateManager",
    "SettingsDocumentStore",
    "InMemoryDocumentStore",
    "EnhancementService",
    "FileService",
    "GeminiClient",
    "GeminiSettings",
]
