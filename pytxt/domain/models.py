from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from pytxt.utils.constants import DEFAULT_FILE_NAME


@dataclass
class Document:
    text: str = ""
    file_name: str = DEFAULT_FILE_NAME


class EnhancementState(Enum):
    """Idle -> Requesting -> Idle; there is no queued state."""

    IDLE = auto()
    REQUESTING = auto()


@dataclass(frozen=True)
class GeneratedText:
    text: str


@dataclass(frozen=True)
class EmptyGeneration:
    """The provider answered, but the first part carried no text."""


@dataclass(frozen=True)
class MalformedGeneration:
    """The response lacked the candidates[0].content.parts[0].text path."""

    reason: str


GenerationResult = GeneratedText | EmptyGeneration | MalformedGeneration
