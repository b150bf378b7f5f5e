from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IFileDialogService(Protocol):
    """UI port for choosing where an exported file goes."""

    def get_save_file(
        self,
        parent: Any | None,
        caption: str,
        suggested_name: str,
        filter_str: str,
    ) -> Path | None:
        """Return the chosen destination for `suggested_name`, or None if cancelled."""
        ...
