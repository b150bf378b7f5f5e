from __future__ import annotations

from pathlib import Path
from typing import Any

from PyQt6.QtWidgets import QFileDialog

from pytxt.services.ui.ports.dialogs import IFileDialogService


class QtFileDialogService(IFileDialogService):
    """
    Save dialog seeded with the document's file name.

    The first dialog opens in the user's home directory; later ones reopen
    wherever the previous save went.
    """

    def __init__(self, start_dir: Path | None = None) -> None:
        self.last_dir: Path = start_dir or Path.home()

    def get_save_file(
        self,
        parent: Any | None,
        caption: str,
        suggested_name: str,
        filter_str: str,
    ) -> Path | None:
        # A bare name lands in last_dir; a name that already carries a directory is kept as-is
        suggested = Path(suggested_name or "")
        start = suggested if suggested.parent != Path(".") else self.last_dir / suggested
        path_str, _ = QFileDialog.getSaveFileName(parent, caption, str(start), filter_str)
        if not path_str:
            return None
        path = Path(path_str)
        self.last_dir = path.parent
        return path
