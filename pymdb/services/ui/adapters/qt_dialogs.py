from __future__ import annotations

from pathlib import Path
from typing import Any

from PyQt6.QtWidgets import QFileDialog, QInputDialog, QLineEdit

from pymdb.services.ui.ports.dialogs import IFileDialogService


class QtFileDialogService(IFileDialogService):
    """Qt-backed implementation of file dialogs."""

    def get_open_file(
        self,
        parent: Any | None,
        caption: str,
        start_dir: str | None,
        filter_str: str,
    ) -> Path | None:
        path_str, _ = QFileDialog.getOpenFileName(
            parent,
            caption,
            start_dir or "",
            filter_str,
        )
        return Path(path_str) if path_str else None

    def get_existing_directory(
        self,
        parent: Any | None,
        caption: str,
        start_dir: str | None,
    ) -> Path | None:
        path_str = QFileDialog.getExistingDirectory(parent, caption, start_dir or "")
        return Path(path_str) if path_str else None

    def get_text(
        self,
        parent: Any | None,
        title: str,
        label: str,
        placeholder: str = "",
    ) -> str | None:
        text, ok = QInputDialog.getText(
            parent, title, label, QLineEdit.EchoMode.Normal, placeholder
        )
        return text if ok else None
