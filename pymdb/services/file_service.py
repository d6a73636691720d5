from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from pymdb.domain.errors import DocumentIOError
from pymdb.domain.interfaces import IFileService
from pymdb.utils.constants import DEFAULT_DOCUMENT

logger = logging.getLogger(__name__)


class FileService(IFileService):
    """Atomic reads/writes for markdown documents."""

    def read_text(self, path: Path) -> str:
        # newline="" keeps CRLF documents byte-for-byte as on disk.
        try:
            with open(path, encoding="utf-8", newline="") as fh:
                return fh.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentIOError("read", path, e) from e

    def write_text_atomic(self, path: Path, text: str) -> None:
        self._commit(path, text, operation="write")

    def create(self, path: Path) -> None:
        """Write the new-document boilerplate, replacing whatever is at `path`."""
        self._commit(path, DEFAULT_DOCUMENT, operation="create")
        logger.info("Created document %s", path)

    def _commit(self, path: Path, text: str, *, operation: str) -> None:
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            cause = OSError(f"Cannot open for write: {path}")
            raise DocumentIOError(operation, path, cause) from cause
        sf.write(text.encode("utf-8"))
        if not sf.commit():
            cause = OSError(f"Commit failed for: {path}")
            raise DocumentIOError(operation, path, cause) from cause
