from __future__ import annotations

import logging
import os
from pathlib import Path

from pymdb.domain.errors import DocumentIOError
from pymdb.domain.interfaces import IDocumentScanner
from pymdb.utils.constants import MARKDOWN_SUFFIXES

logger = logging.getLogger(__name__)


def is_markdown_file(name: str | os.PathLike[str]) -> bool:
    """True when the file name ends with a markdown suffix (case-insensitive)."""
    return os.fspath(name).lower().endswith(MARKDOWN_SUFFIXES)


class DocumentScanner(IDocumentScanner):
    """
    Recursive, read-only discovery of markdown documents.

    Entries of each directory are visited in name order and subdirectories are
    descended into where they appear, so the result order is stable for a given
    layout. Directory symlinks are not followed. Any directory that cannot be
    listed fails the whole scan.
    """

    def scan(self, root: Path) -> list[Path]:
        root = Path(root).absolute()
        if not root.is_dir():
            cause: OSError = (
                NotADirectoryError(f"Not a directory: {root}")
                if root.exists()
                else FileNotFoundError(f"No such directory: {root}")
            )
            raise DocumentIOError("scan", root, cause) from cause

        found: list[Path] = []
        self._walk(root, found)
        logger.debug("Scanned %s: %d document(s)", root, len(found))
        return found

    def _walk(self, directory: Path, found: list[Path]) -> None:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            raise DocumentIOError("scan", directory, e) from e

        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                self._walk(Path(entry.path), found)
            elif entry.is_file() and is_markdown_file(entry.name):
                found.append(Path(entry.path))
