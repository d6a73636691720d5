from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from pymdb.domain.errors import (
    DocumentIOError,
    InvalidDocumentName,
    NoActiveDirectory,
    NoActiveDocument,
)
from pymdb.domain.interfaces import IDocumentScanner, IFileService
from pymdb.domain.models import Document, SessionState
from pymdb.services.document_scanner import is_markdown_file
from pymdb.utils.constants import DEFAULT_SUFFIX, WINDOW_TITLE

logger = logging.getLogger(__name__)

# (active document, requested document) -> True to save before switching
ConfirmSave = Callable[[Path, Path], bool]


class Session:
    """
    Open directory, active document and unsaved-change tracking.

    Every operation is synchronous and either returns its result or raises a
    SessionError subclass; a failed operation leaves the state as it was,
    except that a switch whose save-first step fails still loads the new
    document before reporting the save error.

    Dirty policy: any edit() marks the session dirty, even if the new text is
    identical to what is on disk. Only a successful load or save clears it.
    """

    def __init__(
        self,
        scanner: IDocumentScanner,
        files: IFileService,
        *,
        confirm_save: ConfirmSave | None = None,
    ) -> None:
        self._scanner = scanner
        self._files = files
        self._confirm_save = confirm_save

        self._directory: Path | None = None
        self._document: Path | None = None
        self._file_list: list[Path] = []
        self._content = ""
        self._dirty = False

    # ---------- State ----------
    @property
    def active_directory(self) -> Path | None:
        return self._directory

    @property
    def active_document(self) -> Path | None:
        return self._document

    @property
    def files(self) -> list[Path]:
        return list(self._file_list)

    @property
    def content(self) -> str:
        return self._content

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def is_empty(self) -> bool:
        return self._document is None

    @property
    def document(self) -> Document:
        return Document(path=self._document, text=self._content, modified=self._dirty)

    @property
    def state(self) -> SessionState:
        return SessionState(
            directory=self._directory,
            document=self._document,
            files=tuple(self._file_list),
            dirty=self._dirty,
        )

    def title(self) -> str:
        if self._document is None:
            return WINDOW_TITLE
        star = " •" if self._dirty else ""
        return f"{WINDOW_TITLE} - {self._document.name}{star}"

    # ---------- Operations ----------
    def load_directory(self, directory: Path) -> list[Path]:
        """Rescan `directory` and make it the active directory."""
        found = self._scanner.scan(Path(directory))
        self._directory = Path(directory).absolute()
        self._file_list = list(found)
        logger.info("Loaded directory %s (%d documents)", self._directory, len(found))
        return self.files

    def request_load_document(self, path: Path, confirm: ConfirmSave | None = None) -> Document:
        """
        Switch to `path`. With unsaved edits the caller's confirmation decides
        whether they are saved first or discarded; either way the new document
        replaces the old one unconditionally.

        If the confirmed save fails, the new document is still loaded and the
        save's DocumentIOError is raised afterwards so the caller can report it.
        """
        path = Path(path)
        save_error: DocumentIOError | None = None
        if self._document is not None and self._dirty:
            ask = confirm or self._confirm_save
            # Without anyone to ask, keep the edits rather than drop them.
            save_first = ask(self._document, path) if ask is not None else True
            if save_first:
                try:
                    self.save()
                except DocumentIOError as e:
                    logger.warning("Save before switching failed: %s", e)
                    save_error = e
            else:
                logger.info("Discarding unsaved changes to %s", self._document)
        doc = self._do_load(path)
        if save_error is not None:
            raise save_error
        return doc

    def _do_load(self, path: Path) -> Document:
        text = self._files.read_text(path)
        self._document = path
        self._content = text
        self._dirty = False
        logger.debug("Opened %s", path)
        return self.document

    def edit(self, new_content: str) -> None:
        self._content = new_content
        self._dirty = True

    def save(self) -> Path:
        if self._document is None:
            raise NoActiveDocument()
        self._files.write_text_atomic(self._document, self._content)
        self._dirty = False
        logger.info("Saved %s", self._document)
        return self._document

    def create_document(self, name: str, directory: Path | None = None) -> Path:
        """
        Create `name` (with `.md` appended when it lacks a markdown suffix) in
        `directory`, or the active directory, and rescan. The new document is
        not opened; request it with the returned path.
        """
        target_dir = Path(directory) if directory is not None else self._directory
        if target_dir is None:
            raise NoActiveDirectory()
        name = name.strip()
        if not name:
            raise InvalidDocumentName(name)
        if not is_markdown_file(name):
            name += DEFAULT_SUFFIX

        path = target_dir.absolute() / name
        self._files.create(path)
        self.load_directory(target_dir)
        return path
