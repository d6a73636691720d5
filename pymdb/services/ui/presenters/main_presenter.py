from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from pymdb.domain.errors import DocumentIOError, NoActiveDocument, SessionError
from pymdb.domain.interfaces import IMarkdownRenderer
from pymdb.services.session import Session
from pymdb.services.ui.ports.dialogs import IFileDialogService
from pymdb.services.ui.ports.messages import IMessageService

logger = logging.getLogger(__name__)

OPEN_FILTER = "Markdown (*.md *.markdown);;All files (*)"

_IO_TITLES = {
    "scan": "Error loading directory",
    "read": "Error reading file",
    "write": "Error saving file",
    "create": "Error creating file",
}


def _error_title(error: SessionError, default: str) -> str:
    if isinstance(error, DocumentIOError):
        return _IO_TITLES.get(error.operation, default)
    return default


@runtime_checkable
class IMainView(Protocol):
    """Very small surface for a passive view (implemented by the Qt MainWindow)."""

    # editor/preview
    def get_editor_text(self) -> str: ...
    def set_editor_text(self, text: str) -> None: ...
    def set_preview_html(self, html: str) -> None: ...

    # file list
    def set_files(self, files: list[Path], root: Path | None) -> None: ...
    def select_file(self, path: Path | None) -> None: ...

    # window chrome
    def set_title(self, title: str) -> None: ...

    # status
    def show_status(self, text: str, msec: int = 3000) -> None: ...


class MainPresenter:
    """
    Coordinates the passive main view with the document Session.

    The view forwards user actions here; results from the Session are pushed
    back into the view and every SessionError is shown through the message port.
    """

    def __init__(
        self,
        view: IMainView,
        session: Session,
        renderer: IMarkdownRenderer,
        messages: IMessageService,
        dialogs: IFileDialogService,
    ) -> None:
        self.view = view
        self.session = session
        self.renderer = renderer
        self.messages = messages
        self.dialogs = dialogs

    # ---------- Directory / file selection ----------
    def open_directory(self, directory: Path, *, select_first: bool = True) -> bool:
        try:
            files = self.session.load_directory(directory)
        except SessionError as e:
            self._report("Error loading directory", e)
            return False
        self.view.set_files(files, self.session.active_directory)
        self.view.select_file(self.session.active_document)
        if select_first and files:
            self.open_document(files[0])
        return True

    def open_file(self, path: Path) -> bool:
        """Load the file's directory, then open the file if it is listed there."""
        path = Path(path).absolute()
        if not self.open_directory(path.parent, select_first=False):
            return False
        if path not in self.session.files:
            logger.info("%s is not a markdown document; nothing opened", path)
            return False
        return self.open_document(path)

    def open_document(self, path: Path) -> bool:
        try:
            doc = self.session.request_load_document(path, confirm=self._confirm_save)
        except SessionError as e:
            self._report(_error_title(e, "Error reading file"), e)
            if self.session.active_document != Path(path):
                # The switch did not happen; keep the list on the document still open.
                self.view.select_file(self.session.active_document)
                self._refresh_title()
                return False
            # Only the save-first step failed; the requested document is open.
            doc = self.session.document
        self.view.set_editor_text(doc.text)
        self.view.select_file(doc.path)
        self.render_preview()
        self._refresh_title()
        return True

    def open_start_path(self, path: Path) -> None:
        """Command-line argument: a directory to browse or a document to open."""
        path = Path(path)
        if path.is_dir():
            self.open_directory(path)
        elif path.exists():
            self.open_file(path)
        else:
            logger.warning("Start path does not exist: %s", path)

    # ---------- Editing ----------
    def on_text_changed(self) -> None:
        self.session.edit(self.view.get_editor_text())
        self.render_preview()
        self._refresh_title()

    def render_preview(self) -> None:
        html = self.renderer.to_html(self.view.get_editor_text())
        self.view.set_preview_html(html)

    def save(self) -> bool:
        try:
            path = self.session.save()
        except NoActiveDocument as e:
            self.messages.info(self.view, "No File", str(e))
            return False
        except SessionError as e:
            self._report("Error saving file", e)
            return False
        self._refresh_title()
        self.view.show_status(f"File saved: {path.name}", 3000)
        return True

    def new_document(self, name: str) -> Path | None:
        try:
            path = self.session.create_document(name)
        except SessionError as e:
            self._report("Error creating file", e)
            return None
        self.view.set_files(self.session.files, self.session.active_directory)
        self.open_document(path)
        return path

    def confirm_close(self) -> bool:
        """True when the window may close; unsaved edits are offered for saving first."""
        if self.session.is_empty or not self.session.dirty:
            return True
        if self._ask("You have unsaved changes. Do you want to save before closing?"):
            return self.save()
        return True

    # ---------- Dialog-driven actions ----------
    def open_directory_dialog(self) -> None:
        start = self.session.active_directory
        directory = self.dialogs.get_existing_directory(
            self.view, "Open Directory", str(start) if start else None
        )
        if directory:
            self.open_directory(directory)

    def open_file_dialog(self) -> None:
        start = self.session.active_directory
        path = self.dialogs.get_open_file(
            self.view, "Open File", str(start) if start else None, OPEN_FILTER
        )
        if path:
            self.open_file(path)

    def new_document_dialog(self) -> None:
        if self.session.active_directory is None:
            self.messages.error(self.view, "Error", "Please open a directory first")
            return
        name = self.dialogs.get_text(
            self.view, "New File", "Filename", "filename (without .md extension)"
        )
        if not name or not name.strip():
            return
        self.new_document(name)

    # ---------- Helpers ----------
    def _confirm_save(self, current: Path, requested: Path) -> bool:
        return self._ask(
            "You have unsaved changes. Do you want to save before opening another file?"
        )

    def _ask(self, text: str) -> bool:
        return self.messages.ask(self.view, "Unsaved Changes", text)

    def _refresh_title(self) -> None:
        self.view.set_title(self.session.title())

    def _report(self, title: str, error: SessionError) -> None:
        logger.warning("%s: %s", title, error)
        self.messages.error(self.view, title, str(error))
