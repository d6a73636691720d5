from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QByteArray, QSignalBlocker, Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QApplication,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QSplitter,
    QStatusBar,
    QTextBrowser,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from pymdb.domain.interfaces import ISettingsService
from pymdb.services.ui.presenters.main_presenter import MainPresenter
from pymdb.utils.constants import WINDOW_TITLE

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Passive Qt view: file list on the left, editor and live preview on the right.

    All document logic lives in the attached MainPresenter; this class only owns
    widget state and forwards user actions.
    """

    def __init__(
        self,
        settings: ISettingsService,
        *,
        app_title: str = WINDOW_TITLE,
        wrap: bool = True,
        preview_visible: bool = True,
    ) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(1200, 800)

        self.settings = settings
        self.presenter: MainPresenter | None = None

        # Widgets
        self.file_list = QListWidget(self)
        files_header = QLabel("Files", self)
        font = files_header.font()
        font.setBold(True)
        files_header.setFont(font)
        files_panel = QWidget(self)
        files_layout = QVBoxLayout(files_panel)
        files_layout.setContentsMargins(0, 0, 0, 0)
        files_layout.addWidget(files_header)
        files_layout.addWidget(self.file_list)

        self.editor = QTextEdit(self)
        self.editor.setAcceptRichText(False)
        self.editor.setPlaceholderText("Select a markdown file or create a new one...")
        self.editor.setTabStopDistance(4 * self.editor.fontMetrics().horizontalAdvance(" "))

        self.preview = QTextBrowser(self)
        self.preview.setOpenExternalLinks(True)

        self.splitter = QSplitter(Qt.Orientation.Horizontal, self)
        self.splitter.addWidget(self.editor)
        self.splitter.addWidget(self.preview)
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 1)

        self.app_splitter = QSplitter(Qt.Orientation.Horizontal, self)
        self.app_splitter.addWidget(files_panel)
        self.app_splitter.addWidget(self.splitter)
        self.app_splitter.setStretchFactor(0, 1)
        self.app_splitter.setStretchFactor(1, 4)
        self.setCentralWidget(self.app_splitter)

        # Signals
        self.editor.textChanged.connect(self._on_text_changed)
        self.file_list.currentRowChanged.connect(self._on_file_selected)

        # UI
        self._build_actions(wrap=wrap, preview_visible=preview_visible)
        self._build_menu()
        self.setStatusBar(QStatusBar(self))
        self._toggle_wrap(wrap)
        self._toggle_preview(preview_visible)

        # Restore UI state
        geo = self.settings.get_geometry()
        if isinstance(geo, (bytes, bytearray)):
            self.restoreGeometry(QByteArray(geo))
        split = self.settings.get_splitter()
        if isinstance(split, (bytes, bytearray)):
            self.splitter.restoreState(QByteArray(split))

    def attach_presenter(self, presenter: MainPresenter) -> None:
        self.presenter = presenter
        presenter.render_preview()
        self.set_title(presenter.session.title())

    # ---------- UI creation ----------
    def _build_actions(self, *, wrap: bool, preview_visible: bool) -> None:
        self.act_open_file = QAction(
            "Open File…",
            self,
            shortcut=QKeySequence.StandardKey.Open,
            triggered=lambda: self._call("open_file_dialog"),
        )
        self.act_open_dir = QAction(
            "Open Directory…",
            self,
            shortcut="Ctrl+Shift+O",
            triggered=lambda: self._call("open_directory_dialog"),
        )
        self.act_new = QAction(
            "New File…",
            self,
            shortcut=QKeySequence.StandardKey.New,
            triggered=lambda: self._call("new_document_dialog"),
        )
        self.act_save = QAction(
            "Save",
            self,
            shortcut=QKeySequence.StandardKey.Save,
            triggered=lambda: self._call("save"),
        )
        self.act_exit = QAction(
            "&Exit",
            self,
            shortcut=QKeySequence.StandardKey.Quit,
            triggered=self.close,
        )
        self.act_toggle_wrap = QAction(
            "Toggle Wrap",
            self,
            checkable=True,
            checked=wrap,
            triggered=self._toggle_wrap,
        )
        self.act_toggle_preview = QAction(
            "Toggle Preview",
            self,
            checkable=True,
            checked=preview_visible,
            triggered=self._toggle_preview,
        )

    def _build_menu(self) -> None:
        m = self.menuBar()
        filem = m.addMenu("&File")
        filem.addAction(self.act_open_file)
        filem.addAction(self.act_open_dir)
        filem.addSeparator()
        filem.addAction(self.act_new)
        filem.addAction(self.act_save)
        filem.addSeparator()
        filem.addAction(self.act_exit)

        viewm = m.addMenu("&View")
        viewm.addAction(self.act_toggle_wrap)
        viewm.addAction(self.act_toggle_preview)

    # ---------- IMainView ----------
    def get_editor_text(self) -> str:
        return self.editor.toPlainText()

    def set_editor_text(self, text: str) -> None:
        # Loading a document is not an edit.
        with QSignalBlocker(self.editor):
            self.editor.setPlainText(text)

    def set_preview_html(self, html: str) -> None:
        self.preview.setHtml(html)

    def set_files(self, files: list[Path], root: Path | None) -> None:
        with QSignalBlocker(self.file_list):
            self.file_list.clear()
            for path in files:
                item = QListWidgetItem(self._display_name(path, root))
                item.setData(Qt.ItemDataRole.UserRole, str(path))
                item.setToolTip(str(path))
                self.file_list.addItem(item)

    def select_file(self, path: Path | None) -> None:
        row = -1
        if path is not None:
            for i in range(self.file_list.count()):
                if self.file_list.item(i).data(Qt.ItemDataRole.UserRole) == str(path):
                    row = i
                    break
        with QSignalBlocker(self.file_list):
            self.file_list.setCurrentRow(row)

    def set_title(self, title: str) -> None:
        self.setWindowTitle(title)

    def show_status(self, text: str, msec: int = 3000) -> None:
        self.statusBar().showMessage(text, msec)

    # ---------- Slots ----------
    def _call(self, name: str) -> None:
        if self.presenter is None:
            logger.debug("No presenter attached; ignoring %s", name)
            return
        getattr(self.presenter, name)()

    def _on_text_changed(self) -> None:
        if self.presenter is not None:
            self.presenter.on_text_changed()

    def _on_file_selected(self, row: int) -> None:
        if self.presenter is None or row < 0:
            return
        item = self.file_list.item(row)
        self.presenter.open_document(Path(item.data(Qt.ItemDataRole.UserRole)))

    def _toggle_wrap(self, on: bool) -> None:
        mode = QTextEdit.LineWrapMode.WidgetWidth if on else QTextEdit.LineWrapMode.NoWrap
        self.editor.setLineWrapMode(mode)

    def _toggle_preview(self, on: bool) -> None:
        self.preview.setVisible(on)

    @staticmethod
    def _display_name(path: Path, root: Path | None) -> str:
        if root is not None:
            try:
                return str(path.relative_to(root))
            except ValueError:
                pass
        return path.name

    # ---------- Close ----------
    def closeEvent(self, event):
        if self.presenter is not None and not self.presenter.confirm_close():
            event.ignore()
            return
        self.settings.set_geometry(bytes(self.saveGeometry()))
        self.settings.set_splitter(bytes(self.splitter.saveState()))
        super().closeEvent(event)
