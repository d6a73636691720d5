from __future__ import annotations

from pathlib import Path

import pytest
from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QMessageBox, QTextEdit

from pymdb.di.container import Container
from pymdb.services.settings_service import SettingsService
from pymdb.services.ui.main_window import MainWindow
from pymdb.utils.constants import WINDOW_TITLE

# ------------------------------
# Fakes & helpers
# ------------------------------


class SilentMessages:
    """Message port that never opens a dialog; answers questions with `answer`."""

    def __init__(self) -> None:
        self.answer = False
        self.errors: list[tuple[str, str]] = []
        self.asked = 0

    def info(self, parent, title, text) -> None:
        pass

    def warning(self, parent, title, text) -> None:
        self.errors.append((title, text))

    def error(self, parent, title, text) -> None:
        self.errors.append((title, text))

    def ask(self, parent, title, text, kind=None) -> bool:
        self.asked += 1
        return self.answer


class NoDialogs:
    def get_open_file(self, *a, **k):
        return None

    def get_existing_directory(self, *a, **k):
        return None

    def get_text(self, *a, **k):
        return None


@pytest.fixture()
def messages() -> SilentMessages:
    return SilentMessages()


@pytest.fixture()
def container(tmp_path, messages) -> Container:
    qs = QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)
    return Container(qsettings=qs, messages=messages, dialogs=NoDialogs())


@pytest.fixture()
def window(qapp, container: Container) -> MainWindow:
    """
    Build a MainWindow through the container with file-based QSettings (isolated per
    test) and silent message/dialog ports.
    """
    w = container.build_main_window(app_title="Test")
    w.show()
    qapp.processEvents()
    yield w
    # Let the window close without prompting.
    w.presenter.session._dirty = False
    w.close()


def _row_of(window: MainWindow, path: Path) -> int:
    for i in range(window.file_list.count()):
        if window.file_list.item(i).toolTip() == str(path):
            return i
    return -1


# ------------------------------
# Core window behavior tests
# ------------------------------


def test_window_initial_state(window: MainWindow):
    assert window.presenter is not None
    assert window.presenter.session.is_empty
    assert window.file_list.count() == 0
    assert window.windowTitle() == WINDOW_TITLE

    # Preview should render empty doc to valid HTML
    html = window.preview.toHtml()
    assert "<html" in html.lower()


def test_open_directory_populates_list_and_editor(window: MainWindow, docs_dir: Path):
    window.presenter.open_directory(docs_dir)

    labels = [window.file_list.item(i).text() for i in range(window.file_list.count())]
    assert labels == ["a.md", str(Path("sub") / "c.MARKDOWN")]
    assert window.file_list.currentRow() == 0
    assert window.editor.toPlainText() == "# A"
    # Loading is not an edit.
    assert window.presenter.session.dirty is False
    assert window.windowTitle() == f"{WINDOW_TITLE} - a.md"


def test_typing_marks_dirty(window: MainWindow, docs_dir: Path):
    window.presenter.open_directory(docs_dir)
    window.editor.setPlainText("# A\nmore")
    assert window.presenter.session.dirty is True
    assert window.presenter.session.content == "# A\nmore"
    assert window.windowTitle().endswith(" •")
    assert "more" in window.preview.toPlainText()


def test_selecting_list_item_opens_document(window: MainWindow, docs_dir: Path):
    window.presenter.open_directory(docs_dir)
    c = docs_dir / "sub" / "c.MARKDOWN"

    window.file_list.setCurrentRow(_row_of(window, c))

    assert window.presenter.session.active_document == c
    assert window.editor.toPlainText() == "# C"


def test_selecting_while_dirty_asks_first(window: MainWindow, messages, docs_dir: Path):
    window.presenter.open_directory(docs_dir)
    window.editor.setPlainText("unsaved")
    messages.answer = True

    window.file_list.setCurrentRow(_row_of(window, docs_dir / "sub" / "c.MARKDOWN"))

    assert messages.asked == 1
    assert (docs_dir / "a.md").read_text(encoding="utf-8") == "unsaved"
    assert window.editor.toPlainText() == "# C"


def test_save_action(window: MainWindow, docs_dir: Path):
    window.presenter.open_directory(docs_dir)
    window.editor.setPlainText("# A saved")
    window.act_save.trigger()
    assert (docs_dir / "a.md").read_text(encoding="utf-8") == "# A saved"
    assert window.presenter.session.dirty is False
    assert window.statusBar().currentMessage() == "File saved: a.md"


def test_new_file_action_uses_dialog(monkeypatch, window: MainWindow, docs_dir: Path):
    window.presenter.open_directory(docs_dir)
    monkeypatch.setattr(window.presenter.dialogs, "get_text", lambda *a, **k: "fresh")

    window.act_new.trigger()

    created = docs_dir / "fresh.md"
    assert created.exists()
    assert window.presenter.session.active_document == created
    assert _row_of(window, created) == window.file_list.currentRow()


def test_close_with_unsaved_changes_can_save(window: MainWindow, messages, docs_dir: Path):
    window.presenter.open_directory(docs_dir)
    window.editor.setPlainText("closing")
    messages.answer = True
    window.close()
    assert (docs_dir / "a.md").read_text(encoding="utf-8") == "closing"


def test_window_toggles(window: MainWindow, qapp):
    # Wrap toggle
    window._toggle_wrap(False)
    assert window.editor.lineWrapMode() == QTextEdit.LineWrapMode.NoWrap
    window._toggle_wrap(True)
    assert window.editor.lineWrapMode() == QTextEdit.LineWrapMode.WidgetWidth

    # Preview toggle
    window._toggle_preview(False)
    qapp.processEvents()
    assert window.preview.isVisible() is False
    window._toggle_preview(True)
    qapp.processEvents()
    assert window.preview.isVisible() is True


def test_geometry_persisted_on_close(qapp, tmp_path: Path):
    qs = QSettings(str(tmp_path / "geo.ini"), QSettings.Format.IniFormat)
    settings = SettingsService(qs)
    w = MainWindow(settings=settings, app_title="Geo")
    w.show()
    qapp.processEvents()
    w.close()
    assert settings.get_geometry()
    assert settings.get_splitter()


def test_window_without_presenter_ignores_actions(qapp, tmp_path: Path, monkeypatch):
    monkeypatch.setattr(QMessageBox, "critical", lambda *a, **k: None)
    qs = QSettings(str(tmp_path / "bare.ini"), QSettings.Format.IniFormat)
    w = MainWindow(settings=SettingsService(qs))
    w.act_save.trigger()
    w.editor.setPlainText("typing")
    assert w.presenter is None
