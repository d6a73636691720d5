from __future__ import annotations

import os
from pathlib import Path

# Headless CI has no display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest  # noqa: E402
from PyQt6.QtCore import QSettings  # noqa: E402
from PyQt6.QtWidgets import QApplication  # noqa: E402

from pymdb.services.document_scanner import DocumentScanner  # noqa: E402
from pymdb.services.file_service import FileService  # noqa: E402
from pymdb.services.markdown_renderer import MarkdownRenderer  # noqa: E402
from pymdb.services.session import Session  # noqa: E402
from pymdb.services.settings_service import SettingsService  # noqa: E402


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


# --- Other common fixtures ---


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def scanner() -> DocumentScanner:
    return DocumentScanner()


@pytest.fixture()
def renderer() -> MarkdownRenderer:
    return MarkdownRenderer()


@pytest.fixture()
def session(scanner: DocumentScanner, file_service: FileService) -> Session:
    return Session(scanner, file_service)


@pytest.fixture()
def docs_dir(tmp_path: Path) -> Path:
    """
    docs/
      a.md          "# A"
      b.txt
      notes.md.txt
      sub/c.MARKDOWN "# C"
    """
    root = tmp_path / "docs"
    (root / "sub").mkdir(parents=True)
    (root / "a.md").write_text("# A", encoding="utf-8")
    (root / "b.txt").write_text("plain", encoding="utf-8")
    (root / "notes.md.txt").write_text("nope", encoding="utf-8")
    (root / "sub" / "c.MARKDOWN").write_text("# C", encoding="utf-8")
    return root
