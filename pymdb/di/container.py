from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QSettings

from pymdb.domain.interfaces import (
    IDocumentScanner,
    IFileService,
    IMarkdownRenderer,
    ISettingsService,
)
from pymdb.services.config.ini_config_service import IniConfigService
from pymdb.services.document_scanner import DocumentScanner
from pymdb.services.file_service import FileService
from pymdb.services.markdown_renderer import MarkdownRenderer
from pymdb.services.session import Session
from pymdb.services.settings_service import SettingsService
from pymdb.services.ui.adapters import QtFileDialogService, QtMessageService
from pymdb.services.ui.main_window import MainWindow
from pymdb.services.ui.ports import IFileDialogService, IMessageService
from pymdb.services.ui.presenters import IMainView, MainPresenter
from pymdb.utils.constants import APP_NAME, APP_ORG, WINDOW_TITLE

logger = logging.getLogger(__name__)


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds one Session per window, owned by its presenter
      - Builds the Qt window and attaches the presenter to it
    """

    def __init__(
        self,
        renderer: IMarkdownRenderer | None = None,
        files: IFileService | None = None,
        scanner: IDocumentScanner | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        config: IniConfigService | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
    ) -> None:
        # Core services (defaults if not supplied)
        self.renderer: IMarkdownRenderer = renderer or MarkdownRenderer()
        self.file_service: IFileService = files or FileService()
        self.scanner: IDocumentScanner = scanner or DocumentScanner()
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )
        self.config: IniConfigService = config or IniConfigService()

        # UI service ports (Qt-backed adapters by default)
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        organization: str = APP_ORG,
        application: str = APP_NAME,
        config: IniConfigService | None = None,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(qsettings=qsettings, config=config)

    # ---------- Factories ----------

    def build_session(self) -> Session:
        return Session(self.scanner, self.file_service)

    def build_main_presenter(self, view: IMainView) -> MainPresenter:
        return MainPresenter(
            view=view,
            session=self.build_session(),
            renderer=self.renderer,
            messages=self.messages,
            dialogs=self.dialogs,
        )

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = WINDOW_TITLE,
    ) -> MainWindow:
        """
        Create the Qt MainWindow, attach a presenter with a fresh Session and,
        when given, open the command-line start path.
        """
        window = MainWindow(
            settings=self.settings_service,
            app_title=app_title,
            wrap=bool(self.config.get_bool("editor", "wrap", True)),
            preview_visible=bool(self.config.get_bool("preview", "visible", True)),
        )
        presenter = self.build_main_presenter(view=window)
        window.attach_presenter(presenter)

        if start_path is not None:
            logger.info("Opening start path %s", start_path)
            presenter.open_start_path(start_path)

        return window
