from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from pymdb.di.container import Container
from pymdb.services.config.ini_config_service import IniConfigService
from pymdb.utils.constants import APP_NAME, APP_ORG, WINDOW_TITLE

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _project_root() -> Path:
    # PyInstaller bundles keep resources under sys._MEIPASS
    meipass = getattr(sys, "_MEIPASS", None)
    if meipass:
        return Path(meipass)
    return Path(__file__).resolve().parent.parent


def configure_logging(config: IniConfigService) -> None:
    logging.basicConfig(level=config.log_level(), format=LOG_FORMAT)


def parse_start_path(argv: Sequence[str]) -> Path | None:
    """Zero or one positional argument: a directory to browse or a file to open."""
    args = list(argv[1:])
    if not args:
        return None
    if len(args) > 1:
        logger.warning("Ignoring extra arguments: %s", " ".join(args[1:]))
    return Path(args[0])


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, composes the application via the DI container,
    and launches the main window.
    """
    config = IniConfigService(project_root=_project_root())
    configure_logging(config)
    logger.info("%s %s starting", APP_NAME, config.app_version())
    if config.loaded_from is not None:
        logger.info("Configuration loaded from %s", config.loaded_from)

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container.default(config=config)
    win = container.build_main_window(start_path=parse_start_path(argv), app_title=WINDOW_TITLE)
    win.show()

    return app.exec()
