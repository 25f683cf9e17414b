"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from tictac.config import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Install a root handler once; later calls only adjust the level."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            _LOGGER.warning("Unknown log level %r, using WARNING", level)
            resolved = logging.WARNING
        level = resolved
    logging.basicConfig(level=level, format=_LOG_FORMAT)
    logging.getLogger().setLevel(level)


def _configure_application(app: QApplication, settings: AppSettings) -> None:
    """Apply app-wide settings and theme."""
    from tictac.ui.styles.theme import APP_STYLE

    app.setApplicationName(settings.window_title)
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None,
    settings: AppSettings | None = None,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from tictac.ui.main_window import MainWindow

    settings = settings or AppSettings()
    configure_logging(settings.log_level)

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app, settings)

    window = MainWindow(settings)
    window.show()
    _LOGGER.info("Application started")

    return app.exec()
