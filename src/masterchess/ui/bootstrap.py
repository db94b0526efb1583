"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from masterchess.runtime_assets import asset_path

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _check_assets() -> None:
    """Warn early about piece artwork missing from the installation."""
    pieces_dir = asset_path("pieces")
    if not pieces_dir.is_dir():
        _LOGGER.warning("Piece assets not found: %s", pieces_dir)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from masterchess.ui.styles.theme import APP_STYLE

    app.setApplicationName("Masterchess")
    app.setStyle("Fusion")
    _check_assets()
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from masterchess.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow()
    window.show()
    _LOGGER.info("Masterchess window shown")

    return app.exec()
