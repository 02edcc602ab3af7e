"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from chessgrid.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from chessgrid.ui.board_view import BoardView

_LOGGER = logging.getLogger(__name__)


def configure_logging(settings: AppSettings) -> None:
    """Route log records to stderr at the configured level."""
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings."""
    app.setApplicationName("Chessgrid")
    app.setStyle("Fusion")


def create_board_view(settings: AppSettings | None = None) -> BoardView:
    """Build a board view showing a fresh game."""
    from chessgrid.ui.board_view import BoardView

    view = BoardView(settings)
    view.new_game()
    return view


def run_application(
    argv: list[str] | None = None, settings: AppSettings | None = None
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    settings = settings or AppSettings()
    configure_logging(settings)
    _LOGGER.info("Starting Chessgrid (theme=%s)", settings.board_theme)

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    view = create_board_view(settings)
    view.resize(640, 640)
    view.show()

    return app.exec()
