"""BoardView — window hosting the board scene for one game."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QResizeEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from chessgrid.core.board import Board
from chessgrid.core.types import Coordinate
from chessgrid.ui.board_scene import BoardScene
from chessgrid.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)

TITLE = "Chess game"


class BoardView(QGraphicsView):
    """Shows a game on a :class:`BoardScene` scaled to the widget.

    The window title names the side to move and is refreshed after every
    move the scene reports.

    Signals:
        move_made(Coordinate, Coordinate): Bubbled up from BoardScene.
    """

    move_made = pyqtSignal(Coordinate, Coordinate)

    def __init__(
        self, settings: AppSettings | None = None, parent: QWidget | None = None
    ) -> None:
        self._scene = BoardScene()
        super().__init__(self._scene, parent)
        self._scene.apply_settings(settings or AppSettings())

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(8 * 40, 8 * 40)

        self._scene.move_made.connect(self._on_move_made)
        self._update_title()

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def new_game(self) -> Board:
        """Put a fresh starting position on the scene, White to move."""
        board = Board.new_game()
        self._scene.set_board(board)
        _LOGGER.debug("New game:\n%s", board)
        self._update_title()
        return board

    def _on_move_made(self, from_sq: Coordinate, to_sq: Coordinate) -> None:
        self._update_title()
        self.move_made.emit(from_sq, to_sq)

    def _update_title(self) -> None:
        if self._scene.board is None:
            self.setWindowTitle(TITLE)
            return
        side = str(self._scene.side_to_move).capitalize()
        self.setWindowTitle(f"{TITLE}: {side} to move")

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
