"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessgrid.core.board import Board
from chessgrid.core.enums import Color
from chessgrid.core.types import Coordinate, all_coordinates
from chessgrid.ui.settings import AppSettings
from chessgrid.ui.theme import THEMES, BoardTheme

_LOGGER = logging.getLogger(__name__)


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece glyphs.

    Turn-taking lives here, not in the board: only pieces of
    :attr:`side_to_move` can be selected, and only destinations reported by
    the move generator are accepted.

    Signals:
        move_made(Coordinate, Coordinate): Emitted after a click completes a move.
    """

    move_made = pyqtSignal(Coordinate, Coordinate)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._side_to_move = Color.WHITE

        # Interaction state
        self._selected_sq: Coordinate | None = None
        self._available: list[Coordinate] = []
        self._show_coordinates = True
        self._show_legal_moves = True
        self._show_check = True

        # Visual layers
        self._square_items: dict[Coordinate, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._check_items: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Coordinate, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board | None:
        return self._board

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    def set_board(self, board: Board, side_to_move: Color = Color.WHITE) -> None:
        """Display *board* (full redraw of pieces)."""
        self._board = board
        self._side_to_move = side_to_move
        self._clear_selection()
        self._sync_pieces()
        self.highlight_check()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        if self._board:
            self._sync_pieces()
            self.highlight_check()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide destination highlights."""
        self._show_legal_moves = visible
        if not visible:
            self._clear_items(self._legal_dot_items)

    def set_show_check(self, visible: bool) -> None:
        self._show_check = visible
        self.highlight_check()

    def apply_settings(self, settings: AppSettings) -> None:
        """Apply user-configurable board settings."""
        theme = THEMES.get(settings.board_theme)
        if theme is None:
            _LOGGER.warning(
                "Unknown board theme %r, using Classic", settings.board_theme
            )
            theme = BoardTheme.default()
        self.set_theme(theme)
        self.set_show_coordinates(settings.show_coordinates)
        self.set_show_legal_moves(settings.show_legal_moves)
        self.set_show_check(settings.highlight_check)

    def highlight_check(self) -> None:
        """Highlight the side to move's king if it is attacked."""
        self._clear_items(self._check_items)
        if self._board is None or not self._show_check:
            return
        king_sq = self._board.is_king_in_check(self._side_to_move)
        if king_sq is not None:
            _LOGGER.info("%s king in check on %s", self._side_to_move, king_sq)
            rect = self._make_highlight(king_sq, self._theme.highlight_check)
            rect.setZValue(0.6)
            self._check_items.append(rect)

    def handle_click(self, sq: Coordinate | None) -> bool:
        """React to a click on *sq*; return whether a move was made."""
        if self._board is None:
            return False
        if sq is None:
            self._clear_selection()
            return False

        # Clicking an available destination → make the move
        if self._selected_sq is not None and sq in self._available:
            self._make_move(self._selected_sq, sq)
            return True

        piece = self._board.get_piece(sq)
        if piece is not None and piece.color == self._side_to_move:
            self._select_square(sq)
        else:
            self._clear_selection()
        return False

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Sans Serif", max(9, t // 8))

        for sq in all_coordinates():
            vc, vr = self._visual_coords(sq)
            is_dark = (sq.row + sq.column) % 2 == 0
            color = self._theme.dark_square if is_dark else self._theme.light_square
            rect = QGraphicsRectItem(vc * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            label_color = self._theme.coord_dark if is_dark else self._theme.coord_light
            # Rank numbers (left edge)
            if sq.column == 0:
                self._add_coord_label(
                    str(sq.row + 1), font, label_color, vc * t + 2, vr * t + 1
                )
            # File letters (bottom edge)
            if sq.row == 0:
                self._add_coord_label(
                    sq.square_name()[0],
                    font,
                    label_color,
                    vc * t + t - 12,
                    vr * t + t - 16,
                )

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord_label(
        self, text: str, font: QFont, color: QColor, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(text)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all glyph items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._board is None:
            return

        t = self.TILE
        font = QFont("DejaVu Sans", int(t * 0.6))
        for sq, piece in self._board.pieces():
            item = QGraphicsSimpleTextItem(piece.draw_piece())
            item.setFont(font)
            item.setBrush(QBrush(self._theme.glyph))
            vc, vr = self._visual_coords(sq)
            bounds = item.boundingRect()
            item.setPos(
                vc * t + (t - bounds.width()) / 2,
                vr * t + (t - bounds.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._board is None or event is None:
            return super().mousePressEvent(event)
        self.handle_click(self._pos_to_square(event.scenePos()))
        super().mousePressEvent(event)

    def _make_move(self, from_sq: Coordinate, to_sq: Coordinate) -> None:
        assert self._board is not None
        _LOGGER.debug("%s moves %s -> %s", self._side_to_move, from_sq, to_sq)
        self._clear_selection()
        self._board.move_piece(from_sq, to_sq)
        self._side_to_move = self._side_to_move.switch()
        self._sync_pieces()
        self.highlight_check()
        self.move_made.emit(from_sq, to_sq)

    # ── Selection / highlights ───────────────────────────────────────────

    def _select_square(self, sq: Coordinate) -> None:
        self._clear_selection()
        self._selected_sq = sq

        # Highlight origin
        rect = self._make_highlight(sq, self._theme.highlight_from)
        self._highlight_items.append(rect)

        if self._board is not None:
            self._available = self._board.get_available_moves(sq)
            if self._show_legal_moves:
                for dest in self._available:
                    dot = self._make_highlight(dest, self._theme.highlight_to)
                    self._legal_dot_items.append(dot)

    def _clear_selection(self) -> None:
        self._selected_sq = None
        self._available = []
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, sq: Coordinate) -> tuple[int, int]:
        """Board coordinate → visual (column, row); White at the bottom."""
        return sq.column, 7 - sq.row

    def _pos_to_square(self, pos: QPointF) -> Coordinate | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        return Coordinate(7 - row, col)

    def _make_highlight(self, sq: Coordinate, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vc, vr = self._visual_coords(sq)
        rect = QGraphicsRectItem(vc * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
