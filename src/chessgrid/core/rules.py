"""Attack detection and king-in-check queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessgrid.core.enums import Color, PieceKind
from chessgrid.core.move_generator import MoveGenerator, pawn_attack_squares
from chessgrid.core.types import Coordinate

if TYPE_CHECKING:
    from chessgrid.core.board import Board
    from chessgrid.core.piece import Piece


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Every query rescans the board; nothing is cached between calls.
    """

    @staticmethod
    def attacking_squares_for(
        board: Board, piece: Piece, pos: Coordinate
    ) -> list[Coordinate]:
        """Squares *piece* on *pos* could capture on.

        Identical to the move list for every kind except pawns, which attack
        their diagonal-forward squares whatever occupies them and never
        attack the squares straight ahead.
        """
        if piece.kind == PieceKind.PAWN:
            return pawn_attack_squares(piece.color, pos)
        return MoveGenerator(board).moves_for(piece, pos)

    @staticmethod
    def attacked_squares(board: Board, by_color: Color) -> set[Coordinate]:
        """Union of the attacking squares of every *by_color* piece."""
        attacked: set[Coordinate] = set()
        for pos, piece in board.pieces(by_color):
            attacked.update(Rules.attacking_squares_for(board, piece, pos))
        return attacked

    @staticmethod
    def is_square_attacked(board: Board, pos: Coordinate, by_color: Color) -> bool:
        """Is *pos* attacked by any piece of *by_color*?"""
        for from_sq, piece in board.pieces(by_color):
            if pos in Rules.attacking_squares_for(board, piece, from_sq):
                return True
        return False

    @staticmethod
    def is_king_in_check(board: Board, color: Color) -> Coordinate | None:
        """*color*'s king square when the opponent attacks it.

        Returns ``None`` when the king is safe and also when *color* has no
        king on the board at all.
        """
        king_sq = board.king_square(color)
        if king_sq is None:
            return None
        if Rules.is_square_attacked(board, king_sq, color.switch()):
            return king_sq
        return None
