"""Pseudo-legal move generation.

Moves are *pseudo-legal*: a move that leaves the mover's own king in check
is still reported. A legality filter is a composition of
``get_available_moves`` + a trial ``Board.move_piece`` on a copy +
``Rules.is_king_in_check``, and lives outside this module.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessgrid.core.enums import Color, PieceKind
from chessgrid.core.errors import OutOfBounds
from chessgrid.core.types import KNIGHT_OFFSETS, Coordinate

if TYPE_CHECKING:
    from chessgrid.core.board import Board
    from chessgrid.core.piece import Piece


# color -> row delta of a forward step
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}


def pawn_attack_squares(color: Color, pos: Coordinate) -> list[Coordinate]:
    """The one or two diagonal-forward squares a pawn on *pos* attacks.

    Occupancy is irrelevant here; this is the check-detection view of a pawn.
    """
    forward = PAWN_DIRECTION[color]
    return pos.offsets(((forward, -1), (forward, 1)))


class MoveGenerator:
    """Generates pseudo-legal destinations on a given :class:`Board`."""

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def get_available_moves(self, pos: Coordinate) -> list[Coordinate]:
        """Destinations for the piece standing on *pos* (empty if none)."""
        piece = self._board.get_piece(pos)
        if piece is None:
            return []
        return self.moves_for(piece, pos)

    def moves_for(self, piece: Piece, pos: Coordinate) -> list[Coordinate]:
        """Destinations for *piece* as if it stood on *pos*."""
        kind = piece.kind
        color = piece.color
        if kind == PieceKind.PAWN:
            return self._gen_pawn(pos, color)
        if kind == PieceKind.KNIGHT:
            return self._gen_leaper(pos.offsets(KNIGHT_OFFSETS), color)
        if kind == PieceKind.BISHOP:
            return self._gen_sliding(pos.diagonal_rays(), color)
        if kind == PieceKind.ROOK:
            return self._gen_sliding(pos.orthogonal_rays(), color)
        if kind == PieceKind.QUEEN:
            return self._gen_sliding(
                pos.orthogonal_rays() + pos.diagonal_rays(), color
            )
        if kind == PieceKind.KING:
            return self._gen_leaper(pos.surrounding(), color)
        raise ValueError(f"Unknown piece kind: {kind!r}")

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, pos: Coordinate, color: Color) -> list[Coordinate]:
        board = self._board
        forward = PAWN_DIRECTION[color]
        moves: list[Coordinate] = []

        try:
            one_step = pos.try_add((forward, 0))
        except OutOfBounds:
            one_step = None
        if one_step is not None and board.is_empty(one_step):
            moves.append(one_step)

        # Only the landing square is tested; the square passed over is not.
        if pos.row == PAWN_START_ROW[color]:
            two_step = pos.try_add((2 * forward, 0))
            if board.is_empty(two_step):
                moves.append(two_step)

        for cap_sq in pawn_attack_squares(color, pos):
            target = board.get_piece(cap_sq)
            if target is not None and target.color != color:
                moves.append(cap_sq)
        return moves

    def _gen_leaper(
        self, targets: list[Coordinate], color: Color
    ) -> list[Coordinate]:
        board = self._board
        moves: list[Coordinate] = []
        for to_sq in targets:
            target = board.get_piece(to_sq)
            if target is None or target.color != color:
                moves.append(to_sq)
        return moves

    def _gen_sliding(
        self,
        rays: tuple[list[Coordinate], ...],
        color: Color,
    ) -> list[Coordinate]:
        board = self._board
        moves: list[Coordinate] = []
        for ray in rays:
            for to_sq in ray:
                target = board.get_piece(to_sq)
                if target is None:
                    moves.append(to_sq)
                    continue
                if target.color != color:
                    moves.append(to_sq)
                break
        return moves


def get_available_moves(board: Board, pos: Coordinate) -> list[Coordinate]:
    """Shorthand for ``MoveGenerator(board).get_available_moves(pos)``."""
    return MoveGenerator(board).get_available_moves(pos)
