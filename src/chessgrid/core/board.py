"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chessgrid.core.enums import Color, PieceKind
from chessgrid.core.piece import Piece
from chessgrid.core.types import BOARD_SIZE, Coordinate

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


def _empty_grid() -> list[list[Piece | None]]:
    return [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]


class Board:
    """Mutable 8x8 grid holding at most one :class:`Piece` per square.

    The board is a passive store: it does not know whose turn it is and
    enforces nothing about piece counts or king presence. ``add_piece`` and
    ``move_piece`` trust their caller and never validate legality.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        # [row][column]
        self._squares: list[list[Piece | None]] = _empty_grid()

    # -- Factory ------------------------------------------------------------

    @classmethod
    def new(cls) -> Board:
        """Empty board."""
        return cls()

    @classmethod
    def new_game(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.init_board()
        return b

    def init_board(self) -> None:
        """Reset to the standard opening position."""
        self.clear()
        for column, kind in enumerate(_BACK_RANK):
            self._squares[0][column] = Piece(Color.WHITE, kind)
            self._squares[1][column] = Piece(Color.WHITE, PieceKind.PAWN)
            self._squares[6][column] = Piece(Color.BLACK, PieceKind.PAWN)
            self._squares[7][column] = Piece(Color.BLACK, kind)

    # -- Element access -----------------------------------------------------

    def get_piece(self, pos: Coordinate) -> Piece | None:
        return self._squares[pos.row][pos.column]

    def is_empty(self, pos: Coordinate) -> bool:
        return self._squares[pos.row][pos.column] is None

    # -- Mutation -----------------------------------------------------------

    def add_piece(self, piece: Piece, pos: Coordinate) -> None:
        """Place *piece* on *pos*, replacing any occupant."""
        self._squares[pos.row][pos.column] = piece

    def remove_piece(self, pos: Coordinate) -> Piece | None:
        """Empty *pos* and return whatever stood there."""
        piece = self._squares[pos.row][pos.column]
        self._squares[pos.row][pos.column] = None
        return piece

    def move_piece(self, from_pos: Coordinate, to_pos: Coordinate) -> None:
        """Relocate the occupant of *from_pos* to *to_pos*.

        Whatever stood on *to_pos* is discarded. Moving from an empty
        square simply empties the destination.
        """
        piece = self._squares[from_pos.row][from_pos.column]
        self._squares[from_pos.row][from_pos.column] = None
        self._squares[to_pos.row][to_pos.column] = piece

    def clear(self) -> None:
        self._squares = _empty_grid()

    def copy(self) -> Board:
        b = Board()
        b._squares = [row.copy() for row in self._squares]
        return b

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Coordinate, Piece]]:
        """Occupied squares in row-major order, optionally for one *color*."""
        for row in range(BOARD_SIZE):
            for column in range(BOARD_SIZE):
                piece = self._squares[row][column]
                if piece is None:
                    continue
                if color is not None and piece.color != color:
                    continue
                yield Coordinate(row, column), piece

    def king_square(self, color: Color) -> Coordinate | None:
        """Square of *color*'s king, or ``None`` if there is none.

        With more than one king of a color, the first in row-major order wins.
        """
        for pos, piece in self.pieces(color):
            if piece.kind == PieceKind.KING:
                return pos
        return None

    # -- Collaborator conveniences ------------------------------------------

    def get_available_moves(self, pos: Coordinate) -> list[Coordinate]:
        """Pseudo-legal destinations for the piece on *pos*."""
        from chessgrid.core.move_generator import MoveGenerator

        return MoveGenerator(self).get_available_moves(pos)

    def is_king_in_check(self, color: Color) -> Coordinate | None:
        """*color*'s king square if the opponent attacks it, else ``None``."""
        from chessgrid.core.rules import Rules

        return Rules.is_king_in_check(self, color)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __str__(self) -> str:
        lines: list[str] = []
        for row in reversed(self._squares):
            cells = [f"{p.draw_piece()} " if p else "  " for p in row]
            lines.append("".join(cells) + "\n")
        return "".join(lines)

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for p in self._squares[rank]:
                row.append(p.draw_piece() if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
