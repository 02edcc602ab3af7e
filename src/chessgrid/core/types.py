"""Coordinate value type and board geometry.

Board layout (row, column):
    row 0 is White's back rank, row 7 is Black's back rank
    column 0..7 maps to files a..h

    a1=(0, 0), b1=(0, 1), ..., h1=(0, 7)
    ...
    a8=(7, 0), ..., h8=(7, 7)

All ray helpers return coordinates ordered nearest to farthest from the
origin, never including the origin itself, and stop at the board edge.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessgrid.core.errors import OutOfBounds

BOARD_SIZE = 8

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

SURROUNDING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

_FILES = "abcdefgh"
_RANKS = "12345678"


def _in_range(index: int) -> bool:
    return 0 <= index < BOARD_SIZE


def _is_index(value: object) -> bool:
    # bool is an int subclass but never a board index
    return type(value) is int and _in_range(value)


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Validated (row, column) pair identifying a board square."""

    row: int
    column: int

    def __post_init__(self) -> None:
        if not (_is_index(self.row) and _is_index(self.column)):
            raise OutOfBounds()

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def try_new(cls, row: int, column: int) -> Coordinate:
        """Create a coordinate, raising :class:`OutOfBounds` if off the board."""
        return cls(row, column)

    def try_add(self, offset: tuple[int, int]) -> Coordinate:
        """Shift by a signed ``(d_row, d_column)`` offset; never wraps."""
        d_row, d_column = offset
        return Coordinate(self.row + d_row, self.column + d_column)

    @classmethod
    def parse(cls, name: str) -> Coordinate:
        """Parse an algebraic square name, e.g. 'e4' → (3, 4)."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(_RANKS.index(name[1]), _FILES.index(name[0]))

    # ── Display ──────────────────────────────────────────────────────────

    def square_name(self) -> str:
        """Human-readable name, e.g. (0, 0) → 'a1', (7, 7) → 'h8'."""
        return _FILES[self.column] + _RANKS[self.row]

    def __str__(self) -> str:
        return self.square_name()

    # ── Rays ─────────────────────────────────────────────────────────────

    def _walk(self, d_row: int, d_column: int) -> list[Coordinate]:
        squares: list[Coordinate] = []
        row = self.row + d_row
        column = self.column + d_column
        while _in_range(row) and _in_range(column):
            squares.append(Coordinate(row, column))
            row += d_row
            column += d_column
        return squares

    def up(self) -> list[Coordinate]:
        return self._walk(1, 0)

    def down(self) -> list[Coordinate]:
        return self._walk(-1, 0)

    def left(self) -> list[Coordinate]:
        return self._walk(0, -1)

    def right(self) -> list[Coordinate]:
        return self._walk(0, 1)

    def principal_diagonal_up(self) -> list[Coordinate]:
        return self._walk(1, 1)

    def principal_diagonal_down(self) -> list[Coordinate]:
        return self._walk(-1, -1)

    def secondary_diagonal_up(self) -> list[Coordinate]:
        return self._walk(-1, 1)

    def secondary_diagonal_down(self) -> list[Coordinate]:
        return self._walk(1, -1)

    def orthogonal_rays(self) -> tuple[list[Coordinate], ...]:
        """The four rook rays: up, down, left, right."""
        return (self.up(), self.down(), self.left(), self.right())

    def diagonal_rays(self) -> tuple[list[Coordinate], ...]:
        """The four bishop rays."""
        return (
            self.principal_diagonal_up(),
            self.principal_diagonal_down(),
            self.secondary_diagonal_up(),
            self.secondary_diagonal_down(),
        )

    def vertical(self) -> list[Coordinate]:
        """Every other square on the same column, bottom to top."""
        return [
            Coordinate(row, self.column)
            for row in range(BOARD_SIZE)
            if row != self.row
        ]

    def horizontal(self) -> list[Coordinate]:
        """Every other square on the same row, left to right."""
        return [
            Coordinate(self.row, column)
            for column in range(BOARD_SIZE)
            if column != self.column
        ]

    # ── Leapers ──────────────────────────────────────────────────────────

    def offsets(self, offsets: tuple[tuple[int, int], ...]) -> list[Coordinate]:
        """Apply each offset, silently dropping those that leave the board."""
        squares: list[Coordinate] = []
        for offset in offsets:
            try:
                squares.append(self.try_add(offset))
            except OutOfBounds:
                continue
        return squares

    def surrounding(self) -> list[Coordinate]:
        """Valid squares at Chebyshev distance 1 (3 in a corner, 8 inside)."""
        return self.offsets(SURROUNDING_OFFSETS)


def all_coordinates() -> list[Coordinate]:
    """All 64 squares in row-major order (a1, b1, ..., h8)."""
    return [
        Coordinate(row, column)
        for row in range(BOARD_SIZE)
        for column in range(BOARD_SIZE)
    ]


def square_name(pos: Coordinate) -> str:
    return pos.square_name()


def parse_square(name: str) -> Coordinate:
    """Parse square name, e.g. 'e4' → Coordinate(3, 4)."""
    return Coordinate.parse(name)
