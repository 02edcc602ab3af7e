"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessgrid.core import Board, Coordinate

    board = Board.new_game()
    for dest in board.get_available_moves(Coordinate(1, 1)):
        print(dest)
"""

from chessgrid.core.board import Board
from chessgrid.core.enums import Color, PieceKind
from chessgrid.core.errors import InvalidMove, OutOfBounds
from chessgrid.core.move_generator import (
    MoveGenerator,
    get_available_moves,
    pawn_attack_squares,
)
from chessgrid.core.piece import Piece
from chessgrid.core.rules import Rules
from chessgrid.core.types import (
    KNIGHT_OFFSETS,
    Coordinate,
    all_coordinates,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceKind",
    # Errors
    "InvalidMove",
    "OutOfBounds",
    # Types / helpers
    "KNIGHT_OFFSETS",
    "Coordinate",
    "all_coordinates",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "MoveGenerator",
    "Piece",
    "Rules",
    "get_available_moves",
    "pawn_attack_squares",
]
