"""Tests for Rules: attacking squares and check detection."""

from chessgrid.core.board import Board
from chessgrid.core.enums import Color, PieceKind
from chessgrid.core.piece import Piece
from chessgrid.core.rules import Rules
from chessgrid.core.types import Coordinate, parse_square


def place(board: Board, color: Color, kind: PieceKind, name: str) -> Coordinate:
    sq = parse_square(name)
    board.add_piece(Piece(color, kind), sq)
    return sq


def rook_on_file() -> Board:
    board = Board()
    board.add_piece(Piece(Color.WHITE, PieceKind.KING), Coordinate(0, 4))
    board.add_piece(Piece(Color.BLACK, PieceKind.ROOK), Coordinate(7, 4))
    return board


class TestAttackingSquares:
    def test_pawn_attacks_diagonals_regardless_of_occupancy(self) -> None:
        board = Board()
        pawn = Piece(Color.WHITE, PieceKind.PAWN)
        sq = place(board, Color.WHITE, PieceKind.PAWN, "d4")
        place(board, Color.WHITE, PieceKind.KNIGHT, "c5")
        attacked = set(Rules.attacking_squares_for(board, pawn, sq))
        assert attacked == {parse_square("c5"), parse_square("e5")}

    def test_pawn_never_attacks_forward(self) -> None:
        board = Board()
        pawn = Piece(Color.BLACK, PieceKind.PAWN)
        sq = place(board, Color.BLACK, PieceKind.PAWN, "e7")
        attacked = Rules.attacking_squares_for(board, pawn, sq)
        assert parse_square("e6") not in attacked
        assert parse_square("e5") not in attacked

    def test_other_kinds_match_move_list(self) -> None:
        board = Board.new_game()
        for name in ("b1", "a1", "d1", "e1", "c8"):
            sq = parse_square(name)
            piece = board.get_piece(sq)
            assert piece is not None
            assert Rules.attacking_squares_for(
                board, piece, sq
            ) == board.get_available_moves(sq)

    def test_attacked_squares_starting_position(self) -> None:
        board = Board.new_game()
        attacked = Rules.attacked_squares(board, Color.WHITE)
        # Every square on row 2 is covered by a pawn, none on row 3.
        assert all(Coordinate(2, col) in attacked for col in range(8))
        assert not any(Coordinate(3, col) in attacked for col in range(8))

    def test_is_square_attacked(self) -> None:
        board = Board()
        place(board, Color.BLACK, PieceKind.KNIGHT, "f6")
        assert Rules.is_square_attacked(board, parse_square("e4"), Color.BLACK)
        assert not Rules.is_square_attacked(board, parse_square("e4"), Color.WHITE)
        assert not Rules.is_square_attacked(board, parse_square("f5"), Color.BLACK)


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        board = Board.new_game()
        assert Rules.is_king_in_check(board, Color.WHITE) is None
        assert Rules.is_king_in_check(board, Color.BLACK) is None

    def test_rook_on_open_file(self) -> None:
        board = rook_on_file()
        assert Rules.is_king_in_check(board, Color.WHITE) == Coordinate(0, 4)

    def test_rook_blocked_by_pawn(self) -> None:
        board = rook_on_file()
        board.add_piece(Piece(Color.WHITE, PieceKind.PAWN), Coordinate(3, 4))
        assert Rules.is_king_in_check(board, Color.WHITE) is None

    def test_board_delegates(self) -> None:
        board = rook_on_file()
        assert board.is_king_in_check(Color.WHITE) == Coordinate(0, 4)
        assert board.is_king_in_check(Color.BLACK) is None

    def test_pawn_check(self) -> None:
        board = Board()
        place(board, Color.BLACK, PieceKind.KING, "e8")
        place(board, Color.WHITE, PieceKind.PAWN, "d7")
        assert Rules.is_king_in_check(board, Color.BLACK) == parse_square("e8")

    def test_pawn_in_front_does_not_check(self) -> None:
        board = Board()
        place(board, Color.BLACK, PieceKind.KING, "e8")
        place(board, Color.WHITE, PieceKind.PAWN, "e7")
        assert Rules.is_king_in_check(board, Color.BLACK) is None

    def test_knight_check(self) -> None:
        board = Board()
        place(board, Color.WHITE, PieceKind.KING, "e1")
        place(board, Color.BLACK, PieceKind.KNIGHT, "f3")
        assert Rules.is_king_in_check(board, Color.WHITE) == parse_square("e1")

    def test_bishop_check_and_block(self) -> None:
        board = Board()
        place(board, Color.WHITE, PieceKind.KING, "e1")
        place(board, Color.BLACK, PieceKind.BISHOP, "a5")
        assert Rules.is_king_in_check(board, Color.WHITE) == parse_square("e1")
        place(board, Color.BLACK, PieceKind.PAWN, "c3")
        assert Rules.is_king_in_check(board, Color.WHITE) is None

    def test_own_pieces_do_not_check(self) -> None:
        board = Board()
        place(board, Color.WHITE, PieceKind.KING, "e1")
        place(board, Color.WHITE, PieceKind.QUEEN, "e8")
        assert Rules.is_king_in_check(board, Color.WHITE) is None

    def test_missing_king_is_not_in_check(self) -> None:
        board = Board()
        place(board, Color.BLACK, PieceKind.QUEEN, "d8")
        assert Rules.is_king_in_check(board, Color.WHITE) is None

    def test_fresh_scan_after_move(self) -> None:
        board = rook_on_file()
        board.add_piece(Piece(Color.WHITE, PieceKind.PAWN), Coordinate(3, 4))
        assert board.is_king_in_check(Color.WHITE) is None
        board.move_piece(Coordinate(3, 4), Coordinate(4, 3))
        assert board.is_king_in_check(Color.WHITE) == Coordinate(0, 4)
