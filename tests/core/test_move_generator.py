"""Tests for MoveGenerator: per-piece movement, filters, attack detection."""

from steed.core.board import Board
from steed.core.enums import Color
from steed.core.move import Move
from steed.core.move_generator import MoveGenerator
from steed.core.piece import (
    BLACK_BISHOP,
    BLACK_KING,
    BLACK_KNIGHT,
    BLACK_PAWN,
    BLACK_QUEEN,
    BLACK_ROOK,
    WHITE_BISHOP,
    WHITE_KING,
    WHITE_KNIGHT,
    WHITE_PAWN,
    WHITE_QUEEN,
    WHITE_ROOK,
    Piece,
)
from steed.core.types import Position


def _names(positions: list[Position]) -> set[str]:
    return {str(p) for p in positions}


def _lone_piece_moves(piece: Piece, square: str) -> set[str]:
    board = Board.empty()
    board.place_piece(piece, square)
    return _names(board.filtered_moves_for(square))


def perft(board: Board, depth: int) -> int:
    """Count leaf nodes at *depth* using apply/undo."""
    if depth == 0:
        return 1
    nodes = 0
    for move in MoveGenerator(board).legal_moves():
        board.apply_move(move.start, move.end)
        nodes += perft(board, depth - 1)
        board.undo_move()
    return nodes


class TestPawn:
    def test_white_pawn(self) -> None:
        assert _lone_piece_moves(WHITE_PAWN, "a2") == {"a3", "a4"}
        assert _lone_piece_moves(WHITE_PAWN, "a3") == {"a4"}
        assert _lone_piece_moves(WHITE_PAWN, "d2") == {"d3", "d4"}
        assert _lone_piece_moves(WHITE_PAWN, "a8") == set()

    def test_black_pawn(self) -> None:
        assert _lone_piece_moves(BLACK_PAWN, "a7") == {"a6", "a5"}
        assert _lone_piece_moves(BLACK_PAWN, "a6") == {"a5"}
        assert _lone_piece_moves(BLACK_PAWN, "d7") == {"d6", "d5"}
        assert _lone_piece_moves(BLACK_PAWN, "a1") == set()

    def test_opening_pawn(self, standard_board: Board) -> None:
        assert _names(standard_board.filtered_moves_for("a2")) == {"a3", "a4"}

    def test_relocated_pawn(self, standard_board: Board) -> None:
        standard_board.apply_move("a2", "a3")
        assert _names(standard_board.filtered_moves_for("a3")) == {"a4"}

    def test_no_diagonal_capture(self, empty_board: Board) -> None:
        empty_board.place_piece(WHITE_PAWN, "d3")
        empty_board.place_piece(BLACK_KNIGHT, "e4")
        assert _names(empty_board.filtered_moves_for("d3")) == {"d4"}


class TestKing:
    def test_king_in_open(self) -> None:
        assert _lone_piece_moves(WHITE_KING, "b4") == {
            "a3", "a4", "a5", "b3", "b5", "c3", "c4", "c5",
        }

    def test_king_in_corner(self) -> None:
        assert _lone_piece_moves(BLACK_KING, "a1") == {"a2", "b1", "b2"}


class TestKnight:
    def test_knight_in_corner(self) -> None:
        assert _lone_piece_moves(BLACK_KNIGHT, "a1") == {"b3", "c2"}

    def test_knight_in_centre(self) -> None:
        assert _lone_piece_moves(WHITE_KNIGHT, "d4") == {
            "e6", "f5", "f3", "e2", "c2", "b3", "b5", "c6",
        }

    def test_knight_skips_friendly_squares(self, standard_board: Board) -> None:
        assert _names(standard_board.filtered_moves_for("b1")) == {"a3", "c3"}


class TestSliders:
    def test_queen_open_board(self) -> None:
        assert _lone_piece_moves(BLACK_QUEEN, "d4") == {
            "a1", "a4", "a7", "b2", "b4", "b6", "c3", "c4", "c5", "d1", "d2",
            "d3", "d5", "d6", "d7", "d8", "e3", "e4", "e5", "f2", "f4", "f6",
            "g1", "g4", "g7", "h4", "h8",
        }

    def test_rook_open_board(self) -> None:
        assert _lone_piece_moves(BLACK_ROOK, "a1") == {
            "a2", "a3", "a4", "a5", "a6", "a7", "a8",
            "b1", "c1", "d1", "e1", "f1", "g1", "h1",
        }

    def test_bishop_open_board(self) -> None:
        assert _lone_piece_moves(BLACK_BISHOP, "d4") == {
            "a1", "a7", "b2", "b6", "c3", "c5", "e3", "e5", "f2", "f6", "g1",
            "g7", "h8",
        }

    def test_capture_and_blocking(self, empty_board: Board) -> None:
        empty_board.place_piece(BLACK_QUEEN, "d8")
        empty_board.place_piece(BLACK_BISHOP, "c8")
        empty_board.place_piece(BLACK_BISHOP, "e8")
        empty_board.place_piece(WHITE_BISHOP, "d7")
        moves = _names(empty_board.filtered_moves_for("d8"))
        assert moves == {"d7", "c7", "b6", "a5", "e7", "f6", "g5", "h4"}
        assert "d6" not in moves
        assert "c8" not in moves and "e8" not in moves

    def test_blocked_in_opening(self, standard_board: Board) -> None:
        for square in ("a1", "c1", "d1", "h8", "f8"):
            assert standard_board.filtered_moves_for(square) == []


class TestEmptySquare:
    def test_blank_square(self, empty_board: Board) -> None:
        assert empty_board.filtered_moves_for("a2") == []
        assert empty_board.moves_for("a2") == []


class TestCheckSafety:
    def test_cant_move_into_check(self, empty_board: Board) -> None:
        empty_board.place_piece(BLACK_ROOK, "b8")
        empty_board.place_piece(WHITE_KING, "a1")
        assert _names(empty_board.filtered_moves_for("a1")) == {"a2"}

    def test_king_avoids_queen_and_bishop(self, empty_board: Board) -> None:
        empty_board.place_piece(BLACK_KING, "d4")
        empty_board.place_piece(WHITE_QUEEN, "c1")
        empty_board.place_piece(WHITE_BISHOP, "a2")
        assert _names(empty_board.filtered_moves_for("d4")) == {"d3", "e5", "e4"}

    def test_pinned_piece(self, empty_board: Board) -> None:
        empty_board.place_piece(BLACK_KING, "d4")
        empty_board.place_piece(BLACK_PAWN, "e4")
        empty_board.place_piece(WHITE_ROOK, "f4")
        assert empty_board.filtered_moves_for("e4") == []
        # The pin only shows up once check-safety is applied.
        assert _names(empty_board.moves_for("e4")) == {"e3"}

    def test_must_move_out_of_check(self, empty_board: Board) -> None:
        empty_board.place_piece(BLACK_KING, "a8")
        empty_board.place_piece(WHITE_ROOK, "a1")
        empty_board.place_piece(BLACK_PAWN, "b7")
        assert empty_board.filtered_moves_for("b7") == []
        assert _names(empty_board.filtered_moves_for("a8")) == {"b8"}

    def test_filter_does_not_mutate(self, empty_board: Board) -> None:
        empty_board.place_piece(BLACK_KING, "d4")
        empty_board.place_piece(WHITE_ROOK, "f4")
        before = empty_board.copy()
        empty_board.filtered_moves_for("d4")
        assert empty_board == before


class TestAttackDetection:
    def test_rook_gives_check(self, empty_board: Board) -> None:
        gen = MoveGenerator(empty_board)
        assert not gen.is_in_check(Color.WHITE)

        empty_board.place_piece(WHITE_KING, "a1")
        empty_board.place_piece(BLACK_ROOK, "a8")
        gen = MoveGenerator(empty_board)
        assert gen.is_in_check(Color.WHITE)
        assert not gen.is_in_check(Color.BLACK)

    def test_knight_gives_check(self, empty_board: Board) -> None:
        empty_board.place_piece(BLACK_KING, "a8")
        empty_board.place_piece(WHITE_KNIGHT, "c7")
        gen = MoveGenerator(empty_board)
        assert gen.is_in_check(Color.BLACK)
        assert not gen.is_in_check(Color.WHITE)

    def test_blocked_ray_is_not_check(self, empty_board: Board) -> None:
        empty_board.place_piece(WHITE_KING, "a1")
        empty_board.place_piece(WHITE_PAWN, "a4")
        empty_board.place_piece(BLACK_ROOK, "a8")
        assert not MoveGenerator(empty_board).is_in_check(Color.WHITE)

    def test_square_attacked(self, empty_board: Board) -> None:
        empty_board.place_piece(BLACK_BISHOP, "c8")
        gen = MoveGenerator(empty_board)
        assert gen.is_square_attacked("h3", Color.BLACK)
        assert not gen.is_square_attacked("h3", Color.WHITE)
        assert not gen.is_square_attacked("c7", Color.BLACK)


class TestLegalMoves:
    def test_opening_move_count(self, standard_board: Board) -> None:
        moves = standard_board.legal_moves()
        assert len(moves) == 20
        assert all(move.piece.color == Color.WHITE for move in moves)

    def test_black_reply_count(self, standard_board: Board) -> None:
        assert len(standard_board.legal_moves(Color.BLACK)) == 20

    def test_moves_carry_piece(self, empty_board: Board) -> None:
        empty_board.place_piece(WHITE_KING, "h1")
        moves = MoveGenerator(empty_board).legal_moves(Color.WHITE)
        assert {m.uci for m in moves} == {"h1g1", "h1g2", "h1h2"}
        assert all(isinstance(m, Move) and m.piece == WHITE_KING for m in moves)

    def test_perft_depth_1(self, standard_board: Board) -> None:
        assert perft(standard_board, 1) == 20

    def test_perft_depth_2(self, standard_board: Board) -> None:
        assert perft(standard_board, 2) == 400
        assert standard_board == Board.standard()
