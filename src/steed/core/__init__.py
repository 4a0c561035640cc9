"""Core domain layer - pure chess rules with zero external dependencies.

Quick start::

    from steed.core import Board

    board = Board.standard()
    print(board.filtered_moves_for("e2"))
    board.apply_move("e2", "e4")
"""

from steed.core.board import Board
from steed.core.enums import CastlingRights, Color, GameResult, PieceType
from steed.core.layout import Layout
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
from steed.core.rules import Rules
from steed.core.types import (
    Column,
    InvalidPosition,
    OutOfBounds,
    Position,
    as_position,
    index_of,
    offset_in_bounds,
    parse_position,
    position_from_index,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "PieceType",
    # Coordinates
    "Column",
    "InvalidPosition",
    "OutOfBounds",
    "Position",
    "as_position",
    "index_of",
    "offset_in_bounds",
    "parse_position",
    "position_from_index",
    # Pieces
    "Piece",
    "WHITE_PAWN",
    "WHITE_KNIGHT",
    "WHITE_BISHOP",
    "WHITE_ROOK",
    "WHITE_QUEEN",
    "WHITE_KING",
    "BLACK_PAWN",
    "BLACK_KNIGHT",
    "BLACK_BISHOP",
    "BLACK_ROOK",
    "BLACK_QUEEN",
    "BLACK_KING",
    # Domain objects
    "Board",
    "Layout",
    "Move",
    "MoveGenerator",
    "Rules",
]
