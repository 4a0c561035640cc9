"""High-level chess rules: check, checkmate, stalemate, repetition."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from steed.core.enums import Color, GameResult
from steed.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from steed.core.board import Board

_LOGGER = logging.getLogger(__name__)


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Methods taking an optional *color* default to the side to move.
    """

    REPETITION_LIMIT: ClassVar[int] = 3

    @staticmethod
    def is_in_check(board: Board, color: Color | None = None) -> bool:
        if color is None:
            color = board.side_to_move
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color | None = None) -> bool:
        if color is None:
            color = board.side_to_move
        gen = MoveGenerator(board)
        if not gen.is_in_check(color):
            return False
        return not gen.has_legal_move(color)

    @staticmethod
    def is_stalemate(board: Board) -> bool:
        color = board.side_to_move
        gen = MoveGenerator(board)
        if gen.is_in_check(color):
            return False
        return not gen.has_legal_move(color)

    @staticmethod
    def is_threefold_repetition(board: Board) -> bool:
        """Has any position of this game occurred three or more times?"""
        return board.peak_repetition_count() >= Rules.REPETITION_LIMIT

    @staticmethod
    def game_result(board: Board) -> GameResult:
        """Determine the current game result for the side to move."""
        color = board.side_to_move
        gen = MoveGenerator(board)

        if not gen.has_legal_move(color):
            if gen.is_in_check(color):
                _LOGGER.info("Checkmate, %s has no escape", color)
                return (
                    GameResult.BLACK_WINS
                    if color == Color.WHITE
                    else GameResult.WHITE_WINS
                )
            _LOGGER.info("Stalemate, %s has no legal move", color)
            return GameResult.DRAW

        if Rules.is_threefold_repetition(board):
            _LOGGER.info("Draw by repetition after %d moves", len(board.history))
            return GameResult.DRAW

        return GameResult.IN_PROGRESS
