"""Board - complete game state (layout + side to move + history)."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from steed.core.enums import CastlingRights, Color
from steed.core.layout import Layout
from steed.core.move import Move
from steed.core.move_generator import MoveGenerator
from steed.core.piece import Piece
from steed.core.rules import Rules
from steed.core.types import Position, PositionLike, as_position
from steed.core.zobrist import piece_key, position_key, side_to_move_key

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class _UndoState:
    """What :meth:`Board.apply_move` overwrote, so it can be put back."""

    captured: Piece | None


class Board:
    """Full board state: layout, side to move, castling flags and history.

    Every applied move is appended to :attr:`history` and the resulting
    position key is counted, which is what repetition detection reads.
    Legality is not checked here; see :class:`MoveGenerator`.
    """

    __slots__ = (
        "layout",
        "side_to_move",
        "castling",
        "history",
        "_undo_stack",
        "_zobrist_hash",
        "_key_stack",
        "_key_counts",
    )

    def __init__(
        self,
        layout: Layout | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
    ) -> None:
        # The board owns its layout; the caller's stays untouched.
        self.layout = layout.copy() if layout is not None else Layout()
        self.side_to_move = side_to_move
        self.castling = castling
        self.history: list[Move] = []
        self._undo_stack: list[_UndoState] = []
        self._zobrist_hash = self._compute_zobrist_hash()
        key = self._zobrist_hash
        self._key_stack: list[int] = [key]
        self._key_counts: dict[int, int] = {key: 1}

    @classmethod
    def empty(cls) -> Board:
        return cls(Layout())

    @classmethod
    def standard(cls) -> Board:
        """Standard opening position, white to move."""
        return cls(Layout.initial())

    # ── Square access ────────────────────────────────────────────────────

    def piece_at(self, position: PositionLike) -> Piece | None:
        return self.layout[as_position(position).index]

    def place_piece(self, piece: Piece | None, position: PositionLike) -> None:
        """Put *piece* on *position* (``None`` clears the square).

        Edits are treated as part of the current position rather than as a
        new occurrence of it.
        """
        index = as_position(position).index
        old_piece = self.layout[index]
        if old_piece == piece:
            return
        if old_piece is not None:
            self._toggle_piece_hash(old_piece, index)
        self.layout[index] = piece
        if piece is not None:
            self._toggle_piece_hash(piece, index)
        self._amend_current_key()

    def enumerate_pieces(self) -> Iterator[tuple[int, Piece | None]]:
        """``(index, piece)`` for all 64 squares, empty ones included."""
        return enumerate(self.layout)

    # ── Moves ────────────────────────────────────────────────────────────

    def apply_move(self, start: PositionLike, end: PositionLike) -> Move:
        """Move the piece on *start* to *end* and pass the turn."""
        start_pos = as_position(start)
        end_pos = as_position(end)
        piece = self.layout[start_pos.index]
        if piece is None:
            raise ValueError(f"No piece on {start_pos}")

        captured = self._relocate(start_pos.index, end_pos.index)
        move = Move(start_pos, end_pos, piece)
        self.history.append(move)
        self._undo_stack.append(_UndoState(captured=captured))

        self.side_to_move = self.side_to_move.opposite
        self._zobrist_hash ^= side_to_move_key()
        key = self._zobrist_hash
        self._key_stack.append(key)
        self._key_counts[key] = self._key_counts.get(key, 0) + 1

        _LOGGER.debug("Applied %s, %s to move", move, self.side_to_move)
        return move

    def undo_move(self) -> Move:
        """Revert the last :meth:`apply_move` and return the move undone."""
        if not self.history:
            raise ValueError("No move to undo")
        move = self.history.pop()
        state = self._undo_stack.pop()
        self._forget_key(self._key_stack.pop())

        self.side_to_move = self.side_to_move.opposite
        self.layout[move.end.index] = state.captured
        self.layout[move.start.index] = move.piece

        self._zobrist_hash = self._compute_zobrist_hash()
        self._amend_current_key()
        _LOGGER.debug("Undid %s, %s to move", move, self.side_to_move)
        return move

    def hypothetical_move(self, start: PositionLike, end: PositionLike) -> Board:
        """Copy of this board with the piece on *start* moved to *end*.

        Side to move and history are left as they are; this board is not
        touched.
        """
        board = self.copy()
        board._relocate(as_position(start).index, as_position(end).index)
        return board

    def _relocate(self, from_index: int, to_index: int) -> Piece | None:
        """Move whatever stands on *from_index*; return what it replaced."""
        if from_index == to_index:
            return None
        piece = self.layout[from_index]
        captured = self.layout[to_index]
        if piece is not None:
            self._toggle_piece_hash(piece, from_index)
        if captured is not None:
            self._toggle_piece_hash(captured, to_index)
        self.layout[from_index] = None
        self.layout[to_index] = piece
        if piece is not None:
            self._toggle_piece_hash(piece, to_index)
        return captured

    # ── Rule queries ─────────────────────────────────────────────────────

    def moves_for(self, position: PositionLike) -> list[Position]:
        """Pseudo-legal destinations for the piece on *position*."""
        return MoveGenerator(self).moves_for(position)

    def filtered_moves_for(self, position: PositionLike) -> list[Position]:
        """Legal destinations for the piece on *position*."""
        return MoveGenerator(self).filtered_moves_for(position)

    def legal_moves(self, color: Color | None = None) -> list[Move]:
        return MoveGenerator(self).legal_moves(color)

    def in_check(self, color: Color | None = None) -> bool:
        return Rules.is_in_check(self, color)

    def checkmate(self, color: Color | None = None) -> bool:
        return Rules.is_checkmate(self, color)

    def stalemate(self) -> bool:
        return Rules.is_stalemate(self)

    def threefold_draw(self) -> bool:
        return Rules.is_threefold_repetition(self)

    # ── Repetition bookkeeping ───────────────────────────────────────────

    @property
    def zobrist_hash(self) -> int:
        """Key of the current position (layout, side to move, castling)."""
        return self._zobrist_hash

    def repetition_count(self) -> int:
        """How many times the current position occurred in this game."""
        return self._key_counts.get(self._zobrist_hash, 0)

    def peak_repetition_count(self) -> int:
        """Occurrences of the most repeated position in this game."""
        return max(self._key_counts.values())

    def _amend_current_key(self) -> None:
        old_key = self._key_stack[-1]
        new_key = self._zobrist_hash
        if old_key == new_key:
            return
        self._forget_key(old_key)
        self._key_stack[-1] = new_key
        self._key_counts[new_key] = self._key_counts.get(new_key, 0) + 1
        _LOGGER.debug("Board edited, position key now %016x", new_key)

    def _forget_key(self, key: int) -> None:
        count = self._key_counts[key] - 1
        if count:
            self._key_counts[key] = count
        else:
            del self._key_counts[key]

    def _toggle_piece_hash(self, piece: Piece, index: int) -> None:
        self._zobrist_hash ^= piece_key(piece, index)

    def _compute_zobrist_hash(self) -> int:
        return position_key(self.layout, self.side_to_move, self.castling)

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Board:
        """Independent deep copy, history and repetition record included."""
        board = Board.__new__(Board)
        board.layout = self.layout.copy()
        board.side_to_move = self.side_to_move
        board.castling = self.castling
        board.history = self.history.copy()
        board._undo_stack = self._undo_stack.copy()
        board._zobrist_hash = self._zobrist_hash
        board._key_stack = self._key_stack.copy()
        board._key_counts = self._key_counts.copy()
        return board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.layout == other.layout
            and self.side_to_move == other.side_to_move
            and self.castling == other.castling
            and self.history == other.history
        )

    def __repr__(self) -> str:
        return f"{self.layout!r}\n{self.side_to_move!s} to move"
