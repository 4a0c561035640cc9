"""Pseudo-legal move generation, legality filtering and attack detection."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from steed.core.enums import Color, PieceType
from steed.core.move import Move
from steed.core.piece import Piece
from steed.core.types import (
    ALL_POSITIONS,
    OutOfBounds,
    Position,
    PositionLike,
    as_position,
    offset_in_bounds,
)

if TYPE_CHECKING:
    from steed.core.board import Board


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (1, 2),
    (-2, 1),
    (-1, 2),
    (2, -1),
    (1, -2),
    (-2, -1),
    (-1, -2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (-1, 1), (1, -1), (-1, -1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# (forward row step, starting row) per color
_PAWN_MARCH: dict[Color, tuple[int, int]] = {
    Color.WHITE: (1, 2),
    Color.BLACK: (-1, 7),
}


# -- Precomputed lookup tables (indexed by linear square index) --------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[int, ...], ...]:
    targets: list[tuple[int, ...]] = []
    for position in ALL_POSITIONS:
        moves: list[int] = []
        for column_offset, row_offset in offsets:
            try:
                moves.append(offset_in_bounds(position, column_offset, row_offset).index)
            except OutOfBounds:
                continue
        targets.append(tuple(moves))
    return tuple(targets)


def _build_pawn_targets(color: Color) -> tuple[tuple[int, ...], ...]:
    step, start_row = _PAWN_MARCH[color]
    targets: list[tuple[int, ...]] = []
    for position in ALL_POSITIONS:
        moves: list[int] = []
        try:
            moves.append(offset_in_bounds(position, 0, step).index)
        except OutOfBounds:
            pass
        else:
            if position.row == start_row:
                moves.append(offset_in_bounds(position, 0, 2 * step).index)
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[int, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[int, ...], ...]] = []
    for position in ALL_POSITIONS:
        square_rays: list[tuple[int, ...]] = []
        for column_step, row_step in directions:
            ray: list[int] = []
            distance = 1
            while True:
                try:
                    step = offset_in_bounds(
                        position, column_step * distance, row_step * distance
                    )
                except OutOfBounds:
                    break
                ray.append(step.index)
                distance += 1
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)
_PAWN_TARGETS = (_build_pawn_targets(Color.WHITE), _build_pawn_targets(Color.BLACK))

_SLIDER_RAYS: dict[PieceType, tuple[tuple[tuple[int, ...], ...], ...]] = {
    PieceType.BISHOP: _build_rays(BISHOP_DIRS),
    PieceType.ROOK: _build_rays(ROOK_DIRS),
    PieceType.QUEEN: _build_rays(QUEEN_DIRS),
}


class MoveGenerator:
    """Move queries for a given :class:`Board`.

    Legality is decided by simulation: each candidate is played on a
    throwaway copy from :meth:`Board.hypothetical_move` and rejected if it
    leaves the mover's king attacked. The board itself is never mutated.
    """

    __slots__ = ("_board", "_layout")

    def __init__(self, board: Board) -> None:
        self._board = board
        self._layout = board.layout

    # -- Public API ---------------------------------------------------------

    def moves_for(self, position: PositionLike) -> list[Position]:
        """Pseudo-legal destinations (may leave own king in check)."""
        index = as_position(position).index
        piece = self._layout[index]
        if piece is None:
            return []
        return [ALL_POSITIONS[to] for to in self._pseudo_targets(index, piece)]

    def filtered_moves_for(self, position: PositionLike) -> list[Position]:
        """Legal destinations for the piece on *position*."""
        index = as_position(position).index
        piece = self._layout[index]
        if piece is None:
            return []

        candidates = self._pseudo_targets(index, piece)
        candidates = self._filter_in_check(index, candidates, piece.color)
        candidates = self._filter_occupied(candidates, piece.color)
        return [ALL_POSITIONS[to] for to in candidates]

    def legal_moves(self, color: Color | None = None) -> list[Move]:
        """All legal moves for *color* (default: the side to move)."""
        if color is None:
            color = self._board.side_to_move
        layout = self._layout
        moves: list[Move] = []
        for index in layout.all_pieces(color):
            start = ALL_POSITIONS[index]
            piece = layout[index]
            assert piece is not None
            for end in self.filtered_moves_for(start):
                moves.append(Move(start, end, piece))
        return moves

    def has_legal_move(self, color: Color) -> bool:
        """Whether any piece of *color* has at least one legal move."""
        return any(
            self.filtered_moves_for(ALL_POSITIONS[index])
            for index in self._layout.all_pieces(color)
        )

    # -- Attack detection ---------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king reachable by an enemy piece?

        A color without a king is never in check.
        """
        king_index = self._layout.king_index(color)
        if king_index is None:
            return False
        return self._is_index_attacked(king_index, color.opposite)

    def is_square_attacked(self, position: PositionLike, by_color: Color) -> bool:
        """Is *position* among the pseudo-legal destinations of *by_color*?"""
        return self._is_index_attacked(as_position(position).index, by_color)

    def _is_index_attacked(self, index: int, by_color: Color) -> bool:
        layout = self._layout
        for from_index in layout.all_pieces(by_color):
            piece = layout[from_index]
            assert piece is not None
            if index in self._pseudo_targets(from_index, piece):
                return True
        return False

    # -- Filters ------------------------------------------------------------

    def _filter_in_check(
        self, from_index: int, candidates: Sequence[int], color: Color
    ) -> list[int]:
        board = self._board
        safe: list[int] = []
        for to_index in candidates:
            after = board.hypothetical_move(from_index, to_index)
            if not MoveGenerator(after).is_in_check(color):
                safe.append(to_index)
        return safe

    def _filter_occupied(self, candidates: Sequence[int], color: Color) -> list[int]:
        layout = self._layout
        free: list[int] = []
        for to_index in candidates:
            target = layout[to_index]
            if target is None or target.color != color:
                free.append(to_index)
        return free

    # -- Piece-specific generators (private) -------------------------------

    def _pseudo_targets(self, index: int, piece: Piece) -> Sequence[int]:
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            return _PAWN_TARGETS[int(piece.color)][index]
        if ptype == PieceType.KNIGHT:
            return _KNIGHT_TARGETS[index]
        if ptype == PieceType.KING:
            return _KING_TARGETS[index]
        return self._gen_sliding(_SLIDER_RAYS[ptype][index], piece.color)

    def _gen_sliding(
        self, rays: tuple[tuple[int, ...], ...], color: Color
    ) -> list[int]:
        layout = self._layout
        targets: list[int] = []
        for ray in rays:
            for to_index in ray:
                target = layout[to_index]
                if target is None:
                    targets.append(to_index)
                    continue
                if target.color != color:
                    targets.append(to_index)
                break
        return targets
