"""Position keys for repetition detection.

A key folds together every piece placement, the side to move and the
castling flags, so two boards reached by different move orders share a key
exactly when they would count as the same position.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from steed.core.enums import CastlingRights, Color
from steed.core.piece import Piece

_SEED: Final = 0x5EED5EED0C4E55A1
_MASK_64: Final = 0xFFFFFFFFFFFFFFFF

_SQUARE_COUNT: Final = 64
_PIECE_SLOTS: Final = 2 * 6 * _SQUARE_COUNT


def _splitmix64(state: int) -> int:
    z = (state + 0x9E3779B97F4A7C15) & _MASK_64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK_64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK_64
    return z ^ (z >> 31)


def _draw(slot: int) -> int:
    return _splitmix64((_SEED + slot) & _MASK_64)


def _placement_slot(color: int, piece_type: int, index: int) -> int:
    return (color * 6 + piece_type - 1) * _SQUARE_COUNT + index


# Flat table, one entry per (color, piece type, square)
_PLACEMENT_KEYS: Final = tuple(_draw(slot) for slot in range(_PIECE_SLOTS))
_BLACK_TO_MOVE_KEY: Final = _draw(_PIECE_SLOTS)
# One entry per combination of the two color flags
_CASTLING_KEYS: Final = tuple(_draw(_PIECE_SLOTS + 1 + flags) for flags in range(4))


def piece_key(piece: Piece, index: int) -> int:
    """Key for *piece* standing on linear *index*."""
    return _PLACEMENT_KEYS[
        _placement_slot(int(piece.color), int(piece.piece_type), index)
    ]


def side_to_move_key() -> int:
    """Toggle applied while black is to move."""
    return _BLACK_TO_MOVE_KEY


def castling_key(castling: CastlingRights) -> int:
    return _CASTLING_KEYS[int(castling & CastlingRights.ALL)]


def position_key(
    squares: Iterable[Piece | None],
    side_to_move: Color,
    castling: CastlingRights,
) -> int:
    """Key of a whole position, *squares* listed in index order (a8 first).

    Boards keep their key up to date incrementally with :func:`piece_key`
    and :func:`side_to_move_key`; this is the from-scratch equivalent.
    """
    key = castling_key(castling)
    if side_to_move == Color.BLACK:
        key ^= _BLACK_TO_MOVE_KEY
    for index, piece in enumerate(squares):
        if piece is not None:
            key ^= piece_key(piece, index)
    return key
