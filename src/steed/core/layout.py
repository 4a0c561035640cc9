"""Layout - piece placement on the 64 squares."""

from __future__ import annotations

from collections.abc import Iterator

from steed.core.enums import Color, PieceType
from steed.core.piece import Piece

_PIECE_TYPE_COUNT = 6
_COLOR_COUNT = 2

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Layout:
    """Mutable 64-slot piece array with incremental per-piece indexes.

    Slots are addressed by linear index (a8 = 0, h1 = 63).
    """

    __slots__ = ("_squares", "_piece_bitboards", "_color_bitboards")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        # [color][piece_type-1] -> bitboard of occupied indexes.
        self._piece_bitboards: list[list[int]] = [
            [0] * _PIECE_TYPE_COUNT for _ in range(_COLOR_COUNT)
        ]
        self._color_bitboards: list[int] = [0] * _COLOR_COUNT

    @staticmethod
    def _indexes_from_bitboard(bitboard: int) -> list[int]:
        indexes: list[int] = []
        while bitboard:
            lsb = bitboard & -bitboard
            indexes.append(lsb.bit_length() - 1)
            bitboard ^= lsb
        return indexes

    # -- Element access -----------------------------------------------------

    def __getitem__(self, index: int) -> Piece | None:
        return self._squares[index]

    def __setitem__(self, index: int, piece: Piece | None) -> None:
        old_piece = self._squares[index]
        if old_piece == piece:
            return

        mask = 1 << index
        if old_piece is not None:
            color_idx = int(old_piece.color)
            self._piece_bitboards[color_idx][old_piece.piece_type - 1] &= ~mask
            self._color_bitboards[color_idx] &= ~mask

        self._squares[index] = piece
        if piece is None:
            return

        color_idx = int(piece.color)
        self._piece_bitboards[color_idx][piece.piece_type - 1] |= mask
        self._color_bitboards[color_idx] |= mask

    def __iter__(self) -> Iterator[Piece | None]:
        return iter(self._squares)

    def is_empty(self, index: int) -> bool:
        return self._squares[index] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType) -> list[int]:
        """Indexes holding *color*'s *piece_type*, in ascending order."""
        return self._indexes_from_bitboard(
            self._piece_bitboards[int(color)][piece_type - 1]
        )

    def all_pieces(self, color: Color) -> list[int]:
        """All indexes occupied by *color*, in ascending order."""
        return self._indexes_from_bitboard(self._color_bitboards[int(color)])

    def count(self, color: Color) -> int:
        return self._color_bitboards[int(color)].bit_count()

    def king_index(self, color: Color) -> int | None:
        """First king of *color* in index order, or ``None``."""
        bitboard = self._piece_bitboards[int(color)][PieceType.KING - 1]
        if not bitboard:
            return None
        return (bitboard & -bitboard).bit_length() - 1

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Layout:
        layout = Layout()
        layout._squares = self._squares.copy()
        layout._piece_bitboards = [row.copy() for row in self._piece_bitboards]
        layout._color_bitboards = self._color_bitboards.copy()
        return layout

    def clear(self) -> None:
        self._squares = [None] * 64
        self._piece_bitboards = [[0] * _PIECE_TYPE_COUNT for _ in range(_COLOR_COUNT)]
        self._color_bitboards = [0] * _COLOR_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Layout:
        """Standard starting placement."""
        layout = cls()
        for file_idx, ptype in enumerate(_BACK_RANK):
            layout[file_idx] = Piece(Color.BLACK, ptype)
            layout[8 + file_idx] = Piece(Color.BLACK, PieceType.PAWN)
            layout[48 + file_idx] = Piece(Color.WHITE, PieceType.PAWN)
            layout[56 + file_idx] = Piece(Color.WHITE, ptype)
        return layout

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Layout):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank_idx in range(8):
            row = self._squares[rank_idx * 8 : rank_idx * 8 + 8]
            rows.append(f"{8 - rank_idx} {' '.join(str(p) if p else '.' for p in row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
