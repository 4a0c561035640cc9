"""Piece value object and the twelve colored pieces."""

from __future__ import annotations

from dataclasses import dataclass

from steed.core.enums import Color, PieceType

_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}

# White symbols run ♔..♙, black ♚..♟, in the order below.
_SYMBOL_ORDER = (
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.PAWN,
)
_SYMBOL_BASE = {Color.WHITE: 0x2654, Color.BLACK: 0x265A}


@dataclass(frozen=True, slots=True)
class Piece:
    """A colored chess piece. Empty squares hold ``None`` instead."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN letter (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN letter, e.g. 'N' -> white knight."""
        for ptype, letter in _LETTERS.items():
            if char == letter:
                return cls(Color.BLACK, ptype)
            if char == letter.upper():
                return cls(Color.WHITE, ptype)
        raise ValueError(f"Invalid piece character: {char!r}")

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return chr(_SYMBOL_BASE[self.color] + _SYMBOL_ORDER.index(self.piece_type))


WHITE_PAWN = Piece(Color.WHITE, PieceType.PAWN)
WHITE_KNIGHT = Piece(Color.WHITE, PieceType.KNIGHT)
WHITE_BISHOP = Piece(Color.WHITE, PieceType.BISHOP)
WHITE_ROOK = Piece(Color.WHITE, PieceType.ROOK)
WHITE_QUEEN = Piece(Color.WHITE, PieceType.QUEEN)
WHITE_KING = Piece(Color.WHITE, PieceType.KING)

BLACK_PAWN = Piece(Color.BLACK, PieceType.PAWN)
BLACK_KNIGHT = Piece(Color.BLACK, PieceType.KNIGHT)
BLACK_BISHOP = Piece(Color.BLACK, PieceType.BISHOP)
BLACK_ROOK = Piece(Color.BLACK, PieceType.ROOK)
BLACK_QUEEN = Piece(Color.BLACK, PieceType.QUEEN)
BLACK_KING = Piece(Color.BLACK, PieceType.KING)
