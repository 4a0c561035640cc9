"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from steed.core.piece import Piece
from steed.core.types import Position


@dataclass(frozen=True, slots=True)
class Move:
    """A piece relocation from *start* to *end*, as recorded in history."""

    start: Position
    end: Position
    piece: Piece

    def __str__(self) -> str:
        return f"{self.start}{self.end}"

    @property
    def uci(self) -> str:
        """Long-algebraic notation, e.g. 'e2e4'."""
        return str(self)
