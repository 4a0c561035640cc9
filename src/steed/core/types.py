"""Board coordinates: columns, positions and linear indexes.

Board layout (rank 8 first, files a-h left to right):
    a8=0,  b8=1,  ..., h8=7
    a7=8,  b7=9,  ..., h7=15
    ...
    a1=56, b1=57, ..., h1=63
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TypeAlias, Union


class InvalidPosition(ValueError):
    """A square label or coordinate that does not name a board square."""


class OutOfBounds(InvalidPosition):
    """Offset arithmetic left the board."""


class Column(IntEnum):
    """File a-h, numbered 1-8."""

    A = 1
    B = 2
    C = 3
    D = 4
    E = 5
    F = 6
    G = 7
    H = 8

    @classmethod
    def from_char(cls, char: str) -> Column:
        """Column for a lowercase file letter, e.g. 'c' -> Column.C."""
        if len(char) != 1 or char not in "abcdefgh":
            raise InvalidPosition(f"Invalid column {char!r}")
        return cls(ord(char) - ord("a") + 1)

    @classmethod
    def from_int(cls, value: int) -> Column:
        """Column for a number 1-8."""
        if not 1 <= value <= 8:
            raise InvalidPosition(f"Invalid column {value!r}")
        return cls(value)

    @property
    def char(self) -> str:
        return chr(ord("a") + self.value - 1)

    @property
    def offset(self) -> int:
        """Zero-based file offset used in linear indexes."""
        return self.value - 1


@dataclass(frozen=True, order=True, slots=True)
class Position:
    """A single board square, e.g. ``Position(Column.E, 4)``."""

    column: Column
    row: int

    def __post_init__(self) -> None:
        if not isinstance(self.column, Column):
            raise InvalidPosition(f"Invalid column {self.column!r}")
        if not isinstance(self.row, int) or not 1 <= self.row <= 8:
            raise InvalidPosition(f"Invalid row {self.row!r}")

    def __str__(self) -> str:
        return f"{self.column.char}{self.row}"

    @property
    def index(self) -> int:
        """Linear index 0-63 (a8 = 0, h1 = 63)."""
        return (8 - self.row) * 8 + self.column.offset

    @classmethod
    def from_algebraic(cls, name: str) -> Position:
        """Parse a two-character label such as 'e4'."""
        if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
            raise InvalidPosition(f"Invalid square name: {name!r}")
        return cls(Column.from_char(name[0]), int(name[1]))

    @classmethod
    def from_index(cls, index: int) -> Position:
        if not 0 <= index < 64:
            raise InvalidPosition(f"Invalid square index: {index!r}")
        return ALL_POSITIONS[index]


ALL_POSITIONS: tuple[Position, ...] = tuple(
    Position(Column(index % 8 + 1), 8 - index // 8) for index in range(64)
)

PositionLike: TypeAlias = Union[Position, str, int]


def parse_position(name: str) -> Position:
    """Parse square name, e.g. 'e4'."""
    return Position.from_algebraic(name)


def position_from_index(index: int) -> Position:
    return Position.from_index(index)


def index_of(position: Position) -> int:
    return position.index


def as_position(value: PositionLike) -> Position:
    """Coerce a Position, an algebraic label or a linear index."""
    if isinstance(value, Position):
        return value
    if isinstance(value, str):
        return Position.from_algebraic(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return Position.from_index(value)
    raise InvalidPosition(f"Cannot interpret {value!r} as a square")


def position_in_bounds(column: int, row: int) -> Position:
    """Position for signed column/row numbers, or :class:`OutOfBounds`."""
    if 1 <= column <= 8 and 1 <= row <= 8:
        return ALL_POSITIONS[(8 - row) * 8 + column - 1]
    raise OutOfBounds(f"Position not on board: column={column}, row={row}")


def offset_in_bounds(position: Position, column_offset: int, row_offset: int) -> Position:
    """Shift *position* by the given offsets, raising :class:`OutOfBounds`
    when the result leaves the board."""
    return position_in_bounds(
        int(position.column) + column_offset, position.row + row_offset
    )
