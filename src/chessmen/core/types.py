"""Coordinate type and square helpers.

Board layout (row, column):
    row 0 is white's back rank (rank 1), row 7 is black's (rank 8)
    column 0 is the a-file, column 7 is the h-file

So (0, 0) is a1, (0, 7) is h1 and (7, 7) is h8.
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8
MIN_INDEX = 0
MAX_INDEX = BOARD_SIZE - 1

_FILES = "abcdefgh"
_RANKS = "12345678"


class Coordinate(NamedTuple):
    """Immutable (row, column) pair."""

    row: int
    column: int

    def __str__(self) -> str:
        return square_name(self.row, self.column)


def is_on_board(row: int, column: int) -> bool:
    """Whether both indices fall inside the 8x8 board."""
    return MIN_INDEX <= row <= MAX_INDEX and MIN_INDEX <= column <= MAX_INDEX


def square_name(row: int, column: int) -> str:
    """Human-readable name, e.g. (0, 0) → 'a1', (3, 4) → 'e4'."""
    if not is_on_board(row, column):
        raise ValueError(f"Square off the board: ({row}, {column})")
    return _FILES[column] + _RANKS[row]


def parse_square(name: str) -> Coordinate:
    """Parse square name, e.g. 'e4' → Coordinate(row=3, column=4)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Coordinate(_RANKS.index(name[1]), _FILES.index(name[0]))


def all_coordinates() -> list[Coordinate]:
    """Every square of the board in row-major order."""
    return [
        Coordinate(row, column)
        for row in range(BOARD_SIZE)
        for column in range(BOARD_SIZE)
    ]
