"""Piece value object shared by all six variants."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from chessmen.core.enums import Color, PieceType
from chessmen.core.errors import InvalidPosition
from chessmen.core.types import Coordinate, all_coordinates, is_on_board, square_name

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


def _is_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class Piece(ABC):
    """Immutable chess piece evaluated in isolation.

    A piece knows only its own square and color. It has no notion of a
    board, so sliding pieces are never blocked and the identity square is
    never a legal move. "Moving" a piece means building a new one, see
    :meth:`move_to`.

    Subclasses set :attr:`piece_type` and implement :meth:`_reaches`.
    """

    piece_type: ClassVar[PieceType]

    row: int
    column: int
    color: Color

    def __post_init__(self) -> None:
        if not isinstance(self.color, Color):
            raise TypeError(f"color must be a Color, got {self.color!r}")
        if not (
            _is_index(self.row)
            and _is_index(self.column)
            and is_on_board(self.row, self.column)
        ):
            raise InvalidPosition(self.row, self.column)

    # ── Geometry ─────────────────────────────────────────────────────────

    @abstractmethod
    def _reaches(self, d_row: int, d_col: int) -> bool:
        """Variant geometry for a signed, non-zero displacement."""

    def can_move(self, row: int, column: int) -> bool:
        """Whether the piece could move to (*row*, *column*)."""
        if row == self.row and column == self.column:
            return False
        return self._reaches(row - self.row, column - self.column)

    def can_kill(self, other: Piece) -> bool:
        """Whether the piece could capture *other* from its current square."""
        return self.color != other.color and self.can_move(other.row, other.column)

    def reachable_squares(self) -> list[Coordinate]:
        """All squares :meth:`can_move` accepts, in row-major order."""
        return [c for c in all_coordinates() if self.can_move(c.row, c.column)]

    def move_to(self, row: int, column: int) -> Piece:
        """Same piece on another square; legality is up to the caller."""
        return dataclasses.replace(self, row=row, column=column)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def position(self) -> Coordinate:
        return Coordinate(self.row, self.column)

    @property
    def square(self) -> str:
        """Algebraic square name, e.g. 'e4'."""
        return square_name(self.row, self.column)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]


def parse_piece_char(char: str) -> tuple[Color, PieceType]:
    """Color and type for a FEN character, e.g. 'n' → (BLACK, KNIGHT)."""
    try:
        return _CHAR_MAP[char]
    except KeyError:
        raise ValueError(f"Invalid piece character: {char!r}") from None
