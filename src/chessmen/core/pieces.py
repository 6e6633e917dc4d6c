"""The six piece variants and their factories."""

from __future__ import annotations

import logging

from chessmen.core.enums import Color, PieceType
from chessmen.core.errors import ChessmenError, InvalidPawnRank
from chessmen.core.piece import Piece, parse_piece_char

_LOGGER = logging.getLogger(__name__)

# Pawns may advance two rows from here.
WHITE_PAWN_START_ROW = 1
BLACK_PAWN_START_ROW = 6


class Pawn(Piece):
    """Advances straight ahead, captures one step diagonally forward."""

    __slots__ = ()
    piece_type = PieceType.PAWN

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.color == Color.WHITE and self.row < WHITE_PAWN_START_ROW:
            raise InvalidPawnRank(self.color, self.row)
        if self.color == Color.BLACK and self.row > BLACK_PAWN_START_ROW:
            raise InvalidPawnRank(self.color, self.row)

    @property
    def on_starting_row(self) -> bool:
        if self.color == Color.WHITE:
            return self.row == WHITE_PAWN_START_ROW
        return self.row == BLACK_PAWN_START_ROW

    def _reaches(self, d_row: int, d_col: int) -> bool:
        if d_col != 0:
            return False
        advance = d_row * self.color.forward
        if self.on_starting_row:
            return advance in (1, 2)
        return advance == 1

    def can_kill(self, other: Piece) -> bool:
        if self.color == other.color:
            return False
        advance = (other.row - self.row) * self.color.forward
        return advance == 1 and abs(other.column - self.column) == 1


class Knight(Piece):
    """Jumps in an L: two squares one way, one square the other."""

    __slots__ = ()
    piece_type = PieceType.KNIGHT

    def _reaches(self, d_row: int, d_col: int) -> bool:
        return abs(d_row) * abs(d_col) == 2


class Bishop(Piece):
    __slots__ = ()
    piece_type = PieceType.BISHOP

    def _reaches(self, d_row: int, d_col: int) -> bool:
        return abs(d_row) == abs(d_col)


class Rook(Piece):
    __slots__ = ()
    piece_type = PieceType.ROOK

    def _reaches(self, d_row: int, d_col: int) -> bool:
        return d_row == 0 or d_col == 0


class Queen(Piece):
    """Rook and bishop lines combined."""

    __slots__ = ()
    piece_type = PieceType.QUEEN

    def _reaches(self, d_row: int, d_col: int) -> bool:
        return d_row == 0 or d_col == 0 or abs(d_row) == abs(d_col)


class King(Piece):
    __slots__ = ()
    piece_type = PieceType.KING

    def _reaches(self, d_row: int, d_col: int) -> bool:
        return abs(d_row) <= 1 and abs(d_col) <= 1


PIECE_CLASSES: dict[PieceType, type[Piece]] = {
    PieceType.PAWN: Pawn,
    PieceType.KNIGHT: Knight,
    PieceType.BISHOP: Bishop,
    PieceType.ROOK: Rook,
    PieceType.QUEEN: Queen,
    PieceType.KING: King,
}


def new_piece(piece_type: PieceType, row: int, column: int, color: Color) -> Piece:
    """Build the variant for *piece_type* at (*row*, *column*).

    Raises:
        InvalidPosition: row or column outside [0, 7].
        InvalidPawnRank: pawn on its own back rank.
        TypeError: *piece_type* or *color* of the wrong type.
    """
    if not isinstance(piece_type, PieceType):
        raise TypeError(f"piece_type must be a PieceType, got {piece_type!r}")
    try:
        return PIECE_CLASSES[piece_type](row, column, color)
    except ChessmenError as exc:
        _LOGGER.debug("Rejected %s at (%r, %r): %s", piece_type, row, column, exc)
        raise


def piece_from_char(char: str, row: int, column: int) -> Piece:
    """Create piece from FEN character, e.g. 'N' → white knight."""
    try:
        color, piece_type = parse_piece_char(char)
    except ValueError:
        _LOGGER.debug("Unknown piece character %r", char)
        raise
    return new_piece(piece_type, row, column, color)
