"""Errors raised while constructing pieces."""

from __future__ import annotations

from chessmen.core.enums import Color


class ChessmenError(ValueError):
    """Base class for invalid piece construction."""


class InvalidPosition(ChessmenError):
    """Row or column outside [0, 7]."""

    def __init__(self, row: object, column: object) -> None:
        super().__init__(f"Row and column must be [0-7], got ({row!r}, {column!r})")
        self.row = row
        self.column = column


class InvalidPawnRank(ChessmenError):
    """Pawn placed on its own side's back rank."""

    def __init__(self, color: Color, row: int) -> None:
        if color == Color.WHITE:
            message = "row for white pawns must be >=1"
        else:
            message = "row for black pawns must be <=6"
        super().__init__(message)
        self.color = color
        self.row = row
