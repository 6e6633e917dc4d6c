"""Core domain layer — single-piece chess rules with zero external dependencies.

Quick start::

    from chessmen.core import Color, PieceType, new_piece

    queen = new_piece(PieceType.QUEEN, 0, 3, Color.WHITE)
    queen.can_move(2, 5)  # True, diagonal
    queen.can_kill(new_piece(PieceType.PAWN, 1, 3, Color.BLACK))  # True
"""

from chessmen.core.enums import Color, PieceType
from chessmen.core.errors import ChessmenError, InvalidPawnRank, InvalidPosition
from chessmen.core.piece import Piece
from chessmen.core.pieces import (
    BLACK_PAWN_START_ROW,
    PIECE_CLASSES,
    WHITE_PAWN_START_ROW,
    Bishop,
    King,
    Knight,
    Pawn,
    Queen,
    Rook,
    new_piece,
    piece_from_char,
)
from chessmen.core.types import (
    BOARD_SIZE,
    Coordinate,
    all_coordinates,
    is_on_board,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Coordinate",
    "all_coordinates",
    "is_on_board",
    "parse_square",
    "square_name",
    # Errors
    "ChessmenError",
    "InvalidPawnRank",
    "InvalidPosition",
    # Pieces
    "Piece",
    "Pawn",
    "Knight",
    "Bishop",
    "Rook",
    "Queen",
    "King",
    "PIECE_CLASSES",
    "BLACK_PAWN_START_ROW",
    "WHITE_PAWN_START_ROW",
    "new_piece",
    "piece_from_char",
]
