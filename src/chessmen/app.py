"""Command-line entry point.

Usage:
    chessmen <piece> <square> [--color white|black] [-v]

<piece> is a FEN letter (``N``, ``q``) or a piece name (``knight``).
Prints a diagram of the squares the piece can reach from <square>.
"""

from __future__ import annotations

import argparse
import logging
import sys

from chessmen.core.enums import Color, PieceType
from chessmen.core.piece import Piece, parse_piece_char
from chessmen.core.pieces import new_piece
from chessmen.core.types import BOARD_SIZE, parse_square

_LOGGER = logging.getLogger(__name__)

_REACHABLE_MARK = "x"
_EMPTY_MARK = "."


def _parse_piece(text: str, color_name: str | None) -> tuple[PieceType, Color]:
    if len(text) == 1:
        color, piece_type = parse_piece_char(text)
    else:
        try:
            piece_type = PieceType[text.upper()]
        except KeyError:
            raise ValueError(f"Invalid piece name: {text!r}") from None
        color = Color.WHITE
    if color_name is not None:
        color = Color[color_name.upper()]
    return piece_type, color


def render_reachable(piece: Piece) -> str:
    """Diagram of *piece* and its reachable squares, rank 8 on top."""
    reachable = set(piece.reachable_squares())
    lines: list[str] = []
    for row in reversed(range(BOARD_SIZE)):
        cells = []
        for column in range(BOARD_SIZE):
            if (row, column) == piece.position:
                cells.append(str(piece))
            elif (row, column) in reachable:
                cells.append(_REACHABLE_MARK)
            else:
                cells.append(_EMPTY_MARK)
        lines.append(f"{row + 1} " + " ".join(cells))
    lines.append("  a b c d e f g h")
    return "\n".join(lines)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessmen",
        description="Show the squares a single chess piece can move to.",
    )
    parser.add_argument("piece", help="FEN letter (N, q) or piece name (knight)")
    parser.add_argument("square", help="algebraic square, e.g. e4")
    parser.add_argument(
        "--color",
        choices=("white", "black"),
        default=None,
        help="override the color implied by the piece letter",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        piece_type, color = _parse_piece(args.piece, args.color)
        row, column = parse_square(args.square)
        piece = new_piece(piece_type, row, column, color)
    except ValueError as exc:
        _LOGGER.debug("Invalid input %r %r", args.piece, args.square)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(render_reachable(piece))
    names = sorted(str(c) for c in piece.reachable_squares())
    label = f"{piece.symbol} {color} {piece_type} on {piece.square}"
    print(f"{label}: " + " ".join(names))
    return 0


if __name__ == "__main__":
    sys.exit(main())
