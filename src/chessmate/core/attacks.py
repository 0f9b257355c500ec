"""Attack detection: attacked squares and check."""

from __future__ import annotations

from chessmate.core.board import Board
from chessmate.core.enums import Color, PieceType
from chessmate.core.geometry import is_geometrically_valid
from chessmate.core.options import RuleOptions
from chessmate.core.types import Square


def is_square_attacked(
    board: Board,
    sq: Square,
    by_color: Color,
    options: RuleOptions | None = None,
) -> bool:
    """Is *sq* attacked by any piece of *by_color*?

    Pawns reach the two forward diagonals whether or not the square is
    occupied; every other piece attacks exactly where it may move.
    """
    for from_sq, piece in board.occupied(by_color):
        if piece.piece_type == PieceType.PAWN:
            if (
                sq[0] == from_sq[0] + by_color.pawn_direction
                and abs(sq[1] - from_sq[1]) == 1
            ):
                return True
        elif is_geometrically_valid(board, from_sq, sq, by_color, options):
            return True
    return False


def is_in_check(
    board: Board,
    color: Color,
    options: RuleOptions | None = None,
) -> bool:
    """Is *color*'s king attacked by the opponent?

    A board without that king is never in check.
    """
    king_sq = board.find_king(color)
    if king_sq is None:
        return False
    return is_square_attacked(board, king_sq, color.opposite, options)
