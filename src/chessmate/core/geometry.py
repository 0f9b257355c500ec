"""Per-piece movement rules ("geometric" legality).

A move is geometrically valid when it fits the moving piece's pattern and
the board occupancy.  Whether it exposes the mover's own king is decided
later by :mod:`chessmate.core.move_generator`.
"""

from __future__ import annotations

from collections.abc import Callable

from chessmate.core.board import Board
from chessmate.core.enums import Color, PieceType
from chessmate.core.options import DEFAULT_OPTIONS, RuleOptions
from chessmate.core.piece import Piece
from chessmate.core.types import Square, make_square

KNIGHT_DELTAS: frozenset[tuple[int, int]] = frozenset({(1, 2), (2, 1)})


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Whether every square strictly between *from_sq* and *to_sq* is empty.

    Walks unit steps along the row, column or diagonal joining the two
    squares; callers guarantee they are aligned.
    """
    row_step = _sign(to_sq[0] - from_sq[0])
    col_step = _sign(to_sq[1] - from_sq[1])

    row = from_sq[0] + row_step
    col = from_sq[1] + col_step
    while (row, col) != to_sq:
        if not board.is_empty(make_square(row, col)):
            return False
        row += row_step
        col += col_step
    return True


# -- Piece-specific rules (private) -----------------------------------------
#
# Each rule receives the board, the moving piece, both squares and the
# target occupant.  Own-color targets are already rejected by the caller.


def _pawn(
    board: Board,
    piece: Piece,
    from_sq: Square,
    to_sq: Square,
    target: Piece | None,
    options: RuleOptions,
) -> bool:
    direction = piece.color.pawn_direction
    row_diff = to_sq[0] - from_sq[0]
    col_diff = to_sq[1] - from_sq[1]

    if col_diff == 0 and target is None:
        if row_diff == direction:
            return True
        if from_sq[0] == piece.color.pawn_start_row and row_diff == 2 * direction:
            if options.pawn_double_step_checks_path:
                return board.is_empty(make_square(from_sq[0] + direction, from_sq[1]))
            return True

    return abs(col_diff) == 1 and row_diff == direction and target is not None


def _knight(
    board: Board,
    piece: Piece,
    from_sq: Square,
    to_sq: Square,
    target: Piece | None,
    options: RuleOptions,
) -> bool:
    delta = (abs(to_sq[0] - from_sq[0]), abs(to_sq[1] - from_sq[1]))
    return delta in KNIGHT_DELTAS


def _king(
    board: Board,
    piece: Piece,
    from_sq: Square,
    to_sq: Square,
    target: Piece | None,
    options: RuleOptions,
) -> bool:
    return abs(to_sq[0] - from_sq[0]) <= 1 and abs(to_sq[1] - from_sq[1]) <= 1


def _is_straight(from_sq: Square, to_sq: Square) -> bool:
    return (from_sq[0] == to_sq[0]) != (from_sq[1] == to_sq[1])


def _is_diagonal(from_sq: Square, to_sq: Square) -> bool:
    row_dist = abs(to_sq[0] - from_sq[0])
    return row_dist != 0 and row_dist == abs(to_sq[1] - from_sq[1])


def _rook(
    board: Board,
    piece: Piece,
    from_sq: Square,
    to_sq: Square,
    target: Piece | None,
    options: RuleOptions,
) -> bool:
    return _is_straight(from_sq, to_sq) and is_path_clear(board, from_sq, to_sq)


def _bishop(
    board: Board,
    piece: Piece,
    from_sq: Square,
    to_sq: Square,
    target: Piece | None,
    options: RuleOptions,
) -> bool:
    return _is_diagonal(from_sq, to_sq) and is_path_clear(board, from_sq, to_sq)


def _queen(
    board: Board,
    piece: Piece,
    from_sq: Square,
    to_sq: Square,
    target: Piece | None,
    options: RuleOptions,
) -> bool:
    if not (_is_straight(from_sq, to_sq) or _is_diagonal(from_sq, to_sq)):
        return False
    return is_path_clear(board, from_sq, to_sq)


_PieceRule = Callable[
    [Board, Piece, Square, Square, Piece | None, RuleOptions],
    bool,
]

_RULES: dict[PieceType, _PieceRule] = {
    PieceType.PAWN: _pawn,
    PieceType.KNIGHT: _knight,
    PieceType.BISHOP: _bishop,
    PieceType.ROOK: _rook,
    PieceType.QUEEN: _queen,
    PieceType.KING: _king,
}

assert set(_RULES) == set(PieceType), "every piece type needs a movement rule"


def is_geometrically_valid(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    mover: Color,
    options: RuleOptions | None = None,
) -> bool:
    """Does moving *from_sq* → *to_sq* fit the piece's pattern for *mover*?"""
    piece = board[from_sq]
    if piece is None or piece.color != mover:
        return False

    target = board[to_sq]
    if target is not None and target.color == mover:
        return False

    rule = _RULES[piece.piece_type]
    return rule(board, piece, from_sq, to_sq, target, options or DEFAULT_OPTIONS)
