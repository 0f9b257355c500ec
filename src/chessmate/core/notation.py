"""FEN placement parsing and serialization.

Only the piece-placement and side-to-move fields are meaningful here: the
engine has no castling, en passant or move clocks, so any further fields
are accepted and ignored.
"""

from __future__ import annotations

from chessmate.core.board import Board
from chessmate.core.enums import Color
from chessmate.core.piece import Piece
from chessmate.core.types import make_square

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
STARTING_FEN = f"{STARTING_PLACEMENT} w - - 0 1"


def board_from_fen(placement: str) -> Board:
    """Parse the FEN piece-placement field into a :class:`Board`."""
    rows = placement.split("/")
    if len(rows) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")

    board = Board()
    # FEN lists rank 8 first, which is row 0.
    for row, row_text in enumerate(rows):
        col = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {placement!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid FEN rank width: {placement!r}")
                board[make_square(row, col)] = Piece.from_char(ch)
                col += 1
            if col > 8:
                raise ValueError(f"Invalid FEN rank width: {placement!r}")
        if col != 8:
            raise ValueError(f"Invalid FEN rank width: {placement!r}")
    return board


def board_to_fen(board: Board) -> str:
    """Serialise the piece placement of *board*."""
    rows: list[str] = []
    for row in range(8):
        empty = 0
        text = ""
        for col in range(8):
            piece = board[make_square(row, col)]
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)


def parse_fen(fen: str) -> tuple[Board, Color]:
    """Parse a FEN string into ``(board, side_to_move)``.

    The side-to-move field is optional and defaults to white.
    """
    parts = fen.split()
    if not parts:
        raise ValueError(f"Invalid FEN (empty): {fen!r}")

    board = board_from_fen(parts[0])

    side = Color.WHITE
    if len(parts) > 1:
        if parts[1] == "w":
            side = Color.WHITE
        elif parts[1] == "b":
            side = Color.BLACK
        else:
            raise ValueError(f"Invalid FEN side-to-move field: {parts[1]!r}")
    return board, side


def to_fen(board: Board, side_to_move: Color) -> str:
    side = "w" if side_to_move == Color.WHITE else "b"
    return f"{board_to_fen(board)} {side}"
