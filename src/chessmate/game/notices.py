"""User-facing notice texts for captures and status changes."""

from __future__ import annotations

from chessmate.core.enums import Color, GameStatus
from chessmate.core.piece import Piece


def describe_capture(piece: Piece) -> str:
    """e.g. ``"black knight captured"``."""
    return f"{piece.description} captured"


def describe_status(
    status: GameStatus, side_to_move: Color, winner: Color | None = None
) -> str:
    if status == GameStatus.CHECKMATE:
        assert winner is not None
        return f"Checkmate! {str(winner).capitalize()} wins!"
    if status == GameStatus.DRAW:
        return "Stalemate! The game is a draw."
    if status == GameStatus.CHECK:
        return f"{str(side_to_move).capitalize()} king is in check!"
    return f"{str(side_to_move).capitalize()} to move"
