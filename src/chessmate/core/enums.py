"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def pawn_direction(self) -> int:
        """Row delta of a forward pawn step (white moves toward row 0)."""
        return -1 if self == Color.WHITE else 1

    @property
    def pawn_start_row(self) -> int:
        return 6 if self == Color.WHITE else 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()


class GameStatus(IntEnum):
    """Status of the side to move."""

    PLAYING = 0
    CHECK = 1
    CHECKMATE = 2
    DRAW = 3  # stalemate

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.DRAW)

    def __str__(self) -> str:
        return self.name.lower()
