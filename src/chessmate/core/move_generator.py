"""Legal and pseudo-legal move generation."""

from __future__ import annotations

from chessmate.core.attacks import is_in_check
from chessmate.core.board import Board
from chessmate.core.enums import Color
from chessmate.core.geometry import is_geometrically_valid
from chessmate.core.move import Move
from chessmate.core.options import DEFAULT_OPTIONS, RuleOptions
from chessmate.core.types import Square, all_squares

_ALL_SQUARES: tuple[Square, ...] = tuple(all_squares())


class MoveGenerator:
    """Generates moves for a given :class:`Board`.

    Each candidate is tried on a private copy of the board, so the board
    passed in is never mutated.
    """

    __slots__ = ("_board", "_options")

    def __init__(self, board: Board, options: RuleOptions | None = None) -> None:
        self._board = board
        self._options = options or DEFAULT_OPTIONS

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self, color: Color) -> set[Move]:
        """All moves for *color* that do not leave its own king in check."""
        return {
            move
            for move in self.generate_pseudo_legal_moves(color)
            if not self.leaves_king_in_check(move, color)
        }

    def generate_pseudo_legal_moves(self, color: Color) -> list[Move]:
        """All geometrically valid moves (may leave own king in check)."""
        board = self._board
        options = self._options
        moves: list[Move] = []
        for from_sq, _piece in list(board.occupied(color)):
            for to_sq in _ALL_SQUARES:
                if is_geometrically_valid(board, from_sq, to_sq, color, options):
                    moves.append(Move(from_sq, to_sq))
        return moves

    def legal_destinations(self, sq: Square, color: Color) -> set[Square]:
        """Destinations of *color*'s legal moves starting on *sq*."""
        piece = self._board[sq]
        if piece is None or piece.color != color:
            return set()
        return {
            move.to_sq
            for move in self.generate_legal_moves(color)
            if move.from_sq == sq
        }

    def leaves_king_in_check(self, move: Move, color: Color) -> bool:
        """Would *color* be in check after playing *move*?"""
        scratch = self._board.copy()
        scratch.move_piece(move.from_sq, move.to_sq)
        return is_in_check(scratch, color, self._options)

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        return is_in_check(self._board, color, self._options)


def legal_moves(
    board: Board,
    color: Color,
    options: RuleOptions | None = None,
) -> set[Move]:
    """Shorthand for ``MoveGenerator(board, options).generate_legal_moves(color)``."""
    return MoveGenerator(board, options).generate_legal_moves(color)
