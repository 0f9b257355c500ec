"""High-level chess rules: check, checkmate and stalemate detection."""

from __future__ import annotations

from chessmate.core.board import Board
from chessmate.core.enums import Color, GameStatus
from chessmate.core.move_generator import MoveGenerator
from chessmate.core.options import RuleOptions


class Rules:
    """Static rule-checker that operates on a :class:`Board` and a side."""

    @staticmethod
    def is_in_check(
        board: Board, color: Color, options: RuleOptions | None = None
    ) -> bool:
        return MoveGenerator(board, options).is_in_check(color)

    @staticmethod
    def is_checkmate(
        board: Board, color: Color, options: RuleOptions | None = None
    ) -> bool:
        gen = MoveGenerator(board, options)
        if not gen.is_in_check(color):
            return False
        return len(gen.generate_legal_moves(color)) == 0

    @staticmethod
    def is_stalemate(
        board: Board, color: Color, options: RuleOptions | None = None
    ) -> bool:
        gen = MoveGenerator(board, options)
        if gen.is_in_check(color):
            return False
        return len(gen.generate_legal_moves(color)) == 0

    @staticmethod
    def game_status(
        board: Board, side_to_move: Color, options: RuleOptions | None = None
    ) -> GameStatus:
        """Status of *side_to_move* in the current position."""
        gen = MoveGenerator(board, options)
        in_check = gen.is_in_check(side_to_move)

        if not gen.generate_legal_moves(side_to_move):
            return GameStatus.CHECKMATE if in_check else GameStatus.DRAW

        if in_check:
            return GameStatus.CHECK
        return GameStatus.PLAYING
