"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessmate.core import Board, Color, legal_moves

    board = Board.initial()
    for move in legal_moves(board, Color.WHITE):
        print(move)
"""

from chessmate.core.attacks import is_in_check, is_square_attacked
from chessmate.core.board import Board
from chessmate.core.enums import Color, GameStatus, PieceType
from chessmate.core.geometry import is_geometrically_valid, is_path_clear
from chessmate.core.move import Move
from chessmate.core.move_generator import MoveGenerator, legal_moves
from chessmate.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    parse_fen,
    to_fen,
)
from chessmate.core.options import DEFAULT_OPTIONS, RuleOptions
from chessmate.core.piece import Piece
from chessmate.core.rules import Rules
from chessmate.core.types import (
    Square,
    is_valid_square,
    make_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "Square",
    "is_valid_square",
    "make_square",
    "parse_square",
    "square_name",
    # Configuration
    "DEFAULT_OPTIONS",
    "RuleOptions",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Rule functions
    "is_geometrically_valid",
    "is_in_check",
    "is_path_clear",
    "is_square_attacked",
    "legal_moves",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "parse_fen",
    "to_fen",
]
