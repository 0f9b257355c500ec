"""Tests for FEN placement parsing and serialization."""

import pytest

from chessmate.core.board import Board
from chessmate.core.enums import Color, PieceType
from chessmate.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    parse_fen,
    to_fen,
)
from chessmate.core.piece import Piece
from chessmate.core.types import E4, H8


class TestFenParsing:
    def test_starting_fen_matches_initial_board(self) -> None:
        board, side = parse_fen(STARTING_FEN)
        assert board == Board.initial()
        assert side == Color.WHITE

    def test_side_to_move_black(self) -> None:
        _, side = parse_fen("7k/5K2/6Q1/8/8/8/8/8 b")
        assert side == Color.BLACK

    def test_side_defaults_to_white(self) -> None:
        _, side = parse_fen("7k/5K2/6Q1/8/8/8/8/8")
        assert side == Color.WHITE

    def test_extra_fields_ignored(self) -> None:
        board, side = parse_fen(
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )
        assert side == Color.BLACK
        assert board[E4] == Piece(Color.WHITE, PieceType.PAWN)

    def test_first_rank_in_fen_is_row_zero(self) -> None:
        board = board_from_fen("7k/8/8/8/8/8/8/8")
        assert board[H8] == Piece(Color.BLACK, PieceType.KING)
        assert board[(0, 7)] == Piece(Color.BLACK, PieceType.KING)

    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "8/8/8/8/8/8/8",
            "9/8/8/8/8/8/8/8",
            "8/8/8/8/8/8/8/7",
            "8/8/8/8/8/8/8/ppppppppp",
            "8/8/8/8/8/8/8/7x",
            "8/8/8/8/8/8/8/8 x",
        ],
    )
    def test_invalid_fen(self, fen: str) -> None:
        with pytest.raises(ValueError):
            parse_fen(fen)


class TestFenSerialization:
    def test_initial_board(self) -> None:
        assert board_to_fen(Board.initial()) == STARTING_FEN.split()[0]

    def test_empty_board(self) -> None:
        assert board_to_fen(Board()) == "8/8/8/8/8/8/8/8"

    def test_roundtrip_with_side(self) -> None:
        fen = "r1bqkb1r/pppp1Qpp/2n2n2/4p3/2B1P3/8/PPPP1PPP/RNB1K1NR b"
        board, side = parse_fen(fen)
        assert to_fen(board, side) == fen
