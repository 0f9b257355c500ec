"""Tests for attacked-square and check detection."""

from chessmate.core.attacks import is_in_check, is_square_attacked
from chessmate.core.board import Board
from chessmate.core.enums import Color
from chessmate.core.notation import board_from_fen
from chessmate.core.types import C4, D5, D6, E4, E5, E6, F5, H4, parse_square


class TestPawnAttacks:
    def test_white_pawn_covers_empty_diagonals(self) -> None:
        board = board_from_fen("8/8/8/8/4P3/8/8/8")  # white pawn e4
        assert is_square_attacked(board, D5, Color.WHITE)
        assert is_square_attacked(board, F5, Color.WHITE)

    def test_pawn_does_not_attack_forward(self) -> None:
        board = board_from_fen("8/8/8/8/4P3/8/8/8")
        assert not is_square_attacked(board, E5, Color.WHITE)

    def test_black_pawn_attacks_downward(self) -> None:
        board = board_from_fen("8/8/8/3p4/8/8/8/8")  # black pawn d5
        assert is_square_attacked(board, C4, Color.BLACK)
        assert is_square_attacked(board, E4, Color.BLACK)
        assert not is_square_attacked(board, E6, Color.BLACK)


class TestPieceAttacks:
    def test_rook_attack_blocked(self) -> None:
        board = board_from_fen("8/8/8/8/R2P3k/8/8/8")  # Ra4, Pd4, kh4
        assert is_square_attacked(board, parse_square("c4"), Color.WHITE)
        assert not is_square_attacked(board, H4, Color.WHITE)

    def test_knight_attack(self) -> None:
        board = board_from_fen("8/8/8/8/8/8/8/1N6")  # Nb1
        assert is_square_attacked(board, parse_square("c3"), Color.WHITE)
        assert is_square_attacked(board, parse_square("d2"), Color.WHITE)
        assert not is_square_attacked(board, parse_square("b3"), Color.WHITE)

    def test_queen_attacks_occupied_enemy_square(self) -> None:
        board = board_from_fen("8/8/3n4/8/8/8/8/3Q4")  # nd6, Qd1
        assert is_square_attacked(board, D6, Color.WHITE)

    def test_nothing_attacks_on_empty_board(self) -> None:
        board = Board()
        assert not is_square_attacked(board, E4, Color.WHITE)
        assert not is_square_attacked(board, E4, Color.BLACK)


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        board = Board.initial()
        assert not is_in_check(board, Color.WHITE)
        assert not is_in_check(board, Color.BLACK)

    def test_fools_mate_in_check(self) -> None:
        # After 1.f3 e5 2.g4 Qh4, white is in check
        board = board_from_fen("rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR")
        assert is_in_check(board, Color.WHITE)
        assert not is_in_check(board, Color.BLACK)

    def test_pawn_gives_check(self) -> None:
        board = board_from_fen("8/8/8/3k4/4P3/8/8/4K3")  # kd5, Pe4
        assert is_in_check(board, Color.BLACK)

    def test_missing_king_is_not_in_check(self) -> None:
        board = board_from_fen("8/8/8/8/8/8/8/r7")  # lone black rook
        assert not is_in_check(board, Color.WHITE)
