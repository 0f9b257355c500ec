"""Game state machine — turn order, move application and status."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chessmate.core.board import Board
from chessmate.core.enums import Color, GameStatus
from chessmate.core.geometry import is_geometrically_valid
from chessmate.core.move import Move
from chessmate.core.move_generator import MoveGenerator
from chessmate.core.notation import parse_fen
from chessmate.core.options import DEFAULT_OPTIONS, RuleOptions
from chessmate.core.piece import Piece
from chessmate.core.rules import Rules

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    captured: Piece | None
    status_after: GameStatus

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


@dataclass
class GameState:
    """Authoritative game state: board, side to move, counter and status.

    This is a pure data/logic class — no threading, no UI.  The board is
    mutated in place by :meth:`apply_move`; move generation only ever sees
    copies of it.
    """

    options: RuleOptions = DEFAULT_OPTIONS
    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    move_count: int = 0
    status: GameStatus = GameStatus.PLAYING
    winner: Color | None = None
    history: list[MoveRecord] = field(default_factory=list)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game.

        Without *fen* this is the standard start with white to move.  A
        seeded position gets its status derived immediately, so a FEN that
        is already mate or stalemate starts out terminal.
        """
        self.move_count = 0
        self.winner = None
        self.history.clear()

        if fen is None:
            self.board = Board.initial()
            self.side_to_move = Color.WHITE
            self.status = GameStatus.PLAYING
            return

        self.board, self.side_to_move = parse_fen(fen)
        self._update_status()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord | None:
        """Apply *move* for the side to move.

        Returns the history record, or None when the move is rejected
        (terminal state, or the move does not fit the piece's pattern).
        The self-check filter is not repeated here: callers offer moves from
        :meth:`legal_moves` / :meth:`destinations`.
        """
        if self.is_game_over:
            _LOGGER.debug("Rejected %s: game is over (%s)", move, self.status)
            return None

        mover = self.side_to_move
        if not is_geometrically_valid(
            self.board, move.from_sq, move.to_sq, mover, self.options
        ):
            _LOGGER.debug("Rejected %s for %s: not a valid move", move, mover)
            return None

        piece = self.board[move.from_sq]
        assert piece is not None
        captured = self.board.move_piece(move.from_sq, move.to_sq)

        self.move_count += 1
        self.side_to_move = mover.opposite
        self._update_status()

        record = MoveRecord(
            move=move,
            piece=piece,
            captured=captured,
            status_after=self.status,
        )
        self.history.append(record)
        _LOGGER.debug(
            "%s played %s%s -> %s",
            mover,
            move,
            f" capturing {captured.description}" if captured else "",
            self.status,
        )
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def fullmove_display(self) -> int:
        """Current full-move number for display."""
        return (self.move_count // 2) + 1

    def legal_moves(self) -> set[Move]:
        """Legal moves of the side to move."""
        gen = MoveGenerator(self.board, self.options)
        return gen.generate_legal_moves(self.side_to_move)

    # ── Internal ─────────────────────────────────────────────────────────

    def _update_status(self) -> None:
        self.status = Rules.game_status(self.board, self.side_to_move, self.options)
        if self.status == GameStatus.CHECKMATE:
            self.winner = self.side_to_move.opposite
        if self.status.is_terminal:
            _LOGGER.info(
                "Game over: %s%s",
                self.status,
                f", {self.winner} wins" if self.winner is not None else "",
            )
