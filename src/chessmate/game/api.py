"""Engine entry points for a presentation layer.

A UI needs four calls: start a game, ask which squares a selected piece may
go to, attempt a move, and read the status line::

    state = new_game()
    selectable_destinations(state, E2)   # {E3, E4}
    outcome = attempt_move(state, E2, E4)
    status(state)                         # StatusView(PLAYING, BLACK, None)
"""

from __future__ import annotations

from dataclasses import dataclass

from chessmate.core.enums import Color, GameStatus
from chessmate.core.move import Move
from chessmate.core.move_generator import MoveGenerator
from chessmate.core.options import RuleOptions
from chessmate.core.piece import Piece
from chessmate.core.types import Square
from chessmate.game.notices import describe_status
from chessmate.game.state import GameState, MoveRecord


@dataclass(frozen=True, slots=True)
class StatusView:
    """Read-only projection of the game status for display."""

    status: GameStatus
    active_color: Color
    winner: Color | None = None

    @property
    def text(self) -> str:
        return describe_status(self.status, self.active_color, self.winner)


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of :func:`attempt_move`.

    ``state`` is the same object that was passed in, changed only when
    ``accepted`` is true.
    """

    accepted: bool
    state: GameState
    view: StatusView
    record: MoveRecord | None = None

    @property
    def captured(self) -> Piece | None:
        return self.record.captured if self.record is not None else None


def new_game(options: RuleOptions | None = None, fen: str | None = None) -> GameState:
    """Fresh game: standard start, white to move, status PLAYING."""
    state = GameState() if options is None else GameState(options=options)
    state.setup(fen)
    return state


def selectable_destinations(state: GameState, square: Square) -> set[Square]:
    """Squares the piece on *square* may legally move to.

    Empty when the square holds no piece of the side to move or the game
    is over.
    """
    if state.is_game_over:
        return set()
    gen = MoveGenerator(state.board, state.options)
    return gen.legal_destinations(square, state.side_to_move)


def attempt_move(state: GameState, from_sq: Square, to_sq: Square) -> MoveOutcome:
    """Try to move *from_sq* → *to_sq* for the side to move.

    Rejected attempts are not errors: the state is returned unchanged with
    ``accepted=False``.
    """
    record = state.apply_move(Move(from_sq, to_sq))
    return MoveOutcome(
        accepted=record is not None,
        state=state,
        view=status(state),
        record=record,
    )


def status(state: GameState) -> StatusView:
    return StatusView(state.status, state.side_to_move, state.winner)
