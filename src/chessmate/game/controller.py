"""GameController — the orchestrator a presentation layer talks to.

Wraps a :class:`GameState` behind the engine API and emits events via
simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from chessmate.core.options import RuleOptions
from chessmate.core.piece import Piece
from chessmate.core.types import Square
from chessmate.game import api
from chessmate.game.api import MoveOutcome, StatusView
from chessmate.game.state import GameState, MoveRecord

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
CaptureCallback = Callable[[Piece], None]
StatusCallback = Callable[[StatusView], None]
GameOverCallback = Callable[[StatusView], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_capture: list[CaptureCallback] = field(default_factory=list)
    on_status_changed: list[StatusCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Runs one game at a time: offers destinations, applies moves and
    notifies listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = ("_state", "_options", "events")

    def __init__(self, options: RuleOptions | None = None) -> None:
        self._options = options
        self._state = api.new_game(options)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def status(self) -> StatusView:
        return api.status(self._state)

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        self._state = api.new_game(self._options, fen)
        self._emit_status(self.status)

    def destinations(self, square: Square) -> set[Square]:
        return api.selectable_destinations(self._state, square)

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Attempt a move. Returns True if it was applied."""
        outcome = api.attempt_move(self._state, from_sq, to_sq)
        if not outcome.accepted:
            return False

        self._notify(outcome)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _notify(self, outcome: MoveOutcome) -> None:
        record = outcome.record
        assert record is not None

        for cb in self.events.on_move:
            cb(record, self._state)

        if record.captured is not None:
            for cb in self.events.on_capture:
                cb(record.captured)

        self._emit_status(outcome.view)

        if outcome.state.is_game_over:
            for cb in self.events.on_game_over:
                cb(outcome.view)

    def _emit_status(self, view: StatusView) -> None:
        for cb in self.events.on_status_changed:
            cb(view)
