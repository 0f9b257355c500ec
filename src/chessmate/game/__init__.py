"""Game management layer — state machine, engine API and controller.

Quick start::

    from chessmate.game import attempt_move, new_game, selectable_destinations

    state = new_game()
    outcome = attempt_move(state, (6, 4), (4, 4))  # e2-e4

The Qt signal bridge lives in :mod:`chessmate.game.qt_bridge` and needs the
``qt`` extra.
"""

from chessmate.game.api import (
    MoveOutcome,
    StatusView,
    attempt_move,
    new_game,
    selectable_destinations,
    status,
)
from chessmate.game.controller import GameController, GameEvents
from chessmate.game.notices import describe_capture, describe_status
from chessmate.game.state import GameState, MoveRecord

__all__ = [
    # Engine API
    "MoveOutcome",
    "StatusView",
    "attempt_move",
    "new_game",
    "selectable_destinations",
    "status",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
    # Notices
    "describe_capture",
    "describe_status",
]
