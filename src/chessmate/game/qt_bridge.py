"""Qt bridge exposing a :class:`GameController` through signals."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessmate.core.options import RuleOptions
from chessmate.core.piece import Piece
from chessmate.core.types import Square
from chessmate.game.api import StatusView
from chessmate.game.controller import GameController
from chessmate.game.notices import describe_capture
from chessmate.game.state import GameState, MoveRecord


class GameBridge(QObject):
    """GUI-thread object that forwards controller events as Qt signals."""

    move_applied = pyqtSignal(object)  # MoveRecord
    piece_captured = pyqtSignal(object, str)  # Piece, notice text
    status_changed = pyqtSignal(object, str)  # StatusView, notice text
    game_over = pyqtSignal(object, str)  # StatusView, notice text

    __slots__ = ("_controller",)

    def __init__(
        self,
        options: RuleOptions | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = GameController(options)
        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_capture.append(self._on_capture)
        events.on_status_changed.append(self._on_status_changed)
        events.on_game_over.append(self._on_game_over)

    @property
    def controller(self) -> GameController:
        return self._controller

    def destinations(self, square: Square) -> set[Square]:
        """Squares to highlight for the piece on *square*."""
        return self._controller.destinations(square)

    @pyqtSlot()
    def new_game(self) -> None:
        self._controller.new_game()

    @pyqtSlot(object, object, result=bool)
    def attempt_move(self, from_sq: object, to_sq: object) -> bool:
        """Slot form of :meth:`GameController.submit_move`."""
        if not isinstance(from_sq, tuple) or not isinstance(to_sq, tuple):
            return False
        return self._controller.submit_move(from_sq, to_sq)

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_move(self, record: MoveRecord, _state: GameState) -> None:
        self.move_applied.emit(record)

    def _on_capture(self, piece: Piece) -> None:
        self.piece_captured.emit(piece, describe_capture(piece))

    def _on_status_changed(self, view: StatusView) -> None:
        self.status_changed.emit(view, view.text)

    def _on_game_over(self, view: StatusView) -> None:
        self.game_over.emit(view, view.text)
