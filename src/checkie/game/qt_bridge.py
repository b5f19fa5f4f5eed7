"""Qt bridge exposing the turn controller to a renderer via signals."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from checkie.core.enums import Color
from checkie.core.piece import Piece
from checkie.core.rules import RuleSet
from checkie.core.types import Cell
from checkie.game.controller import GameController
from checkie.game.interfaces import MoveOutcome
from checkie.game.state import GameState


class GameSession(QObject):
    """GUI-thread object that turns controller events into Qt signals.

    The input surface calls the slots with grid coordinates; the renderer
    listens to the signals and never touches the board itself.
    """

    piece_selected = pyqtSignal(int)  # piece id
    move_applied = pyqtSignal(object)  # MoveOutcome
    move_rejected = pyqtSignal(int, str)  # piece id, MoveError name ("" if returned)
    piece_promoted = pyqtSignal(int)  # piece id
    turn_changed = pyqtSignal(int)  # Color value
    forced_moves_changed = pyqtSignal(object)  # ForcedMoves

    __slots__ = ("_controller",)

    def __init__(self, rules: RuleSet | None = None) -> None:
        super().__init__()
        self._controller = GameController(rules)
        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_rejected.append(self._on_rejected)
        events.on_promoted.append(self._on_promoted)
        events.on_turn_changed.append(self._on_turn_changed)

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def state(self) -> GameState:
        return self._controller.state

    @pyqtSlot()
    def new_game(self) -> None:
        """Start over from the standard layout."""
        self._controller.new_game()
        self.forced_moves_changed.emit(self._controller.forced_moves())

    @pyqtSlot(str)
    def load_position(self, position: str) -> None:
        """Start over from a saved position string."""
        self._controller.new_game(position=position)
        self.forced_moves_changed.emit(self._controller.forced_moves())

    @pyqtSlot(int, int, result=bool)
    def select(self, col: int, row: int) -> bool:
        result = self._controller.select(Cell(col, row))
        if result.piece_id is not None:
            self.piece_selected.emit(result.piece_id)
        return result.selected

    @pyqtSlot(int, int, result=bool)
    def attempt_move(self, col: int, row: int) -> bool:
        outcome = self._controller.attempt_move(Cell(col, row))
        if outcome.is_applied:
            self.forced_moves_changed.emit(self._controller.forced_moves())
        return outcome.is_applied

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_move(self, outcome: MoveOutcome, _state: GameState) -> None:
        self.move_applied.emit(outcome)

    def _on_rejected(self, outcome: MoveOutcome, piece: Piece) -> None:
        reason = outcome.error.name if outcome.error is not None else ""
        self.move_rejected.emit(piece.id, reason)

    def _on_promoted(self, piece: Piece) -> None:
        self.piece_promoted.emit(piece.id)

    def _on_turn_changed(self, color: Color) -> None:
        self.turn_changed.emit(int(color))
