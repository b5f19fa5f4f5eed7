"""GameController: the turn orchestrator seen by input and render layers.

Wraps a :class:`GameState`, logs every decision and emits events via
simple callbacks so the renderer / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from checkie.core.enums import Color
from checkie.core.forced_moves import ForcedMoves
from checkie.core.piece import Piece
from checkie.core.rules import RuleSet
from checkie.core.types import Cell
from checkie.game.interfaces import ITurnController, MoveOutcome, SelectionResult
from checkie.game.state import GameState, new_game, position_from_string

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

SelectionCallback = Callable[[SelectionResult], None]
MoveCallback = Callable[[MoveOutcome, GameState], None]
RejectedCallback = Callable[[MoveOutcome, Piece], None]  # outcome, reverted piece
PromotedCallback = Callable[[Piece], None]
TurnCallback = Callable[[Color], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_selection: list[SelectionCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_promoted: list[PromotedCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(ITurnController):
    """Orchestrates a checkers game: selection, validation, application,
    turn switching and listener notification.

    Thread-safety: call from a single thread (the main/UI thread).  Every
    call completes the whole select/validate/apply cycle before returning.
    """

    __slots__ = ("_state", "events")

    def __init__(self, rules: RuleSet | None = None) -> None:
        self._state = new_game(rules)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def rules(self) -> RuleSet:
        return self._state.rules

    # ── ITurnController impl ─────────────────────────────────────────────

    def new_game(self, rules: RuleSet | None = None, position: str | None = None) -> None:
        rules = rules or self._state.rules
        if position is None:
            self._state = new_game(rules)
        else:
            self._state = position_from_string(position, rules)
        _LOGGER.info(
            "New game: %d pieces, %s to move",
            self._state.board.count(),
            self._state.active_color,
        )
        self._emit_turn_changed(self._state.active_color)

    def select(self, cell: Cell) -> SelectionResult:
        result = self._state.select(cell)
        if result.selected:
            _LOGGER.debug(
                "Selected piece #%s on %s (%d targets)",
                result.piece_id,
                cell.name,
                len(result.targets),
            )
        else:
            _LOGGER.debug(
                "Nothing selectable for %s on %s", self._state.active_color, cell.name
            )
        for cb in self.events.on_selection:
            cb(result)
        return result

    def attempt_move(self, dest: Cell) -> MoveOutcome:
        piece = self._state.selected_piece
        mover = self._state.active_color
        outcome = self._state.attempt_move(dest)

        if outcome.is_applied:
            _LOGGER.info("%s: %s", mover, outcome)
            self._emit_move(outcome)
            if outcome.promoted and piece is not None:
                self._emit_promoted(piece)
            self._emit_turn_changed(self._state.active_color)
            if self._state.forced:
                _LOGGER.debug(
                    "Forced captures for %s: %r",
                    self._state.active_color,
                    self._state.forced,
                )
        else:
            _LOGGER.debug("Move to %s %s", dest.name, outcome)
            if piece is not None:
                self._emit_rejected(outcome, piece)
        return outcome

    def forced_moves(self) -> ForcedMoves:
        return self._state.forced

    def current_turn(self) -> Color:
        return self._state.active_color

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, outcome: MoveOutcome) -> None:
        for cb in self.events.on_move:
            cb(outcome, self._state)

    def _emit_rejected(self, outcome: MoveOutcome, piece: Piece) -> None:
        for cb in self.events.on_rejected:
            cb(outcome, piece)

    def _emit_promoted(self, piece: Piece) -> None:
        for cb in self.events.on_promoted:
            cb(piece)

    def _emit_turn_changed(self, color: Color) -> None:
        for cb in self.events.on_turn_changed:
            cb(color)
