"""Turn-controller states, call results and the controller interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from checkie.core.enums import MoveError, MoveKind

if TYPE_CHECKING:
    from checkie.core.enums import Color
    from checkie.core.forced_moves import ForcedMoves
    from checkie.core.move import Move
    from checkie.core.rules import RuleSet
    from checkie.core.types import Cell


# ── Turn FSM states ──────────────────────────────────────────────────────────


class TurnPhase(IntEnum):
    """Finite-state-machine states of one turn."""

    AWAITING_SELECTION = auto()
    PIECE_SELECTED = auto()


class OutcomeStatus(IntEnum):
    """What happened to a move attempt."""

    APPLIED = auto()
    REJECTED = auto()
    RETURNED = auto()  # dropped back on its own cell, allowed by the rule set


# ── Call results ─────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SelectionResult:
    """Answer to a selection request."""

    cell: Cell
    piece_id: int | None = None
    targets: tuple[Cell, ...] = ()

    @property
    def selected(self) -> bool:
        return self.piece_id is not None


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Answer to a move attempt: applied, rejected with a reason, or returned."""

    status: OutcomeStatus
    move: Move | None = None
    promoted: bool = False
    error: MoveError | None = None

    @classmethod
    def applied(cls, move: Move, promoted: bool = False) -> MoveOutcome:
        return cls(OutcomeStatus.APPLIED, move=move, promoted=promoted)

    @classmethod
    def rejected(cls, error: MoveError) -> MoveOutcome:
        return cls(OutcomeStatus.REJECTED, error=error)

    @classmethod
    def returned(cls) -> MoveOutcome:
        return cls(OutcomeStatus.RETURNED)

    @property
    def is_applied(self) -> bool:
        return self.status == OutcomeStatus.APPLIED

    @property
    def is_rejected(self) -> bool:
        return self.status == OutcomeStatus.REJECTED

    @property
    def kind(self) -> MoveKind | None:
        return self.move.kind if self.move is not None else None

    def __str__(self) -> str:
        if self.status == OutcomeStatus.APPLIED and self.move is not None:
            suffix = " (king)" if self.promoted else ""
            return f"applied {self.move}{suffix}"
        if self.status == OutcomeStatus.REJECTED:
            return f"rejected: {self.error}"
        return "returned"


# ── Abstract interface ───────────────────────────────────────────────────────


class ITurnController(ABC):
    """Interface for the turn orchestrator."""

    @abstractmethod
    def new_game(self, rules: RuleSet | None = None, position: str | None = None) -> None:
        """Set up a new game, optionally from a position string."""

    @abstractmethod
    def select(self, cell: Cell) -> SelectionResult:
        """Pick up the piece on *cell*."""

    @abstractmethod
    def attempt_move(self, dest: Cell) -> MoveOutcome:
        """Drop the selected piece on *dest*."""

    @abstractmethod
    def forced_moves(self) -> ForcedMoves:
        """Captures the side to move is bound to."""

    @abstractmethod
    def current_turn(self) -> Color:
        """Side to move."""
