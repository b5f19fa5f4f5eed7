"""Checkie: checkers rules engine."""

from checkie.core import Cell, Color, ForcedCaptureScope, MoveError, MoveKind, RuleSet
from checkie.game import (
    GameController,
    GameState,
    MoveOutcome,
    OutcomeStatus,
    SelectionResult,
    attempt_move,
    current_turn,
    forced_moves,
    new_game,
    position_from_string,
    position_to_string,
    select,
)

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "Color",
    "ForcedCaptureScope",
    "GameController",
    "GameState",
    "MoveError",
    "MoveKind",
    "MoveOutcome",
    "OutcomeStatus",
    "RuleSet",
    "SelectionResult",
    "attempt_move",
    "current_turn",
    "forced_moves",
    "new_game",
    "position_from_string",
    "position_to_string",
    "select",
]
