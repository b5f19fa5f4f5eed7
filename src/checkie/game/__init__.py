"""Game management layer: turn state machine, controller, functional API.

Quick start::

    from checkie.core import Cell
    from checkie.game import attempt_move, new_game, select

    state = new_game()
    select(state, Cell(1, 2))
    print(attempt_move(state, Cell(2, 3)))

The Qt signal bridge lives in :mod:`checkie.game.qt_bridge` and is not
imported here, so the rules stay usable without PyQt6 loaded.
"""

from checkie.game.controller import GameController, GameEvents
from checkie.game.interfaces import (
    ITurnController,
    MoveOutcome,
    OutcomeStatus,
    SelectionResult,
    TurnPhase,
)
from checkie.game.state import (
    GameState,
    attempt_move,
    current_turn,
    forced_moves,
    new_game,
    position_from_string,
    position_to_string,
    select,
)

__all__ = [
    # Interfaces
    "ITurnController",
    "MoveOutcome",
    "OutcomeStatus",
    "SelectionResult",
    "TurnPhase",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    # Functional API
    "attempt_move",
    "current_turn",
    "forced_moves",
    "new_game",
    "position_from_string",
    "position_to_string",
    "select",
]
