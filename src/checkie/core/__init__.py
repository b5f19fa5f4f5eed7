"""Core domain layer: pure checkers rules with zero external dependencies.

Quick start::

    from checkie.core import Board, Cell, Color, Rules, scan_forced_moves

    board = Board.initial()
    forced = scan_forced_moves(board, Color.LIGHT)
    piece = board[Cell(1, 2)]
    print(Rules.validate(board, forced, Color.LIGHT, piece, Cell(2, 3)))
"""

from checkie.core.board import Board
from checkie.core.enums import Color, ForcedCaptureScope, MoveError, MoveKind
from checkie.core.errors import (
    BoardDesyncError,
    CellOccupiedError,
    CellOutOfBoundsError,
    CheckersError,
    NotationError,
)
from checkie.core.forced_moves import ForcedMoves, capture_landings, scan_forced_moves
from checkie.core.move import Move
from checkie.core.notation import STARTING_POSITION, format_position, parse_position
from checkie.core.piece import Piece
from checkie.core.rules import Rules, RuleSet
from checkie.core.types import (
    BOARD_SIZE,
    DIAGONALS,
    Cell,
    all_cells,
    cell_name,
    is_playable,
    parse_cell,
)

__all__ = [
    # Enums
    "Color",
    "ForcedCaptureScope",
    "MoveError",
    "MoveKind",
    # Errors
    "BoardDesyncError",
    "CellOccupiedError",
    "CellOutOfBoundsError",
    "CheckersError",
    "NotationError",
    # Types / helpers
    "BOARD_SIZE",
    "DIAGONALS",
    "Cell",
    "all_cells",
    "cell_name",
    "is_playable",
    "parse_cell",
    # Domain objects
    "Board",
    "ForcedMoves",
    "Move",
    "Piece",
    "RuleSet",
    "Rules",
    "capture_landings",
    "scan_forced_moves",
    # Notation
    "STARTING_POSITION",
    "format_position",
    "parse_position",
]
