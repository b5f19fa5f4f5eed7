"""Game state machine: board, side to move, selection and forced captures.

The module-level functions at the bottom are the plain functional API::

    state = new_game()
    select(state, Cell(1, 2))
    outcome = attempt_move(state, Cell(2, 3))
"""

from __future__ import annotations

from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import Color, MoveError
from checkie.core.errors import BoardDesyncError
from checkie.core.forced_moves import ForcedMoves, scan_forced_moves
from checkie.core.move import Move
from checkie.core.notation import format_position, parse_position
from checkie.core.piece import Piece
from checkie.core.rules import Rules, RuleSet
from checkie.core.types import Cell
from checkie.game.interfaces import MoveOutcome, SelectionResult, TurnPhase


@dataclass
class GameState:
    """Everything one game needs between two calls.

    This is a pure data/logic class: no threading, no UI.  The forced
    captures in :attr:`forced` always belong to :attr:`active_color` and are
    rebuilt after every applied move.
    """

    board: Board = field(default_factory=Board.initial)
    active_color: Color = Color.LIGHT
    rules: RuleSet = field(default_factory=RuleSet)
    phase: TurnPhase = field(default=TurnPhase.AWAITING_SELECTION, init=False)
    forced: ForcedMoves = field(init=False)
    selected_id: int | None = field(default=None, init=False)
    _drag_origin: Cell | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.refresh_forced_moves()

    # ── Selection ────────────────────────────────────────────────────────

    @property
    def selected_piece(self) -> Piece | None:
        if self.selected_id is None:
            return None
        try:
            return self.board.piece(self.selected_id)
        except KeyError:
            raise BoardDesyncError(
                f"Selected piece #{self.selected_id} is no longer on the board"
            ) from None

    def select(self, cell: Cell) -> SelectionResult:
        """Select the active side's piece on *cell*, or drop the selection."""
        piece = self.board.get(cell) if cell.in_bounds else None
        if piece is None or piece.color != self.active_color:
            self._clear_selection()
            return SelectionResult(cell)

        self.selected_id = piece.id
        self._drag_origin = piece.cell
        self.phase = TurnPhase.PIECE_SELECTED
        targets = tuple(m.to_cell for m in self.legal_moves(piece))
        return SelectionResult(cell, piece.id, targets)

    def _clear_selection(self) -> None:
        self.selected_id = None
        self._drag_origin = None
        self.phase = TurnPhase.AWAITING_SELECTION

    # ── Move application ─────────────────────────────────────────────────

    def attempt_move(self, dest: Cell) -> MoveOutcome:
        """Validate and apply a move of the selected piece to *dest*.

        A rejected move puts the piece back on the cell it was picked up
        from.  Either way the selection is released.
        """
        piece = self.selected_piece
        if piece is None:
            return MoveOutcome.rejected(MoveError.NO_SELECTION)
        self.board.check_in_sync(piece)
        origin = self._drag_origin or piece.cell
        self._clear_selection()

        result = Rules.validate(
            self.board, self.forced, self.active_color, piece, dest, self.rules
        )
        if isinstance(result, MoveError):
            self.board.place(piece, origin)
            if result == MoveError.NULL_MOVE and self.rules.allow_null_move:
                return MoveOutcome.returned()
            return MoveOutcome.rejected(result)

        promoted = self._apply(piece, result)
        return MoveOutcome.applied(result, promoted)

    def _apply(self, piece: Piece, move: Move) -> bool:
        self.board.place(piece, move.to_cell)
        if move.captured is not None:
            self.board.remove(move.captured)
        promoted = Rules.is_promotion(piece, move.to_cell) and self.board.promote(piece)
        self.active_color = self.active_color.opposite
        self.refresh_forced_moves()
        return promoted

    def refresh_forced_moves(self) -> None:
        self.forced = scan_forced_moves(self.board, self.active_color)

    # ── Query helpers ────────────────────────────────────────────────────

    def legal_moves(self, piece: Piece) -> list[Move]:
        """Destinations *piece* may move to this turn."""
        if piece.color != self.active_color:
            return []
        return Rules.legal_moves(
            self.board, self.forced, self.active_color, piece, self.rules
        )


# ── Functional API ───────────────────────────────────────────────────────────


def new_game(rules: RuleSet | None = None) -> GameState:
    """Standard starting layout, Light to move."""
    return GameState(Board.initial(), Color.LIGHT, rules or RuleSet())


def select(state: GameState, cell: Cell) -> SelectionResult:
    return state.select(cell)


def attempt_move(state: GameState, dest: Cell) -> MoveOutcome:
    return state.attempt_move(dest)


def forced_moves(state: GameState) -> ForcedMoves:
    return state.forced


def current_turn(state: GameState) -> Color:
    return state.active_color


def position_to_string(state: GameState) -> str:
    """Save *state* as a position string (board, kings, side to move)."""
    return format_position(state.board, state.active_color)


def position_from_string(text: str, rules: RuleSet | None = None) -> GameState:
    """Restore a game saved with :func:`position_to_string`."""
    board, side = parse_position(text)
    return GameState(board, side, rules or RuleSet())
