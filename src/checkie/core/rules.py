"""Move validation and the configurable rule set."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from checkie.core.enums import Color, ForcedCaptureScope, MoveError, MoveKind
from checkie.core.move import Move
from checkie.core.types import DIAGONALS, Cell

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.forced_moves import ForcedMoves
    from checkie.core.piece import Piece


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Policy switches on which checkers variants disagree.

    Args:
        allow_null_move: Dropping a piece back on its own cell is a benign
            return to origin instead of a rejected move.
        forced_capture_scope: Whether an available capture binds only the
            capturing piece or the whole side.
    """

    allow_null_move: bool = False
    forced_capture_scope: ForcedCaptureScope = ForcedCaptureScope.PIECE

    # Presets
    @classmethod
    def source(cls) -> RuleSet:
        """Drag-and-drop table rules: per-piece forcing, drops may cancel."""
        return cls(allow_null_move=True, forced_capture_scope=ForcedCaptureScope.PIECE)

    @classmethod
    def standard(cls) -> RuleSet:
        """Tournament rules: any capture forces the whole side."""
        return cls(allow_null_move=False, forced_capture_scope=ForcedCaptureScope.COLOR)


class Rules:
    """Static move validator.

    Rule violations are ordinary outcomes and come back as
    :class:`MoveError` values; nothing here raises for an illegal move.
    """

    @staticmethod
    def validate(
        board: Board,
        forced: ForcedMoves,
        active_color: Color,
        piece: Piece,
        dest: Cell,
        rules: RuleSet | None = None,
    ) -> Move | MoveError:
        """Check *piece* moving to *dest*; first failing rule wins."""
        rules = rules or RuleSet()
        origin = piece.cell

        # 1. Bounds
        if not dest.in_bounds:
            return MoveError.OUT_OF_BOUNDS

        # 2. Same cell
        if dest == origin:
            return MoveError.NULL_MOVE

        # 3. Occupancy
        if board.get(dest) is not None:
            return MoveError.DESTINATION_OCCUPIED

        # 4. Forced captures
        is_forced_pair = forced.color == active_color and forced.allows(piece.id, dest)
        if forced.color == active_color and not is_forced_pair:
            if rules.forced_capture_scope == ForcedCaptureScope.COLOR:
                if forced:
                    return MoveError.MUST_TAKE_FORCED_MOVE
            elif forced.is_forced(piece.id):
                return MoveError.MUST_TAKE_FORCED_MOVE

        dcol = dest.col - origin.col
        drow = dest.row - origin.row

        # 5. Diagonal geometry
        if abs(dcol) != abs(drow):
            return MoveError.NOT_DIAGONAL

        # 6. Step distance
        distance = abs(dcol)
        if distance == 2:
            if not is_forced_pair:
                return MoveError.INVALID_DISTANCE
        elif distance != 1:
            return MoveError.INVALID_DISTANCE

        # 7. Direction
        if not piece.is_king and drow * piece.color.forward < 0:
            return MoveError.WRONG_DIRECTION

        if distance == 2:
            return Move(piece.id, origin, dest, MoveKind.CAPTURE, origin.midpoint(dest))
        return Move(piece.id, origin, dest, MoveKind.SIMPLE)

    @staticmethod
    def legal_moves(
        board: Board,
        forced: ForcedMoves,
        active_color: Color,
        piece: Piece,
        rules: RuleSet | None = None,
    ) -> list[Move]:
        """Every destination of *piece* that :meth:`validate` accepts."""
        moves: list[Move] = []
        for dcol, drow in DIAGONALS:
            for step in (1, 2):
                result = Rules.validate(
                    board,
                    forced,
                    active_color,
                    piece,
                    piece.cell.offset(dcol * step, drow * step),
                    rules,
                )
                if isinstance(result, Move):
                    moves.append(result)
        return moves

    @staticmethod
    def is_promotion(piece: Piece, dest: Cell) -> bool:
        """Whether a man landing on *dest* is crowned."""
        return not piece.is_king and dest.row == piece.color.promotion_row
