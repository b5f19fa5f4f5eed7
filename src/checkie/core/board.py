"""Board - piece placement on an 8x8 checkers board."""

from __future__ import annotations

import logging

from checkie.core.enums import Color
from checkie.core.errors import (
    BoardDesyncError,
    CellOccupiedError,
    CellOutOfBoundsError,
)
from checkie.core.piece import Piece
from checkie.core.types import BOARD_SIZE, Cell

_LOGGER = logging.getLogger(__name__)

_HOME_ROWS: dict[Color, range] = {
    Color.LIGHT: range(0, 3),
    Color.DARK: range(5, 8),
}


class Board:
    """Mutable 8x8 grid of optional pieces plus the piece arena.

    The board is the single owner of placement: a cell holds a piece iff
    that piece's ``cell`` equals it.  Pieces are keyed by a stable integer
    id assigned by :meth:`add`.
    """

    __slots__ = ("_grid", "_pieces", "_next_id")

    def __init__(self) -> None:
        # [col][row] -> piece or None
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self._pieces: dict[int, Piece] = {}
        self._next_id = 0

    @staticmethod
    def _check_bounds(cell: Cell) -> None:
        if not cell.in_bounds:
            raise CellOutOfBoundsError(f"Cell out of bounds: {cell}")

    # -- Element access -----------------------------------------------------

    def get(self, cell: Cell) -> Piece | None:
        self._check_bounds(cell)
        return self._grid[cell.col][cell.row]

    def __getitem__(self, cell: Cell) -> Piece | None:
        return self.get(cell)

    def is_empty(self, cell: Cell) -> bool:
        return self.get(cell) is None

    def piece(self, piece_id: int) -> Piece:
        """Live piece with *piece_id*; raises ``KeyError`` once captured."""
        return self._pieces[piece_id]

    # -- Mutation -----------------------------------------------------------

    def add(self, color: Color, cell: Cell, is_king: bool = False) -> Piece:
        """Create a new piece on an empty cell (board setup only)."""
        if self.get(cell) is not None:
            raise CellOccupiedError(f"Cell already occupied: {cell}")
        piece = Piece(self._next_id, color, cell, cell, is_king)
        self._next_id += 1
        self._pieces[piece.id] = piece
        self._grid[cell.col][cell.row] = piece
        return piece

    def place(self, piece: Piece, cell: Cell) -> None:
        """Move *piece* to *cell* unconditionally.

        No legality checks: callers validate first.  Whatever stood on
        *cell* is overwritten.
        """
        self._check_bounds(cell)
        old = piece.cell
        if self._grid[old.col][old.row] is piece:
            self._grid[old.col][old.row] = None
        self._grid[cell.col][cell.row] = piece
        piece.previous_cell = old
        piece.cell = cell

    def remove(self, cell: Cell) -> Piece | None:
        """Clear *cell*, dropping its piece from the arena."""
        piece = self.get(cell)
        if piece is None:
            return None
        self._grid[cell.col][cell.row] = None
        del self._pieces[piece.id]
        return piece

    def promote(self, piece: Piece) -> bool:
        """Crown *piece*.  Returns True only if it was not a king yet."""
        if piece.is_king:
            return False
        piece.is_king = True
        return True

    def check_in_sync(self, piece: Piece) -> None:
        """Raise :class:`BoardDesyncError` if *piece* is not where it says."""
        cell = piece.cell
        if not cell.in_bounds or self._grid[cell.col][cell.row] is not piece:
            _LOGGER.error("Board and %r disagree on placement", piece)
            raise BoardDesyncError(f"{piece!r} is not on its recorded cell")

    def clear(self) -> None:
        """Empty the board.  Ids are never reused, so the id counter is kept."""
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self._pieces = {}

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> list[Piece]:
        """Pieces in scan order (column by column), optionally one color only."""
        found: list[Piece] = []
        for column in self._grid:
            for piece in column:
                if piece is not None and (color is None or piece.color == color):
                    found.append(piece)
        return found

    def count(self, color: Color | None = None) -> int:
        if color is None:
            return len(self._pieces)
        return sum(1 for p in self._pieces.values() if p.color == color)

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        """Deep copy; pieces keep their ids."""
        b = Board()
        for piece in self.pieces():
            clone = Piece(
                piece.id, piece.color, piece.cell, piece.previous_cell, piece.is_king
            )
            b._pieces[clone.id] = clone
            b._grid[clone.cell.col][clone.cell.row] = clone
        b._next_id = self._next_id
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting layout: 12 men per side on the odd cells."""
        b = cls()
        for color in (Color.LIGHT, Color.DARK):
            for row in _HOME_ROWS[color]:
                first_col = 1 if row % 2 == 0 else 0
                for col in range(first_col, BOARD_SIZE, 2):
                    b.add(color, Cell(col, row))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def _layout(self) -> list[list[tuple[Color, bool] | None]]:
        return [
            [None if p is None else (p.color, p.is_king) for p in column]
            for column in self._grid
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._layout() == other._layout()

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            line = []
            for col in range(BOARD_SIZE):
                p = self._grid[col][row]
                line.append(str(p) if p else ".")
            rows.append(f"{row + 1} {' '.join(line)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
