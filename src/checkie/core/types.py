"""Cell value type and coordinate helpers.

Board layout (column, row), row 0 at Light's edge:
    a1=(0, 0), b1=(1, 0), ..., h1=(7, 0)
    ...
    a8=(0, 7), b8=(1, 7), ..., h8=(7, 7)
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8

DIAGONALS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


@dataclass(frozen=True, slots=True, order=True)
class Cell:
    """Immutable board coordinate.

    Any integers are accepted so that input surfaces can report cells off
    the board; use :attr:`in_bounds` before indexing.
    """

    col: int
    row: int

    @property
    def in_bounds(self) -> bool:
        return 0 <= self.col < BOARD_SIZE and 0 <= self.row < BOARD_SIZE

    def offset(self, dcol: int, drow: int) -> Cell:
        return Cell(self.col + dcol, self.row + drow)

    def midpoint(self, other: Cell) -> Cell:
        """Cell halfway between two cells a jump apart."""
        return Cell((self.col + other.col) // 2, (self.row + other.row) // 2)

    @property
    def name(self) -> str:
        return cell_name(self)

    def __str__(self) -> str:
        return f"({self.col}, {self.row})"


def is_playable(cell: Cell) -> bool:
    """Whether *cell* is one of the 32 cells pieces ever stand on."""
    return cell.in_bounds and (cell.col + cell.row) % 2 == 1


def cell_name(cell: Cell) -> str:
    """Human-readable name, e.g. (0, 0) → 'a1'."""
    if not cell.in_bounds:
        return str(cell)
    return chr(ord("a") + cell.col) + str(cell.row + 1)


def parse_cell(name: str) -> Cell:
    """Parse cell name, e.g. 'c3' → (2, 2)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid cell name: {name!r}")
    return Cell(ord(name[0]) - ord("a"), int(name[1]) - 1)


def all_cells() -> list[Cell]:
    """Every in-bounds cell, column by column."""
    return [Cell(c, r) for c in range(BOARD_SIZE) for r in range(BOARD_SIZE)]
