"""Forced-capture detection."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from checkie.core.enums import Color
from checkie.core.types import DIAGONALS, Cell

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.piece import Piece


class ForcedMoves(Mapping[int, frozenset[Cell]]):
    """Read-only mapping ``piece id -> landing cells`` for one color.

    Built once per turn by :func:`scan_forced_moves` and never updated in
    place.  Pieces without a capture have no key.
    """

    __slots__ = ("_color", "_entries")

    def __init__(
        self, color: Color, entries: Mapping[int, frozenset[Cell]] | None = None
    ) -> None:
        self._color = color
        self._entries: dict[int, frozenset[Cell]] = {
            pid: frozenset(cells) for pid, cells in (entries or {}).items() if cells
        }

    @property
    def color(self) -> Color:
        return self._color

    # -- Mapping protocol ---------------------------------------------------

    def __getitem__(self, piece_id: int) -> frozenset[Cell]:
        return self._entries[piece_id]

    def __iter__(self) -> Iterator[int]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    # -- Queries ------------------------------------------------------------

    def cells_for(self, piece_id: int) -> frozenset[Cell]:
        return self._entries.get(piece_id, frozenset())

    def is_forced(self, piece_id: int) -> bool:
        return piece_id in self._entries

    def allows(self, piece_id: int, cell: Cell) -> bool:
        return cell in self.cells_for(piece_id)

    def pairs(self) -> list[tuple[int, Cell]]:
        """Every ``(piece id, landing cell)`` entry, sorted."""
        return sorted(
            (pid, cell) for pid, cells in self._entries.items() for cell in cells
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ForcedMoves):
            return NotImplemented
        return self._color == other._color and self._entries == other._entries

    def __hash__(self) -> int:
        return hash((self._color, frozenset(self._entries.items())))

    def __repr__(self) -> str:
        body = ", ".join(
            f"#{pid}->{'/'.join(c.name for c in sorted(cells))}"
            for pid, cells in sorted(self._entries.items())
        )
        return f"ForcedMoves({self._color}: {body})"


def capture_landings(board: Board, piece: Piece) -> list[Cell]:
    """Landing cells of every capture *piece* can make right now."""
    origin = piece.cell
    landings: list[Cell] = []
    for dcol, drow in DIAGONALS:
        # Men only capture forwards.
        if not piece.is_king and drow != piece.color.forward:
            continue

        jumped = origin.offset(dcol, drow)
        if not jumped.in_bounds:
            continue
        victim = board.get(jumped)
        if victim is None or victim.color == piece.color:
            continue

        landing = origin.offset(2 * dcol, 2 * drow)
        if not landing.in_bounds or board.get(landing) is not None:
            continue
        landings.append(landing)
    return landings


def scan_forced_moves(board: Board, color: Color) -> ForcedMoves:
    """Full-board scan for the captures available to *color*."""
    entries: dict[int, frozenset[Cell]] = {}
    for piece in board.pieces(color):
        landings = capture_landings(board, piece)
        if landings:
            entries[piece.id] = frozenset(landings)
    return ForcedMoves(color, entries)
