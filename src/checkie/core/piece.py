"""Piece entity."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import Color
from checkie.core.types import Cell

# Position-string character ↔ (Color, is_king)
_CHAR_MAP: dict[str, tuple[Color, bool]] = {
    "l": (Color.LIGHT, False),
    "L": (Color.LIGHT, True),
    "d": (Color.DARK, False),
    "D": (Color.DARK, True),
}

_CHARS: dict[tuple[Color, bool], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(slots=True, eq=False)
class Piece:
    """A checker on the board.

    Compared by identity: two pieces with the same color on the same cell
    are still different pieces.  Placement and the king flag are written
    only by :class:`~checkie.core.board.Board`.
    """

    id: int
    color: Color
    cell: Cell
    previous_cell: Cell
    is_king: bool = False

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Position-string character (uppercase = king)."""
        return _CHARS[(self.color, self.is_king)]

    @staticmethod
    def decode_char(char: str) -> tuple[Color, bool]:
        """Map a position-string character to ``(color, is_king)``."""
        try:
            return _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None

    def __repr__(self) -> str:
        king = " king" if self.is_king else ""
        return f"Piece(#{self.id} {self.color}{king} @ {self.cell.name})"
