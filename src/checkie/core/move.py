"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import MoveKind
from checkie.core.types import Cell


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable result of a successful validation."""

    piece_id: int
    from_cell: Cell
    to_cell: Cell
    kind: MoveKind = MoveKind.SIMPLE
    captured: Cell | None = None

    @property
    def is_capture(self) -> bool:
        return self.kind == MoveKind.CAPTURE

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        sep = "x" if self.is_capture else "-"
        return f"{self.from_cell.name}{sep}{self.to_cell.name}"
