"""Position strings: a FEN-like text form of board + side to move.

Rows run from row 8 (index 7) down to row 1, separated by ``/``.  Men are
``l``/``d``, kings ``L``/``D``, digits count empty cells.  A single field
after a space names the side to move (``l`` or ``d``).
"""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.errors import NotationError
from checkie.core.piece import Piece
from checkie.core.types import BOARD_SIZE, Cell

STARTING_POSITION = (
    "d1d1d1d1/1d1d1d1d/d1d1d1d1/8/8/1l1l1l1l/l1l1l1l1/1l1l1l1l l"
)

_SIDE_CHARS: dict[str, Color] = {"l": Color.LIGHT, "d": Color.DARK}


def parse_position(text: str) -> tuple[Board, Color]:
    """Parse a position string into a fresh board and the side to move."""
    parts = text.split()
    if len(parts) != 2:
        raise NotationError(f"Invalid position (need 2 fields): {text!r}")
    placement, side_part = parts

    # 1. Placement
    rows = placement.split("/")
    if len(rows) != BOARD_SIZE:
        raise NotationError(f"Invalid position (must contain 8 rows): {text!r}")
    board = Board()
    for row_idx, row_text in enumerate(rows):
        row = BOARD_SIZE - 1 - row_idx
        col = 0
        for ch in row_text:
            if ch.isascii() and ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise NotationError(f"Invalid digit {ch!r}: {text!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise NotationError(f"Invalid row width: {text!r}")
                try:
                    color, is_king = Piece.decode_char(ch)
                except ValueError as exc:
                    raise NotationError(f"{exc}: {text!r}") from None
                board.add(color, Cell(col, row), is_king)
                col += 1
            if col > BOARD_SIZE:
                raise NotationError(f"Invalid row width: {text!r}")
        if col != BOARD_SIZE:
            raise NotationError(f"Invalid row width: {text!r}")

    # 2. Side to move
    side = _SIDE_CHARS.get(side_part)
    if side is None:
        raise NotationError(f"Invalid side-to-move field: {side_part!r}")

    return board, side


def format_position(board: Board, side: Color) -> str:
    """Serialise *board* and *side* to a position string."""
    rows: list[str] = []
    for row in range(BOARD_SIZE - 1, -1, -1):
        empty = 0
        text = ""
        for col in range(BOARD_SIZE):
            piece = board[Cell(col, row)]
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    side_char = "l" if side == Color.LIGHT else "d"
    return f"{'/'.join(rows)} {side_char}"
