"""Core enumerations for the checkers domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color. Light opens the game and starts on rows 0-2."""

    LIGHT = 0
    DARK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta a man of this color advances by."""
        return 1 if self is Color.LIGHT else -1

    @property
    def promotion_row(self) -> int:
        """Far edge row on which a man of this color is crowned."""
        return 7 if self is Color.LIGHT else 0

    def __str__(self) -> str:
        return self.name.lower()


class MoveKind(IntEnum):
    """Classification of a validated move."""

    SIMPLE = 1
    CAPTURE = 2


class ForcedCaptureScope(IntEnum):
    """How far an available capture restricts the side to move.

    ``PIECE`` only constrains a piece that itself has a capture; its
    teammates may still make ordinary moves.  ``COLOR`` is the standard
    rule: any capture for the side locks every piece of that side into
    capturing.
    """

    PIECE = 1
    COLOR = 2


_ERROR_DESCRIPTIONS: dict[int, str] = {
    1: "You cannot move outside of the board.",
    2: "The piece was dropped back on its own cell.",
    3: "The destination cell is already occupied.",
    4: "You have to take a forced capture.",
    5: "You have to move diagonally.",
    6: "You can only jump two cells when capturing.",
    7: "A man cannot move backwards.",
    8: "No piece is selected.",
}


class MoveError(IntEnum):
    """Reason code for a rejected move, in rule-precedence order."""

    OUT_OF_BOUNDS = 1
    NULL_MOVE = 2
    DESTINATION_OCCUPIED = 3
    MUST_TAKE_FORCED_MOVE = 4
    NOT_DIAGONAL = 5
    INVALID_DISTANCE = 6
    WRONG_DIRECTION = 7
    NO_SELECTION = 8

    @property
    def description(self) -> str:
        return _ERROR_DESCRIPTIONS[self.value]

    def __str__(self) -> str:
        return self.name.lower()
