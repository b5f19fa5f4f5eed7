"""Exceptions for misuse of the board or corrupted state.

Game-rule violations are not exceptions; they are reported as
:class:`~checkie.core.enums.MoveError` values.
"""

from __future__ import annotations


class CheckersError(Exception):
    """Base class for all checkie exceptions."""


class CellOutOfBoundsError(CheckersError, IndexError):
    """A board slot was addressed outside the 8x8 grid."""


class CellOccupiedError(CheckersError, ValueError):
    """A piece was added on a cell that already holds one."""


class BoardDesyncError(CheckersError, RuntimeError):
    """A piece's recorded cell and the board disagree."""


class NotationError(CheckersError, ValueError):
    """A position string could not be parsed."""
