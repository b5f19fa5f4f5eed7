"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.types import Cell


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal-bridge tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def capture_board() -> Board:
    """Dark man on c6 facing a Light man on d5, e4 free to land on."""
    board = Board()
    board.add(Color.DARK, Cell(2, 5))
    board.add(Color.LIGHT, Cell(3, 4))
    board.add(Color.LIGHT, Cell(7, 0))
    return board
