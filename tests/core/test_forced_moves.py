"""Tests for forced-capture detection."""

import random

import pytest

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.forced_moves import ForcedMoves, capture_landings, scan_forced_moves
from checkie.core.types import Cell, all_cells, is_playable


def _random_board(seed: int) -> Board:
    rng = random.Random(seed)
    board = Board()
    for cell in all_cells():
        if is_playable(cell) and rng.random() < 0.4:
            color = rng.choice((Color.LIGHT, Color.DARK))
            board.add(color, cell, is_king=rng.random() < 0.2)
    return board


class TestScan:
    def test_initial_has_none(self) -> None:
        board = Board.initial()
        assert not scan_forced_moves(board, Color.LIGHT)
        assert not scan_forced_moves(board, Color.DARK)

    def test_dark_capture(self, capture_board: Board) -> None:
        forced = scan_forced_moves(capture_board, Color.DARK)
        dark = capture_board[Cell(2, 5)]
        assert dark is not None
        assert forced.color == Color.DARK
        assert forced.cells_for(dark.id) == frozenset({Cell(4, 3)})
        assert forced.allows(dark.id, Cell(4, 3))

    def test_only_requested_color(self, capture_board: Board) -> None:
        light = capture_board[Cell(3, 4)]
        assert light is not None
        forced = scan_forced_moves(capture_board, Color.LIGHT)
        assert forced.color == Color.LIGHT
        assert list(forced) == [light.id]
        assert forced[light.id] == frozenset({Cell(1, 6)})

    def test_blocked_landing(self, capture_board: Board) -> None:
        capture_board.add(Color.DARK, Cell(4, 3))
        assert not scan_forced_moves(capture_board, Color.DARK)

    def test_same_color_not_capturable(self) -> None:
        board = Board()
        board.add(Color.DARK, Cell(2, 5))
        board.add(Color.DARK, Cell(3, 4))
        assert not scan_forced_moves(board, Color.DARK)

    def test_landing_off_board(self) -> None:
        board = Board()
        board.add(Color.LIGHT, Cell(6, 5))
        board.add(Color.DARK, Cell(7, 6))
        assert not scan_forced_moves(board, Color.LIGHT)

    def test_man_cannot_capture_backwards(self) -> None:
        board = Board()
        light = board.add(Color.LIGHT, Cell(3, 4))
        board.add(Color.DARK, Cell(2, 3))
        assert capture_landings(board, light) == []

    def test_king_captures_backwards(self) -> None:
        board = Board()
        king = board.add(Color.LIGHT, Cell(3, 4), is_king=True)
        board.add(Color.DARK, Cell(2, 3))
        assert capture_landings(board, king) == [Cell(1, 2)]

    def test_several_landings(self) -> None:
        board = Board()
        dark = board.add(Color.DARK, Cell(3, 5))
        board.add(Color.LIGHT, Cell(2, 4))
        board.add(Color.LIGHT, Cell(4, 4))
        forced = scan_forced_moves(board, Color.DARK)
        assert forced[dark.id] == frozenset({Cell(1, 3), Cell(5, 3)})
        assert forced.pairs() == [(dark.id, Cell(1, 3)), (dark.id, Cell(5, 3))]

    def test_idempotent(self, capture_board: Board) -> None:
        first = scan_forced_moves(capture_board, Color.DARK)
        second = scan_forced_moves(capture_board, Color.DARK)
        assert first == second
        assert hash(first) == hash(second)


class TestForcedMovesMapping:
    def test_empty_entries_dropped(self) -> None:
        forced = ForcedMoves(Color.LIGHT, {1: frozenset(), 2: frozenset({Cell(0, 0)})})
        assert list(forced) == [2]
        assert len(forced) == 1
        assert not forced.is_forced(1)

    def test_unknown_piece(self) -> None:
        forced = ForcedMoves(Color.LIGHT)
        assert forced.cells_for(99) == frozenset()
        assert not forced.allows(99, Cell(0, 0))
        with pytest.raises(KeyError):
            forced[99]

    def test_color_part_of_equality(self) -> None:
        assert ForcedMoves(Color.LIGHT) != ForcedMoves(Color.DARK)


class TestScanProperties:
    @pytest.mark.parametrize("seed", range(25))
    def test_landings_in_bounds_and_empty(self, seed: int) -> None:
        board = _random_board(seed)
        for color in (Color.LIGHT, Color.DARK):
            forced = scan_forced_moves(board, color)
            for piece_id, cells in forced.items():
                assert board.piece(piece_id).color == color
                for cell in cells:
                    assert cell.in_bounds
                    assert board[cell] is None

    @pytest.mark.parametrize("seed", range(25))
    def test_jumped_cell_holds_opponent(self, seed: int) -> None:
        board = _random_board(seed)
        forced = scan_forced_moves(board, Color.DARK)
        for piece_id, cell in forced.pairs():
            piece = board.piece(piece_id)
            victim = board[piece.cell.midpoint(cell)]
            assert victim is not None and victim.color == Color.LIGHT
