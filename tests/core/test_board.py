"""Tests for Board."""

import pytest

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.errors import (
    BoardDesyncError,
    CellOccupiedError,
    CellOutOfBoundsError,
)
from checkie.core.types import Cell, all_cells, is_playable


class TestBoardInitial:
    def test_twelve_per_side(self) -> None:
        board = Board.initial()
        assert board.count(Color.LIGHT) == 12
        assert board.count(Color.DARK) == 12
        assert board.count() == 24

    def test_light_home_rows(self) -> None:
        board = Board.initial()
        assert all(p.cell.row in (0, 1, 2) for p in board.pieces(Color.LIGHT))

    def test_dark_home_rows(self) -> None:
        board = Board.initial()
        assert all(p.cell.row in (5, 6, 7) for p in board.pieces(Color.DARK))

    def test_alternating_columns(self) -> None:
        board = Board.initial()
        assert all(is_playable(p.cell) for p in board.pieces())
        assert board[Cell(1, 2)] is not None
        assert board[Cell(0, 2)] is None
        assert board[Cell(2, 5)] is not None

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for cell in all_cells():
            if cell.row in (3, 4):
                assert board[cell] is None

    def test_no_kings(self) -> None:
        board = Board.initial()
        assert not any(p.is_king for p in board.pieces())

    def test_ids_unique(self) -> None:
        board = Board.initial()
        ids = [p.id for p in board.pieces()]
        assert len(set(ids)) == 24


class TestBoardAccess:
    def test_get_out_of_bounds_raises(self) -> None:
        board = Board()
        with pytest.raises(CellOutOfBoundsError):
            board.get(Cell(8, 0))
        with pytest.raises(IndexError):
            board[Cell(-1, 3)]

    def test_add_and_lookup(self) -> None:
        board = Board()
        piece = board.add(Color.LIGHT, Cell(1, 2))
        assert board[Cell(1, 2)] is piece
        assert board.piece(piece.id) is piece
        assert piece.cell == piece.previous_cell == Cell(1, 2)

    def test_add_occupied_raises(self) -> None:
        board = Board()
        board.add(Color.LIGHT, Cell(1, 2))
        with pytest.raises(CellOccupiedError):
            board.add(Color.DARK, Cell(1, 2))

    def test_pieces_scan_order(self) -> None:
        board = Board()
        board.add(Color.LIGHT, Cell(3, 0))
        board.add(Color.LIGHT, Cell(1, 4))
        board.add(Color.DARK, Cell(1, 2))
        assert [p.cell for p in board.pieces()] == [Cell(1, 2), Cell(1, 4), Cell(3, 0)]
        assert [p.cell for p in board.pieces(Color.LIGHT)] == [Cell(1, 4), Cell(3, 0)]


class TestBoardMutation:
    def test_place_updates_both_sides(self) -> None:
        board = Board()
        piece = board.add(Color.LIGHT, Cell(1, 2))
        board.place(piece, Cell(2, 3))
        assert board[Cell(1, 2)] is None
        assert board[Cell(2, 3)] is piece
        assert piece.cell == Cell(2, 3)
        assert piece.previous_cell == Cell(1, 2)

    def test_place_same_cell(self) -> None:
        board = Board()
        piece = board.add(Color.LIGHT, Cell(1, 2))
        board.place(piece, Cell(2, 3))
        board.place(piece, Cell(2, 3))
        assert board[Cell(2, 3)] is piece
        assert piece.previous_cell == Cell(2, 3)

    def test_place_out_of_bounds_raises(self) -> None:
        board = Board()
        piece = board.add(Color.LIGHT, Cell(1, 2))
        with pytest.raises(CellOutOfBoundsError):
            board.place(piece, Cell(1, 8))
        assert board[Cell(1, 2)] is piece

    def test_remove(self) -> None:
        board = Board()
        piece = board.add(Color.DARK, Cell(3, 4))
        assert board.remove(Cell(3, 4)) is piece
        assert board[Cell(3, 4)] is None
        assert board.count() == 0
        with pytest.raises(KeyError):
            board.piece(piece.id)

    def test_remove_empty(self) -> None:
        assert Board().remove(Cell(3, 4)) is None

    def test_promote_is_monotonic(self) -> None:
        board = Board()
        piece = board.add(Color.LIGHT, Cell(1, 6))
        assert board.promote(piece)
        assert not board.promote(piece)
        assert piece.is_king

    def test_check_in_sync(self) -> None:
        board = Board()
        piece = board.add(Color.LIGHT, Cell(1, 2))
        board.check_in_sync(piece)
        piece.cell = Cell(3, 4)  # corrupt on purpose
        with pytest.raises(BoardDesyncError):
            board.check_in_sync(piece)

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy.remove(Cell(1, 2))
        assert board != copy
        assert board[Cell(1, 2)] is not None

    def test_copy_keeps_ids(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert [p.id for p in board.pieces()] == [p.id for p in copy.pieces()]
        assert copy[Cell(1, 2)] is not board[Cell(1, 2)]

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert board.count() == 0
        assert all(board[c] is None for c in all_cells())

    def test_clear_does_not_reuse_ids(self) -> None:
        board = Board.initial()
        board.clear()
        piece = board.add(Color.LIGHT, Cell(1, 0))
        assert piece.id == 24

    def test_repr_not_empty(self) -> None:
        text = repr(Board.initial())
        assert "l" in text and "d" in text
        assert "a b c d e f g h" in text
