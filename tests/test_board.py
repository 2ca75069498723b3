from __future__ import annotations

import pytest

from breakthrough_solver.engine.board import Board, Cell, Side, empty_board, new_initial_board


def test_initial_board_layout():
    b = new_initial_board()
    assert (b.rows, b.columns) == (4, 4)
    for column in range(4):
        assert b.get_cell(0, column) == Cell.BLACK_PAWN
        assert b.get_cell(1, column) == Cell.EMPTY
        assert b.get_cell(2, column) == Cell.EMPTY
        assert b.get_cell(3, column) == Cell.WHITE_PAWN
    # row-major bit layout: row r, column c -> bit r * columns + c
    assert b.black == 0x000F
    assert b.white == 0xF000


def test_initial_board_other_sizes():
    b = new_initial_board(5, 3)
    assert b.pawns(Side.BLACK) == b.row_mask(0)
    assert b.pawns(Side.WHITE) == b.row_mask(4)
    assert b.squares == 15


def test_set_and_get_cell():
    b = empty_board(3, 3)
    b.set_cell(1, 2, Cell.WHITE_PAWN)
    assert b.get_cell(1, 2) == Cell.WHITE_PAWN
    assert not b.is_empty(1, 2)
    b.set_cell(1, 2, Cell.BLACK_PAWN)
    assert b.get_cell(1, 2) == Cell.BLACK_PAWN
    assert b.white == 0
    b.set_cell(1, 2, Cell.EMPTY)
    assert b.is_empty(1, 2)
    assert (b.white, b.black) == (0, 0)


def test_copy_is_independent():
    b = new_initial_board()
    c = b.copy()
    assert c == b
    c.set_cell(0, 0, Cell.EMPTY)
    assert b.get_cell(0, 0) == Cell.BLACK_PAWN
    assert c != b


def test_equality_is_structural():
    assert new_initial_board() == new_initial_board()
    assert new_initial_board(4, 4) != new_initial_board(4, 5)
    assert Board(2, 2, white=0b1100) == Board(2, 2, 0b1100, 0)


def test_out_of_range_cell_raises():
    b = new_initial_board()
    with pytest.raises(IndexError):
        b.get_cell(4, 0)
    with pytest.raises(IndexError):
        b.set_cell(0, -1, Cell.WHITE_PAWN)


@pytest.mark.parametrize("rows,columns", [(1, 4), (0, 3), (3, 0)])
def test_too_small_board_rejected(rows, columns):
    with pytest.raises(ValueError):
        empty_board(rows, columns)


def test_side_helpers():
    assert Side.WHITE.switch() is Side.BLACK
    assert Side.BLACK.switch() is Side.WHITE
    assert Side.WHITE.pawn == Cell.WHITE_PAWN
    b = empty_board(5, 2)
    assert b.home_row(Side.WHITE) == 4
    assert b.home_row(Side.BLACK) == 0


def test_cells_iterates_row_major():
    b = new_initial_board(2, 2)
    assert list(b.cells()) == [
        (0, 0, Cell.BLACK_PAWN),
        (0, 1, Cell.BLACK_PAWN),
        (1, 0, Cell.WHITE_PAWN),
        (1, 1, Cell.WHITE_PAWN),
    ]
