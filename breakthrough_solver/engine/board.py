from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

DEFAULT_ROWS = 4
DEFAULT_COLUMNS = 4


class Cell(IntEnum):
    EMPTY = 0
    WHITE_PAWN = 1
    BLACK_PAWN = 2


class Side(IntEnum):
    # WHITE starts on the last row and moves toward row 0; BLACK the opposite
    WHITE = 0
    BLACK = 1

    def switch(self) -> "Side":
        return Side.BLACK if self is Side.WHITE else Side.WHITE

    @property
    def pawn(self) -> Cell:
        return Cell.WHITE_PAWN if self is Side.WHITE else Cell.BLACK_PAWN


@dataclass
class Board:
    rows: int
    columns: int
    white: int = 0
    black: int = 0

    def _square(self, row: int, column: int) -> int:
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError(f"cell ({row}, {column}) outside {self.rows}x{self.columns} board")
        return row * self.columns + column

    def get_cell(self, row: int, column: int) -> Cell:
        bit = 1 << self._square(row, column)
        if self.white & bit:
            return Cell.WHITE_PAWN
        if self.black & bit:
            return Cell.BLACK_PAWN
        return Cell.EMPTY

    def set_cell(self, row: int, column: int, cell: Cell) -> None:
        bit = 1 << self._square(row, column)
        self.white &= ~bit
        self.black &= ~bit
        if cell == Cell.WHITE_PAWN:
            self.white |= bit
        elif cell == Cell.BLACK_PAWN:
            self.black |= bit

    def is_empty(self, row: int, column: int) -> bool:
        return self.get_cell(row, column) == Cell.EMPTY

    def pawns(self, side: Side) -> int:
        return self.white if side == Side.WHITE else self.black

    def copy(self) -> "Board":
        return Board(self.rows, self.columns, self.white, self.black)

    @property
    def squares(self) -> int:
        return self.rows * self.columns

    def row_mask(self, row: int) -> int:
        return ((1 << self.columns) - 1) << (row * self.columns)

    def home_row(self, side: Side) -> int:
        return self.rows - 1 if side == Side.WHITE else 0

    def cells(self):
        """Yield (row, column, cell) in row-major order."""
        for row in range(self.rows):
            for column in range(self.columns):
                yield row, column, self.get_cell(row, column)


def empty_board(rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLUMNS) -> Board:
    if rows < 2 or columns < 1:
        raise ValueError(f"board must be at least 2x1, got {rows}x{columns}")
    return Board(rows, columns)


def new_initial_board(rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLUMNS) -> Board:
    board = empty_board(rows, columns)
    for row in range(rows):
        for column in range(columns):
            if row == 0:
                board.set_cell(row, column, Cell.BLACK_PAWN)
            elif row == rows - 1:
                board.set_cell(row, column, Cell.WHITE_PAWN)
    return board
