"""
Text notation for boards and moves.

Boards are written row by row from row 0 (Black's home row) down to the last
row (White's home row), rows separated by '/' or newlines:
'W' white pawn, 'B' black pawn, '.' empty. The 4x4 start is "BBBB/..../..../WWWW".

Squares use chess-like coordinates: files 'a'.. from column 0, rank 1 on
White's home row.
"""
from __future__ import annotations

from .board import Board, Cell, Side, empty_board

_CHARS = {Cell.EMPTY: ".", Cell.WHITE_PAWN: "W", Cell.BLACK_PAWN: "B"}
_CELLS = {v: k for k, v in _CHARS.items()}

CAPTURE_SEPARATOR = "x"
STEP_SEPARATOR = "-"


def parse_board(text: str) -> Board:
    """Parse the row notation into a Board; raises ValueError on malformed input."""
    rows = [r.strip() for r in text.replace("\n", "/").split("/")]
    rows = [r for r in rows if r]
    if len(rows) < 2:
        raise ValueError(f"board needs at least 2 rows: {text!r}")
    width = len(rows[0])
    if any(len(r) != width for r in rows):
        raise ValueError(f"rows have different lengths: {text!r}")
    board = empty_board(len(rows), width)
    for row, line in enumerate(rows):
        for column, ch in enumerate(line.upper()):
            if ch not in _CELLS:
                raise ValueError(f"invalid cell {ch!r} at row {row}, column {column}")
            if _CELLS[ch] != Cell.EMPTY:
                board.set_cell(row, column, _CELLS[ch])
    return board


def format_board(board: Board, separator: str = "/") -> str:
    return separator.join(
        "".join(_CHARS[board.get_cell(row, column)] for column in range(board.columns))
        for row in range(board.rows)
    )


def square_name(board: Board, row: int, column: int) -> str:
    """Chess-like name of a cell, e.g. 'a1' for White's left home corner."""
    if not (0 <= row < board.rows and 0 <= column < board.columns):
        raise ValueError(f"invalid cell: ({row}, {column})")
    return f"{chr(ord('a') + column)}{board.rows - row}"


def describe_move(before: Board, after: Board, side: Side) -> str:
    """Name the single-pawn move that turns `before` into `after`, e.g. 'b1-b2' or 'b2xc3'."""
    own_before, own_after = before.pawns(side), after.pawns(side)
    left = own_before & ~own_after
    arrived = own_after & ~own_before
    if left.bit_count() != 1 or arrived.bit_count() != 1:
        raise ValueError("boards are not one move apart")
    src = left.bit_length() - 1
    dst = arrived.bit_length() - 1
    captured = before.pawns(side.switch()) & arrived
    sep = CAPTURE_SEPARATOR if captured else STEP_SEPARATOR
    cols = before.columns
    return (
        square_name(before, src // cols, src % cols)
        + sep
        + square_name(before, dst // cols, dst % cols)
    )
