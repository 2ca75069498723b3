from __future__ import annotations

from .board import Board, Side
from .movegen import generate_moves


def opponent_on_home_rank(board: Board, side: Side) -> bool:
    """True when the opponent has broken through to `side`'s starting row."""
    opp = board.pawns(side.switch())
    return bool(opp & board.row_mask(board.home_row(side)))


def is_immediately_lost(board: Board, side: Side) -> bool:
    return opponent_on_home_rank(board, side) or not generate_moves(board, side)
