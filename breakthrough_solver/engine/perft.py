from __future__ import annotations

from typing import Dict

from .board import Board, Side
from .movegen import generate_moves
from .notation import describe_move
from .terminal import opponent_on_home_rank


def perft(board: Board, side: Side, depth: int) -> int:
    if depth == 0:
        return 1
    # A broken-through position is over: no moves to count
    if opponent_on_home_rank(board, side):
        return 0
    total = 0
    opp = side.switch()
    for nxt in generate_moves(board, side):
        total += perft(nxt, opp, depth - 1)
    return total


def divide(board: Board, side: Side, depth: int) -> Dict[str, int]:
    """Perft split by root move, keyed by move name."""
    if depth < 1:
        raise ValueError("divide needs depth >= 1")
    out: Dict[str, int] = {}
    if opponent_on_home_rank(board, side):
        return out
    opp = side.switch()
    for nxt in generate_moves(board, side):
        out[describe_move(board, nxt, side)] = perft(nxt, opp, depth - 1)
    return out
