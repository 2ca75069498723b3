from __future__ import annotations

from typing import List

from .board import Board, Side


def _movable_pawns(board: Board, side: Side) -> int:
    # A pawn on the far row has nowhere to go
    if side == Side.WHITE:
        return board.white & ~board.row_mask(0)
    return board.black & ~board.row_mask(board.rows - 1)


def generate_moves(board: Board, side: Side) -> List[Board]:
    """Every successor board for `side`, in row-major pawn order.

    Per pawn: forward step, capture toward column - 1, capture toward column + 1.
    """
    cols = board.columns
    step = -cols if side == Side.WHITE else cols
    own_white = side == Side.WHITE
    opp = board.black if own_white else board.white
    occupied = board.white | board.black
    out: List[Board] = []

    m = _movable_pawns(board, side)
    while m:
        lsb = m & -m
        sq = lsb.bit_length() - 1
        m ^= lsb
        col = sq % cols
        fwd = sq + step
        targets = []
        if not (occupied >> fwd) & 1:
            targets.append(fwd)
        if col != 0 and (opp >> (fwd - 1)) & 1:
            targets.append(fwd - 1)
        if col != cols - 1 and (opp >> (fwd + 1)) & 1:
            targets.append(fwd + 1)
        for dest in targets:
            dest_bit = 1 << dest
            if own_white:
                nxt = Board(board.rows, cols, (board.white ^ lsb) | dest_bit, board.black & ~dest_bit)
            else:
                nxt = Board(board.rows, cols, board.white & ~dest_bit, (board.black ^ lsb) | dest_bit)
            out.append(nxt)
    return out
