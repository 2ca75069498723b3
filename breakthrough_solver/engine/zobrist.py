from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .board import Board, Side

MASK64 = 0xFFFFFFFFFFFFFFFF
DEFAULT_SEED = 0xbadd0990d15ea5e5


def _splitmix64(x: int) -> int:
    x = (x + 0x9e3779b97f4a7c15) & MASK64
    z = x
    z = (z ^ (z >> 30)) * 0xbf58476d1ce4e5b9 & MASK64
    z = (z ^ (z >> 27)) * 0x94d049bb133111eb & MASK64
    return z ^ (z >> 31)


@dataclass(frozen=True)
class ZobristKeys:
    """Per-(side, square) signatures for one board geometry.

    Built once at startup and handed to the solver; two processes using the
    same seed produce identical fingerprints.
    """

    rows: int
    columns: int
    cell_keys: Tuple[Tuple[int, ...], Tuple[int, ...]]
    side_key: int
    hash_side_to_move: bool = False

    @classmethod
    def from_seed(
        cls,
        rows: int,
        columns: int,
        seed: int = DEFAULT_SEED,
        hash_side_to_move: bool = False,
    ) -> "ZobristKeys":
        state = seed & MASK64
        keys: List[Tuple[int, ...]] = []
        for _side in (Side.WHITE, Side.BLACK):
            row_keys = []
            for _square in range(rows * columns):
                state = _splitmix64(state)
                row_keys.append(state)
            keys.append(tuple(row_keys))
        state = _splitmix64(state)
        return cls(rows, columns, (keys[0], keys[1]), state, hash_side_to_move)

    @classmethod
    def for_board(cls, board: Board, seed: int = DEFAULT_SEED, hash_side_to_move: bool = False) -> "ZobristKeys":
        return cls.from_seed(board.rows, board.columns, seed, hash_side_to_move)

    def fingerprint(self, board: Board, side: Optional[Side] = None) -> int:
        if (board.rows, board.columns) != (self.rows, self.columns):
            raise ValueError(
                f"keys built for {self.rows}x{self.columns}, board is {board.rows}x{board.columns}"
            )
        h = 0
        for side_idx, bb in ((Side.WHITE, board.white), (Side.BLACK, board.black)):
            table = self.cell_keys[side_idx]
            while bb:
                lsb = bb & -bb
                h ^= table[lsb.bit_length() - 1]
                bb ^= lsb
        # Side to move stays out of the digest unless explicitly requested
        if self.hash_side_to_move and side == Side.BLACK:
            h ^= self.side_key
        return h & MASK64
