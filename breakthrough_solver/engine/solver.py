from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .board import Board, Side
from .movegen import generate_moves
from .scoring import BEST_SCORE, WORST_SCORE, best, better_than, child_bound, negate, strictly_better
from .terminal import is_immediately_lost, opponent_on_home_rank
from .tt import EXACT, MAYBE_BETTER, TranspositionTable
from .zobrist import ZobristKeys
from ..events import log_event

logger = logging.getLogger(__name__)

MINMAX = "minmax"
ALPHABETA = "alphabeta"
ALGORITHMS = (MINMAX, ALPHABETA)


@dataclass
class SolveResult:
    score: int
    algorithm: str
    side: Side
    nodes: int
    lookups: int
    hits: int
    table_size: int
    time_ms: int

    @property
    def outcome(self) -> str:
        if self.score > 0:
            return f"win in {self.score}"
        if self.score == 0:
            return "lost"
        return f"loss in {-self.score}"


class Solver:
    def __init__(self, keys: ZobristKeys) -> None:
        self.keys = keys
        self.nodes = 0

    def _key(self, board: Board, side: Side) -> int:
        return self.keys.fingerprint(board, side)

    def get_score_minmax(self, board: Board, side: Side, table: TranspositionTable) -> int:
        self.nodes += 1
        key = self._key(board, side)
        entry = table.probe(key)
        if entry is not None:
            return entry.score

        if opponent_on_home_rank(board, side):
            table.save(key, WORST_SCORE, EXACT)
            return WORST_SCORE

        successors = generate_moves(board, side)
        if not successors:
            table.save(key, WORST_SCORE, EXACT)
            return WORST_SCORE

        opp = side.switch()
        best_score = WORST_SCORE
        for nxt in successors:
            best_score = best(best_score, negate(self.get_score_minmax(nxt, opp, table)))
        table.save(key, best_score, EXACT)
        return best_score

    def get_score_alpha_beta(
        self, board: Board, alpha: int, beta: int, side: Side, table: TranspositionTable
    ) -> int:
        self.nodes += 1
        key = self._key(board, side)
        entry = table.probe(key)
        if entry is not None and entry.exact:
            return entry.score

        if better_than(alpha, beta):
            # Caller's window is already closed: only a decided position
            # matters, anything else reports the most optimistic score.
            if is_immediately_lost(board, side):
                table.save(key, WORST_SCORE, EXACT)
                return WORST_SCORE
            return BEST_SCORE

        if entry is not None:
            alpha = best(alpha, entry.score)
            if better_than(alpha, beta):
                return entry.score

        if opponent_on_home_rank(board, side):
            table.save(key, WORST_SCORE, EXACT)
            return WORST_SCORE

        successors = generate_moves(board, side)
        if not successors:
            table.save(key, WORST_SCORE, EXACT)
            return WORST_SCORE

        floor = alpha
        opp = side.switch()
        best_score = WORST_SCORE
        exhaustive = True
        for nxt in successors:
            score = negate(self.get_score_alpha_beta(nxt, child_bound(beta), child_bound(alpha), opp, table))
            if better_than(score, best_score):
                best_score = score
                alpha = best(alpha, score)
            if better_than(alpha, beta):
                exhaustive = False
                break

        if not exhaustive:
            table.save(key, best_score, MAYBE_BETTER)
        elif floor == WORST_SCORE or strictly_better(best_score, floor):
            table.save(key, best_score, EXACT)
        # else: every move failed low, the value is only an upper bound
        return best_score

    def evaluate(
        self,
        board: Board,
        side: Side,
        table: Optional[TranspositionTable] = None,
        algorithm: str = ALPHABETA,
    ) -> int:
        if algorithm not in ALGORITHMS:
            raise ValueError(f"unknown algorithm: {algorithm!r}")
        if table is None:
            table = TranspositionTable()
        _ensure_recursion_headroom(board)
        if algorithm == MINMAX:
            return self.get_score_minmax(board, side, table)
        return self.get_score_alpha_beta(board, WORST_SCORE, BEST_SCORE, side, table)

    def solve(
        self,
        board: Board,
        side: Side,
        algorithm: str = ALPHABETA,
        table: Optional[TranspositionTable] = None,
    ) -> SolveResult:
        if table is None:
            table = TranspositionTable()
        self.nodes = 0
        lookups0, hits0 = table.stats["lookups"], table.stats["hits"]
        start = time.perf_counter()
        score = self.evaluate(board, side, table, algorithm)
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        result = SolveResult(
            score=score,
            algorithm=algorithm,
            side=side,
            nodes=self.nodes,
            lookups=table.stats["lookups"] - lookups0,
            hits=table.stats["hits"] - hits0,
            table_size=len(table),
            time_ms=elapsed_ms,
        )
        logger.debug("solved %dx%d for %s: %s", board.rows, board.columns, side.name, result.outcome)
        log_event(
            "solver",
            "solve",
            rows=board.rows,
            columns=board.columns,
            side=side.name.lower(),
            algorithm=algorithm,
            score=score,
            nodes=result.nodes,
            lookups=result.lookups,
            hits=result.hits,
            table_size=result.table_size,
            time_ms=elapsed_ms,
        )
        return result

    def best_successors(
        self,
        board: Board,
        side: Side,
        table: Optional[TranspositionTable] = None,
        algorithm: str = ALPHABETA,
    ) -> List[Tuple[Board, int]]:
        """Successors whose negated value equals the position's value."""
        if table is None:
            table = TranspositionTable()
        opp = side.switch()
        scored = [(nxt, negate(self.evaluate(nxt, opp, table, algorithm))) for nxt in generate_moves(board, side)]
        if not scored:
            return []
        value = scored[0][1]
        for _, score in scored[1:]:
            value = best(value, score)
        return [(nxt, score) for nxt, score in scored if score == value]


def _ensure_recursion_headroom(board: Board) -> None:
    # Every ply advances a pawn, so no line is longer than the total advance available
    max_plies = 2 * board.columns * (board.rows - 1)
    needed = 4 * max_plies + 200
    if sys.getrecursionlimit() < needed:
        sys.setrecursionlimit(needed)
