from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from breakthrough_solver.engine.board import new_initial_board
from breakthrough_solver.engine.display import render_board
from breakthrough_solver.engine.notation import describe_move, format_board, parse_board
from breakthrough_solver.engine.solver import ALGORITHMS, Solver
from breakthrough_solver.engine.tt import TranspositionTable
from breakthrough_solver.engine.zobrist import ZobristKeys
from breakthrough_solver.logging_setup import setup_logging
from breakthrough_solver.settings import ConfigError, load_config, parse_side

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="breakthrough-solve", description="Exact value of a breakthrough pawn race")
    p.add_argument("--config", default=None, help="TOML file merged over the packaged defaults")
    p.add_argument("--rows", type=int, default=None)
    p.add_argument("--columns", type=int, default=None)
    p.add_argument("--position", default=None, help="rows from Black's home row, e.g. BBBB/..../..../WWWW")
    p.add_argument("--side", default=None, help="side to move: white or black")
    p.add_argument("--algorithm", choices=ALGORITHMS, default=None)
    p.add_argument("--seed", type=lambda s: int(s, 0), default=None, help="zobrist seed")
    p.add_argument("--hash-side-to-move", action="store_true", default=None,
                   help="include the side to move in position fingerprints")
    p.add_argument("--best-move", action="store_true", help="also print the moves that keep the value")
    p.add_argument("--log-level", default=None)
    p.add_argument("--no-log-file", action="store_true", help="log to stderr only")
    p.add_argument("--quiet", action="store_true", help="print only the score")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    try:
        cfg = load_config(args.config).with_overrides(
            rows=args.rows,
            columns=args.columns,
            seed=args.seed,
            hash_side_to_move=args.hash_side_to_move,
            algorithm=args.algorithm,
            first_side=parse_side(args.side) if args.side is not None else None,
            log_level=args.log_level.upper() if args.log_level else None,
        )
    except ConfigError as e:
        p.error(str(e))

    setup_logging(overwrite=True, level=cfg.log_level_value, log_file=not args.no_log_file)

    try:
        board = parse_board(args.position) if args.position else new_initial_board(cfg.rows, cfg.columns)
    except ValueError as e:
        logger.error("bad position: %s", e)
        p.error(str(e))

    side = cfg.first_side
    keys = ZobristKeys.for_board(board, cfg.seed, cfg.hash_side_to_move)
    solver = Solver(keys)
    table = TranspositionTable()
    logger.info("solving %s for %s with %s", format_board(board), side.name.lower(), cfg.algorithm)
    result = solver.solve(board, side, cfg.algorithm, table)

    if args.quiet:
        print(result.score)
        return 0
    print(render_board(board, side))
    print(f"{side.name.lower()} to move: {result.score} ({result.outcome})")
    print(f"nodes={result.nodes} lookups={result.lookups} hits={result.hits} "
          f"table={result.table_size} time={result.time_ms}ms")
    if args.best_move:
        moves = [describe_move(board, nxt, side) for nxt, _ in solver.best_successors(board, side, table, cfg.algorithm)]
        print("best: " + (" ".join(moves) if moves else "(none)"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
