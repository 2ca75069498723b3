from __future__ import annotations

import argparse
from time import perf_counter
from typing import List, Optional

from breakthrough_solver.engine.board import new_initial_board
from breakthrough_solver.engine.notation import parse_board
from breakthrough_solver.engine.perft import divide, perft
from breakthrough_solver.settings import ConfigError, parse_side


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="breakthrough-perft")
    p.add_argument("--depth", type=int, required=True)
    p.add_argument("--rows", type=int, default=4)
    p.add_argument("--columns", type=int, default=4)
    p.add_argument("--position", type=str, default=None, help="board in row notation, e.g. BBBB/..../..../WWWW")
    p.add_argument("--side", default="white")
    p.add_argument("--divide", action="store_true", help="break the count down by first move")
    args = p.parse_args(argv)

    try:
        side = parse_side(args.side)
        b = parse_board(args.position) if args.position else new_initial_board(args.rows, args.columns)
    except (ConfigError, ValueError) as e:
        p.error(str(e))

    if args.divide and args.depth >= 1:
        for move, count in divide(b, side, args.depth).items():
            print(f"{move}: {count}")
    t0 = perf_counter()
    n = perft(b, side, args.depth)
    dt = perf_counter() - t0
    print(f"perft(d={args.depth})={n} in {dt:.3f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
