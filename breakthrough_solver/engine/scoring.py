"""Score ordering for the solver.

A score is a ply count seen from the side to move: positive means a forced
win in that many plies (fewer is better), zero or negative a forced loss
(more negative holds out longer and is better). Every positive score beats
every non-positive one.
"""
from __future__ import annotations

# 0 is "already lost"; 1 is "wins on this move"
WORST_SCORE = 0
BEST_SCORE = 1


def better_than(a: int, b: int) -> bool:
    """True when `a` is at least as good as `b`."""
    if b > 0:
        return a > 0 and b >= a
    if a > 0:
        return True
    return b >= a


def strictly_better(a: int, b: int) -> bool:
    return a != b and better_than(a, b)


def best(a: int, b: int) -> int:
    if b > 0:
        if a > 0 and b > a:
            return a
    else:
        if a > 0:
            return a
        if b > a:
            return a
    return b


def negate(child: int) -> int:
    # Flip perspective and add the ply just played
    if child > 0:
        return -(child + 1)
    return -(child - 1)


def child_bound(bound: int) -> int:
    """Map a window bound of the parent into the child's score space.

    Inverse of `negate`: a child score at least as bad (for the child) as
    the returned value gives the parent a contribution at least as good as
    `bound`. Bounds no contribution can reach clamp to BEST_SCORE.
    """
    if bound > 0:
        return 1 - bound
    return max(BEST_SCORE, -bound - 1)
