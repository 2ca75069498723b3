from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

EXACT, MAYBE_BETTER = 0, 1


@dataclass(frozen=True)
class Score:
    score: int
    bound: int = EXACT

    @property
    def exact(self) -> bool:
        return self.bound == EXACT


class TranspositionTable:
    """Fingerprint -> Score. One entry per fingerprint, newest wins, no eviction."""

    def __init__(self) -> None:
        self.store: Dict[int, Score] = {}
        self.stats = {"lookups": 0, "hits": 0, "stores": 0, "replacements": 0}

    def probe(self, key: int) -> Score | None:
        self.stats["lookups"] += 1
        e = self.store.get(key)
        if e is not None:
            self.stats["hits"] += 1
        return e

    def save(self, key: int, score: int, bound: int = EXACT) -> None:
        self.stats["stores"] += 1
        if key in self.store:
            self.stats["replacements"] += 1
        self.store[key] = Score(score, bound)

    def reset_stats(self) -> None:
        for k in self.stats:
            self.stats[k] = 0

    def clear(self) -> None:
        self.store.clear()
        self.reset_stats()

    def __len__(self) -> int:
        return len(self.store)

    def __contains__(self, key: int) -> bool:
        return key in self.store
