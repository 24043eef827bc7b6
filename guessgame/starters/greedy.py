"""
Greedy letter-disjoint starter.

Strategy:
  - Shuffle a copy of the dictionary with the starter's RNG.
  - Walk it and accept a word only if it has 5 distinct letters and none of
    them were used by an earlier accepted word.
  - Stop once `count` words are collected (fewer if the dictionary runs out).

Notes:
  - Deterministic for a seeded RNG; the dictionary itself is never touched.
"""

from __future__ import annotations

from typing import List, Set
from .base import BaseStarter, register


@register
class GreedyStarter(BaseStarter):
    id = "greedy"

    def suggest(self, count: int = 5) -> List[str]:
        pool = list(self.words)
        self.rng.shuffle(pool)

        picked: List[str] = []
        seen: Set[str] = set()
        for w in pool:
            if len(picked) >= count:
                break
            letters = set(w)
            if len(letters) != len(w) or letters & seen:
                continue
            seen |= letters
            picked.append(w)
        return picked
