"""
Curated starter sets.

A table of pre-vetted sets, each made of words whose letters never repeat
within or across words. One eligible set is drawn uniformly at random per
call; a set is eligible only if every word is in the current dictionary.

The built-in table targets the bundled Russian list. A table built for
another dictionary can be loaded with `load_table` (see
apps/cli/build_starters.py, which writes it).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional, Sequence

from .base import BaseStarter, register

CURATED_SETS: List[List[str]] = [
    ["съезд", "вьюга", "щипцы", "шторм"],
    ["съезд", "вьюга", "щипцы", "тромб"],
    ["съезд", "вьюга", "щипцы", "бронх"],
    ["кулич", "шторм", "вьюга", "съезд"],
    ["пятно", "вихрь", "съезд", "мушка"],
]


def load_table(path: Path | str) -> List[List[str]]:
    """
    Read a JSON table: a list of word lists.
    Raises ValueError if the file holds anything else.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, list) or not all(
            isinstance(s, list) and all(isinstance(w, str) for w in s) for s in data):
        raise ValueError(f"{path}: expected a JSON list of word lists")
    return [[w.strip().lower() for w in s] for s in data]


@register
class CuratedStarter(BaseStarter):
    id = "curated"

    def __init__(self, table: Optional[Sequence[Sequence[str]]] = None):
        super().__init__()
        self.table = [list(s) for s in (table if table is not None else CURATED_SETS)]

    def suggest(self, count: int = 5) -> List[str]:
        known = set(self.words)
        eligible = [s for s in self.table if s and all(w in known for w in s)]
        if not eligible:
            raise ValueError("No curated starter set fits the current dictionary")
        return list(self.rng.choice(eligible)[:count])
