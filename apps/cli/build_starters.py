# apps/cli/build_starters.py
"""
Pre-compute a curated starter table for a dictionary.

Runs many seeded greedy passes over the dictionary, keeps every pass that
collected the full number of letter-disjoint words, de-duplicates the sets
and writes them as a JSON list of word lists. The `curated` starter reads
the file via --table / GUESSGAME_STARTERS_TABLE.

    $ python -m apps.cli.build_starters --trials 5000 --out reports/starters.json
"""

from __future__ import annotations

import argparse
import json
import random
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from tqdm import tqdm

from guessgame.config import Config
from guessgame.datasets import load_words, validate_wordlist, pretty_summary
from guessgame.starters import create_starter


def build_table(words: Sequence[str], *, trials: int, size: int, seed: int,
                progress: bool = False) -> List[List[str]]:
    """
    Collect distinct full-size greedy sets (sorted words, first-seen order).

    Each trial draws its own seed from a base RNG so the table is
    reproducible for a given `seed`.
    """
    base = random.Random(seed)
    starter = create_starter("greedy")
    table: List[List[str]] = []
    seen = set()

    for _ in tqdm(range(trials), ncols=80, desc="Building", unit="trial",
                  disable=not progress):
        starter.reset(words=words, rng=random.Random(base.getrandbits(64)))
        picked = starter.suggest(size)
        if len(picked) < size:
            continue
        key = tuple(sorted(picked))
        if key in seen:
            continue
        seen.add(key)
        table.append(list(key))
    return table


def main(argv: Optional[List[str]] = None) -> int:
    cfg = Config()
    ap = argparse.ArgumentParser(description="guessgame: build a curated starter table")
    ap.add_argument("--words", default=str(cfg.WORDS_PATH), help="dictionary path")
    ap.add_argument("--trials", type=int, default=2000, help="number of greedy passes")
    ap.add_argument("--size", type=int, default=5, help="words per starter set")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed")
    ap.add_argument("--out", default="reports/starters.json", help="output JSON path")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="Show a progress bar (auto=only on a terminal)."
    )
    args = ap.parse_args(argv)

    rep = validate_wordlist(5, args.words)
    print(pretty_summary(rep))
    words = load_words(args.words)

    show = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    table = build_table(words, trials=args.trials, size=args.size, seed=args.seed,
                        progress=show)
    if not table:
        sys.stderr.write(f"No set of {args.size} letter-disjoint words found "
                         f"in {args.trials} trials\n")
        return 1

    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(table, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"Wrote {len(table)} sets -> {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
