# apps/cli/run.py
"""
CLI entry point for the guessgame helper.

Markers (fixed two characters per letter, five letters per attempt):
  '^' absent, '?' present elsewhere, '=' correct   (or 'g', 'w', 'y')

    $ python -m apps.cli.run "=я^м^н=д=а"
    ябеда
    ягода

With no attempts it prints a cold-start set of letter-disjoint words.

Exit codes:
  0 ok, 2 malformed attempt, 3 contradictory feedback, 4 bad dictionary
"""

from __future__ import annotations

import argparse
import random
import sys
from typing import List, Optional

from guessgame.config import Config
from guessgame.datasets import load_words, validate_wordlist, pretty_summary
from guessgame.engine import FormatError, ValidationError, guess_word
from guessgame.starters import get_starter_ids, load_table, suggest

EXIT_FORMAT = 2
EXIT_VALIDATION = 3
EXIT_DATASET = 4


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def build_parser(cfg: Config) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="guessgame: narrow a dictionary by guess feedback")
    ap.add_argument("attempts", nargs="*",
                    help="encoded attempts, e.g. ^a?n=g?l=e (none = suggest starters)")
    ap.add_argument("--words", default=str(cfg.WORDS_PATH),
                    help="path to the dictionary (one word per line)")
    ap.add_argument("--starter", default=cfg.STARTER, choices=get_starter_ids(),
                    help="cold-start strategy")
    ap.add_argument("--table", default=str(cfg.STARTERS_TABLE or ""),
                    help="JSON table for the curated strategy")
    ap.add_argument("--count", type=_positive_int, default=5, help="number of starter words")
    ap.add_argument("--seed", type=int, help="RNG seed for starter picks")
    ap.add_argument("--check", action="store_true",
                    help="print a dictionary validation summary to stderr first")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse args, load the dictionary once, answer one query and print it.
    """
    cfg = Config()
    args = build_parser(cfg).parse_args(argv)

    if args.check:
        rep = validate_wordlist(5, args.words)
        sys.stderr.write(pretty_summary(rep) + "\n")
        for issue in rep["issues"]:
            sys.stderr.write(f"  - {issue}\n")

    try:
        words = load_words(args.words)
    except FileNotFoundError as e:
        sys.stderr.write(f"Dictionary not found: {e}\n")
        return EXIT_DATASET

    rng = random.Random(args.seed)
    try:
        if args.attempts:
            found = guess_word(args.attempts, words)
        else:
            kwargs = {"table": load_table(args.table)} if args.starter == "curated" and args.table else {}
            found = suggest(words, strategy=args.starter, rng=rng, count=args.count, **kwargs)
    except FormatError as e:
        sys.stderr.write(f"Invalid format: {e}\n")
        return EXIT_FORMAT
    except ValidationError as e:
        sys.stderr.write("Contradictory feedback:\n")
        for msg in e.errors:
            sys.stderr.write(f"  - {msg}\n")
        return EXIT_VALIDATION
    except OSError as e:
        sys.stderr.write(f"Starter table not readable: {e}\n")
        return EXIT_DATASET
    except ValueError as e:
        sys.stderr.write(f"{e}\n")
        return EXIT_DATASET

    for w in found:
        print(w)
    return 0


if __name__ == "__main__":
    sys.exit(main())
