from __future__ import annotations
import random
from typing import Iterable, List, Optional, Sequence

from .errors import GuessGameError, FormatError, ValidationError
from .feedback import Color, Letter, Attempt, parse, parse_many, format_attempt
from .constraints import ConstraintState, aggregate, validate
from .matching import matches, filter_candidates
from guessgame.starters import suggest

__all__ = [
    "GuessGameError", "FormatError", "ValidationError",
    "Color", "Letter", "Attempt", "parse", "parse_many", "format_attempt",
    "ConstraintState", "aggregate", "validate",
    "matches", "filter_candidates", "guess_word",
]


def guess_word(
        encoded: Iterable[str],
        words: Sequence[str],
        *,
        starter: str = "greedy",
        rng: Optional[random.Random] = None,
) -> List[str]:
    """
    One request: encoded attempts in, remaining words out.

    No attempts means a cold start: a letter-diverse starter set is returned
    instead (strategy `starter`, randomness from `rng`).

    Raises FormatError / ValidationError untouched.
    """
    attempts = parse_many(encoded)
    if not attempts:
        return suggest(words, strategy=starter, rng=rng)
    return filter_candidates(words, aggregate(attempts))
