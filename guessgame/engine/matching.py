"""
Candidate matching given a cumulative ConstraintState.

Given:
  - a dictionary (ordered words)
  - a validated ConstraintState

Return:
  - the words still consistent with every attempt, in dictionary order.

Letter multiplicity is "present at least once": a misplaced letter only has
to occur somewhere in the word, repeated letters are not counted.
"""

from __future__ import annotations
from typing import Iterable, List

from .constraints import ConstraintState
from .feedback import WORD_LEN


def _has_absent(state: ConstraintState, word: str) -> bool:
    return any(ch in word for ch in state.absent)


def _has_correct_in_place(state: ConstraintState, word: str) -> bool:
    return all(word[pos] == ch for pos, ch in state.correct.items())


def _has_misplaced_elsewhere(state: ConstraintState, word: str) -> bool:
    # Pinned slots are skipped: their letter is already fixed by `correct`.
    for pos, ch in enumerate(word):
        if pos in state.correct:
            continue
        if ch in state.misplaced.get(pos, ()):
            return False
    return state.misplaced_letters() <= set(word)


def matches(state: ConstraintState, word: str) -> bool:
    """
    True if `word` is consistent with `state`.

    Checks run cheapest first and stop at the first failure:
      1) no absent letter anywhere
      2) every pinned position holds its letter
      3) misplaced letters are not at excluded positions, yet all present
    """
    if len(word) != WORD_LEN:
        return False
    if _has_absent(state, word):
        return False
    if not _has_correct_in_place(state, word):
        return False
    return _has_misplaced_elsewhere(state, word)


def filter_candidates(words: Iterable[str], state: ConstraintState) -> List[str]:
    """
    Keep only words that match `state` (order preserved as in `words`).
    `words` is only read.
    """
    return [w for w in words if matches(state, w)]
