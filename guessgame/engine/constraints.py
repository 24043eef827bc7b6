"""
Constraint aggregation: fold parsed attempts into one cumulative state.

Given:
  - one or more attempts (each 5 (color, letter) pairs)

Return:
  - a ConstraintState holding
      correct   : position -> letter pinned there
      misplaced : position -> letters known NOT to be at that position
                  (but somewhere in the word)
      absent    : letters not in the word at all

The state is checked for self-contradictions before it is handed out; every
violated rule is reported at once through ValidationError.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Set, Tuple

from .errors import ValidationError
from .feedback import Attempt, Color, WORD_LEN


@dataclass(frozen=True)
class ConstraintState:
    correct: Mapping[int, str] = field(default_factory=dict)
    misplaced: Mapping[int, FrozenSet[str]] = field(default_factory=dict)
    absent: FrozenSet[str] = frozenset()

    def misplaced_letters(self) -> Set[str]:
        """All distinct letters known to be present but misplaced somewhere."""
        out: Set[str] = set()
        for chars in self.misplaced.values():
            out |= chars
        return out


def validate(state: ConstraintState, conflicts: Iterable[str] = ()) -> Tuple[bool, List[str]]:
    """
    Check the state for contradictions.

    Args:
      state     : state to check
      conflicts : messages already collected while folding (pin conflicts)

    Returns:
      (ok, errors) where errors lists every violated rule.
    """
    errors: List[str] = []

    for pos in sorted(state.misplaced):
        for ch in sorted(state.misplaced[pos]):
            if ch in state.absent:
                errors.append(f"Misplaced letter `{ch}` has been found in absent letters")

    total = len(state.misplaced_letters())
    if total > WORD_LEN:
        errors.append(f"Too many unique misplaced letters: {total}")

    for pos in sorted(state.correct):
        ch = state.correct[pos]
        if ch in state.absent:
            errors.append(f"Correct letter `{ch}` has been found in absent letters")
        if ch in state.misplaced.get(pos, ()):
            errors.append(f"Letter `{ch}` is both correct and misplaced at position {pos}")

    errors.extend(conflicts)
    return (not errors, errors)


def aggregate(attempts: Iterable[Attempt]) -> ConstraintState:
    """
    Fold all attempts (in input order) into a validated ConstraintState.

    The first attempt to pin a position wins; a later attempt pinning a
    different letter there is reported as a contradiction.

    Raises:
      ValidationError with the full list of problems.
    """
    correct: Dict[int, str] = {}
    misplaced: Dict[int, Set[str]] = {}
    absent: Set[str] = set()
    conflicts: List[str] = []

    for attempt in attempts:
        for pos, letter in enumerate(attempt):
            if letter.color is Color.CORRECT:
                pinned = correct.setdefault(pos, letter.char)
                if pinned != letter.char:
                    pair = "`, `".join(sorted((pinned, letter.char)))
                    msg = f"Correct letters `{pair}` are both pinned at position {pos}"
                    if msg not in conflicts:
                        conflicts.append(msg)
            elif letter.color is Color.PRESENT:
                misplaced.setdefault(pos, set()).add(letter.char)
            else:
                absent.add(letter.char)

    state = ConstraintState(
        correct=MappingProxyType(correct),
        misplaced=MappingProxyType({p: frozenset(cs) for p, cs in misplaced.items()}),
        absent=frozenset(absent),
    )

    ok, errors = validate(state, conflicts)
    if not ok:
        raise ValidationError(errors)
    return state
