"""
Feedback codec: encoded attempt string <-> five (color, letter) pairs.

Canonical encoding (the only one accepted):
  - fixed two characters per slot, `<marker><letter>`, exactly 5 slots
  - markers:
      '^' or 'g' : absent            (gray)
      '?' or 'w' : present elsewhere (white)
      '=' or 'y' : correct           (yellow)

Example:
  "^a?n=g?l=e" -> a absent, n elsewhere, g at slot 2, l elsewhere, e at slot 4

The compact variable-length form ("=ямн=д=а", bare letters meaning absent)
is NOT accepted; it fails the length check with FormatError rather than
being guessed at.
"""

from __future__ import annotations
from enum import Enum
from typing import Iterable, List, NamedTuple, Sequence, Tuple

from .errors import FormatError

WORD_LEN = 5


class Color(Enum):
    ABSENT = "^"
    PRESENT = "?"
    CORRECT = "="


class Letter(NamedTuple):
    color: Color
    char: str


# One guess and its feedback; index == word position.
Attempt = Tuple[Letter, ...]

MARKERS = {
    "^": Color.ABSENT, "g": Color.ABSENT,
    "?": Color.PRESENT, "w": Color.PRESENT,
    "=": Color.CORRECT, "y": Color.CORRECT,
}


def parse(encoded: str) -> Attempt:
    """
    Decode one attempt string.

    Raises:
      FormatError if the string is not exactly 5 `<marker><letter>` slots,
      uses an unknown marker, or carries a non-alphabetic letter.
    """
    if not isinstance(encoded, str):
        raise FormatError(f"Attempt must be a string, got {type(encoded).__name__}")

    s = encoded.strip()
    if len(s) != 2 * WORD_LEN:
        raise FormatError(
            f"String of length {2 * WORD_LEN} is expected, but {len(s)} given: {encoded!r}")

    letters: List[Letter] = []
    for i in range(0, len(s), 2):
        marker, ch = s[i], s[i + 1]
        color = MARKERS.get(marker)
        if color is None:
            raise FormatError(f"Unknown marker {marker!r} at slot {i // 2}: {encoded!r}")
        if not ch.isalpha():
            raise FormatError(f"Letter expected at slot {i // 2}, got {ch!r}: {encoded!r}")
        letters.append(Letter(color, ch.lower()))

    return tuple(letters)


def parse_many(encoded: Iterable[str]) -> List[Attempt]:
    """Decode a list of attempt strings (first bad one raises)."""
    return [parse(e) for e in encoded]


def format_attempt(guess: str, colors: Sequence[Color]) -> str:
    """
    Encode a guess plus its colors back into the canonical string.

    format_attempt("angle", [ABSENT, PRESENT, CORRECT, PRESENT, CORRECT])
      -> "^a?n=g?l=e"
    """
    guess = guess.strip().lower()
    if len(guess) != WORD_LEN or len(colors) != WORD_LEN:
        raise FormatError(f"Need {WORD_LEN} letters and {WORD_LEN} colors, got "
                          f"{len(guess)} and {len(colors)}")
    return "".join(c.value + ch for c, ch in zip(colors, guess))
