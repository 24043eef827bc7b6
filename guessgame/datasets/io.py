from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Tuple

# Bundled dictionary shipped with the package.
DEFAULT_WORDS_PATH = Path(__file__).parent / "data" / "words_5.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def normalize_words(lines: Iterable[str], N: int = 5) -> Tuple[str, ...]:
    """
    Clean raw words into a dictionary: stripped and lowercased.

    Entries that are blank, not alphabetic, or not exactly N letters are
    dropped; repeated words keep their first position. The result is an
    immutable tuple so it can be shared across requests.
    """
    out: List[str] = []
    seen = set()
    for ln in lines:
        w = ln.strip().lower()
        if len(w) != N or not w.isalpha() or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return tuple(out)


def load_words(p: Path | str = DEFAULT_WORDS_PATH, N: int = 5) -> Tuple[str, ...]:
    """Load a dictionary file, one word per line (see normalize_words)."""
    return normalize_words(read_lines(p), N)
