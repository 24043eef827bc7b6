"""
Error types raised by the engine.

Both kinds are caller input errors: the engine never recovers from them,
it hands them back to the CLI / web shell which decides how to render them.
"""

from __future__ import annotations
from typing import Iterable, List


class GuessGameError(ValueError):
    """Base class for everything the engine rejects."""


class FormatError(GuessGameError):
    """An encoded attempt string could not be decoded into five letters."""


class ValidationError(GuessGameError):
    """
    The aggregated feedback contradicts itself.

    `errors` holds every violated rule, not just the first one found.
    """

    def __init__(self, errors: Iterable[str]):
        self.errors: List[str] = list(errors)
        super().__init__("; ".join(self.errors))
