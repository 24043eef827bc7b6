from collections import Counter

import pytest
from guessgame.engine import Color, format_attempt


def _game_colors(guess, answer):
    """
    Colors the game shows for `guess` against `answer` (two passes:
    exact matches first, then elsewhere-matches capped by leftover counts).
    """
    guess, answer = guess.lower(), answer.lower()
    colors = [Color.ABSENT] * len(guess)
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            colors[i] = Color.CORRECT
        else:
            remaining[a] += 1
    for i, g in enumerate(guess):
        if colors[i] is not Color.CORRECT and remaining[g] > 0:
            colors[i] = Color.PRESENT
            remaining[g] -= 1
    return tuple(colors)


@pytest.fixture
def game_colors():
    return _game_colors


@pytest.fixture
def attempts_for():
    """Encoded attempts a player would type after `guesses` against `answer`."""
    def _make(answer, guesses):
        return [format_attempt(g, _game_colors(g, answer)) for g in guesses]
    return _make
