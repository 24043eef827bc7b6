import pytest
from guessgame.engine import (
    ConstraintState, aggregate, filter_candidates, guess_word, matches, parse_many,
)

WORDS = [
    "crane", "raise", "stare", "trace", "cared", "racer", "scoop", "apple",
    "angle", "table", "level", "slate", "adieu", "pluck", "wordy", "nymph",
    "fjord", "waltz", "tenet", "eagle",
]

# Guesses with five distinct letters never produce self-contradictory feedback.
GUESSES = ["crane", "slate", "pluck", "wordy", "raise"]


def test_example_absent_letter_excludes_everything():
    # a absent, n elsewhere, g pinned at 2, l elsewhere, e pinned at 4
    assert guess_word(["^a?n=g?l=e"], ["apple", "angle", "table"]) == []


def test_each_check_rejects():
    state = aggregate(parse_many(["^x?n=g?l=e"]))
    assert matches(state, "nlgae") is True
    assert matches(state, "xlgne") is False    # absent x
    assert matches(state, "lunge") is False    # g not at slot 2
    assert matches(state, "angle") is False    # n at its excluded slot
    assert matches(state, "lagke") is False    # n missing


def test_pinned_slot_skips_exclusion():
    state = ConstraintState(correct={0: "a"},
                            misplaced={0: frozenset({"a"}), 1: frozenset({"b"})})
    assert matches(state, "acbde") is True
    assert matches(state, "abcde") is False    # b at its excluded slot
    assert matches(state, "acdef") is False    # b missing


def test_wrong_length_never_matches():
    state = aggregate([])
    assert matches(state, "crane") is True
    assert matches(state, "cranes") is False


def test_cyrillic_scenario():
    words = ["ябеда", "ягода", "ямщик", "дверь"]
    assert guess_word(["=я^м^н=д=а"], words) == ["ябеда", "ягода"]


@pytest.mark.parametrize("answer", ["stare", "level", "nymph", "tenet", "fjord", "eagle"])
def test_answer_always_survives(attempts_for, answer):
    for k in range(1, len(GUESSES) + 1):
        found = guess_word(attempts_for(answer, GUESSES[:k]), WORDS)
        assert answer in found


@pytest.mark.parametrize("answer", ["stare", "level", "table"])
def test_filter_properties(attempts_for, answer):
    state = aggregate(parse_many(attempts_for(answer, GUESSES[:3])))
    found = filter_candidates(WORDS, state)

    # order preserved, subset of the dictionary
    assert found == [w for w in WORDS if w in found]
    # idempotent
    assert filter_candidates(found, state) == found

    for w in found:
        assert not set(w) & state.absent
        assert all(w[p] == c for p, c in state.correct.items())
        for p, chars in state.misplaced.items():
            assert w[p] not in chars
        assert state.misplaced_letters() <= set(w)


def test_attempt_order_does_not_matter(attempts_for):
    attempts = attempts_for("stare", ["crane", "slate", "wordy"])
    forward = filter_candidates(WORDS, aggregate(parse_many(attempts)))
    backward = filter_candidates(WORDS, aggregate(parse_many(reversed(attempts))))
    assert forward == backward


def test_filter_leaves_dictionary_untouched():
    words = tuple(WORDS)
    filter_candidates(words, aggregate(parse_many(["^c^r^a^n^e"])))
    assert words == tuple(WORDS)


def test_duplicate_letters_count_once():
    # One misplaced 'e' only has to appear somewhere off slot 0.
    state = aggregate(parse_many(["?e^x^q^z^j"]))
    assert filter_candidates(["eagle", "tenet", "level", "crane"], state) == ["tenet", "level", "crane"]
