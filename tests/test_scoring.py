from collections import Counter

import pytest
from punjabi_wordle.config import WORD_LIST
from punjabi_wordle.engine.scoring import evaluate, evaluate_units, pattern_string
from punjabi_wordle.engine.segmenter import base_letters, segment_units
from punjabi_wordle.models.game import Verdict

A, P, C = Verdict.ABSENT, Verdict.PRESENT, Verdict.CORRECT


@pytest.mark.parametrize("target,guess,expected", [
    ("ਪਰਮਾਤਮਾ", "ਪਰਮਾਤਮਾ", "GGGGG"),
    ("ਪਰਮਾਤਮਾ", "ਹਰਿਮੰਦਰ", "----Y"),
    ("ਅੰਮ੍ਰਿਤਸਰ", "ਹਰਿਮੰਦਰ", "----G"),
    ("ਗੁਰਦੁਆਰਾ", "ਰਾਆਦੁਰਗੁ", "YYGYY"),
    ("ਸਰਪ੍ਰਸਤ", "ਸਸਸਸਸ", "G--G-"),      # no more credit than copies in the target
    ("ਅੰਮ੍ਰਿਤਸਰ", "ਮ੍ਰਅੰਤਸਰ", "-YGGG"),    # conjunct without its matra is a different unit
])
def test_evaluate_strict(target, guess, expected):
    assert pattern_string(evaluate(target, guess)) == expected


@pytest.mark.parametrize("target,guess,expected", [
    ("ਪਰਮਾਤਮਾ", "ਪਰਮਾਤਮਾ", "GGGGG"),
    ("ਪਰਮਾਤਮਾ", "ਹਰਿਮੰਦਰ", "-YY--"),
    ("ਗੁਰਦੁਆਰਾ", "ਰਾਆਦੁਰਗੁ", "YYGYY"),
    ("ਅੰਮ੍ਰਿਤਸਰ", "ਮ੍ਰਅੰਤਸਰ", "YYGGG"),
])
def test_evaluate_relaxed(target, guess, expected):
    assert pattern_string(evaluate(target, guess, relaxed=True)) == expected


def test_relaxed_claims_leftmost_unconsumed_slot():
    # ਰਾ matches ਰ (slot 1) by base letter before the exact ਰਾ at slot 4
    target = ["ਗੁ", "ਰ", "ਦੁ", "ਆ", "ਰਾ"]
    guess = ["ਰਾ", "ਕ", "ਕ", "ਕ", "ਰ"]
    assert evaluate_units(target, guess, relaxed=True) == [P, A, A, A, P]
    assert evaluate_units(target, guess) == [P, A, A, A, P]


def test_exact_match_is_never_downgraded_by_an_earlier_present():
    target = ["ਕ", "ਖ", "ਗ", "ਘ", "ਕ"]
    guess = ["ਖ", "ਕ", "ਕ", "ਕ", "ਕ"]
    assert evaluate_units(target, guess) == [P, P, A, A, C]


def test_first_pass_compares_full_units_even_when_relaxed():
    assert evaluate_units(["ਮਾ"], ["ਮਿ"], relaxed=True) == [P]
    assert evaluate_units(["ਮਾ"], ["ਮਿ"]) == [A]


def test_pattern_string():
    assert pattern_string([C, P, A]) == "GY-"
    assert pattern_string([]) == ""


@pytest.mark.parametrize("relaxed", [False, True])
def test_properties_over_word_list(relaxed):
    words = WORD_LIST[:12]
    key = base_letters if relaxed else (lambda unit: unit)
    for target in words:
        target_units = segment_units(target)
        assert evaluate(target, target, relaxed) == [C] * 5
        for guess in words:
            guess_units = segment_units(guess)
            verdicts = evaluate(target, guess, relaxed)
            assert len(verdicts) == 5

            for i, verdict in enumerate(verdicts):
                assert (verdict is C) == (guess_units[i] == target_units[i])

            credited = sum(1 for v in verdicts if v is not A)
            overlap = Counter(map(key, target_units)) & Counter(map(key, guess_units))
            assert credited <= sum(overlap.values())
