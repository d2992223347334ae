import itertools

import pytest

from wordle_engine.scoring import CellResult, score_guess, key_statuses, is_win

C = CellResult.CORRECT
P = CellResult.PRESENT
A = CellResult.ABSENT


@pytest.mark.parametrize('word', ['crane', 'geese', 'robot'])
def test_exact_guess_is_all_correct(word):
    assert score_guess(word, word) == (C,) * 5
    assert score_guess(word, word, strict=True) == (C,) * 5

def test_no_common_letters_is_all_absent():
    assert score_guess('crane', 'bumpy') == (A,) * 5

def test_mixed_response():
    assert score_guess('crane', 'plane') == (A, A, C, C, C)
    assert score_guess('crane', 'nacre') == (P, P, P, P, C)

def test_repeated_letters_all_present():
    # every e in the guess lights up even though crane has only one
    assert score_guess('crane', 'geese') == (A, P, P, A, C)

def test_strict_consumes_letters_once():
    assert score_guess('crane', 'geese', strict=True) == (A, A, A, A, C)
    assert score_guess('robot', 'floor', strict=True) == (A, A, P, C, P)

def test_length_mismatch():
    with pytest.raises(ValueError):
        score_guess('crane', 'cranes')

def test_is_win():
    assert is_win(score_guess('crane', 'crane'))
    assert not is_win(score_guess('crane', 'plane'))
    assert not is_win(())


def test_key_statuses():
    keys = key_statuses('crane', ['plane'])
    assert keys == {'a': C, 'n': C, 'e': C}

    keys = key_statuses('crane', ['plane', 'nerds'])
    assert keys == {'a': C, 'n': C, 'e': C, 'r': P}

def test_key_statuses_absent_letters_unset():
    assert key_statuses('crane', ['bumpy']) == {}

def test_key_statuses_never_downgraded():
    previous = key_statuses('crane', ['plane'])
    keys = key_statuses('crane', ['nerds'], previous=previous)

    # n and e were only PRESENT in nerds
    assert keys['n'] == C
    assert keys['e'] == C
    assert keys['r'] == P

    # previous isn't modified
    assert 'r' not in previous

@pytest.mark.parametrize('guesses', list(itertools.permutations(['plane', 'nerds', 'crane', 'acorn'])))
def test_correct_keys_stay_correct(guesses):
    keys = {}
    seen = set()

    for guess in guesses:
        keys = key_statuses('crane', [guess], previous=keys)

        for letter in seen:
            assert keys[letter] == C

        seen |= {c for c, s in keys.items() if s == C}
