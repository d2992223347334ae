import random

import pytest

from wordle_engine import GameSession, WordList

WORDS = [
    'crane',
    'plane',
    'shale',
    'cloud',
    'fight',
    'bumpy',
    'storm',
    'geese',
]

@pytest.fixture
def words():
    return list(WORDS)

@pytest.fixture
def dictionary(words):
    return WordList(words)

@pytest.fixture
def session(dictionary):
    """
    a session playing 'crane'
    """
    session = GameSession(dictionary, rng=random.Random(1234))
    assert session.start(word='crane') is None
    return session

@pytest.fixture
def dictfile(tmp_path, words):
    path = tmp_path / 'words.txt'
    path.write_text('\n'.join(words) + '\n')
    return path

