import pytest

from wordle_engine import GuessBuffer, Rejection


def test_new_buffer():
    buffer = GuessBuffer()
    assert buffer.row == 0
    assert buffer.column == 0
    assert buffer.letters == [None] * 5
    assert buffer.empty
    assert not buffer.full
    assert buffer.word == ''

@pytest.mark.parametrize('column', range(5))
def test_type_then_delete_restores(column):
    buffer = GuessBuffer()
    for c in 'crane'[:column]:
        buffer.type_letter(c)

    before = (buffer.column, list(buffer.letters))

    assert buffer.type_letter('x') is None
    assert buffer.column == column + 1
    assert buffer.delete_letter() is None

    assert (buffer.column, buffer.letters) == before

def test_typing_past_the_end():
    buffer = GuessBuffer()
    for c in 'crane':
        assert buffer.type_letter(c) is None

    assert buffer.type_letter('s') == Rejection.BUFFER_FULL
    assert buffer.column == 5
    assert buffer.word == 'crane'
    assert buffer.full

def test_delete_from_empty():
    buffer = GuessBuffer()
    assert buffer.delete_letter() == Rejection.BUFFER_EMPTY
    assert buffer.column == 0

def test_word_is_typed_prefix():
    buffer = GuessBuffer()
    for c in 'cra':
        buffer.type_letter(c)
    assert buffer.word == 'cra'
    assert buffer.letters == ['c', 'r', 'a', None, None]

def test_advance_and_reset():
    buffer = GuessBuffer()
    for c in 'crane':
        buffer.type_letter(c)

    buffer.advance()
    assert buffer.row == 1
    assert buffer.empty
    assert buffer.letters == [None] * 5

    buffer.type_letter('p')
    buffer.reset()
    assert buffer.row == 0
    assert buffer.empty

def test_other_lengths():
    buffer = GuessBuffer(wordlen=3)
    for c in 'cat':
        buffer.type_letter(c)
    assert buffer.full
    assert buffer.type_letter('s') == Rejection.BUFFER_FULL
