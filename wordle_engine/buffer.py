from . import WORD_LENGTH
from .errors import Rejection


class GuessBuffer:
    """
    the row the player is currently typing into

    `letters` always has wordlen slots, the first `column` of them filled.
    `row` is the number of guesses already submitted. This is the only place
    the in progress word lives, `word` is assembled from it on demand.
    """

    def __init__(self, wordlen=WORD_LENGTH):
        self.wordlen = wordlen
        self.row = 0
        self.clear()

    def clear(self):
        self.letters = [None] * self.wordlen
        self.column = 0

    def reset(self):
        self.row = 0
        self.clear()

    @property
    def full(self):
        return self.column == self.wordlen

    @property
    def empty(self):
        return self.column == 0

    @property
    def word(self):
        return ''.join(self.letters[:self.column])

    def type_letter(self, c):
        if self.full:
            return Rejection.BUFFER_FULL

        self.letters[self.column] = c
        self.column += 1

    def delete_letter(self):
        if self.empty:
            return Rejection.BUFFER_EMPTY

        self.column -= 1
        self.letters[self.column] = None

    def advance(self):
        """
        move on to the next row after a guess was accepted
        """
        self.row += 1
        self.clear()

    def __repr__(self):
        cells = ''.join(c or '.' for c in self.letters)
        return f"{self.__class__.__name__}(row={self.row}, column={self.column}, {cells!r})"
