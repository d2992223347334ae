import enum

from .utils import splice


class CellResult(enum.Enum):

    CORRECT = 'correct' # exact spot
    PRESENT = 'present' # in word but wrong spot
    ABSENT  = 'absent'  # not in word

    @property
    def rank(self):
        return _RANK[self]

_RANK = {
    CellResult.ABSENT:  0,
    CellResult.PRESENT: 1,
    CellResult.CORRECT: 2,
}


def score_guess(secret, guess, strict=False):
    """
    return a CellResult for every letter of guess

    By default each position is scored on its own: CORRECT if the letters
    match, PRESENT if the guessed letter appears anywhere in secret, otherwise
    ABSENT. So guessing 'geese' against 'crane' marks all three e's PRESENT.

    With strict=True every letter of secret can only be matched once, exact
    spots first, the way the official game does it.
    """
    if len(secret) != len(guess):
        raise ValueError(f"guess {guess!r} is not the same length as the word")

    if strict:
        return _score_strict(secret, guess)

    resp = []

    for i in range(len(secret)):
        if guess[i] == secret[i]:
            resp.append(CellResult.CORRECT)
        elif guess[i] in secret:
            resp.append(CellResult.PRESENT)
        else:
            resp.append(CellResult.ABSENT)

    return tuple(resp)

def _score_strict(word, guess):
    resp = [None] * len(word)

    # consumed letters of word are replaced with '.'
    for i in range(len(word)):
        if guess[i] == word[i]:
            resp[i] = CellResult.CORRECT
            word = splice(word, i, '.')

    for i in range(len(word)):
        if resp[i] is not None:
            continue

        if guess[i] in word:
            resp[i] = CellResult.PRESENT
            word = splice(word, word.index(guess[i]), '.')
        else:
            resp[i] = CellResult.ABSENT

    assert None not in resp, f"invalid response generated: {resp=}"
    return tuple(resp)


def key_statuses(secret, guesses, previous=None):
    """
    best status seen for every guessed letter

    A letter is CORRECT once it has been guessed in its exact spot, PRESENT if
    it has been guessed and is somewhere in secret. Letters that are not in
    secret are left out, an unset key is simply untouched on the keyboard.

    `previous` is an earlier result for the same secret, nothing in it is ever
    downgraded.
    """
    statuses = dict(previous or {})

    def promote(letter, status):
        current = statuses.get(letter)
        if current is None or status.rank > current.rank:
            statuses[letter] = status

    for guess in guesses:
        for i, c in enumerate(guess):
            if i < len(secret) and secret[i] == c:
                promote(c, CellResult.CORRECT)
            elif c in secret:
                promote(c, CellResult.PRESENT)

    return statuses

def is_win(results):
    return bool(results) and all(r is CellResult.CORRECT for r in results)
