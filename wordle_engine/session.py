"""
the game session

A GameSession owns everything about one game: the secret word, the guesses
submitted so far, the row being typed and the win streak. Hosts drive it by
calling its operations as input arrives and redraw from `snapshot()`, either
after each call or by connecting to `session.signals.snapshot`.

Operations never raise for bad input. Each returns None when it took effect,
otherwise the Rejection explaining why nothing happened.
"""

import random
import logging
import dataclasses
import types
from typing import Mapping, Optional, Tuple

from blinker import Signal

from . import WORD_LENGTH, MAX_ROWS, ALPHABET
from .errors import Rejection
from .buffer import GuessBuffer
from .dictionary import WordList
from .machine import Phase, PhaseMachine
from .scoring import CellResult, score_guess, key_statuses, is_win

logger = logging.getLogger(__name__)

# rejections the player should hear about, the rest are quietly ignored
VISIBLE = frozenset([
    Rejection.NOT_READY,
    Rejection.WORD_NOT_IN_DICTIONARY,
])


@dataclasses.dataclass(frozen=True)
class Row:
    letters: Tuple[Optional[str], ...]
    results: Optional[Tuple[CellResult, ...]] = None

    @property
    def word(self):
        return ''.join(c for c in self.letters if c)

    @property
    def scored(self):
        return self.results is not None


@dataclasses.dataclass(frozen=True)
class Snapshot:
    """
    a read only picture of a session for the presentation layer

    rows:       always max_rows of them, submitted rows carry their results
    keys:       every letter of the alphabet, None if it hasn't lit up yet
    rejection:  the last visible rejection, cleared by the next accepted input
    answer:     only filled in once the round is won or lost
    """
    phase: Phase
    rows: Tuple[Row, ...]
    keys: Mapping[str, Optional[CellResult]]
    win_streak: int
    row: int
    column: int
    rejection: Optional[Rejection] = None
    answer: Optional[str] = None

    @property
    def guesses(self):
        return [row.word for row in self.rows if row.scored]


class SessionSignals:

    def __init__(self):
        self.snapshot = Signal(doc='sent with snapshot= after every change')
        self.phase    = Signal(doc='sent with old= and new= on every phase change')
        self.rejected = Signal(doc='sent with reason= when the player should be told no')


class GameSession:

    def __init__(self, dictionary=None, wordlen=WORD_LENGTH, max_rows=MAX_ROWS, rng=None, strict=False):
        if wordlen < 1 or max_rows < 1:
            raise ValueError(f"need at least one letter and one row: {wordlen=} {max_rows=}")

        self.dictionary = dictionary
        self.wordlen    = wordlen
        self.max_rows   = max_rows
        self.rng        = rng or random.Random()
        self.strict     = strict

        self.signals    = SessionSignals()
        self.machine    = PhaseMachine(on_change=self._phase_changed)
        self.buffer     = GuessBuffer(wordlen)
        self.win_streak = 0
        self.rejection  = None

        self._words  = ()
        self._lookup = frozenset()
        self._reset_round()

    def _reset_round(self):
        self.secret  = None
        self.guesses = []   # submitted words
        self.results = []   # CellResults for each submitted word
        self.keys    = {}
        self.buffer.reset()

    @property
    def phase(self):
        return self.machine.phase

    @property
    def words(self):
        """
        the dictionary words this round is being played with
        """
        return self._words

    def _phase_changed(self, old, new):
        logger.info(f"{old.value} -> {new.value}")
        self.signals.phase.send(self, old=old, new=new)

    def _changed(self):
        self.rejection = None
        self.emit()

    def _reject(self, reason):
        if reason in VISIBLE:
            logger.info(f"rejected: {reason}")
            self.rejection = reason
            self.signals.rejected.send(self, reason=reason)
            self.emit()
        else:
            logger.debug(f"ignored: {reason}")

        return reason

    def emit(self):
        self.signals.snapshot.send(self, snapshot=self.snapshot())

    def _read_words(self, dictionary):
        if dictionary is None:
            return ()

        if not hasattr(dictionary, 'words'):
            dictionary = WordList(dictionary, self.wordlen)

        return tuple(w for w in dictionary.words() if len(w) == self.wordlen)

    def start(self, dictionary=None, word=None):
        """
        pick a secret word and start playing

        `dictionary` replaces the one given to the constructor and is kept
        for later rounds. Pass `word` to force the secret word, it still has
        to be in the dictionary.
        """
        if not self.machine.allows('start'):
            return self._reject(Rejection.ILLEGAL_PHASE)

        if dictionary is not None:
            self.dictionary = dictionary

        words = self._read_words(self.dictionary)

        if not words:
            # the provider may still be loading, try again later
            return self._reject(Rejection.NOT_READY)

        lookup = frozenset(words)

        if word is not None:
            word = word.lower()
            if word not in lookup:
                return self._reject(Rejection.WORD_NOT_IN_DICTIONARY)
        else:
            word = self.rng.choice(words)

        self._words  = words
        self._lookup = lookup
        self._reset_round()
        self.secret = word

        logger.debug(f"secret word picked from {len(words)} words")
        self.machine.transition(Phase.PLAYING)
        self._changed()

    def handle_letter(self, c):
        if not self.machine.allows('handle_letter'):
            return self._reject(Rejection.ILLEGAL_PHASE)

        if not isinstance(c, str) or len(c) != 1 or c.lower() not in ALPHABET:
            return self._reject(Rejection.INVALID_LETTER)

        if reason := self.buffer.type_letter(c.lower()):
            return self._reject(reason)

        self._changed()

    def handle_delete(self):
        if not self.machine.allows('handle_delete'):
            return self._reject(Rejection.ILLEGAL_PHASE)

        if reason := self.buffer.delete_letter():
            return self._reject(reason)

        self._changed()

    def validate_guess(self, word):
        if len(word) != self.wordlen:
            return Rejection.BUFFER_NOT_FULL

        if word not in self._lookup:
            return Rejection.WORD_NOT_IN_DICTIONARY

        return None

    def submit(self):
        """
        submit the current row

        A complete row that isn't a dictionary word is left as it is so the
        player can fix it.
        """
        if not self.machine.allows('submit'):
            return self._reject(Rejection.ILLEGAL_PHASE)

        guess = self.buffer.word

        if reason := self.validate_guess(guess):
            return self._reject(reason)

        self.guesses.append(guess)
        self.results.append(score_guess(self.secret, guess, strict=self.strict))
        self.buffer.advance()

        logger.debug(f"guess {len(self.guesses)}/{self.max_rows}: {guess}")
        self.machine.transition(Phase.SCORING)
        self._changed()

    def acknowledge_scoring(self):
        """
        light up the keyboard and decide whether the round is over
        """
        if not self.machine.allows('acknowledge_scoring'):
            return self._reject(Rejection.ILLEGAL_PHASE)

        self.keys = key_statuses(self.secret, self.guesses[-1:], previous=self.keys)

        if is_win(self.results[-1]):
            self.machine.transition(Phase.WON)
        elif len(self.guesses) >= self.max_rows:
            self.machine.transition(Phase.LOST)
        else:
            self.machine.transition(Phase.PLAYING)

        self._changed()

    def accept_result(self):
        """
        the player has seen the result, get ready for another round
        """
        if not self.machine.allows('accept_result'):
            return self._reject(Rejection.ILLEGAL_PHASE)

        if self.phase == Phase.WON:
            self.win_streak += 1
        else:
            self.win_streak = 0

        logger.info(f"win streak: {self.win_streak}")

        self._reset_round()
        self.machine.transition(Phase.INITIALIZING)
        self._changed()

    def snapshot(self):
        rows = []

        for i in range(self.max_rows):
            if i < len(self.guesses):
                rows.append(Row(tuple(self.guesses[i]), self.results[i]))
            elif i == self.buffer.row:
                rows.append(Row(tuple(self.buffer.letters)))
            else:
                rows.append(Row((None,) * self.wordlen))

        keys = {c: self.keys.get(c) for c in ALPHABET}

        return Snapshot(
            phase=self.phase,
            rows=tuple(rows),
            keys=types.MappingProxyType(keys),
            win_streak=self.win_streak,
            row=self.buffer.row,
            column=self.buffer.column,
            rejection=self.rejection,
            answer=self.secret if self.phase.resolved else None,
        )

    def __repr__(self):
        return f"{self.__class__.__name__}({self.phase.value}, row={self.buffer.row}, streak={self.win_streak})"
