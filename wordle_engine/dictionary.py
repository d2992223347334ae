"""
dictionary providers

The engine only ever asks a provider for `words()`, an ordered sequence of
fixed length lowercase words. An empty sequence means "not ready yet" and a
session will refuse to start until the provider has something to offer.
"""

import pathlib
import logging

from blinker import Signal

from . import WORD_LENGTH
from .errors import DictionaryError
from .utils import is_word

logger = logging.getLogger(__name__)


def read_dict(dictpath, wordlen=WORD_LENGTH):
    """
    read a newline delimited word file and keep the usable words in file order
    """
    dictpath = pathlib.Path(dictpath)

    try:
        dictionary = dictpath.read_text(encoding='utf-8').splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryError(f"can't read dictionary file: {dictpath}: {e}") from e

    logger.debug(f"dictionary file contains {len(dictionary)} lines")

    words = filter_words(dictionary, wordlen)

    logger.debug(f"our word list contains {len(words)}, {wordlen} letter words")
    return words

def filter_words(lines, wordlen):
    # dict keeps insertion order so this drops duplicates without reordering
    words = dict()

    for word in lines:
        word = word.strip()

        if all([
            len(word) == wordlen,       # 5 letters long
            is_word(word, wordlen),     # no capitals, digits or apostrophes
        ]):
            words[word] = None

    return tuple(words)


class WordList:
    """
    an in memory dictionary, ready as soon as it has a word in it
    """

    def __init__(self, words, wordlen=WORD_LENGTH):
        self.wordlen = wordlen
        self._words = filter_words(words, wordlen)
        self._lookup = frozenset(self._words)

    def words(self):
        return self._words

    @property
    def ready(self):
        return bool(self._words)

    def __contains__(self, word):
        return word in self._lookup

    def __len__(self):
        return len(self._words)

    def __repr__(self):
        return f"{self.__class__.__name__}({len(self)} words)"


class FileDictionary(WordList):
    """
    a dictionary backed by a word file

    Nothing is read until `load()` is called so a host can load it whenever
    suits it (eg. from a worker thread) and start a session once `loaded`
    fires. Until then `words()` is empty and the provider is not ready.
    """

    def __init__(self, dictpath, wordlen=WORD_LENGTH):
        super().__init__((), wordlen)
        self.dictpath = pathlib.Path(dictpath)
        self.loaded = Signal(doc='sent with words= once the file has been read')

    def load(self):
        words = read_dict(self.dictpath, self.wordlen)

        if not words:
            raise DictionaryError(f"our dictionary is empty after reading file: {self.dictpath}")

        self._words = words
        self._lookup = frozenset(words)

        logger.info(f"loaded {len(words)} words from {self.dictpath}")
        self.loaded.send(self, words=words)
        return self

    def __repr__(self):
        return f"{self.__class__.__name__}({str(self.dictpath)!r}, {len(self)} words)"
