import enum


class WordleError(Exception):
    pass

class DictionaryError(WordleError):
    """
    the dictionary file is missing or contains no usable words
    """

class IllegalTransition(WordleError):
    """
    a phase change that is not an edge of the phase graph
    """

    def __init__(self, old, new):
        super().__init__(f"illegal phase transition: {old.value} -> {new.value}")
        self.old = old
        self.new = new


class Rejection(enum.Enum):
    """
    why an operation was not applied

    None of these are raised, a session operation returns one of them (or
    None when the operation took effect) and the caller decides whether the
    player needs to know about it.
    """

    NOT_READY              = 'dictionary not ready'
    BUFFER_FULL            = 'row is full'
    BUFFER_EMPTY           = 'row is empty'
    BUFFER_NOT_FULL        = 'row is not complete'
    WORD_NOT_IN_DICTIONARY = 'word not in dictionary'
    ILLEGAL_PHASE          = 'not allowed right now'
    INVALID_LETTER         = 'not a letter'

    def __str__(self):
        return self.value
