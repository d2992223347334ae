import string


def splice(s, i, c):
    """
    replace letter in string at position i, strings being immutable
    aka: s[i] = c
    """
    return s[:i] + c + s[i + 1:]

def is_word(text, wordlen):
    """
    True if text is exactly wordlen lowercase ascii letters
    """
    return len(text) == wordlen and all(c in string.ascii_lowercase for c in text)

class dotdict(dict):
    """click options as attributes, eg. args.wordlen"""
    __getattr__ = lambda self, key: self[key]
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__
