import pathlib
import string

dictfile = pathlib.Path(__file__).parent / 'words5.txt'

WORD_LENGTH = 5
MAX_ROWS    = 6
ALPHABET    = string.ascii_lowercase


from .errors import WordleError, DictionaryError, IllegalTransition, Rejection
from .dictionary import WordList, FileDictionary, read_dict
from .scoring import CellResult, score_guess, key_statuses
from .buffer import GuessBuffer
from .machine import Phase, PhaseMachine
from .session import GameSession, Snapshot, Row
from .events import LetterKey, DeleteKey, SubmitKey, AcceptResultClick, dispatch
