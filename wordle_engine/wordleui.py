import pathlib
import random
import logging

import click

from . import dictfile, WORD_LENGTH, MAX_ROWS
from .dictionary import FileDictionary
from .errors import DictionaryError
from .events import LetterKey, DeleteKey, SubmitKey, AcceptResultClick, dispatch
from .machine import Phase
from .scoring import CellResult
from .session import GameSession
from .utils import dotdict

from rich.console import Console
print = Console(color_system='truecolor', highlight=False).print

logger = logging.getLogger(__name__)

EMOJI = {
    CellResult.PRESENT: '🟨',
    CellResult.ABSENT:  '⬜',
    CellResult.CORRECT: '🟩',
}

KEYBOARD = ['qwertyuiop', 'asdfghjkl', 'zxcvbnm']

QUIT_KEYS   = ('', '\x03', '\x04', '\x1b')  # eof, ctrl-c, ctrl-d, esc
DELETE_KEYS = ('\x7f', '\x08')
SUBMIT_KEYS = ('\r', '\n')


def summary(snapshot):
    """
    the shareable emoji grid of the submitted rows
    """
    return '\n'.join(
        ''.join(EMOJI[r] for r in row.results)
        for row in snapshot.rows if row.scored
    )

def translate_key(key, phase):
    """
    turn a raw keystroke into an input event, None for keys we don't use
    """
    if phase.resolved:
        if key in ('y', 'Y') + SUBMIT_KEYS:
            return AcceptResultClick()
        return None

    if key in DELETE_KEYS:
        return DeleteKey()

    if key in SUBMIT_KEYS:
        return SubmitKey()

    if len(key) == 1 and key.isalpha():
        return LetterKey(key)

    return None


class WordleUI:

    @classmethod
    def colorize(cls, result, text):
        """
        colorize text using rich color tags
        result: a CellResult, None leaves the text alone
        """
        if result is None:
            return text

        if result == CellResult.PRESENT:
            color = 'bold dark_goldenrod'
        elif result == CellResult.ABSENT:
            color = 'grey50'
        elif result == CellResult.CORRECT:
            color = 'bold green'
        else:
            raise RuntimeError(f"unknown result: {result}")

        return f"[{color}]{text}[/{color}]"

    def __init__(self, args):
        args = dotdict(args)

        self.args       = args
        self.dictionary = FileDictionary(args.dict, args.wordlen)
        self.session    = GameSession(
            self.dictionary,
            wordlen=args.wordlen,
            max_rows=args.rows,
            rng=random.Random(args.seed),
            strict=args.strict,
        )

    def render_row(self, row):
        cells = []

        for i, c in enumerate(row.letters):
            result = row.results[i] if row.scored else None
            cells.append(WordleUI.colorize(result, (c or '_').upper()))

        return ' '.join(cells)

    def render_keyboard(self, keys):
        return '\n'.join(
            ' ' * i + ' '.join(WordleUI.colorize(keys[c], c) for c in line)
            for i, line in enumerate(KEYBOARD)
        )

    def show(self, snapshot):
        print()
        for row in snapshot.rows:
            print(self.render_row(row))
        print()
        print(self.render_keyboard(snapshot.keys))

        if snapshot.rejection:
            print(f"[bold red]{snapshot.rejection}[/bold red]")

        if snapshot.phase == Phase.WON:
            # the streak only moves once the result is accepted
            print(f"[bold green]You got it in {len(snapshot.guesses)} tries![/bold green] streak: {self.session.win_streak + 1}")
            print(summary(snapshot))
            print("play again? (y/n)")
        elif snapshot.phase == Phase.LOST:
            print(f"[bold yellow]You ran out of tries. The word was: [blue]{snapshot.answer}[/blue][/bold yellow]")
            print(summary(snapshot))
            print("play again? (y/n)")

    def play(self):
        self.dictionary.load()

        if reason := self.session.start(word=self.args.start_word):
            raise click.BadParameter(f"{self.args.start_word}: {reason}", param_hint='START_WORD')

        if self.args.start_word:
            print(f"using given word: {self.args.start_word}")
        else:
            print("I picked a word, what's your guess?")

        self.show(self.session.snapshot())

        while True:
            key = click.getchar()
            logger.debug(f"key: {key!r}")

            if key in QUIT_KEYS:
                return

            snapshot = self.session.snapshot()

            if snapshot.phase.resolved and key in ('n', 'N'):
                return

            event = translate_key(key, snapshot.phase)
            if event is None:
                continue

            reason = dispatch(self.session, event)

            # typing past the end of a row etc. changes nothing worth redrawing
            if reason and reason is not self.session.rejection:
                continue

            self.show(self.session.snapshot())


@click.command()
@click.option('--dict', default=dictfile, type=click.Path(exists=True, readable=True, path_type=pathlib.Path))
@click.option('--len', 'wordlen', default=WORD_LENGTH, type=click.IntRange(min=1))
@click.option('--rows', default=MAX_ROWS, type=click.IntRange(min=1), help="number of guesses allowed")
@click.option('--strict', is_flag=True, help="only count each letter of the word once")
@click.option('--seed', type=int, help="seed the word picker")
@click.option('--verbose', '-v', is_flag=True)
@click.argument('start_word', required=False)
@click.pass_context
def cli(ctx, *_, **args):
    """
    play a game of wordle

    provide a START_WORD to force a specific one (useful for testing) or
    omit and a random word from the dictionary file will be chosen.

    \b
    a-z       type a letter
    backspace delete a letter
    enter     submit the row
    esc       quit
    """
    logging.basicConfig(format="%(message)s", level=logging.DEBUG if args['verbose'] else logging.WARNING)

    try:
        ui = WordleUI(args)
        ui.play()
    except DictionaryError as e:
        raise click.ClickException(str(e))
    except (KeyboardInterrupt, EOFError):
        pass
