import enum
import logging

from .errors import IllegalTransition

logger = logging.getLogger(__name__)


class Phase(enum.Enum):

    INITIALIZING = 'initializing'
    PLAYING      = 'playing'
    SCORING      = 'scoring'
    WON          = 'won'
    LOST         = 'lost'

    @property
    def resolved(self):
        return self in (Phase.WON, Phase.LOST)


# checking for a win happens on the way out of SCORING, it never waits
TRANSITIONS = {
    Phase.INITIALIZING: {Phase.PLAYING},
    Phase.PLAYING:      {Phase.SCORING},
    Phase.SCORING:      {Phase.PLAYING, Phase.WON, Phase.LOST},
    Phase.WON:          {Phase.INITIALIZING},
    Phase.LOST:         {Phase.INITIALIZING},
}

# the phase each session operation is allowed in
OPERATIONS = {
    'start':               {Phase.INITIALIZING},
    'handle_letter':       {Phase.PLAYING},
    'handle_delete':       {Phase.PLAYING},
    'submit':              {Phase.PLAYING},
    'acknowledge_scoring': {Phase.SCORING},
    'accept_result':       {Phase.WON, Phase.LOST},
}


class PhaseMachine:

    def __init__(self, on_change=None):
        self.phase = Phase.INITIALIZING
        self.on_change = on_change

    def allows(self, operation):
        return self.phase in OPERATIONS[operation]

    def can_enter(self, phase):
        return phase in TRANSITIONS[self.phase]

    def transition(self, phase):
        if not self.can_enter(phase):
            raise IllegalTransition(self.phase, phase)

        old, self.phase = self.phase, phase
        logger.debug(f"phase: {old.value} -> {phase.value}")

        if self.on_change:
            self.on_change(old, phase)

        return phase

    def __repr__(self):
        return f"{self.__class__.__name__}({self.phase.value})"
