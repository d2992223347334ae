"""
input events a presentation layer feeds to a session

Hosts translate whatever their raw input is (key codes, button clicks, taps)
into these and hand them to `dispatch` one at a time, in the order they
happened.
"""

import dataclasses
import logging

from .machine import Phase

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class LetterKey:
    char: str

@dataclasses.dataclass(frozen=True)
class DeleteKey:
    pass

@dataclasses.dataclass(frozen=True)
class SubmitKey:
    pass

@dataclasses.dataclass(frozen=True)
class AcceptResultClick:
    pass


def dispatch(session, event):
    """
    apply event to session, returns whatever the session operation returned

    An accepted guess is scored straight away and accepting a result starts
    the next round with the same dictionary.
    """
    logger.debug(f"event: {event}")

    if isinstance(event, LetterKey):
        return session.handle_letter(event.char)

    if isinstance(event, DeleteKey):
        return session.handle_delete()

    if isinstance(event, SubmitKey):
        if reason := session.submit():
            return reason
        return session.acknowledge_scoring()

    if isinstance(event, AcceptResultClick):
        # a round that never started (dictionary wasn't ready) just retries
        if session.phase == Phase.INITIALIZING:
            return session.start()
        if reason := session.accept_result():
            return reason
        return session.start()

    raise TypeError(f"unknown event: {event!r}")
