import pytest

from wordle_engine.errors import IllegalTransition
from wordle_engine.machine import Phase, PhaseMachine, TRANSITIONS


def test_initial_phase():
    assert PhaseMachine().phase == Phase.INITIALIZING

def test_round_trip():
    machine = PhaseMachine()
    for phase in [Phase.PLAYING, Phase.SCORING, Phase.PLAYING, Phase.SCORING, Phase.WON, Phase.INITIALIZING]:
        assert machine.transition(phase) == phase
        assert machine.phase == phase

@pytest.mark.parametrize('old,new', [
    (Phase.INITIALIZING, Phase.SCORING),
    (Phase.INITIALIZING, Phase.WON),
    (Phase.PLAYING, Phase.WON),
    (Phase.PLAYING, Phase.LOST),
    (Phase.SCORING, Phase.INITIALIZING),
    (Phase.WON, Phase.PLAYING),
    (Phase.LOST, Phase.LOST),
])
def test_illegal_transitions(old, new):
    machine = PhaseMachine()
    machine.phase = old

    with pytest.raises(IllegalTransition) as e:
        machine.transition(new)

    assert e.value.old == old
    assert e.value.new == new
    assert machine.phase == old

def test_every_phase_has_a_way_out():
    assert set(TRANSITIONS) == set(Phase)
    assert all(TRANSITIONS.values())

def test_allows():
    machine = PhaseMachine()
    assert machine.allows('start')
    assert not machine.allows('handle_letter')

    machine.transition(Phase.PLAYING)
    assert machine.allows('handle_letter')
    assert machine.allows('submit')
    assert not machine.allows('start')

def test_on_change():
    changes = []
    machine = PhaseMachine(on_change=lambda old, new: changes.append((old, new)))
    machine.transition(Phase.PLAYING)
    assert changes == [(Phase.INITIALIZING, Phase.PLAYING)]

def test_resolved():
    assert Phase.WON.resolved
    assert Phase.LOST.resolved
    assert not Phase.SCORING.resolved
