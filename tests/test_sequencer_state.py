import pytest

from clonosynth.sequencer_state import Drum, SequencerState


def test_initial_state_is_empty():
    sm = SequencerState()
    for step in range(SequencerState.NUM_STEPS):
        state = sm.step_state(step)
        assert not state.active and not state.triggered
        assert state.drum is Drum.NONE


def test_advance_wraps_and_triggers_only_active():
    sm = SequencerState()
    sm.set_step_active(1, True)
    sm.advance()
    assert sm.step_state(1).triggered
    sm.advance()
    assert not sm.step_state(1).triggered
    assert not sm.step_state(2).triggered
    for _ in range(SequencerState.NUM_STEPS - 2):
        sm.advance()
    assert sm.current_step() == 0


def test_trigger_drum_on_inactive_step_does_nothing():
    sm = SequencerState()
    sm.trigger_drum(Drum.SNARE)
    assert sm.step_state(0).drum is Drum.NONE
    assert not sm.step_state(0).triggered


def test_out_of_range_setters_ignored():
    sm = SequencerState()
    sm.set_step_active(8, True)
    sm.set_drum_for_step(-1, Drum.SNARE)
    assert all(not sm.step_state(i).active for i in range(SequencerState.NUM_STEPS))
    assert all(sm.step_state(i).drum is Drum.NONE for i in range(SequencerState.NUM_STEPS))


def test_step_state_out_of_range_raises():
    with pytest.raises(IndexError):
        SequencerState().step_state(8)


def test_reset_clears_everything():
    sm = SequencerState()
    sm.set_step_active(0, True)
    sm.set_drum_for_step(0, Drum.SNARE)
    sm.advance()
    sm.reset()
    assert sm.current_step() == 0
    assert not sm.step_state(0).active
    assert sm.step_state(0).drum is Drum.NONE