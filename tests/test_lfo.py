import pytest

from clonosynth.lfo import LFO, Waveform


@pytest.mark.parametrize("rate, expected", [(0.0, LFO.MIN_FREQ), (100.0, LFO.MAX_FREQ), (5.0, 5.0)])
def test_set_rate_clamps(rate, expected):
    lfo = LFO()
    lfo.set_rate(rate)
    assert lfo.freq == expected
    assert lfo.active is True


def test_inactive_outputs_zero():
    lfo = LFO(active=False)
    assert lfo.process(0.1, Waveform.SAWTOOTH) == 0.0


def test_square_first_half_high_second_half_low():
    lfo = LFO()
    outs = [lfo.process(0.1, Waveform.SQUARE) for _ in range(9)]
    assert outs[:4] == [1.0] * 4
    assert outs[5:] == [-1.0] * 4


def test_sawtooth_rises_within_cycle():
    lfo = LFO()
    outs = [lfo.process(0.05, Waveform.SAWTOOTH) for _ in range(15)]
    assert all(a < b for a, b in zip(outs, outs[1:]))
    assert all(-1.0 <= o <= 1.0 for o in outs)


def test_triangle_bounded_and_peaks_mid_cycle():
    lfo = LFO()
    outs = [lfo.process(0.01, Waveform.TRIANGLE) for _ in range(99)]
    assert all(-1.0 <= o <= 1.0 for o in outs)
    assert max(outs) == pytest.approx(outs[49], abs=0.05)


def test_accepts_int_waveform():
    a, b = LFO(), LFO()
    assert a.process(0.2, 2) == b.process(0.2, Waveform.SAWTOOTH)


def test_one_shot_silent_until_triggered():
    lfo = LFO()
    lfo.set_one_shot(True)
    assert lfo.process(0.1) == 0.0


def test_one_shot_stops_after_half_cycle():
    lfo = LFO()
    lfo.set_one_shot(True)
    lfo.trigger()
    first = lfo.process(0.1, Waveform.SAWTOOTH)
    assert first != 0.0
    outs = [lfo.process(0.1, Waveform.SAWTOOTH) for _ in range(6)]
    assert lfo.triggered is False
    assert outs[-1] == 0.0


def test_trigger_ignored_when_free_running():
    lfo = LFO(phase=0.3)
    lfo.trigger()
    assert lfo.phase == 0.3 and lfo.triggered is False


def test_set_one_shot_resets_phase():
    lfo = LFO(phase=0.4)
    lfo.set_one_shot(True)
    assert lfo.phase == 0.0


def test_sample_and_hold_holds_within_cycle():
    lfo = LFO()
    lfo.set_sample_and_hold(True)
    outs = [lfo.process(0.1) for _ in range(9)]
    assert len(set(outs)) == 1
    assert -1.0 <= outs[0] <= 1.0