import pytest

from clonosynth.envelope import Envelope, Stage


def _run_until(env, stage, sample_time, limit=100000):
    for _ in range(limit):
        env.process(sample_time)
        if env.stage is stage:
            return
    raise AssertionError(f"never reached {stage}")


def test_starts_off_and_silent():
    env = Envelope()
    assert env.stage is Stage.OFF
    assert env.process(0.01) == 0.0


@pytest.mark.parametrize(
    "setter, attr, value, expected",
    [
        ("set_attack", "attack", 0.0, 0.001),
        ("set_attack", "attack", 50.0, 10.0),
        ("set_decay", "decay", -1.0, 0.001),
        ("set_sustain", "sustain", 2.0, 1.0),
        ("set_sustain", "sustain", -0.5, 0.0),
        ("set_release", "release", 20.0, 10.0),
        ("set_release", "release", 0.25, 0.25),
    ],
)
def test_setters_clamp(setter, attr, value, expected):
    env = Envelope()
    getattr(env, setter)(value)
    assert getattr(env, attr) == expected


def test_attack_peaks_at_one_then_decays():
    env = Envelope()
    env.trigger()
    _run_until(env, Stage.DECAY, 0.001)
    assert env.value == 1.0


def test_decay_settles_on_sustain():
    env = Envelope()
    env.set_sustain(0.4)
    env.trigger()
    _run_until(env, Stage.SUSTAIN, 0.001)
    assert env.value == 0.4
    assert env.process(0.001) == 0.4


def test_attack_rises_monotonically():
    env = Envelope()
    env.trigger()
    values = [env.process(0.001) for _ in range(50)]
    assert all(a < b for a, b in zip(values, values[1:]))


def test_release_reaches_off():
    env = Envelope()
    env.trigger()
    _run_until(env, Stage.SUSTAIN, 0.001)
    env.gate_off()
    assert env.stage is Stage.RELEASE
    _run_until(env, Stage.OFF, 0.001)
    assert env.value == 0.0


def test_gate_off_when_off_stays_off():
    env = Envelope()
    env.gate_off()
    assert env.stage is Stage.OFF