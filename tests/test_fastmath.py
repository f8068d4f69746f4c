import math

import pytest

from clonosynth.fastmath import fast_cos, fast_exp, fast_sin, fast_tanh


def test_fast_sin_zero():
    assert fast_sin(0.0) == 0.0


@pytest.mark.parametrize("x", [0.1, 0.5, 1.0, 1.3, math.pi / 2])
def test_fast_sin_odd(x):
    assert fast_sin(-x) == pytest.approx(-fast_sin(x))


@pytest.mark.parametrize("x", [-1.5, -0.7, 0.0, 0.4, 1.2, math.pi / 2])
def test_fast_sin_close_to_sine_in_main_range(x):
    assert fast_sin(x) == pytest.approx(math.sin(x), abs=0.01)


@pytest.mark.parametrize("x", [0.3, -1.0, 1.4])
def test_fast_sin_is_periodic(x):
    assert fast_sin(x + 4 * math.pi) == pytest.approx(fast_sin(x), abs=1e-9)


@pytest.mark.parametrize("x", [-1.2, 0.0, 0.9])
def test_fast_cos_is_shifted_sine(x):
    assert fast_cos(x) == pytest.approx(fast_sin(x + math.pi / 2))


def test_fast_tanh_saturates():
    assert fast_tanh(10.0) == pytest.approx(1.0)
    assert fast_tanh(-10.0) == pytest.approx(-1.0)
    assert fast_tanh(10.0) == fast_tanh(3.0)


@pytest.mark.parametrize("x", [-2.0, -0.5, 0.0, 0.25, 1.5])
def test_fast_tanh_tracks_tanh(x):
    assert fast_tanh(x) == pytest.approx(math.tanh(x), abs=0.03)


def test_fast_tanh_monotonic():
    xs = [i / 10 for i in range(-40, 41)]
    ys = [fast_tanh(x) for x in xs]
    assert all(a <= b for a, b in zip(ys, ys[1:]))


def test_fast_exp_at_zero():
    assert fast_exp(0.0) == 1.0


def test_fast_exp_increasing():
    assert fast_exp(0.2) < fast_exp(0.5) < fast_exp(0.9)