"""Cheap polynomial approximations of transcendental functions used by the voices."""

import math

PI = math.pi
_TWO_PI = 2.0 * PI


def fast_sin(x: float) -> float:
    """Approximate sine: wrap into [-pi, pi], then a fifth-order polynomial."""
    while x > PI:
        x -= _TWO_PI
    while x < -PI:
        x += _TWO_PI
    x2 = x * x
    return x * (1.0 - x2 * (1.0 / 6.0 - x2 / 120.0))


def fast_cos(x: float) -> float:
    """Approximate cosine as a phase-shifted :func:`fast_sin`."""
    return fast_sin(x + PI * 0.5)


def fast_tanh(x: float) -> float:
    """Rational tanh approximation, saturating at |x| = 3."""
    x = min(max(x, -3.0), 3.0)
    x2 = x * x
    return x * (27.0 + x2) / (27.0 + 9.0 * x2)


def fast_exp(x: float) -> float:
    """Rough exponential curve used for envelope shaping."""
    return 1.0 / (1.0 - x * 0.99)