"""Resonant two-pole low-pass filter with soft-saturating feedback."""

import math
from dataclasses import dataclass

from .fastmath import fast_cos, fast_sin, fast_tanh


@dataclass
class VCF:
    """Low-pass filter; cutoff in Hz, resonance in [0, 4]."""

    cutoff: float = 1000.0
    resonance: float = 0.5
    state1: float = 0.0
    state2: float = 0.0
    active: bool = True

    def set_cutoff(self, freq: float) -> None:
        self.cutoff = min(max(freq, 20.0), 20000.0)

    def set_resonance(self, res: float) -> None:
        self.resonance = min(max(res, 0.0), 4.0)

    def reset(self) -> None:
        self.state1 = 0.0
        self.state2 = 0.0

    def process(self, signal: float, sample_rate: float) -> float:
        """Filter one sample; an inactive filter passes the signal through."""
        if not self.active:
            return signal

        omega = 2.0 * math.pi * self.cutoff / sample_rate
        cos_omega = fast_cos(omega)
        sin_omega = fast_sin(omega)

        feedback = self.resonance * 0.9
        signal -= fast_tanh(feedback * self.state1) * 0.7

        alpha = sin_omega / (2.0 * (1.0 + feedback * 0.1))

        b0 = (1.0 - cos_omega) / 2.0
        b1 = 1.0 - cos_omega
        b2 = b0
        a0 = 1.0 + alpha
        a1 = -2.0 * cos_omega
        a2 = 1.0 - alpha

        output = (
            b0 * signal + b1 * self.state1 + b2 * self.state2
            - a1 * self.state1 - a2 * self.state2
        ) / a0
        output = fast_tanh(output * 1.2) * 0.8

        self.state2 = self.state1
        self.state1 = signal
        return output