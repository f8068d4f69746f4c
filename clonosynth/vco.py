"""Audio-rate oscillator with square, triangle and band-limited saw outputs."""

from dataclasses import dataclass
from typing import ClassVar

FREQ_C4 = 261.6256
"""Frequency of middle C in Hz; a pitch of 0 V maps to this."""


@dataclass
class VCO:
    """Single-phase oscillator driven by a 1 V/octave pitch."""

    DC_BLOCKER_ALPHA: ClassVar[float] = 0.995

    phase: float = 0.0
    freq: float = 440.0
    pulse_width: float = 0.5
    last_saw: float = 0.0
    last_pulse: float = 0.0
    active: bool = True
    anti_alias_cutoff: float = 0.0
    dc_blocker_y: float = 0.0
    dc_blocker_x: float = 0.0

    def initialize(self) -> None:
        """Configure the anti-alias filter for an 8 kHz cutoff at 48 kHz."""
        self.anti_alias_cutoff = 8000.0 / 48000.0

    def set_pitch(self, pitch: float) -> None:
        """Set pitch in volts relative to C4; sub-1 Hz frequencies mute the VCO."""
        self.freq = FREQ_C4 * 2.0 ** pitch
        self.active = self.freq > 1.0

    def set_pulse_width(self, pw: float) -> None:
        self.pulse_width = min(max(pw, 0.01), 0.99)

    @staticmethod
    def polyblep(t: float, dt: float) -> float:
        """Polynomial band-limited step correction around a discontinuity."""
        if t < dt:
            t /= dt
            return t + t - t * t - 1.0
        if t > 1.0 - dt:
            t = (t - 1.0) / dt
            return t * t + t + t + 1.0
        return 0.0

    def _advance(self, dt: float) -> None:
        self.phase += dt
        if self.phase >= 1.0:
            self.phase -= 1.0

    def _dc_block(self, sample: float) -> float:
        y = sample - self.dc_blocker_x + self.DC_BLOCKER_ALPHA * self.dc_blocker_y
        self.dc_blocker_x = sample
        self.dc_blocker_y = y
        return y

    def process_saw(self, sample_time: float) -> float:
        """Next sawtooth sample; an inactive VCO holds its last saw value."""
        if not self.active:
            return self.last_saw
        dt = self.freq * sample_time
        self._advance(dt)
        saw = 2.0 * self.phase - 1.0
        saw -= self.polyblep(self.phase, dt)
        self.last_saw = self._dc_block(saw)
        return self.last_saw

    def process_triangle(self, sample_time: float) -> float:
        if not self.active:
            return 0.0
        self._advance(self.freq * sample_time)
        if self.phase < 0.5:
            triangle = 4.0 * self.phase - 1.0
        else:
            triangle = 3.0 - 4.0 * self.phase
        triangle += 0.05 * triangle ** 3
        return self._dc_block(triangle)

    def process_square(self, sample_time: float) -> float:
        if not self.active:
            return 0.0
        self._advance(self.freq * sample_time)
        phase = self.phase
        square = 1.0 if phase < 0.5 else -1.0

        transition = 0.005
        if 0.5 - transition < phase < 0.5 + transition:
            t = (phase - (0.5 - transition)) / (2.0 * transition)
            square = 1.0 - 2.0 * t
        elif phase < transition:
            t = phase / transition
            square = -1.0 + 2.0 * t
        elif phase > 1.0 - transition:
            t = (phase - (1.0 - transition)) / transition
            square = 1.0 - 2.0 * t

        return self._dc_block(square)