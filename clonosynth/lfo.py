"""Low-frequency oscillator with one-shot and sample-and-hold modes."""

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar


class Waveform(IntEnum):
    SQUARE = 0
    TRIANGLE = 1
    SAWTOOTH = 2
    SAMPLE_HOLD = 3


def _random_bipolar() -> float:
    return (random.random() - 0.5) * 2.0


@dataclass
class LFO:
    """Phase-accumulating LFO producing values in [-1, 1]."""

    MIN_FREQ: ClassVar[float] = 0.01
    MAX_FREQ: ClassVar[float] = 20.0
    MIN_ACTIVE_FREQ: ClassVar[float] = 0.001

    phase: float = 0.0
    freq: float = 1.0
    one_shot: bool = False
    triggered: bool = False
    active: bool = True
    sample_and_hold: bool = False
    sample_hold_value: float = 0.0
    last_phase: float = 0.0

    def set_rate(self, rate: float) -> None:
        self.freq = min(max(rate, self.MIN_FREQ), self.MAX_FREQ)
        self.active = self.freq > self.MIN_ACTIVE_FREQ

    def set_one_shot(self, one_shot: bool) -> None:
        self.one_shot = one_shot
        if one_shot and not self.triggered:
            self.phase = 0.0

    def set_sample_and_hold(self, enabled: bool) -> None:
        self.sample_and_hold = enabled
        if enabled:
            self.sample_hold_value = _random_bipolar()

    def trigger(self) -> None:
        """Restart a one-shot cycle; no effect in free-running mode."""
        if self.one_shot:
            self.phase = 0.0
            self.triggered = True

    def process(self, sample_time: float, waveform: Waveform = Waveform.SQUARE) -> float:
        if not self.active or (self.one_shot and not self.triggered):
            return 0.0

        self.phase += self.freq * sample_time

        if self.one_shot and self.phase >= 0.5:
            self.triggered = False
            return 0.0

        if self.phase >= 1.0:
            self.phase -= 1.0
            if self.one_shot:
                self.triggered = False

        waveform = Waveform(waveform)
        if self.sample_and_hold or waveform is Waveform.SAMPLE_HOLD:
            if self.phase < self.last_phase:
                self.sample_hold_value = _random_bipolar()
            output = self.sample_hold_value
        elif waveform is Waveform.SQUARE:
            output = 1.0 if self.phase < 0.5 else -1.0
        elif waveform is Waveform.TRIANGLE:
            if self.phase < 0.5:
                output = 4.0 * self.phase - 1.0
            else:
                output = 3.0 - 4.0 * self.phase
        else:
            output = 2.0 * self.phase - 1.0

        self.last_phase = self.phase
        return output