"""Synthesised drum voices: kick, hi-hat and snare."""

import random
from dataclasses import dataclass
from typing import ClassVar

from .fastmath import PI, fast_sin, fast_tanh
from .noise import NoiseGenerator

_TWO_PI = 2.0 * PI


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


@dataclass
class KickDrum:
    """Sine kick with a falling pitch envelope, sub octave and click."""

    phase: float = 0.0
    envelope: float = 0.0
    triggered: bool = False

    def trigger(self) -> None:
        self.phase = 0.0
        self.envelope = 1.0
        self.triggered = True

    def process(self, sample_time: float) -> float:
        if not self.triggered:
            return 0.0

        pitch_env = self.envelope ** 3 * 45.0 + 35.0
        self.phase += pitch_env * sample_time * _TWO_PI
        if self.phase >= _TWO_PI:
            self.phase -= _TWO_PI

        sine = fast_sin(self.phase)
        sub_sine = fast_sin(self.phase * 0.5) * 0.4
        click = (self.envelope - 0.9) * 10.0 if self.envelope > 0.9 else 0.0

        self.envelope -= sample_time * 2.5
        if self.envelope <= 0.0:
            self.envelope = 0.0
            self.triggered = False

        return (sine + sub_sine + click * 0.2) * self.envelope * self.envelope * 4.0


@dataclass
class HiHat:
    """Short burst of noise mixed with a high tone."""

    phase: float = 0.0
    envelope: float = 0.0
    noise_state: float = 12345.0
    triggered: bool = False

    def trigger(self) -> None:
        self.envelope = 1.0
        self.triggered = True
        self.phase = 0.0
        self.noise_state = float(random.getrandbits(32))

    def process(self, sample_time: float, noise: NoiseGenerator) -> float:
        if not self.triggered:
            return 0.0

        noise_value = noise.process()
        tone = fast_sin(self.phase * _TWO_PI) * 0.7
        self.phase += 8000.0 * sample_time
        if self.phase >= 1.0:
            self.phase -= 1.0

        self.envelope -= sample_time * 10.0
        if self.envelope <= 0.0:
            self.envelope = 0.0
            self.triggered = False

        output = (tone + noise_value * 0.5) * self.envelope
        return fast_tanh(output * 2.0)


@dataclass
class SnareDrum:
    """Snare built from a resonant body tone, buzz, crack and metallic noise."""

    BODY_CUTOFF: ClassVar[float] = 0.15
    BUZZ_CUTOFF: ClassVar[float] = 0.6
    CRACK_CUTOFF: ClassVar[float] = 0.85
    BODY_FREQ: ClassVar[float] = 200.0
    HARMONIC_FREQ: ClassVar[float] = 285.0
    BODY_RESONANCE: ClassVar[float] = 2.5
    OUTPUT_GAIN: ClassVar[float] = 4.2

    tone_phase1: float = 0.0
    tone_phase2: float = 0.0
    noise_state: float = 12345.0
    envelope: float = 0.0
    tone_env: float = 0.0
    buzz_env: float = 0.0
    triggered: bool = False

    body_filter1: float = 0.0
    body_filter2: float = 0.0
    buzz_filter1: float = 0.0
    buzz_filter2: float = 0.0
    crack_filter1: float = 0.0
    crack_filter2: float = 0.0
    noise_filter: float = 0.0

    def trigger(self) -> None:
        self.envelope = 1.0
        self.tone_env = 1.0
        self.buzz_env = 1.0
        self.triggered = True
        self.tone_phase1 = 0.0
        self.tone_phase2 = 0.0
        self.noise_state = float(random.getrandbits(32))

    def process(self, sample_time: float, noise: NoiseGenerator) -> float:
        if not self.triggered:
            return 0.0

        noise_value = noise.process()

        self.noise_filter = self.noise_filter * 0.92 + noise_value * 0.08
        colored_noise = noise_value - self.noise_filter

        freq1 = self.BODY_FREQ * (1.0 + self.tone_env * self.tone_env * 0.8)
        freq2 = self.HARMONIC_FREQ * (1.0 + self.tone_env * 0.4)

        self.tone_phase1 += freq1 * sample_time * _TWO_PI
        if self.tone_phase1 >= _TWO_PI:
            self.tone_phase1 -= _TWO_PI
        self.tone_phase2 += freq2 * sample_time * _TWO_PI
        if self.tone_phase2 >= _TWO_PI:
            self.tone_phase2 -= _TWO_PI

        tone1 = fast_sin(self.tone_phase1)
        tone2 = fast_sin(self.tone_phase2) * 0.7

        body_input = tone1 + tone2
        self.body_filter1 += (body_input - self.body_filter1) * self.BODY_CUTOFF
        self.body_filter2 += (self.body_filter1 - self.body_filter2) * self.BODY_CUTOFF
        body_tone = body_input + (self.body_filter1 - self.body_filter2) * self.BODY_RESONANCE

        self.buzz_filter1 += (colored_noise - self.buzz_filter1) * self.BUZZ_CUTOFF
        self.buzz_filter2 += (self.buzz_filter1 - self.buzz_filter2) * self.BUZZ_CUTOFF
        buzz_noise = self.buzz_filter1 - self.buzz_filter2 * 0.5

        self.crack_filter1 += (noise_value - self.crack_filter1) * self.CRACK_CUTOFF
        self.crack_filter2 += (self.crack_filter1 - self.crack_filter2) * self.CRACK_CUTOFF
        crack_noise = self.crack_filter1 - self.crack_filter2 * 0.3

        metallic_noise = fast_tanh(noise_value ** 3 * 3.0)

        self.tone_env -= sample_time * 6.0
        self.buzz_env -= sample_time * 4.0
        self.envelope -= sample_time * 8.0

        if self.envelope <= 0.0:
            self.envelope = 0.0
            self.tone_env = 0.0
            self.buzz_env = 0.0
            self.triggered = False

        self.tone_env = _clamp(self.tone_env, 0.0, 1.0)
        self.buzz_env = _clamp(self.buzz_env, 0.0, 1.0)

        body = body_tone * self.tone_env * self.tone_env * 0.4
        buzz = buzz_noise * self.buzz_env * 0.8
        crack = crack_noise * self.envelope * self.envelope * 0.3
        metallic = metallic_noise * self.envelope * 0.2
        output = body + buzz + crack + metallic

        output = fast_tanh(output * 1.8) * 0.7
        return output * self.OUTPUT_GAIN