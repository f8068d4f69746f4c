"""Linear ADSR envelope generator."""

from dataclasses import dataclass
from enum import Enum, auto


class Stage(Enum):
    ATTACK = auto()
    DECAY = auto()
    SUSTAIN = auto()
    RELEASE = auto()
    OFF = auto()


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


@dataclass
class Envelope:
    """Linear-segment ADSR; times are in seconds, sustain is a level."""

    stage: Stage = Stage.OFF
    value: float = 0.0
    attack: float = 0.1
    decay: float = 0.1
    sustain: float = 0.7
    release: float = 0.5

    def set_attack(self, attack: float) -> None:
        self.attack = _clamp(attack, 0.001, 10.0)

    def set_decay(self, decay: float) -> None:
        self.decay = _clamp(decay, 0.001, 10.0)

    def set_sustain(self, sustain: float) -> None:
        self.sustain = _clamp(sustain, 0.0, 1.0)

    def set_release(self, release: float) -> None:
        self.release = _clamp(release, 0.001, 10.0)

    def trigger(self) -> None:
        self.stage = Stage.ATTACK

    def gate_off(self) -> None:
        if self.stage is not Stage.OFF:
            self.stage = Stage.RELEASE

    def process(self, sample_time: float) -> float:
        """Advance one sample and return the current level."""
        if self.stage is Stage.ATTACK:
            self.value += sample_time / self.attack
            if self.value >= 1.0:
                self.value = 1.0
                self.stage = Stage.DECAY
        elif self.stage is Stage.DECAY:
            self.value -= sample_time / self.decay
            if self.value <= self.sustain:
                self.value = self.sustain
                self.stage = Stage.SUSTAIN
        elif self.stage is Stage.SUSTAIN:
            self.value = self.sustain
        elif self.stage is Stage.RELEASE:
            self.value -= sample_time / self.release
            if self.value <= 0.0:
                self.value = 0.0
                self.stage = Stage.OFF
        else:
            self.value = 0.0
        return self.value