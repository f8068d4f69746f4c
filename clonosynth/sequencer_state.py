"""Minimal step/drum state machine for an eight-step pattern."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar


class Drum(Enum):
    SYNTH = auto()
    BASS_DRUM = auto()
    SNARE = auto()
    HI_HAT = auto()
    NONE = auto()


@dataclass
class StepState:
    active: bool = False
    triggered: bool = False
    drum: Drum = Drum.NONE


class SequencerState:
    """Tracks which steps are active, triggered and which drum they carry."""

    NUM_STEPS: ClassVar[int] = 8

    def __init__(self) -> None:
        self._current_step = 0
        self._steps = [StepState() for _ in range(self.NUM_STEPS)]

    def reset(self) -> None:
        self._current_step = 0
        self._steps = [StepState() for _ in range(self.NUM_STEPS)]

    def advance(self) -> None:
        """Move to the next step; only the new step, if active, is triggered."""
        self._current_step = (self._current_step + 1) % self.NUM_STEPS
        for step in self._steps:
            step.triggered = False
        current = self._steps[self._current_step]
        if current.active:
            current.triggered = True

    def trigger_drum(self, drum: Drum) -> None:
        current = self._steps[self._current_step]
        if current.active:
            current.drum = drum
            current.triggered = True

    def set_step_active(self, step: int, active: bool) -> None:
        if 0 <= step < self.NUM_STEPS:
            self._steps[step].active = active

    def set_drum_for_step(self, step: int, drum: Drum) -> None:
        if 0 <= step < self.NUM_STEPS:
            self._steps[step].drum = drum

    def current_step(self) -> int:
        return self._current_step

    def step_state(self, step: int) -> StepState:
        if not 0 <= step < self.NUM_STEPS:
            raise IndexError(f"step {step} out of range")
        return self._steps[step]