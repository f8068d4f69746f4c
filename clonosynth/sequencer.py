"""Step sequencer with note recording and continuous (flux) recording."""

from dataclasses import dataclass, field
from typing import ClassVar

from .triggers import SchmittTrigger


@dataclass
class Step:
    active: bool = True
    pitch: float = 0.0
    gate: float = 0.0
    gate_time: float = 0.5


@dataclass
class SequencerOutput:
    pitch: float = 0.0
    gate: float = 0.0
    step_changed: bool = False
    step: int = 0


@dataclass
class Sequencer:
    """8- or 16-step sequencer clocked internally or by an external sync."""

    MAX_STEPS: ClassVar[int] = 16
    DEFAULT_STEPS: ClassVar[int] = 8
    FLUX_BUFFER_SIZE: ClassVar[int] = 1600

    steps: list[Step] = field(default_factory=lambda: [Step() for _ in range(16)])
    flux_buffer: list[float] = field(default_factory=lambda: [0.0] * 1600)

    current_step: int = 0
    flux_recording_step: int = 0
    flux_sample_count: int = 0
    recording_step: int = 0
    flux_step_timer: float = 0.0
    last_recorded_pitch: float = 0.0
    step_duration: float = 0.25
    step_timer: float = 0.0
    external_sync: bool = False
    flux_mode: bool = False
    playing: bool = False
    recording: bool = False
    sixteen_step_mode: bool = False

    gate_trigger: SchmittTrigger = field(default_factory=SchmittTrigger)
    sync_trigger: SchmittTrigger = field(default_factory=SchmittTrigger)

    def set_tempo(self, bpm: float) -> None:
        """Set tempo in BPM; each step is a sixteenth note."""
        self.step_duration = 60.0 / (bpm * 4.0)

    def step_count(self) -> int:
        return 16 if self.sixteen_step_mode else 8

    def step_index(self, button_step: int, is_sub_step: bool = False) -> int:
        """Map a step button to a step; in 16-step mode sub-steps are odd."""
        if not self.sixteen_step_mode:
            return button_step
        return button_step * 2 + (1 if is_sub_step else 0)

    def _in_range(self, step: int) -> bool:
        return 0 <= step < self.step_count()

    def set_step_active(self, step: int, active: bool) -> None:
        if self._in_range(step):
            self.steps[step].active = active

    def is_step_active(self, step: int) -> bool:
        return self._in_range(step) and self.steps[step].active

    def set_step_gate_time(self, step: int, gate_time: float) -> None:
        if self._in_range(step):
            self.steps[step].gate_time = min(max(gate_time, 0.1), 1.0)

    def step_gate_time(self, step: int) -> float:
        if self._in_range(step):
            return self.steps[step].gate_time
        return 0.5

    def play(self) -> None:
        self.playing = True
        self.current_step = 0
        self.step_timer = 0.0

    def stop(self) -> None:
        self.playing = False
        self.current_step = 0
        self.step_timer = 0.0

    def start_recording(self) -> None:
        self.recording = True
        self.recording_step = 0
        if self.flux_mode:
            self.flux_sample_count = 0
            self.flux_recording_step = 0
            self.flux_step_timer = 0.0

    def stop_recording(self) -> None:
        self.recording = False

    def _write_step(self, step: int, pitch: float, gate: float, gate_time: float) -> None:
        target = self.steps[step]
        target.pitch = pitch
        target.gate = gate
        target.gate_time = gate_time
        target.active = True

    def record_note(self, pitch: float, gate: float, gate_time: float = 0.5) -> None:
        """Record into the playing step, or the recording step when stopped."""
        if self.recording and not self.flux_mode:
            target = self.current_step if self.playing else self.recording_step
            if self._in_range(target):
                self._write_step(target, pitch, gate, gate_time)

    def record_note_to_step(
        self, step: int, pitch: float, gate: float, gate_time: float = 0.5
    ) -> None:
        if self.recording and not self.flux_mode and self._in_range(step):
            self._write_step(step, pitch, gate, gate_time)

    def record_flux(self, pitch: float) -> None:
        """Record a continuous pitch sample while in flux mode."""
        if not (self.recording and self.flux_mode):
            return
        if self.playing:
            index = self.current_step * 100 + int(
                (self.step_timer / self.step_duration) * 100
            )
            max_samples = self.step_count() * 100
            if (
                0 <= index < max_samples
                and index < self.FLUX_BUFFER_SIZE
                and self.flux_sample_count < self.FLUX_BUFFER_SIZE
            ):
                self.flux_buffer[index] = pitch
                self.flux_sample_count = max(self.flux_sample_count, index + 1)
        elif self.flux_sample_count < self.FLUX_BUFFER_SIZE:
            self.flux_buffer[self.flux_sample_count] = pitch
            self.flux_sample_count += 1

    def process(
        self,
        sample_time: float,
        input_pitch: float = 0.0,
        input_gate: float = 0.0,
        sync_signal: float = 0.0,
        ribbon_gate_time_mod: float = 0.5,
    ) -> SequencerOutput:
        """Advance by one sample and return the current pitch and gate."""
        output = SequencerOutput()
        if not self.playing:
            return output

        new_step = False
        if self.external_sync:
            if self.sync_trigger.process(sync_signal > 1.0):
                self.current_step = (self.current_step + 1) % self.step_count()
                new_step = True
                self.step_timer = 0.0
            self.step_timer += sample_time
        else:
            self.step_timer += sample_time
            if self.step_timer >= self.step_duration:
                self.step_timer -= self.step_duration
                self.current_step = (self.current_step + 1) % self.step_count()
                new_step = True

        output.step = self.current_step
        output.step_changed = new_step
        step = self.steps[self.current_step]
        if not step.active:
            return output

        output.pitch = step.pitch
        if self.flux_mode and self.flux_sample_count > 0:
            per_step = self.flux_sample_count // self.step_count()
            if per_step > 0:
                index = self.current_step * per_step + int(
                    (self.step_timer / self.step_duration) * per_step
                )
                if index < self.flux_sample_count:
                    output.pitch = self.flux_buffer[index]

        gate_time = min(max(step.gate_time * ribbon_gate_time_mod, 0.1), 1.0)
        if self.external_sync:
            progress = self.step_timer / 0.1
        else:
            progress = self.step_timer / self.step_duration
        output.gate = 5.0 if progress < gate_time else 0.0
        return output