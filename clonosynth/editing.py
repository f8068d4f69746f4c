"""Step editing, active-step snapshots and step light brightness."""

from dataclasses import dataclass, field
from typing import Optional

from .sequencer import Sequencer, SequencerOutput

DRUM_COUNT = 3
DRUM_STEPS = 8
BUTTON_COUNT = 8


def _empty_patterns() -> list[list[bool]]:
    return [[False] * DRUM_STEPS for _ in range(DRUM_COUNT)]


@dataclass
class StepEditor:
    """Edits the synth sequence and drum patterns from the eight step buttons.

    ``selected_drum_part`` is 0 for the synth, 1 for the kick, 2 for the
    snare and 3 for the hi-hat. While the active-step mode is held, edits
    go to a snapshot that replaces the live pattern during playback.
    """

    sequencer: Sequencer = field(default_factory=Sequencer)
    selected_drum_part: int = 0
    selected_step_for_editing: int = 0
    drum_patterns: list[list[bool]] = field(default_factory=_empty_patterns)
    active_steps_sequencer_steps: list[bool] = field(
        default_factory=lambda: [False] * Sequencer.MAX_STEPS
    )
    active_steps_drum_patterns: list[list[bool]] = field(default_factory=_empty_patterns)
    active_step_active: bool = False
    active_step_was_pressed: bool = False

    def _drum_index(self) -> Optional[int]:
        index = self.selected_drum_part - 1
        return index if 0 <= index < DRUM_COUNT else None

    def _synth_sixteen(self) -> bool:
        return self.sequencer.sixteen_step_mode and self.selected_drum_part == 0

    def press_step(self, button: int, gate_time_held: bool) -> None:
        """Handle a press of step button ``button`` (0-7)."""
        self.selected_step_for_editing = button
        if self._synth_sixteen():
            index = self.sequencer.step_index(button, gate_time_held)
            self.sequencer.set_step_active(index, not self.sequencer.is_step_active(index))
        else:
            self.toggle_step(button)

    def update_active_step(self, held: bool) -> None:
        """Track the active-step button; a new press snapshots the patterns."""
        if held and not self.active_step_was_pressed:
            self.active_step_was_pressed = True
            self.active_step_active = True
            count = self.sequencer.step_count()
            self.active_steps_sequencer_steps = [
                i < count and self.sequencer.is_step_active(i)
                for i in range(Sequencer.MAX_STEPS)
            ]
            self.active_steps_drum_patterns = [list(row) for row in self.drum_patterns]

            selected = self.selected_step_for_editing
            if 0 <= selected < BUTTON_COUNT:
                if self.selected_drum_part == 0:
                    index = self.sequencer.step_index(selected, False)
                    if index < Sequencer.MAX_STEPS:
                        snapshot = self.active_steps_sequencer_steps
                        snapshot[index] = not snapshot[index]
                else:
                    drum = self._drum_index()
                    if drum is not None:
                        row = self.active_steps_drum_patterns[drum]
                        row[selected] = not row[selected]
        elif not held and self.active_step_was_pressed:
            self.active_step_was_pressed = False
            self.active_step_active = False

    def is_step_active(self, step: int) -> bool:
        """Whether button ``step`` is on for the selected part."""
        if self.selected_drum_part == 0:
            index = self.sequencer.step_index(step, False)
            if self.active_step_active:
                return index < Sequencer.MAX_STEPS and self.active_steps_sequencer_steps[index]
            return self.sequencer.is_step_active(index)
        drum = self._drum_index()
        if drum is None:
            return False
        patterns = self.active_steps_drum_patterns if self.active_step_active else self.drum_patterns
        return patterns[drum][step]

    def toggle_step(self, step: int) -> None:
        """Toggle button ``step`` for the selected part."""
        if self.selected_drum_part == 0:
            index = self.sequencer.step_index(step, False)
            if self.active_step_active:
                if index < Sequencer.MAX_STEPS:
                    snapshot = self.active_steps_sequencer_steps
                    snapshot[index] = not snapshot[index]
            else:
                self.sequencer.set_step_active(index, not self.sequencer.is_step_active(index))
            return
        drum = self._drum_index()
        if drum is None:
            return
        patterns = self.active_steps_drum_patterns if self.active_step_active else self.drum_patterns
        patterns[drum][step] = not patterns[drum][step]

    def clear_all_sequences(self) -> None:
        self.clear_synth_sequence()
        self.clear_drum_sequence()

    def clear_synth_sequence(self) -> None:
        """Deactivate and reset every step in the current step count."""
        for index in range(self.sequencer.step_count()):
            self.sequencer.set_step_active(index, False)
            step = self.sequencer.steps[index]
            step.pitch = 0.0
            step.gate = 5.0
            step.gate_time = 0.8

    def clear_drum_sequence(self) -> None:
        self.drum_patterns = _empty_patterns()

    def enable_all_active_steps(self) -> None:
        """Turn on every step of the selected part."""
        if self.selected_drum_part == 0:
            for index in range(self.sequencer.step_count()):
                self.sequencer.set_step_active(index, True)
            return
        drum = self._drum_index()
        if drum is not None:
            self.drum_patterns[drum] = [True] * DRUM_STEPS

    def step_brightness(self, seq_output: SequencerOutput, blink_state: bool) -> list[float]:
        """Brightness of the eight step lights."""
        if self._synth_sixteen():
            return [self._sixteen_step_light(i, seq_output, blink_state) for i in range(BUTTON_COUNT)]
        return [self._eight_step_light(i, seq_output) for i in range(BUTTON_COUNT)]

    def _sixteen_step_light(self, button: int, seq_output: SequencerOutput, blink: bool) -> float:
        seq = self.sequencer
        main_index = seq.step_index(button, False)
        sub_index = seq.step_index(button, True)
        main_active = seq.is_step_active(main_index)
        sub_active = seq.is_step_active(sub_index)

        if seq.playing and seq_output.step in (main_index, sub_index):
            if seq_output.step == main_index:
                return 1.0
            return 1.0 if blink else 0.5

        if main_active and sub_active:
            brightness = 0.6 if blink else 0.3
        elif main_active:
            brightness = 0.3
        elif sub_active:
            brightness = 0.3 if blink else 0.0
        else:
            brightness = 0.0

        if seq.recording and not seq.playing and seq.recording_step in (main_index, sub_index):
            brightness = 0.6

        if self.active_step_active:
            either = main_active or sub_active
            if button == self.selected_step_for_editing:
                brightness = 1.0 if either else 0.2
            else:
                brightness = 0.4 if either else 0.05
        return brightness

    def _eight_step_light(self, button: int, seq_output: SequencerOutput) -> float:
        seq = self.sequencer
        if seq.playing and seq_output.step == button:
            return 1.0

        active = self.is_step_active(button)
        brightness = 0.3 if active else 0.0

        if (
            seq.recording
            and not seq.playing
            and self.selected_drum_part == 0
            and button == seq.recording_step
        ):
            brightness = 0.6

        if self.active_step_active:
            if button == self.selected_step_for_editing:
                brightness = 1.0 if active else 0.2
            else:
                brightness = 0.4 if active else 0.05
        return brightness