import pytest

from clonosynth.editing import StepEditor
from clonosynth.sequencer import SequencerOutput, Step


def _editor(sixteen=False, part=0):
    editor = StepEditor()
    editor.sequencer.sixteen_step_mode = sixteen
    editor.selected_drum_part = part
    return editor


def test_toggle_synth_step_in_eight_step_mode():
    editor = _editor()
    before = editor.sequencer.is_step_active(3)
    editor.toggle_step(3)
    assert editor.sequencer.is_step_active(3) == (not before)
    editor.toggle_step(3)
    assert editor.sequencer.is_step_active(3) == before


@pytest.mark.parametrize("part", [1, 2, 3])
def test_toggle_drum_step_changes_only_that_pattern(part):
    editor = _editor(part=part)
    editor.toggle_step(4)
    for drum, row in enumerate(editor.drum_patterns):
        assert row[4] == (drum == part - 1)
        assert sum(row) == (1 if drum == part - 1 else 0)
    assert editor.is_step_active(4) is True


def test_press_step_sixteen_mode_with_gate_time_toggles_sub_step():
    editor = _editor(sixteen=True)
    editor.press_step(2, True)
    assert editor.selected_step_for_editing == 2
    assert editor.sequencer.is_step_active(5) is False
    assert editor.sequencer.is_step_active(4) is True


def test_press_step_sixteen_mode_without_gate_time_toggles_main_step():
    editor = _editor(sixteen=True)
    editor.press_step(2, False)
    assert editor.sequencer.is_step_active(4) is False
    assert editor.sequencer.is_step_active(5) is True


def test_press_step_on_drum_part_uses_pattern():
    editor = _editor(sixteen=True, part=1)
    editor.press_step(6, True)
    assert editor.drum_patterns[0][6] is True
    assert all(editor.sequencer.is_step_active(i) for i in range(16))


def test_active_step_snapshot_and_release():
    editor = _editor()
    editor.selected_step_for_editing = 1
    editor.update_active_step(True)
    assert editor.active_step_active is True
    assert editor.is_step_active(1) is False
    assert editor.sequencer.is_step_active(1) is True
    assert editor.active_steps_sequencer_steps[8:] == [False] * 8

    editor.update_active_step(True)
    assert editor.is_step_active(1) is False

    editor.toggle_step(2)
    assert editor.is_step_active(2) is False
    assert editor.sequencer.is_step_active(2) is True

    editor.update_active_step(False)
    assert editor.active_step_active is False
    assert editor.is_step_active(1) is True
    assert editor.is_step_active(2) is True


def test_active_step_snapshot_for_drum_part():
    editor = _editor(part=3)
    editor.drum_patterns[2][0] = True
    editor.selected_step_for_editing = 5
    editor.update_active_step(True)
    assert editor.is_step_active(0) is True
    assert editor.is_step_active(5) is True
    assert editor.drum_patterns[2][5] is False


def test_clear_synth_sequence_resets_current_steps_only():
    editor = _editor()
    editor.sequencer.steps[2].pitch = 1.5
    editor.clear_synth_sequence()
    cleared = Step(active=False, pitch=0.0, gate=5.0, gate_time=0.8)
    assert editor.sequencer.steps[:8] == [cleared] * 8
    assert all(step.active for step in editor.sequencer.steps[8:])


def test_clear_all_sequences_clears_drums_too():
    editor = _editor(part=2)
    editor.enable_all_active_steps()
    assert all(editor.drum_patterns[1])
    editor.clear_all_sequences()
    assert not any(any(row) for row in editor.drum_patterns)
    assert not any(editor.sequencer.is_step_active(i) for i in range(8))


def test_enable_all_active_steps_for_synth():
    editor = _editor(sixteen=True)
    editor.clear_synth_sequence()
    editor.enable_all_active_steps()
    assert all(editor.sequencer.is_step_active(i) for i in range(16))


def test_eight_step_lights_show_playing_and_active_steps():
    editor = _editor()
    editor.sequencer.set_step_active(5, False)
    editor.sequencer.playing = True
    lights = editor.step_brightness(SequencerOutput(step=2), blink_state=True)
    assert lights[2] == max(lights)
    assert lights.count(max(lights)) == 1
    assert lights[5] == min(lights)
    assert lights[0] > lights[5]
    assert lights[0] == lights[7]


def test_recording_step_light_stands_out():
    editor = _editor()
    editor.sequencer.recording = True
    editor.sequencer.recording_step = 3
    lights = editor.step_brightness(SequencerOutput(), blink_state=False)
    assert lights[3] > lights[0]
    assert lights[0] == lights[7]


def test_active_step_mode_highlights_selected_step():
    editor = _editor()
    editor.selected_step_for_editing = 4
    editor.update_active_step(True)
    editor.toggle_step(4)
    lights = editor.step_brightness(SequencerOutput(), blink_state=False)
    assert lights[4] == max(lights)
    assert lights.count(max(lights)) == 1


def test_sixteen_step_lights_blink_when_both_steps_active():
    editor = _editor(sixteen=True)
    output = SequencerOutput()
    on = editor.step_brightness(output, blink_state=True)
    off = editor.step_brightness(output, blink_state=False)
    assert all(a > b for a, b in zip(on, off))


def test_sixteen_step_light_for_playing_sub_step_blinks():
    editor = _editor(sixteen=True)
    editor.sequencer.playing = True
    on = editor.step_brightness(SequencerOutput(step=3), blink_state=True)
    off = editor.step_brightness(SequencerOutput(step=3), blink_state=False)
    assert on[1] > off[1]
    assert on[1] == max(on)
    main = editor.step_brightness(SequencerOutput(step=2), blink_state=False)
    assert main[1] == on[1]