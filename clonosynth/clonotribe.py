"""The complete instrument: controls, voices, sequencer and drums wired together."""

import math
from dataclasses import dataclass
from typing import Optional

from .drums import HiHat, KickDrum, SnareDrum
from .editing import BUTTON_COUNT, DRUM_STEPS, StepEditor
from .envelope import Envelope
from .lfo import LFO, Waveform
from .noise import NoiseGenerator
from .params import InputId, LightId, OutputId, ParamId, default_param_values
from .ribbon import Ribbon
from .sequencer import Sequencer, SequencerOutput
from .signal import process_envelope, process_output
from .triggers import PulseGenerator, SchmittTrigger
from .vcf import VCF
from .vco import VCO

_STEP_BUTTONS = tuple(ParamId(ParamId.SEQUENCER_1_BUTTON + i) for i in range(BUTTON_COUNT))
_STEP_LIGHTS = tuple(LightId(LightId.SEQUENCER_1 + i) for i in range(BUTTON_COUNT))


def _rescale(x: float, x_min: float, x_max: float, y_min: float, y_max: float) -> float:
    return y_min + (x - x_min) / (x_max - x_min) * (y_max - y_min)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


@dataclass(frozen=True)
class Parameters:
    """Snapshot of the panel controls as used by one processing step."""

    cutoff: float
    lfo_intensity: float
    lfo_rate: float
    noise_level: float
    resonance: float
    rhythm_volume: float
    tempo: float
    volume: float
    octave: float
    envelope_type: int
    lfo_mode: int
    lfo_target: int
    lfo_waveform: int
    ribbon_mode: int
    waveform: int


class Clonotribe:
    """Monophonic synthesizer with an 8/16-step sequencer and three drum voices."""

    def __init__(self) -> None:
        self.params: dict[ParamId, float] = default_param_values()
        self._inputs: dict[InputId, float] = {}
        self.outputs: dict[OutputId, float] = {output_id: 0.0 for output_id in OutputId}
        self.lights: dict[LightId, float] = {light_id: 0.0 for light_id in LightId}

        self.vco = VCO()
        self.vcf = VCF()
        self.lfo = LFO()
        self.envelope = Envelope()
        self.editor = StepEditor()
        self.noise_generator = NoiseGenerator()
        self.kick_drum = KickDrum()
        self.snare_drum = SnareDrum()
        self.hi_hat = HiHat()
        self.ribbon = Ribbon()

        self._gate_trigger = SchmittTrigger()
        self._play_trigger = SchmittTrigger()
        self._rec_trigger = SchmittTrigger()
        self._flux_trigger = SchmittTrigger()
        self._clear_all_trigger = SchmittTrigger()
        self._clear_synth_trigger = SchmittTrigger()
        self._clear_drum_trigger = SchmittTrigger()
        self._enable_all_trigger = SchmittTrigger()
        self._sixteen_step_trigger = SchmittTrigger()
        self._lfo_mode_trigger = SchmittTrigger()
        self._gate_times_lock_trigger = SchmittTrigger()
        self._sync_half_tempo_trigger = SchmittTrigger()
        self._sync_half_trigger = SchmittTrigger()
        self._step_triggers = [SchmittTrigger() for _ in range(BUTTON_COUNT)]
        self._drum_triggers = [SchmittTrigger() for _ in range(4)]
        self.sync_pulse = PulseGenerator()

        self.sync_divide_counter = 0
        self.gate_active = False
        self.gate_time_held = False
        self.gate_times_locked = False
        self.lfo_sample_and_hold_mode = False
        self.sync_half_tempo = False
        self._roll_timer = 0.0
        self._blink_timer = 0.0

    @property
    def sequencer(self) -> Sequencer:
        return self.editor.sequencer

    @property
    def selected_drum_part(self) -> int:
        return self.editor.selected_drum_part

    def set_param(self, param_id: int, value: float) -> None:
        """Set a control; raises ValueError for an unknown id."""
        self.params[ParamId(param_id)] = float(value)

    def connect_input(self, input_id: int, voltage: float = 0.0) -> None:
        """Connect an input jack and drive it with ``voltage``."""
        self._inputs[InputId(input_id)] = float(voltage)

    def disconnect_input(self, input_id: int) -> None:
        self._inputs.pop(InputId(input_id), None)

    def _is_connected(self, input_id: InputId) -> bool:
        return input_id in self._inputs

    def _voltage(self, input_id: InputId) -> float:
        return self._inputs.get(input_id, 0.0)

    def _pressed(self, param_id: ParamId) -> bool:
        return self.params[param_id] > 0.5

    def read_parameters(self) -> Parameters:
        p = self.params
        return Parameters(
            cutoff=p[ParamId.VCF_CUTOFF_KNOB],
            lfo_intensity=p[ParamId.LFO_INTERVAL_KNOB],
            lfo_rate=p[ParamId.LFO_RATE_KNOB],
            noise_level=p[ParamId.NOISE_KNOB],
            resonance=p[ParamId.VCF_PEAK_KNOB],
            rhythm_volume=p[ParamId.RHYTHM_VOLUME_KNOB],
            tempo=p[ParamId.SEQUENCER_TEMPO_KNOB],
            volume=p[ParamId.VCA_LEVEL_KNOB],
            octave=p[ParamId.VCO_OCTAVE_KNOB] - 3.0,
            envelope_type=int(p[ParamId.ENVELOPE_FORM_SWITCH]),
            lfo_mode=int(p[ParamId.LFO_MODE_SWITCH]),
            lfo_target=int(p[ParamId.LFO_TARGET_SWITCH]),
            lfo_waveform=int(p[ParamId.LFO_WAVEFORM_SWITCH]),
            ribbon_mode=int(p[ParamId.RIBBON_RANGE_SWITCH]),
            waveform=int(p[ParamId.VCO_WAVEFORM_SWITCH]),
        )

    def update_dsp_state(
        self,
        volume: float,
        rhythm_volume: float,
        lfo_intensity: float,
        ribbon_mode: int,
        octave: float,
    ) -> None:
        """Switch voice sections on or off and pass settings to the ribbon."""
        synth_active = self.selected_drum_part == 0 or (volume > 0.01 and rhythm_volume < 0.99)
        self.lfo.active = synth_active and lfo_intensity > 0.01
        self.vco.active = synth_active
        self.vcf.active = synth_active
        self.ribbon.set_mode(ribbon_mode)
        self.ribbon.set_octave(octave)

    def handle_main_triggers(self) -> None:
        """React to the play, record and flux buttons."""
        play_pressed = self._play_trigger.process(self._pressed(ParamId.PLAY_BUTTON))
        rec_pressed = self._rec_trigger.process(self._pressed(ParamId.REC_BUTTON))
        flux_pressed = self._flux_trigger.process(self._pressed(ParamId.FLUX_BUTTON))
        seq = self.sequencer

        if play_pressed:
            if seq.playing:
                seq.stop()
            else:
                seq.play()
        if rec_pressed:
            if self._pressed(ParamId.PLAY_BUTTON):
                if not seq.recording:
                    seq.start_recording()
                    if not seq.playing:
                        seq.play()
            elif seq.recording:
                seq.stop_recording()
            else:
                seq.start_recording()
        if flux_pressed:
            seq.flux_mode = not seq.flux_mode

    def handle_drum_selection_and_tempo(self, tempo: float) -> None:
        """Select the edited part and set the internal or external clock."""
        buttons = (
            ParamId.SYNTH_BUTTON,
            ParamId.BASSDRUM_BUTTON,
            ParamId.SNARE_BUTTON,
            ParamId.HIGHHAT_BUTTON,
        )
        pressed = [
            trigger.process(self._pressed(button))
            for trigger, button in zip(self._drum_triggers, buttons)
        ]
        for part, was_pressed in enumerate(pressed):
            if was_pressed:
                self.editor.selected_drum_part = part

        if self._is_connected(InputId.SYNC):
            self.sequencer.external_sync = True
        else:
            self.sequencer.set_tempo(_rescale(tempo, 0.0, 1.0, 60.0, 180.0))
            self.sequencer.external_sync = False

    def handle_special_gate_time_buttons(self, gate_time_held: bool) -> None:
        """Step buttons pressed with gate time held act as function keys."""
        if not gate_time_held:
            return
        seq = self.sequencer
        if self._sixteen_step_trigger.process(self._pressed(ParamId.SEQUENCER_6_BUTTON)):
            seq.sixteen_step_mode = not seq.sixteen_step_mode
            if seq.current_step >= seq.step_count():
                seq.current_step = 0

        clear_all = self._clear_all_trigger.process(self._pressed(ParamId.SEQUENCER_1_BUTTON))
        clear_synth = self._clear_synth_trigger.process(self._pressed(ParamId.SEQUENCER_2_BUTTON))
        clear_drum = self._clear_drum_trigger.process(self._pressed(ParamId.SEQUENCER_3_BUTTON))
        enable_all = self._enable_all_trigger.process(self._pressed(ParamId.SEQUENCER_4_BUTTON))
        lfo_mode = self._lfo_mode_trigger.process(self._pressed(ParamId.SEQUENCER_5_BUTTON))
        lock = self._gate_times_lock_trigger.process(self._pressed(ParamId.SEQUENCER_7_BUTTON))
        half = self._sync_half_tempo_trigger.process(self._pressed(ParamId.SEQUENCER_8_BUTTON))

        if clear_all:
            self.editor.clear_all_sequences()
        if clear_synth:
            self.editor.clear_synth_sequence()
        if clear_drum:
            self.editor.clear_drum_sequence()
        if enable_all:
            self.editor.enable_all_active_steps()
        if lfo_mode:
            self.lfo_sample_and_hold_mode = not self.lfo_sample_and_hold_mode
        if lock:
            self.gate_times_locked = not self.gate_times_locked
        if half:
            self.sync_half_tempo = not self.sync_half_tempo

    def handle_drum_rolls(self, sample_time: float, gate_time_held: bool) -> None:
        """Retrigger the selected drum at a ribbon-controlled rate (1-51 Hz)."""
        part = self.selected_drum_part
        if gate_time_held and self.ribbon.touching and part > 0:
            rate = self.ribbon.drum_roll_intensity() * 50.0 + 1.0
            self._roll_timer += sample_time * rate
            if self._roll_timer >= 1.0:
                self._roll_timer -= 1.0
                if part == 1:
                    self.kick_drum.trigger()
                elif part == 2:
                    self.snare_drum.trigger()
                elif part == 3:
                    self.hi_hat.trigger()
        else:
            self._roll_timer = 0.0

    def process_input_triggers(
        self, input_pitch: float, gate: float, gate_time_held: bool
    ) -> tuple[float, float, bool, bool]:
        """Combine CV/gate inputs with the ribbon.

        Returns (pitch, gate, gate_triggered, cv_gate_triggered).
        """
        cv_triggered = self._gate_trigger.process(gate > 1.0)
        final_pitch = input_pitch
        final_gate = gate
        triggered = cv_triggered
        if self.ribbon.touching and not gate_time_held:
            final_pitch = self.ribbon.cv()
            final_gate = self.ribbon.gate()
            triggered = cv_triggered or final_gate > 1.0
        return final_pitch, final_gate, triggered, cv_triggered

    def handle_sequencer_and_drum_state(
        self,
        seq_output: SequencerOutput,
        final_input_pitch: float,
        final_gate: float,
        gate_triggered: bool,
    ) -> SequencerOutput:
        """Apply active-step muting, record notes and fire drums on new steps.

        ``seq_output`` is updated in place and returned.
        """
        seq = self.sequencer
        editor = self.editor

        if editor.active_step_active and seq.playing:
            step = seq_output.step
            if 0 <= step < seq.step_count() and self.selected_drum_part == 0:
                if not editor.active_steps_sequencer_steps[step]:
                    seq_output.gate = 0.0

        if seq.recording and self.selected_drum_part == 0:
            note_gate = final_gate if final_gate > 1.0 else 5.0
            if seq.flux_mode:
                if final_gate > 1.0:
                    seq.record_flux(final_input_pitch)
            elif gate_triggered:
                if seq.playing:
                    seq.record_note(final_input_pitch, note_gate, 0.8)
                else:
                    seq.record_note_to_step(seq.recording_step, final_input_pitch, note_gate, 0.8)
                    seq.recording_step = (seq.recording_step + 1) % seq.step_count()

        if seq.playing and seq_output.step_changed:
            step = seq_output.step
            drum_step: Optional[int] = step
            if seq.sixteen_step_mode:
                drum_step = step // 2 if step % 2 == 0 and step < 16 else None
            if drum_step is not None and 0 <= drum_step < DRUM_STEPS:
                patterns = (
                    editor.active_steps_drum_patterns
                    if editor.active_step_active
                    else editor.drum_patterns
                )
                voices = (self.kick_drum, self.snare_drum, self.hi_hat)
                for pattern, voice in zip(patterns, voices):
                    if pattern[drum_step]:
                        voice.trigger()
            self.sync_pulse.trigger(1e-3)
        return seq_output

    def _handle_step_buttons(self) -> None:
        for button, (trigger, param_id) in enumerate(zip(self._step_triggers, _STEP_BUTTONS)):
            if trigger.process(self._pressed(param_id)):
                self.editor.press_step(button, self.gate_time_held)

    def _effective_sync(self, sync_signal: float) -> float:
        if not (self.sync_half_tempo and self.sequencer.external_sync):
            return sync_signal
        if not self._sync_half_trigger.process(sync_signal > 1.0):
            return 0.0
        self.sync_divide_counter += 1
        if self.sync_divide_counter >= 2:
            self.sync_divide_counter = 0
            return 5.0
        return 0.0

    def _lfo_settings(self, lfo_mode: int, lfo_rate: float) -> tuple[float, bool, bool]:
        sample_and_hold = self.lfo_sample_and_hold_mode and lfo_mode == 0
        if lfo_mode == 0:
            return _rescale(lfo_rate, 0.0, 1.0, 1.0, 5.0), not sample_and_hold, sample_and_hold
        if lfo_mode == 1:
            return _rescale(lfo_rate, 0.0, 1.0, 0.05, 18.0), False, sample_and_hold
        if lfo_mode == 2:
            return _rescale(lfo_rate, 0.0, 1.0, 1.0, 5000.0), False, sample_and_hold
        return 1.0, False, sample_and_hold

    def _oscillator(self, waveform: int, sample_time: float) -> float:
        if waveform == 0:
            return self.vco.process_square(sample_time)
        if waveform == 1:
            return self.vco.process_triangle(sample_time)
        if waveform == 2:
            return self.vco.process_saw(sample_time)
        return 0.0

    def process(self, sample_time: float, sample_rate: float) -> None:
        """Compute one sample, updating ``outputs`` and ``lights``."""
        p = self.read_parameters()
        self.update_dsp_state(p.volume, p.rhythm_volume, p.lfo_intensity, p.ribbon_mode, p.octave)
        self.handle_main_triggers()
        self.handle_drum_selection_and_tempo(p.tempo)
        self._handle_step_buttons()
        self.editor.update_active_step(self._pressed(ParamId.ACTIVE_STEP_BUTTON))

        gate_time_held = self._pressed(ParamId.GATE_TIME_BUTTON)
        self.gate_time_held = gate_time_held
        self.handle_special_gate_time_buttons(gate_time_held)
        self.handle_drum_rolls(sample_time, gate_time_held)

        input_pitch = self._voltage(InputId.CV) + p.octave
        gate = self._voltage(InputId.GATE)
        final_input_pitch, final_gate, gate_triggered, cv_triggered = self.process_input_triggers(
            input_pitch, gate, gate_time_held
        )

        seq = self.sequencer
        if not seq.playing and gate_triggered:
            self.envelope.trigger()
            self.gate_active = True
            if p.lfo_mode == 0:
                self.lfo.trigger()
        if final_gate < 0.5 and self.gate_active:
            self.envelope.gate_off()
            self.gate_active = False

        sync_signal = self._effective_sync(self._voltage(InputId.SYNC))

        gate_time_mod = 0.5
        if not self.gate_times_locked and gate_time_held and self.ribbon.touching:
            gate_time_mod = self.ribbon.gate_time_mod()
        volume_automation = self.ribbon.volume_automation()

        seq_output = seq.process(
            sample_time, final_input_pitch, final_gate, sync_signal, gate_time_mod
        )
        self.handle_sequencer_and_drum_state(
            seq_output, final_input_pitch, final_gate, gate_triggered
        )

        if seq.playing:
            if self.ribbon.touching and not gate_time_held:
                final_pitch = self.ribbon.cv()
                out_gate = seq_output.gate
            elif gate > 1.0:
                final_pitch = input_pitch
                out_gate = max(gate, seq_output.gate)
            else:
                final_pitch = seq_output.pitch
                out_gate = seq_output.gate
            if (seq_output.step_changed and seq_output.gate > 1.0) or cv_triggered:
                self.envelope.trigger()
                if p.lfo_mode == 0:
                    self.lfo.trigger()
        else:
            final_pitch = final_input_pitch
            out_gate = final_gate

        rate, one_shot, sample_and_hold = self._lfo_settings(p.lfo_mode, p.lfo_rate)
        self.lfo.set_rate(rate)
        self.lfo.set_one_shot(one_shot)
        self.lfo.set_sample_and_hold(sample_and_hold)
        lfo_value = self.lfo.process(sample_time, Waveform(p.lfo_waveform))

        pitch_mod = 0.0
        cutoff_mod = 0.0
        if p.lfo_target in (0, 1):
            cutoff_mod = lfo_value * p.lfo_intensity * 0.5
        if p.lfo_target in (1, 2):
            pitch_mod = lfo_value * p.lfo_intensity * 0.2

        self.vco.set_pitch(final_pitch + pitch_mod)
        mixed = self._oscillator(p.waveform, sample_time)
        mixed += self.noise_generator.process() * p.noise_level
        mixed += self._voltage(InputId.AUDIO) * 1.5

        self.vcf.set_cutoff(_rescale(p.cutoff + cutoff_mod, 0.0, 1.0, 80.0, 8000.0))
        self.vcf.set_resonance(_rescale(p.resonance, 0.0, 1.0, 0.0, 3.5))
        filtered = self.vcf.process(mixed, sample_rate)

        env_value = process_envelope(p.envelope_type, self.envelope, sample_time, out_gate)
        final_output = process_output(
            filtered, p.volume, env_value, volume_automation, p.rhythm_volume, sample_time,
            self.kick_drum, self.snare_drum, self.hi_hat, self.noise_generator,
        )

        self.outputs[OutputId.AUDIO] = _clamp(final_output * 5.0, -10.0, 10.0)
        self.outputs[OutputId.CV] = final_pitch
        self.outputs[OutputId.GATE] = out_gate
        if self._is_connected(InputId.SYNC):
            self.outputs[OutputId.SYNC] = self._voltage(InputId.SYNC)
        else:
            self.outputs[OutputId.SYNC] = 5.0 if self.sync_pulse.process(sample_time) else 0.0

        part = self.selected_drum_part
        self.lights[LightId.PLAY] = 1.0 if seq.playing else 0.0
        self.lights[LightId.REC] = 1.0 if seq.recording else 0.0
        self.lights[LightId.FLUX] = 1.0 if seq.flux_mode else 0.0
        for index, light in enumerate(
            (LightId.SYNTH, LightId.BASSDRUM, LightId.SNARE, LightId.HIGHHAT)
        ):
            self.lights[light] = 1.0 if part == index else 0.0

        self._blink_timer += sample_time
        blink = math.fmod(self._blink_timer, 0.5) < 0.25
        for light, brightness in zip(_STEP_LIGHTS, self.editor.step_brightness(seq_output, blink)):
            self.lights[light] = brightness