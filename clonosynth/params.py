"""Identifiers and configuration of the instrument's controls, jacks and lights."""

import math
from dataclasses import dataclass
from enum import IntEnum


class ParamId(IntEnum):
    VCO_OCTAVE_KNOB = 0
    VCA_LEVEL_KNOB = 1
    VCO_WAVEFORM_SWITCH = 2
    RHYTHM_VOLUME_KNOB = 3
    SNARE_BUTTON = 4
    FLUX_BUTTON = 5
    REC_BUTTON = 6
    VCF_CUTOFF_KNOB = 7
    LFO_RATE_KNOB = 8
    LFO_INTERVAL_KNOB = 9
    NOISE_KNOB = 10
    VCF_PEAK_KNOB = 11
    RIBBON_RANGE_SWITCH = 12
    ENVELOPE_FORM_SWITCH = 13
    LFO_TARGET_SWITCH = 14
    LFO_MODE_SWITCH = 15
    LFO_WAVEFORM_SWITCH = 16
    SEQUENCER_TEMPO_KNOB = 17
    SYNTH_BUTTON = 18
    BASSDRUM_BUTTON = 19
    HIGHHAT_BUTTON = 20
    ACTIVE_STEP_BUTTON = 21
    SEQUENCER_1_BUTTON = 22
    SEQUENCER_2_BUTTON = 23
    SEQUENCER_3_BUTTON = 24
    SEQUENCER_4_BUTTON = 25
    SEQUENCER_5_BUTTON = 26
    SEQUENCER_6_BUTTON = 27
    SEQUENCER_7_BUTTON = 28
    SEQUENCER_8_BUTTON = 29
    PLAY_BUTTON = 30
    GATE_TIME_BUTTON = 31


class InputId(IntEnum):
    CV = 0
    GATE = 1
    AUDIO = 2
    SYNC = 3


class OutputId(IntEnum):
    CV = 0
    GATE = 1
    AUDIO = 2
    SYNC = 3


class LightId(IntEnum):
    SYNTH = 0
    BASSDRUM = 1
    SNARE = 2
    HIGHHAT = 3
    SEQUENCER_1 = 4
    SEQUENCER_2 = 5
    SEQUENCER_3 = 6
    SEQUENCER_4 = 7
    SEQUENCER_5 = 8
    SEQUENCER_6 = 9
    SEQUENCER_7 = 10
    SEQUENCER_8 = 11
    FLUX = 12
    REC = 13
    PLAY = 14


@dataclass(frozen=True)
class ParamConfig:
    """Range, default and display mapping of one control."""

    name: str
    min_value: float = 0.0
    max_value: float = 1.0
    default_value: float = 0.0
    unit: str = ""
    display_base: float = 0.0
    display_multiplier: float = 1.0
    display_offset: float = 0.0
    labels: tuple[str, ...] = ()
    snap: bool = False

    def display_value(self, value: float) -> float:
        """Map a raw value to the value shown to the user."""
        if self.display_base == 0.0:
            shown = value
        elif self.display_base < 0.0:
            shown = math.log(value) / math.log(-self.display_base)
        else:
            shown = self.display_base ** value
        return shown * self.display_multiplier + self.display_offset


def _switch(name: str, labels: tuple[str, ...]) -> ParamConfig:
    return ParamConfig(name, 0.0, float(len(labels) - 1), 0.0, labels=labels, snap=True)


def _button(name: str) -> ParamConfig:
    return ParamConfig(name, 0.0, 1.0, 0.0)


_WAVES = ("Square", "Triangle", "Sawtooth")

_CONFIGS: dict[ParamId, ParamConfig] = {
    ParamId.VCO_WAVEFORM_SWITCH: _switch("VCO Waveform", _WAVES),
    ParamId.RIBBON_RANGE_SWITCH: _switch("Ribbon Controller Range", ("Key", "Narrow", "Wide")),
    ParamId.ENVELOPE_FORM_SWITCH: _switch("Envelope", ("Attack", "Gate", "Decay")),
    ParamId.LFO_TARGET_SWITCH: _switch("LFO Target", ("VCF", "VCO+VCF", "VCO")),
    ParamId.LFO_MODE_SWITCH: _switch("LFO Mode", ("1 Shot", "Slow", "Fast")),
    ParamId.LFO_WAVEFORM_SWITCH: _switch("LFO Waveform", _WAVES),
    ParamId.VCO_OCTAVE_KNOB: ParamConfig("VCO Octave", 0.0, 5.0, 2.0, snap=True),
    ParamId.NOISE_KNOB: ParamConfig(
        "Noise Level", 0.0, 1.0, 0.0, "%", 0.0, 100.0
    ),
    ParamId.VCF_CUTOFF_KNOB: ParamConfig("VCF Cutoff", 0.0, 1.0, 0.7),
    ParamId.VCF_PEAK_KNOB: ParamConfig("VCF Peak (Resonance)", 0.0, 1.0, 0.0),
    ParamId.VCA_LEVEL_KNOB: ParamConfig("VCA Level", 0.0, 1.0, 0.8),
    ParamId.LFO_RATE_KNOB: ParamConfig("LFO Rate", 0.0, 1.0, 0.3),
    ParamId.LFO_INTERVAL_KNOB: ParamConfig("LFO Intensity", 0.0, 1.0, 0.0),
    ParamId.RHYTHM_VOLUME_KNOB: ParamConfig("Rhythm Volume", 0.0, 1.0, 0.0),
    ParamId.SEQUENCER_TEMPO_KNOB: ParamConfig(
        "Sequencer Tempo", 0.0, 1.0, 0.5, " BPM", 0.0, 120.0, 60.0
    ),
    ParamId.SNARE_BUTTON: _button("Snare"),
    ParamId.FLUX_BUTTON: _button("Flux"),
    ParamId.REC_BUTTON: _button("Record"),
    ParamId.SYNTH_BUTTON: _button("Synth"),
    ParamId.BASSDRUM_BUTTON: _button("Bass Drum"),
    ParamId.HIGHHAT_BUTTON: _button("Hi-Hat"),
    ParamId.ACTIVE_STEP_BUTTON: _button("Active Step (F7)"),
    ParamId.SEQUENCER_1_BUTTON: _button("Sequencer 1"),
    ParamId.SEQUENCER_2_BUTTON: _button("Sequencer 2"),
    ParamId.SEQUENCER_3_BUTTON: _button("Sequencer 3"),
    ParamId.SEQUENCER_4_BUTTON: _button("Sequencer 4"),
    ParamId.SEQUENCER_5_BUTTON: _button("Sequencer 5"),
    ParamId.SEQUENCER_6_BUTTON: _button("Sequencer 6"),
    ParamId.SEQUENCER_7_BUTTON: _button("Sequencer 7"),
    ParamId.SEQUENCER_8_BUTTON: _button("Sequencer 8"),
    ParamId.PLAY_BUTTON: _button("Play"),
    ParamId.GATE_TIME_BUTTON: _button("Gate Time (F8)"),
}


def param_config(param_id: int) -> ParamConfig:
    """Configuration of a control; raises ValueError for an unknown id."""
    return _CONFIGS[ParamId(param_id)]


def default_param_values() -> dict[ParamId, float]:
    """Initial value of every control."""
    return {param_id: _CONFIGS[param_id].default_value for param_id in ParamId}