# clonosynth

A small monophonic synthesizer voice modelled on a classic pocket analogue
synth. It computes audio one sample at a time and has:

- a VCO with square, triangle and sawtooth waveforms
- a resonant low-pass VCF
- an LFO with one-shot, slow and fast modes and sample & hold
- attack, gate and decay envelope shapes
- an 8 or 16 step sequencer with note and flux (continuous) recording
- a three-part drum machine (kick, snare, hi-hat)
- a ribbon controller for pitch, gate time, volume and drum rolls

## Installing

```
pip install .
```

The package uses only the standard library.

## Using the instrument

`Clonotribe` in `clonosynth.clonotribe` holds the complete instrument.
Set panel controls with `set_param`, drive input jacks with
`connect_input` (and unplug them with `disconnect_input`), and call
`process(sample_time, sample_rate)` once per sample. `process` returns
nothing; after each call the `outputs` dictionary (keyed by `OutputId`)
holds the CV, gate, audio and sync voltages, and `lights` (keyed by
`LightId`) holds the brightness of every panel light.

```python
from clonosynth.clonotribe import Clonotribe
from clonosynth.params import InputId, OutputId, ParamId

synth = Clonotribe()
synth.set_param(ParamId.VCF_CUTOFF_KNOB, 0.6)
synth.connect_input(InputId.GATE, 10.0)

sample_rate = 48000.0
audio = []
for _ in range(480):
    synth.process(1.0 / sample_rate, sample_rate)
    audio.append(synth.outputs[OutputId.AUDIO])
```

The audio output is clamped to ±10 V. When the sync input is connected
the sequencer follows it and the sync output passes it through;
otherwise the sequencer runs from the tempo knob (60–180 BPM) and the
sync output gives a 1 ms, 5 V pulse on every step.

Buttons are parameters too. Press one by setting it to `1.0`, run at
least one sample, then release it by setting it back to `0.0`. Play,
record and flux, the drum-part selectors, the eight step buttons,
ACTIVE STEP and GATE TIME all behave this way. While GATE TIME is held,
the step buttons run special functions:

| Step | Function |
|------|----------|
| 1 | clear all sequences |
| 2 | clear the synth sequence |
| 3 | clear the drum patterns |
| 4 | enable all steps of the selected part |
| 5 | toggle LFO sample & hold (in 1-shot mode) |
| 6 | toggle 16-step mode |
| 7 | lock gate times |
| 8 | halve the external sync tempo |

Holding GATE TIME while touching the ribbon with a drum part selected
plays a drum roll whose rate follows the ribbon position. Set the ribbon
with `synth.ribbon.set_position(...)` and `synth.ribbon.touching = True`.

`clonosynth.params` lists every control, jack and light (`ParamId`,
`InputId`, `OutputId`, `LightId`); `param_config(param_id)` gives a
control's name, range, default and labels, and `default_param_values()`
the initial value of every control.

## Using the parts on their own

Every building block can be used alone:

```python
from clonosynth.vco import VCO
from clonosynth.vcf import VCF

vco = VCO()
vcf = VCF()
vco.set_pitch(0.0)  # C4
vcf.set_cutoff(1200.0)
samples = [vcf.process(vco.process_saw(1 / 48000), 48000.0) for _ in range(1000)]
```

The other parts are:

- `Sequencer`, `Step` and `SequencerOutput` in `clonosynth.sequencer`
- `LFO` and `Waveform` in `clonosynth.lfo`
- `Envelope` and `Stage` in `clonosynth.envelope`
- `KickDrum`, `SnareDrum` and `HiHat` in `clonosynth.drums`
- `NoiseGenerator` in `clonosynth.noise`
- `Ribbon` and `RibbonMode` in `clonosynth.ribbon`
- `SchmittTrigger` and `PulseGenerator` in `clonosynth.triggers`
- `process_envelope` and `process_output` in `clonosynth.signal`
- `StepEditor` in `clonosynth.editing`, for step editing, active-step
  snapshots and step light brightness
- `SequencerState` in `clonosynth.sequencer_state`, a minimal eight-step
  state machine of active steps and drum assignments
- `fast_sin`, `fast_cos`, `fast_tanh` and `fast_exp` in
  `clonosynth.fastmath`

## What it does not do

The package only computes sample values. It does not play sound through
an audio device, write audio files, draw a panel or take keyboard or
mouse input, and it has no command-line program. Patterns and settings
live in memory only; nothing is saved.

## Running the tests

```
pip install .[test]
pytest
```