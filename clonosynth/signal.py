"""Envelope shaping and final voice/drum mixing for one output sample."""

from .drums import HiHat, KickDrum, SnareDrum
from .envelope import Envelope
from .noise import NoiseGenerator

ENVELOPE_ATTACK = 0
ENVELOPE_GATE = 1
ENVELOPE_DECAY = 2


def process_envelope(
    envelope_type: int, envelope: Envelope, sample_time: float, gate: float
) -> float:
    """Return the VCA level for the selected envelope form.

    Form 0 is a slow attack with full sustain, form 1 follows the gate
    directly and form 2 is a percussive decay. Any other form leaves the
    VCA fully open.
    """
    if envelope_type == ENVELOPE_ATTACK:
        envelope.set_attack(0.1)
        envelope.set_decay(0.1)
        envelope.set_sustain(1.0)
        envelope.set_release(0.1)
        return envelope.process(sample_time)
    if envelope_type == ENVELOPE_GATE:
        return 1.0 if gate > 1.0 else 0.0
    if envelope_type == ENVELOPE_DECAY:
        envelope.set_attack(0.001)
        envelope.set_decay(0.5)
        envelope.set_sustain(0.0)
        envelope.set_release(0.001)
        return envelope.process(sample_time)
    return 1.0


def process_output(
    filtered_signal: float,
    volume: float,
    env_value: float,
    ribbon_volume_automation: float,
    rhythm_volume: float,
    sample_time: float,
    kick_drum: KickDrum,
    snare_drum: SnareDrum,
    hi_hat: HiHat,
    noise_generator: NoiseGenerator,
) -> float:
    """Apply the VCA to the synth voice and mix in the drum voices.

    The drums are only advanced while the rhythm volume is above zero.
    """
    modulation = 1.0 + ribbon_volume_automation * 0.5
    modulation = min(max(modulation, 0.1), 2.0)
    output = filtered_signal * volume * env_value * modulation

    if rhythm_volume > 0.0:
        kick = kick_drum.process(sample_time)
        snare = snare_drum.process(sample_time, noise_generator)
        hihat = hi_hat.process(sample_time, noise_generator)
        output += (kick + snare + hihat) * rhythm_volume
    return output