import pytest

from clonosynth.vcf import VCF


def test_inactive_passes_through():
    vcf = VCF(active=False)
    assert vcf.process(0.37, 48000.0) == 0.37


@pytest.mark.parametrize("freq, expected", [(1.0, 20.0), (50000.0, 20000.0), (440.0, 440.0)])
def test_set_cutoff_clamps(freq, expected):
    vcf = VCF()
    vcf.set_cutoff(freq)
    assert vcf.cutoff == expected


@pytest.mark.parametrize("res, expected", [(-1.0, 0.0), (9.0, 4.0), (1.5, 1.5)])
def test_set_resonance_clamps(res, expected):
    vcf = VCF()
    vcf.set_resonance(res)
    assert vcf.resonance == expected


def test_silence_in_silence_out():
    vcf = VCF()
    assert vcf.process(0.0, 48000.0) == 0.0


def test_state_tracks_input_from_rest():
    vcf = VCF()
    vcf.process(0.5, 48000.0)
    assert vcf.state1 == 0.5
    assert vcf.state2 == 0.0


def test_reset_clears_state():
    vcf = VCF()
    for _ in range(10):
        vcf.process(1.0, 48000.0)
    vcf.reset()
    assert (vcf.state1, vcf.state2) == (0.0, 0.0)


def test_output_bounded_by_saturation():
    vcf = VCF()
    vcf.set_resonance(4.0)
    vcf.set_cutoff(8000.0)
    outs = [vcf.process(10.0 if i % 2 else -10.0, 48000.0) for i in range(200)]
    assert all(abs(o) <= 0.8 + 1e-9 for o in outs)


def test_deterministic():
    a, b = VCF(), VCF()
    signal = [0.1 * (i % 7) - 0.3 for i in range(50)]
    assert [a.process(s, 44100.0) for s in signal] == [b.process(s, 44100.0) for s in signal]