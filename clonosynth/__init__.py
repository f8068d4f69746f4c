"""Monophonic analogue-style synthesizer voice with step sequencer, drums and ribbon."""

__version__ = "2.0.0"