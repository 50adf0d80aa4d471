"""Synthesis layer - Melody to audio samples and frequency lists."""

from .synth import SynthConfig, ToneSynthesizer, round_half_away
from .frequencies import to_frequency_list, to_limited_frequency_list

__all__ = [
    "SynthConfig",
    "ToneSynthesizer",
    "round_half_away",
    "to_frequency_list",
    "to_limited_frequency_list",
]
