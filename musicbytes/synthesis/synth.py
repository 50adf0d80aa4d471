"""Sine-wave synthesis of a Melody into 16-bit PCM samples."""

import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..core.constants import MAX_AMPLITUDE, SAMPLE_RATE
from ..core.tone import Duration, Melody, Tone

logger = logging.getLogger(__name__)


@dataclass
class SynthConfig:
    """Configuration for tone synthesis.

    Attributes:
        sample_rate: Output sample rate in Hz (default: 44100)
        max_amplitude: Peak sample value at full volume (default: 32767)
    """

    sample_rate: int = SAMPLE_RATE
    max_amplitude: int = MAX_AMPLITUDE

    def __post_init__(self):
        if self.sample_rate <= 0:
            raise ValueError(f"sample_rate must be positive, got {self.sample_rate}")
        if not 0 <= self.max_amplitude <= MAX_AMPLITUDE:
            raise ValueError(
                f"max_amplitude must be in 0-{MAX_AMPLITUDE}, got {self.max_amplitude}"
            )


def round_half_away(values):
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return np.sign(values) * np.floor(np.abs(values) + 0.5)


class ToneSynthesizer:
    """Render tones as sine waves, one run of samples per tone.

    Every tone restarts its phase at zero and runs are joined without gaps,
    so tone boundaries may click.
    """

    def __init__(self, config: Optional[SynthConfig] = None):
        self.config = config or SynthConfig()

    def sample_count(self, duration: Duration, bpm: int) -> int:
        """Number of samples a tone of this duration lasts at `bpm`."""
        seconds_per_beat = 60.0 / bpm
        return int(math.floor(seconds_per_beat * duration.beats * self.config.sample_rate + 0.5))

    def render_tone(self, tone: Tone, bpm: int) -> np.ndarray:
        """
        Render a single tone.

        Args:
            tone: Tone to render
            bpm: Tempo of the melody the tone belongs to

        Returns:
            int16 array of sample_count(tone.duration, bpm) samples
        """
        steps = self.sample_count(tone.duration, bpm)
        amplitude = self.config.max_amplitude * tone.volume

        # Phase is relative to the tone length, not elapsed time
        t = np.arange(steps, dtype=np.float64) / steps
        wave = np.sin(t * tone.frequency * 2.0 * np.pi) * amplitude
        return round_half_away(wave).astype(np.int16)

    def render(self, melody: Melody) -> np.ndarray:
        """
        Render a whole melody.

        Args:
            melody: Decoded melody

        Returns:
            Mono int16 sample array, tones concatenated in order
        """
        runs = [self.render_tone(tone, melody.bpm) for tone in melody.units]
        if not runs:
            return np.zeros(0, dtype=np.int16)

        samples = np.concatenate(runs)
        logger.debug(
            "Rendered %d tones at %d bpm into %d samples",
            len(runs), melody.bpm, len(samples),
        )
        return samples

    def get_duration(self, melody: Melody) -> float:
        """Length of the rendered melody in seconds."""
        total = sum(self.sample_count(tone.duration, melody.bpm) for tone in melody.units)
        return total / self.config.sample_rate
