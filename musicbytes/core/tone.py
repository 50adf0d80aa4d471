"""Tone and Melody data classes - the units passed from decoder to renderers."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple

from .constants import BASE_FREQUENCY, BASE_PITCH


class Duration(Enum):
    """Note length categories. The value is the length in beats."""

    DOUBLE = 8.0
    WHOLE = 4.0
    HALF = 2.0
    QUARTER = 1.0
    EIGHTH = 0.5
    SIXTEENTH = 0.25
    THIRTY_SECOND = 0.125
    SIXTY_FOURTH = 0.0625
    HUNDRED_TWENTY_EIGHTH = 0.03125

    @property
    def beats(self) -> float:
        """Beat multiplier for this category."""
        return self.value

    @classmethod
    def from_raw(cls, raw: int) -> "Duration":
        """Pick a category from a raw duration field, wrapping modulo 9."""
        return _DURATION_TABLE[raw % len(_DURATION_TABLE)]


_DURATION_TABLE: Tuple[Duration, ...] = tuple(Duration)


@dataclass(frozen=True)
class Tone:
    """One decoded musical event."""

    pitch: int  # MIDI-style scale index
    duration: Duration
    volume: float  # 0.0 <= volume < 1.0

    def __post_init__(self):
        if not 0.0 <= self.volume < 1.0:
            raise ValueError(f"Tone volume must be in [0, 1), got {self.volume}")

    @property
    def frequency(self) -> float:
        """Frequency in Hz."""
        return self.pitch_to_frequency(self.pitch)

    @property
    def pitch_name(self) -> str:
        """Get note name (e.g., 'C4', 'A#3')."""
        names = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
        octave = (self.pitch // 12) - 1
        return f"{names[self.pitch % 12]}{octave}"

    @staticmethod
    def pitch_to_frequency(pitch: int) -> float:
        """Equal-tempered frequency with pitch 69 anchored at 400 Hz."""
        return BASE_FREQUENCY * (2 ** ((pitch - BASE_PITCH) / 12.0))

    @classmethod
    def from_raw(cls, pitch: int, duration_raw: int, volume_raw: int) -> "Tone":
        """
        Build a tone from a scale pitch and the raw duration/volume fields.

        Args:
            pitch: Scale index chosen by a pitch-mapping callback
            duration_raw: Raw 4-bit duration field
            volume_raw: Raw 8-bit volume field

        Returns:
            Tone with volume normalized to [0, 1)
        """
        return cls(
            pitch=pitch,
            duration=Duration.from_raw(duration_raw),
            volume=volume_raw / 256.0,
        )


@dataclass(frozen=True)
class Melody:
    """Tempo plus the ordered tones decoded from one source."""

    bpm: int
    units: Tuple[Tone, ...] = ()

    def __len__(self) -> int:
        return len(self.units)

    def __iter__(self) -> Iterator[Tone]:
        return iter(self.units)

    @property
    def seconds_per_beat(self) -> float:
        """Length of one beat in seconds."""
        return 60.0 / self.bpm

    @property
    def total_beats(self) -> float:
        """Sum of the beat multipliers of all tones."""
        return sum(tone.duration.beats for tone in self.units)
