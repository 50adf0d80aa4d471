"""Stock pitch-mapping callbacks.

The decoder takes any callable (pitch_raw, duration_raw, volume_raw) -> Tone.
The mappers here are the ones the command line offers; library users are free
to pass their own.
"""

from enum import Enum
from typing import Tuple

from .core.errors import InvalidMappingError
from .core.tone import Tone
from .decoding import PitchMapper

# First six degrees of a major scale, in semitones above the tonic
MAJOR_HEXACHORD: Tuple[int, ...] = (0, 2, 4, 5, 7, 9)

C_MAJOR_PITCHES: Tuple[int, ...] = (60, 62, 64, 65, 67, 69)


class PitchName(Enum):
    """Pitch classes, 0 = C. Flats are aliases of the matching sharps."""

    C = 0
    CSHARP = 1
    DFLAT = 1
    D = 2
    DSHARP = 3
    EFLAT = 3
    E = 4
    F = 5
    FSHARP = 6
    GFLAT = 6
    G = 7
    GSHARP = 8
    AFLAT = 8
    A = 9
    ASHARP = 10
    BFLAT = 10
    B = 11

    @classmethod
    def from_name(cls, name: str) -> "PitchName":
        """Look up a pitch class by name ('c', 'fsharp', 'BFlat', ...)."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Not a valid note: {name}") from None


def validate_raw_fields(pitch_raw: int, duration_raw: int, volume_raw: int) -> None:
    """Raise InvalidMappingError if a raw field exceeds its bit width."""
    for label, value, upper in (
        ("pitch", pitch_raw, 7),
        ("duration", duration_raw, 15),
        ("volume", volume_raw, 255),
    ):
        if not 0 <= value <= upper:
            raise InvalidMappingError(
                f"Raw {label} value {value} out of range 0-{upper}"
            )


def c_major(pitch_raw: int, duration_raw: int, volume_raw: int) -> Tone:
    """Map onto C, D, E, F, G, A around middle C."""
    validate_raw_fields(pitch_raw, duration_raw, volume_raw)
    pitch = C_MAJOR_PITCHES[pitch_raw % len(C_MAJOR_PITCHES)]
    return Tone.from_raw(pitch, duration_raw, volume_raw)


def scale_mapper(tonic: str, octave: int = 4) -> PitchMapper:
    """
    Build a mapper over the first six major-scale degrees of any tonic.

    Args:
        tonic: Pitch name of the tonic, e.g. 'c' or 'eflat'
        octave: Octave of the tonic (4 puts C at pitch 60)

    Returns:
        Callback suitable for BitstreamDecoder
    """
    root = (octave + 1) * 12 + PitchName.from_name(tonic).value
    pitches = tuple(root + step for step in MAJOR_HEXACHORD)

    def mapper(pitch_raw: int, duration_raw: int, volume_raw: int) -> Tone:
        validate_raw_fields(pitch_raw, duration_raw, volume_raw)
        return Tone.from_raw(pitches[pitch_raw % len(pitches)], duration_raw, volume_raw)

    mapper.__name__ = f"{tonic.lower()}_major"
    return mapper
