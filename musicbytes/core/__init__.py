"""Core types, constants and errors for musicbytes."""

from .tone import Duration, Tone, Melody
from .errors import MusicBytesError, FileTooSmallError, InvalidMappingError
from .constants import (
    MIN_FILE_SIZE,
    BITS_PER_NOTE,
    SAMPLE_RATE,
    FREQUENCY_CAP,
)

__all__ = [
    "Duration",
    "Tone",
    "Melody",
    "MusicBytesError",
    "FileTooSmallError",
    "InvalidMappingError",
    "MIN_FILE_SIZE",
    "BITS_PER_NOTE",
    "SAMPLE_RATE",
    "FREQUENCY_CAP",
]
