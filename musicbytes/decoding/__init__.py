"""Decoding layer - bytes to Melody.

- BitReader: MSB-first bit cursor
- BitstreamDecoder: tempo field plus fixed-width note records
"""

from .bitreader import BitReader
from .decoder import (
    BitstreamDecoder,
    PitchMapper,
    decode,
    decode_file,
    max_note_count,
    tempo_from_raw,
)

__all__ = [
    "BitReader",
    "BitstreamDecoder",
    "PitchMapper",
    "decode",
    "decode_file",
    "max_note_count",
    "tempo_from_raw",
]
