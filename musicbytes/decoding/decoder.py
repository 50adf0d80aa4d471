"""Bitstream decoder - turns arbitrary bytes into a Melody.

Record format:
    [tempo: 8 bits] then repeated [pitch: 3][duration: 4][volume: 8]

The record loop counts an 18-bit stride per note and stops one bit short of
the end of the stream, while the payload fields themselves are read back to
back. Both quirks must stay as they are: existing files decode to the same
melodies only with this exact arithmetic.
"""

import logging
from pathlib import Path
from typing import Callable, List, Union

from ..core.constants import (
    BITS_PER_NOTE,
    DURATION_BITS,
    MIN_FILE_SIZE,
    PITCH_BITS,
    TEMPO_BITS,
    TEMPO_MODULUS,
    TEMPO_OFFSET,
    VOLUME_BITS,
)
from ..core.errors import FileTooSmallError, InvalidMappingError
from ..core.tone import Melody, Tone
from .bitreader import BitReader

logger = logging.getLogger(__name__)

# (pitch_raw, duration_raw, volume_raw) -> Tone
PitchMapper = Callable[[int, int, int], Tone]


def tempo_from_raw(raw: int) -> int:
    """Map a raw tempo byte to beats per minute in [120, 239]."""
    return raw % TEMPO_MODULUS + TEMPO_OFFSET


def max_note_count(size: int) -> int:
    """Number of note records a source of `size` bytes decodes to."""
    if size < MIN_FILE_SIZE:
        return 0
    usable = size * 8 - 1 - TEMPO_BITS
    return usable // BITS_PER_NOTE


class BitstreamDecoder:
    """Decode note records from a byte source."""

    def __init__(self, mapper: PitchMapper):
        """
        Initialize BitstreamDecoder.

        Args:
            mapper: Callback turning raw (pitch, duration, volume) fields
                into a Tone. Any plain function with that shape works.
        """
        self.mapper = mapper

    def decode(self, source: bytes) -> Melody:
        """
        Decode a whole byte source.

        Args:
            source: Complete file contents

        Returns:
            Melody in file order

        Raises:
            FileTooSmallError: If source is shorter than MIN_FILE_SIZE bytes
            InvalidMappingError: If the mapper returns something other than a Tone
        """
        if len(source) < MIN_FILE_SIZE:
            raise FileTooSmallError(len(source), MIN_FILE_SIZE)

        reader = BitReader(source)
        total_bits = reader.total_bits

        bpm = tempo_from_raw(reader.read_bits(TEMPO_BITS))
        offset = TEMPO_BITS

        units: List[Tone] = []
        while offset + BITS_PER_NOTE <= total_bits - 1:
            pitch_raw = reader.read_bits(PITCH_BITS)
            duration_raw = reader.read_bits(DURATION_BITS)
            volume_raw = reader.read_bits(VOLUME_BITS)

            tone = self.mapper(pitch_raw, duration_raw, volume_raw)
            if not isinstance(tone, Tone):
                raise InvalidMappingError(
                    f"Pitch mapper returned {type(tone).__name__}, expected Tone"
                )
            units.append(tone)

            offset += BITS_PER_NOTE

        logger.debug(
            "Decoded %d bytes: bpm=%d, %d tones", len(source), bpm, len(units)
        )
        return Melody(bpm=bpm, units=tuple(units))

    def decode_file(self, path: Union[str, Path]) -> Melody:
        """
        Read a file in one go and decode it.

        Raises:
            OSError: If the file cannot be read
            FileTooSmallError: If the file is shorter than MIN_FILE_SIZE bytes
        """
        path = Path(path)
        logger.debug("Reading %s", path)
        return self.decode(path.read_bytes())


def decode(source: bytes, mapper: PitchMapper) -> Melody:
    """Decode a byte source with the given pitch mapper."""
    return BitstreamDecoder(mapper).decode(source)


def decode_file(path: Union[str, Path], mapper: PitchMapper) -> Melody:
    """Decode a file with the given pitch mapper."""
    return BitstreamDecoder(mapper).decode_file(path)
