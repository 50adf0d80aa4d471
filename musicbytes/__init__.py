"""musicbytes - Turn any file into music.

Architecture Layers:
    1. core/      - Tone, Melody, Duration, constants and errors
    2. decoding/  - Bitstream decoding of tempo and note records
    3. mapping    - Stock pitch-mapping callbacks (scales)
    4. synthesis/ - Sine-wave rendering and frequency lists
    5. output/    - Export (WAV, Arduino array, JSON)
"""

__version__ = "0.1.0"

# Core types
from .core import (
    Duration,
    Tone,
    Melody,
    MusicBytesError,
    FileTooSmallError,
    InvalidMappingError,
)

# Decoding layer
from .decoding import BitReader, BitstreamDecoder, decode, decode_file

# Mapping
from .mapping import PitchName, c_major, scale_mapper

# Synthesis layer
from .synthesis import (
    SynthConfig,
    ToneSynthesizer,
    to_frequency_list,
    to_limited_frequency_list,
)

# Output layer
from .output import WAVExporter, ArduinoExporter, JSONExporter

__all__ = [
    # Core
    "Duration",
    "Tone",
    "Melody",
    "MusicBytesError",
    "FileTooSmallError",
    "InvalidMappingError",
    # Decoding
    "BitReader",
    "BitstreamDecoder",
    "decode",
    "decode_file",
    # Mapping
    "PitchName",
    "c_major",
    "scale_mapper",
    # Synthesis
    "SynthConfig",
    "ToneSynthesizer",
    "to_frequency_list",
    "to_limited_frequency_list",
    # Output
    "WAVExporter",
    "ArduinoExporter",
    "JSONExporter",
]
