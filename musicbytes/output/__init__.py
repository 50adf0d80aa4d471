"""Output layer - Export a Melody to various formats.

- WAV files (mono 16-bit PCM)
- Arduino-style C array of frequencies
- JSON frequency list
"""

from .wav import WAVExporter
from .text import ArduinoExporter, JSONExporter

__all__ = [
    "WAVExporter",
    "ArduinoExporter",
    "JSONExporter",
]
