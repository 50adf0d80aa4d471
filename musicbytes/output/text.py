"""Textual exports: firmware array and JSON frequency list."""

import json

from ..core.constants import FREQUENCY_CAP
from ..core.tone import Melody
from ..synthesis import to_frequency_list, to_limited_frequency_list


class ArduinoExporter:
    """Render frequencies as a C array declaration for microcontroller sketches."""

    def __init__(self, limit: int = FREQUENCY_CAP):
        """
        Initialize ArduinoExporter.

        Args:
            limit: Maximum number of tones in the array
        """
        self.limit = limit

    def render(self, melody: Melody) -> str:
        frequencies = to_limited_frequency_list(melody, self.limit)
        count = len(frequencies)
        values = ", ".join(str(f) for f in frequencies)
        return (
            f"int tone_count = {count};\n"
            f"int tones[{count}] = {{{values}}};\n"
        )


class JSONExporter:
    """Render all frequencies as a JSON array, newline-terminated."""

    def render(self, melody: Melody) -> str:
        return json.dumps(to_frequency_list(melody)) + "\n"
