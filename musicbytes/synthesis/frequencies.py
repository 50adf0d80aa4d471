"""Integer frequency lists for textual exports."""

from typing import List

from ..core.constants import FREQUENCY_CAP
from ..core.tone import Melody


def to_frequency_list(melody: Melody) -> List[int]:
    """Frequency of every tone in Hz, truncated to an integer."""
    return [int(tone.frequency) for tone in melody.units]


def to_limited_frequency_list(melody: Melody, cap: int = FREQUENCY_CAP) -> List[int]:
    """Like to_frequency_list, but at most `cap` entries (fixed-size firmware arrays)."""
    if cap < 0:
        raise ValueError(f"cap must be non-negative, got {cap}")
    return [int(tone.frequency) for tone in melody.units[:cap]]
