"""WAV export functionality."""

import logging
from pathlib import Path
from typing import Optional, Union

import soundfile as sf

from ..core.constants import PCM_SUBTYPE
from ..core.tone import Melody
from ..synthesis import SynthConfig, ToneSynthesizer

logger = logging.getLogger(__name__)


class WAVExporter:
    """Export a melody as a mono 16-bit PCM WAV file."""

    def __init__(self, config: Optional[SynthConfig] = None):
        """
        Initialize WAVExporter.

        Args:
            config: Synthesis settings (sample rate, peak amplitude)
        """
        self.synthesizer = ToneSynthesizer(config)

    @property
    def sample_rate(self) -> int:
        return self.synthesizer.config.sample_rate

    def export(self, melody: Melody, output_path: Union[str, Path]) -> Path:
        """
        Render a melody and write it to a WAV file.

        Args:
            melody: Decoded melody
            output_path: Path to output WAV file

        Returns:
            Path that was written

        Raises:
            OSError: If the file cannot be written
        """
        output_path = Path(output_path)
        samples = self.synthesizer.render(melody)

        # Ensure output directory exists
        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            sf.write(
                str(output_path),
                samples,
                self.sample_rate,
                subtype=PCM_SUBTYPE,
                format="WAV",
            )
        except sf.SoundFileError as e:
            raise OSError(f"Failed to write {output_path}: {e}") from e

        logger.debug("Wrote %d samples to %s", len(samples), output_path)
        return output_path
