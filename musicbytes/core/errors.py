"""Error types raised by musicbytes."""


class MusicBytesError(Exception):
    """Base class for all musicbytes errors."""


class FileTooSmallError(MusicBytesError):
    """Source holds fewer bytes than one tempo field plus its note records need."""

    def __init__(self, size: int, minimum: int):
        self.size = size
        self.minimum = minimum
        super().__init__(
            f"File too small: {size} bytes. File must be at least {minimum} bytes big"
        )


class InvalidMappingError(MusicBytesError, ValueError):
    """A pitch-mapping callback got a raw field out of range or returned a non-Tone."""
