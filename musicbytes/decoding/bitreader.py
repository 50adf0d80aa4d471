"""MSB-first bit cursor over byte storage."""


class BitReader:
    """Reads unsigned fields of arbitrary width from a byte string.

    Bits are consumed strictly in order, most significant bit first within
    each byte, with no alignment between fields. A field of width n is
    returned as a big-endian n-bit integer whose first bit read is the most
    significant.

    Usage:
        reader = BitReader(b"\\xa5")
        reader.read_bits(3)  # 0b101 == 5
        reader.read_bits(5)  # 0b00101 == 5
    """

    def __init__(self, data: bytes):
        self._data = bytes(data)
        self._position = 0

    @property
    def position(self) -> int:
        """Number of bits consumed so far."""
        return self._position

    @property
    def total_bits(self) -> int:
        return len(self._data) * 8

    @property
    def remaining(self) -> int:
        """Bits left to read."""
        return self.total_bits - self._position

    def read_bit(self) -> int:
        """Read a single bit (0 or 1)."""
        return self.read_bits(1)

    def read_bits(self, n: int) -> int:
        """
        Read the next n bits as an unsigned integer.

        Args:
            n: Field width in bits (> 0)

        Returns:
            Integer in [0, 2**n)

        Raises:
            ValueError: If n is not positive
            EOFError: If fewer than n bits remain
        """
        if n <= 0:
            raise ValueError(f"Field width must be positive, got {n}")
        if n > self.remaining:
            raise EOFError(
                f"Cannot read {n} bits at offset {self._position}: "
                f"only {self.remaining} left"
            )

        value = 0
        for _ in range(n):
            byte = self._data[self._position >> 3]
            bit = (byte >> (7 - (self._position & 7))) & 1
            value = (value << 1) | bit
            self._position += 1
        return value
