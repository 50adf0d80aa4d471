"""Tests for the bit reader and bitstream decoder."""

import pytest

from musicbytes.core import Duration, FileTooSmallError, InvalidMappingError, Tone
from musicbytes.decoding import (
    BitReader,
    BitstreamDecoder,
    decode,
    decode_file,
    max_note_count,
    tempo_from_raw,
)
from musicbytes.mapping import c_major


def bits_to_bytes(bits: str, size: int) -> bytes:
    """Pack a '0'/'1' string MSB-first into `size` bytes, zero padded."""
    bits = bits.ljust(size * 8, "0")
    return int(bits, 2).to_bytes(size, "big")


def recording_mapper(calls):
    """Mapper that remembers the raw fields it was called with."""

    def mapper(pitch_raw, duration_raw, volume_raw):
        calls.append((pitch_raw, duration_raw, volume_raw))
        return Tone.from_raw(60 + pitch_raw, duration_raw, volume_raw)

    return mapper


class UnreadableBitReader:
    """Stand-in for BitReader that fails as soon as it is built."""

    def __init__(self, data):
        raise AssertionError("bits were read")


class TestBitReader:
    """Tests for BitReader."""

    def test_msb_first_fields(self):
        """Fields come out big-endian, first bit most significant."""
        reader = BitReader(b"\xa5")  # 1010 0101
        assert reader.read_bits(3) == 0b101
        assert reader.read_bits(5) == 0b00101
        assert reader.remaining == 0

    def test_field_spanning_bytes(self):
        """A field may cross a byte boundary."""
        reader = BitReader(b"\x0f\xf0")
        assert reader.read_bits(4) == 0
        assert reader.read_bits(8) == 0xFF
        assert reader.read_bits(4) == 0

    def test_single_bits(self):
        reader = BitReader(b"\x80")
        assert reader.read_bit() == 1
        assert [reader.read_bit() for _ in range(7)] == [0] * 7

    def test_position_tracking(self):
        reader = BitReader(bytes(3))
        assert reader.total_bits == 24
        reader.read_bits(5)
        reader.read_bits(7)
        assert reader.position == 12
        assert reader.remaining == 12

    def test_read_past_end(self):
        """Reading beyond the data raises EOFError."""
        reader = BitReader(b"\x00")
        reader.read_bits(6)
        with pytest.raises(EOFError):
            reader.read_bits(3)
        # A failed read consumes nothing
        assert reader.position == 6

    def test_non_positive_width(self):
        with pytest.raises(ValueError):
            BitReader(b"\x00").read_bits(0)


class TestTempo:
    """Tests for tempo derivation."""

    def test_tempo_range(self):
        """Every tempo byte maps into 120-239 bpm."""
        for raw in range(256):
            bpm = tempo_from_raw(raw)
            assert 120 <= bpm <= 239, f"raw {raw} gave {bpm}"

    def test_tempo_from_first_byte(self):
        for raw in (0, 1, 119, 120, 200, 255):
            melody = decode(bytes([raw]) + bytes(14), c_major)
            assert melody.bpm == raw % 120 + 120


class TestBitstreamDecoder:
    """Tests for BitstreamDecoder."""

    def test_all_zero_minimum_file(self):
        """15 zero bytes give 120 bpm and six silent double notes."""
        melody = decode(bytes(15), c_major)

        assert melody.bpm == 120
        assert len(melody) == 6
        for tone in melody:
            assert tone.volume == 0.0
            assert tone.duration is Duration.DOUBLE
            assert tone.pitch == 60

    def test_all_ones_file(self):
        """16 bytes of 0xFF give 135 bpm."""
        melody = decode(b"\xff" * 16, c_major)

        assert melody.bpm == 135
        assert len(melody) == 6
        tone = melody.units[0]
        assert tone.pitch == 62  # 7 % 6 -> D
        assert tone.duration is Duration.THIRTY_SECOND  # 15 % 9 == 6
        assert tone.volume == 255 / 256

    def test_fields_read_back_to_back(self):
        """Payload fields follow each other with no gap between records."""
        bits = (
            "00000101"  # tempo
            + "101" + "0011" + "10000001"
            + "010" + "1100" + "11111111"
        )
        calls = []
        melody = decode(bits_to_bytes(bits, 15), recording_mapper(calls))

        assert melody.bpm == 125
        assert calls[0] == (5, 3, 129)
        assert calls[1] == (2, 12, 255)
        assert calls[2:] == [(0, 0, 0)] * 4

    def test_tones_in_file_order(self):
        calls = []
        melody = decode(bytes(range(40)), recording_mapper(calls))

        assert [tone.pitch for tone in melody] == [60 + call[0] for call in calls]

    def test_record_count_matches_loop_bound(self):
        """max_note_count agrees with what decode produces."""
        for size in range(15, 60):
            melody = decode(bytes(size), c_major)
            assert len(melody) == max_note_count(size), f"size {size}"

    def test_last_bit_never_counted(self):
        """The final bit of the stream is never counted toward a record."""
        # 152 bits: 8 + 8 * 18 == 152 would fit without the reserved bit
        assert len(decode(bytes(19), c_major)) == 7
        assert max_note_count(19) == 7

    def test_minimum_file_record_bound(self):
        assert max_note_count(15) == (120 - 8 - 1) // 18
        assert max_note_count(14) == 0

    def test_file_too_small(self):
        """Sources under 15 bytes are rejected before the mapper runs."""
        calls = []
        with pytest.raises(FileTooSmallError) as excinfo:
            decode(bytes(14), recording_mapper(calls))

        assert excinfo.value.size == 14
        assert excinfo.value.minimum == 15
        assert calls == []

    def test_file_too_small_reads_nothing(self, monkeypatch):
        """The size check comes before any bit reader is created."""
        monkeypatch.setattr("musicbytes.decoding.decoder.BitReader", UnreadableBitReader)
        with pytest.raises(FileTooSmallError):
            decode(bytes(14), c_major)

    def test_mapper_must_return_tone(self):
        """A mapper returning anything but a Tone is an invalid mapping."""
        with pytest.raises(InvalidMappingError, match="expected Tone"):
            decode(bytes(15), lambda p, d, v: (p, d, v))

    def test_mapper_volume_out_of_range(self):
        """A mapper cannot smuggle a volume of 1 or more into a melody."""
        with pytest.raises(ValueError, match="volume"):
            decode(bytes(15), lambda p, d, v: Tone(pitch=69, duration=Duration.QUARTER, volume=1.5))

    def test_melody_is_immutable(self):
        """Decoded melodies cannot be changed."""
        melody = decode(bytes(15), c_major)
        assert isinstance(melody.units, tuple)
        with pytest.raises(AttributeError):
            melody.bpm = 200


class TestDecodeFile:
    """Tests for decoding from disk."""

    def test_decode_file_matches_bytes(self, tmp_path):
        """Decoding a file equals decoding its bytes."""
        data = bytes(range(100, 164))
        path = tmp_path / "input.bin"
        path.write_bytes(data)

        assert decode_file(path, c_major) == decode(data, c_major)
        assert BitstreamDecoder(c_major).decode_file(str(path)) == decode(data, c_major)

    def test_missing_file(self, tmp_path):
        """Read failures surface as OSError."""
        with pytest.raises(OSError):
            decode_file(tmp_path / "missing.bin", c_major)

    def test_small_file_on_disk(self, tmp_path):
        path = tmp_path / "small.bin"
        path.write_bytes(b"x" * 14)
        with pytest.raises(FileTooSmallError, match="at least 15"):
            decode_file(path, c_major)
