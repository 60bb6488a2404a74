"""Tests for checksum functions."""

from pelcode.protocol.checksums import (
    calculate_checksum,
    frame_checksum,
    validate_checksum,
)


class TestChecksums:
    """Tests for checksum calculation and validation."""

    def test_calculate_checksum_basic(self):
        """Test checksum over address, commands and value bytes."""
        data = bytes([0x01, 0x00, 0x51, 0x00, 0x00])
        assert calculate_checksum(data) == 0x52

    def test_calculate_checksum_wraps(self):
        """Test that the sum is reduced modulo 256."""
        data = bytes([0xFF, 0xFF])
        # 0xFF + 0xFF = 0x1FE & 0xFF = 0xFE
        assert calculate_checksum(data) == 0xFE

    def test_calculate_checksum_empty(self):
        """Test checksum of empty data."""
        assert calculate_checksum(b"") == 0x00

    def test_frame_checksum_skips_sync(self):
        """Test that the sync byte is not part of the checksum."""
        frame = bytes.fromhex("FF 01 00 73 01 00 00")
        assert frame_checksum(frame) == 0x75

    def test_validate_checksum_valid(self):
        """Test validation of a correct frame."""
        assert validate_checksum(bytes.fromhex("FF 01 00 51 00 00 52")) is True

    def test_validate_checksum_invalid(self):
        """Test validation of a frame with a wrong checksum."""
        assert validate_checksum(bytes.fromhex("FF 01 00 51 00 00 53")) is False

    def test_validate_checksum_short_frame(self):
        """Test that short frames never validate."""
        assert validate_checksum(bytes.fromhex("FF 01 00 51 00 00")) is False
