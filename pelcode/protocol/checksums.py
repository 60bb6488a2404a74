"""
8-bit additive checksum calculation and validation.

Pelco-D uses a simple additive checksum:
- Sum the address, command and value bytes (everything except sync)
- Keep only the lower 8 bits (modulo 256)

The checksum occupies the last byte of the frame.
"""

from __future__ import annotations

from pelcode.protocol.constants import ProtocolConstants


def calculate_checksum(data: bytes | bytearray | memoryview) -> int:
    """
    Calculate 8-bit additive checksum over the specified data.

    Args:
        data: Bytes to checksum (address through value-low).

    Returns:
        8-bit checksum value (0-255).

    Example:
        >>> calculate_checksum(b"\\x01\\x00\\x51\\x00\\x00")
        82
    """
    return sum(data) & 0xFF


def frame_checksum(frame: bytes | bytearray | memoryview) -> int:
    """
    Calculate the checksum a frame should carry.

    Args:
        frame: A frame of at least CHECKSUM_INDEX bytes.

    Returns:
        Checksum over bytes 1 through 5.
    """
    return calculate_checksum(
        frame[ProtocolConstants.ADDRESS_INDEX : ProtocolConstants.CHECKSUM_INDEX]
    )


def validate_checksum(frame: bytes | bytearray | memoryview) -> bool:
    """
    Validate that the checksum byte in a frame matches its contents.

    Args:
        frame: Complete frame including the checksum byte.

    Returns:
        True if checksum is valid, False otherwise (including short frames).
    """
    if len(frame) != ProtocolConstants.FRAME_LENGTH:
        return False
    return frame[ProtocolConstants.CHECKSUM_INDEX] == frame_checksum(frame)
