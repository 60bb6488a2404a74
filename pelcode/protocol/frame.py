"""
Pelco-DE frame encoding and decoding.

Every request and reply is a fixed 7-byte frame:

    Offset  Field       Value
    0       Sync        0xFF
    1       Address     device address (0x01 by default)
    2       Command-1   0x00
    3       Command-2   opcode
    4       Value high  (value >> 8) & 0xFF
    5       Value low   value & 0xFF
    6       Checksum    sum of bytes 1..5, modulo 256

Decoding is lenient by default: only the length is checked and the value
field is read back. Strict decoding is an explicit opt-in that also
verifies the sync byte and checksum.
"""

from __future__ import annotations

from dataclasses import dataclass

from pelcode.exceptions import ChecksumError, MalformedFrameError
from pelcode.protocol.checksums import calculate_checksum, frame_checksum
from pelcode.protocol.constants import ProtocolConstants

_C = ProtocolConstants


@dataclass(frozen=True)
class Frame:
    """
    A single Pelco-DE frame.

    Attributes:
        address: Device address byte.
        command1: Command-1 byte (0x00 for extended commands).
        command2: Opcode byte.
        value: 16-bit value carried big-endian in bytes 4-5.
        checksum: Checksum byte as carried on the wire.
        sync: Synchronization byte as carried on the wire.
    """

    address: int
    command1: int
    command2: int
    value: int
    checksum: int
    sync: int = _C.SYNC

    @property
    def opcode(self) -> int:
        """Alias for the command-2 field."""
        return self.command2

    @property
    def value_high(self) -> int:
        return (self.value >> 8) & 0xFF

    @property
    def value_low(self) -> int:
        return self.value & 0xFF

    @property
    def expected_checksum(self) -> int:
        """Checksum computed from the frame's fields."""
        return calculate_checksum(
            bytes([self.address, self.command1, self.command2, self.value_high, self.value_low])
        )

    @property
    def is_valid(self) -> bool:
        """True if the sync byte and checksum are both correct."""
        return self.sync == _C.SYNC and self.checksum == self.expected_checksum

    def to_bytes(self) -> bytes:
        """Serialize to the 7-byte wire format."""
        return bytes(
            [
                self.sync,
                self.address,
                self.command1,
                self.command2,
                self.value_high,
                self.value_low,
                self.checksum,
            ]
        )

    def hex(self) -> str:
        """Space-separated uppercase hex, e.g. ``FF 01 00 51 00 00 52``."""
        return self.to_bytes().hex(" ").upper()

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> Frame:
        """
        Build a Frame from received bytes without validating its contents.

        Args:
            data: Exactly FRAME_LENGTH bytes.

        Returns:
            Frame with fields copied from the input.

        Raises:
            MalformedFrameError: If data is not exactly FRAME_LENGTH bytes.
        """
        raw = bytes(data)
        if len(raw) != _C.FRAME_LENGTH:
            raise MalformedFrameError(
                f"Expected {_C.FRAME_LENGTH}-byte frame, got {len(raw)} bytes",
                data=raw,
            )
        return cls(
            sync=raw[_C.SYNC_INDEX],
            address=raw[_C.ADDRESS_INDEX],
            command1=raw[_C.COMMAND1_INDEX],
            command2=raw[_C.COMMAND2_INDEX],
            value=(raw[_C.VALUE_HIGH_INDEX] << 8) | raw[_C.VALUE_LOW_INDEX],
            checksum=raw[_C.CHECKSUM_INDEX],
        )

    def __repr__(self) -> str:
        return f"Frame({self.hex()})"


def encode(opcode: int, value: int = 0, address: int = _C.DEFAULT_ADDRESS) -> Frame:
    """
    Build a request frame for an opcode and optional 16-bit value.

    Command-1 is fixed at 0x00. Inputs are masked to their field widths.

    Args:
        opcode: Opcode for the command-2 field.
        value: 16-bit value, sent big-endian.
        address: Device address byte.

    Returns:
        Frame with its checksum filled in.

    Example:
        >>> encode(0x51).hex()
        'FF 01 00 51 00 00 52'
    """
    address &= 0xFF
    opcode &= 0xFF
    value &= _C.MAX_VALUE
    checksum = calculate_checksum(
        bytes([address, _C.COMMAND1, opcode, value >> 8, value & 0xFF])
    )
    return Frame(
        address=address,
        command1=_C.COMMAND1,
        command2=opcode,
        value=value,
        checksum=checksum,
    )


def decode(data: bytes | bytearray | memoryview, *, strict: bool = False) -> int:
    """
    Extract the 16-bit value from a received frame.

    Lenient mode (the default) checks only the length. Strict mode also
    requires the sync byte and the checksum to be correct.

    Args:
        data: Received bytes.
        strict: Validate sync byte and checksum.

    Returns:
        ``(data[4] << 8) | data[5]``.

    Raises:
        MalformedFrameError: If data is not exactly 7 bytes, or in strict
            mode if the sync byte is wrong.
        ChecksumError: In strict mode, if the checksum does not match.
    """
    raw = bytes(data)
    if len(raw) != _C.FRAME_LENGTH:
        raise MalformedFrameError(
            f"Expected {_C.FRAME_LENGTH}-byte frame, got {len(raw)} bytes",
            data=raw,
        )

    if strict:
        if raw[_C.SYNC_INDEX] != _C.SYNC:
            raise MalformedFrameError(
                f"Bad sync byte 0x{raw[_C.SYNC_INDEX]:02X}", data=raw
            )
        expected = frame_checksum(raw)
        received = raw[_C.CHECKSUM_INDEX]
        if expected != received:
            raise ChecksumError(expected=expected, received=received, data=raw)

    return (raw[_C.VALUE_HIGH_INDEX] << 8) | raw[_C.VALUE_LOW_INDEX]
