"""
Pelco-DE protocol constants and opcodes.

This module defines all opcode bytes and protocol constants used in
Pelco-DE communication with PTZ positioners.

Opcode Categories:
- 0x51-0x57: Position queries (current and maximum steps)
- 0x61-0x67: Position query responses
- 0x71-0x7C: Position commands and their acknowledgment
- 0x91-0xAB: Sensor queries (temperature, voltage) and responses
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final


class RequestCode(IntEnum):
    """
    Request opcodes placed in the command-2 field of an outbound frame.
    """

    GET_PAN_STEPS = 0x51
    """Request current pan position in steps."""

    GET_TILT_STEPS = 0x53
    """Request current tilt position in steps."""

    GET_PAN_MAX_STEPS = 0x55
    """Request number of steps in a full pan range."""

    GET_TILT_MAX_STEPS = 0x57
    """Request number of steps in a full tilt range."""

    SET_PAN_STEPS = 0x71
    """Move pan axis to an absolute step position."""

    SET_TILT_STEPS = 0x73
    """Move tilt axis to an absolute step position."""

    GET_TEMPERATURE = 0x91
    """Request device temperature."""

    GET_VOLTAGE = 0x9B
    """Request supply voltage in hundredths of a volt."""


class ResponseCode(IntEnum):
    """
    Response opcodes carried in the command-2 field of a reply.

    Replies are decoded without inspecting these unless strict
    validation is enabled.
    """

    PAN_STEPS = 0x61
    TILT_STEPS = 0x63
    PAN_MAX_STEPS = 0x65
    TILT_MAX_STEPS = 0x67

    SET_STEPS_ACK = 0x7C
    """Shared acknowledgment for both SET_PAN_STEPS and SET_TILT_STEPS."""

    TEMPERATURE = 0xA1
    VOLTAGE = 0xAB


class ProtocolConstants:
    """
    Pelco-DE protocol constants.

    Contains frame layout, field offsets, default device parameters and
    value ranges used throughout the protocol implementation.
    """

    # ===== Frame Layout =====

    SYNC: Final[int] = 0xFF
    """Synchronization byte that starts every frame."""

    DEFAULT_ADDRESS: Final[int] = 0x01
    """Device address used unless configured otherwise."""

    COMMAND1: Final[int] = 0x00
    """Command-1 field value (unused by the Pelco-DE extended commands)."""

    FRAME_LENGTH: Final[int] = 7
    """Every request and reply is exactly 7 bytes."""

    # ===== Field Offsets =====

    SYNC_INDEX: Final[int] = 0
    ADDRESS_INDEX: Final[int] = 1
    COMMAND1_INDEX: Final[int] = 2
    COMMAND2_INDEX: Final[int] = 3
    VALUE_HIGH_INDEX: Final[int] = 4
    VALUE_LOW_INDEX: Final[int] = 5
    CHECKSUM_INDEX: Final[int] = 6

    # ===== Value Ranges =====

    MAX_VALUE: Final[int] = 0xFFFF
    """Largest value that fits in the 16-bit value field."""

    # ===== Device Defaults =====

    DEFAULT_MAX_PAN_DEGREES: Final[int] = 360
    """Pan range assumed when calibrating, in degrees."""

    DEFAULT_MAX_TILT_DEGREES: Final[int] = 135
    """Tilt range assumed when calibrating, in degrees."""

    PAN_WRAP_DEGREES: Final[int] = 360
    """Pan degree inputs are reduced modulo this value."""

    TILT_WRAP_DEGREES: Final[int] = 135
    """Tilt degree inputs are reduced modulo this value."""

    VOLTAGE_SCALE: Final[float] = 100.0
    """Raw voltage readings are in hundredths of a volt."""

    # ===== Serial Defaults =====

    DEFAULT_BAUD_RATE: Final[int] = 9600
    """Common Pelco-D baud rate on RS-485 links."""
