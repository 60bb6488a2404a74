"""
Protocol layer for Pelco-DE communication.

This module contains the low-level protocol handling:
- Opcodes and protocol constants
- Command catalog
- Checksum calculation and validation
- Frame encoding and decoding
"""

from pelcode.protocol.checksums import calculate_checksum, frame_checksum, validate_checksum
from pelcode.protocol.commands import Command, CommandDefinition
from pelcode.protocol.constants import ProtocolConstants, RequestCode, ResponseCode
from pelcode.protocol.frame import Frame, decode, encode

__all__ = [
    # Constants
    "ProtocolConstants",
    "RequestCode",
    "ResponseCode",
    # Commands
    "Command",
    "CommandDefinition",
    # Checksums
    "calculate_checksum",
    "frame_checksum",
    "validate_checksum",
    # Frames
    "Frame",
    "encode",
    "decode",
]
