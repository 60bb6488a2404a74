"""
Request/response exchange over a transport.

The Transceiver performs one synchronous exchange per call:

    encode -> write -> blocking read -> decode

There are no sequence numbers in Pelco-DE, so replies are matched to
requests purely by order. Only one exchange may be in flight at a time and
a transceiver must not be used from several threads without external
locking.

Example:
    >>> transceiver = Transceiver(UdpTransport("192.168.1.50", 6000))
    >>> transceiver.transport.open()
    >>> transceiver.exchange(Command.GET_PAN_STEPS)
    1800
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pelcode.exceptions import ProtocolError, TransportError, UnexpectedResponseError
from pelcode.protocol.constants import ProtocolConstants
from pelcode.protocol.frame import decode, encode

if TYPE_CHECKING:
    from pelcode.protocol.commands import Command
    from pelcode.transport.abc import AbstractTransport

# Module logger
logger = logging.getLogger(__name__)


class Transceiver:
    """
    Sends one command frame and returns the value from the reply.

    Attributes:
        transport: The transport frames are exchanged over.
        address: Device address placed in every request.
        strict: Validate reply sync byte, checksum and response opcode.
    """

    def __init__(
        self,
        transport: AbstractTransport,
        address: int = ProtocolConstants.DEFAULT_ADDRESS,
        strict: bool = False,
    ) -> None:
        """
        Initialize the transceiver.

        Args:
            transport: Transport to exchange frames over. Opened by the caller.
            address: Device address byte (0-255).
            strict: Opt in to reply validation. Lenient by default, where any
                7-byte reply is accepted and only its value field is read.
        """
        if not 0 <= address <= 0xFF:
            raise ValueError(f"Address must be 0-255, got {address}")
        self._transport = transport
        self._address = address
        self._strict = strict

    @property
    def transport(self) -> AbstractTransport:
        """Get the underlying transport."""
        return self._transport

    @property
    def address(self) -> int:
        return self._address

    @property
    def strict(self) -> bool:
        return self._strict

    def exchange(self, command: Command, value: int = 0) -> int:
        """
        Send a command and return the 16-bit value of the reply.

        Args:
            command: Command to send.
            value: Value for set-style commands. Must be 0 for get-style ones.

        Returns:
            Value field of the reply (0-65535).

        Raises:
            TypeError: If value is not an integer.
            ValueError: If value is out of range or given to a get-style command.
            TransportError: If the send or receive fails.
            MalformedFrameError: If the reply is not exactly 7 bytes.
            ChecksumError: In strict mode, if the reply checksum is wrong.
            UnexpectedResponseError: In strict mode, if the reply opcode does
                not match the command.
        """
        if not isinstance(value, int):
            raise TypeError(f"Value must be an int, got {type(value).__name__}")
        if not 0 <= value <= ProtocolConstants.MAX_VALUE:
            raise ValueError(f"Value must be 0-{ProtocolConstants.MAX_VALUE}, got {value}")
        if value and not command.carries_value:
            raise ValueError(f"{command.name} does not carry a value")

        request = encode(command.opcode, value, address=self._address)
        logger.debug("%s -> %s: %s", command.name, self._transport.endpoint_name, request.hex())

        try:
            self._transport.write(request.to_bytes())
        except TransportError:
            raise
        except OSError as e:
            raise TransportError(f"Send failed: {e}") from e

        try:
            reply = self._transport.read_frame(ProtocolConstants.FRAME_LENGTH)
        except TransportError:
            raise
        except OSError as e:
            raise TransportError(f"Receive failed: {e}") from e

        logger.debug(
            "%s <- %s: %s",
            command.name,
            self._transport.endpoint_name,
            reply.hex(" ").upper(),
        )

        try:
            result = decode(reply, strict=self._strict)
        except ProtocolError as e:
            logger.warning(
                "%s: rejected reply %s: %s", command.name, reply.hex(" ").upper(), e
            )
            raise
        if self._strict:
            received = reply[ProtocolConstants.COMMAND2_INDEX]
            if received != command.response_opcode:
                logger.warning(
                    "%s: unexpected response opcode 0x%02X", command.name, received
                )
                raise UnexpectedResponseError(command.response_opcode, received)
        return result

    def __repr__(self) -> str:
        mode = "strict" if self._strict else "lenient"
        return f"Transceiver({self._transport!r}, address={self._address}, {mode})"
