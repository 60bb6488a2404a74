"""
Command catalog for Pelco-DE position and sensor commands.

Each logical operation is a Command member that knows its request opcode,
the response opcode the device answers with, and whether the request
carries an outbound 16-bit value (set-style) or only returns one
(get-style).

Example:
    >>> Command.GET_PAN_STEPS.opcode
    81
    >>> Command.SET_TILT_STEPS.carries_value
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pelcode.protocol.constants import RequestCode, ResponseCode


@dataclass(frozen=True)
class CommandDefinition:
    """Opcodes and value direction for one logical command."""

    request: RequestCode
    response: ResponseCode
    carries_value: bool = False


class Command(Enum):
    """Logical operations supported by Pelco-DE positioners."""

    GET_PAN_STEPS = CommandDefinition(RequestCode.GET_PAN_STEPS, ResponseCode.PAN_STEPS)
    GET_TILT_STEPS = CommandDefinition(RequestCode.GET_TILT_STEPS, ResponseCode.TILT_STEPS)
    GET_PAN_MAX_STEPS = CommandDefinition(
        RequestCode.GET_PAN_MAX_STEPS, ResponseCode.PAN_MAX_STEPS
    )
    GET_TILT_MAX_STEPS = CommandDefinition(
        RequestCode.GET_TILT_MAX_STEPS, ResponseCode.TILT_MAX_STEPS
    )
    SET_PAN_STEPS = CommandDefinition(
        RequestCode.SET_PAN_STEPS, ResponseCode.SET_STEPS_ACK, carries_value=True
    )
    SET_TILT_STEPS = CommandDefinition(
        RequestCode.SET_TILT_STEPS, ResponseCode.SET_STEPS_ACK, carries_value=True
    )
    GET_TEMPERATURE = CommandDefinition(RequestCode.GET_TEMPERATURE, ResponseCode.TEMPERATURE)
    GET_VOLTAGE = CommandDefinition(RequestCode.GET_VOLTAGE, ResponseCode.VOLTAGE)

    @property
    def opcode(self) -> int:
        """Request opcode placed in the command-2 field."""
        return int(self.value.request)

    @property
    def response_opcode(self) -> int:
        """Opcode the device is expected to answer with."""
        return int(self.value.response)

    @property
    def carries_value(self) -> bool:
        """True for set-style commands that send a 16-bit value."""
        return self.value.carries_value

    @classmethod
    def from_opcode(cls, opcode: int) -> Command:
        """
        Look up a command by its request opcode.

        Args:
            opcode: Request opcode byte.

        Returns:
            The matching Command.

        Raises:
            ValueError: If no command uses this opcode.
        """
        for command in cls:
            if command.opcode == opcode:
                return command
        raise ValueError(f"Unknown request opcode 0x{opcode:02X}")
