"""
Transport layer for Pelco-DE communication.

This package provides transport implementations for exchanging frames
with PTZ positioners.

Available transports:
- UdpTransport: UDP datagrams, one frame per datagram
- SerialTransport: RS-485 serial port using pyserial
- MockTransport: Mock transport for testing without hardware

Example:
    >>> from pelcode.transport import UdpTransport
    >>> with UdpTransport("192.168.1.50", 6000) as transport:
    ...     transport.write(frame)
    ...     reply = transport.read_frame(7)

Testing Example:
    >>> from pelcode.transport import MockTransport
    >>> mock = MockTransport()
    >>> mock.add_reply(3600)
"""

from pelcode.transport.abc import AbstractTransport
from pelcode.transport.mock import MockTransport, ScriptedMockTransport
from pelcode.transport.serial_port import SerialTransport
from pelcode.transport.udp import UdpTransport

__all__ = [
    "AbstractTransport",
    "UdpTransport",
    "SerialTransport",
    "MockTransport",
    "ScriptedMockTransport",
]
