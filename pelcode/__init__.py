"""
pelcode - Python client for Pelco-D / Pelco-DE pan-tilt positioners.

This library builds fixed-length Pelco-DE command frames, exchanges them
with a device over UDP (or an RS-485 serial port) and decodes the replies
into pan/tilt positions, temperature and voltage readings.

Example:
    >>> from pelcode import PelcoDEDeviceUDP
    >>>
    >>> with PelcoDEDeviceUDP("192.168.1.50", 6000) as device:
    ...     device.set_pan_degrees(90)
    ...     print(device.get_pan_degrees(), device.get_temperature())
"""

from pelcode.devices import (
    AbstractPelcoDevice,
    PelcoDEDevice,
    PelcoDEDeviceSerial,
    PelcoDEDeviceUDP,
)
from pelcode.exceptions import (
    CalibrationError,
    ChecksumError,
    MalformedFrameError,
    NotSupportedError,
    PelcoError,
    ProtocolError,
    TimeoutError,
    TransportError,
    UnexpectedResponseError,
)
from pelcode.models import Calibration, DeviceSettings, Endpoint
from pelcode.protocol import Command, Frame, decode, encode
from pelcode.transceiver import Transceiver
from pelcode.transport import AbstractTransport, SerialTransport, UdpTransport

__version__ = "0.1.0"
__all__ = [
    # Devices
    "AbstractPelcoDevice",
    "PelcoDEDevice",
    "PelcoDEDeviceUDP",
    "PelcoDEDeviceSerial",
    # Exchange
    "Transceiver",
    "Command",
    "Frame",
    "encode",
    "decode",
    # Models
    "Calibration",
    "DeviceSettings",
    "Endpoint",
    # Exceptions
    "PelcoError",
    "NotSupportedError",
    "TransportError",
    "TimeoutError",
    "ProtocolError",
    "MalformedFrameError",
    "ChecksumError",
    "UnexpectedResponseError",
    "CalibrationError",
    # Transport
    "AbstractTransport",
    "UdpTransport",
    "SerialTransport",
    # Version
    "__version__",
]
