"""
Serial transport using pyserial.

Pelco-D was designed for RS-485 links; many positioners that speak the
extended Pelco-DE commands over UDP accept the same frames on their
serial port. This transport exchanges frames over such a link.

Serial Configuration:
- Baud rate: 9600 (default; 2400 and 4800 are also common)
- Data bits: 8
- Parity: None
- Stop bits: 1
- Flow control: None

Example:
    >>> transport = SerialTransport("/dev/ttyUSB0")
    >>> with transport:
    ...     transport.write(frame)
    ...     reply = transport.read_frame(7)
"""

from __future__ import annotations

import logging

import serial

from pelcode.exceptions import TimeoutError, TransportError
from pelcode.protocol.constants import ProtocolConstants
from pelcode.transport.abc import AbstractTransport

logger = logging.getLogger(__name__)


class SerialTransport(AbstractTransport):
    """
    Blocking serial transport for RS-485 Pelco-D links.

    Attributes:
        endpoint_name: Serial port path (e.g., "/dev/ttyUSB0", "COM3").
        is_open: Whether the port is currently open.
    """

    def __init__(
        self,
        port: str,
        baudrate: int = ProtocolConstants.DEFAULT_BAUD_RATE,
        timeout: float | None = None,
    ) -> None:
        """
        Initialize the serial transport.

        Args:
            port: Serial port path (e.g., "/dev/ttyUSB0", "COM3") or a
                pyserial URL such as "rfc2217://host:port" or "loop://".
            baudrate: Baud rate (default: 9600).
            timeout: Read deadline in seconds. None blocks until a full frame.
        """
        self._port = port
        self._baudrate = baudrate
        self._timeout = timeout
        self._serial: serial.Serial | None = None

    @property
    def is_open(self) -> bool:
        """Check if the serial port is currently open."""
        return self._serial is not None and self._serial.is_open

    @property
    def endpoint_name(self) -> str:
        """Get the serial port path."""
        return self._port

    @property
    def baudrate(self) -> int:
        """Get the configured baud rate."""
        return self._baudrate

    def open(self) -> None:
        """
        Open the serial port.

        Raises:
            TransportError: If the port cannot be opened.
        """
        if self.is_open:
            return

        try:
            self._serial = serial.serial_for_url(
                self._port,
                baudrate=self._baudrate,
                bytesize=serial.EIGHTBITS,
                parity=serial.PARITY_NONE,
                stopbits=serial.STOPBITS_ONE,
                timeout=self._timeout,
                xonxoff=False,
                rtscts=False,
                dsrdtr=False,
            )
        except serial.SerialException as e:
            raise TransportError(f"Failed to open serial port {self._port}: {e}") from e
        except OSError as e:
            raise TransportError(f"OS error opening {self._port}: {e}") from e

        logger.debug("Opened serial port %s at %d baud", self._port, self._baudrate)

    def close(self) -> None:
        """Close the serial port. Safe to call multiple times."""
        if self._serial is not None:
            self._serial.close()
            logger.debug("Closed serial port %s", self._port)
        self._serial = None

    def write(self, data: bytes) -> None:
        """
        Write one frame to the serial port.

        Raises:
            TransportError: If the port is not open or the write fails.
        """
        if not self.is_open:
            raise TransportError("Serial port is not open")

        try:
            self._serial.write(data)
            self._serial.flush()
        except serial.SerialException as e:
            raise TransportError(f"Write to {self._port} failed: {e}") from e

    def read_frame(self, size: int) -> bytes:
        """
        Read exactly ``size`` bytes from the serial port.

        Raises:
            TimeoutError: If a timeout is configured and fewer bytes arrive.
            TransportError: If the port is not open or the read fails.
        """
        if not self.is_open:
            raise TransportError("Serial port is not open")

        try:
            data = self._serial.read(size)
        except serial.SerialException as e:
            raise TransportError(f"Read from {self._port} failed: {e}") from e

        if len(data) < size:
            raise TimeoutError(
                f"Timeout waiting for {size} bytes from {self._port}, got {len(data)}",
                timeout_seconds=self._timeout,
            )
        return data

    def __repr__(self) -> str:
        status = "open" if self.is_open else "closed"
        return f"SerialTransport({self._port!r}, baudrate={self._baudrate}, {status})"
