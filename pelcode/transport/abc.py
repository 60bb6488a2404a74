"""
Abstract transport interface for Pelco-DE communication.

This module defines the abstract base class for all transport implementations.
Transports handle the low-level communication with devices over UDP
sockets, serial ports or test doubles.

The transport layer is responsible for:
- Resolving and holding the device endpoint
- Opening/closing the underlying socket or port
- Writing one frame and reading one frame, blocking

Implementations:
- UdpTransport: UDP datagrams via the socket module
- SerialTransport: RS-485 serial port via pyserial
- MockTransport: For testing without hardware
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types import TracebackType


class AbstractTransport(ABC):
    """
    Abstract base class for Pelco-DE transports.

    Transports provide blocking write/read operations for exchanging
    fixed-length frames with a single device. A transport is owned by one
    device and must not be shared between threads.

    Transports support the context manager protocol for safe resource
    management:

        with UdpTransport("192.168.1.50", 6000) as transport:
            transport.write(frame)
            reply = transport.read_frame(7)

    Attributes:
        is_open: Whether the transport is currently open.
        endpoint_name: Identifier for the device endpoint.
    """

    @property
    @abstractmethod
    def is_open(self) -> bool:
        """
        Check if the transport is currently open.

        Returns:
            True if ready for I/O, False otherwise.
        """
        ...

    @property
    @abstractmethod
    def endpoint_name(self) -> str:
        """
        Get the endpoint identifier.

        Returns:
            Address or port string (e.g., "192.168.1.50:6000", "/dev/ttyUSB0").
        """
        ...

    @abstractmethod
    def open(self) -> None:
        """
        Open the transport.

        Raises:
            TransportError: If the endpoint cannot be resolved or opened.
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """
        Close the transport.

        Safe to call multiple times (idempotent).
        """
        ...

    @abstractmethod
    def write(self, data: bytes) -> None:
        """
        Send one frame to the device endpoint.

        Args:
            data: Complete frame bytes.

        Raises:
            TransportError: If the transport is not open or the send fails.
        """
        ...

    @abstractmethod
    def read_frame(self, size: int) -> bytes:
        """
        Block until one frame arrives from the device.

        Datagram transports return exactly one datagram, whatever its
        length; stream transports return exactly ``size`` bytes. Length
        checking is left to the frame decoder.

        Args:
            size: Expected frame length in bytes.

        Returns:
            The received bytes.

        Raises:
            TimeoutError: If a read deadline is configured and expires.
            TransportError: If the transport is not open or the read fails.
        """
        ...

    def __enter__(self) -> AbstractTransport:
        """Context manager entry - opens the transport."""
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Context manager exit - closes the transport."""
        self.close()
