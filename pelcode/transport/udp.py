"""
UDP datagram transport.

Pelco-DE over IP carries each 7-byte frame in its own UDP datagram. The
device host name is resolved once when the transport is opened and the
resulting endpoint is kept until the transport is closed.

Reads block until a datagram arrives unless a timeout is configured.

Example:
    >>> transport = UdpTransport("192.168.1.50", 6000)
    >>> with transport:
    ...     transport.write(frame)
    ...     reply = transport.read_frame(7)
"""

from __future__ import annotations

import logging
import socket
from typing import Final

from pelcode.exceptions import TimeoutError, TransportError
from pelcode.models import Endpoint
from pelcode.transport.abc import AbstractTransport

logger = logging.getLogger(__name__)

# Larger than any valid frame so oversized replies reach the decoder intact
RECEIVE_BUFFER_SIZE: Final[int] = 1024


class UdpTransport(AbstractTransport):
    """
    Blocking UDP transport bound to a single device endpoint.

    Attributes:
        endpoint: Resolved device endpoint (None until opened).
        timeout: Read deadline in seconds, or None to block indefinitely.
    """

    def __init__(self, host: str, port: int, timeout: float | None = None) -> None:
        """
        Initialize the UDP transport.

        Args:
            host: Device host name or IPv4 address.
            port: Device UDP port.
            timeout: Read deadline in seconds. None blocks until a reply.
        """
        self._host = host
        self._port = port
        self._timeout = timeout
        self._endpoint: Endpoint | None = None
        self._socket: socket.socket | None = None

    @property
    def is_open(self) -> bool:
        """Check if the socket is open."""
        return self._socket is not None

    @property
    def endpoint_name(self) -> str:
        if self._endpoint is not None:
            return str(self._endpoint)
        return f"{self._host}:{self._port}"

    @property
    def endpoint(self) -> Endpoint | None:
        """Resolved device endpoint, available once opened."""
        return self._endpoint

    @property
    def timeout(self) -> float | None:
        return self._timeout

    def open(self) -> None:
        """
        Resolve the device address and open a UDP socket.

        Raises:
            TransportError: If the host cannot be resolved or the socket
                cannot be created.
        """
        if self.is_open:
            return

        endpoint = Endpoint.resolve(self._host, self._port)
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        except OSError as e:
            raise TransportError(f"Failed to open UDP socket for {endpoint}: {e}") from e
        sock.settimeout(self._timeout)

        self._endpoint = endpoint
        self._socket = sock
        logger.debug("Opened UDP transport to %s", endpoint)

    def close(self) -> None:
        """Close the socket. Safe to call multiple times."""
        if self._socket is not None:
            self._socket.close()
            logger.debug("Closed UDP transport to %s", self.endpoint_name)
        self._socket = None

    def write(self, data: bytes) -> None:
        """
        Send one datagram to the device.

        Raises:
            TransportError: If the socket is not open or the send fails.
        """
        if self._socket is None or self._endpoint is None:
            raise TransportError("UDP transport is not open")

        try:
            self._socket.sendto(data, self._endpoint.sockaddr)
        except OSError as e:
            raise TransportError(f"Send to {self._endpoint} failed: {e}") from e

    def read_frame(self, size: int) -> bytes:
        """
        Receive one datagram.

        The datagram is returned whole, whatever its length; ``size`` only
        documents the expected frame length.

        Raises:
            TimeoutError: If a timeout is configured and no datagram arrives.
            TransportError: If the socket is not open or the receive fails.
        """
        if self._socket is None:
            raise TransportError("UDP transport is not open")

        try:
            data, sender = self._socket.recvfrom(max(size, RECEIVE_BUFFER_SIZE))
        except socket.timeout:
            raise TimeoutError(
                f"No reply from {self.endpoint_name}",
                timeout_seconds=self._timeout,
            ) from None
        except OSError as e:
            raise TransportError(f"Receive from {self.endpoint_name} failed: {e}") from e

        if self._endpoint is not None and sender[0] != self._endpoint.ip:
            logger.debug("Reply from %s:%d, expected %s", sender[0], sender[1], self._endpoint)
        return data

    def __repr__(self) -> str:
        status = "open" if self.is_open else "closed"
        return f"UdpTransport({self.endpoint_name!r}, {status})"
