"""
Mock transport for testing.

This module provides a mock transport implementation that allows testing
devices and the transceiver without a network. Replies can be
pre-configured or dynamically generated using callback functions, and
send/receive failures can be injected.

Example:
    >>> from pelcode.transport import MockTransport
    >>> from pelcode.protocol import ResponseCode
    >>>
    >>> mock = MockTransport()
    >>> mock.add_reply(3600, ResponseCode.PAN_MAX_STEPS)
    >>> mock.add_reply(1350, ResponseCode.TILT_MAX_STEPS)
    >>> device = PelcoDEDevice(mock)
"""

from __future__ import annotations

from collections import deque
from typing import Callable

from pelcode.exceptions import TimeoutError, TransportError
from pelcode.protocol.frame import encode
from pelcode.transport.abc import AbstractTransport


class MockTransport(AbstractTransport):
    """
    Mock transport for testing without hardware.

    Each queued response is returned whole by one read_frame() call, the
    way a UDP datagram would be. All written frames are recorded for
    verification.

    Attributes:
        written_data: List of all bytes written to the transport.

    Example:
        >>> mock = MockTransport()
        >>> mock.add_response(bytes.fromhex("FF 01 00 61 01 00 63"))
        >>>
        >>> with mock:
        ...     mock.write(b"test")
        ...     reply = mock.read_frame(7)
        ...     assert mock.written_data == [b"test"]
    """

    def __init__(self, endpoint_name: str = "mock://device") -> None:
        """
        Initialize the mock transport.

        Args:
            endpoint_name: Identifier for the mock transport.
        """
        self._endpoint_name = endpoint_name
        self._is_open = False
        self._responses: deque[bytes | BaseException] = deque()
        self._written_data: list[bytes] = []
        self._write_errors: deque[BaseException] = deque()
        self._response_callback: Callable[[bytes], bytes | None] | None = None

    @property
    def is_open(self) -> bool:
        """Check if the mock transport is open."""
        return self._is_open

    @property
    def endpoint_name(self) -> str:
        """Get the mock endpoint name."""
        return self._endpoint_name

    @property
    def written_data(self) -> list[bytes]:
        """Get all data written to the transport."""
        return self._written_data.copy()

    @property
    def last_written(self) -> bytes | None:
        """Get the most recently written data."""
        return self._written_data[-1] if self._written_data else None

    @property
    def pending_responses(self) -> int:
        """Number of queued responses not yet read."""
        return len(self._responses)

    def add_response(self, response: bytes) -> None:
        """
        Add a raw response to the queue.

        Responses are returned in FIFO order, one per read.

        Args:
            response: Bytes to return on a read.
        """
        self._responses.append(bytes(response))

    def add_responses(self, *responses: bytes) -> None:
        """
        Add multiple raw responses to the queue.

        Args:
            *responses: Multiple byte responses to add.
        """
        for response in responses:
            self.add_response(response)

    def add_reply(self, value: int, opcode: int = 0x00, address: int = 0x01) -> None:
        """
        Queue a well-formed reply frame carrying a value.

        Args:
            value: 16-bit value for the reply.
            opcode: Response opcode for the command-2 field.
            address: Device address byte.
        """
        self.add_response(encode(opcode, value, address=address).to_bytes())

    def add_read_error(self, error: BaseException) -> None:
        """Make a future read raise ``error`` instead of returning data."""
        self._responses.append(error)

    def add_write_error(self, error: BaseException) -> None:
        """Make the next write raise ``error``."""
        self._write_errors.append(error)

    def set_response_callback(
        self,
        callback: Callable[[bytes], bytes | None] | None,
    ) -> None:
        """
        Set a callback to dynamically generate responses.

        The callback receives the written data and should return the response
        bytes. If it returns None, the next queued response is used instead.

        Args:
            callback: Function that takes written bytes and returns response.
        """
        self._response_callback = callback

    def clear(self) -> None:
        """Clear all written data and pending responses."""
        self._written_data.clear()
        self._responses.clear()
        self._write_errors.clear()

    def clear_written(self) -> None:
        """Clear only the written data history."""
        self._written_data.clear()

    def open(self) -> None:
        """Open the mock transport."""
        if self._is_open:
            raise TransportError("Mock transport already open")
        self._is_open = True

    def close(self) -> None:
        """Close the mock transport."""
        self._is_open = False

    def write(self, data: bytes) -> None:
        """
        Write data to the mock transport.

        Records the written data and optionally triggers the response
        callback.

        Raises:
            TransportError: If transport is not open, or an injected error.
        """
        if not self._is_open:
            raise TransportError("Mock transport not open")

        if self._write_errors:
            raise self._write_errors.popleft()

        self._written_data.append(bytes(data))

        if self._response_callback:
            response = self._response_callback(bytes(data))
            if response is not None:
                self._responses.appendleft(bytes(response))

    def read_frame(self, size: int) -> bytes:
        """
        Return the next queued response.

        Raises:
            TimeoutError: If no response is queued.
            TransportError: If transport is not open, or an injected error.
        """
        if not self._is_open:
            raise TransportError("Mock transport not open")

        if not self._responses:
            raise TimeoutError("No mock response available")

        response = self._responses.popleft()
        if isinstance(response, BaseException):
            raise response
        return response

    def assert_written(self, expected: bytes, index: int = -1) -> None:
        """
        Assert that specific data was written.

        Args:
            expected: Expected bytes.
            index: Index in written_data list (-1 for last).

        Raises:
            AssertionError: If data doesn't match.
        """
        if not self._written_data:
            raise AssertionError("No data written to mock transport")

        actual = self._written_data[index]
        if actual != expected:
            raise AssertionError(
                f"Written data mismatch: expected {expected.hex(' ')}, got {actual.hex(' ')}"
            )

    def assert_write_count(self, expected: int) -> None:
        """
        Assert number of write operations.

        Raises:
            AssertionError: If count doesn't match.
        """
        actual = len(self._written_data)
        if actual != expected:
            raise AssertionError(f"Write count mismatch: expected {expected}, got {actual}")


class ScriptedMockTransport(MockTransport):
    """
    Mock transport with scripted request/response pairs.

    Each write is checked against the next expected request (if given)
    and queues the paired response.

    Example:
        >>> mock = ScriptedMockTransport()
        >>> mock.expect(request=bytes.fromhex("FF 01 00 55 00 00 56"), response=reply)
    """

    def __init__(self, endpoint_name: str = "mock://scripted") -> None:
        super().__init__(endpoint_name)
        self._script: list[tuple[bytes | None, bytes]] = []
        self._script_index = 0

    @property
    def script_complete(self) -> bool:
        """True once every scripted request has been written."""
        return self._script_index >= len(self._script)

    def expect(
        self,
        response: bytes,
        request: bytes | None = None,
    ) -> None:
        """
        Add an expected request/response pair.

        Args:
            response: Response to return.
            request: Expected request (None to match any).
        """
        self._script.append((request, bytes(response)))

    def write(self, data: bytes) -> None:
        """Write with script validation."""
        if not self._is_open:
            raise TransportError("Mock transport not open")

        self._written_data.append(bytes(data))

        if self._script_index < len(self._script):
            expected_request, response = self._script[self._script_index]

            if expected_request is not None and data != expected_request:
                raise AssertionError(
                    f"Script mismatch at step {self._script_index}: "
                    f"expected {expected_request.hex(' ')}, got {bytes(data).hex(' ')}"
                )

            self._responses.append(response)
            self._script_index += 1

    def reset_script(self) -> None:
        """Reset script to beginning."""
        self._script_index = 0
        self._responses.clear()

    def clear_script(self) -> None:
        """Clear all scripted expectations."""
        self._script.clear()
        self._script_index = 0
