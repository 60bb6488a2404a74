"""
Exception hierarchy for pelcode.

All exceptions inherit from PelcoError, providing a clean hierarchy
for error handling:

1. Transport errors (socket/serial I/O) are distinct from protocol errors
2. Protocol errors carry the offending bytes or opcodes where known
3. Calibration failures are raised at device construction, not on first use
4. Unsupported device capabilities raise NotSupportedError
"""

from __future__ import annotations


class PelcoError(Exception):
    """
    Base exception for all pelcode errors.

    All library-specific exceptions inherit from this class, allowing
    callers to catch all pelcode errors with a single except clause.
    """

    pass


class NotSupportedError(PelcoError):
    """
    Operation not supported by this device variant.

    Raised by the default implementation of every AbstractPelcoDevice
    operation. Variants override only the operations they support.
    """

    def __init__(self, operation: str, device: str | None = None) -> None:
        self.operation = operation
        self.device = device
        if device:
            message = f"{operation} is not supported by {device}"
        else:
            message = f"{operation} is not supported"
        super().__init__(message)


class TransportError(PelcoError):
    """
    Transport-level error.

    Raised for low-level transport issues:
    - Host resolution failures
    - Socket or serial port errors
    - Send or receive failures

    The underlying I/O exception is available as ``__cause__``.
    """

    pass


class TimeoutError(TransportError):  # noqa: A001 - intentionally shadows builtin
    """
    Reply not received before the configured read deadline.

    Only raised when a transport is created with a timeout. By default
    transports block until a reply arrives.
    """

    def __init__(
        self,
        message: str = "Timed out waiting for reply",
        *,
        timeout_seconds: float | None = None,
    ) -> None:
        super().__init__(message)
        self.timeout_seconds = timeout_seconds

    def __str__(self) -> str:
        base = super().__str__()
        if self.timeout_seconds is not None:
            return f"{base} (after {self.timeout_seconds:.1f}s)"
        return base


class ProtocolError(PelcoError):
    """
    Protocol-level error.

    Raised when a reply violates the Pelco-DE frame format.
    """

    pass


class MalformedFrameError(ProtocolError):
    """
    Received byte sequence is not a well-formed frame.

    Raised when a reply is not exactly the fixed frame length, or, in
    strict mode, when its sync byte is wrong.
    """

    def __init__(self, message: str, *, data: bytes | None = None) -> None:
        super().__init__(message)
        self.data = data

    def __str__(self) -> str:
        base = super().__str__()
        if self.data is not None:
            return f"{base} (data={self.data.hex(' ').upper() or '<empty>'})"
        return base


class ChecksumError(MalformedFrameError):
    """
    Checksum validation failure.

    Only raised in strict mode; lenient decoding never inspects the
    checksum byte.
    """

    def __init__(
        self,
        message: str = "Checksum validation failed",
        *,
        expected: int | None = None,
        received: int | None = None,
        data: bytes | None = None,
    ) -> None:
        super().__init__(message, data=data)
        self.expected = expected
        self.received = received

    def __str__(self) -> str:
        base = ProtocolError.__str__(self)
        if self.expected is not None and self.received is not None:
            return f"{base} (expected 0x{self.expected:02X}, got 0x{self.received:02X})"
        return base


class UnexpectedResponseError(ProtocolError):
    """
    Reply carries a response opcode that does not match the request.

    Only raised in strict mode.
    """

    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            f"Unexpected response opcode 0x{received:02X} (expected 0x{expected:02X})"
        )


class CalibrationError(PelcoError):
    """
    Device calibration produced an unusable steps-per-degree ratio.

    Raised at construction when the configured maximum degrees is zero or
    the device reports too few maximum steps for a ratio of at least one.
    """

    def __init__(
        self,
        axis: str,
        *,
        max_steps: int | None = None,
        max_degrees: int | None = None,
    ) -> None:
        self.axis = axis
        self.max_steps = max_steps
        self.max_degrees = max_degrees
        super().__init__(
            f"Cannot calibrate {axis} axis: max_steps={max_steps}, max_degrees={max_degrees}"
        )
