"""
Pydantic models for pelcode.

This module defines the value objects shared across the library,
implemented as immutable Pydantic models with validation:

- Endpoint: a resolved device network address
- Calibration: steps-per-degree ratios and degree/step conversion
- DeviceSettings: validated configuration for a UDP device
"""

from __future__ import annotations

import socket
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pelcode.exceptions import CalibrationError, TransportError
from pelcode.protocol.constants import ProtocolConstants


class Endpoint(BaseModel):
    """
    Network endpoint of a Pelco-DE device.

    The host name is resolved once, at construction of the owning transport,
    and the numeric address is kept for the lifetime of the device.

    Example:
        >>> ep = Endpoint(host="localhost", ip="127.0.0.1", port=6000)
        >>> ep.sockaddr
        ('127.0.0.1', 6000)
    """

    model_config = ConfigDict(frozen=True)

    host: str = Field(min_length=1, description="Host name or address as given")
    ip: str = Field(min_length=1, description="Resolved IPv4 address")
    port: int = Field(ge=1, le=65535)

    @property
    def sockaddr(self) -> tuple[str, int]:
        """Address tuple accepted by socket.sendto()."""
        return (self.ip, self.port)

    @classmethod
    def resolve(cls, host: str, port: int) -> Endpoint:
        """
        Resolve a host name to an IPv4 UDP endpoint.

        Args:
            host: Host name or dotted address.
            port: UDP port.

        Returns:
            Endpoint holding the first resolved address.

        Raises:
            TransportError: If the host cannot be resolved.
        """
        try:
            infos = socket.getaddrinfo(host, port, socket.AF_INET, socket.SOCK_DGRAM)
        except socket.gaierror as e:
            raise TransportError(f"Cannot resolve {host}:{port}: {e}") from e
        if not infos:
            raise TransportError(f"No IPv4 address for {host}:{port}")
        ip = infos[0][4][0]
        return cls(host=host, ip=ip, port=port)

    def __str__(self) -> str:
        return f"{self.ip}:{self.port}"


class Calibration(BaseModel):
    """
    Steps-per-degree ratios for the pan and tilt axes.

    Ratios are integers computed once from the device-reported maximum
    step counts. Conversion is lossy: degrees are wrapped modulo the axis
    range before multiplying, and steps are divided with truncation.

    Example:
        >>> cal = Calibration.from_max_steps(3600, 1350)
        >>> cal.pan_steps_per_degree, cal.tilt_steps_per_degree
        (10, 10)
        >>> cal.pan_degrees_to_steps(370)
        100
        >>> cal.pan_steps_to_degrees(125)
        12
    """

    model_config = ConfigDict(frozen=True)

    pan_steps_per_degree: int = Field(ge=1)
    tilt_steps_per_degree: int = Field(ge=1)

    PAN_WRAP: ClassVar[int] = ProtocolConstants.PAN_WRAP_DEGREES
    TILT_WRAP: ClassVar[int] = ProtocolConstants.TILT_WRAP_DEGREES

    @classmethod
    def from_max_steps(
        cls,
        pan_max_steps: int,
        tilt_max_steps: int,
        max_pan_degrees: int = ProtocolConstants.DEFAULT_MAX_PAN_DEGREES,
        max_tilt_degrees: int = ProtocolConstants.DEFAULT_MAX_TILT_DEGREES,
    ) -> Calibration:
        """
        Compute ratios from maximum step counts and degree ranges.

        Args:
            pan_max_steps: Steps in a full pan range, as reported by the device.
            tilt_max_steps: Steps in a full tilt range, as reported by the device.
            max_pan_degrees: Degrees covered by the full pan range.
            max_tilt_degrees: Degrees covered by the full tilt range.

        Returns:
            Calibration with both ratios at least 1.

        Raises:
            CalibrationError: If a degree range is zero or a ratio truncates to zero.
        """
        return cls(
            pan_steps_per_degree=_ratio("pan", pan_max_steps, max_pan_degrees),
            tilt_steps_per_degree=_ratio("tilt", tilt_max_steps, max_tilt_degrees),
        )

    def pan_degrees_to_steps(self, degrees: int) -> int:
        return _to_steps(degrees, self.PAN_WRAP, self.pan_steps_per_degree)

    def tilt_degrees_to_steps(self, degrees: int) -> int:
        return _to_steps(degrees, self.TILT_WRAP, self.tilt_steps_per_degree)

    def pan_steps_to_degrees(self, steps: int) -> int:
        return steps // self.pan_steps_per_degree

    def tilt_steps_to_degrees(self, steps: int) -> int:
        return steps // self.tilt_steps_per_degree


def _ratio(axis: str, max_steps: int, max_degrees: int) -> int:
    if max_degrees <= 0:
        raise CalibrationError(axis, max_steps=max_steps, max_degrees=max_degrees)
    ratio = max_steps // max_degrees
    if ratio <= 0:
        raise CalibrationError(axis, max_steps=max_steps, max_degrees=max_degrees)
    return ratio


def _to_steps(degrees: int, wrap: int, ratio: int) -> int:
    if not isinstance(degrees, int):
        raise TypeError(f"Degrees must be an int, got {type(degrees).__name__}")
    if degrees < 0:
        raise ValueError(f"Degrees must be non-negative, got {degrees}")
    steps = (degrees % wrap) * ratio
    if steps > ProtocolConstants.MAX_VALUE:
        raise ValueError(
            f"{degrees} degrees is {steps} steps, above the 16-bit limit"
        )
    return steps


class DeviceSettings(BaseModel):
    """
    Configuration for a UDP-attached Pelco-DE device.

    Example:
        >>> settings = DeviceSettings(host="192.168.1.50", port=6000)
        >>> settings.max_pan_degrees
        360
    """

    model_config = ConfigDict(frozen=True)

    host: str = Field(min_length=1)
    port: int = Field(ge=1, le=65535)
    max_pan_degrees: int = Field(default=ProtocolConstants.DEFAULT_MAX_PAN_DEGREES, ge=0)
    max_tilt_degrees: int = Field(default=ProtocolConstants.DEFAULT_MAX_TILT_DEGREES, ge=0)
    address: int = Field(default=ProtocolConstants.DEFAULT_ADDRESS, ge=0, le=255)
    strict: bool = Field(
        default=False,
        description="Validate reply sync byte, checksum and response opcode",
    )
    timeout: float | None = Field(
        default=None,
        description="Read deadline in seconds; None blocks until a reply arrives",
    )

    @model_validator(mode="after")
    def validate_timeout(self) -> DeviceSettings:
        """Reject non-positive timeouts."""
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        return self
