"""
Pelco-DE positioner implementations.

PelcoDEDevice speaks the extended Pelco-DE position and sensor commands
over any transport. Construction opens the transport and calibrates the
device, which costs two exchanges:

    GET_PAN_MAX_STEPS  -> pan_steps_per_degree  = max_steps // max_pan_degrees
    GET_TILT_MAX_STEPS -> tilt_steps_per_degree = max_steps // max_tilt_degrees

The ratios are fixed for the life of the device. After that every
operation is one exchange, except degree reads and writes which wrap a
step operation.

Variants:
- PelcoDEDeviceUDP: device reached over UDP
- PelcoDEDeviceSerial: device reached over an RS-485 serial port

Example:
    >>> with PelcoDEDeviceUDP("192.168.1.50", 6000) as device:
    ...     device.set_pan_degrees(90)
    ...     print(device.get_pan_degrees(), device.get_voltage())
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pelcode.devices.base import AbstractPelcoDevice
from pelcode.models import Calibration
from pelcode.protocol.commands import Command
from pelcode.protocol.constants import ProtocolConstants
from pelcode.transceiver import Transceiver
from pelcode.transport.serial_port import SerialTransport
from pelcode.transport.udp import UdpTransport

if TYPE_CHECKING:
    from pelcode.models import DeviceSettings
    from pelcode.transport.abc import AbstractTransport

# Module logger
logger = logging.getLogger(__name__)


class PelcoDEDevice(AbstractPelcoDevice):
    """
    Pelco-DE device over an arbitrary transport.

    Attributes:
        calibration: Steps-per-degree ratios measured at construction.
        transceiver: Exchange helper bound to the transport.
    """

    def __init__(
        self,
        transport: AbstractTransport,
        max_pan_degrees: int = ProtocolConstants.DEFAULT_MAX_PAN_DEGREES,
        max_tilt_degrees: int = ProtocolConstants.DEFAULT_MAX_TILT_DEGREES,
        *,
        address: int = ProtocolConstants.DEFAULT_ADDRESS,
        strict: bool = False,
    ) -> None:
        """
        Open the transport and calibrate the device.

        Args:
            transport: Transport to the device. Opened here if not yet open.
            max_pan_degrees: Degrees covered by the full pan range.
            max_tilt_degrees: Degrees covered by the full tilt range.
            address: Device address byte.
            strict: Validate every reply (sync, checksum, response opcode).

        Raises:
            TransportError: If the transport cannot be opened or an exchange fails.
            MalformedFrameError: If a calibration reply is malformed.
            CalibrationError: If either steps-per-degree ratio would be zero.
        """
        self._transceiver = Transceiver(transport, address=address, strict=strict)
        self._max_pan_degrees = max_pan_degrees
        self._max_tilt_degrees = max_tilt_degrees

        opened_here = not transport.is_open
        if opened_here:
            transport.open()

        try:
            self._calibration = self._calibrate()
        except Exception:
            if opened_here:
                transport.close()
            raise

    def _calibrate(self) -> Calibration:
        pan_max_steps = self.get_pan_max_steps()
        tilt_max_steps = self.get_tilt_max_steps()
        calibration = Calibration.from_max_steps(
            pan_max_steps,
            tilt_max_steps,
            self._max_pan_degrees,
            self._max_tilt_degrees,
        )
        logger.info(
            "Calibrated %s: pan %d steps/deg (%d/%d), tilt %d steps/deg (%d/%d)",
            self.transport.endpoint_name,
            calibration.pan_steps_per_degree,
            pan_max_steps,
            self._max_pan_degrees,
            calibration.tilt_steps_per_degree,
            tilt_max_steps,
            self._max_tilt_degrees,
        )
        return calibration

    @property
    def calibration(self) -> Calibration:
        """Get the steps-per-degree ratios."""
        return self._calibration

    @property
    def pan_steps_per_degree(self) -> int:
        return self._calibration.pan_steps_per_degree

    @property
    def tilt_steps_per_degree(self) -> int:
        return self._calibration.tilt_steps_per_degree

    @property
    def transceiver(self) -> Transceiver:
        return self._transceiver

    @property
    def transport(self) -> AbstractTransport:
        """Get the underlying transport."""
        return self._transceiver.transport

    # ===== Degrees =====

    def get_pan_degrees(self) -> int:
        return self._calibration.pan_steps_to_degrees(self.get_pan_steps())

    def set_pan_degrees(self, degrees: int) -> None:
        """
        Move pan axis to ``degrees`` modulo 360.

        Raises:
            TypeError: If degrees is not an int.
            ValueError: If degrees is negative.
        """
        self.set_pan_steps(self._calibration.pan_degrees_to_steps(degrees))

    def get_tilt_degrees(self) -> int:
        return self._calibration.tilt_steps_to_degrees(self.get_tilt_steps())

    def set_tilt_degrees(self, degrees: int) -> None:
        """
        Move tilt axis to ``degrees`` modulo 135.

        Raises:
            TypeError: If degrees is not an int.
            ValueError: If degrees is negative.
        """
        self.set_tilt_steps(self._calibration.tilt_degrees_to_steps(degrees))

    # ===== Steps =====

    def get_pan_steps(self) -> int:
        return self._transceiver.exchange(Command.GET_PAN_STEPS)

    def get_pan_max_steps(self) -> int:
        return self._transceiver.exchange(Command.GET_PAN_MAX_STEPS)

    def set_pan_steps(self, steps: int) -> None:
        # Acknowledgment value carries no information
        self._transceiver.exchange(Command.SET_PAN_STEPS, steps)

    def get_tilt_steps(self) -> int:
        return self._transceiver.exchange(Command.GET_TILT_STEPS)

    def get_tilt_max_steps(self) -> int:
        return self._transceiver.exchange(Command.GET_TILT_MAX_STEPS)

    def set_tilt_steps(self, steps: int) -> None:
        self._transceiver.exchange(Command.SET_TILT_STEPS, steps)

    # ===== Sensors =====

    def get_temperature(self) -> int:
        """Get device temperature, reinterpreting the raw value as signed 16-bit."""
        raw = self._transceiver.exchange(Command.GET_TEMPERATURE)
        return raw - 0x10000 if raw & 0x8000 else raw

    def get_voltage(self) -> float:
        """Get supply voltage in volts (raw reading is hundredths of a volt)."""
        return self._transceiver.exchange(Command.GET_VOLTAGE) / ProtocolConstants.VOLTAGE_SCALE

    # ===== Lifecycle =====

    def close(self) -> None:
        """Close the underlying transport."""
        self.transport.close()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.transport.endpoint_name!r}, "
            f"pan={self.pan_steps_per_degree} steps/deg, "
            f"tilt={self.tilt_steps_per_degree} steps/deg)"
        )


class PelcoDEDeviceUDP(PelcoDEDevice):
    """
    Pelco-DE device reached over UDP.

    The host is resolved once when the device is constructed.
    """

    def __init__(
        self,
        host: str,
        port: int,
        max_pan_degrees: int = ProtocolConstants.DEFAULT_MAX_PAN_DEGREES,
        max_tilt_degrees: int = ProtocolConstants.DEFAULT_MAX_TILT_DEGREES,
        *,
        address: int = ProtocolConstants.DEFAULT_ADDRESS,
        strict: bool = False,
        timeout: float | None = None,
    ) -> None:
        """
        Resolve the device, open a UDP socket and calibrate.

        Args:
            host: Device host name or IPv4 address.
            port: Device UDP port.
            max_pan_degrees: Degrees covered by the full pan range.
            max_tilt_degrees: Degrees covered by the full tilt range.
            address: Device address byte.
            strict: Validate every reply.
            timeout: Read deadline in seconds. None blocks until a reply.
        """
        super().__init__(
            UdpTransport(host, port, timeout=timeout),
            max_pan_degrees,
            max_tilt_degrees,
            address=address,
            strict=strict,
        )

    @classmethod
    def from_settings(cls, settings: DeviceSettings) -> PelcoDEDeviceUDP:
        """Construct a device from validated settings."""
        return cls(
            settings.host,
            settings.port,
            settings.max_pan_degrees,
            settings.max_tilt_degrees,
            address=settings.address,
            strict=settings.strict,
            timeout=settings.timeout,
        )


class PelcoDEDeviceSerial(PelcoDEDevice):
    """Pelco-DE device reached over an RS-485 serial port."""

    def __init__(
        self,
        port: str,
        baudrate: int = ProtocolConstants.DEFAULT_BAUD_RATE,
        max_pan_degrees: int = ProtocolConstants.DEFAULT_MAX_PAN_DEGREES,
        max_tilt_degrees: int = ProtocolConstants.DEFAULT_MAX_TILT_DEGREES,
        *,
        address: int = ProtocolConstants.DEFAULT_ADDRESS,
        strict: bool = False,
        timeout: float | None = None,
    ) -> None:
        super().__init__(
            SerialTransport(port, baudrate=baudrate, timeout=timeout),
            max_pan_degrees,
            max_tilt_degrees,
            address=address,
            strict=strict,
        )
