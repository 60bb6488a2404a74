"""
Base device contract.

AbstractPelcoDevice lists every capability a Pelco-D positioner may offer.
Each operation raises NotSupportedError by default, so a variant only
overrides what its hardware supports; anything else fails loudly instead
of returning a wrong value.

Example:
    >>> class PanOnlyDevice(AbstractPelcoDevice):
    ...     def get_pan_steps(self) -> int:
    ...         return 42
    >>> PanOnlyDevice().get_temperature()
    Traceback (most recent call last):
    ...
    pelcode.exceptions.NotSupportedError: get_temperature is not supported by PanOnlyDevice
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

from pelcode.exceptions import NotSupportedError

if TYPE_CHECKING:
    from types import TracebackType


class AbstractPelcoDevice:
    """
    Capability set shared by all Pelco-D device variants.

    Positions are unsigned: steps are the device's native 16-bit unit and
    degrees are derived from them.
    """

    def _unsupported(self, operation: str) -> NoReturn:
        raise NotSupportedError(operation, type(self).__name__)

    # ===== Degrees =====

    def get_pan_degrees(self) -> int:
        """Get pan position in degrees."""
        self._unsupported("get_pan_degrees")

    def set_pan_degrees(self, degrees: int) -> None:
        """Move pan axis to a position in degrees."""
        self._unsupported("set_pan_degrees")

    def get_tilt_degrees(self) -> int:
        """Get tilt position in degrees."""
        self._unsupported("get_tilt_degrees")

    def set_tilt_degrees(self, degrees: int) -> None:
        """Move tilt axis to a position in degrees."""
        self._unsupported("set_tilt_degrees")

    # ===== Steps =====

    def get_pan_steps(self) -> int:
        """Get pan position in steps."""
        self._unsupported("get_pan_steps")

    def get_pan_max_steps(self) -> int:
        """Get the number of steps in the full pan range."""
        self._unsupported("get_pan_max_steps")

    def set_pan_steps(self, steps: int) -> None:
        """Move pan axis to a position in steps."""
        self._unsupported("set_pan_steps")

    def get_tilt_steps(self) -> int:
        """Get tilt position in steps."""
        self._unsupported("get_tilt_steps")

    def get_tilt_max_steps(self) -> int:
        """Get the number of steps in the full tilt range."""
        self._unsupported("get_tilt_max_steps")

    def set_tilt_steps(self, steps: int) -> None:
        """Move tilt axis to a position in steps."""
        self._unsupported("set_tilt_steps")

    # ===== Sensors =====

    def get_temperature(self) -> int:
        """Get device temperature as a signed 16-bit reading."""
        self._unsupported("get_temperature")

    def get_voltage(self) -> float:
        """Get supply voltage in volts."""
        self._unsupported("get_voltage")

    # ===== Lifecycle =====

    def close(self) -> None:
        """Release any resources held by the device."""

    def __enter__(self) -> AbstractPelcoDevice:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
