"""
Device layer for Pelco-D positioners.

- AbstractPelcoDevice: capability contract; every operation is unsupported
  unless a variant overrides it
- PelcoDEDevice: Pelco-DE commands over any transport
- PelcoDEDeviceUDP / PelcoDEDeviceSerial: ready-made transport variants
"""

from pelcode.devices.base import AbstractPelcoDevice
from pelcode.devices.pelco_de import PelcoDEDevice, PelcoDEDeviceSerial, PelcoDEDeviceUDP

__all__ = [
    "AbstractPelcoDevice",
    "PelcoDEDevice",
    "PelcoDEDeviceUDP",
    "PelcoDEDeviceSerial",
]
