"""Temperature and humidity readings from a DHT12 sensor on an I2C bus."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol

__all__ = ["Scale", "SensorError", "DHT12", "DEFAULT_ADDRESS"]

DEFAULT_ADDRESS = 0x5C


class _Bus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...

    def read(self, address: int, count: int) -> bytes: ...


class Scale(IntEnum):
    """Temperature scale."""

    CELSIUS = 1
    KELVIN = 2
    FAHRENHEIT = 3


class SensorError(RuntimeError):
    """A reading failed.

    ``code`` is 1 when the sensor did not answer, 2 when it sent an
    unexpected number of bytes and 3 when the checksum did not match.
    """

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code


class DHT12:
    """A DHT12 sensor reached through *bus*.

    The bus needs ``write(address, data)``, raising ``OSError`` when the
    device does not acknowledge, and ``read(address, count)`` returning bytes.
    An out-of-range *scale* falls back to Celsius and an out-of-range
    *address* to the sensor's default address.
    """

    def __init__(self, bus: _Bus, scale: int = 0, address: int = 0) -> None:
        self._bus = bus
        self.address = DEFAULT_ADDRESS if address == 0 or address > 126 else address
        self.scale = Scale.CELSIUS if scale == 0 or scale > 3 else Scale(scale)

    def _read(self) -> bytes:
        try:
            self._bus.write(self.address, b"\x00")
        except OSError as exc:
            raise SensorError(1, "sensor did not respond") from exc
        data = bytes(self._bus.read(self.address, 5))
        if len(data) != 5:
            raise SensorError(2, f"expected 5 bytes, got {len(data)}")
        if data[4] != sum(data[:4]):
            raise SensorError(3, "checksum mismatch")
        return data

    def read_temperature(self, scale: int | None = None) -> float:
        """Read the temperature in *scale*, or in the sensor's default scale."""
        scale = self.scale if not scale else Scale(scale)
        data = self._read()
        celsius = data[2] + data[3] / 10
        if scale is Scale.FAHRENHEIT:
            return celsius * 1.8 + 32
        if scale is Scale.KELVIN:
            return celsius + 273.15
        return celsius

    def read_humidity(self) -> float:
        """Read the relative humidity in percent."""
        data = self._read()
        return data[0] + data[1] / 10