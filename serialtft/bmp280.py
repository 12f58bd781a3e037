"""Temperature and pressure readings from a BMP280 sensor on an I2C bus."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

__all__ = ["Calibration", "BMP280", "calc_altitude", "DEFAULT_ADDRESS", "CHIP_ID"]

DEFAULT_ADDRESS = 0x76
CHIP_ID = 0x58

_REG_DIG_T1 = 0x88
_REG_DIG_P1 = 0x8E
_REG_CHIPID = 0xD0
_REG_CONTROL = 0xF4
_REG_PRESSUREDATA = 0xF7
_REG_TEMPDATA = 0xFA


class _Bus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...

    def read(self, address: int, count: int) -> bytes: ...


@dataclass(frozen=True)
class Calibration:
    """Factory trimming parameters read from the sensor."""

    dig_t1: int
    dig_t2: int
    dig_t3: int
    dig_p1: int
    dig_p2: int
    dig_p3: int
    dig_p4: int
    dig_p5: int
    dig_p6: int
    dig_p7: int
    dig_p8: int
    dig_p9: int


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def calc_altitude(pressure: float) -> float:
    """Altitude in metres for a pressure in pascals, relative to sea level."""
    return (1.0 - (pressure / 101325) ** (1 / 5.25588)) / 0.0000225577


class BMP280:
    """A BMP280 sensor reached through *bus*.

    The bus needs ``write(address, data)`` and ``read(address, count)``.
    Call :meth:`begin` before taking readings.
    """

    def __init__(self, bus: _Bus, address: int = DEFAULT_ADDRESS) -> None:
        self._bus = bus
        self.address = address
        self.calibration: Calibration | None = None
        self._t_fine = 0

    def _read(self, register: int, count: int) -> bytes:
        self._bus.write(self.address, bytes([register]))
        data = bytes(self._bus.read(self.address, count))
        if len(data) < count:
            raise OSError(f"short read from register {register:#04x}")
        return data[:count]

    def _read_u16le(self, register: int) -> int:
        return int.from_bytes(self._read(register, 2), "little")

    def _read_s16le(self, register: int) -> int:
        return int.from_bytes(self._read(register, 2), "little", signed=True)

    def begin(self) -> Calibration:
        """Check the chip, load its calibration and start measuring.

        Raises ``RuntimeError`` if the chip does not identify as a BMP280.
        """
        chip_id = self._read(_REG_CHIPID, 1)[0]
        if chip_id != CHIP_ID:
            raise RuntimeError(f"unexpected chip id {chip_id:#04x}")
        self.calibration = Calibration(
            self._read_u16le(_REG_DIG_T1),
            self._read_s16le(_REG_DIG_T1 + 2),
            self._read_s16le(_REG_DIG_T1 + 4),
            self._read_u16le(_REG_DIG_P1),
            *(self._read_s16le(_REG_DIG_P1 + 2 * i) for i in range(1, 9)),
        )
        self._bus.write(self.address, bytes([_REG_CONTROL, 0x3F]))
        return self.calibration

    def _require_calibration(self) -> Calibration:
        if self.calibration is None:
            raise RuntimeError("call begin() before reading the sensor")
        return self.calibration

    def _read_adc(self, register: int) -> int:
        return int.from_bytes(self._read(register, 3), "big") >> 4

    def temperature(self) -> float:
        """Temperature in degrees Celsius, in steps of 0.01."""
        cal = self._require_calibration()
        adc_t = self._read_adc(_REG_TEMPDATA)
        var1 = (((adc_t >> 3) - (cal.dig_t1 << 1)) * cal.dig_t2) >> 11
        delta = (adc_t >> 4) - cal.dig_t1
        var2 = (((delta * delta) >> 12) * cal.dig_t3) >> 14
        self._t_fine = var1 + var2
        return ((self._t_fine * 5 + 128) >> 8) / 100

    def pressure(self) -> int:
        """Pressure in whole pascals; 0 when the calibration makes it undefined."""
        cal = self._require_calibration()
        self.temperature()
        adc_p = self._read_adc(_REG_PRESSUREDATA)

        var1 = self._t_fine - 128000
        var2 = var1 * var1 * cal.dig_p6
        var2 += (var1 * cal.dig_p5) << 17
        var2 += cal.dig_p4 << 35
        var1 = ((var1 * var1 * cal.dig_p3) >> 8) + ((var1 * cal.dig_p2) << 12)
        var1 = (((1 << 47) + var1) * cal.dig_p1) >> 33
        if var1 == 0:
            return 0
        p = 1048576 - adc_p
        p = _tdiv(((p << 31) - var2) * 3125, var1)
        var1 = (cal.dig_p9 * (p >> 13) * (p >> 13)) >> 25
        var2 = (cal.dig_p8 * p) >> 19
        p = ((p + var1 + var2) >> 8) + (cal.dig_p7 << 4)
        return (p & 0xFFFFFFFF) // 256