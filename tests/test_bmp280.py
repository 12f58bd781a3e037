import struct

import pytest

from serialtft.bmp280 import BMP280, calc_altitude

# Worked example values from the sensor's datasheet.
CAL = (27504, 26435, -1000, 36477, -10685, 3024, 2855, 140, -7, 15500, -14600, 6000)
ADC_T = 519888
ADC_P = 415148


class FakeBus:
    def __init__(self, chip_id=0x58, cal=CAL, adc_t=ADC_T, adc_p=ADC_P):
        self.regs = {}
        self.regs[0xD0] = chip_id
        self._put(0x88, struct.pack("<H2hH8h", *cal))
        self._put(0xF7, (adc_p << 4).to_bytes(3, "big"))
        self._put(0xFA, (adc_t << 4).to_bytes(3, "big"))
        self.pointer = 0
        self.addresses = set()
        self.register_writes = []

    def _put(self, start, data):
        for offset, byte in enumerate(data):
            self.regs[start + offset] = byte

    def write(self, address, data):
        self.addresses.add(address)
        self.pointer = data[0]
        if len(data) > 1:
            self.register_writes.append(tuple(data))
            self._put(data[0], data[1:])

    def read(self, address, count):
        return bytes(self.regs.get(self.pointer + i, 0) for i in range(count))


def started(bus=None):
    sensor = BMP280(bus or FakeBus())
    sensor.begin()
    return sensor


def test_begin_reads_calibration():
    cal = started().calibration
    assert (cal.dig_t1, cal.dig_t2, cal.dig_t3) == CAL[:3]
    assert (cal.dig_p1, cal.dig_p6, cal.dig_p9) == (CAL[3], CAL[8], CAL[11])


def test_begin_starts_measurement():
    bus = FakeBus()
    started(bus)
    assert bus.register_writes == [(0xF4, 0x3F)]
    assert bus.addresses == {0x76}


def test_begin_rejects_wrong_chip():
    with pytest.raises(RuntimeError):
        BMP280(FakeBus(chip_id=0x60)).begin()


def test_reading_before_begin_fails():
    with pytest.raises(RuntimeError):
        BMP280(FakeBus()).temperature()


def test_temperature_datasheet_example():
    assert started().temperature() == pytest.approx(25.08)


def test_pressure_datasheet_example():
    assert started().pressure() == 100653


def test_pressure_zero_when_p1_is_zero():
    cal = CAL[:3] + (0,) + CAL[4:]
    assert started(FakeBus(cal=cal)).pressure() == 0


def test_short_read_raises():
    class ShortBus(FakeBus):
        def read(self, address, count):
            return super().read(address, count)[:-1]

    with pytest.raises(OSError):
        BMP280(ShortBus()).begin()


def test_altitude_at_sea_level_is_zero():
    assert calc_altitude(101325) == pytest.approx(0.0)


def test_altitude_falls_as_pressure_rises():
    heights = [calc_altitude(p) for p in (90000, 95000, 100000, 105000)]
    assert heights == sorted(heights, reverse=True)
    assert heights[-1] < 0 < heights[0]