import pytest

from serialtft.dht12 import DHT12, Scale, SensorError


class FakeBus:
    def __init__(self, payload, fail=False):
        self.payload = bytes(payload)
        self.fail = fail
        self.writes = []

    def write(self, address, data):
        if self.fail:
            raise OSError("nack")
        self.writes.append((address, data))

    def read(self, address, count):
        return self.payload


def frame(h_int, h_dec, t_int, t_dec):
    return [h_int, h_dec, t_int, t_dec, h_int + h_dec + t_int + t_dec]


def test_humidity():
    sensor = DHT12(FakeBus(frame(55, 3, 24, 5)))
    assert sensor.read_humidity() == pytest.approx(55.3)


def test_default_address_and_register():
    bus = FakeBus(frame(40, 0, 20, 0))
    DHT12(bus).read_humidity()
    assert bus.writes == [(0x5C, b"\x00")]


def test_out_of_range_address_uses_default():
    bus = FakeBus(frame(40, 0, 20, 0))
    DHT12(bus, address=127).read_humidity()
    assert bus.writes[0][0] == 0x5C


def test_custom_address():
    bus = FakeBus(frame(40, 0, 20, 0))
    DHT12(bus, address=0x40).read_humidity()
    assert bus.writes[0][0] == 0x40


def test_celsius_default_scale():
    sensor = DHT12(FakeBus(frame(40, 0, 21, 7)), scale=9)
    assert sensor.scale is Scale.CELSIUS
    assert sensor.read_temperature() == pytest.approx(21.7)


def test_fahrenheit_at_freezing():
    sensor = DHT12(FakeBus(frame(40, 0, 0, 0)))
    assert sensor.read_temperature(Scale.FAHRENHEIT) == pytest.approx(32.0)


def test_kelvin_offset():
    sensor = DHT12(FakeBus(frame(40, 0, 18, 4)))
    celsius = sensor.read_temperature(Scale.CELSIUS)
    kelvin = sensor.read_temperature(Scale.KELVIN)
    assert kelvin - celsius == pytest.approx(273.15)


def test_constructor_scale_is_used():
    sensor = DHT12(FakeBus(frame(40, 0, 0, 0)), scale=Scale.FAHRENHEIT)
    assert sensor.read_temperature() == pytest.approx(32.0)


def test_no_response():
    with pytest.raises(SensorError) as info:
        DHT12(FakeBus(frame(1, 1, 1, 1), fail=True)).read_humidity()
    assert info.value.code == 1


def test_wrong_length():
    with pytest.raises(SensorError) as info:
        DHT12(FakeBus(frame(1, 1, 1, 1) + [0])).read_humidity()
    assert info.value.code == 2


def test_checksum_mismatch():
    with pytest.raises(SensorError) as info:
        DHT12(FakeBus([1, 1, 1, 1, 5])).read_temperature()
    assert info.value.code == 3


def test_invalid_scale_argument():
    with pytest.raises(ValueError):
        DHT12(FakeBus(frame(1, 1, 1, 1))).read_temperature(7)