import pytest

from sensorlog.buffer import CircularBuffer, SensorReading
from sensorlog.etl import Measurement, extract_load


@pytest.fixture
def source():
    buf = CircularBuffer(4)
    buf.add(SensorReading(speed=12.5, consumption=17000.0))
    buf.add(SensorReading(speed=20.0, consumption=0.0))
    return buf


def test_speed_keeps_speed_and_zeroes_consumption(source):
    dest = CircularBuffer(4)
    extract_load(source, dest, Measurement.SPEED)
    assert dest.oldest() == SensorReading(speed=12.5, consumption=0.0)


def test_consumption_keeps_consumption_and_zeroes_speed(source):
    dest = CircularBuffer(4)
    extract_load(source, dest, Measurement.CONSUMPTION)
    assert dest.oldest() == SensorReading(speed=0.0, consumption=17000.0)


def test_accepts_plain_string(source):
    dest = CircularBuffer(1)
    extract_load(source, dest, "speed")
    assert dest.oldest().speed == source.oldest().speed
    assert dest.oldest().consumption == 0.0


def test_source_is_not_consumed(source):
    before = source.oldest()
    extract_load(source, CircularBuffer(2), Measurement.SPEED)
    assert source.oldest() == before


def test_unknown_measurement_raises_and_leaves_destination(source):
    dest = CircularBuffer(1)
    with pytest.raises(ValueError):
        extract_load(source, dest, "temperature")
    assert dest.oldest() == SensorReading()


def test_repeated_loads_fill_destination(source):
    dest = CircularBuffer(2)
    for _ in range(3):
        extract_load(source, dest, Measurement.CONSUMPTION)
    assert dest.oldest().consumption == source.oldest().consumption
    assert dest.oldest().speed == 0.0