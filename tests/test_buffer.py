import threading

import pytest

from sensorlog.buffer import CircularBuffer, SensorReading


def reading(n):
    return SensorReading(speed=float(n), consumption=float(n) * 10)


def test_new_buffer_returns_zeroed_reading():
    buf = CircularBuffer(4)
    assert buf.oldest() == SensorReading(0.0, 0.0)


def test_partial_buffer_returns_first_added():
    buf = CircularBuffer(4)
    buf.add(reading(1))
    buf.add(reading(2))
    assert buf.oldest() == reading(1)


def test_exactly_full_buffer_returns_first_added():
    buf = CircularBuffer(3)
    for n in range(1, 4):
        buf.add(reading(n))
    assert buf.oldest() == reading(1)


def test_overwrite_moves_oldest_forward():
    buf = CircularBuffer(3)
    for n in range(1, 5):
        buf.add(reading(n))
    assert buf.oldest() == reading(2)


@pytest.mark.parametrize("extra", range(0, 10))
def test_oldest_after_many_writes(extra):
    capacity = 5
    buf = CircularBuffer(capacity)
    total = capacity + extra
    for n in range(total):
        buf.add(reading(n))
    assert buf.oldest() == reading(total - capacity)


def test_size_one_always_holds_latest():
    buf = CircularBuffer(1)
    for n in range(5):
        buf.add(reading(n))
        assert buf.oldest() == reading(n)


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_size_rejected(size):
    with pytest.raises(ValueError):
        CircularBuffer(size)


def test_concurrent_adds_keep_buffer_consistent():
    buf = CircularBuffer(8)

    def writer(offset):
        for n in range(200):
            buf.add(reading(offset + n))

    threads = [threading.Thread(target=writer, args=(k * 1000,)) for k in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    value = buf.oldest()
    assert value.consumption == value.speed * 10
    assert value.speed % 1000 < 200