"""Synthetic lap profile of vehicle speed and energy consumption."""

from __future__ import annotations

import math
import threading
from collections.abc import Iterator

from sensorlog.buffer import CircularBuffer, SensorReading

SAMPLE_RATE_HZ = 100
LOOP_INTERVAL_S = 1.0 / SAMPLE_RATE_HZ

LAP_TIME_S = 180.0

# Consumption in J/km
CONSUMPTION_MAX = 20000.0
CONSUMPTION_MIN_ACCELERATING = 15000.0
CONSUMPTION_CYCLE_S = LAP_TIME_S / 4.0
ACCELERATING_TIME_S = CONSUMPTION_CYCLE_S / 2.0

# Speed in km/h
SPEED_MAX = 30.0
SPEED_MIN = 3.0
SPEED_CYCLE_S = LAP_TIME_S / 4.0


def sample_at(elapsed: float) -> SensorReading:
    """Return the simulated reading at the given elapsed time in seconds."""
    lap_time = math.fmod(elapsed, LAP_TIME_S)

    consumption_time = math.fmod(lap_time, CONSUMPTION_CYCLE_S)
    if consumption_time <= ACCELERATING_TIME_S:
        progress = consumption_time / ACCELERATING_TIME_S
        consumption = CONSUMPTION_MAX - progress * (
            CONSUMPTION_MAX - CONSUMPTION_MIN_ACCELERATING
        )
    else:
        consumption = 0.0

    speed_time = math.fmod(lap_time, SPEED_CYCLE_S)
    if speed_time <= ACCELERATING_TIME_S:
        progress = speed_time / ACCELERATING_TIME_S
        speed = SPEED_MIN + (SPEED_MAX - SPEED_MIN) * math.sqrt(progress)
    else:
        progress = (speed_time - ACCELERATING_TIME_S) / ACCELERATING_TIME_S
        speed = SPEED_MAX - progress * (SPEED_MAX - SPEED_MIN)

    return SensorReading(speed=speed, consumption=consumption)


def samples(start: float = 0.0) -> Iterator[SensorReading]:
    """Yield readings forever, one per sampling step from ``start``."""
    elapsed = start
    while True:
        yield sample_at(elapsed)
        elapsed += LOOP_INTERVAL_S


def format_reading(speed: float, consumption: float, elapsed: int) -> str:
    """Render one reading as a console line."""
    return (
        f"Tempo: {int(elapsed):>6}s | "
        f"Dados: [ '{speed:.2f}', '{consumption:.2f}' ]"
    )


class Generator:
    """Feeds simulated readings into a buffer at a steady real-time pace."""

    def __init__(self, buffer: CircularBuffer, interval: float = LOOP_INTERVAL_S) -> None:
        self.buffer = buffer
        self.interval = interval

    def run(self, stop_event: threading.Event | None = None) -> None:
        """Add readings to the buffer until ``stop_event`` is set.

        Without an event the generator runs forever.
        """
        stop = stop_event if stop_event is not None else threading.Event()
        for reading in samples():
            if stop.is_set():
                return
            self.buffer.add(reading)
            if stop.wait(self.interval):
                return