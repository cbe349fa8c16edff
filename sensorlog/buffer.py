"""Fixed-capacity ring buffer of sensor readings."""

from __future__ import annotations

import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class SensorReading:
    """One sample from the vehicle sensors."""

    speed: float = 0.0
    consumption: float = 0.0


class CircularBuffer:
    """Ring buffer that overwrites its oldest entry once full.

    Every slot starts out as a zeroed reading. The buffer is safe to share
    between threads.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"buffer size must be at least 1, got {size}")
        self._slots = [SensorReading() for _ in range(size)]
        self._head = 0
        self._full = False
        self._lock = threading.Lock()

    def add(self, reading: SensorReading) -> None:
        """Store a reading, overwriting the oldest one when the buffer is full."""
        with self._lock:
            self._slots[self._head] = reading
            self._head = (self._head + 1) % len(self._slots)
            if self._head == 0:
                self._full = True

    def oldest(self) -> SensorReading:
        """Return the oldest reading held in the buffer."""
        with self._lock:
            if not self._full:
                return self._slots[0]
            return self._slots[self._head]