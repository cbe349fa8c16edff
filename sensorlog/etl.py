"""Split raw sensor readings into per-measurement buffers."""

from __future__ import annotations

import dataclasses
from enum import Enum

from sensorlog.buffer import CircularBuffer


class Measurement(str, Enum):
    """The quantity that a destination buffer keeps."""

    SPEED = "speed"
    CONSUMPTION = "consumption"


def extract_load(
    source: CircularBuffer,
    destination: CircularBuffer,
    measurement: Measurement | str,
) -> None:
    """Copy the oldest source reading into destination, keeping one quantity.

    The other quantity is zeroed. Raises ValueError for an unknown
    measurement, leaving the destination untouched.
    """
    try:
        kind = Measurement(measurement)
    except ValueError:
        raise ValueError(
            f"measurement must be 'speed' or 'consumption', got {measurement!r}"
        ) from None

    reading = source.oldest()
    if kind is Measurement.SPEED:
        destination.add(dataclasses.replace(reading, consumption=0.0))
    else:
        destination.add(dataclasses.replace(reading, speed=0.0))