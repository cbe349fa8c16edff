"""Threaded pipeline: simulated sensors feeding speed and consumption buffers."""

from __future__ import annotations

import argparse
import sys
import threading
from typing import TextIO

from sensorlog.buffer import CircularBuffer
from sensorlog.etl import Measurement, extract_load
from sensorlog.generator import Generator

BUFFER_SIZE = 16
SPEED_PERIOD_S = 0.2
CONSUMPTION_PERIOD_S = 0.5


class Pipeline:
    """Runs a generator and two alternating extract-load workers.

    The speed and consumption workers take turns: each copies the oldest raw
    reading into its own buffer, hands the turn to the other and reports the
    value it loaded.
    """

    def __init__(self, buffer_size: int = BUFFER_SIZE, output: TextIO | None = None) -> None:
        self.raw = CircularBuffer(buffer_size)
        self.speed = CircularBuffer(buffer_size)
        self.consumption = CircularBuffer(buffer_size)
        self.output = output if output is not None else sys.stdout
        self._generator = Generator(self.raw)
        self._stop = threading.Event()
        self._turn = threading.Condition()
        self._speed_turn = True
        self._threads: list[threading.Thread] = []

    @property
    def running(self) -> bool:
        """True while any worker thread is alive."""
        return any(thread.is_alive() for thread in self._threads)

    def __enter__(self) -> Pipeline:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _worker(self, measurement: Measurement, my_turn: bool, period: float) -> None:
        label = "Velocidade" if measurement is Measurement.SPEED else "Consumo"
        destination = self.speed if measurement is Measurement.SPEED else self.consumption
        while not self._stop.is_set():
            with self._turn:
                self._turn.wait_for(
                    lambda: self._speed_turn == my_turn or self._stop.is_set()
                )
                if self._stop.is_set():
                    return
                extract_load(self.raw, destination, measurement)
                self._speed_turn = not my_turn
                self._turn.notify_all()
                reading = destination.oldest()
                value = reading.speed if measurement is Measurement.SPEED else reading.consumption
                print(f"{label}: {value:g}", file=self.output, flush=True)
            if self._stop.wait(period):
                return

    def start(self) -> None:
        """Start the generator and both workers."""
        if self.running:
            raise RuntimeError("pipeline is already running")
        self._stop.clear()
        self._speed_turn = True
        self._threads = [
            threading.Thread(target=self._generator.run, args=(self._stop,), daemon=True),
            threading.Thread(
                target=self._worker,
                args=(Measurement.SPEED, True, SPEED_PERIOD_S),
                daemon=True,
            ),
            threading.Thread(
                target=self._worker,
                args=(Measurement.CONSUMPTION, False, CONSUMPTION_PERIOD_S),
                daemon=True,
            ),
        ]
        for thread in self._threads:
            thread.start()

    def stop(self) -> None:
        """Signal every thread to finish and wait for them."""
        self._stop.set()
        with self._turn:
            self._turn.notify_all()
        for thread in self._threads:
            thread.join()


def main(argv: list[str] | None = None) -> int:
    """Run the sensor pipeline until interrupted or for a fixed duration."""
    parser = argparse.ArgumentParser(prog="sensorlog", description=Pipeline.__doc__)
    parser.add_argument("--buffer-size", type=int, default=BUFFER_SIZE)
    parser.add_argument(
        "--duration",
        type=float,
        default=None,
        help="seconds to run; runs until interrupted when omitted",
    )
    args = parser.parse_args(argv)
    if args.buffer_size < 1:
        parser.error("--buffer-size must be at least 1")

    pipeline = Pipeline(args.buffer_size)
    pipeline.start()
    try:
        if args.duration is None:
            threading.Event().wait()
        else:
            threading.Event().wait(args.duration)
    except KeyboardInterrupt:
        pass
    finally:
        pipeline.stop()
    return 0