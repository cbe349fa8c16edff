# sensorlog

Simulated telemetry for a small electric vehicle. A generator produces speed
(km/h) and energy consumption (J/km) samples on a 180-second lap profile at
100 samples per second. Two worker threads take turns copying the raw samples
into separate speed and consumption circular buffers, and a datalogger writes
values from those buffers as CSV rows to files in a directory.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Running the pipeline

```
sensorlog
```

The command starts the generator and the speed and consumption workers. The
workers alternate: the speed worker runs roughly every 0.2 s and prints a
`Velocidade: ...` line, the consumption worker roughly every 0.5 s and prints a
`Consumo: ...` line. It keeps going until you interrupt it with Ctrl+C.

Options:

- `--buffer-size N` sets the capacity of each circular buffer (default 16,
  must be at least 1).
- `--duration SECONDS` stops the pipeline after the given time instead of
  waiting for an interrupt.

## Library use

```python
from sensorlog.buffer import CircularBuffer
from sensorlog.etl import Measurement, extract_load
from sensorlog.generator import sample_at, format_reading
from sensorlog.datalogger import Datalogger, format_buffers

raw = CircularBuffer(16)
raw.add(sample_at(0.0))

speed = CircularBuffer(16)
extract_load(raw, speed, Measurement.SPEED)
print(speed.oldest())          # consumption zeroed, speed kept

consumption = CircularBuffer(16)
extract_load(raw, consumption, "consumption")

reading = sample_at(10.0)
print(format_reading(reading.speed, reading.consumption, 10))
# Tempo:     10s | Dados: [ '...', '...' ]

logger = Datalogger("logs")
logger.setup()                 # creates the directory if needed
logger.open_file("/run.csv")   # writes the "Velocidade,Consumo" header if new or empty
logger.append("/run.csv", format_buffers(speed, consumption))
```

Notes on the pieces:

- `SensorReading` is a frozen dataclass with `speed` and `consumption`, both
  defaulting to `0.0`.
- `CircularBuffer(size)` starts with every slot holding a zeroed reading and
  raises `ValueError` for a size below 1. `oldest()` returns the first slot
  until the buffer has wrapped, then the slot that will be overwritten next.
  The buffer is safe to share between threads.
- `extract_load(source, destination, measurement)` accepts a `Measurement` or
  the strings `"speed"` / `"consumption"`, and raises `ValueError` for anything
  else without touching the destination.
- `samples(start=0.0)` is an endless generator of readings, one per
  0.01-second step; `Generator(buffer).run(stop_event)` feeds them into a
  buffer in real time until the event is set.
- `format_buffers` builds a `speed,consumption` record with two decimals.
  `Datalogger` paths may start with `/`; they are resolved below the root
  directory, and lines end with `\r\n`. `setup()` raises `NotADirectoryError`
  if the root exists but is not a directory. Progress messages go to the
  `sensorlog.datalogger` logger.

`sensorlog.pipeline.Pipeline(buffer_size=16, output=None)` runs the threaded
pipeline yourself: call `start()` and `stop()`, or use it as a context
manager. Its `raw`, `speed` and `consumption` attributes are the three
buffers, `running` tells whether any thread is alive, and worker lines go to
`output` (standard output by default).

## What it does not do

- There is no real sensor or SD-card hardware access; readings are always
  simulated and the datalogger writes to an ordinary directory.
- The `sensorlog` command does not write anything to disk; it only prints the
  worker output. Use `Datalogger` yourself to record CSV files.