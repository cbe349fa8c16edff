"""CSV data logger that writes speed and consumption records to storage."""

from __future__ import annotations

import logging
from pathlib import Path

from sensorlog.buffer import CircularBuffer

logger = logging.getLogger(__name__)

HEADER = "Velocidade,Consumo"
LINE_END = "\r\n"


def format_buffers(speed_buffer: CircularBuffer, consumption_buffer: CircularBuffer) -> str:
    """Build one CSV record from the oldest speed and consumption readings."""
    speed = speed_buffer.oldest().speed
    consumption = consumption_buffer.oldest().consumption
    return f"{speed:.2f},{consumption:.2f}"


class Datalogger:
    """Appends CSV records to files stored below a root directory.

    Paths handed to the logger are relative to the root, written the way a
    card path is written, for example ``/log.csv``.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def _resolve(self, path: str) -> Path:
        return self.root / path.lstrip("/")

    def setup(self) -> None:
        """Make the storage root ready for use.

        Raises NotADirectoryError if the root exists but is not a directory.
        """
        if self.root.exists() and not self.root.is_dir():
            logger.error("Card Mount Failed")
            raise NotADirectoryError(f"storage root is not a directory: {self.root}")
        self.root.mkdir(parents=True, exist_ok=True)
        logger.info("Card Mount SUCCEED")

    def open_file(self, path: str) -> Path:
        """Prepare a log file, writing the CSV header if it is missing or empty.

        Returns the resolved file path.
        """
        target = self._resolve(path)
        if not target.exists() or target.stat().st_size == 0:
            logger.info("%s does not exist. Creating it and adding the header...", path)
            with target.open("w", encoding="utf-8", newline="") as handle:
                handle.write(HEADER + LINE_END)
        else:
            logger.info("Opening %s for appending...", path)
            with target.open("a", encoding="utf-8", newline=""):
                pass
        logger.info("FILE OK")
        return target

    def append(self, path: str, data: str) -> None:
        """Append one line of data to the file at ``path``."""
        target = self._resolve(path)
        try:
            with target.open("a", encoding="utf-8", newline="") as handle:
                handle.write(data + LINE_END)
        except OSError:
            logger.error("Failed to open file for appending")
            raise
        logger.info("Message appended")