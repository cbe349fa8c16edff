"""Simulated sensor readings, circular buffers, extract-load workers and CSV logging."""

__version__ = "0.1.0"
__all__ = ["buffer", "etl", "generator", "datalogger", "pipeline"]