[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sensorlog"
version = "0.1.0"
description = "Simulated vehicle speed and energy-consumption sensors with circular buffers, alternating extract-load threads and a CSV datalogger"
requires-python = ">=3.10"
dependencies = []
keywords = ["sensors", "telemetry", "circular buffer", "datalogger", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sensorlog = "sensorlog.pipeline:main"

[tool.hatch.build.targets.wheel]
packages = ["sensorlog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
