[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bcdclock"
version = "0.1.0"
description = "BCD alarm clock, multiplexed seven-segment screen and digital I/O models"
requires-python = ">=3.10"
dependencies = []
keywords = ["clock", "alarm", "bcd", "seven-segment", "gpio", "embedded"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bcdclock"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
