[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modestiot"
version = "0.1.0"
description = "Event-driven sensors, command-driven actuators and a simulated RFID smart lock"
requires-python = ">=3.10"
dependencies = []
keywords = ["iot", "events", "commands", "cqrs", "rfid", "rc522", "spi", "servo", "smart-lock", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["modestiot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
