[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sidengine"
version = "2.12.0"
description = "Building blocks of a Commodore 64 SID player engine: event scheduling, memory banks, ROM identification and tune metadata"
requires-python = ">=3.10"
dependencies = []
keywords = ["sid", "c64", "commodore", "chiptune", "emulation", "scheduler"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: Players",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sidengine"]

[tool.pytest.ini_options]
addopts = "-ra"
