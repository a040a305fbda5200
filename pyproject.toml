[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sc2replay"
version = "0.1.0"
description = "Building blocks for decoding StarCraft II replay data: bit-packed readers, replay details, filters, file discovery and replay selection."
requires-python = ">=3.10"
dependencies = []
keywords = ["starcraft", "sc2", "replay", "bit-packed", "decoder"]
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
    "Topic :: Games/Entertainment :: Real Time Strategy",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sc2replay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
