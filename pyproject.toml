[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chip8"
version = "0.1.0"
description = "A small CHIP-8 interpreter with a pygame display"
requires-python = ">=3.10"
keywords = ["chip8", "chip-8", "emulator", "interpreter", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Emulators",
    "Topic :: Games/Entertainment",
]
dependencies = ["pygame"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chip8 = "chip8.app:main"

[tool.hatch.build.targets.wheel]
packages = ["chip8"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
