[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mxterm"
version = "0.3.2010"
description = "Building blocks for a terminal emulator: escape sequence parsing, grid operations, SGR state, character sets and keyboard sequences"
requires-python = ">=3.10"
keywords = ["terminal", "emulator", "ansi", "vt100", "vt52", "escape-sequences", "tmux", "keyboard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mxterm = "mxterm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mxterm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
