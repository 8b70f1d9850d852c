[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent2021"
version = "0.1.0"
description = "Solutions to a set of 2021 programming puzzles: packet decoding, snailfish numbers, beacon scanners, amphipod sorting and ALU model numbers."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "algorithms", "search", "parsing", "interpreter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["advent2021"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
