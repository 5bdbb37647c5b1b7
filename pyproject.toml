[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sudokugame"
version = "0.1.0"
description = "Play Sudoku in the terminal, with a puzzle generator that guarantees a unique solution."
requires-python = ">=3.10"
dependencies = []
keywords = ["sudoku", "puzzle", "game", "terminal", "generator", "solver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sudokugame = "sudokugame.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sudokugame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
