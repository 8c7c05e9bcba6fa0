[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tuiles2048"
version = "1.0.0"
description = "The 2048 sliding-tile puzzle, played in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["2048", "puzzle", "game", "terminal", "curses"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: POSIX",
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
tuiles2048 = "tuiles2048.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tuiles2048"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
