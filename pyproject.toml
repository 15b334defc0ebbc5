[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "recreations"
version = "0.1.0"
description = "Anagram crossword generator, Conway's Game of Life and recursive fractal drawings"
requires-python = ">=3.10"
keywords = ["crossword", "anagram", "game-of-life", "fractals", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
crossword = "recreations.crossword:main"
life = "recreations.life:main"
fractals = "recreations.fractals:main"

[tool.hatch.build.targets.wheel]
packages = ["recreations"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
