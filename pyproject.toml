[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlekit"
version = "0.1.0"
description = "Small solvers for puzzle and algorithm problems: Puyo Puyo chains, Go captures, a stacked rotating maze, KMP search, LCS, digit-word sorting and pair sums."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "puyo", "baduk", "go", "maze", "kmp", "lcs", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
puzzlekit-aplusb = "puzzlekit.aplusb:main"
puzzlekit-gns = "puzzlekit.gns:main"
puzzlekit-kmp = "puzzlekit.kmp:main"
puzzlekit-lcs = "puzzlekit.lcs:main"
puzzlekit-puyo = "puzzlekit.puyo:main"
puzzlekit-baduk = "puzzlekit.baduk:main"
puzzlekit-maze = "puzzlekit.maze:main"

[tool.hatch.build.targets.wheel]
packages = ["puzzlekit"]

[tool.pytest.ini_options]
addopts = "-ra"
