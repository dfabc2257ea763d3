[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gambit"
version = "1.19.2"
description = "Building blocks for a bitboard chess engine: packed moves, attack tables, Zobrist keys, turn timing and UCI parsing helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "bitboard", "uci", "zobrist", "mersenne-twister"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gambit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
