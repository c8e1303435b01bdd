[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocsolutions"
version = "0.1.0"
description = "Solutions to Advent of Code puzzles from 2022, 2023 and 2024"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "solutions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
aoc-2022-day01 = "aocsolutions.y2022_day01:main"
aoc-2022-day02 = "aocsolutions.y2022_day02:main"
aoc-2022-day03 = "aocsolutions.y2022_day03:main"
aoc-2022-day04 = "aocsolutions.y2022_day04:main"
aoc-2022-day06 = "aocsolutions.y2022_day06:main"
aoc-2023-day01 = "aocsolutions.y2023_day01:main"
aoc-2023-day02 = "aocsolutions.y2023_day02:main"
aoc-2023-day03 = "aocsolutions.y2023_day03:main"
aoc-2023-day04 = "aocsolutions.y2023_day04:main"
aoc-2023-day05 = "aocsolutions.y2023_day05:main"
aoc-2023-day06 = "aocsolutions.y2023_day06:main"
aoc-2023-day07 = "aocsolutions.y2023_day07:main"
aoc-2023-day08 = "aocsolutions.y2023_day08:main"
aoc-2023-day09 = "aocsolutions.y2023_day09:main"
aoc-2023-day10 = "aocsolutions.y2023_day10:main"
aoc-2024-day01 = "aocsolutions.y2024_day01:main"
aoc-2024-day02 = "aocsolutions.y2024_day02:main"
aoc-2024-day03 = "aocsolutions.y2024_day03:main"
aoc-2024-day04 = "aocsolutions.y2024_day04:main"
aoc-2024-day05 = "aocsolutions.y2024_day05:main"
aoc-2024-day06 = "aocsolutions.y2024_day06:main"
aoc-2024-day07 = "aocsolutions.y2024_day07:main"
aoc-2024-day08 = "aocsolutions.y2024_day08:main"
aoc-2024-day09 = "aocsolutions.y2024_day09:main"
aoc-2024-day10 = "aocsolutions.y2024_day10:main"
aoc-2024-day11 = "aocsolutions.y2024_day11:main"

[tool.hatch.build.targets.wheel]
packages = ["aocsolutions"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
