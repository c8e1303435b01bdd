# aocsolutions

Solutions to Advent of Code puzzles: a selection of days from 2022, 2023
and 2024. Each day lives in its own module, named `y<year>_day<nn>`, with
the functions that solve the puzzle, so they can be used from Python or run
as a command. There are no dependencies beyond the standard library.

## Installing

    pip install .

To run the test suite as well:

    pip install ".[test]"
    pytest

## Using the library

The solver functions take the puzzle input as a string and return the answer.

```python
from aocsolutions import y2024_day01

text = """3   4
4   3
2   5
1   3
3   9
3   3
"""

y2024_day01.sum_distances(text)      # 11
y2024_day01.sum_similarities(text)   # 31
```

Some days also expose the building blocks of the solution, for example
`y2024_day09.DiskMap`, `y2023_day10.Maze` or `y2023_day07.Hand`, which can
be inspected and driven step by step. Malformed input raises `ValueError`.

## Running from the command line

Every module has a command named after its year and day. Each takes the
path of the puzzle input as an optional argument; without it, the 2022
commands read `data.txt` and the 2023 and 2024 commands read `data/day<N>`
(for example `data/day5`), relative to the current directory.

    aoc-2024-day01 path/to/input.txt
    aoc-2023-day05

| Command | Prints |
| --- | --- |
| `aoc-2022-day01`, `-day02`, `-day03`, `-day04`, `-day06` | Part 1 and Part 2 |
| `aoc-2023-day01` | the sum of calibration values, counting spelled-out digits |
| `aoc-2023-day02`, `-day04`, `-day05`, `-day06`, `-day09` | both parts |
| `aoc-2023-day03` | Part 1 only |
| `aoc-2023-day07` | Part 2 only (J counts as a joker) |
| `aoc-2023-day08` | Part 2 only |
| `aoc-2023-day10` | Part 1 only |
| `aoc-2024-day01` to `aoc-2024-day11` | Part 1 and Part 2 |

## What it does not do

The package does not download puzzle input; each command needs the input
saved to a file first. Only the days listed above are covered (2022 days
1, 2, 3, 4 and 6; 2023 days 1 to 10; 2024 days 1 to 11), and for 2023 days
1, 3, 7, 8 and 10 only the one part shown in the table is solved.