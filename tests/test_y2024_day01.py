import pytest

from aocsolutions.y2024_day01 import (
    main,
    parse_columns,
    sum_distances,
    sum_similarities,
)

INPUT = """\
3   4
4   3
2   5
1   3
3   9
3   3
"""


def test_parses_columns():
    lefts, rights = parse_columns(INPUT)
    assert lefts == [3, 4, 2, 1, 3, 3]
    assert rights == [4, 3, 5, 3, 9, 3]


def test_sums_distances():
    assert sum_distances(INPUT) == 11


def test_sums_similarities():
    assert sum_similarities(INPUT) == 31


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        parse_columns("3\n")


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(INPUT)
    main([str(path)])
    assert capsys.readouterr().out == "Part 1: 11\nPart 2: 31\n"