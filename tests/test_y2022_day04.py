import pytest

from aocsolutions.y2022_day04 import (
    SectionRange,
    count_containing,
    count_overlapping,
    main,
)

PAIRS = """\
2-4,6-8
2-3,4-5
5-7,7-9
2-8,3-7
6-6,4-6
2-6,4-8
"""


def test_from_string():
    assert SectionRange.from_string("2-8") == SectionRange(2, 8)


def test_from_string_rejects_missing_separator():
    with pytest.raises(ValueError):
        SectionRange.from_string("28")


def test_contains():
    outer = SectionRange(2, 8)
    inner = SectionRange(3, 7)
    assert outer.contains(inner)
    assert not inner.contains(outer)
    assert outer.contains(outer)


def test_overlaps_is_symmetric():
    a = SectionRange(5, 7)
    b = SectionRange(7, 9)
    c = SectionRange(2, 4)
    assert a.overlaps(b) and b.overlaps(a)
    assert not a.overlaps(c) and not c.overlaps(a)


def test_containment_implies_overlap():
    ranges = [SectionRange(a, b) for a in range(1, 6) for b in range(a, 6)]
    for first in ranges:
        for second in ranges:
            if first.contains(second):
                assert first.overlaps(second)


def test_counts():
    assert count_containing(PAIRS) == 2
    assert count_overlapping(PAIRS) == 4


def test_containing_never_exceeds_overlapping():
    assert count_containing(PAIRS) <= count_overlapping(PAIRS)


def test_main(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text(PAIRS)
    main([str(path)])
    out = capsys.readouterr().out
    assert out == f"Part 1: {count_containing(PAIRS)}\nPart 2: {count_overlapping(PAIRS)}\n"