import pytest

from aocsolutions.y2022_day06 import first_unique_window_end, has_duplicate


def test_has_duplicate():
    assert has_duplicate("aa") is True
    assert has_duplicate("abcd") is False


def test_window_at_start():
    assert first_unique_window_end("abcd", 4) == 4


def test_window_is_unique_and_earliest():
    signal = "mjqjpqmgbljsphdztnvjfqwrcgsmlb"
    end = first_unique_window_end(signal, 4)
    assert not has_duplicate(signal[end - 4 : end])
    assert all(has_duplicate(signal[i : i + 4]) for i in range(end - 4))


def test_known_marker():
    assert first_unique_window_end("mjqjpqmgbljsphdztnvjfqwrcgsmlb", 4) == 7


def test_no_window_is_an_error():
    with pytest.raises(ValueError):
        first_unique_window_end("aaaa", 2)


def test_zero_size_is_an_error():
    with pytest.raises(ValueError):
        first_unique_window_end("abc", 0)