import pytest

from aocsolutions.y2024_day09 import (
    DiskMap,
    calculate_checksum,
    calculate_checksum_whole_files,
    parse_disk_map,
)


def test_parses_blocks():
    assert parse_disk_map("12345") == DiskMap.from_layout("0..111....22222")

    expected = "00...111...2...333.44.5555.6666.777.888899"
    assert parse_disk_map("2333133121414131402") == DiskMap.from_layout(expected)


def test_parse_rejects_non_digits():
    with pytest.raises(ValueError):
        parse_disk_map("12a4")


def test_layout_round_trips_through_str():
    layout = "00...111...2...333.44"
    assert str(DiskMap.from_layout(layout)) == layout


def test_swaps_block():
    disk_map = DiskMap.from_layout("12345")
    disk_map.swap_blocks(0, 1)

    assert disk_map == DiskMap.from_layout("21345")


def test_moves_file_blocks():
    disk_map = parse_disk_map("12345")
    disk_map.move_file_blocks()
    assert disk_map == DiskMap.from_layout("022111222......")

    disk_map = parse_disk_map("2333133121414131402")
    disk_map.move_file_blocks()
    expected = DiskMap.from_layout("0099811188827773336446555566..............")
    assert disk_map == expected


def test_move_file_blocks_needs_free_space():
    with pytest.raises(ValueError):
        DiskMap.from_layout("012").move_file_blocks()


def test_calculates_checksum():
    assert calculate_checksum("2333133121414131402") == 1928


def test_moves_file_blocks_with_zeros():
    disk_map = parse_disk_map("101111")
    disk_map.move_file_blocks()

    assert disk_map == DiskMap.from_layout("012..")


def test_moves_file_blocks_with_tens():
    disk_map = parse_disk_map("101010101010101010111")
    disk_map.move_file_blocks()

    assert disk_map == DiskMap([0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, None])


def test_calculates_checksum_with_zeros():
    assert calculate_checksum("101011") == 5


def test_finds_file_position():
    assert DiskMap.from_layout("000..111").find_file_position(1) == (5, 7)
    disk_map = DiskMap.from_layout("000..111.....222222....")
    assert disk_map.find_file_position(2) == (13, 18)
    assert disk_map.find_file_position(7) is None


def test_last_file_id():
    assert DiskMap.from_layout("0..21..").last_file_id() == 1
    with pytest.raises(ValueError):
        DiskMap.from_layout("...").last_file_id()


def test_swaps_file():
    disk_map = DiskMap.from_layout("000...111")
    disk_map.swap_file(6, 8, 3)
    assert disk_map == DiskMap.from_layout("000111...")

    disk_map = DiskMap.from_layout("0...111...22....")
    disk_map.swap_file(10, 11, 1)
    assert disk_map == DiskMap.from_layout("022.111.........")


def test_finds_first_available_space():
    disk_map = DiskMap.from_layout("..000.....2222..")

    assert disk_map.first_available_space(4) == 5
    assert disk_map.first_available_space(6) is None


def test_first_available_space_rejects_zero_size():
    with pytest.raises(ValueError):
        DiskMap.from_layout("0..").first_available_space(0)


def test_moves_files():
    disk_map = DiskMap.from_layout("000.....2222..")
    disk_map.move_files()
    assert disk_map == DiskMap.from_layout("0002222.......")

    disk_map = DiskMap.from_layout("000.....2222..33...4444.5")
    disk_map.move_files()
    assert disk_map == DiskMap.from_layout("00054444222233...........")


def test_moves_file_of_size_1():
    disk_map = DiskMap.from_layout("000.1111..2")
    disk_map.move_files()

    assert disk_map == DiskMap.from_layout("00021111...")


def test_moves_files2():
    disk_map = parse_disk_map("2333133121414131402")
    disk_map.move_files()

    assert disk_map == DiskMap.from_layout("00992111777.44.333....5555.6666.....8888..")


def test_moves_files3():
    disk_map = DiskMap.from_layout("00.1112...333.44")
    disk_map.move_files()

    assert disk_map == DiskMap.from_layout("002111.44.333...")


def test_doesnt_move_file_that_doesnt_fit():
    disk_map = DiskMap.from_layout("000...2222..")
    disk_map.move_files()

    assert disk_map == DiskMap.from_layout("000...2222..")


def test_calculates_checksum_whole_files():
    assert calculate_checksum_whole_files("2333133121414131402") == 2858


def test_checksum_ignores_free_space():
    assert DiskMap.from_layout("0.1.2").checksum() == 0 * 0 + 2 * 1 + 4 * 2