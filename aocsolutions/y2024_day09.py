"""Disk fragmenter: compacting file blocks and whole files."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from itertools import islice, zip_longest
from pathlib import Path

Block = int | None  # a file id, or None for free space


@dataclass
class DiskMap:
    """The blocks of a disk, each holding a file id or free space (None)."""

    blocks: list[Block]

    @classmethod
    def from_layout(cls, layout: str) -> DiskMap:
        """Build a disk from a layout such as '00..111', '.' marking free space."""
        return cls([None if char == "." else int(char) for char in layout])

    def __str__(self) -> str:
        return "".join("." if block is None else str(block) for block in self.blocks)

    def checksum(self) -> int:
        return sum(
            position * block
            for position, block in enumerate(self.blocks)
            if block is not None
        )

    def swap_blocks(self, source: int, target: int) -> None:
        blocks = self.blocks
        blocks[source], blocks[target] = blocks[target], blocks[source]

    def move_file_blocks(self) -> None:
        """Move single blocks from the end into the leftmost free spaces."""
        blocks = self.blocks
        if None not in blocks:
            raise ValueError("disk map has no free space")
        if all(block is None for block in blocks):
            raise ValueError("disk map has no files")

        free = 0
        last = len(blocks) - 1
        while True:
            while blocks[free] is not None:
                free += 1
            while blocks[last] is None:
                last -= 1
            if last <= free:
                return
            self.swap_blocks(free, last)

    def last_file_id(self) -> int:
        """The id of the rightmost file block."""
        for block in reversed(self.blocks):
            if block is not None:
                return block
        raise ValueError("disk map has no files")

    def move_files(self) -> None:
        """Move whole files, highest id first, into the leftmost space that fits."""
        for file_id in range(self.last_file_id(), -1, -1):
            position = self.find_file_position(file_id)
            if position is None:
                continue
            file_start, file_end = position
            space = self._first_free_run(file_end + 1 - file_start, file_start)
            if space is not None and space < file_start:
                self.swap_file(file_start, file_end, space)

    def find_file_position(self, file_id: int) -> tuple[int, int] | None:
        """First and last block positions of a file, or None if absent."""
        positions = [
            position for position, block in enumerate(self.blocks) if block == file_id
        ]
        if not positions:
            return None
        return positions[0], positions[-1]

    def first_available_space(self, size: int) -> int | None:
        """Start of the leftmost run of at least `size` free blocks."""
        return self._first_free_run(size, len(self.blocks))

    def _first_free_run(self, size: int, end: int) -> int | None:
        if size < 1:
            raise ValueError("space size must be at least 1")
        run_start: int | None = None
        for position, block in enumerate(islice(self.blocks, end)):
            if block is not None:
                run_start = None
                continue
            if run_start is None:
                run_start = position
            if position - run_start + 1 >= size:
                return run_start
        return None

    def swap_file(self, file_start: int, file_end: int, target: int) -> None:
        """Move the file at file_start..=file_end into the free space at target."""
        length = file_end + 1 - file_start
        blocks = self.blocks
        file = blocks[file_start : file_end + 1]
        del blocks[file_start : file_end + 1]
        free_space = blocks[target : target + length]
        del blocks[target : target + length]
        blocks[target:target] = file
        blocks[file_start:file_start] = free_space


def parse_disk_map(text: str) -> DiskMap:
    """Expand a dense digit string into its blocks."""
    digits = text.strip()
    blocks: list[Block] = []
    for file_id, (files, free) in enumerate(zip_longest(digits[::2], digits[1::2])):
        if not files.isdigit() or (free is not None and not free.isdigit()):
            raise ValueError(f"disk map must be digits: {text!r}")
        blocks.extend([file_id] * int(files))
        if free is not None:
            blocks.extend([None] * int(free))
    return DiskMap(blocks)


def calculate_checksum(text: str) -> int:
    disk_map = parse_disk_map(text)
    disk_map.move_file_blocks()
    return disk_map.checksum()


def calculate_checksum_whole_files(text: str) -> int:
    disk_map = parse_disk_map(text)
    disk_map.move_files()
    return disk_map.checksum()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Compact the disk.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data/day9"))
    args = parser.parse_args(argv)
    text = args.input.read_text()

    print(f"Part 1: {calculate_checksum(text)}")
    print(f"Part 2: {calculate_checksum_whole_files(text)}")


if __name__ == "__main__":
    main()