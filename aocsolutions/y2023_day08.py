"""Haunted wasteland: walking a left/right network to the end nodes."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from functools import reduce
from itertools import cycle
from math import lcm
from pathlib import Path

_INSTRUCTIONS = re.compile(r"([A-Za-z0-9]+)\n\n")
_LINE = re.compile(r"([A-Za-z0-9]+) = \(([A-Za-z0-9]+), ([A-Za-z0-9]+)\)")


@dataclass
class Network:
    """Nodes mapped to their left and right neighbours."""

    nodes: dict[str, tuple[str, str]]

    def _step(self, node: str, instruction: str) -> str:
        try:
            left, right = self.nodes[node]
        except KeyError:
            raise ValueError(f"unknown node {node!r}") from None
        if instruction == "L":
            return left
        if instruction == "R":
            return right
        raise ValueError(f"unexpected direction {instruction!r} found")

    def end_frequency(self, instructions: str, start_node: str) -> int:
        """Steps between two visits of the end node first reached from the start."""
        if not instructions:
            raise ValueError("no instructions")
        visited = [start_node]
        end_node: str | None = None
        for instruction in cycle(instructions):
            next_node = self._step(visited[-1], instruction)
            if end_node is not None and next_node == end_node:
                return len(visited)
            if next_node.endswith("Z"):
                visited = [next_node]
                end_node = next_node
            else:
                visited.append(next_node)
        raise AssertionError("unreachable")

    def starting_nodes(self) -> list[str]:
        return [name for name in self.nodes if name.endswith("A")]

    def steps_to_end_nodes(self, starting_nodes: list[str], instructions: str) -> int:
        """Steps until every walk from the starting nodes is on an end node at once."""
        if not starting_nodes:
            raise ValueError("no starting nodes")
        return reduce(
            lcm, (self.end_frequency(instructions, node) for node in starting_nodes)
        )


def parse(text: str) -> tuple[str, Network]:
    """Parse the instruction line and the network below it."""
    match = _INSTRUCTIONS.match(text)
    if match is None:
        raise ValueError("expected instructions followed by a blank line")
    nodes: dict[str, tuple[str, str]] = {}
    for line in text[match.end() :].split("\n"):
        node = _LINE.match(line)
        if node is None:
            break
        nodes[node.group(1)] = (node.group(2), node.group(3))
    if not nodes:
        raise ValueError("network has no nodes")
    return match.group(1), Network(nodes)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Walk the desert network.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data/day8"))
    args = parser.parse_args(argv)
    instructions, network = parse(args.input.read_text())

    steps = network.steps_to_end_nodes(network.starting_nodes(), instructions)
    print(f"Part 2: {steps}")


if __name__ == "__main__":
    main()