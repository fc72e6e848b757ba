"""Day 11: count routes through the reactor wiring."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple

from ..inputs import read_lines

DAY = 11

Graph = Dict[str, List[str]]


def parse(path: str | Path) -> Graph:
    return parse_lines(read_lines(path))


def parse_lines(lines: List[str]) -> Graph:
    graph: Graph = {}
    for line in lines:
        if not line.strip():
            continue
        name, outputs = line.split(":", 1)
        graph[name.strip()] = outputs.split()
    return graph


def count_paths(
    graph: Graph,
    start: str,
    end: str = "out",
    required: Tuple[str, ...] = (),
) -> int:
    """Count paths from ``start`` to ``end`` that visit every ``required`` node.

    A path that revisits a node on the current route contributes nothing.
    The walk keeps its own stack, so long chains do not hit the recursion
    limit.
    """

    if start not in graph:
        return 0

    memo: Dict[Tuple[str, frozenset], int] = {}
    visiting: Set[str] = set()

    def settled(node: str, seen: frozenset) -> Optional[int]:
        if node == end:
            return int(len(seen) == len(required))
        if node in visiting:
            return 0
        return memo.get((node, seen))

    def enter(node: str, seen: frozenset) -> list:
        visiting.add(node)
        inner = seen | {node} if node in required else seen
        # [memo key, seen below this node, remaining children, running total]
        return [(node, seen), inner, iter(graph.get(node, [])), 0]

    first = settled(start, frozenset())
    if first is not None:
        return first

    stack = [enter(start, frozenset())]
    while stack:
        frame = stack[-1]
        key, seen, children, _ = frame
        for child in children:
            value = settled(child, seen)
            if value is None:
                stack.append(enter(child, seen))
                break
            frame[3] += value
        else:
            stack.pop()
            visiting.discard(key[0])
            memo[key] = frame[3]
            if stack:
                stack[-1][3] += frame[3]
    return memo[(start, frozenset())]


def part1(graph: Graph) -> int:
    return count_paths(graph, "you")


def part2(graph: Graph) -> int:
    return count_paths(graph, "svr", required=("dac", "fft"))
