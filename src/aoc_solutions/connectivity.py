"""Closest-pair-first connectivity over 3D points.

All candidate pairs are enumerated once, sorted by squared distance and then
replayed through a :class:`DisjointSet`. The sort is stable, so pairs with
equal weight keep their ``(i, j)`` generation order and the same input always
merges the same pairs in the same order.

Memory grows with the number of pairs, which is quadratic in the number of
points. Inputs in the low thousands are fine.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from operator import attrgetter
from typing import Iterator, List, Optional, Sequence, Tuple

from .structures import DisjointSet

Point = Tuple[float, float, float]

MAX_EDGE_BUDGET = 1000
BRIDGE_SENTINEL = 0


@dataclass(frozen=True)
class CandidateEdge:
    """Unordered point pair weighted by squared Euclidean distance."""

    left: int
    right: int
    weight: float

    @property
    def distance(self) -> float:
        return math.sqrt(self.weight)


@dataclass
class MergeStep:
    """One successful union in the closest-pair-first sequence.

    ``components`` is recorded when the step is yielded. ``forest`` is the live
    forest shared by every step of one run, so it only reflects this step until
    the generator is advanced.
    """

    edge: CandidateEdge
    root: int
    components: int
    forest: DisjointSet


def squared_distance(a: Sequence[float], b: Sequence[float]) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    dz = a[2] - b[2]
    return dx * dx + dy * dy + dz * dz


def sorted_candidate_edges(points: Sequence[Point]) -> List[CandidateEdge]:
    """Return every pair ``i < j`` ordered by weight, ties in generation order."""

    edges: List[CandidateEdge] = []
    for i in range(len(points)):
        first = points[i]
        for j in range(i + 1, len(points)):
            edges.append(CandidateEdge(i, j, squared_distance(first, points[j])))
    edges.sort(key=attrgetter("weight"))
    return edges


def edge_budget(point_count: int) -> int:
    """Number of cheapest pairs applied by :func:`component_size_product`."""

    return min(MAX_EDGE_BUDGET, point_count // 2)


def component_size_product(points: Sequence[Point], *, budget: Optional[int] = None) -> int:
    """Apply the cheapest pairs and multiply the three largest set sizes.

    The number of pairs is always :func:`edge_budget` of the point count.
    ``budget`` overrides it only so small fixtures can exercise other cut-offs.
    Every applied pair counts against the budget, including pairs that were
    already connected.
    """

    if budget is None:
        budget = edge_budget(len(points))
    forest = DisjointSet(len(points))
    for edge in sorted_candidate_edges(points)[:budget]:
        forest.union(edge.left, edge.right)

    sizes = sorted((len(members) for members in forest.groups().values()), reverse=True)
    if len(sizes) < 3:
        raise ValueError(f"need at least three circuits, found {len(sizes)}")
    return math.prod(sizes[:3])


def iter_merges(
    points: Sequence[Point],
    edges: Optional[Sequence[CandidateEdge]] = None,
) -> Iterator[MergeStep]:
    """Yield each successful union until a single component remains.

    Pairs after the one that completes the structure are never evaluated.
    Each call starts over with a fresh forest.
    """

    if edges is None:
        edges = sorted_candidate_edges(points)
    forest = DisjointSet(len(points))
    for edge in edges:
        if not forest.union(edge.left, edge.right):
            continue
        yield MergeStep(
            edge=edge,
            root=forest.find(edge.left),
            components=forest.component_count,
            forest=forest,
        )
        if forest.component_count == 1:
            return


def find_bridging_edge(points: Sequence[Point]) -> Optional[CandidateEdge]:
    """Return the pair whose union leaves exactly one component, if any."""

    for step in iter_merges(points):
        if step.components == 1:
            return step.edge
    return None


def bridging_edge_product(points: Sequence[Point]) -> int | float:
    """Multiply the x coordinates of the bridging pair, or return 0."""

    edge = find_bridging_edge(points)
    if edge is None:
        return BRIDGE_SENTINEL
    return points[edge.left][0] * points[edge.right][0]


__all__ = [
    "BRIDGE_SENTINEL",
    "CandidateEdge",
    "MAX_EDGE_BUDGET",
    "MergeStep",
    "Point",
    "bridging_edge_product",
    "component_size_product",
    "edge_budget",
    "find_bridging_edge",
    "iter_merges",
    "sorted_candidate_edges",
    "squared_distance",
]
