"""Day 8: wire junction boxes together, closest pair first."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from ..connectivity import (
    Point,
    bridging_edge_product,
    component_size_product,
    iter_merges,
    sorted_candidate_edges,
)
from ..frames import GraphEdge, GraphFrame, GraphNode, GraphVisualization, color_for_component
from ..inputs import load_points
from ..layout import normalize_3d, project_to_2d
from ..structures import DisjointSet

DAY = 8
VISUALIZATION_ID = "graph-connections"
VISUALIZATION_TITLE = "Junction box circuits"


def parse(path: str | Path) -> List[Point]:
    return load_points(path)


def part1(points: Sequence[Point]) -> int:
    return component_size_product(points)


def part2(points: Sequence[Point]) -> int | float:
    return bridging_edge_product(points)


def iter_frames(points: Sequence[Point]) -> Iterator[GraphFrame]:
    """Yield the initial frame, one frame per successful union, then a final frame.

    Each call lays the points out and replays the merges from the beginning.
    """

    count = len(points)
    flat = project_to_2d(points)
    scene = normalize_3d(points)

    def snapshot(forest: Optional[DisjointSet]) -> List[GraphNode]:
        nodes = []
        for index in range(count):
            nodes.append(
                GraphNode(
                    id=index,
                    x=float(flat[index, 0]),
                    y=float(flat[index, 1]),
                    z=float(scene[index, 2]),
                    label=str(index),
                    component=forest.find(index) if forest is not None else index,
                    x3d=float(scene[index, 0]),
                    y3d=float(scene[index, 1]),
                    z3d=float(scene[index, 2]),
                )
            )
        return nodes

    yield GraphFrame(
        nodes=snapshot(None),
        edges=[],
        action=f"Initial state: {count} nodes, each in its own component",
    )

    forest: Optional[DisjointSet] = None
    components = count
    active: List[GraphEdge] = []
    for step in iter_merges(points, sorted_candidate_edges(points)):
        forest = step.forest
        components = step.components
        left, right = step.edge.left, step.edge.right
        distance = step.edge.distance
        active.append(GraphEdge(source=left, target=right, distance=distance))
        yield GraphFrame(
            nodes=snapshot(forest),
            edges=list(active),
            action=(
                f"Connected node {left} ↔ {right} (distance: {distance:.1f}). "
                f"Components remaining: {components}"
            ),
            highlight_edge=(left, right),
            highlight_nodes=[left, right],
        )

    yield GraphFrame(
        nodes=snapshot(forest),
        edges=list(active),
        action=f"Complete: All nodes connected into {components} component(s)",
    )


def build_visualization(points: Sequence[Point]) -> GraphVisualization:
    # every merged root is an original index, so the palette is fixed up front
    palette = {index: color_for_component(index) for index in range(len(points))}
    return GraphVisualization(frames=list(iter_frames(points)), palette=palette)
