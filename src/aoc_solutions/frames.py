"""Frame documents replayed by the visualization player."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

GRAPH_FORMAT = "graph-frames"
GRID_FORMAT = "grid-frames"

Color = Dict[str, str]


def color_for_component(component: int) -> Color:
    hue = (component * 137) % 360
    return {"bg": f"hsl({hue} 70% 45%)", "fg": f"hsl({hue} 80% 95%)"}


def color_for_step(step: int, spread: int) -> Color:
    """Dark background colour for grid markers, ``spread`` degrees apart."""

    hue = (step * spread) % 360
    return {"bg": f"hsl({hue} 65% 22%)", "fg": f"hsl({hue} 70% 92%)"}


def _compact(values: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


@dataclass
class GraphNode:
    id: int
    x: float
    y: float
    z: float
    component: int
    x3d: float
    y3d: float
    z3d: float
    label: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "id": self.id,
                "x": self.x,
                "y": self.y,
                "z": self.z,
                "label": self.label,
                "component": self.component,
                "x3d": self.x3d,
                "y3d": self.y3d,
                "z3d": self.z3d,
            }
        )


@dataclass
class GraphEdge:
    source: int
    target: int
    distance: float

    def to_dict(self) -> Dict[str, Any]:
        return {"source": self.source, "target": self.target, "distance": self.distance}


@dataclass
class GraphFrame:
    nodes: List[GraphNode]
    edges: List[GraphEdge]
    action: Optional[str] = None
    highlight_edge: Optional[Tuple[int, int]] = None
    highlight_nodes: Optional[List[int]] = None

    def to_dict(self) -> Dict[str, Any]:
        highlight_edge = None
        if self.highlight_edge is not None:
            source, target = self.highlight_edge
            highlight_edge = {"source": source, "target": target}
        return _compact(
            {
                "nodes": [node.to_dict() for node in self.nodes],
                "edges": [edge.to_dict() for edge in self.edges],
                "action": self.action,
                "highlightEdge": highlight_edge,
                "highlightNodes": self.highlight_nodes,
            }
        )


@dataclass
class GraphVisualization:
    frames: List[GraphFrame] = field(default_factory=list)
    palette: Dict[int, Color] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "format": GRAPH_FORMAT,
            "frames": [frame.to_dict() for frame in self.frames],
            "palette": {str(key): value for key, value in self.palette.items()},
        }


@dataclass
class GridFrame:
    grid: List[str]
    action: Optional[str] = None
    position: Optional[Tuple[int, int]] = None
    marker: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "grid": list(self.grid),
                "action": self.action,
                "position": list(self.position) if self.position is not None else None,
                "marker": self.marker,
            }
        )


@dataclass
class GridVisualization:
    rows: int
    cols: int
    frames: List[GridFrame] = field(default_factory=list)
    palette: Dict[str, Color] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "format": GRID_FORMAT,
            "rows": self.rows,
            "cols": self.cols,
            "frames": [frame.to_dict() for frame in self.frames],
            "palette": dict(self.palette),
        }


Visualization = Union[GraphVisualization, GridVisualization]


def write_visualization(document: Visualization, path: str | Path) -> Path:
    """Serialise ``document`` as indented JSON, creating parent folders."""

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document.to_dict(), indent=2), encoding="utf-8")
    return path


__all__ = [
    "GRAPH_FORMAT",
    "GRID_FORMAT",
    "GraphEdge",
    "GraphFrame",
    "GraphNode",
    "GraphVisualization",
    "GridFrame",
    "GridVisualization",
    "Visualization",
    "color_for_component",
    "color_for_step",
    "write_visualization",
]
