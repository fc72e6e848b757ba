"""Export recorded frames for the days that have a visualization."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from .days import get_solution, has_visualization
from .frames import write_visualization
from .inputs import InputConfig, input_path

META_FILENAME = "meta.json"
VISUALS_DIRNAME = "visuals"


@dataclass
class VisualizationResult:
    out_file: Path
    frames: int
    markers: int


def load_meta(day_path: Path) -> Dict[str, Any]:
    meta_path = day_path / META_FILENAME
    if not meta_path.exists():
        return {"visualizations": []}
    return json.loads(meta_path.read_text(encoding="utf-8"))


def register_visualization(day_path: Path, viz_id: str, title: str, relative_file: str) -> Path:
    """Add or replace ``viz_id`` in the day's ``meta.json``."""

    meta = load_meta(day_path)
    entries: List[Dict[str, Any]] = [
        entry
        for entry in meta.get("visualizations", [])
        if isinstance(entry, dict) and entry.get("id") != viz_id
    ]
    entries.append({"id": viz_id, "title": title, "file": relative_file})
    meta["visualizations"] = entries

    meta_path = day_path / META_FILENAME
    meta_path.parent.mkdir(parents=True, exist_ok=True)
    meta_path.write_text(json.dumps(meta, indent=2), encoding="utf-8")
    return meta_path


def generate_visualization(
    day: int,
    config: Optional[InputConfig] = None,
    use_example: bool = False,
    filename: str | None = None,
) -> VisualizationResult:
    """Build the day's frames from its input and write them under ``visuals/``.

    Raises ``KeyError`` when the day is unsolved and ``ValueError`` when it has
    no visualization.
    """

    config = config or InputConfig()
    module = get_solution(day)
    if not has_visualization(module):
        raise ValueError(f"day {day:02d} has no visualization")

    data = module.parse(input_path(config, day, use_example=use_example, filename=filename))
    document = module.build_visualization(data)

    day_path = config.day_dir(day)
    relative_file = f"{VISUALS_DIRNAME}/{module.VISUALIZATION_ID}.json"
    out_file = write_visualization(document, day_path / relative_file)
    register_visualization(day_path, module.VISUALIZATION_ID, module.VISUALIZATION_TITLE, relative_file)

    return VisualizationResult(
        out_file=out_file,
        frames=len(document.frames),
        markers=len(document.palette),
    )


__all__ = [
    "META_FILENAME",
    "VisualizationResult",
    "generate_visualization",
    "load_meta",
    "register_visualization",
]
