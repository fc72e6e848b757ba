"""Read-only HTTP access to exported visualizations."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from flask import Flask, Response, jsonify, make_response

from .inputs import day_dir, get_year_config
from .visualize import META_FILENAME

CONTENT_TYPES = {
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
}


def guess_content_type(suffix: str) -> str:
    return CONTENT_TYPES.get(suffix.lower(), "application/octet-stream")


def error_response(message: str, status: int) -> Response:
    resp = make_response(jsonify({"error": message}), status)
    resp.headers["Content-Type"] = "application/json"
    return resp


def resolve_visualization_file(day_path: Path, entries: List[Dict[str, Any]], viz_id: str) -> Optional[Path]:
    """Return the file registered as ``viz_id`` if it stays inside ``day_path``."""

    entry = next(
        (item for item in entries if isinstance(item, dict) and item.get("id") == viz_id),
        None,
    )
    if entry is None or not entry.get("file"):
        return None
    base = day_path.resolve()
    candidate = (base / entry["file"]).resolve()
    if not candidate.is_relative_to(base):
        return None
    return candidate


def create_app(data_dir: str | Path) -> Flask:
    app = Flask(__name__)
    app.config["DATA_DIR"] = Path(data_dir)
    app.json.sort_keys = False

    def locate_day(year: str, day: str) -> Optional[Path]:
        try:
            year_num = int(year)
            day_num = int(day)
        except ValueError:
            return None
        year_config = get_year_config(year_num)
        if year_config is None or not 1 <= day_num <= year_config.total_days:
            return None
        return day_dir(app.config["DATA_DIR"], year_num, day_num)

    def read_meta(day_path: Path) -> Dict[str, Any]:
        meta = json.loads((day_path / META_FILENAME).read_text(encoding="utf-8"))
        if not isinstance(meta, dict):
            raise ValueError("metadata must be an object")
        return meta

    @app.route("/api/visuals/<year>/<day>", methods=["GET"])
    def list_visuals(year: str, day: str):
        day_path = locate_day(year, day)
        if day_path is None:
            return error_response("Not found", 404)
        if not (day_path / META_FILENAME).exists():
            return error_response("No metadata for day", 404)
        try:
            meta = read_meta(day_path)
        except (ValueError, UnicodeDecodeError):
            return error_response("Invalid metadata", 500)
        return jsonify({"visualizations": meta.get("visualizations", [])})

    @app.route("/api/visuals/<year>/<day>/<viz>", methods=["GET"])
    def get_visual(year: str, day: str, viz: str):
        day_path = locate_day(year, day)
        if day_path is None:
            return error_response("Not found", 404)
        if not (day_path / META_FILENAME).exists():
            return error_response("No metadata for day", 404)
        try:
            meta = read_meta(day_path)
        except (ValueError, UnicodeDecodeError):
            return error_response("Invalid metadata", 500)

        viz_file = resolve_visualization_file(day_path, meta.get("visualizations") or [], viz)
        if viz_file is None or not viz_file.is_file():
            return error_response("Visualization not found", 404)

        return Response(viz_file.read_bytes(), status=200, content_type=guess_content_type(viz_file.suffix))

    return app


__all__ = ["create_app", "guess_content_type", "resolve_visualization_file"]
