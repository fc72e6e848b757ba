"""Deterministic node layouts for graph visualizations."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from sklearn.metrics.pairwise import euclidean_distances

from .connectivity import Point

GOLDEN_ANGLE = 2.39996
GOLDEN_RATIO = 1.618
CANVAS_WIDTH = 800.0
CANVAS_HEIGHT = 500.0
CANVAS_MARGIN = 50.0
SCENE_EXTENT = 10.0
_MIN_DISTANCE = 0.001


def _initial_positions(count: int) -> np.ndarray:
    index = np.arange(count, dtype=float)
    x = np.cos(index * GOLDEN_ANGLE) * 100 + np.sin(index * GOLDEN_RATIO) * 50
    y = np.sin(index * GOLDEN_ANGLE) * 100 + np.cos(index * GOLDEN_RATIO) * 50
    return np.column_stack([x, y])


def project_to_2d(
    points: Sequence[Point],
    iterations: int = 200,
    learning_rate: float = 0.1,
) -> np.ndarray:
    """Return an ``(n, 2)`` array of canvas coordinates.

    A simplified stress-minimising MDS: every iteration moves each node so its
    planar distances get closer to the 3D ones. The start is a fixed spiral, so
    the same points and iteration count always give the same layout.
    """

    count = len(points)
    if count == 0:
        return np.zeros((0, 2))
    if count == 1:
        return np.array([[CANVAS_MARGIN + CANVAS_WIDTH / 2, CANVAS_MARGIN + CANVAS_HEIGHT / 2]])

    coords = np.asarray(points, dtype=float)
    target = euclidean_distances(coords)
    target[target == 0] = _MIN_DISTANCE

    positions = _initial_positions(count)
    for _ in range(iterations):
        diff = positions[:, None, :] - positions[None, :, :]
        planar = np.sqrt((diff ** 2).sum(axis=2))
        planar[planar == 0] = _MIN_DISTANCE
        scale = (target - planar) / planar
        np.fill_diagonal(scale, 0.0)
        positions = positions + (diff * scale[:, :, None]).sum(axis=1) * learning_rate / count

    low = positions.min(axis=0)
    span = positions.max(axis=0) - low
    span[span == 0] = 1.0
    unit = (positions - low) / span
    return unit * np.array([CANVAS_WIDTH, CANVAS_HEIGHT]) + CANVAS_MARGIN


def normalize_3d(points: Sequence[Point]) -> np.ndarray:
    """Centre ``points`` and scale them into ``[-5, 5]`` on their widest axis."""

    if len(points) == 0:
        return np.zeros((0, 3))
    coords = np.asarray(points, dtype=float)
    low = coords.min(axis=0)
    span = coords.max(axis=0) - low
    span[span == 0] = 1.0
    widest = span.max()
    return ((coords - low) / widest - 0.5) * SCENE_EXTENT
