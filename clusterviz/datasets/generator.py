"""Synthetic 2-D datasets: moons, blobs and concentric circles."""

from __future__ import annotations

import math
from typing import List, Optional, Union

from ..models.cluster import DatasetType
from ..models.point import Point
from ..random_source import RandomSource, resolve_rng

DATASET_HINTS = {
    DatasetType.MOONS: "Tests how algorithms handle non-convex shapes.",
    DatasetType.CIRCLES: "Tests how algorithms handle non-convex shapes.",
    DatasetType.BLOBS: "Ideal for standard, distance-based clustering.",
}


def _jitter(rng: RandomSource, half_width: float) -> float:
    return (rng.random() - 0.5) * half_width * 2


def _arc_angle(i: int, count: int) -> float:
    if count <= 1:
        return 0.0
    return (i / (count - 1)) * math.pi


def make_moons(
    n_samples: int = 200,
    noise: float = 0.08,
    *,
    rng: Optional[RandomSource] = None,
) -> List[Point]:
    """Two interlocking half circles.

    The first ``n_samples // 2`` points trace the upper arc of a unit circle;
    the rest trace an inverted arc centred on (1, 0.5).
    """
    rng = resolve_rng(rng)
    n_out = n_samples // 2
    n_in = n_samples - n_out
    points: List[Point] = []

    for i in range(n_out):
        angle = _arc_angle(i, n_out)
        x = math.cos(angle) + _jitter(rng, noise)
        y = math.sin(angle) + _jitter(rng, noise)
        points.append(Point(x=x, y=y))

    for i in range(n_in):
        angle = _arc_angle(i, n_in)
        x = 1 - math.cos(angle) + _jitter(rng, noise)
        y = 0.5 - math.sin(angle) + _jitter(rng, noise)
        points.append(Point(x=x, y=y))

    return points


def make_blobs(
    n_samples: int = 200,
    centers: int = 3,
    cluster_std: float = 0.5,
    *,
    rng: Optional[RandomSource] = None,
) -> List[Point]:
    """Uniform blobs around random centres in [-4, 4] x [-4, 4].

    Point ``i`` belongs to centre ``i % centers`` (round-robin, so index order
    correlates with group membership).
    """
    rng = resolve_rng(rng)
    centre_points = [
        ((rng.random() - 0.5) * 8, (rng.random() - 0.5) * 8)
        for _ in range(centers)
    ]
    points: List[Point] = []
    for i in range(n_samples):
        cx, cy = centre_points[i % centers]
        x = cx + _jitter(rng, cluster_std)
        y = cy + _jitter(rng, cluster_std)
        points.append(Point(x=x, y=y))
    return points


def make_circles(
    n_samples: int = 200,
    factor: float = 0.5,
    noise: float = 0.05,
    *,
    rng: Optional[RandomSource] = None,
) -> List[Point]:
    """Two concentric rings: the first half on radius 1.0, the rest on ``factor``."""
    rng = resolve_rng(rng)
    points: List[Point] = []
    for i in range(n_samples):
        radius = 1.0 if i < n_samples / 2 else factor
        angle = rng.random() * 2 * math.pi
        x = radius * math.cos(angle) + _jitter(rng, noise)
        y = radius * math.sin(angle) + _jitter(rng, noise)
        points.append(Point(x=x, y=y))
    return points


def generate_dataset(
    dataset_type: Union[DatasetType, str],
    n_samples: int = 200,
    *,
    rng: Optional[RandomSource] = None,
) -> List[Point]:
    """Generate a named synthetic dataset.

    Returns an empty list for Custom or unknown types; callers treat that as
    a load failure.
    """
    try:
        dataset_type = DatasetType(dataset_type)
    except ValueError:
        return []

    if dataset_type == DatasetType.MOONS:
        return make_moons(n_samples, rng=rng)
    if dataset_type == DatasetType.BLOBS:
        return make_blobs(n_samples, rng=rng)
    if dataset_type == DatasetType.CIRCLES:
        return make_circles(n_samples, rng=rng)
    return []


def describe_dataset(dataset_type: Union[DatasetType, str]) -> str:
    """Short hint shown next to the dataset selector."""
    try:
        return DATASET_HINTS.get(DatasetType(dataset_type), "")
    except ValueError:
        return ""
