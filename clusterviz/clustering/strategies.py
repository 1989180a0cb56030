"""Mock cluster assignment strategies.

None of these run a real clustering algorithm. They produce labels that look
like what a given algorithm would report on a given dataset shape.
Every strategy returns new Point objects; inputs are never modified.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

import numpy as np

from ..models.point import NOISE_LABEL, Point
from ..random_source import RandomSource, random_index, resolve_rng

RADIUS_THRESHOLD = 0.75  # between the inner (0.5) and outer (1.0) ring
NOISE_FRACTION = 0.05


def assign_by_x_split(points: Sequence[Point], k: int) -> List[Point]:
    """Sort by x and cut into ``k`` contiguous, roughly equal blocks.

    Simulates centroid-based methods failing on non-convex data. The result
    is returned in x-sorted order.
    """
    if not points or k <= 0:
        return []
    ordered = sorted(points, key=lambda p: p.x)
    total = len(ordered)
    return [
        p.with_cluster(min(k - 1, (i * k) // total))
        for i, p in enumerate(ordered)
    ]


def assign_by_random_centroids(
    points: Sequence[Point],
    k: int,
    *,
    rng: Optional[RandomSource] = None,
) -> List[Point]:
    """Label each point with its nearest of ``k`` randomly picked points.

    Centroids are drawn with replacement, so two of them may coincide. Ties
    go to the lowest centroid index.
    """
    if not points or k <= 0:
        return []
    rng = resolve_rng(rng)
    coords = np.array([[p.x, p.y] for p in points], dtype=float)
    picks = [random_index(rng, len(points)) for _ in range(k)]
    means = coords[picks]

    # (n_points, k) distance matrix
    deltas = coords[:, None, :] - means[None, :, :]
    distances = np.sqrt((deltas ** 2).sum(axis=2))
    labels = np.argmin(distances, axis=1)

    return [p.with_cluster(int(label)) for p, label in zip(points, labels)]


def assign_by_half_index(points: Sequence[Point]) -> List[Point]:
    """First ``n // 2`` points are cluster 0, the rest cluster 1.

    Matches how the moons generator orders its two arcs.
    """
    half = len(points) // 2
    return [p.with_cluster(0 if i < half else 1) for i, p in enumerate(points)]


def assign_by_radius(
    points: Sequence[Point],
    threshold: float = RADIUS_THRESHOLD,
) -> List[Point]:
    """Points further than ``threshold`` from the origin are cluster 0, others 1."""
    return [
        p.with_cluster(0 if math.hypot(p.x, p.y) > threshold else 1)
        for p in points
    ]


def mark_noise(
    points: Sequence[Point],
    fraction: float = NOISE_FRACTION,
    *,
    rng: Optional[RandomSource] = None,
) -> List[Point]:
    """Relabel ``floor(n * fraction)`` random draws as noise.

    Draws are independent, so the same point can be picked twice and the
    final noise share may be lower than ``fraction``.
    """
    labelled = list(points)
    if not labelled:
        return labelled
    rng = resolve_rng(rng)
    noise_count = math.floor(len(labelled) * fraction)
    for _ in range(noise_count):
        idx = random_index(rng, len(labelled))
        labelled[idx] = labelled[idx].with_cluster(NOISE_LABEL)
    return labelled
