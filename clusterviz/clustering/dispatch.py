"""Strategy selection per (algorithm, dataset shape).

Adding an algorithm means one row in ``DISPATCH_TABLE`` and, if needed, one
new ``Strategy`` handled in ``apply_strategy``.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple, Union

from ..models.cluster import Algorithm, DatasetType
from ..models.point import Point
from ..random_source import RandomSource
from .strategies import (
    NOISE_FRACTION,
    assign_by_half_index,
    assign_by_radius,
    assign_by_random_centroids,
    assign_by_x_split,
    mark_noise,
)


class DatasetShape(str, Enum):
    MOONS = "moons"
    CIRCLES = "circles"
    GLOBULAR = "globular"  # blobs and uploaded data


class Strategy(str, Enum):
    HALF_INDEX = "half_index"
    RADIUS = "radius"
    X_SPLIT = "x_split"
    CENTROIDS = "centroids"


class StrategySpec(NamedTuple):
    strategy: Strategy
    fixed_k: Optional[int] = None  # overrides the configured n_clusters
    noise_fraction: float = 0.0


DISPATCH_TABLE: Dict[Tuple[Algorithm, DatasetShape], StrategySpec] = {
    (Algorithm.SPECTRAL, DatasetShape.MOONS): StrategySpec(Strategy.HALF_INDEX),
    (Algorithm.SPECTRAL, DatasetShape.CIRCLES): StrategySpec(Strategy.RADIUS),
    (Algorithm.SPECTRAL, DatasetShape.GLOBULAR): StrategySpec(Strategy.CENTROIDS),
    (Algorithm.KMEANS, DatasetShape.MOONS): StrategySpec(Strategy.X_SPLIT),
    (Algorithm.KMEANS, DatasetShape.CIRCLES): StrategySpec(Strategy.X_SPLIT),
    (Algorithm.KMEANS, DatasetShape.GLOBULAR): StrategySpec(Strategy.CENTROIDS),
    (Algorithm.AGGLOMERATIVE, DatasetShape.MOONS): StrategySpec(Strategy.X_SPLIT),
    (Algorithm.AGGLOMERATIVE, DatasetShape.CIRCLES): StrategySpec(Strategy.X_SPLIT),
    (Algorithm.AGGLOMERATIVE, DatasetShape.GLOBULAR): StrategySpec(Strategy.CENTROIDS),
    (Algorithm.DBSCAN, DatasetShape.MOONS): StrategySpec(Strategy.HALF_INDEX),
    (Algorithm.DBSCAN, DatasetShape.CIRCLES): StrategySpec(Strategy.RADIUS),
    (Algorithm.DBSCAN, DatasetShape.GLOBULAR): StrategySpec(
        Strategy.CENTROIDS, fixed_k=3, noise_fraction=NOISE_FRACTION
    ),
}


def shape_for(dataset_type: Union[DatasetType, str]) -> DatasetShape:
    """Map a dataset type to the shape the strategies care about."""
    try:
        dataset_type = DatasetType(dataset_type)
    except ValueError:
        return DatasetShape.GLOBULAR
    if dataset_type == DatasetType.MOONS:
        return DatasetShape.MOONS
    if dataset_type == DatasetType.CIRCLES:
        return DatasetShape.CIRCLES
    return DatasetShape.GLOBULAR


def lookup(algorithm: Algorithm, dataset_type: Union[DatasetType, str]) -> StrategySpec:
    return DISPATCH_TABLE[(algorithm, shape_for(dataset_type))]


def apply_strategy(
    spec: StrategySpec,
    points: Sequence[Point],
    n_clusters: int,
    *,
    rng: Optional[RandomSource] = None,
) -> List[Point]:
    """Run the strategy described by ``spec`` over ``points``."""
    k = spec.fixed_k if spec.fixed_k is not None else n_clusters

    if spec.strategy == Strategy.HALF_INDEX:
        labelled = assign_by_half_index(points)
    elif spec.strategy == Strategy.RADIUS:
        labelled = assign_by_radius(points)
    elif spec.strategy == Strategy.X_SPLIT:
        labelled = assign_by_x_split(points, k)
    elif spec.strategy == Strategy.CENTROIDS:
        labelled = assign_by_random_centroids(points, k, rng=rng)
    else:
        raise ValueError(f"Unknown assignment strategy: {spec.strategy}")

    if spec.noise_fraction > 0:
        labelled = mark_noise(labelled, spec.noise_fraction, rng=rng)
    return labelled
