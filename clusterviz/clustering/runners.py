"""Simulated runs of the four clustering algorithms."""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Union

from ..models.cluster import (
    AgglomerativeParams,
    Algorithm,
    ClusterResult,
    DatasetType,
    DBSCANParams,
    KMeansParams,
    SpectralParams,
)
from ..models.point import Point
from ..random_source import RandomSource, resolve_rng
from .dispatch import apply_strategy, lookup
from .metrics import synthesize_metrics


def _run(
    algorithm: Algorithm,
    points: Sequence[Point],
    params: Dict[str, Any],
    n_clusters: int,
    dataset_type: Union[DatasetType, str],
    rng: Optional[RandomSource],
) -> ClusterResult:
    rng = resolve_rng(rng)
    spec = lookup(algorithm, dataset_type)
    clustered = apply_strategy(spec, points, n_clusters, rng=rng)
    return ClusterResult(
        algorithm=algorithm.value,
        data=clustered,
        metrics=synthesize_metrics(clustered, rng=rng),
        params=params,
    )


def run_spectral(
    points: Sequence[Point],
    params: SpectralParams,
    dataset_type: Union[DatasetType, str],
    *,
    rng: Optional[RandomSource] = None,
) -> ClusterResult:
    """Spectral clustering "sees" moons and circles correctly."""
    return _run(Algorithm.SPECTRAL, points, params.model_dump(), params.n_clusters, dataset_type, rng)


def run_kmeans(
    points: Sequence[Point],
    params: KMeansParams,
    dataset_type: Union[DatasetType, str],
    *,
    rng: Optional[RandomSource] = None,
) -> ClusterResult:
    return _run(Algorithm.KMEANS, points, params.model_dump(), params.n_clusters, dataset_type, rng)


def run_agglomerative(
    points: Sequence[Point],
    params: AgglomerativeParams,
    dataset_type: Union[DatasetType, str],
    *,
    rng: Optional[RandomSource] = None,
) -> ClusterResult:
    """``params.linkage`` is reported back but does not change the labels."""
    return _run(Algorithm.AGGLOMERATIVE, points, params.model_dump(), params.n_clusters, dataset_type, rng)


def run_dbscan(
    points: Sequence[Point],
    params: DBSCANParams,
    dataset_type: Union[DatasetType, str],
    *,
    rng: Optional[RandomSource] = None,
) -> ClusterResult:
    """On globular data this always uses three clusters plus ~5% noise; ``eps`` is ignored."""
    return _run(Algorithm.DBSCAN, points, params.model_dump(), 3, dataset_type, rng)
