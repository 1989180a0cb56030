"""Run all four simulated algorithms over one dataset."""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from ..models.cluster import AlgorithmParameters, AnalysisResults, DatasetType
from ..models.point import Point
from ..random_source import RandomSource, resolve_rng
from .metrics import max_metrics
from .runners import run_agglomerative, run_dbscan, run_kmeans, run_spectral

logger = logging.getLogger(__name__)


def run_all(
    points: Sequence[Point],
    params: AlgorithmParameters,
    dataset_type: Union[DatasetType, str],
    *,
    rng: Optional[RandomSource] = None,
) -> AnalysisResults:
    """Spectral, K-Means, Agglomerative and DBSCAN, in that order.

    The runs are sequential and share ``rng``. Errors are not caught here.

    Returns:
        AnalysisResults with the four results and the per-metric maxima
        used to scale the metric bars.
    """
    rng = resolve_rng(rng)
    results = [
        run_spectral(points, params.spectral, dataset_type, rng=rng),
        run_kmeans(points, params.kmeans, dataset_type, rng=rng),
        run_agglomerative(points, params.agglomerative, dataset_type, rng=rng),
        run_dbscan(points, params.dbscan, dataset_type, rng=rng),
    ]
    logger.debug("Simulated %d algorithms on %d points", len(results), len(points))
    return AnalysisResults(
        results=results,
        max_metrics=max_metrics([r.metrics for r in results]),
    )
