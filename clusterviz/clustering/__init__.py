"""Mock clustering: assignment strategies, dispatch, metrics and aggregation."""

from .strategies import (
    assign_by_half_index,
    assign_by_radius,
    assign_by_random_centroids,
    assign_by_x_split,
    mark_noise,
)
from .dispatch import DISPATCH_TABLE, DatasetShape, Strategy, StrategySpec, apply_strategy, lookup, shape_for
from .metrics import max_metrics, synthesize_metrics
from .runners import run_agglomerative, run_dbscan, run_kmeans, run_spectral
from .aggregator import run_all
from .display import MetricBar, format_param_key, format_params, metric_bar, metric_bars

__all__ = [
    "assign_by_half_index",
    "assign_by_radius",
    "assign_by_random_centroids",
    "assign_by_x_split",
    "mark_noise",
    "DISPATCH_TABLE",
    "DatasetShape",
    "Strategy",
    "StrategySpec",
    "apply_strategy",
    "lookup",
    "shape_for",
    "max_metrics",
    "synthesize_metrics",
    "run_agglomerative",
    "run_dbscan",
    "run_kmeans",
    "run_spectral",
    "run_all",
    "MetricBar",
    "format_param_key",
    "format_params",
    "metric_bar",
    "metric_bars",
]
