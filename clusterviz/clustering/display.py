"""Metric bar scaling for the results panel."""

from __future__ import annotations

from typing import Any, Dict, List, Literal

from pydantic import BaseModel

from ..models.cluster import ClusterResult
from ..models.point import Metrics

Rating = Literal["good", "fair", "poor"]

SILHOUETTE_LABEL = "Silhouette"


class MetricBar(BaseModel):
    label: str
    value: float
    width_percent: float
    rating: Rating
    lower_is_better: bool = False


def _rate(width: float, lower_is_better: bool) -> Rating:
    if lower_is_better:
        if width > 75:
            return "poor"
        if width > 40:
            return "fair"
        return "good"
    if width < 25:
        return "poor"
    if width < 60:
        return "fair"
    return "good"


def metric_bar(
    label: str,
    value: float,
    max_value: float,
    *,
    lower_is_better: bool = False,
) -> MetricBar:
    """Scale one metric against the run maximum.

    Silhouette lives in [-1, 1] and is mapped onto [0, 1] against a fixed
    maximum of 1. Width is clamped to [0, 100].
    """
    if label == SILHOUETTE_LABEL:
        normalized, normalized_max = (value + 1) / 2, 1.0
    else:
        normalized, normalized_max = value, max_value

    width = (normalized / normalized_max) * 100 if normalized_max > 0 else 0.0
    width = max(0.0, min(100.0, width))
    return MetricBar(
        label=label,
        value=value,
        width_percent=round(width, 2),
        rating=_rate(width, lower_is_better),
        lower_is_better=lower_is_better,
    )


def metric_bars(result: ClusterResult, maxima: Metrics) -> List[MetricBar]:
    m = result.metrics
    return [
        metric_bar(SILHOUETTE_LABEL, m.silhouette, 1.0),
        metric_bar("Calinski-Harabasz", m.calinski_harabasz, maxima.calinski_harabasz),
        metric_bar("Davies-Bouldin", m.davies_bouldin, maxima.davies_bouldin, lower_is_better=True),
    ]


def format_param_key(key: str) -> str:
    """``n_clusters`` -> ``K``, ``linkage`` -> ``Linkage``."""
    return " ".join(part[:1].upper() + part[1:] for part in key.replace("n_clusters", "K").split("_"))


def format_params(params: Dict[str, Any]) -> str:
    return ", ".join(f"{format_param_key(k)}: {v}" for k, v in params.items())
