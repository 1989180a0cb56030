"""Synthetic quality metrics."""

from __future__ import annotations

from typing import Optional, Sequence

from ..models.point import Metrics, Point
from ..random_source import RandomSource, resolve_rng

SILHOUETTE_RANGE = (-0.6, 1.0)
CALINSKI_HARABASZ_RANGE = (50.0, 550.0)
DAVIES_BOULDIN_RANGE = (0.3, 1.8)


def _draw(rng: RandomSource, low: float, high: float) -> float:
    return round(rng.random() * (high - low) + low, 3)


def synthesize_metrics(
    points: Sequence[Point],
    *,
    rng: Optional[RandomSource] = None,
) -> Metrics:
    """Plausible-looking scores for display.

    ``points`` is accepted for the call shape a real scorer would have and is
    otherwise ignored.
    """
    rng = resolve_rng(rng)
    return Metrics(
        silhouette=_draw(rng, *SILHOUETTE_RANGE),
        calinski_harabasz=_draw(rng, *CALINSKI_HARABASZ_RANGE),
        davies_bouldin=_draw(rng, *DAVIES_BOULDIN_RANGE),
    )


def max_metrics(metrics: Sequence[Metrics]) -> Metrics:
    """Per-field maximum, folded from negative infinity."""
    best_sil = float("-inf")
    best_ch = float("-inf")
    best_db = float("-inf")
    for m in metrics:
        best_sil = max(best_sil, m.silhouette)
        best_ch = max(best_ch, m.calinski_harabasz)
        best_db = max(best_db, m.davies_bouldin)
    return Metrics(silhouette=best_sil, calinski_harabasz=best_ch, davies_bouldin=best_db)
