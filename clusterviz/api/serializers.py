"""JSON shapes returned by the API."""

from __future__ import annotations

from typing import Any, Dict

from ..clustering.display import format_params, metric_bars
from ..models.run import RunState, RunStatus


def serialize_state(state: RunState) -> Dict[str, Any]:
    """Run state as camelCase-metric JSON, with bar scaling per result."""
    payload: Dict[str, Any] = {
        "status": state.status.value,
        "run_id": state.run_id,
        "error": state.error,
    }
    if state.status != RunStatus.LOADED:
        return payload

    payload.update({
        "dataset_name": state.dataset_name,
        "n_points": len(state.points),
        "x_axis_label": state.x_axis_label,
        "y_axis_label": state.y_axis_label,
        "max_metrics": state.max_metrics.model_dump(by_alias=True) if state.max_metrics else None,
        "commentary": state.commentary,
        "results": [
            {
                "algorithm": r.algorithm,
                "params": r.params,
                "params_label": format_params(r.params),
                "metrics": r.metrics.model_dump(by_alias=True),
                "metric_bars": [b.model_dump() for b in metric_bars(r, state.max_metrics)]
                if state.max_metrics else [],
                "noise_count": r.noise_count,
                "data": [p.model_dump() for p in r.data],
            }
            for r in state.results
        ],
    })
    return payload
