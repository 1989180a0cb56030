"""Dataset endpoints: list dataset types and preview generated points."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException, Query

from ...config import DEFAULT_N_SAMPLES
from ...datasets.generator import describe_dataset, generate_dataset
from ...models.cluster import DatasetType

router = APIRouter(tags=["datasets"])


@router.get("/datasets")
async def list_datasets() -> List[Dict[str, Any]]:
    """Available dataset types with their selector hints."""
    return [
        {
            "name": dt.value,
            "hint": describe_dataset(dt),
            "requires_upload": dt == DatasetType.CUSTOM,
        }
        for dt in DatasetType
    ]


@router.get("/datasets/{dataset_type}")
async def get_dataset(
    dataset_type: str,
    n_samples: int = Query(DEFAULT_N_SAMPLES, ge=2, le=10000),
) -> Dict[str, Any]:
    """Generate a fresh synthetic dataset."""
    points = generate_dataset(dataset_type, n_samples)
    if not points:
        raise HTTPException(status_code=404, detail=f"Unknown or non-generated dataset: {dataset_type}")
    return {
        "dataset": dataset_type,
        "n_points": len(points),
        "data": [{"x": p.x, "y": p.y} for p in points],
    }
