"""Analysis run request and state models."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..config import DEFAULT_N_SAMPLES
from .cluster import AlgorithmParameters, ClusterResult, DatasetType
from .point import Metrics, Point


class AnalysisRequest(BaseModel):
    """Everything a single analysis run needs."""

    dataset_type: DatasetType = DatasetType.MOONS
    params: AlgorithmParameters = Field(default_factory=AlgorithmParameters)
    drop_last_column: bool = True
    n_samples: int = Field(default=DEFAULT_N_SAMPLES, ge=2, le=10000)
    file_name: Optional[str] = None
    file_contents: Optional[str] = None
    with_commentary: bool = True


class RunStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class RunState(BaseModel):
    """Snapshot of the orchestrator. Replaced as a whole on every transition."""

    model_config = ConfigDict(frozen=True)

    status: RunStatus = RunStatus.IDLE
    run_id: int = 0
    dataset_name: str = ""
    points: List[Point] = Field(default_factory=list)
    results: List[ClusterResult] = Field(default_factory=list)
    max_metrics: Optional[Metrics] = None
    commentary: str = ""
    error: Optional[str] = None
    x_axis_label: str = "Feature 1"
    y_axis_label: str = "Feature 2"

    @classmethod
    def idle(cls) -> "RunState":
        return cls()

    @classmethod
    def loading(cls, run_id: int) -> "RunState":
        return cls(status=RunStatus.LOADING, run_id=run_id)

    @classmethod
    def failed(cls, run_id: int, error: str) -> "RunState":
        return cls(status=RunStatus.FAILED, run_id=run_id, error=error)

    @property
    def is_loading(self) -> bool:
        return self.status == RunStatus.LOADING
