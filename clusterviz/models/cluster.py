"""Clustering configuration and result models."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field

from .point import Metrics, NOISE_LABEL, Point

LinkageType = Literal["ward", "complete", "average", "single"]


class DatasetType(str, Enum):
    """Datasets offered by the explorer; Custom means an uploaded CSV."""

    MOONS = "Moons"
    BLOBS = "Blobs"
    CIRCLES = "Circles"
    CUSTOM = "Custom"


class Algorithm(str, Enum):
    """Display labels of the four simulated algorithms, in run order."""

    SPECTRAL = "Spectral Clustering"
    KMEANS = "K-Means"
    AGGLOMERATIVE = "Agglomerative Clustering"
    DBSCAN = "DBSCAN"


class SpectralParams(BaseModel):
    n_clusters: int = Field(default=2, ge=2, le=8)


class KMeansParams(BaseModel):
    n_clusters: int = Field(default=2, ge=2, le=8)


class AgglomerativeParams(BaseModel):
    n_clusters: int = Field(default=2, ge=2, le=8)
    linkage: LinkageType = "ward"  # accepted, does not change the output


class DBSCANParams(BaseModel):
    eps: float = Field(default=0.5, ge=0.1, le=2.0)


class AlgorithmParameters(BaseModel):
    """One parameter bundle per algorithm."""

    spectral: SpectralParams = Field(default_factory=SpectralParams)
    kmeans: KMeansParams = Field(default_factory=KMeansParams)
    agglomerative: AgglomerativeParams = Field(default_factory=AgglomerativeParams)
    dbscan: DBSCANParams = Field(default_factory=DBSCANParams)


class ClusterResult(BaseModel):
    """Output of one simulated algorithm run."""

    model_config = ConfigDict(frozen=True)

    algorithm: str
    data: List[Point] = Field(default_factory=list)
    metrics: Metrics
    params: Dict[str, Any] = Field(default_factory=dict)

    @property
    def noise_count(self) -> int:
        return sum(1 for p in self.data if p.cluster == NOISE_LABEL)

    @property
    def n_clusters(self) -> int:
        return len({p.cluster for p in self.data if p.cluster is not None and p.cluster >= 0})


class AnalysisResults(BaseModel):
    """The four results of a run plus per-field maxima used for chart scaling."""

    model_config = ConfigDict(frozen=True)

    results: List[ClusterResult] = Field(default_factory=list)
    max_metrics: Metrics
