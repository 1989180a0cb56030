"""Pydantic data models for the clustering visualizer."""

from .point import Point, Metrics, NOISE_LABEL
from .cluster import (
    Algorithm,
    AlgorithmParameters,
    AgglomerativeParams,
    AnalysisResults,
    ClusterResult,
    DatasetType,
    DBSCANParams,
    KMeansParams,
    LinkageType,
    SpectralParams,
)
from .run import AnalysisRequest, RunState, RunStatus

__all__ = [
    "Point",
    "Metrics",
    "NOISE_LABEL",
    "Algorithm",
    "AlgorithmParameters",
    "AgglomerativeParams",
    "AnalysisResults",
    "ClusterResult",
    "DatasetType",
    "DBSCANParams",
    "KMeansParams",
    "LinkageType",
    "SpectralParams",
    "AnalysisRequest",
    "RunState",
    "RunStatus",
]
