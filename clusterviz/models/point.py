"""Point and metric data models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Cluster label reserved for points not assigned to any cluster
NOISE_LABEL = -1


class Point(BaseModel):
    """A 2-D sample; ``cluster`` stays None until an assignment step runs."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    cluster: Optional[int] = None

    def with_cluster(self, cluster: int) -> "Point":
        return self.model_copy(update={"cluster": cluster})

    @property
    def is_noise(self) -> bool:
        return self.cluster == NOISE_LABEL


class Metrics(BaseModel):
    """Cluster quality scores.

    The values are synthetic: nothing ties them to the geometry of the points
    they are reported for.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    silhouette: float
    calinski_harabasz: float = Field(alias="calinskiHarabasz")
    davies_bouldin: float = Field(alias="daviesBouldin")
