"""End-to-end analysis run: acquire data, simulate clustering, get commentary.

State moves ``idle -> loading -> loaded | failed``. Each transition publishes
a new frozen ``RunState``; nothing is mutated in place. When runs overlap,
only the most recently started one may publish, so a slow earlier run can
never overwrite a newer result.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, List, Optional, Sequence, Tuple

from .clustering.aggregator import run_all
from .commentary import analyze_clustering_results_async
from .datasets.csv_ingest import CSVParseError, parse_csv
from .datasets.generator import generate_dataset
from .models.cluster import ClusterResult, DatasetType
from .models.point import Point
from .models.run import AnalysisRequest, RunState, RunStatus
from .random_source import RandomSource

logger = logging.getLogger(__name__)

LOAD_FAILURE_MESSAGE = (
    "Could not load or generate data. Please select a valid dataset "
    "or upload a valid CSV file."
)

Analyzer = Callable[[Sequence[ClusterResult], str], Awaitable[str]]


class AnalysisOrchestrator:
    """Owns the current run state for one user session."""

    def __init__(self, analyzer: Optional[Analyzer] = None):
        self.analyzer: Analyzer = analyzer or analyze_clustering_results_async
        self._state = RunState.idle()
        self._latest_run_id = 0

    @property
    def state(self) -> RunState:
        return self._state

    def _publish(self, state: RunState) -> RunState:
        if state.run_id == self._latest_run_id:
            self._state = state
        else:
            logger.info(
                "Discarding %s state of run %d; run %d superseded it",
                state.status.value, state.run_id, self._latest_run_id,
            )
        return state

    def _acquire(
        self,
        request: AnalysisRequest,
        rng: Optional[RandomSource],
    ) -> Tuple[List[Point], str, str, str]:
        """Load the dataset. Returns (points, dataset name, x label, y label)."""
        if request.dataset_type == DatasetType.CUSTOM and request.file_contents is not None:
            points = parse_csv(request.file_contents, request.drop_last_column)
            name = request.file_name or DatasetType.CUSTOM.value
            return points, name, "Principal Component 1", "Principal Component 2"

        points = generate_dataset(request.dataset_type, request.n_samples, rng=rng)
        return points, request.dataset_type.value, "Feature 1", "Feature 2"

    async def run(
        self,
        request: AnalysisRequest,
        *,
        rng: Optional[RandomSource] = None,
    ) -> RunState:
        """Execute one analysis run and return its final state.

        The returned state is this run's outcome even if a newer run has
        since taken over ``self.state``.

        Unexpected errors publish a failed state and are re-raised.
        """
        self._latest_run_id += 1
        run_id = self._latest_run_id
        self._publish(RunState.loading(run_id))

        try:
            return await self._execute(run_id, request, rng)
        except Exception as e:
            logger.exception("Run %d failed", run_id)
            self._publish(RunState.failed(run_id, str(e)))
            raise

    async def _execute(
        self,
        run_id: int,
        request: AnalysisRequest,
        rng: Optional[RandomSource],
    ) -> RunState:
        try:
            points, dataset_name, x_label, y_label = self._acquire(request, rng)
        except CSVParseError as e:
            logger.warning("Run %d failed to parse CSV: %s", run_id, e)
            return self._publish(RunState.failed(run_id, str(e)))

        if not points:
            logger.warning("Run %d produced no points for %s", run_id, request.dataset_type.value)
            return self._publish(RunState.failed(run_id, LOAD_FAILURE_MESSAGE))

        analysis = run_all(points, request.params, request.dataset_type, rng=rng)

        commentary = ""
        if request.with_commentary:
            # Stored verbatim, error-shaped strings included
            commentary = await self.analyzer(analysis.results, dataset_name)

        return self._publish(RunState(
            status=RunStatus.LOADED,
            run_id=run_id,
            dataset_name=dataset_name,
            points=points,
            results=analysis.results,
            max_metrics=analysis.max_metrics,
            commentary=commentary,
            x_axis_label=x_label,
            y_axis_label=y_label,
        ))

    def reset(self) -> RunState:
        self._latest_run_id += 1
        self._state = RunState.idle()
        return self._state
