"""
Unit tests for the analysis run orchestrator
"""

import asyncio
from unittest.mock import patch

import pytest

from clusterviz.models import AnalysisRequest, DatasetType, RunStatus
from clusterviz.orchestrator import LOAD_FAILURE_MESSAGE, AnalysisOrchestrator


def _run(orchestrator, request, **kwargs):
    return asyncio.run(orchestrator.run(request, **kwargs))


class TestAnalysisOrchestrator:
    """Test cases for AnalysisOrchestrator"""

    def test_starts_idle(self, fake_analyzer):
        orchestrator = AnalysisOrchestrator(analyzer=fake_analyzer)
        assert orchestrator.state.status == RunStatus.IDLE
        assert orchestrator.state.results == []

    def test_generated_dataset_run(self, fake_analyzer):
        orchestrator = AnalysisOrchestrator(analyzer=fake_analyzer)

        state = _run(orchestrator, AnalysisRequest(dataset_type=DatasetType.MOONS, n_samples=80))

        assert state.status == RunStatus.LOADED
        assert orchestrator.state == state
        assert state.dataset_name == "Moons"
        assert len(state.points) == 80
        assert [r.algorithm for r in state.results] == [
            "Spectral Clustering", "K-Means", "Agglomerative Clustering", "DBSCAN",
        ]
        assert state.max_metrics is not None
        assert state.commentary == "## Analysis\nSpectral clustering wins."
        assert (state.x_axis_label, state.y_axis_label) == ("Feature 1", "Feature 2")
        results, name = fake_analyzer.calls[0]
        assert name == "Moons"
        assert len(results) == 4

    def test_error_commentary_stored_verbatim(self):
        async def failing_analyzer(results, dataset_name):
            return "Error: OPENAI_API_KEY environment variable not set."

        orchestrator = AnalysisOrchestrator(analyzer=failing_analyzer)
        state = _run(orchestrator, AnalysisRequest(dataset_type=DatasetType.BLOBS))

        assert state.status == RunStatus.LOADED
        assert state.commentary == "Error: OPENAI_API_KEY environment variable not set."
        assert state.error is None

    def test_custom_without_file_fails(self, fake_analyzer):
        orchestrator = AnalysisOrchestrator(analyzer=fake_analyzer)

        state = _run(orchestrator, AnalysisRequest(dataset_type=DatasetType.CUSTOM))

        assert state.status == RunStatus.FAILED
        assert state.error == LOAD_FAILURE_MESSAGE
        assert state.results == []
        assert fake_analyzer.calls == []

    def test_csv_parse_error_fails_before_clustering(self, fake_analyzer):
        orchestrator = AnalysisOrchestrator(analyzer=fake_analyzer)
        request = AnalysisRequest(
            dataset_type=DatasetType.CUSTOM,
            file_name="bad.csv",
            file_contents="only_a_header",
        )

        with patch("clusterviz.orchestrator.run_all") as mock_run_all:
            state = _run(orchestrator, request)

        assert state.status == RunStatus.FAILED
        assert "header and at least one data row" in state.error
        mock_run_all.assert_not_called()
        assert fake_analyzer.calls == []

    def test_csv_upload_run(self, fake_analyzer):
        orchestrator = AnalysisOrchestrator(analyzer=fake_analyzer)
        request = AnalysisRequest(
            dataset_type=DatasetType.CUSTOM,
            file_name="iris.csv",
            file_contents="a,b,label\n1,2,0\n3,4,1\n5,6,0\n7,8,1\n",
            drop_last_column=True,
        )

        state = _run(orchestrator, request)

        assert state.status == RunStatus.LOADED
        assert state.dataset_name == "iris.csv"
        assert [(p.x, p.y) for p in state.points] == [(1, 2), (3, 4), (5, 6), (7, 8)]
        assert state.x_axis_label == "Principal Component 1"
        assert fake_analyzer.calls[0][1] == "iris.csv"

    def test_without_commentary(self, fake_analyzer):
        orchestrator = AnalysisOrchestrator(analyzer=fake_analyzer)

        state = _run(orchestrator, AnalysisRequest(dataset_type=DatasetType.CIRCLES, with_commentary=False))

        assert state.status == RunStatus.LOADED
        assert state.commentary == ""
        assert fake_analyzer.calls == []

    def test_loading_clears_previous_results(self):
        observed = []

        async def observing_analyzer(results, dataset_name):
            observed.append(orchestrator.state)
            return "done"

        orchestrator = AnalysisOrchestrator(analyzer=observing_analyzer)
        _run(orchestrator, AnalysisRequest(dataset_type=DatasetType.MOONS))
        _run(orchestrator, AnalysisRequest(dataset_type=DatasetType.BLOBS))

        second_loading = observed[1]
        assert second_loading.status == RunStatus.LOADING
        assert second_loading.results == []
        assert second_loading.commentary == ""
        assert second_loading.error is None

    def test_failure_after_success_drops_old_results(self, fake_analyzer):
        orchestrator = AnalysisOrchestrator(analyzer=fake_analyzer)
        _run(orchestrator, AnalysisRequest(dataset_type=DatasetType.MOONS))

        state = _run(orchestrator, AnalysisRequest(dataset_type=DatasetType.CUSTOM))

        assert orchestrator.state is state
        assert state.results == []
        assert state.error == LOAD_FAILURE_MESSAGE

    def test_latest_run_supersedes_slower_one(self):
        async def scenario():
            gate = asyncio.Event()

            async def analyzer(results, dataset_name):
                if dataset_name == "Moons":
                    await gate.wait()
                    return "stale"
                return "fresh"

            orchestrator = AnalysisOrchestrator(analyzer=analyzer)
            first = asyncio.create_task(orchestrator.run(AnalysisRequest(dataset_type=DatasetType.MOONS)))
            await asyncio.sleep(0)
            second = await orchestrator.run(AnalysisRequest(dataset_type=DatasetType.BLOBS))
            gate.set()
            first_state = await first
            return orchestrator, first_state, second

        orchestrator, first_state, second_state = asyncio.run(scenario())

        assert first_state.commentary == "stale"
        assert first_state.run_id < second_state.run_id
        assert orchestrator.state == second_state
        assert orchestrator.state.dataset_name == "Blobs"

    def test_clustering_errors_propagate(self, fake_analyzer):
        orchestrator = AnalysisOrchestrator(analyzer=fake_analyzer)

        with patch("clusterviz.orchestrator.run_all", side_effect=RuntimeError("bug")):
            with pytest.raises(RuntimeError, match="bug"):
                _run(orchestrator, AnalysisRequest(dataset_type=DatasetType.MOONS))

        assert orchestrator.state.status == RunStatus.FAILED
        assert orchestrator.state.error == "bug"
        assert not orchestrator.state.is_loading

    def test_analyzer_errors_leave_failed_state(self):
        async def broken_analyzer(results, dataset_name):
            raise ConnectionError("analyzer down")

        orchestrator = AnalysisOrchestrator(analyzer=broken_analyzer)

        with pytest.raises(ConnectionError):
            _run(orchestrator, AnalysisRequest(dataset_type=DatasetType.BLOBS))

        assert orchestrator.state.status == RunStatus.FAILED
        assert orchestrator.state.error == "analyzer down"
        assert orchestrator.state.results == []

    def test_reset(self, fake_analyzer):
        orchestrator = AnalysisOrchestrator(analyzer=fake_analyzer)
        _run(orchestrator, AnalysisRequest(dataset_type=DatasetType.MOONS))

        state = orchestrator.reset()

        assert state.status == RunStatus.IDLE
        assert orchestrator.state.results == []
