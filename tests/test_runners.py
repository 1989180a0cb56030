"""
Unit tests for strategy dispatch, simulated algorithm runs and aggregation
"""

import math

import pytest

from clusterviz.clustering import (
    DISPATCH_TABLE,
    DatasetShape,
    Strategy,
    lookup,
    run_agglomerative,
    run_all,
    run_dbscan,
    run_kmeans,
    run_spectral,
    shape_for,
)
from clusterviz.datasets import generate_dataset
from clusterviz.models import (
    AgglomerativeParams,
    Algorithm,
    AlgorithmParameters,
    DatasetType,
    DBSCANParams,
    KMeansParams,
    NOISE_LABEL,
    SpectralParams,
)
from clusterviz.random_source import SequenceRandom


class TestDispatch:
    """Test cases for the dispatch table"""

    def test_table_covers_every_combination(self):
        for algorithm in Algorithm:
            for shape in DatasetShape:
                assert (algorithm, shape) in DISPATCH_TABLE

    def test_shape_for(self):
        assert shape_for(DatasetType.MOONS) == DatasetShape.MOONS
        assert shape_for("Circles") == DatasetShape.CIRCLES
        assert shape_for(DatasetType.BLOBS) == DatasetShape.GLOBULAR
        assert shape_for(DatasetType.CUSTOM) == DatasetShape.GLOBULAR

    def test_non_convex_shapes(self):
        assert lookup(Algorithm.SPECTRAL, DatasetType.MOONS).strategy == Strategy.HALF_INDEX
        assert lookup(Algorithm.DBSCAN, DatasetType.CIRCLES).strategy == Strategy.RADIUS
        assert lookup(Algorithm.KMEANS, DatasetType.CIRCLES).strategy == Strategy.X_SPLIT
        assert lookup(Algorithm.AGGLOMERATIVE, DatasetType.MOONS).strategy == Strategy.X_SPLIT

    def test_dbscan_globular_spec(self):
        spec = lookup(Algorithm.DBSCAN, DatasetType.BLOBS)
        assert spec.strategy == Strategy.CENTROIDS
        assert spec.fixed_k == 3
        assert spec.noise_fraction == pytest.approx(0.05)


class TestRunners:
    """Test cases for the four simulated algorithms"""

    def setup_method(self):
        self.moons = generate_dataset(DatasetType.MOONS, 200)
        self.circles = generate_dataset(DatasetType.CIRCLES, 200)
        self.blobs = generate_dataset(DatasetType.BLOBS, 200)

    def test_spectral_moons_half_split(self):
        result = run_spectral(self.moons, SpectralParams(n_clusters=4), DatasetType.MOONS)

        assert result.algorithm == "Spectral Clustering"
        assert [p.cluster for p in result.data] == [0] * 100 + [1] * 100
        assert result.params == {"n_clusters": 4}

    def test_spectral_circles_matches_radius_rule(self):
        result = run_spectral(self.circles, SpectralParams(), DatasetType.CIRCLES)

        expected = [0 if math.hypot(p.x, p.y) > 0.75 else 1 for p in self.circles]
        assert [p.cluster for p in result.data] == expected
        assert [(p.x, p.y) for p in result.data] == [(p.x, p.y) for p in self.circles]

    def test_spectral_blobs_uses_configured_k(self):
        result = run_spectral(self.blobs, SpectralParams(n_clusters=5), DatasetType.BLOBS)
        assert all(0 <= p.cluster < 5 for p in result.data)

    def test_kmeans_moons_positional_split(self):
        result = run_kmeans(self.moons, KMeansParams(n_clusters=3), DatasetType.MOONS)

        labels = [p.cluster for p in result.data]
        assert result.algorithm == "K-Means"
        assert labels == sorted(labels)
        assert set(labels) == {0, 1, 2}

    def test_agglomerative_reports_linkage(self):
        result = run_agglomerative(
            self.circles, AgglomerativeParams(n_clusters=2, linkage="single"), DatasetType.CIRCLES
        )

        assert result.algorithm == "Agglomerative Clustering"
        assert result.params == {"n_clusters": 2, "linkage": "single"}
        labels = [p.cluster for p in result.data]
        assert labels == sorted(labels)

    def test_linkage_does_not_change_labels(self):
        ward = run_agglomerative(self.moons, AgglomerativeParams(linkage="ward"), DatasetType.MOONS)
        single = run_agglomerative(self.moons, AgglomerativeParams(linkage="single"), DatasetType.MOONS)
        assert [p.cluster for p in ward.data] == [p.cluster for p in single.data]

    def test_dbscan_moons_and_circles(self):
        moons = run_dbscan(self.moons, DBSCANParams(), DatasetType.MOONS)
        circles = run_dbscan(self.circles, DBSCANParams(), DatasetType.CIRCLES)

        assert moons.algorithm == "DBSCAN"
        assert moons.noise_count == 0
        assert [p.cluster for p in moons.data] == [0] * 100 + [1] * 100
        expected = [0 if math.hypot(p.x, p.y) > 0.75 else 1 for p in self.circles]
        assert [p.cluster for p in circles.data] == expected

    @pytest.mark.parametrize("dataset_type", [DatasetType.BLOBS, DatasetType.CUSTOM])
    def test_dbscan_globular_noise(self, dataset_type):
        result = run_dbscan(self.blobs, DBSCANParams(eps=1.2), dataset_type)

        assert result.noise_count <= math.floor(0.05 * len(self.blobs))
        assert all(p.cluster == NOISE_LABEL or 0 <= p.cluster < 3 for p in result.data)
        assert result.params == {"eps": 1.2}

    def test_metrics_ranges(self):
        result = run_kmeans(self.blobs, KMeansParams(), DatasetType.BLOBS)
        m = result.metrics
        assert -0.6 <= m.silhouette <= 1.0
        assert 50 <= m.calinski_harabasz <= 550
        assert 0.3 <= m.davies_bouldin <= 1.8

    def test_result_is_immutable(self):
        result = run_kmeans(self.blobs, KMeansParams(), DatasetType.BLOBS)
        with pytest.raises(Exception):
            result.algorithm = "Other"


class TestRunAll:
    """Test cases for the result aggregator"""

    @pytest.mark.parametrize("dataset_type", list(DatasetType))
    def test_four_results_in_order_with_maxima(self, dataset_type):
        points = generate_dataset(DatasetType.BLOBS, 60)
        analysis = run_all(points, AlgorithmParameters(), dataset_type)

        assert [r.algorithm for r in analysis.results] == [
            "Spectral Clustering",
            "K-Means",
            "Agglomerative Clustering",
            "DBSCAN",
        ]
        metrics = [r.metrics for r in analysis.results]
        assert analysis.max_metrics.silhouette == max(m.silhouette for m in metrics)
        assert analysis.max_metrics.calinski_harabasz == max(m.calinski_harabasz for m in metrics)
        assert analysis.max_metrics.davies_bouldin == max(m.davies_bouldin for m in metrics)
        assert all(len(r.data) == 60 for r in analysis.results)

    def test_injected_source_makes_runs_reproducible(self):
        points = generate_dataset(DatasetType.BLOBS, 40, rng=SequenceRandom([0.1, 0.7, 0.3]))
        params = AlgorithmParameters()

        first = run_all(points, params, DatasetType.BLOBS, rng=SequenceRandom([0.2, 0.9, 0.4, 0.6]))
        second = run_all(points, params, DatasetType.BLOBS, rng=SequenceRandom([0.2, 0.9, 0.4, 0.6]))

        assert first == second

    def test_params_come_from_each_bundle(self):
        params = AlgorithmParameters.model_validate({
            "spectral": {"n_clusters": 3},
            "kmeans": {"n_clusters": 4},
            "agglomerative": {"n_clusters": 5, "linkage": "average"},
            "dbscan": {"eps": 0.7},
        })
        analysis = run_all(generate_dataset(DatasetType.MOONS, 30), params, DatasetType.MOONS)

        assert [r.params for r in analysis.results] == [
            {"n_clusters": 3},
            {"n_clusters": 4},
            {"n_clusters": 5, "linkage": "average"},
            {"eps": 0.7},
        ]
