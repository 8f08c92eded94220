import numpy as np
import pandas as pd
import pytest

from mapbook.models.shape import (
    assess_skewness,
    assess_uniformity,
    detect_clusters,
    recommend_binning,
    describe_shape,
    compute_breaks,
    SCHEME_FISHER_JENKS,
    SCHEME_QUANTILES,
)

EVEN = np.linspace(0, 100, 101)
CLUSTERED = [1.0, 1.1, 1.2, 1.3, 10.0, 10.1, 10.2, 10.3, 20.0, 20.1, 20.2, 20.3]


@pytest.fixture
def right_tailed():
    return np.random.default_rng(0).exponential(scale=1000, size=300)


class TestSkewness:
    def test_symmetric(self):
        assert assess_skewness(EVEN) == "symmetric"

    def test_right_skewed(self, right_tailed):
        assert assess_skewness(right_tailed) == "right-skewed"

    def test_left_skewed(self, right_tailed):
        assert assess_skewness(-right_tailed) == "left-skewed"

    def test_constant(self):
        assert assess_skewness([5, 5, 5, 5]) == "symmetric"

    def test_nan_dropped(self):
        assert assess_skewness([1, 2, 3, np.nan, 4, 5]) == "symmetric"

    def test_too_few_values(self):
        with pytest.raises(ValueError):
            assess_skewness([1, np.nan, 2])


class TestUniformity:
    def test_evenly_spaced_is_uniform(self):
        assert assess_uniformity(EVEN) == "uniform"

    def test_right_tailed_is_not(self, right_tailed):
        assert assess_uniformity(right_tailed) == "non-uniform"

    def test_constant_is_uniform(self):
        assert assess_uniformity([3, 3, 3]) == "uniform"


class TestClusters:
    def test_separated_groups(self):
        assert detect_clusters(CLUSTERED) == "clustered"

    def test_evenly_spaced_is_continuous(self):
        assert detect_clusters(EVEN) == "continuous"

    def test_too_few_distinct_values(self):
        assert detect_clusters([1, 1, 2, 2]) == "continuous"


class TestRecommendBinning:
    def test_even_data_uses_quantiles(self):
        assert recommend_binning(EVEN) == SCHEME_QUANTILES

    def test_skewed_data_uses_fisher_jenks(self, right_tailed):
        assert recommend_binning(right_tailed) == SCHEME_FISHER_JENKS

    def test_clustered_data_uses_fisher_jenks(self):
        assert recommend_binning(CLUSTERED) == SCHEME_FISHER_JENKS

    def test_accepts_series(self, right_tailed):
        assert recommend_binning(pd.Series(right_tailed)) == SCHEME_FISHER_JENKS


def test_describe_shape(right_tailed):
    summary = describe_shape(right_tailed)
    assert summary["count"] == 300
    assert summary["mean"] == pytest.approx(right_tailed.mean())
    assert summary["median"] == pytest.approx(np.median(right_tailed))
    assert summary["skewness"] > 0.5
    assert summary["shape"] == "right-skewed"
    assert summary["uniformity"] == "non-uniform"
    assert summary["recommended_scheme"] == SCHEME_FISHER_JENKS


class TestComputeBreaks:
    def test_quantiles(self):
        breaks = compute_breaks(EVEN, scheme=SCHEME_QUANTILES, k=4)
        assert breaks == pytest.approx([25.0, 50.0, 75.0, 100.0])

    def test_fisher_jenks_separates_groups(self):
        breaks = compute_breaks(CLUSTERED, scheme=SCHEME_FISHER_JENKS, k=3)
        assert breaks == pytest.approx([1.3, 10.3, 20.3])

    def test_default_scheme_follows_recommendation(self):
        assert compute_breaks(CLUSTERED, k=3) == compute_breaks(CLUSTERED, scheme=SCHEME_FISHER_JENKS, k=3)

    def test_last_break_is_max(self, right_tailed):
        assert compute_breaks(right_tailed, k=5)[-1] == pytest.approx(right_tailed.max())

    def test_unknown_scheme(self):
        with pytest.raises(ValueError):
            compute_breaks(EVEN, scheme="Bogus")


class TestFewDistinctValues:
    """Fewer distinct values than requested classes."""

    SPARSE = [1, 1, 1, 1, 1, 2, 2, 40]

    def test_recommended_scheme_is_fisher_jenks(self):
        assert recommend_binning(self.SPARSE) == SCHEME_FISHER_JENKS

    def test_k_is_capped_at_distinct_values(self):
        assert compute_breaks(self.SPARSE) == pytest.approx([1.0, 2.0, 40.0])

    def test_quantiles_capped_too(self):
        assert len(compute_breaks([1, 2, 3], scheme=SCHEME_QUANTILES, k=5)) == 3
