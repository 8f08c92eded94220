"""
MISSION: Choose a classification scheme before drawing a choropleth.
Heuristic labels for the shape of a numeric distribution (skew, uniformity,
clustering) and the binning method they point to: equal-count quantiles for
well-behaved data, Fisher-Jenks natural breaks for skewed or clumped data.
"""
import logging

import numpy as np
import pandas as pd
import mapclassify
from scipy import stats
from sklearn.cluster import KMeans
from sklearn.metrics import silhouette_score

logger = logging.getLogger(__name__)

# Thresholds. Rules of thumb, not significance tests.
SKEWNESS_THRESHOLD = 0.5     # |sample skew| above this counts as skewed
UNIFORMITY_P_VALUE = 0.05    # KS p-value at or above this counts as uniform
CLUSTER_SILHOUETTE = 0.75    # best k-means silhouette at or above this counts as clustered
MIN_SAMPLES = 3

SCHEME_QUANTILES = "Quantiles"
SCHEME_FISHER_JENKS = "FisherJenks"

SCHEMES = {
    SCHEME_QUANTILES: mapclassify.Quantiles,
    SCHEME_FISHER_JENKS: mapclassify.FisherJenks,
    "EqualInterval": mapclassify.EqualInterval,
    "NaturalBreaks": mapclassify.NaturalBreaks,
}


def _clean(values) -> np.ndarray:
    arr = pd.Series(values, dtype="float64").dropna().to_numpy()
    if len(arr) < MIN_SAMPLES:
        raise ValueError(f"Need at least {MIN_SAMPLES} non-missing values, got {len(arr)}")
    return arr


def assess_skewness(values) -> str:
    """'symmetric', 'right-skewed' (long upper tail) or 'left-skewed'."""
    arr = _clean(values)
    if np.ptp(arr) == 0:
        return "symmetric"

    skew = stats.skew(arr)
    if skew > SKEWNESS_THRESHOLD:
        return "right-skewed"
    if skew < -SKEWNESS_THRESHOLD:
        return "left-skewed"
    return "symmetric"


def assess_uniformity(values) -> str:
    """KS test against a uniform distribution spanning the data's own range."""
    arr = _clean(values)
    lo, span = arr.min(), np.ptp(arr)
    if span == 0:
        return "uniform"

    _, p_value = stats.kstest((arr - lo) / span, "uniform")
    logger.debug(f"Uniformity KS p-value: {p_value:.4f}")
    return "uniform" if p_value >= UNIFORMITY_P_VALUE else "non-uniform"


def detect_clusters(values, max_k=5) -> str:
    """
    'clustered' when the values fall into well separated groups, else 'continuous'.

    Tries k-means for k = 2..max_k on the standardised values and keeps the best
    silhouette score. Fewer than three distinct values cannot be assessed and are
    reported as continuous.
    """
    arr = _clean(values)
    n_distinct = len(np.unique(arr))
    if n_distinct < 3:
        return "continuous"

    X = ((arr - arr.mean()) / arr.std()).reshape(-1, 1)
    best = -1.0
    for k in range(2, min(max_k, n_distinct - 1) + 1):
        labels = KMeans(n_clusters=k, random_state=42, n_init=10).fit_predict(X)
        best = max(best, silhouette_score(X, labels))

    logger.debug(f"Best silhouette score: {best:.3f}")
    return "clustered" if best >= CLUSTER_SILHOUETTE else "continuous"


def recommend_binning(values) -> str:
    """Scheme name accepted by GeoDataFrame.plot(scheme=...)."""
    skew = assess_skewness(values)
    clusters = detect_clusters(values)
    if skew != "symmetric" or clusters == "clustered":
        logger.debug(f"Recommending Fisher-Jenks ({skew}, {clusters})")
        return SCHEME_FISHER_JENKS
    return SCHEME_QUANTILES


def describe_shape(values) -> dict:
    """Summary statistics plus every heuristic label, for printing next to a map."""
    arr = _clean(values)
    return {
        "count": int(len(arr)),
        "mean": float(arr.mean()),
        "median": float(np.median(arr)),
        "std": float(arr.std(ddof=1)),
        "skewness": float(stats.skew(arr)) if np.ptp(arr) > 0 else 0.0,
        "shape": assess_skewness(arr),
        "uniformity": assess_uniformity(arr),
        "clusters": detect_clusters(arr),
        "recommended_scheme": recommend_binning(arr),
    }


def compute_breaks(values, scheme=None, k=5) -> list:
    """Upper bounds of the `k` classes; scheme=None uses the recommendation."""
    arr = _clean(values)
    scheme = scheme or recommend_binning(arr)
    if scheme not in SCHEMES:
        raise ValueError(f"Unknown scheme {scheme!r}. Choose from {sorted(SCHEMES)}")

    # Cannot have more classes than distinct values
    k = min(k, len(np.unique(arr)))
    classifier = SCHEMES[scheme](arr, k=k)
    return [float(b) for b in classifier.bins]
