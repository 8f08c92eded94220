from .shape import (  # noqa: F401
    assess_skewness,
    assess_uniformity,
    detect_clusters,
    recommend_binning,
    describe_shape,
    compute_breaks,
)
