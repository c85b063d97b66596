"""Feature engineering: cleaning, derivation, normalization and matrix assembly."""

from .engineer import (
    build_feature_dataset,
    compute_age,
    compute_win_rate,
    derive_clean_record,
    engineer_features,
    feature_ranges,
    normalize_features,
    parse_stance,
)
from .matrix import DesignMatrix, build_design_matrix

__all__ = [
    "DesignMatrix",
    "build_design_matrix",
    "build_feature_dataset",
    "compute_age",
    "compute_win_rate",
    "derive_clean_record",
    "engineer_features",
    "feature_ranges",
    "normalize_features",
    "parse_stance",
]
