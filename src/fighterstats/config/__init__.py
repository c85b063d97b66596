"""Configuration helpers for feature tables, weight classes and defaults."""

from .features import (
    BASELINE_STANCE,
    BASELINE_WEIGHT_CLASS,
    NORMALIZED_COLUMNS,
    NORMALIZED_FEATURES,
    TARGET_FEATURE,
    design_matrix_columns,
    stance_feature_columns,
    weight_class_feature_columns,
)
from .settings import default_chart_path, default_data_path, default_top_n
from .weight_classes import WeightClassRule, classify_weight, iter_weight_classes

__all__ = [
    "BASELINE_STANCE",
    "BASELINE_WEIGHT_CLASS",
    "NORMALIZED_COLUMNS",
    "NORMALIZED_FEATURES",
    "TARGET_FEATURE",
    "WeightClassRule",
    "classify_weight",
    "default_chart_path",
    "default_data_path",
    "default_top_n",
    "design_matrix_columns",
    "iter_weight_classes",
    "stance_feature_columns",
    "weight_class_feature_columns",
]
