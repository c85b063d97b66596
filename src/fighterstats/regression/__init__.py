"""Regression integration built on top of scikit-learn."""

from .service import (
    FeatureImportance,
    ModelTrainingError,
    RegressionResult,
    fit_design_matrix,
    rank_coefficients,
    train_model,
)

__all__ = [
    "FeatureImportance",
    "ModelTrainingError",
    "RegressionResult",
    "fit_design_matrix",
    "rank_coefficients",
    "train_model",
]
