"""Ordinary-least-squares fit that ranks feature influence on win rate."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np
from sklearn.linear_model import LinearRegression

from fighterstats.features import DesignMatrix, build_design_matrix
from fighterstats.models import CleanRecord


logger = logging.getLogger(__name__)


class ModelTrainingError(RuntimeError):
    """Raised when the regression cannot be fitted."""


@dataclass(frozen=True)
class FeatureImportance:
    name: str
    coefficient: float


@dataclass(frozen=True)
class RegressionResult:
    importances: List[FeatureImportance]
    intercept: float
    r_squared: float | None
    n_samples: int


def rank_coefficients(names: Sequence[str], coefficients: Sequence[float]) -> List[FeatureImportance]:
    """Pair names with coefficients, largest absolute value first."""

    importances = [
        FeatureImportance(name=name, coefficient=float(coef))
        for name, coef in zip(names, coefficients)
    ]
    importances.sort(key=lambda item: abs(item.coefficient), reverse=True)
    return importances


def fit_design_matrix(matrix: DesignMatrix) -> RegressionResult:
    if matrix.n_samples == 0:
        raise ModelTrainingError("no records available to fit the regression")

    model = LinearRegression(fit_intercept=True)
    try:
        model.fit(matrix.features, matrix.target)
    except ValueError as exc:
        raise ModelTrainingError(f"regression fit failed: {exc}") from exc

    r_squared: float | None = None
    # R^2 is undefined for a single sample or a constant target.
    if matrix.n_samples > 1 and float(np.ptp(matrix.target)) > 0.0:
        r_squared = float(model.score(matrix.features, matrix.target))

    result = RegressionResult(
        importances=rank_coefficients(matrix.feature_names, model.coef_),
        intercept=float(model.intercept_),
        r_squared=r_squared,
        n_samples=matrix.n_samples,
    )
    logger.info(
        "Fitted linear regression on %d samples x %d features (r2=%s)",
        matrix.n_samples,
        len(matrix.feature_names),
        "n/a" if r_squared is None else f"{r_squared:.4f}",
    )
    return result


def train_model(records: Sequence[CleanRecord]) -> RegressionResult:
    """Fit win rate against the engineered features of ``records``."""

    return fit_design_matrix(build_design_matrix(records))
