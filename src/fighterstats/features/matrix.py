"""Dense design matrix handed to the regression service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from fighterstats.config import (
    NORMALIZED_FEATURES,
    TARGET_FEATURE,
    design_matrix_columns,
    stance_feature_columns,
    weight_class_feature_columns,
)
from fighterstats.models import CleanRecord


@dataclass(frozen=True)
class DesignMatrix:
    features: np.ndarray
    target: np.ndarray
    feature_names: Tuple[str, ...]

    @property
    def n_samples(self) -> int:
        return int(self.features.shape[0])


def _record_row(record: CleanRecord) -> list[float]:
    row = [float(record.stance is stance) for stance, _ in stance_feature_columns()]
    row.extend(
        float(record.weight_class is weight_class)
        for weight_class, _ in weight_class_feature_columns()
    )
    row.extend(float(getattr(record, feature)) for feature in NORMALIZED_FEATURES)
    return row


def build_design_matrix(records: Sequence[CleanRecord]) -> DesignMatrix:
    """Stack ``records`` into an (n x p) feature matrix and a win-rate vector.

    Columns follow ``design_matrix_columns()``: stance one-hots without the
    Orthodox baseline, weight class one-hots without the Flyweight baseline,
    then the normalized numeric features.
    """

    names = design_matrix_columns()
    features = np.zeros((len(records), len(names)), dtype=np.float64)
    target = np.zeros(len(records), dtype=np.float64)
    for i, record in enumerate(records):
        features[i, :] = _record_row(record)
        target[i] = getattr(record, TARGET_FEATURE)
    return DesignMatrix(features=features, target=target, feature_names=names)
