"""Feature tables shared by normalization and the regression design matrix."""

from __future__ import annotations

from typing import Dict, Tuple

from fighterstats.models import Stance, WeightClass


# Numeric features rescaled to [0, 1] across the surviving dataset.
NORMALIZED_FEATURES: Tuple[str, ...] = (
    "weight_height_ratio",
    "reach_height_ratio",
    "submission_per_takedown",
    "age",
    "significant_strikes_lpm",
    "strike_diff",
    "takedown_lpm",
    "submission_lpm",
    "takedown_accuracy",
    "takedown_defense",
)

TARGET_FEATURE = "win_rate"

# Everything pass 2 rescales: the features plus the regression target.
NORMALIZED_COLUMNS: Tuple[str, ...] = (*NORMALIZED_FEATURES, TARGET_FEATURE)

# Categories absorbed into the intercept of the regression.
BASELINE_STANCE = Stance.ORTHODOX
BASELINE_WEIGHT_CLASS = WeightClass.FLYWEIGHT

STANCE_COLUMNS: Dict[Stance, str] = {
    Stance.ORTHODOX: "is_orthodox",
    Stance.SOUTHPAW: "is_southpaw",
    Stance.SWITCH: "is_switch",
}

WEIGHT_CLASS_COLUMNS: Dict[WeightClass, str] = {
    weight_class: f"wc_{weight_class.value}" for weight_class in WeightClass
}


def stance_feature_columns() -> Tuple[Tuple[Stance, str], ...]:
    return tuple(
        (stance, column) for stance, column in STANCE_COLUMNS.items() if stance is not BASELINE_STANCE
    )


def weight_class_feature_columns() -> Tuple[Tuple[WeightClass, str], ...]:
    return tuple(
        (weight_class, column)
        for weight_class, column in WEIGHT_CLASS_COLUMNS.items()
        if weight_class is not BASELINE_WEIGHT_CLASS
    )


def design_matrix_columns() -> Tuple[str, ...]:
    """Ordered column names of the regression design matrix."""

    return (
        *(column for _, column in stance_feature_columns()),
        *(column for _, column in weight_class_feature_columns()),
        *NORMALIZED_FEATURES,
    )
