"""
Feature engineering for fighter win-rate analysis.

Raw fighter rows are turned into clean, numeric records in two passes:

1. Per-record filtering and derivation. Rows with a non-positive weight or
   height, a non-finite numeric input, or an unknown stance are dropped.
   Survivors get stance one-hots, a weight class bucket, size ratios,
   per-minute grappling rates, age and win rate.
2. Dataset-wide min-max normalization of the numeric features and the
   win-rate target (``NORMALIZED_COLUMNS``). A constant column (including
   every column of a one-record dataset) is mapped to 0.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from fighterstats.config import NORMALIZED_COLUMNS, classify_weight
from fighterstats.ingest import LoadReport, load_fighter_csv
from fighterstats.models import CleanRecord, RawRecord, Stance

logger = logging.getLogger(__name__)

MINUTES_PER_GRAPPLING_WINDOW = 15.0

_STANCE_ONE_HOTS: Dict[Stance, Tuple[float, float, float]] = {
    Stance.ORTHODOX: (1.0, 0.0, 0.0),
    Stance.SOUTHPAW: (0.0, 1.0, 0.0),
    Stance.SWITCH: (0.0, 0.0, 1.0),
}


def _or_zero(value: Optional[float]) -> float:
    return 0.0 if value is None else value


def parse_stance(label: str) -> Optional[Stance]:
    """Exact, case-sensitive lookup of a stance label."""
    try:
        return Stance(label)
    except ValueError:
        return None


def compute_age(date_of_birth: date, today: date) -> int:
    """Whole years between ``date_of_birth`` and ``today``."""
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def compute_win_rate(wins: int, losses: int, draws: int) -> float:
    total = wins + losses + draws
    if total == 0:
        return 0.0
    return wins / total


def derive_clean_record(record: RawRecord, today: date) -> Optional[CleanRecord]:
    """Derive engineered features for one record, or ``None`` if it is invalid."""

    weight = _or_zero(record.weight_in_kg)
    height = _or_zero(record.height_cm)
    reach = _or_zero(record.reach_in_cm)
    strikes_landed = _or_zero(record.significant_strikes_landed_per_minute)
    strikes_absorbed = _or_zero(record.significant_strikes_absorbed_per_minute)
    takedowns_15 = _or_zero(record.average_takedowns_landed_per_15_minutes)
    submissions_15 = _or_zero(record.average_submissions_attempted_per_15_minutes)
    takedown_accuracy = _or_zero(record.takedown_accuracy)
    takedown_defense = _or_zero(record.takedown_defense)

    numerics = (
        weight,
        height,
        reach,
        strikes_landed,
        strikes_absorbed,
        takedowns_15,
        submissions_15,
        takedown_accuracy,
        takedown_defense,
    )
    if not all(math.isfinite(value) for value in numerics):
        logger.debug("Dropping %s: non-finite numeric input", record.name)
        return None
    if weight <= 0.0 or height <= 0.0:
        logger.debug("Dropping %s: missing or non-positive weight/height", record.name)
        return None

    stance = parse_stance(record.stance)
    if stance is None:
        logger.debug("Dropping %s: unknown stance %r", record.name, record.stance)
        return None
    is_orthodox, is_southpaw, is_switch = _STANCE_ONE_HOTS[stance]

    takedown_lpm = takedowns_15 / MINUTES_PER_GRAPPLING_WINDOW
    submission_lpm = submissions_15 / MINUTES_PER_GRAPPLING_WINDOW
    submission_per_takedown = submission_lpm / takedown_lpm if takedown_lpm != 0.0 else 0.0

    return CleanRecord(
        name=record.name,
        stance=stance,
        is_orthodox=is_orthodox,
        is_southpaw=is_southpaw,
        is_switch=is_switch,
        weight_class=classify_weight(weight),
        weight_height_ratio=weight / height,
        reach_height_ratio=reach / height,
        submission_per_takedown=submission_per_takedown,
        age=float(compute_age(record.date_of_birth, today)),
        significant_strikes_lpm=strikes_landed,
        strike_diff=strikes_landed - strikes_absorbed,
        takedown_lpm=takedown_lpm,
        submission_lpm=submission_lpm,
        takedown_accuracy=takedown_accuracy,
        takedown_defense=takedown_defense,
        win_rate=compute_win_rate(record.wins, record.losses, record.draws),
    )


def feature_ranges(
    records: Sequence[CleanRecord],
    features: Sequence[str] = NORMALIZED_COLUMNS,
) -> Dict[str, Tuple[float, float]]:
    """Minimum and maximum of each feature across ``records``."""

    ranges: Dict[str, Tuple[float, float]] = {}
    for feature in features:
        values = [getattr(record, feature) for record in records]
        if values:
            ranges[feature] = (min(values), max(values))
    return ranges


def _rescale(value: float, low: float, high: float) -> float:
    span = high - low
    if span <= 0.0:
        return 0.0
    return (value - low) / span


def normalize_features(
    records: Sequence[CleanRecord],
    features: Sequence[str] = NORMALIZED_COLUMNS,
) -> List[CleanRecord]:
    """Min-max scale ``features`` to [0, 1] over the whole sequence."""

    ranges = feature_ranges(records, features)
    normalized: List[CleanRecord] = []
    for record in records:
        update = {
            feature: _rescale(getattr(record, feature), *ranges[feature])
            for feature in features
        }
        normalized.append(record.model_copy(update=update))
    return normalized


def engineer_features(
    records: Sequence[RawRecord],
    *,
    today: date | None = None,
) -> List[CleanRecord]:
    """Filter, derive and normalize raw fighter records."""

    today = today or date.today()
    cleaned = [
        clean
        for clean in (derive_clean_record(record, today) for record in records)
        if clean is not None
    ]
    dropped = len(records) - len(cleaned)
    if dropped:
        logger.debug("Dropped %d of %d records during cleaning", dropped, len(records))
    return normalize_features(cleaned)


def build_feature_dataset(
    path: Path,
    *,
    today: date | None = None,
    mapping: Mapping[str, str] | None = None,
) -> Tuple[List[CleanRecord], LoadReport]:
    """Load ``path`` and return normalized clean records with the load report."""

    raw, report = load_fighter_csv(path, mapping=mapping)
    return engineer_features(raw, today=today), report
