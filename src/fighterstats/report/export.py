"""CSV export helpers for regression output and cleaned datasets."""

from __future__ import annotations

import csv
from io import StringIO
from typing import Iterable, Sequence

from fighterstats.config import NORMALIZED_FEATURES
from fighterstats.models import CleanRecord
from fighterstats.regression import FeatureImportance


_CLEAN_RECORD_HEADER: tuple[str, ...] = (
    "name",
    "stance",
    "is_orthodox",
    "is_southpaw",
    "is_switch",
    "weight_class",
    *NORMALIZED_FEATURES,
    "win_rate",
)


def export_importances_to_csv(importances: Sequence[FeatureImportance]) -> str:
    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(["rank", "feature", "coefficient"])
    for rank, item in enumerate(importances, start=1):
        writer.writerow([rank, item.name, f"{item.coefficient:.6f}"])
    return buffer.getvalue()


def export_clean_records_to_csv(records: Iterable[CleanRecord]) -> str:
    """Serialize cleaned, normalized records with one column per feature."""

    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(_CLEAN_RECORD_HEADER)
    for record in records:
        row = []
        for column in _CLEAN_RECORD_HEADER:
            value = getattr(record, column)
            if column in {"stance", "weight_class"}:
                row.append(value.value)
            elif isinstance(value, float):
                row.append(f"{value:.6f}")
            else:
                row.append(value)
        writer.writerow(row)
    return buffer.getvalue()
