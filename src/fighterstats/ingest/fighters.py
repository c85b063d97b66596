"""Helpers to load fighter statistics CSVs and emit typed raw records."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from pydantic import ValidationError

from fighterstats.models import RawRecord


logger = logging.getLogger(__name__)

# Canonical field name -> CSV header. Identity for the published dataset.
DEFAULT_FIGHTER_MAPPING: Dict[str, str] = {
    name: name for name in RawRecord.model_fields
}


@dataclass(frozen=True)
class RowRejection:
    line: int
    reason: str


@dataclass(frozen=True)
class LoadReport:
    total_rows: int = 0
    accepted_rows: int = 0
    blank_rows: int = 0
    rejections: List[RowRejection] = field(default_factory=list)

    @property
    def rejected_rows(self) -> int:
        return len(self.rejections)


def _resolve_header(headers: Sequence[str], mapping: Mapping[str, str]) -> List[str]:
    """Translate CSV headers into RawRecord field names using ``mapping``."""

    by_header = {header: field_name for field_name, header in mapping.items()}
    return [by_header.get(header.strip(), header.strip()) for header in headers]


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "record"
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


def _reject(rejections: List[RowRejection], line: int, reason: str) -> None:
    logger.warning(reason)
    rejections.append(RowRejection(line=line, reason=reason))


def parse_fighter_rows(
    stream: Iterable[str],
    *,
    mapping: Mapping[str, str] | None = None,
) -> Tuple[List[RawRecord], LoadReport]:
    """Validate comma-separated ``stream`` whose first row is the header."""

    lines = csv.reader(stream, delimiter=",")
    mapping = {**DEFAULT_FIGHTER_MAPPING, **(mapping or {})}
    try:
        headers = next(lines)
    except StopIteration:
        return [], LoadReport()

    fields = _resolve_header(headers, mapping)
    expected = len(fields)

    records: List[RawRecord] = []
    rejections: List[RowRejection] = []
    total = 0
    blank = 0
    # line_num is where a record ends; quoted cells can span several lines.
    start = lines.line_num + 1
    for row in lines:
        line = start
        start = lines.line_num + 1
        if all(not value.strip() for value in row):
            blank += 1
            continue
        total += 1
        if len(row) != expected:
            _reject(
                rejections,
                line,
                f"Skipping line {line}: expected {expected} fields, found {len(row)}",
            )
            continue
        payload = dict(zip(fields, row))
        try:
            records.append(RawRecord.model_validate(payload))
        except ValidationError as exc:
            _reject(
                rejections,
                line,
                f"Skipping malformed record at line {line}: {_format_validation_error(exc)}",
            )

    report = LoadReport(
        total_rows=total,
        accepted_rows=len(records),
        blank_rows=blank,
        rejections=rejections,
    )
    return records, report


def load_fighter_csv(
    path: Path,
    *,
    mapping: Optional[Mapping[str, str]] = None,
) -> Tuple[List[RawRecord], LoadReport]:
    """Load fighter rows from ``path``.

    Malformed rows are skipped and reported; only failing to open or read the
    file raises.
    """

    with Path(path).open(newline="", encoding="utf-8") as f:
        records, report = parse_fighter_rows(f, mapping=mapping)
    logger.info(
        "Loaded %d fighter records from %s (%d rejected, %d blank)",
        report.accepted_rows,
        path,
        report.rejected_rows,
        report.blank_rows,
    )
    return records, report
