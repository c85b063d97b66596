"""Command-line interface for ranking fighter features by win-rate influence."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from fighterstats.config import default_chart_path, default_data_path, default_top_n
from fighterstats.config_loader import PipelineProfile
from fighterstats.features import build_feature_dataset
from fighterstats.ingest import LoadReport
from fighterstats.regression import ModelTrainingError, train_model
from fighterstats.report import export_importances_to_csv, plot_importances


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rank fighter features by influence on win rate")
    parser.add_argument(
        "path",
        type=Path,
        nargs="?",
        default=default_data_path(),
        help="Path to the fighter statistics CSV",
    )
    parser.add_argument(
        "--chart",
        type=Path,
        default=default_chart_path(),
        help="Output PNG path for the coefficient chart",
    )
    parser.add_argument("--no-chart", action="store_true", help="Skip chart rendering")
    parser.add_argument(
        "--export",
        type=Path,
        default=None,
        help="Optional path to write ranked coefficients CSV",
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Optional path to write load summary JSON",
    )
    parser.add_argument(
        "--column",
        action="append",
        default=[],
        help="Mapping for CSV columns (e.g., weight_in_kg=Weight)",
    )
    parser.add_argument("--profile", type=Path, help="Load column mapping JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save column mapping JSON", default=None)
    parser.add_argument(
        "--top",
        type=int,
        default=default_top_n(),
        help="Number of ranked features to print (0 prints all)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity for diagnostics",
    )
    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def _report_payload(report: LoadReport) -> dict[str, object]:
    return {
        "total_rows": report.total_rows,
        "accepted_rows": report.accepted_rows,
        "blank_rows": report.blank_rows,
        "rejected_rows": report.rejected_rows,
        "rejections": [
            {"line": rejection.line, "reason": rejection.reason}
            for rejection in report.rejections
        ],
    }


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    mapping = _parse_mapping(args.column)
    if args.profile:
        profile = PipelineProfile.load(args.profile)
        mapping = profile.column_mapping | mapping
    if args.save_profile:
        PipelineProfile(mapping).save(args.save_profile)
        print(f"Saved mapping profile to {args.save_profile}")

    print(f"Loading data from {args.path}...")
    try:
        cleaned, report = build_feature_dataset(args.path, mapping=mapping or None)
    except OSError as exc:
        raise SystemExit(f"Unable to read {args.path}: {exc}") from exc
    print(f"Processed {len(cleaned)} records")
    if report.rejected_rows:
        print(f"Skipped {report.rejected_rows} malformed rows")
    if args.report:
        args.report.write_text(json.dumps(_report_payload(report), indent=2), encoding="utf-8")
        print(f"Wrote load report to {args.report}")

    try:
        result = train_model(cleaned)
    except ModelTrainingError as exc:
        raise SystemExit(f"Model training failed: {exc}") from exc

    shown = result.importances[: args.top] if args.top > 0 else result.importances
    print("\nFeature importances:")
    for item in shown:
        print(f"{item.name:<30} {item.coefficient:>8.4f}")

    if args.export:
        args.export.write_text(export_importances_to_csv(result.importances), encoding="utf-8")
        print(f"Wrote coefficients to {args.export}")

    if not args.no_chart:
        plot_importances(result.importances, args.chart)
        print(f"Wrote {args.chart}")


if __name__ == "__main__":
    main()
