"""Reporting utilities (charts, CSV export)."""

from .chart import plot_importances
from .export import export_clean_records_to_csv, export_importances_to_csv

__all__ = [
    "export_clean_records_to_csv",
    "export_importances_to_csv",
    "plot_importances",
]
