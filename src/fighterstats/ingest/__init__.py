"""Input adapters that turn fighter statistics CSVs into raw records."""

from .fighters import (
    DEFAULT_FIGHTER_MAPPING,
    LoadReport,
    RowRejection,
    load_fighter_csv,
    parse_fighter_rows,
)

__all__ = [
    "DEFAULT_FIGHTER_MAPPING",
    "LoadReport",
    "RowRejection",
    "load_fighter_csv",
    "parse_fighter_rows",
]
