"""Fighter statistics ingestion, feature engineering and win-rate regression."""

__version__ = "0.1.0"
