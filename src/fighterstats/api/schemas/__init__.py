"""Pydantic models for API I/O."""

from .analysis import AnalysisResponse, FeatureImportanceResponse
from .report import LoadReportResponse, RowRejectionResponse

__all__ = [
    "AnalysisResponse",
    "FeatureImportanceResponse",
    "LoadReportResponse",
    "RowRejectionResponse",
]
