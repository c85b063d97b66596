from __future__ import annotations

from typing import List

from pydantic import BaseModel

from .report import LoadReportResponse


class FeatureImportanceResponse(BaseModel):
    rank: int
    feature: str
    coefficient: float


class AnalysisResponse(BaseModel):
    report: LoadReportResponse
    clean_records: int
    intercept: float
    r_squared: float | None
    importances: List[FeatureImportanceResponse]
