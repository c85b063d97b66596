from __future__ import annotations

from pydantic import BaseModel, Field


class RowRejectionResponse(BaseModel):
    line: int
    reason: str


class LoadReportResponse(BaseModel):
    total_rows: int
    accepted_rows: int
    blank_rows: int
    rejected_rows: int
    rejections: list[RowRejectionResponse] = Field(default_factory=list)
