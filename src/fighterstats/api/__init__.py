"""REST API for the fighterstats pipeline."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

from fastapi import FastAPI, File, Form, HTTPException, UploadFile

from fighterstats.api.schemas import (
    AnalysisResponse,
    FeatureImportanceResponse,
    LoadReportResponse,
    RowRejectionResponse,
)
from fighterstats.features import engineer_features
from fighterstats.ingest import LoadReport, load_fighter_csv
from fighterstats.models import RawRecord
from fighterstats.regression import ModelTrainingError, train_model


def _report_to_response(report: LoadReport) -> LoadReportResponse:
    return LoadReportResponse(
        total_rows=report.total_rows,
        accepted_rows=report.accepted_rows,
        blank_rows=report.blank_rows,
        rejected_rows=report.rejected_rows,
        rejections=[
            RowRejectionResponse(line=rejection.line, reason=rejection.reason)
            for rejection in report.rejections
        ],
    )


def _parse_mapping(mapping_str: str | None) -> dict[str, str]:
    if not mapping_str:
        return {}
    try:
        mapping = json.loads(mapping_str)
    except json.JSONDecodeError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid mapping JSON: {exc}") from exc
    if not isinstance(mapping, dict):
        raise HTTPException(status_code=400, detail="Mapping JSON must be an object")
    return {str(key): str(value) for key, value in mapping.items()}


async def _write_temp(upload: UploadFile | None) -> Path | None:
    if upload is None:
        return None
    contents = await upload.read()
    if not contents:
        return None
    tmp = tempfile.NamedTemporaryFile(delete=False, suffix=".csv")
    try:
        tmp.write(contents)
        tmp.flush()
    finally:
        tmp.close()
    return Path(tmp.name)


async def _load_upload(
    upload: UploadFile, mapping: str | None
) -> tuple[list[RawRecord], LoadReport]:
    parsed_mapping = _parse_mapping(mapping)
    path = await _write_temp(upload)
    if path is None:
        raise HTTPException(status_code=400, detail="fighters file is empty")
    try:
        return load_fighter_csv(path, mapping=parsed_mapping or None)
    except UnicodeDecodeError as exc:
        raise HTTPException(status_code=400, detail=f"fighters file is not UTF-8: {exc}") from exc
    finally:
        path.unlink(missing_ok=True)


def create_app() -> FastAPI:
    app = FastAPI(title="fighterstats")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/preview", response_model=LoadReportResponse)
    async def preview(
        fighters: UploadFile = File(...),
        mapping: str | None = Form(None),
    ) -> LoadReportResponse:
        _, report = await _load_upload(fighters, mapping)
        return _report_to_response(report)

    @app.post("/analyze", response_model=AnalysisResponse)
    async def analyze(
        fighters: UploadFile = File(...),
        mapping: str | None = Form(None),
    ) -> AnalysisResponse:
        raw, report = await _load_upload(fighters, mapping)
        cleaned = engineer_features(raw)
        try:
            result = train_model(cleaned)
        except ModelTrainingError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return AnalysisResponse(
            report=_report_to_response(report),
            clean_records=len(cleaned),
            intercept=result.intercept,
            r_squared=result.r_squared,
            importances=[
                FeatureImportanceResponse(rank=rank, feature=item.name, coefficient=item.coefficient)
                for rank, item in enumerate(result.importances, start=1)
            ],
        )

    return app
