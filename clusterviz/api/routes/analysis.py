"""Analysis endpoints: run the four simulated algorithms plus AI commentary."""

from __future__ import annotations

import json
from typing import Any, Dict

from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile
from pydantic import ValidationError

from ...datasets.csv_ingest import CSVParseError, decode_csv_bytes
from ...models.cluster import AlgorithmParameters, DatasetType
from ...models.run import AnalysisRequest, RunStatus
from ..serializers import serialize_state

router = APIRouter(tags=["analysis"])


async def _run(request: Request, body: AnalysisRequest) -> Dict[str, Any]:
    orchestrator = request.app.state.orchestrator
    state = await orchestrator.run(body)
    if state.status == RunStatus.FAILED:
        raise HTTPException(status_code=422, detail=state.error)
    return serialize_state(state)


@router.post("/analyze")
async def analyze(request: Request, body: AnalysisRequest) -> Dict[str, Any]:
    """Run an analysis on a generated dataset (or inline CSV text)."""
    return await _run(request, body)


@router.post("/analyze/upload")
async def analyze_upload(
    request: Request,
    file: UploadFile = File(...),
    params: str = Form("{}"),
    drop_last_column: bool = Form(True),
    with_commentary: bool = Form(True),
) -> Dict[str, Any]:
    """Run an analysis on an uploaded CSV file."""
    try:
        algorithm_params = AlgorithmParameters.model_validate(json.loads(params or "{}"))
    except (json.JSONDecodeError, ValidationError) as e:
        raise HTTPException(status_code=422, detail=f"Invalid algorithm parameters: {e}")

    try:
        contents = decode_csv_bytes(await file.read())
    except CSVParseError as e:
        raise HTTPException(status_code=422, detail=str(e))

    body = AnalysisRequest(
        dataset_type=DatasetType.CUSTOM,
        params=algorithm_params,
        drop_last_column=drop_last_column,
        file_name=file.filename or DatasetType.CUSTOM.value,
        file_contents=contents,
        with_commentary=with_commentary,
    )
    return await _run(request, body)


@router.get("/analysis")
async def current_analysis(request: Request) -> Dict[str, Any]:
    """State of the most recent run."""
    return serialize_state(request.app.state.orchestrator.state)
