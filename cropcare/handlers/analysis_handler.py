"""JSON API for image validation and disease analysis."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import JSONResponse

from cropcare.models import AnalysisOutcome, CandidateImage
from cropcare.services.analyzer import Analyzer, MissingInputError, analyzer
from cropcare.services.diseases import CROP_TYPES

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


def get_analyzer() -> Analyzer:
    return analyzer


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def read_candidate(upload: UploadFile, max_image_mb: float) -> CandidateImage:
    """Read an upload without buffering more than the size limit allows."""

    limit = int(max_image_mb * 1024 * 1024) + 1
    content = await upload.read(limit)
    size = upload.size if upload.size is not None else len(content)
    return CandidateImage(
        content=content,
        media_type=upload.content_type or "",
        size=size,
        filename=upload.filename or "",
    )


def _dump(outcome: AnalysisOutcome) -> dict:
    return outcome.model_dump(mode="json", by_alias=True)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@router.get("/crops")
async def list_crops():
    return {"crops": CROP_TYPES}


@router.post("/validate")
async def validate_image(file: UploadFile = File(...), svc: Analyzer = Depends(get_analyzer)):
    candidate = await read_candidate(file, svc.validator.config.max_image_mb)
    verdict = await svc.validator.validate(candidate)
    return verdict.model_dump(mode="json", by_alias=True)


@router.post("/analyze/image")
async def analyze_image(
    file: UploadFile = File(...),
    crop_type: str = Form(""),
    symptoms: str = Form(""),
    svc: Analyzer = Depends(get_analyzer),
):
    candidate = await read_candidate(file, svc.validator.config.max_image_mb)
    outcome = await svc.analyze_image(candidate, crop_type=crop_type, symptoms=symptoms)
    if outcome.disease is None:
        return JSONResponse(status_code=422, content=_dump(outcome))
    return _dump(outcome)


@router.post("/analyze/text")
async def analyze_text(
    symptoms: str = Form(""),
    crop_type: str = Form(""),
    svc: Analyzer = Depends(get_analyzer),
):
    try:
        outcome = await svc.analyze_text(symptoms, crop_type=crop_type)
    except MissingInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _dump(outcome)
