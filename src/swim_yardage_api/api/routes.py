"""
Analyze endpoint

GET  /api/analyze  diagnostics: which build and strategy are deployed
POST /api/analyze  {"text": "..."} -> yardage breakdown

Any other method on the route answers 405 through the exception handlers.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from swim_yardage_api.analyzers import WorkoutAnalyzer, get_analyzer
from swim_yardage_api.auth import require_api_token
from swim_yardage_api.config import settings
from swim_yardage_api.exceptions import BadRequestError, SwimAnalyzerError

logger = logging.getLogger(__name__)

router = APIRouter()

MAX_TEXT_LENGTH = 50000


async def read_workout_text(
    request: Request,
    _: None = Depends(require_api_token),
) -> str:
    """Pull `text` out of the JSON body, after authentication has passed."""
    raw_body = await request.body()
    if not raw_body.strip():
        raise BadRequestError("No text provided")

    try:
        body = await request.json()
    except ValueError:
        raise BadRequestError("Invalid JSON body")

    text = body.get("text") if isinstance(body, dict) else None
    if not isinstance(text, str) or not text.strip():
        raise BadRequestError("No text provided")
    if len(text) > MAX_TEXT_LENGTH:
        raise BadRequestError(f"Text too long (max {MAX_TEXT_LENGTH} characters)")
    return text


@router.get("/api/analyze")
def analyze_diagnostics(analyzer: WorkoutAnalyzer = Depends(get_analyzer)) -> Dict[str, Any]:
    return {
        "ok": True,
        "method": "GET",
        "build": settings.BUILD_ID,
        **analyzer.describe(),
    }


@router.post("/api/analyze")
def analyze_workout(
    text: str = Depends(read_workout_text),
    analyzer: WorkoutAnalyzer = Depends(get_analyzer),
) -> Dict[str, Any]:
    try:
        return analyzer.analyze_text(text)
    except SwimAnalyzerError:
        raise
    except Exception as e:
        logger.exception(f"{analyzer.name} analysis failed: {e}")
        raise SwimAnalyzerError(f"Server error: {e}")


@router.get("/healthz")
def healthz() -> Dict[str, str]:
    return {"status": "ok"}
