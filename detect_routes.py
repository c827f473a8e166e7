"""Language detection API route handlers for Polyglot."""
from log import get_logger

logger = get_logger("polyglot.detect_routes")

from fastapi import APIRouter, HTTPException, Request

from models import SUPPORTED_LANGUAGES, DetectRequest, ResolutionResult, ClassifyResponse
from ratelimit import rate_limit_check, rate_limit_cleanup, get_rate_limit_key
from heuristics import classify, score_languages
from resolver import resolve
from detector import DETECT_TIMEOUT

router = APIRouter()

MAX_INPUT_LEN = 500


def _check_request(request: Request, req: DetectRequest):
    rate_key = get_rate_limit_key(request)
    rate_limit_cleanup()
    if not rate_limit_check(rate_key):
        logger.warning("Rate limit exceeded", extra={"component": "detect_routes", "ip": rate_key})
        raise HTTPException(429, "Too many requests. Please wait a minute.")

    if not req.text or not req.text.strip():
        raise HTTPException(400, "Text cannot be empty")

    if len(req.text) > MAX_INPUT_LEN:
        raise HTTPException(400, f"Input too long (max {MAX_INPUT_LEN} characters)")


@router.post("/api/detect-language", tags=["Detection"], summary="Detect the language of a phrase",
             description="Combines local heuristics with the external detector and reports how the answer was reached.",
             response_model=ResolutionResult)
async def detect_language(request: Request, req: DetectRequest):
    _check_request(request, req)
    return await resolve(req.text, timeout=DETECT_TIMEOUT)


@router.post("/api/classify", tags=["Detection"], summary="Heuristic-only classification with raw scores",
             response_model=ClassifyResponse)
async def classify_text(request: Request, req: DetectRequest):
    _check_request(request, req)
    result = classify(req.text)
    scores = {lang.value: score for lang, score in score_languages(req.text).items()}
    return ClassifyResponse(language=result.language, confidence=result.confidence, scores=scores)


@router.get("/api/languages", tags=["Reference"], summary="List supported languages")
async def get_languages():
    return SUPPORTED_LANGUAGES
