"""Polyglot — language identification API for the idiom explorer."""
from fastapi import FastAPI

from log import get_logger
from models import SUPPORTED_LANGUAGES
from detector import DETECT_URL, DETECT_TIMEOUT, check_detector_connectivity
from detect_routes import router as detect_router

logger = get_logger("polyglot.backend")

app = FastAPI(title="Polyglot", description="Heuristic + external language detection for idiom input")
app.include_router(detect_router)


@app.get("/api/health", tags=["System"], summary="Health check")
async def health_check():
    detector_ok = await check_detector_connectivity()
    if not detector_ok:
        logger.warning("Health check degraded: detector unreachable", extra={"component": "health"})
    return {
        "status": "ok" if detector_ok else "degraded",
        "languages": len(SUPPORTED_LANGUAGES),
        "detector": {"reachable": detector_ok, "url": DETECT_URL, "timeout": DETECT_TIMEOUT},
    }


if __name__ == "__main__":
    import os
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.environ.get("POLYGLOT_PORT", "8848")))
