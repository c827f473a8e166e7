"""External language detection via the public Google Translate endpoint."""
import os
from typing import Optional

import httpx

from log import get_logger
from models import Language, language_from_code

logger = get_logger("polyglot.detector")

# --- Config ---
DETECT_URL = os.environ.get("POLYGLOT_DETECT_URL", "https://translate.googleapis.com/translate_a/single")
DETECT_TIMEOUT = float(os.environ.get("POLYGLOT_DETECT_TIMEOUT", "5"))
DETECT_SAMPLE_LIMIT = 500


def _detected_code(payload) -> Optional[str]:
    # Response is a nested JSON array; the source language code sits at index 2
    if isinstance(payload, list) and len(payload) > 2 and isinstance(payload[2], str):
        return payload[2]
    return None


async def detect_external(text: str, client: Optional[httpx.AsyncClient] = None,
                          timeout: float = DETECT_TIMEOUT) -> Optional[Language]:
    """Ask the translate endpoint which language ``text`` is in.

    Returns None for any failure: non-200 status, transport error, malformed
    body, or a language code outside the supported set.
    """
    sample = text.strip()[:DETECT_SAMPLE_LIMIT]
    if not sample:
        return None
    params = {"client": "gtx", "sl": "auto", "tl": "en", "dt": "t", "q": sample}
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                resp = await own_client.get(DETECT_URL, params=params)
        else:
            resp = await client.get(DETECT_URL, params=params, timeout=timeout)
    except httpx.HTTPError as e:
        logger.warning("Language detection request failed",
                       extra={"component": "detector", "detail": type(e).__name__})
        return None

    if resp.status_code != 200:
        logger.warning("Language detection returned non-200",
                       extra={"component": "detector", "status_code": resp.status_code})
        return None

    try:
        payload = resp.json()
    except ValueError:
        logger.warning("Language detection returned malformed JSON", extra={"component": "detector"})
        return None

    code = _detected_code(payload)
    language = language_from_code(code)
    if language is None:
        logger.info("Unsupported detected language", extra={"component": "detector", "detail": code})
    return language


async def check_detector_connectivity() -> bool:
    try:
        async with httpx.AsyncClient(timeout=DETECT_TIMEOUT) as client:
            resp = await client.get(DETECT_URL, params={"client": "gtx", "sl": "auto", "tl": "en", "dt": "t", "q": "hello"})
            return resp.status_code == 200
    except Exception:
        logger.warning("Language detector not reachable", extra={"component": "detector"})
        return False
