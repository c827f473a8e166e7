"""Hybrid language resolution: local heuristics reconciled with the external detector.

Each call runs the classifier, makes a single bounded attempt at the external
detector and merges the two answers into a ResolutionResult whose ``method``
records how the answer was reached. Detector failures only lower the
confidence; nothing is raised to the caller.
"""
import asyncio
import time
from typing import Awaitable, Callable, FrozenSet, Iterable, Optional

from log import get_logger
from models import Language, Method, ClassificationResult, ResolutionResult
from heuristics import classify, normalize_text
from patterns import DISTINCTIVE_MARKERS
from detector import DETECT_TIMEOUT, detect_external

logger = get_logger("polyglot.resolver")

Detector = Callable[[str], Awaitable[Optional[Language]]]

MIN_RESOLVE_LENGTH = 3
EXTERNAL_ONLY_CONFIDENCE = 0.8
HEURISTIC_ONLY_FACTOR = 0.7
DISAGREEMENT_CONFIDENCE = 0.6

# Languages sharing enough cognates that the external detector mixes them up
CONFUSABLE_PAIRS: FrozenSet[FrozenSet[Language]] = frozenset({
    frozenset({Language.SPANISH, Language.PORTUGUESE}),
    frozenset({Language.GERMAN, Language.DUTCH}),
    frozenset({Language.FRENCH, Language.PORTUGUESE}),
})


def _result(language: Optional[Language], confidence: float, method: Method) -> ResolutionResult:
    confidence = max(0.0, min(1.0, confidence)) if language is not None else 0.0
    return ResolutionResult(language=language, confidence=confidence, method=method)


def _has_markers(text: str, language: Language) -> bool:
    normalized = normalize_text(text)
    return any(regex.search(normalized) for regex in DISTINCTIVE_MARKERS.get(language, ()))


def _prefers_heuristic(text: str, heuristic: Language, external: Language,
                       confusable_pairs: Iterable[FrozenSet[Language]]) -> bool:
    """For a confusable pair, keep the heuristic answer only on one-sided evidence."""
    if frozenset({heuristic, external}) not in confusable_pairs:
        return False
    return _has_markers(text, heuristic) and not _has_markers(text, external)


def reconcile(text: str, heuristic: ClassificationResult, external: Optional[Language],
              emergency: bool = False,
              confusable_pairs: Iterable[FrozenSet[Language]] = CONFUSABLE_PAIRS) -> ResolutionResult:
    """Merge a classifier result with the detector's answer (None = unavailable)."""
    local = heuristic.language

    if local is not None and external == local:
        boosted = heuristic.confidence + (1.0 - heuristic.confidence) * 0.5
        return _result(local, boosted, Method.AGREEMENT)

    if external is not None and local is None:
        return _result(external, EXTERNAL_ONLY_CONFIDENCE, Method.EXTERNAL_ONLY)

    if local is not None and external is None:
        method = Method.EMERGENCY_FALLBACK if emergency else Method.HEURISTIC_ONLY
        return _result(local, heuristic.confidence * HEURISTIC_ONLY_FACTOR, method)

    if local is not None and external is not None:
        if _prefers_heuristic(text, local, external, confusable_pairs):
            return _result(local, DISAGREEMENT_CONFIDENCE, Method.HEURISTIC_PREFERRED)
        return _result(external, DISAGREEMENT_CONFIDENCE, Method.EXTERNAL_PREFERRED)

    return _result(None, 0.0, Method.ALL_METHODS_FAILED)


def _safe_classify(text: str) -> ClassificationResult:
    try:
        return classify(text)
    except Exception:
        logger.exception("Heuristic classification failed", extra={"component": "resolver"})
        return ClassificationResult(language=None, confidence=0.0)


async def resolve(text, timeout: float = DETECT_TIMEOUT, detector: Optional[Detector] = None,
                  confusable_pairs: Iterable[FrozenSet[Language]] = CONFUSABLE_PAIRS) -> ResolutionResult:
    """Decide the language of ``text`` using heuristics plus one external attempt.

    ``detector`` defaults to :func:`detector.detect_external`; it must return a
    Language or None. It is awaited at most ``timeout`` seconds and cancelled
    after that. Never raises.
    """
    if not isinstance(text, str):
        return _result(None, 0.0, Method.INVALID_INPUT)
    if len(text.strip()) < MIN_RESOLVE_LENGTH:
        return _result(None, 0.0, Method.TEXT_TOO_SHORT)

    start = time.time()
    heuristic = _safe_classify(text)

    detect = detector or detect_external
    external = None
    emergency = False
    try:
        external = await asyncio.wait_for(detect(text), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning("External detection timed out",
                       extra={"component": "resolver", "detail": f"{timeout}s"})
    except Exception:
        emergency = True
        logger.exception("External detection raised", extra={"component": "resolver"})

    if not isinstance(external, Language):
        external = None

    try:
        result = reconcile(text, heuristic, external, emergency=emergency, confusable_pairs=confusable_pairs)
    except Exception:
        logger.exception("Reconciliation failed", extra={"component": "resolver"})
        result = _result(None, 0.0, Method.ALL_METHODS_FAILED)

    logger.info("Language resolved", extra={
        "component": "resolver",
        "method": result.method.value,
        "language": result.language.value if result.language else None,
        "heuristic": heuristic.language.value if heuristic.language else None,
        "external": external.value if external else None,
        "duration_ms": round((time.time() - start) * 1000),
    })
    return result
