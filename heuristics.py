"""Local, pattern-based language classifier.

No I/O: scores the text against every language's pattern set and picks the
unique top scorer. Ambiguous (tied) or weak evidence yields no language.
"""
import unicodedata
from typing import Dict

from models import Language, ClassificationResult
from patterns import PATTERN_SETS

MIN_TEXT_LENGTH = 3     # characters, after trimming
MIN_SCORE = 2           # a single function word is the least evidence we accept

# Confidence shaping
DENSITY_SCALE = 2.0
SHORT_TEXT_LENGTH = 10
SHORT_TEXT_PENALTY = 0.5
HIGH_SCORE = 10
HIGH_SCORE_BOOST = 1.2
VERY_HIGH_SCORE = 20
VERY_HIGH_SCORE_BOOST = 1.5

_APOSTROPHES = str.maketrans({"’": "'", "‘": "'", "ʼ": "'", "`": "'"})

_NO_LANGUAGE = ClassificationResult(language=None, confidence=0.0)


def normalize_text(text: str) -> str:
    """NFC-compose, unify apostrophes and lower-case (CJK and tone marks are unaffected)."""
    return unicodedata.normalize("NFC", text).translate(_APOSTROPHES).strip().lower()


def score_languages(text: str) -> Dict[Language, int]:
    """Sum ``weight * matches`` per language over the normalized text."""
    normalized = normalize_text(text)
    scores = {}
    for lang, patterns in PATTERN_SETS.items():
        scores[lang] = sum(weight * len(regex.findall(normalized)) for regex, weight in patterns)
    return scores


def _confidence(score: int, length: int) -> float:
    confidence = min(1.0, score / max(length, 1) * DENSITY_SCALE)
    if score >= VERY_HIGH_SCORE:
        confidence *= VERY_HIGH_SCORE_BOOST
    elif score >= HIGH_SCORE:
        confidence *= HIGH_SCORE_BOOST
    if length < SHORT_TEXT_LENGTH:
        confidence *= SHORT_TEXT_PENALTY
    return max(0.0, min(1.0, confidence))


def classify(text) -> ClassificationResult:
    """Guess the language of ``text`` from lexical and orthographic cues.

    Returns a result with ``language=None`` and zero confidence for
    non-string, too-short, weak or tied input. Never raises.
    """
    if not isinstance(text, str):
        return _NO_LANGUAGE
    length = len(text.strip())
    if length < MIN_TEXT_LENGTH:
        return _NO_LANGUAGE

    scores = score_languages(text)
    top_score = max(scores.values())
    if top_score < MIN_SCORE:
        return _NO_LANGUAGE

    leaders = [lang for lang, score in scores.items() if score == top_score]
    if len(leaders) > 1:
        return _NO_LANGUAGE

    return ClassificationResult(language=leaders[0], confidence=_confidence(top_score, length))
