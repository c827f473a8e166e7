"""Pydantic schemas, constants, and enumerations for Polyglot."""
from enum import Enum
from typing import Optional, Dict
from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class Language(str, Enum):
    ENGLISH = "English"
    SPANISH = "Spanish"
    VIETNAMESE = "Vietnamese"
    FRENCH = "French"
    GERMAN = "German"
    JAPANESE = "Japanese"
    PORTUGUESE = "Portuguese"
    DUTCH = "Dutch"


class Method(str, Enum):
    """Provenance tag describing how a resolution was reached."""
    AGREEMENT = "agreement"
    EXTERNAL_ONLY = "external-only"
    HEURISTIC_ONLY = "heuristic-only"
    EXTERNAL_PREFERRED = "external-preferred"
    HEURISTIC_PREFERRED = "heuristic-preferred"
    EMERGENCY_FALLBACK = "emergency-fallback"
    ALL_METHODS_FAILED = "all-methods-failed"
    TEXT_TOO_SHORT = "text-too-short"
    INVALID_INPUT = "invalid-input"


# --- Constants ---
LANGUAGE_CODES: Dict[Language, str] = {
    Language.ENGLISH: "en",
    Language.SPANISH: "es",
    Language.VIETNAMESE: "vi",
    Language.FRENCH: "fr",
    Language.GERMAN: "de",
    Language.JAPANESE: "ja",
    Language.PORTUGUESE: "pt",
    Language.DUTCH: "nl",
}

_CODE_TO_LANGUAGE = {code: lang for lang, code in LANGUAGE_CODES.items()}

SUPPORTED_LANGUAGES = {code: lang.value for lang, code in LANGUAGE_CODES.items()}

# Below this the caller should ask the user to confirm the pre-selected language
CONFIRM_THRESHOLD = 0.7


def language_from_code(code) -> Optional[Language]:
    """Map an ISO-639-1 code (region subtag allowed, e.g. ``pt-BR``) onto Language."""
    if not isinstance(code, str):
        return None
    primary = code.strip().lower().replace("_", "-").split("-")[0]
    return _CODE_TO_LANGUAGE.get(primary)


# --- Results ---

class ClassificationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    language: Optional[Language] = None
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def check_none_has_no_confidence(self):
        if self.language is None and self.confidence > 0:
            raise ValueError("confidence must be 0 when no language was detected")
        return self


class ResolutionResult(ClassificationResult):
    method: Method

    @computed_field
    @property
    def needs_confirmation(self) -> bool:
        """True when the caller should let the user confirm or override."""
        return (
            self.language is None
            or self.method != Method.AGREEMENT
            or self.confidence < CONFIRM_THRESHOLD
        )


# --- Request / response schemas ---

class DetectRequest(BaseModel):
    text: str


class ClassifyResponse(ClassificationResult):
    scores: Dict[str, int] = {}
