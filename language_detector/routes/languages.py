"""
Language Routes

Read-only APIRouter integrators can mount to expose the language table:

    GET /languages           → all language descriptors
    GET /languages/detect    → descriptor detected from request headers (or null)
    GET /languages/{key}     → one descriptor, 404 when unknown

/detect is declared before /{key} so it is not shadowed.
"""

import logging

from fastapi import APIRouter, HTTPException, Request

from language_detector.exceptions import LanguageNotFoundError
from language_detector.i18n.languages import LANGUAGE_NAMES, LanguageName
from language_detector.i18n.locale import get_language_info
from language_detector.middleware.language import detect_from_request

logger = logging.getLogger(__name__)

languages_router = APIRouter(prefix="/languages", tags=["Languages"])


@languages_router.get("", response_model=list[LanguageName])
async def list_languages() -> list[LanguageName]:
    """List every known language with its display names and RTL flag."""
    return list(LANGUAGE_NAMES.values())


@languages_router.get("/detect", response_model=LanguageName | None)
async def detect_request_language(request: Request) -> LanguageName | None:
    """Detect the caller's language from Accept-Language / X-Language."""
    language = getattr(request.state, "language", None)
    if language is None:
        language = detect_from_request(request)
    return language


@languages_router.get("/{key}", response_model=LanguageName)
async def get_language(key: str) -> LanguageName:
    """Return the descriptor for a single language key."""
    try:
        return get_language_info(key)
    except LanguageNotFoundError as e:
        logger.info("Unknown language key requested: %s", key)
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
