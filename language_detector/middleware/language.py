"""
Language Detection Middleware

Sets request.state.language and request.state.locale from:
  1. Accept-Language header (quality-weighted, fallback-expanded)
  2. X-Language header (used when Accept-Language is absent)
  3. settings.default_language (locale only; language stays None)

No I/O: pure header parsing plus a cached table lookup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from language_detector.config import settings
from language_detector.services.detector import LanguageDetector
from language_detector.services.origin import BrowserOriginAdapter, navigator_from_headers

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastapi import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

    from language_detector.i18n.languages import LanguageName


def detect_from_request(request: Request, standardize: bool | None = None) -> LanguageName | None:
    """Detect the preferred language described by a request's headers."""
    adapter = BrowserOriginAdapter(navigator_from_headers(request.headers))
    return LanguageDetector(adapter).detect(standardize=standardize)


class LanguageMiddleware(BaseHTTPMiddleware):
    """Attach the detected language to request.state.

    ``request.state.language`` is the descriptor (or None) and
    ``request.state.locale`` its key, falling back to the configured
    default language.
    """

    def __init__(self, app: ASGIApp, standardize: bool | None = None):
        super().__init__(app)
        self.standardize = standardize

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        language = detect_from_request(request, standardize=self.standardize)
        request.state.language = language
        request.state.locale = language.key if language else settings.default_language
        return await call_next(request)
