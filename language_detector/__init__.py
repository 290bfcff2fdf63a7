"""
language_detector - map browser language preferences to language metadata.

Takes the ordered language tags a browser (or an Accept-Language header)
reports, expands each into its fallback chain, and returns the first
matching language key together with its display names and writing
direction.  Not an i18n framework: no translation, pluralization or
formatting.
"""

from language_detector.i18n.languages import LANGUAGE_NAMES, LanguageName
from language_detector.i18n.locale import expand_fallbacks
from language_detector.services.detector import LanguageDetector, detect_language, get_language_name
from language_detector.services.origin import BrowserOriginAdapter, Navigator, get_browser_local_origin
from language_detector.services.resolver import (
    LanguageResolver,
    translate_origin_language,
    translate_origin_language_uncached,
)

__version__ = "0.1.0"

__all__ = [
    "LANGUAGE_NAMES",
    "BrowserOriginAdapter",
    "LanguageDetector",
    "LanguageName",
    "LanguageResolver",
    "Navigator",
    "detect_language",
    "expand_fallbacks",
    "get_browser_local_origin",
    "get_language_name",
    "translate_origin_language",
    "translate_origin_language_uncached",
]
