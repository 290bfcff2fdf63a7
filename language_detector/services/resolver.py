"""
Language Resolver

Matches an ordered list of raw language tags against the combined code
table.  Each tag is expanded into its fallback sequence, the sequences are
concatenated in request order without duplicates, and the first code found
in the table wins.  Earlier tags therefore exhaust their whole fallback
chain before any later tag is tried.

Results, including "no match", are cached per ordered request.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from language_detector.config import settings
from language_detector.i18n.codes import COMBINED_CODE_MAP
from language_detector.i18n.locale import expand_codes

from .cache_service import LRUCache

logger = logging.getLogger(__name__)


def make_cache_key(names: Sequence[str]) -> tuple[str, ...]:
    """Order-preserving cache key for a raw tag list.

    Distinct tag lists never share a key, even when a tag contains a comma.
    """
    return tuple(names)


class LanguageResolver:
    """Resolve raw tag lists to language keys.

    Args:
        code_map: Normalized tag → language key lookup.
        cache:    Result cache; None disables caching for ``resolve``.
    """

    def __init__(self, code_map: Mapping[str, str] = COMBINED_CODE_MAP, cache: LRUCache | None = None):
        self._code_map = code_map
        self._cache = cache

    @property
    def cache(self) -> LRUCache | None:
        return self._cache

    def resolve(self, names: Sequence[str]) -> str | None:
        """Return the language key for the first matching tag, or None."""
        if not names:
            return None
        if self._cache is None:
            return self.resolve_uncached(names)

        # Lookup, match and store happen under the cache lock
        return self._cache.get_or_set(make_cache_key(names), lambda: self._match(names))

    def resolve_uncached(self, names: Sequence[str]) -> str | None:
        """Same as ``resolve`` but never reads or writes the cache."""
        if not names:
            return None
        return self._match(names)

    def _match(self, names: Sequence[str]) -> str | None:
        for code in expand_codes(names):
            key = self._code_map.get(code)
            if key:
                return key
        logger.debug("No language matched %r", list(names))
        return None


_default_cache = LRUCache(max_size=settings.cache_size)
_default_resolver = LanguageResolver(cache=_default_cache if settings.cache_enabled else None)


def get_default_resolver() -> LanguageResolver:
    """Process-wide resolver backed by the shared result cache."""
    return _default_resolver


def translate_origin_language(names: Sequence[str]) -> str | None:
    """Map an ordered list of browser language tags to a language key.

    Example:
        >>> translate_origin_language(["unknown-XX", "en-US"])
        'english'
    """
    return _default_resolver.resolve(names)


def translate_origin_language_uncached(names: Sequence[str]) -> str | None:
    """``translate_origin_language`` without touching the shared cache."""
    return _default_resolver.resolve_uncached(names)
