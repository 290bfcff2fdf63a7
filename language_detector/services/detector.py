"""
Language Detector

Chains the origin adapter, the resolver and the metadata table:

    host → raw tags → (standardize) → (truncate) → resolver → key → descriptor

Unmatched input returns None.  A resolved key without metadata means the
code and metadata tables have drifted; it is logged and also returns None.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from language_detector.config import Settings, get_settings
from language_detector.i18n.languages import LANGUAGE_NAMES, LanguageName

from .origin import BrowserOriginAdapter, NavigatorLike
from .resolver import LanguageResolver, get_default_resolver

logger = logging.getLogger(__name__)


class LanguageDetector:
    """Detect the preferred UI language of a host.

    Args:
        adapter:   Source of the host's raw language tags.
        resolver:  Tag resolver; defaults to the process-wide cached one.
        languages: Language key → descriptor table.
        settings:  Defaults for ``detect`` options.
    """

    def __init__(
        self,
        adapter: BrowserOriginAdapter,
        resolver: LanguageResolver | None = None,
        languages: Mapping[str, LanguageName] = LANGUAGE_NAMES,
        settings: Settings | None = None,
    ):
        self.adapter = adapter
        self.resolver = resolver or get_default_resolver()
        self.languages = languages
        self.settings = settings or get_settings()

    def detect(
        self,
        use_cache: bool | None = None,
        standardize: bool | None = None,
        max_fallbacks: int | None = None,
    ) -> LanguageName | None:
        """Return the descriptor of the host's preferred language, or None.

        Args:
            use_cache:     Go through the resolver cache (default from settings).
            standardize:   Reduce tags to primary language subtags first.
            max_fallbacks: Only the first N host tags are considered; N < 1
                           considers none, so the result is None.
        """
        if use_cache is None:
            use_cache = self.settings.cache_enabled
        if standardize is None:
            standardize = self.settings.standardize
        if max_fallbacks is None:
            max_fallbacks = self.settings.max_fallbacks
        tags = self.adapter.get_origin_tags(standardize)[: max(max_fallbacks, 0)]
        if use_cache:
            key = self.resolver.resolve(tags)
        else:
            key = self.resolver.resolve_uncached(tags)
        logger.debug("Resolved %r to %r", tags, key, extra={"tags": tags, "language": key})
        return self._describe(key)

    def get_language_name(self) -> LanguageName | None:
        """Detection without standardization or truncation, always cached."""
        return self._describe(self.resolver.resolve(self.adapter.get_origin_tags()))

    def _describe(self, key: str | None) -> LanguageName | None:
        if key is None:
            return None
        info = self.languages.get(key)
        if info is None:
            logger.error("Resolved language key %r has no metadata entry", key, extra={"language": key})
        return info


def detect_language(
    navigator: NavigatorLike | None = None,
    use_cache: bool | None = None,
    standardize: bool | None = None,
    max_fallbacks: int | None = None,
) -> LanguageName | None:
    """Detect the preferred language of ``navigator`` with the shared resolver."""
    detector = LanguageDetector(BrowserOriginAdapter(navigator))
    return detector.detect(use_cache=use_cache, standardize=standardize, max_fallbacks=max_fallbacks)


def get_language_name(navigator: NavigatorLike | None = None) -> LanguageName | None:
    """Legacy detection: raw host tags, shared cache."""
    return LanguageDetector(BrowserOriginAdapter(navigator)).get_language_name()
