"""
Browser Origin Adapter

Reads the user's ordered language preferences from a host object shaped
like ``window.navigator``.  The host is passed in explicitly, so the
resolver and detector never touch a live environment and tests can use
plain data.

Lookup order:
  1. ``languages``     ordered multi-language preference list
  2. ``language``      single preferred language
  3. ``user_language`` legacy single-language field
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from language_detector.i18n.locale import TagParser, babel_language, parse_accept_language, standardize_tag

logger = logging.getLogger(__name__)


@runtime_checkable
class NavigatorLike(Protocol):
    """Host capability exposing language preferences.

    Every attribute is optional on real hosts; the adapter reads them with
    ``getattr`` and tolerates absence.
    """

    languages: Sequence[str]
    language: str | None


@dataclass(frozen=True)
class Navigator:
    """Plain-data host for server-side use and tests."""

    languages: tuple[str, ...] = ()
    language: str | None = None
    user_language: Any = None


def navigator_from_headers(headers: Mapping[str, str]) -> Navigator:
    """Build a Navigator from HTTP request headers.

    ``Accept-Language`` supplies the ordered ``languages`` list and
    ``X-Language`` the single preferred ``language``.
    """
    lowered = {name.lower(): value for name, value in headers.items()}
    explicit = lowered.get("x-language", "").strip() or None
    return Navigator(
        languages=tuple(parse_accept_language(lowered.get("accept-language", ""))),
        language=explicit,
    )


class BrowserOriginAdapter:
    """Retrieve raw language tags from a navigator-like host.

    Args:
        navigator: Host object; None behaves like a host with no preferences.
        parser:    Standardization facility handed to ``standardize_tag``;
                   None means only the naive prefix is available.
    """

    def __init__(self, navigator: NavigatorLike | None = None, parser: TagParser | None = babel_language):
        self._navigator = navigator
        self._parser = parser

    def get_origin_tags(self, standardize: bool = False) -> list[str]:
        """Return the host's language tags in priority order.

        Never raises: a missing, broken or malformed host yields [].
        """
        try:
            languages = self._read_host()
        except Exception:
            logger.debug("Could not read languages from host %r", self._navigator, exc_info=True)
            return []

        if standardize and languages:
            return self._standardize(languages)
        return languages

    def _read_host(self) -> list[str]:
        navigator = self._navigator
        if navigator is None:
            return []

        languages = getattr(navigator, "languages", None)
        if languages:
            if isinstance(languages, str):
                languages = [languages]
            return [str(lang) for lang in languages]

        language = getattr(navigator, "language", None)
        if language:
            return [str(language)]

        # Legacy hosts only expose userLanguage
        user_language = getattr(navigator, "user_language", None)
        if user_language:
            return [str(user_language)]
        return []

    def _standardize(self, languages: list[str]) -> list[str]:
        seen: set[str] = set()
        result: list[str] = []
        for lang in languages:
            code = standardize_tag(lang, self._parser)
            if code not in seen:
                seen.add(code)
                result.append(code)
        return result


def get_browser_local_origin(navigator: NavigatorLike | None = None, standardize: bool = False) -> list[str]:
    """Shortcut for ``BrowserOriginAdapter(navigator).get_origin_tags(standardize)``."""
    return BrowserOriginAdapter(navigator).get_origin_tags(standardize)
