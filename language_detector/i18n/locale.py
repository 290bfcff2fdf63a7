"""
Locale helpers

Pure functions for BCP 47 tag handling:
- fallback expansion (zh-Hans-CN → zh-hans-cn, zh-hans, zh)
- primary-language standardization via Babel, with a naive fallback
- Accept-Language header parsing with quality-value (q=) support
- language metadata lookup
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from babel import Locale, UnknownLocaleError

from language_detector.exceptions import LanguageNotFoundError

from .languages import LANGUAGE_NAMES, LanguageName

logger = logging.getLogger(__name__)

# Parses a raw tag and returns its primary language subtag
TagParser = Callable[[str], str]

# BCP 47 "undetermined" language subtag
UNDETERMINED = "und"


# ── Fallback expansion ────────────────────────────────────────────────────────


def expand_fallbacks(tag: str) -> list[str]:
    """Return the fallback sequence for a single language tag.

    The tag is trimmed and lower-cased, then trailing ``-`` segments are
    dropped one at a time.  The full tag always comes first and the bare
    first segment last; duplicates are skipped.

    Args:
        tag: Raw BCP 47 tag, e.g. "zh-Hans-CN".

    Returns:
        ["zh-hans-cn", "zh-hans", "zh"] for the example above, [] for an
        empty or blank tag.
    """
    normalized = tag.strip().lower()
    if not normalized:
        return []

    variants = [normalized]
    parts = normalized.split("-")
    for count in range(len(parts) - 1, 0, -1):
        fallback = "-".join(parts[:count])
        if fallback and fallback not in variants:
            variants.append(fallback)
    return variants


def expand_codes(tags: Iterable[str]) -> list[str]:
    """Concatenate the fallback sequences of ``tags``, first occurrence wins.

    A code already produced by an earlier tag is not retried for a later one.
    """
    seen: set[str] = set()
    expanded: list[str] = []
    for tag in tags:
        for variant in expand_fallbacks(tag):
            if variant not in seen:
                seen.add(variant)
                expanded.append(variant)
    return expanded


# ── Standardization ───────────────────────────────────────────────────────────


def primary_subtag(tag: str) -> str:
    """Naive standardization: the lower-cased text before the first hyphen."""
    return tag.split("-")[0].strip().lower()


def babel_language(tag: str) -> str:
    """Primary language subtag of ``tag`` as parsed by Babel's CLDR data.

    Babel resolves likely subtags, which would turn the undetermined
    language ``und`` into a concrete one; ``und`` is returned unchanged.
    """
    if primary_subtag(tag) == UNDETERMINED:
        return UNDETERMINED
    return Locale.parse(tag.strip(), sep="-").language


def standardize_tag(tag: str, parser: TagParser | None = babel_language) -> str:
    """Reduce a tag to its primary language subtag.

    ``parser`` is the standardization facility; pass None when it is not
    available and the naive prefix is used directly.  Tags the parser
    rejects also fall back to the naive prefix, so this never raises.

    Args:
        tag:    Raw BCP 47 tag, e.g. "zh-Hans-CN".
        parser: Callable returning the primary language of a tag.

    Returns:
        The primary language subtag, e.g. "zh".
    """
    if parser is None:
        return primary_subtag(tag)
    try:
        language = parser(tag)
    except (ValueError, TypeError, UnknownLocaleError) as exc:
        logger.debug("Falling back to naive standardization for %r: %s", tag, exc)
        return primary_subtag(tag)
    return language.lower() if language else primary_subtag(tag)


# ── Accept-Language ───────────────────────────────────────────────────────────


def parse_accept_language(header: str) -> list[str]:
    """Parse an Accept-Language header into tags ordered by preference.

    Algorithm:
    1. Split header into tags with optional q-values (default q=1.0).
    2. Drop the ``*`` wildcard and tags with q=0.
    3. Sort by q-value descending (stable, so header order breaks ties).

    Args:
        header: Value of the Accept-Language HTTP header, e.g.
                "fr-CA,fr;q=0.9,en-US;q=0.8,en;q=0.7".

    Returns:
        Tags as written in the header, most preferred first.
    """
    if not header:
        return []

    weighted: list[tuple[float, str]] = []
    for part in header.split(","):
        part = part.strip()
        if not part:
            continue
        tag, _, params = part.partition(";")
        tag = tag.strip()
        q = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                q = float(params[2:].strip())
            except ValueError:
                q = 1.0
        if not tag or tag == "*" or q <= 0:
            continue
        weighted.append((q, tag))

    weighted.sort(key=lambda x: x[0], reverse=True)
    return [tag for _, tag in weighted]


# ── Metadata ──────────────────────────────────────────────────────────────────


def is_rtl_language(key: str) -> bool:
    """Return True when the language key's script reads right-to-left."""
    info = LANGUAGE_NAMES.get(key)
    return bool(info and info.rtl)


def get_language_info(key: str) -> LanguageName:
    """Return the descriptor for a language key.

    Raises:
        LanguageNotFoundError: if the key has no metadata entry.
    """
    info = LANGUAGE_NAMES.get(key)
    if info is None:
        raise LanguageNotFoundError(key)
    return info
