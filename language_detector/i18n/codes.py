"""
Combined code table

The resolver looks tags up in a single mapping built by overlaying the full
table onto the minimal one.  Lookups are exact string matches against
normalized tags; fallback logic lives in the resolver.
"""

from __future__ import annotations

import logging
from types import MappingProxyType

from language_detector.exceptions import TableIntegrityError

from .bcp47_full import BCP47_FULL_MAP
from .bcp47_min import BCP47_MIN_MAP
from .languages import LANGUAGE_NAMES

logger = logging.getLogger(__name__)

COMBINED_CODE_MAP: MappingProxyType[str, str] = MappingProxyType({**BCP47_MIN_MAP, **BCP47_FULL_MAP})


def lookup_code(code: str) -> str | None:
    """Return the language key for an already-normalized tag, or None."""
    return COMBINED_CODE_MAP.get(code)


def find_missing_language_keys() -> list[str]:
    """List code-table values (from both tables) that have no metadata entry.

    A non-empty result means the code tables and ``LANGUAGE_NAMES`` have
    drifted apart.
    """
    referenced = set(BCP47_MIN_MAP.values()) | set(BCP47_FULL_MAP.values())
    return sorted(key for key in referenced if key not in LANGUAGE_NAMES)


def find_conflicting_codes() -> dict[str, tuple[str, str]]:
    """Return tags defined in both tables with diverging keys, as (min, full)."""
    return {
        code: (key, BCP47_FULL_MAP[code])
        for code, key in BCP47_MIN_MAP.items()
        if code in BCP47_FULL_MAP and BCP47_FULL_MAP[code] != key
    }


def validate_tables() -> None:
    """Raise TableIntegrityError if any code maps to a key without metadata."""
    missing = find_missing_language_keys()
    if missing:
        logger.error("Code tables reference %d unknown language keys: %s", len(missing), missing)
        raise TableIntegrityError(missing)
