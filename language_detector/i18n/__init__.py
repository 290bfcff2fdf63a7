"""
i18n package

Static language tables (code → key, key → descriptor) and the pure tag
helpers used by the resolver: fallback expansion, standardization and
Accept-Language parsing.
"""

from .codes import COMBINED_CODE_MAP, find_missing_language_keys, lookup_code, validate_tables
from .languages import LANGUAGE_NAMES, RTL_LANGUAGES, LanguageName
from .locale import (
    expand_codes,
    expand_fallbacks,
    get_language_info,
    is_rtl_language,
    parse_accept_language,
    primary_subtag,
    standardize_tag,
)

__all__ = [
    "COMBINED_CODE_MAP",
    "LANGUAGE_NAMES",
    "RTL_LANGUAGES",
    "LanguageName",
    "expand_codes",
    "expand_fallbacks",
    "find_missing_language_keys",
    "get_language_info",
    "is_rtl_language",
    "lookup_code",
    "parse_accept_language",
    "primary_subtag",
    "standardize_tag",
    "validate_tables",
]
