"""
Minimal BCP 47 code table

The handful of tags browsers report most often, stored in the exact
(lower-cased) form they are looked up with.  Entries shared with the full
table must map to the same language key.
"""

from __future__ import annotations

from types import MappingProxyType

BCP47_MIN_MAP: MappingProxyType[str, str] = MappingProxyType(
    {
        "zh": "chinese",
        "zh-cn": "chinese",
        "zh-hans": "chinese",
        "zh-tw": "cantonese",
        "zh-hk": "cantonese",
        "zh-hant": "cantonese",
        "en": "english",
        "en-us": "english",
        "en-gb": "english",
        "ja": "japanese",
        "ko": "korean",
        "fr": "french",
        "de": "german",
        "es": "spanish",
        "pt": "portuguese",
        "pt-br": "portuguese",
        "ru": "russian",
        "it": "italian",
        "ar": "arabic",
        "hi": "hindi",
    }
)
