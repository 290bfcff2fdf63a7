"""
Full BCP 47 code table

Lower-cased language tags (bare language subtags plus the common script and
region forms browsers report) mapped to language keys.  Every value must be
a key of ``LANGUAGE_NAMES``; the test-suite cross-checks this exhaustively.
"""

from __future__ import annotations

from types import MappingProxyType


def _tags(key: str, *codes: str) -> dict[str, str]:
    return dict.fromkeys(codes, key)


_FULL_CODES: dict[str, str] = {
    # ── Chinese ───────────────────────────────────────────────────────────────
    **_tags(
        "chinese",
        "zh",
        "zh-cn",
        "zh-sg",
        "zh-my",
        "zh-hans",
        "zh-hans-cn",
        "zh-hans-sg",
        "zh-hans-my",
        "cmn",
        "cmn-cn",
        "cmn-hans",
    ),
    **_tags(
        "cantonese",
        "zh-tw",
        "zh-hk",
        "zh-mo",
        "zh-hant",
        "zh-hant-tw",
        "zh-hant-hk",
        "zh-hant-mo",
        "cmn-tw",
        "cmn-hant",
        "yue",
        "yue-hk",
        "yue-hant",
        "yue-hans",
    ),
    # ── English ───────────────────────────────────────────────────────────────
    **_tags(
        "english",
        "en",
        "en-us",
        "en-gb",
        "en-au",
        "en-ca",
        "en-nz",
        "en-ie",
        "en-in",
        "en-za",
        "en-sg",
        "en-hk",
        "en-ph",
        "en-my",
        "en-ng",
        "en-ke",
        "en-pk",
        "en-jm",
        "en-tt",
        "en-bz",
        "en-zw",
        "en-001",
        "en-150",
    ),
    # ── Western Europe ────────────────────────────────────────────────────────
    **_tags("french", "fr", "fr-fr", "fr-ca", "fr-be", "fr-ch", "fr-lu", "fr-mc", "fr-sn", "fr-ci", "fr-cm", "fr-ma"),
    **_tags("german", "de", "de-de", "de-at", "de-ch", "de-li", "de-lu", "de-be"),
    **_tags(
        "spanish",
        "es",
        "es-es",
        "es-mx",
        "es-ar",
        "es-co",
        "es-cl",
        "es-pe",
        "es-ve",
        "es-ec",
        "es-gt",
        "es-cu",
        "es-bo",
        "es-do",
        "es-hn",
        "es-py",
        "es-sv",
        "es-ni",
        "es-cr",
        "es-pa",
        "es-pr",
        "es-uy",
        "es-us",
        "es-419",
    ),
    **_tags("portuguese", "pt", "pt-br", "pt-pt", "pt-ao", "pt-mz"),
    **_tags("italian", "it", "it-it", "it-ch", "it-sm"),
    **_tags("dutch", "nl", "nl-nl", "nl-be", "nl-sr"),
    **_tags("catalan", "ca", "ca-es", "ca-ad", "ca-es-valencia"),
    **_tags("basque", "eu", "eu-es"),
    **_tags("galician", "gl", "gl-es"),
    **_tags("irish", "ga", "ga-ie"),
    **_tags("welsh", "cy", "cy-gb"),
    **_tags("maltese", "mt", "mt-mt"),
    **_tags("icelandic", "is", "is-is"),
    # ── Nordic ────────────────────────────────────────────────────────────────
    **_tags("danish", "da", "da-dk"),
    **_tags("swedish", "sv", "sv-se", "sv-fi"),
    **_tags("norwegian", "no", "nb", "nn", "nb-no", "nn-no", "no-no"),
    **_tags("finnish", "fi", "fi-fi"),
    # ── Central & Eastern Europe ──────────────────────────────────────────────
    **_tags("poland", "pl", "pl-pl"),
    **_tags("czech", "cs", "cs-cz"),
    **_tags("slovak", "sk", "sk-sk"),
    **_tags("hungarian", "hu", "hu-hu"),
    **_tags("romanian", "ro", "ro-ro", "ro-md", "mo"),
    **_tags("bulgarian", "bg", "bg-bg"),
    **_tags("croatian", "hr", "hr-hr", "hr-ba"),
    **_tags("serbian", "sr", "sr-rs", "sr-cyrl", "sr-latn", "sr-cyrl-rs", "sr-latn-rs", "sr-me", "sr-ba"),
    **_tags("bosnian", "bs", "bs-ba", "bs-latn", "bs-cyrl"),
    **_tags("slovenian", "sl", "sl-si"),
    **_tags("macedonian", "mk", "mk-mk"),
    **_tags("albanian", "sq", "sq-al", "sq-xk", "sq-mk"),
    **_tags("greek", "el", "el-gr", "el-cy"),
    **_tags("estonian", "et", "et-ee"),
    **_tags("latvian", "lv", "lv-lv"),
    **_tags("lithuanian", "lt", "lt-lt"),
    **_tags("russian", "ru", "ru-ru", "ru-by", "ru-kz", "ru-kg", "ru-md", "ru-ua"),
    **_tags("ukrainian", "uk", "uk-ua"),
    **_tags("belarusian", "be", "be-by"),
    # ── Caucasus & Central Asia ───────────────────────────────────────────────
    **_tags("armenian", "hy", "hy-am"),
    **_tags("georgian", "ka", "ka-ge"),
    **_tags("azeri", "az", "az-az", "az-latn", "az-cyrl", "az-latn-az", "az-cyrl-az"),
    **_tags("kazakh", "kk", "kk-kz"),
    **_tags("uzbek", "uz", "uz-uz", "uz-latn", "uz-cyrl", "uz-latn-uz", "uz-cyrl-uz"),
    **_tags("mongolian", "mn", "mn-mn", "mn-cyrl", "mn-mong"),
    **_tags("turkish", "tr", "tr-tr", "tr-cy"),
    # ── Middle East ───────────────────────────────────────────────────────────
    **_tags(
        "arabic",
        "ar",
        "ar-sa",
        "ar-ae",
        "ar-eg",
        "ar-iq",
        "ar-jo",
        "ar-kw",
        "ar-lb",
        "ar-ly",
        "ar-ma",
        "ar-om",
        "ar-qa",
        "ar-sy",
        "ar-tn",
        "ar-ye",
        "ar-bh",
        "ar-dz",
        "ar-001",
    ),
    **_tags("hebrew", "he", "he-il", "iw", "iw-il"),
    **_tags("persian", "fa", "fa-ir", "fa-af", "prs", "prs-af"),
    **_tags("pashto", "ps", "ps-af", "ps-pk"),
    **_tags("kurdish", "ku", "ku-iq", "ku-tr", "ckb", "ckb-iq", "kmr"),
    **_tags("urdu", "ur", "ur-pk", "ur-in"),
    # ── South Asia ────────────────────────────────────────────────────────────
    **_tags("hindi", "hi", "hi-in"),
    **_tags("bangla", "bn-bd"),
    **_tags("bengali", "bn", "bn-in"),
    **_tags("nepali", "ne", "ne-np", "ne-in"),
    **_tags("sinhalese", "si", "si-lk"),
    **_tags("tamil", "ta", "ta-in", "ta-lk", "ta-sg", "ta-my"),
    **_tags("telugu", "te", "te-in"),
    **_tags("kannada", "kn", "kn-in"),
    **_tags("marathi", "mr", "mr-in"),
    **_tags("gujarati", "gu", "gu-in"),
    **_tags("punjabi", "pa", "pa-in", "pa-pk", "pa-guru", "pa-arab"),
    **_tags("oriya", "or", "or-in", "ory"),
    **_tags("assamese", "as", "as-in"),
    # ── East & Southeast Asia ─────────────────────────────────────────────────
    **_tags("japanese", "ja", "ja-jp"),
    **_tags("korean", "ko", "ko-kr", "ko-kp"),
    **_tags("vietnamese", "vi", "vi-vn"),
    **_tags("thai", "th", "th-th"),
    **_tags("laos", "lo", "lo-la"),
    **_tags("cambodia", "km", "km-kh"),
    **_tags("myanmar", "my", "my-mm"),
    **_tags("malay", "ms", "ms-my", "ms-sg", "ms-bn"),
    **_tags("indonesian", "id", "id-id", "in", "in-id"),
    **_tags("filipino", "fil", "fil-ph", "tl", "tl-ph"),
    **_tags("javanese", "jv", "jv-id", "jw"),
    **_tags("sundanese", "su", "su-id"),
    **_tags("hmong", "hmn", "mww"),
    # ── Africa ────────────────────────────────────────────────────────────────
    **_tags("afrikaans", "af", "af-za", "af-na"),
    **_tags("amharic", "am", "am-et"),
    **_tags("hausa", "ha", "ha-ng", "ha-gh", "ha-ne"),
    **_tags("swahili", "sw", "sw-ke", "sw-tz", "sw-ug"),
    **_tags("somali", "so", "so-so", "so-dj", "so-et", "so-ke"),
    **_tags("zulu", "zu", "zu-za"),
    **_tags("tigrinya", "ti", "ti-er", "ti-et"),
    **_tags("malagasy", "mg", "mg-mg"),
    # ── Oceania ───────────────────────────────────────────────────────────────
    **_tags("maori", "mi", "mi-nz"),
    **_tags("samoan", "sm", "sm-ws"),
    **_tags("tongan", "to", "to-to"),
    **_tags("fijian", "fj", "fj-fj"),
    **_tags("tahitian", "ty", "ty-pf"),
    # ── Americas ──────────────────────────────────────────────────────────────
    **_tags("haitian", "ht", "ht-ht"),
    **_tags("inuktitut", "iu", "iu-ca", "iu-cans", "iu-latn"),
    **_tags("queretaro", "otq"),
    **_tags("yucatec", "yua", "yua-mx"),
    # ── Constructed ───────────────────────────────────────────────────────────
    **_tags("esperanto", "eo", "eo-001"),
    **_tags("klingon", "tlh", "tlh-latn", "tlh-piqd"),
}

BCP47_FULL_MAP: MappingProxyType[str, str] = MappingProxyType(_FULL_CODES)
