"""
Locale helper tests

Pure functions only: fallback expansion, standardization, Accept-Language
parsing and metadata lookup.
"""

from __future__ import annotations

import pytest

from language_detector.exceptions import LanguageNotFoundError
from language_detector.i18n.locale import (
    babel_language,
    expand_codes,
    expand_fallbacks,
    get_language_info,
    is_rtl_language,
    parse_accept_language,
    primary_subtag,
    standardize_tag,
)

# ══════════════════════════════════════════════════════════════════════════════
# 1. Fallback expansion
# ══════════════════════════════════════════════════════════════════════════════


class TestExpandFallbacks:
    def test_three_segment_tag(self):
        assert expand_fallbacks("zh-Hans-CN") == ["zh-hans-cn", "zh-hans", "zh"]

    def test_empty_tag(self):
        assert expand_fallbacks("") == []

    def test_blank_tag(self):
        assert expand_fallbacks("   ") == []

    def test_single_segment(self):
        assert expand_fallbacks("en") == ["en"]

    def test_trims_and_lowercases(self):
        assert expand_fallbacks("  EN-us ") == ["en-us", "en"]

    def test_private_use_tag(self):
        assert expand_fallbacks("fr-CA-x-ca") == ["fr-ca-x-ca", "fr-ca-x", "fr-ca", "fr"]

    def test_no_duplicates_for_empty_segments(self):
        """'en--us' would yield 'en-' and 'en'; nothing is repeated."""
        result = expand_fallbacks("en--us")
        assert result[0] == "en--us"
        assert len(result) == len(set(result))
        assert result[-1] == "en"

    def test_trailing_hyphen(self):
        assert expand_fallbacks("en-") == ["en-", "en"]


class TestExpandCodes:
    def test_concatenates_in_input_order(self):
        assert expand_codes(["en-US", "zh-CN"]) == ["en-us", "en", "zh-cn", "zh"]

    def test_first_occurrence_wins(self):
        """'zh' from the first tag's chain is not retried after 'zh-tw'."""
        assert expand_codes(["zh-CN", "zh-TW"]) == ["zh-cn", "zh", "zh-tw"]

    def test_duplicate_raw_tags(self):
        assert expand_codes(["en", "EN", "en"]) == ["en"]

    def test_empty_input(self):
        assert expand_codes([]) == []


# ══════════════════════════════════════════════════════════════════════════════
# 2. Standardization
# ══════════════════════════════════════════════════════════════════════════════


class TestStandardizeTag:
    def test_primary_subtag(self):
        assert primary_subtag("zh-Hans-CN") == "zh"

    def test_primary_subtag_no_hyphen(self):
        assert primary_subtag("EN") == "en"

    def test_without_facility_uses_prefix(self):
        assert standardize_tag("zh-Hans-CN", parser=None) == "zh"

    def test_parser_result_is_used(self):
        assert standardize_tag("whatever", parser=lambda tag: "FR") == "fr"

    @pytest.mark.parametrize("error", [ValueError("bad"), TypeError("bad")])
    def test_parser_failure_falls_back(self, error):
        def broken(tag: str) -> str:
            raise error

        assert standardize_tag("pt-BR", parser=broken) == "pt"

    def test_empty_parser_result_falls_back(self):
        assert standardize_tag("de-AT", parser=lambda tag: "") == "de"

    def test_babel_parses_script_and_region(self):
        assert babel_language("zh-Hans-CN") == "zh"

    def test_babel_default(self):
        assert standardize_tag("en-US") == "en"

    def test_babel_unknown_locale_falls_back(self):
        assert standardize_tag("lang") == "lang"

    def test_babel_malformed_tag_falls_back(self):
        assert standardize_tag("fr-CA-x-ca") == "fr"

    def test_undetermined_is_kept(self):
        assert babel_language("und") == "und"
        assert standardize_tag("und") == "und"
        assert standardize_tag("UND-US") == "und"


# ══════════════════════════════════════════════════════════════════════════════
# 3. Accept-Language
# ══════════════════════════════════════════════════════════════════════════════


class TestParseAcceptLanguage:
    def test_quality_ordering(self):
        assert parse_accept_language("de;q=0.7,fr;q=0.9,en;q=0.8") == ["fr", "en", "de"]

    def test_default_quality_first(self):
        assert parse_accept_language("fr-CA,fr;q=0.9,en-US;q=0.8") == ["fr-CA", "fr", "en-US"]

    def test_ties_keep_header_order(self):
        assert parse_accept_language("en,zh") == ["en", "zh"]

    def test_zero_quality_and_wildcard_dropped(self):
        assert parse_accept_language("en;q=0,*;q=0.5,ja") == ["ja"]

    def test_malformed_quality_treated_as_one(self):
        assert parse_accept_language("es;q=abc,it;q=0.5") == ["es", "it"]

    def test_empty_header(self):
        assert parse_accept_language("") == []

    def test_blank_parts_ignored(self):
        assert parse_accept_language(" , en ,") == ["en"]


# ══════════════════════════════════════════════════════════════════════════════
# 4. Metadata lookup
# ══════════════════════════════════════════════════════════════════════════════


class TestLanguageInfo:
    def test_get_language_info(self):
        info = get_language_info("english")
        assert info.key == "english"
        assert info.chinese == "英语"

    def test_unknown_key_raises(self):
        with pytest.raises(LanguageNotFoundError) as exc_info:
            get_language_info("elvish")
        assert exc_info.value.status_code == 404
        assert exc_info.value.details == {"key": "elvish"}

    def test_rtl(self):
        assert is_rtl_language("arabic") is True
        assert is_rtl_language("hebrew") is True

    def test_ltr(self):
        assert is_rtl_language("english") is False

    def test_unknown_is_not_rtl(self):
        assert is_rtl_language("elvish") is False
