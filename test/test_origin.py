"""
Browser origin adapter tests

The host is plain data (Navigator / SimpleNamespace) or a deliberately
broken object; nothing touches a live environment.
"""

from types import SimpleNamespace

from language_detector.services.origin import (
    BrowserOriginAdapter,
    Navigator,
    NavigatorLike,
    get_browser_local_origin,
    navigator_from_headers,
)


class _ExplodingNavigator:
    @property
    def languages(self):
        raise RuntimeError("host API unavailable")


class TestGetOriginTags:
    def test_languages_list(self, make_adapter):
        assert make_adapter("lang").get_origin_tags() == ["lang"]

    def test_languages_take_precedence(self, make_adapter):
        adapter = make_adapter("fr-CA", "en-US", language="de", user_language="ja")
        assert adapter.get_origin_tags() == ["fr-CA", "en-US"]

    def test_single_language(self, make_adapter):
        assert make_adapter(language="lang").get_origin_tags() == ["lang"]

    def test_legacy_user_language(self, make_adapter):
        assert make_adapter(user_language="lang").get_origin_tags() == ["lang"]

    def test_legacy_user_language_stringified(self):
        host = SimpleNamespace(user_language=42)
        assert BrowserOriginAdapter(host).get_origin_tags() == ["42"]

    def test_legacy_user_language_empty(self):
        assert BrowserOriginAdapter(SimpleNamespace(user_language=None)).get_origin_tags() == []

    def test_nothing_available(self):
        assert BrowserOriginAdapter(SimpleNamespace()).get_origin_tags() == []

    def test_no_host(self):
        assert BrowserOriginAdapter().get_origin_tags() == []

    def test_empty_languages_falls_through(self):
        host = SimpleNamespace(languages=[], language="en-GB")
        assert BrowserOriginAdapter(host).get_origin_tags() == ["en-GB"]

    def test_languages_as_string(self):
        host = SimpleNamespace(languages="en-US")
        assert BrowserOriginAdapter(host).get_origin_tags() == ["en-US"]

    def test_host_error_yields_empty(self):
        assert BrowserOriginAdapter(_ExplodingNavigator()).get_origin_tags() == []

    def test_malformed_languages_yield_empty(self):
        host = SimpleNamespace(languages=123)
        assert BrowserOriginAdapter(host).get_origin_tags(standardize=True) == []

    def test_navigator_satisfies_protocol(self):
        assert isinstance(Navigator(), NavigatorLike)


class TestStandardizedOriginTags:
    def test_standardize_dedupes(self, make_adapter):
        adapter = make_adapter("zh-Hans-CN", "zh-CN", "zh", "en-US")

        original = adapter.get_origin_tags(False)
        standardized = adapter.get_origin_tags(True)

        assert original == ["zh-Hans-CN", "zh-CN", "zh", "en-US"]
        assert standardized == ["zh", "en"]
        assert len(standardized) <= len(original)

    def test_standardize_without_facility(self):
        adapter = BrowserOriginAdapter(Navigator(languages=("fr-CA", "fr-FR", "en-US")), parser=None)
        assert adapter.get_origin_tags(True) == ["fr", "en"]

    def test_standardize_with_failing_facility(self):
        def broken(tag: str) -> str:
            raise ValueError(tag)

        adapter = BrowserOriginAdapter(Navigator(languages=("pt-BR", "PT-pt")), parser=broken)
        assert adapter.get_origin_tags(True) == ["pt"]

    def test_standardize_keeps_undetermined(self, make_adapter):
        assert make_adapter("und").get_origin_tags(True) == ["und"]

    def test_standardize_empty(self, make_adapter):
        assert make_adapter().get_origin_tags(True) == []

    def test_get_browser_local_origin(self):
        navigator = Navigator(languages=("en-US", "en-GB"))
        assert get_browser_local_origin(navigator) == ["en-US", "en-GB"]
        assert get_browser_local_origin(navigator, standardize=True) == ["en"]


class TestNavigatorFromHeaders:
    def test_accept_language(self):
        navigator = navigator_from_headers({"Accept-Language": "en;q=0.5,fr-CA"})
        assert navigator.languages == ("fr-CA", "en")
        assert navigator.language is None

    def test_x_language(self):
        navigator = navigator_from_headers({"x-language": " de "})
        assert navigator.languages == ()
        assert navigator.language == "de"

    def test_no_headers(self):
        assert navigator_from_headers({}) == Navigator()
