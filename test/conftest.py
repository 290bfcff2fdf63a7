"""
Pytest configuration and fixtures for language detector tests
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

from language_detector.services.cache_service import LRUCache  # noqa: E402
from language_detector.services.origin import BrowserOriginAdapter, Navigator  # noqa: E402
from language_detector.services.resolver import LanguageResolver, get_default_resolver  # noqa: E402


@pytest.fixture(autouse=True)
def clear_default_cache():
    """Isolate tests that go through the process-wide resolver cache."""
    cache = get_default_resolver().cache
    if cache is not None:
        cache.clear()
    yield
    if cache is not None:
        cache.clear()


@pytest.fixture
def cache():
    return LRUCache(max_size=100)


@pytest.fixture
def resolver(cache):
    return LanguageResolver(cache=cache)


@pytest.fixture
def make_adapter():
    """Build an adapter over a plain-data navigator."""

    def _make(*languages: str, language: str | None = None, user_language=None) -> BrowserOriginAdapter:
        return BrowserOriginAdapter(Navigator(languages=languages, language=language, user_language=user_language))

    return _make
