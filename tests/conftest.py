"""Shared fixtures: an in-memory lexicon and a stub page source."""

from __future__ import annotations

import pytest

from shobdo.config import Settings
from shobdo.lexicon.store import Lexicon
from shobdo.pipeline.orchestrator import WordChecker
from shobdo.sources.wiktionary import WiktionaryPage


class StubSource:
    """Page source that returns a canned page or raises a canned error."""

    def __init__(self, page: WiktionaryPage | None = None, error: Exception | None = None):
        self.page = page
        self.error = error
        self.calls: list[str] = []

    def fetch_page(self, title: str) -> WiktionaryPage | None:
        self.calls.append(title)
        if self.error is not None:
            raise self.error
        return self.page


def make_page(content: str, title: str = "শব্দ") -> WiktionaryPage:
    return WiktionaryPage(title=title, page_id="1234", content=content)


@pytest.fixture(autouse=True)
def clear_shobdo_env(monkeypatch):
    """Keep SHOBDO_* variables from the developer's shell out of tests."""
    for name in (
        "SHOBDO_WIKTIONARY_API_URL",
        "SHOBDO_REQUEST_TIMEOUT",
        "SHOBDO_LEXICON_PATH",
        "SHOBDO_LOCALE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def small_lexicon() -> Lexicon:
    return Lexicon.from_words(
        pure=["আকাশ", "মাটি", "খোকা"],
        foreign=["চেয়ার", "টেবিল"],
    )


@pytest.fixture
def stub_source() -> StubSource:
    return StubSource()


@pytest.fixture
def checker(small_lexicon, stub_source) -> WordChecker:
    """Checker with English reasons and no network."""
    return WordChecker(
        lexicon=small_lexicon,
        source=stub_source,
        settings=Settings(locale="en"),
    )
