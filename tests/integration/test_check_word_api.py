"""Integration tests for the word-check HTTP API.

Runs the FastAPI app in-process with a stub page source, so the
end-to-end scenarios never touch the network.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from shobdo import __version__
from shobdo.api.main import create_app
from shobdo.config import Settings
from shobdo.lexicon import Lexicon, LexiconValidationError
from shobdo.pipeline import WordChecker
from shobdo.sources.wiktionary import WiktionaryPage, WiktionaryUnavailableError


class FakeSource:
    """Serves canned pages by title; unknown titles are not found."""

    def __init__(self, pages: dict[str, str] | None = None, error: Exception | None = None):
        self.pages = pages or {}
        self.error = error
        self.calls: list[str] = []

    def fetch_page(self, title: str) -> WiktionaryPage | None:
        self.calls.append(title)
        if self.error is not None:
            raise self.error
        if title not in self.pages:
            return None
        return WiktionaryPage(title=title, page_id="99", content=self.pages[title])


@pytest.fixture
def fake_source():
    return FakeSource(
        pages={
            "নদী": (
                "== বাংলা ==\n"
                "===ব্যুৎপত্তি===\n"
                "তৎসম শব্দ\n"
                "===বিশেষ্য===\n"
                "প্রবাহমান জলধারা\n"
                "====অনুবাদ====\n"
                "* ইংরেজি: river\n"
            ),
            "কাগজ": "===ব্যুৎপত্তি===\nফারসি থেকে\n",
            "ফাঁকা": "",
        }
    )


@pytest.fixture
def client(fake_source):
    lexicon = Lexicon.from_words(pure=["আকাশ"], foreign=["চেয়ার"])
    checker = WordChecker(
        lexicon=lexicon, source=fake_source, settings=Settings(locale="en")
    )
    with TestClient(create_app(checker=checker)) as test_client:
        yield test_client


class TestCheckWordScenarios:
    """End-to-end verdicts through POST /api/check-word."""

    def test_local_pure_word(self, client, fake_source):
        response = client.post("/api/check-word", json={"word": "  আকাশ  "})

        assert response.status_code == 200
        assert response.json() == {
            "word": "আকাশ",
            "valid": True,
            "type": "pure",
            "reason": "known pure word (local dictionary)",
        }
        assert fake_source.calls == []

    def test_local_foreign_word(self, client):
        response = client.post("/api/check-word", json={"word": "চেয়ার"})

        data = response.json()
        assert data["valid"] is False
        assert data["type"] == "foreign"
        assert data["reason"] == "known foreign word (local dictionary)"

    def test_remote_pure_with_translation_gloss(self, client, fake_source):
        response = client.post("/api/check-word", json={"word": "নদী"})

        data = response.json()
        assert data["valid"] is True
        assert data["type"] == "pure"
        assert fake_source.calls == ["নদী"]

    def test_remote_foreign(self, client):
        data = client.post("/api/check-word", json={"word": "কাগজ"}).json()

        assert data["type"] == "foreign"
        assert data["valid"] is False

    def test_remote_timeout(self, client, fake_source):
        fake_source.error = WiktionaryUnavailableError("Timed out after 8.0s")

        data = client.post("/api/check-word", json={"word": "দূর"}).json()

        assert data == {
            "word": "দূর",
            "valid": False,
            "type": "unknown",
            "reason": "lookup source unavailable",
        }

    def test_not_found(self, client):
        data = client.post("/api/check-word", json={"word": "অজানা"}).json()

        assert data["type"] == "unknown"
        assert data["reason"] == "not found in external source"

    def test_empty_content(self, client):
        data = client.post("/api/check-word", json={"word": "ফাঁকা"}).json()

        assert data["type"] == "unknown"
        assert data["reason"] == "no content in external source"


class TestCheckWordInvalidInput:
    """Bad input still answers 200 with an invalid verdict."""

    INVALID = {
        "word": "",
        "valid": False,
        "type": "invalid",
        "reason": "no word supplied",
    }

    def test_empty_word(self, client):
        response = client.post("/api/check-word", json={"word": ""})
        assert response.status_code == 200
        assert response.json() == self.INVALID

    def test_word_omitted(self, client):
        response = client.post("/api/check-word", json={})
        assert response.status_code == 200
        assert response.json() == self.INVALID

    def test_word_not_text(self, client):
        response = client.post("/api/check-word", json={"word": 123})
        assert response.status_code == 200
        assert response.json() == self.INVALID

    def test_no_body(self, client):
        response = client.post("/api/check-word")
        assert response.status_code == 200
        assert response.json() == self.INVALID

    def test_body_not_json(self, client):
        response = client.post(
            "/api/check-word",
            content=b"word=abc",
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        assert response.status_code == 200
        assert response.json() == self.INVALID

    def test_body_is_json_list(self, client):
        response = client.post("/api/check-word", json=["আকাশ"])
        assert response.status_code == 200
        assert response.json()["type"] == "invalid"


class TestServiceEndpoints:
    """Health and root endpoints."""

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "ok",
            "version": __version__,
            "pure_words": 1,
            "foreign_words": 1,
        }

    def test_root(self, client):
        data = client.get("/").json()
        assert data["name"] == "Shobdo"
        assert data["api"] == "/api"


class TestStartup:
    """The default app loads its lexicon before serving."""

    def test_lexicon_loaded_at_startup(self, monkeypatch, tmp_path):
        path = tmp_path / "lexicon.yaml"
        path.write_text("pure:\n  - আকাশ\n  - মাটি\nforeign:\n  - চেয়ার\n", encoding="utf-8")
        monkeypatch.setenv("SHOBDO_LEXICON_PATH", str(path))
        app = create_app()

        with TestClient(app) as test_client:
            assert app.state.checker is not None
            data = test_client.get("/api/health").json()

        assert data["pure_words"] == 2
        assert data["foreign_words"] == 1

    def test_missing_lexicon_fails_startup(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SHOBDO_LEXICON_PATH", str(tmp_path / "missing.yaml"))

        with pytest.raises(FileNotFoundError):
            with TestClient(create_app()):
                pass

    def test_invalid_lexicon_fails_startup(self, monkeypatch, tmp_path):
        path = tmp_path / "lexicon.yaml"
        path.write_text("pure:\n  - চা\nforeign:\n  - চা\n", encoding="utf-8")
        monkeypatch.setenv("SHOBDO_LEXICON_PATH", str(path))

        with pytest.raises(LexiconValidationError):
            with TestClient(create_app()):
                pass

    def test_injected_checker_is_kept(self, client):
        assert client.app.state.checker.settings.locale == "en"


class TestJoinerOnlyWord:
    def test_joiner_only_word_echoes_empty(self, client):
        data = client.post("/api/check-word", json={"word": " \u200c\u200d "}).json()

        assert data == TestCheckWordInvalidInput.INVALID
