"""Lookup orchestration for a single word.

Sequence:
1. Validate input
2. Normalize
3. Local lexicon: foreign check, then pure check (short-circuit)
4. Fetch the Wiktionary entry for the normalized word
5. Extract etymology and classify origin (pure-first)
6. Map every outcome, including failures, to a ClassificationResult

lookup() never raises; source failures degrade to an "unknown" verdict.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from shobdo.config import Settings
from shobdo.etymology.classifier import classify_origin
from shobdo.lexicon.store import Lexicon, get_default_lexicon, load_lexicon
from shobdo.markers import DEFAULT_MARKERS, MarkerTables
from shobdo.normalize import normalize_bangla
from shobdo.pipeline.schemas import ClassificationResult, OriginType, reason_text
from shobdo.sources.wiktionary import (
    PageSource,
    WiktionaryClient,
    WiktionaryUnavailableError,
)

logger = logging.getLogger(__name__)


class WordChecker:
    """Classifies words using a lexicon, marker tables and a page source.

    Holds only shared, read-only state; lookups may run concurrently.
    """

    def __init__(
        self,
        lexicon: Lexicon | None = None,
        markers: MarkerTables = DEFAULT_MARKERS,
        source: PageSource | None = None,
        settings: Settings | None = None,
    ):
        """Initialize checker.

        Args:
            lexicon: Local lexicon (default: process-wide bundled lexicon)
            markers: Marker tables for the classifier
            source: Page source (default: WiktionaryClient from settings)
            settings: Settings (default: Settings())
        """
        self.settings = settings or Settings()
        if lexicon is None:
            if self.settings.lexicon_path is not None:
                lexicon = load_lexicon(self.settings.lexicon_path)
            else:
                lexicon = get_default_lexicon()
        self.lexicon = lexicon
        self.markers = markers
        self.source = source or WiktionaryClient.from_settings(self.settings)

    def _result(
        self, word: str, origin: OriginType, key: str, **kwargs: str
    ) -> ClassificationResult:
        return ClassificationResult(
            word=word,
            type=origin,
            reason=reason_text(self.settings.locale, key, **kwargs),
        )

    def check_local(self, word: str) -> ClassificationResult | None:
        """Check the local lexicon only.

        Args:
            word: Trimmed word

        Returns:
            Result if the lexicon knows the word, None otherwise
        """
        normalized = normalize_bangla(word)

        # Foreign first: a fast reject
        if self.lexicon.contains_foreign(normalized):
            logger.debug(f"'{normalized}' found in local foreign words")
            return self._result(word, OriginType.FOREIGN, "local_foreign")

        if self.lexicon.contains_pure(normalized):
            logger.debug(f"'{normalized}' found in local pure words")
            return self._result(word, OriginType.PURE, "local_pure")

        return None

    def check_remote(self, word: str) -> ClassificationResult:
        """Classify a word from its Wiktionary entry.

        Args:
            word: Trimmed word

        Returns:
            Result; "unknown" for any source failure or missing signal
        """
        normalized = normalize_bangla(word)

        try:
            page = self.source.fetch_page(normalized)
        except WiktionaryUnavailableError as e:
            logger.warning(f"Wiktionary lookup failed for word '{word}': {e}")
            return self._result(word, OriginType.UNKNOWN, "source_unavailable")
        except Exception as e:
            logger.exception(f"Unexpected error looking up word '{word}': {e}")
            return self._result(word, OriginType.UNKNOWN, "source_unavailable")

        if page is None:
            return self._result(word, OriginType.UNKNOWN, "not_found")

        if not page.content:
            return self._result(word, OriginType.UNKNOWN, "no_content")

        verdict = classify_origin(page.content, self.markers)
        if verdict is None:
            logger.debug(f"No origin markers in Wiktionary page for '{normalized}'")
            return self._result(word, OriginType.UNKNOWN, "undetermined")

        logger.debug(
            f"'{normalized}' classified {verdict.origin} by marker "
            f"'{verdict.marker}' (in etymology: {verdict.in_etymology})"
        )
        if verdict.origin == "pure":
            return self._result(
                word, OriginType.PURE, "marker_pure", marker=verdict.marker
            )
        return self._result(
            word, OriginType.FOREIGN, "marker_foreign", marker=verdict.marker
        )

    def lookup(self, raw_word: Any, offline: bool = False) -> ClassificationResult:
        """Classify a raw word.

        Args:
            raw_word: Word as supplied by the caller (any value)
            offline: If True, never contact the external source

        Returns:
            ClassificationResult (never raises)
        """
        if not isinstance(raw_word, str) or not normalize_bangla(raw_word):
            # Non-text, or nothing left after normalization
            return self._result("", OriginType.INVALID, "no_word")

        trimmed = raw_word.strip()

        local = self.check_local(trimmed)
        if local is not None:
            return local

        if offline:
            return self._result(trimmed, OriginType.UNKNOWN, "not_in_lexicon")

        return self.check_remote(trimmed)


@lru_cache(maxsize=1)
def get_default_checker() -> WordChecker:
    """Get the process-wide checker built from environment settings."""
    return WordChecker(settings=Settings.from_env())


def lookup(raw_word: Any) -> ClassificationResult:
    """Classify a raw word with the default checker."""
    return get_default_checker().lookup(raw_word)
