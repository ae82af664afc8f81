"""External reference sources."""

from shobdo.sources.wiktionary import (
    PageSource,
    WiktionaryClient,
    WiktionaryPage,
    WiktionaryUnavailableError,
    parse_query_response,
)

__all__ = [
    "PageSource",
    "WiktionaryClient",
    "WiktionaryPage",
    "WiktionaryUnavailableError",
    "parse_query_response",
]
