"""Bengali Wiktionary (উইকিশব্দকোষ) page source.

Fetches the latest revision's raw wikitext for an exact title through the
MediaWiki query API. The source is best-effort and untrusted: transport
errors, timeouts, non-2xx responses and malformed payloads are all raised
as WiktionaryUnavailableError for the caller to downgrade.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Protocol

import httpx

from shobdo.config import Settings

logger = logging.getLogger(__name__)

# MediaWiki uses this page id for titles that do not exist
MISSING_PAGE_ID = "-1"


class WiktionaryUnavailableError(Exception):
    """Raised when the Wiktionary API cannot be reached or answers badly."""

    pass


@dataclass(frozen=True)
class WiktionaryPage:
    """A found Wiktionary entry."""

    title: str
    page_id: str
    content: str
    """Raw wikitext of the latest revision (may be empty)."""


class PageSource(Protocol):
    """Anything that can fetch a document for a normalized word."""

    def fetch_page(self, title: str) -> WiktionaryPage | None:
        """Fetch the entry for title.

        Returns:
            WiktionaryPage if the entry exists, None if it does not

        Raises:
            WiktionaryUnavailableError: If the source cannot answer
        """
        ...


def build_query_params(title: str) -> dict[str, str]:
    """Query parameters requesting the latest revision content of title."""
    return {
        "action": "query",
        "prop": "revisions",
        "titles": title,
        "rvprop": "content",
        "format": "json",
        "origin": "*",
    }


def _revision_content(revision: Any) -> str:
    if not isinstance(revision, dict):
        return ""
    # Legacy format keeps content under "*"; slot-aware responses nest it
    content = revision.get("*")
    if content is None:
        main_slot = (revision.get("slots") or {}).get("main") or {}
        content = main_slot.get("*", main_slot.get("content"))
    return content if isinstance(content, str) else ""


def parse_query_response(data: Any, title: str) -> WiktionaryPage | None:
    """Extract the page from a MediaWiki query response.

    Args:
        data: Decoded JSON body
        title: Requested title (used if the response omits it)

    Returns:
        WiktionaryPage, or None if the title does not exist

    Raises:
        WiktionaryUnavailableError: If the payload lacks query.pages
    """
    if not isinstance(data, dict):
        raise WiktionaryUnavailableError("Response body is not a JSON object")

    query = data.get("query")
    pages = query.get("pages") if isinstance(query, dict) else None
    if not isinstance(pages, dict):
        error = data.get("error")
        detail = f": {error.get('info')}" if isinstance(error, dict) else ""
        raise WiktionaryUnavailableError(f"Response has no query.pages{detail}")

    if not pages:
        return None

    page_id = next(iter(pages))
    page = pages[page_id]
    if page_id == MISSING_PAGE_ID or not isinstance(page, dict):
        return None
    if "missing" in page or "invalid" in page:
        return None

    revisions = page.get("revisions") or []
    content = _revision_content(revisions[0]) if revisions else ""

    return WiktionaryPage(
        title=page.get("title", title),
        page_id=str(page_id),
        content=content,
    )


class WiktionaryClient:
    """Bounded-time client for the Bengali Wiktionary query API.

    Each call opens its own httpx.Client, so one instance can serve
    concurrent lookups. Nothing is retried.
    """

    def __init__(
        self,
        api_url: str = "https://bn.wiktionary.org/w/api.php",
        timeout: float = 8.0,
        user_agent: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize client.

        Args:
            api_url: MediaWiki api.php endpoint
            timeout: Deadline for the whole request in seconds (also used
                as the per-phase connect/read/write limit)
            user_agent: User-Agent header value
            transport: Optional httpx transport (tests use MockTransport)
        """
        self.api_url = api_url
        self.timeout = timeout
        self.user_agent = user_agent or Settings().user_agent
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "WiktionaryClient":
        return cls(
            api_url=settings.wiktionary_api_url,
            timeout=settings.request_timeout,
            user_agent=settings.user_agent,
        )

    def fetch_page(self, title: str) -> WiktionaryPage | None:
        """Fetch the latest revision wikitext for an exact title.

        Args:
            title: Normalized word

        Returns:
            WiktionaryPage if found, None if the title does not exist

        Raises:
            WiktionaryUnavailableError: On timeout, transport error,
                non-2xx status or malformed body
        """
        timed_out = f"Timed out after {self.timeout}s fetching '{title}'"
        deadline = time.monotonic() + self.timeout
        try:
            with httpx.Client(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
                transport=self._transport,
            ) as client:
                with client.stream(
                    "GET", self.api_url, params=build_query_params(title)
                ) as response:
                    response.raise_for_status()
                    body = bytearray()
                    # httpx timeouts are per phase; a trickling body needs a deadline
                    for chunk in response.iter_bytes():
                        body.extend(chunk)
                        if time.monotonic() > deadline:
                            raise WiktionaryUnavailableError(timed_out)
            data = json.loads(body)
        except httpx.TimeoutException as e:
            raise WiktionaryUnavailableError(timed_out) from e
        except httpx.HTTPError as e:
            raise WiktionaryUnavailableError(f"Request failed: {e}") from e
        except ValueError as e:
            raise WiktionaryUnavailableError(f"Invalid JSON response: {e}") from e

        page = parse_query_response(data, title)
        logger.debug(
            f"Wiktionary '{title}': "
            + ("not found" if page is None else f"page {page.page_id}")
        )
        return page
