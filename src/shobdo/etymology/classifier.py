"""Origin classifier: infers pure/foreign origin from a Wiktionary entry.

Pure-first priority: foreign language names often appear in a pure-origin
entry as translation glosses ("ইংরেজি: sky"), so a foreign marker is only
considered when no pure marker occurs anywhere in the document.

Note that this means a pure marker anywhere in the page overrides a
foreign marker in the etymology section itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal

from shobdo.etymology.extractor import extract_etymology
from shobdo.markers import DEFAULT_MARKERS, MarkerTables
from shobdo.normalize import normalize_bangla


@dataclass(frozen=True)
class OriginVerdict:
    """Classifier output when a marker was found."""

    origin: Literal["pure", "foreign"]
    marker: str
    """First matching marker, in table order."""

    in_etymology: bool
    """True if the marker was found inside the etymology section."""


def find_marker(text: str, markers: Iterable[str]) -> str | None:
    """Return the first marker (in table order) contained in text.

    Both text and markers are normalized before the substring test.
    """
    haystack = normalize_bangla(text)
    for marker in markers:
        if normalize_bangla(marker) in haystack:
            return marker
    return None


def _search(
    section: str | None, document: str, markers: tuple[str, ...]
) -> tuple[str, bool] | None:
    # Section hit takes precedence over a whole-document hit
    if section:
        marker = find_marker(section, markers)
        if marker is not None:
            return marker, True
    marker = find_marker(document, markers)
    if marker is not None:
        return marker, False
    return None


def classify_origin(
    document: str, markers: MarkerTables = DEFAULT_MARKERS
) -> OriginVerdict | None:
    """Classify a wikitext document as pure or foreign origin.

    Args:
        document: Raw wikitext of the entry
        markers: Marker tables to apply

    Returns:
        OriginVerdict, or None when neither table matches (no signal)
    """
    section = extract_etymology(document)

    hit = _search(section, document, markers.pure)
    if hit is not None:
        return OriginVerdict(origin="pure", marker=hit[0], in_etymology=hit[1])

    hit = _search(section, document, markers.foreign)
    if hit is not None:
        return OriginVerdict(origin="foreign", marker=hit[0], in_etymology=hit[1])

    return None
