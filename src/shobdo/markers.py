"""Origin marker tables.

Markers are short Bengali terms whose presence in a Wiktionary entry is
taken as evidence of a word's origin. Pure markers are always checked
before foreign markers; within a table, the first marker in order that
matches is the one reported.
"""

from __future__ import annotations

from dataclasses import dataclass

# Native / Sanskritic lineage markers (checked first)
PURE_MARKERS: tuple[str, ...] = (
    "তৎসম",
    "তদ্ভব",
    "সংস্কৃত",
    "প্রাকৃত",
    "বাংলা",
    "দেশি",
    "দেশী",
    "অর্ধতৎসম",
)

# Named source languages and generic "foreign" markers
FOREIGN_MARKERS: tuple[str, ...] = (
    "বিদেশী",
    "বিদেশি",
    "আরবি",
    "আরবী",
    "ফার্সি",
    "ফারসি",
    "ফার্সী",
    "ইংরেজি",
    "ইংরেজী",
    "পর্তুগিজ",
    "পর্তুগীজ",
    "বর্মী",
    "বর্মি",
    "তুর্কি",
    "তুর্কী",
    "হিন্দি",
    "হিন্দী",
    "উর্দু",
    "ফরাসি",
    "ফরাসী",
    "ওলন্দাজ",
    "জাপানি",
    "জাপানী",
    "চীনা",
    "মালয়",
    "গ্রিক",
    "লাতিন",
)


@dataclass(frozen=True)
class MarkerTables:
    """Ordered pure and foreign marker tables used by the classifier."""

    pure: tuple[str, ...]
    foreign: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.pure:
            raise ValueError("pure marker table must not be empty")
        if not self.foreign:
            raise ValueError("foreign marker table must not be empty")
        # Accept lists from callers but store immutable tuples
        object.__setattr__(self, "pure", tuple(self.pure))
        object.__setattr__(self, "foreign", tuple(self.foreign))


DEFAULT_MARKERS = MarkerTables(pure=PURE_MARKERS, foreign=FOREIGN_MARKERS)
