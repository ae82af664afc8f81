"""Response schema for word lookups.

Stable schema for CLI and API consumption.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OriginType(str, Enum):
    """Verdict of a word lookup."""

    PURE = "pure"
    """Native Bangla, Sanskrit or Prakrit-derived word."""

    FOREIGN = "foreign"
    """Word borrowed from a non-indigenous language."""

    UNKNOWN = "unknown"
    """Origin could not be established (including source failures)."""

    INVALID = "invalid"
    """No usable word was supplied."""


# Reason strings by locale. Bengali wording follows the quiz's UI copy.
REASONS: dict[str, dict[str, str]] = {
    "bn": {
        "no_word": "শব্দ প্রদান করা হয়নি",
        "local_foreign": "বিদেশী শব্দ (স্থানীয় অভিধান)",
        "local_pure": "খাঁটি বাংলা শব্দ (স্থানীয় অভিধান)",
        "not_in_lexicon": "স্থানীয় অভিধানে পাওয়া যায়নি",
        "source_unavailable": "API ত্রুটি — শব্দের উৎস নিশ্চিত করা সম্ভব হয়নি",
        "not_found": "উইকিশব্দকোষে খুঁজে পাওয়া যায়নি",
        "no_content": "উইকিশব্দকোষে বিষয়বস্তু পাওয়া যায়নি",
        "undetermined": "শব্দের উৎস নিশ্চিত করা যায়নি",
        "marker_pure": 'খাঁটি বাংলা শব্দ — "{marker}" (উইকিশব্দকোষ)',
        "marker_foreign": 'বিদেশী উৎসের শব্দ — "{marker}" (উইকিশব্দকোষ)',
    },
    "en": {
        "no_word": "no word supplied",
        "local_foreign": "known foreign word (local dictionary)",
        "local_pure": "known pure word (local dictionary)",
        "not_in_lexicon": "not in local dictionary",
        "source_unavailable": "lookup source unavailable",
        "not_found": "not found in external source",
        "no_content": "no content in external source",
        "undetermined": "origin could not be determined",
        "marker_pure": 'pure word — "{marker}" (Wiktionary)',
        "marker_foreign": 'word of foreign origin — "{marker}" (Wiktionary)',
    },
}


def reason_text(locale: str, key: str, **kwargs: str) -> str:
    """Look up a localized reason string.

    Raises:
        ValueError: If locale is not supported
    """
    if locale not in REASONS:
        raise ValueError(f"Unsupported locale: {locale!r}")
    template = REASONS[locale][key]
    return template.format(**kwargs) if kwargs else template


@dataclass(frozen=True)
class ClassificationResult:
    """Terminal result of one lookup."""

    word: str
    """Requested word, trimmed but otherwise as typed."""

    type: OriginType
    reason: str
    """Human-readable, localized explanation."""

    @property
    def valid(self) -> bool:
        """Only pure words are accepted by the quiz."""
        return self.type is OriginType.PURE

    def to_dict(self) -> dict:
        """Serialize for JSON output."""
        return {
            "word": self.word,
            "valid": self.valid,
            "type": self.type.value,
            "reason": self.reason,
        }
