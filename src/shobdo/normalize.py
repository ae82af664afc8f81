"""Text normalization for Bengali word comparison.

Every lookup key in the system passes through normalize_bangla, so two
words compare equal iff their normalized forms are equal.
"""

from __future__ import annotations

import re
import unicodedata

# ZWNJ (U+200C) and ZWJ (U+200D) change bytes without changing the glyphs
_JOINERS = re.compile("[\u200c\u200d]")

# Bengali Unicode block
_BANGLA_CHARS = re.compile("[\u0980-\u09ff]")


def normalize_bangla(text: str) -> str:
    """Normalize Bengali text for lookup and marker matching.

    - Unicode NFC (composed and decomposed vowel signs compare equal)
    - Zero-width joiner / non-joiner removed
    - Leading/trailing whitespace stripped

    Args:
        text: Raw text

    Returns:
        Normalized text (idempotent)
    """
    nfc = unicodedata.normalize("NFC", text)
    return _JOINERS.sub("", nfc).strip()


def contains_bangla(text: str) -> bool:
    """Check whether text contains any Bengali-script character."""
    return bool(_BANGLA_CHARS.search(text))
