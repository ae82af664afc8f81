"""Local lexicon of known pure and foreign words.

The lexicon is loaded once from a YAML file and never mutated afterwards.
Both sets hold normalized words, so membership tests compare by the same
key the rest of the pipeline uses.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

import yaml

from shobdo.normalize import normalize_bangla

logger = logging.getLogger(__name__)

BUNDLED_LEXICON_PATH = Path(__file__).resolve().parent / "data" / "lexicon.yaml"

LEXICON_PATH_ENV = "SHOBDO_LEXICON_PATH"


class LexiconValidationError(Exception):
    """Raised when lexicon data is malformed or the two sets overlap."""

    pass


@dataclass(frozen=True)
class Lexicon:
    """Two disjoint sets of normalized words."""

    pure_words: frozenset[str]
    foreign_words: frozenset[str]

    def contains_pure(self, word: str) -> bool:
        """Check whether word is a known pure word."""
        return normalize_bangla(word) in self.pure_words

    def contains_foreign(self, word: str) -> bool:
        """Check whether word is a known foreign word."""
        return normalize_bangla(word) in self.foreign_words

    def overlap(self) -> frozenset[str]:
        """Words present in both sets (should always be empty)."""
        return self.pure_words & self.foreign_words

    def __len__(self) -> int:
        return len(self.pure_words) + len(self.foreign_words)

    @classmethod
    def from_words(cls, pure: list[str], foreign: list[str]) -> "Lexicon":
        """Build a lexicon from raw word lists.

        Words are normalized; blank entries are dropped.

        Raises:
            LexiconValidationError: If a word appears in both lists
        """
        pure_words = frozenset(_normalize_entries(pure))
        foreign_words = frozenset(_normalize_entries(foreign))

        lexicon = cls(pure_words=pure_words, foreign_words=foreign_words)
        overlap = lexicon.overlap()
        if overlap:
            raise LexiconValidationError(
                "Words listed as both pure and foreign: "
                + ", ".join(sorted(overlap))
            )
        return lexicon


def _normalize_entries(entries: list[str]) -> list[str]:
    normalized = []
    for entry in entries:
        word = normalize_bangla(str(entry))
        if word:
            normalized.append(word)
    return normalized


def load_lexicon(path: Path | str | None = None) -> Lexicon:
    """Load lexicon from a YAML file.

    Args:
        path: Path to lexicon YAML. If None, uses:
              1. SHOBDO_LEXICON_PATH env var
              2. Bundled lexicon.yaml

    Returns:
        Loaded and validated Lexicon

    Raises:
        LexiconValidationError: If the file is not a mapping of word lists,
            or the lists overlap
        FileNotFoundError: If lexicon file not found
    """
    if path is None:
        env_path = os.environ.get(LEXICON_PATH_ENV)
        path = Path(env_path) if env_path else BUNDLED_LEXICON_PATH

    if isinstance(path, str):
        path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Lexicon not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        raw_data = yaml.safe_load(f)

    if not isinstance(raw_data, dict):
        raise LexiconValidationError("Lexicon must be a YAML mapping")

    sections = {}
    for key in ("pure", "foreign"):
        value = raw_data.get(key) or []
        if not isinstance(value, list):
            raise LexiconValidationError(f"Lexicon section '{key}' must be a list")
        sections[key] = value

    lexicon = Lexicon.from_words(sections["pure"], sections["foreign"])
    logger.info(
        f"Loaded lexicon from {path}: {len(lexicon.pure_words)} pure, "
        f"{len(lexicon.foreign_words)} foreign"
    )
    return lexicon


@lru_cache(maxsize=1)
def get_default_lexicon() -> Lexicon:
    """Get the process-wide lexicon (loaded on first use)."""
    return load_lexicon()
