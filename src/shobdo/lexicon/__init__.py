"""Local lexicon of known pure and foreign words."""

from shobdo.lexicon.store import (
    BUNDLED_LEXICON_PATH,
    Lexicon,
    LexiconValidationError,
    get_default_lexicon,
    load_lexicon,
)

__all__ = [
    "BUNDLED_LEXICON_PATH",
    "Lexicon",
    "LexiconValidationError",
    "get_default_lexicon",
    "load_lexicon",
]
