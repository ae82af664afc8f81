"""Configuration settings for Shobdo."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from shobdo import __version__

SUPPORTED_LOCALES = ("bn", "en")

ENV_PREFIX = "SHOBDO_"


@dataclass
class Settings:
    """Application settings."""

    # External reference source (Bengali Wiktionary)
    wiktionary_api_url: str = "https://bn.wiktionary.org/w/api.php"
    request_timeout: float = 8.0
    user_agent: str = field(
        default_factory=lambda: f"shobdo/{__version__} (Bengali word-origin checker)"
    )

    # Local lexicon (None = bundled data)
    lexicon_path: Path | None = None

    # Language of reason strings
    locale: str = "bn"

    def __post_init__(self) -> None:
        if self.locale not in SUPPORTED_LOCALES:
            raise ValueError(
                f"Unsupported locale: {self.locale!r} "
                f"(expected one of {', '.join(SUPPORTED_LOCALES)})"
            )
        if self.request_timeout <= 0:
            raise ValueError("request_timeout must be positive")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings, overriding defaults from SHOBDO_* variables.

        Recognized variables:
            SHOBDO_WIKTIONARY_API_URL, SHOBDO_REQUEST_TIMEOUT,
            SHOBDO_LEXICON_PATH, SHOBDO_LOCALE
        """
        overrides: dict = {}

        api_url = os.environ.get(f"{ENV_PREFIX}WIKTIONARY_API_URL")
        if api_url:
            overrides["wiktionary_api_url"] = api_url

        timeout = os.environ.get(f"{ENV_PREFIX}REQUEST_TIMEOUT")
        if timeout:
            overrides["request_timeout"] = float(timeout)

        lexicon_path = os.environ.get(f"{ENV_PREFIX}LEXICON_PATH")
        if lexicon_path:
            overrides["lexicon_path"] = Path(lexicon_path)

        locale = os.environ.get(f"{ENV_PREFIX}LOCALE")
        if locale:
            overrides["locale"] = locale

        return cls(**overrides)
