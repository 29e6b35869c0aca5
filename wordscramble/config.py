from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .core.wordlist import DICTIONARY_FILE, START_WORDS_FILE


@dataclass(frozen=True)
class Settings:
    """Runtime settings, read from the process environment (and `.env`)."""

    offline_mode: bool = True
    openai_api_key: str = ""
    model_name: str = "gpt-4o-mini"
    locale: str = "en"
    start_words_path: Path = START_WORDS_FILE
    dictionary_path: Path = DICTIONARY_FILE
    log_level: str = "INFO"

    @property
    def llm_enabled(self) -> bool:
        """LLM collaborators run only when online AND a key is present."""
        return not self.offline_mode and bool(self.openai_api_key)


def load_settings(dotenv: bool = True) -> Settings:
    """
    Build `Settings` from environment variables.

    `.env` is loaded first when `dotenv` is true; values already in the
    environment win (`override=False`).
    """
    if dotenv:
        load_dotenv(override=False)

    return Settings(
        offline_mode=os.getenv("OFFLINE_MODE", "true").lower() == "true",
        openai_api_key=os.getenv("OPENAI_API_KEY", ""),
        model_name=os.getenv("MODEL_NAME", "gpt-4o-mini"),
        locale=os.getenv("WORDSCRAMBLE_LOCALE", "en"),
        start_words_path=Path(os.getenv("START_WORDS_PATH") or START_WORDS_FILE),
        dictionary_path=Path(os.getenv("DICTIONARY_PATH") or DICTIONARY_FILE),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


__all__ = ["Settings", "load_settings"]
