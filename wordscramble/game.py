from __future__ import annotations

import random
from typing import Optional

from .config import Settings, load_settings
from .core.dictionary import DictionaryOracle, WordListOracle
from .core.engine import GameSession
from .core.wordlist import FileRootWordSource, RootWordSource
from .services.llm_oracle import LLMDictionaryOracle
from .services.llm_picker import LLMRootPicker
from .utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def build_session(settings: Optional[Settings] = None, rng: Optional[random.Random] = None) -> GameSession:
    """
    Wire settings into a ready-to-start `GameSession`.

    - Root words come from `start.txt`; when LLM use is enabled an LLM-picked
      word is preferred and the file pool is the fallback.
    - Dictionary lookups go to the local word list; when LLM use is enabled
      the LLM answers first and the word list is the fallback.

    The session is returned NOT started; call `start()` (which may raise
    `FatalSetupError`) once the caller is ready to handle that.
    """
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    source: RootWordSource = FileRootWordSource(settings.start_words_path, rng=rng)
    local_oracle = WordListOracle.from_file(settings.dictionary_path, locale=settings.locale)
    oracle: DictionaryOracle = local_oracle

    if settings.llm_enabled:
        source = LLMRootPicker(
            source,
            model=settings.model_name,
            api_key=settings.openai_api_key,
            offline=settings.offline_mode,
        )
        oracle = LLMDictionaryOracle(
            local_oracle,
            model=settings.model_name,
            api_key=settings.openai_api_key,
            offline=settings.offline_mode,
        )
        logger.info("LLM collaborators enabled (model %s)", settings.model_name)

    return GameSession(source=source, oracle=oracle, locale=settings.locale)


__all__ = ["build_session"]
