from __future__ import annotations

import os
from collections import OrderedDict
from typing import Optional, Tuple

from openai import OpenAI

from ..core.dictionary import WordListOracle
from ..utils.logger import get_logger

logger = get_logger(__name__)

_LANGUAGES = {"en": "English", "fr": "French", "de": "German", "es": "Spanish", "it": "Italian"}


def _parse_yes_no(text: str) -> Optional[bool]:
    """Map a free-form model reply to True/False; None if it is neither."""
    reply = (text or "").strip().lower().rstrip(".!")
    if reply.startswith("yes"):
        return True
    if reply.startswith("no"):
        return False
    return None


class LLMDictionaryOracle:
    """
    Dictionary oracle that asks an LLM whether a word is spelled correctly.

    Behavior
    --------
    - Offline or missing key -> answers from `fallback`. `api_key` and
      `offline` default to OPENAI_API_KEY and OFFLINE_MODE when not passed.
    - Words shorter than the fallback's `min_length` are rejected without a call.
    - Any SDK error or unparseable reply -> answers from `fallback`.
    - Answers are cached per (word, locale), so repeated lookups within a
      session stay consistent even if the model would not. The cache keeps
      the `max_cache` most recently used entries.
    """

    def __init__(
        self,
        fallback: WordListOracle,
        model: Optional[str] = None,
        temperature: float = 0.0,
        api_key: Optional[str] = None,
        offline: Optional[bool] = None,
        max_cache: int = 4096,
    ) -> None:
        self.fallback = fallback
        self.model = model
        self.temperature = temperature
        self.api_key = api_key
        self.offline = offline
        self.max_cache = max_cache
        self._cache: OrderedDict[Tuple[str, str], bool] = OrderedDict()

    def check_word(self, word: str, locale: str = "en") -> bool:
        w = (word or "").strip().lower()
        key = (w, (locale or "").lower())
        if key in self._cache:
            self._cache.move_to_end(key)
            return self._cache[key]

        if len(w) < self.fallback.min_length:
            answer = False
        else:
            llm_answer = self._ask(w, key[1])
            answer = self.fallback.check_word(w, locale) if llm_answer is None else llm_answer

        self._cache[key] = answer
        if len(self._cache) > self.max_cache:
            self._cache.popitem(last=False)  # least recently used
        return answer

    def _ask(self, word: str, locale: str) -> Optional[bool]:
        api_key = self.api_key if self.api_key is not None else os.getenv("OPENAI_API_KEY", "")
        offline = self.offline
        if offline is None:
            offline = os.getenv("OFFLINE_MODE", "true").lower() == "true"
        if offline or not api_key:
            return None

        client = OpenAI(api_key=api_key)
        mdl = self.model or os.getenv("MODEL_NAME", "gpt-4o-mini")
        language = _LANGUAGES.get(locale, locale)

        system = "You are a strict spell checker for a word game."
        user = (
            f"Is '{word}' a correctly spelled {language} dictionary word "
            "(not a proper noun, abbreviation or acronym)? Reply with yes or no only."
        )
        try:
            resp = client.chat.completions.create(
                model=mdl,
                messages=[{"role": "system", "content": system},
                          {"role": "user", "content": user}],
                temperature=self.temperature,
                max_tokens=3,
            )
        except Exception as exc:  # fall back to the local word list
            logger.warning("LLM dictionary check failed for %r: %s", word, exc)
            return None

        answer = _parse_yes_no(resp.choices[0].message.content or "")
        if answer is None:
            logger.debug("Unparseable LLM reply for %r; using local dictionary", word)
        return answer


__all__ = ["LLMDictionaryOracle"]
