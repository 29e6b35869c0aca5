from __future__ import annotations

import os
import re
from typing import List, Optional, Sequence

from openai import OpenAI

from ..core.wordlist import RootWordSource
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Strict validator: only lowercase a–z, length policy enforced separately
_LOWER_AZ = re.compile(r"^[a-z]+$")


def pick_with_llm(
    length: int = 8,
    retries: int = 2,
    model: Optional[str] = None,
    api_key: Optional[str] = None,
    offline: Optional[bool] = None,
) -> Optional[str]:
    """
    Try to pick ONE root word via an LLM. Returns None on failure (caller should fallback).

    Safety
    ------
    - Offline or missing key -> returns None immediately. `api_key` and
      `offline` default to OPENAI_API_KEY and OFFLINE_MODE when not passed.
    - Prompts the model to output exactly ONE word (lowercase, a–z only).
    - Validates with regex + exact length; retries a few times; then gives up.
    """
    if api_key is None:
        api_key = os.getenv("OPENAI_API_KEY", "")
    if offline is None:
        offline = os.getenv("OFFLINE_MODE", "true").lower() == "true"
    if offline or not api_key:
        return None

    prompt = (
        f"Give one common English word with exactly {length} letters, suitable as the "
        "starting word of an anagram game. It should be different each time. "
        "Output only the word in lowercase."
    )

    client = OpenAI(api_key=api_key)
    mdl = model or os.getenv("MODEL_NAME", "gpt-4o-mini")

    attempts = retries + 1
    for attempt in range(attempts):
        try:
            resp = client.chat.completions.create(
                model=mdl,
                messages=[{"role": "user", "content": prompt}],
                temperature=0.9,
                max_tokens=20,
            )
        except Exception as exc:  # SDK/network faults: retry, then fall back
            logger.warning("LLM root pick failed (attempt %s/%s): %s", attempt + 1, attempts, exc)
            continue
        word = (resp.choices[0].message.content or "").strip()
        # Tighten: strip quotes/spaces/trailing period and force lowercase
        word = word.replace('"', "").replace("'", "").strip().rstrip(".").lower()
        if _LOWER_AZ.match(word) and len(word) == length:
            return word
        logger.debug("Discarding LLM root candidate %r", word)

    return None  # let caller fallback to local picker


class LLMRootPicker:
    """
    Root word source that prefers an LLM-picked word and falls back to `fallback`.

    The pool always comes from the fallback source, so a missing pool file is
    still a fatal setup error even when the LLM is available.
    """

    def __init__(
        self,
        fallback: RootWordSource,
        length: int = 8,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
        offline: Optional[bool] = None,
    ) -> None:
        self.fallback = fallback
        self.length = length
        self.model = model
        self.api_key = api_key
        self.offline = offline
        self.last_source = "unknown"

    def list_candidate_roots(self) -> List[str]:
        return self.fallback.list_candidate_roots()

    def pick_random(self, pool: Sequence[str]) -> str:
        llm_word = pick_with_llm(
            length=self.length, model=self.model, api_key=self.api_key, offline=self.offline
        )
        if llm_word:
            self.last_source = "llm"
            return llm_word
        self.last_source = "local"
        return self.fallback.pick_random(pool)


__all__ = ["pick_with_llm", "LLMRootPicker"]
