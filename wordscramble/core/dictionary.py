from __future__ import annotations

from pathlib import Path
from typing import Iterable, Protocol, Set

from .exceptions import DictionaryLoadError
from ..utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_LOCALE = "en"


class DictionaryOracle(Protocol):
    """
    Answers "is this a valid word in language `locale`?".

    Contract
    --------
    - Returns False for misspelled/unknown words and True for valid ones.
    - Deterministic for a given (word, locale) pair within a session.
    - Total: always answers with a bool. Implementations backed by a remote
      service must turn their own faults into an answer (or a fallback lookup)
      instead of raising into the engine.
    """

    def check_word(self, word: str, locale: str) -> bool:
        ...


class WordListOracle:
    """
    Local oracle backed by an in-memory set of words.

    Notes
    -----
    - Words shorter than `min_length` are rejected, mirroring how a real
      spell checker refuses trivial single-letter substrings.
    - Only `locale` is answered; any other locale gets False.
    """

    def __init__(self, words: Iterable[str], locale: str = DEFAULT_LOCALE, min_length: int = 2) -> None:
        self.locale = locale.lower()
        self.min_length = min_length
        self._words: Set[str] = {w.strip().lower() for w in words if w and w.strip()}

    @classmethod
    def from_file(cls, path: Path | str, locale: str = DEFAULT_LOCALE, min_length: int = 2) -> "WordListOracle":
        """Load one word per line (UTF-8); blank lines are skipped."""
        source = Path(path)
        if not source.is_file():
            raise DictionaryLoadError(f"Missing dictionary file: {source}")
        try:
            raw = source.read_text(encoding="utf-8", errors="ignore").splitlines()
        except OSError as exc:
            raise DictionaryLoadError(str(exc)) from exc

        oracle = cls(raw, locale=locale, min_length=min_length)
        logger.info("Loaded %s dictionary words from %s", len(oracle), source)
        return oracle

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.strip().lower() in self._words

    def check_word(self, word: str, locale: str = DEFAULT_LOCALE) -> bool:
        if (locale or "").lower() != self.locale:
            return False
        w = (word or "").strip().lower()
        if len(w) < self.min_length:
            return False
        return w in self._words


__all__ = ["DictionaryOracle", "WordListOracle", "DEFAULT_LOCALE"]
