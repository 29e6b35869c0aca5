from __future__ import annotations

import random
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Sequence

from .exceptions import FatalSetupError
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Project-local wordlists live here:
DATA_DIR = Path(__file__).resolve().parents[2] / "data" / "wordlists"

START_WORDS_FILE = DATA_DIR / "start.txt"
DICTIONARY_FILE = DATA_DIR / "dictionary.txt"

# Used only when a pool loaded fine but turned out to be empty.
FALLBACK_ROOT_WORD = "silkworm"


class RootWordSource(Protocol):
    """Supplies the pool of root words and picks one for a new round."""

    def list_candidate_roots(self) -> List[str]:
        ...

    def pick_random(self, pool: Sequence[str]) -> str:
        ...


def _read_lines(path: Path) -> List[str]:
    """
    Read a text file (UTF-8) and return non-empty, stripped, lowercase lines.

    Notes
    -----
    - Raises `FatalSetupError` if the file is missing or unreadable. Unlike a
      missing file, an empty file is NOT an error here; see `pick_root`.
    - Each valid line should contain exactly one word.
    """
    if not path.exists() or not path.is_file():
        raise FatalSetupError(f"could not load {path.name} from {path.parent}")
    try:
        raw = path.read_text(encoding="utf-8", errors="ignore").splitlines()
    except OSError as exc:
        raise FatalSetupError(f"could not read {path}: {exc}") from exc
    return [ln.strip().lower() for ln in raw if ln.strip()]


def pick_root(pool: Sequence[str], rng: Optional[random.Random] = None) -> str:
    """
    Pick one root word from `pool`.

    Falls back to `FALLBACK_ROOT_WORD` only when the pool is empty; the caller
    is responsible for having loaded the pool in the first place.
    """
    if not pool:
        logger.warning("Root word pool is empty; falling back to %r", FALLBACK_ROOT_WORD)
        return FALLBACK_ROOT_WORD
    return (rng or random).choice(list(pool))


class FileRootWordSource:
    """
    Root words read from a text file, one word per line (`start.txt`).

    The file is re-read on every `list_candidate_roots()` call so edits are
    picked up on the next restart.
    """

    def __init__(self, path: Path | str = START_WORDS_FILE, rng: Optional[random.Random] = None) -> None:
        self.path = Path(path)
        self._rng = rng

    def list_candidate_roots(self) -> List[str]:
        words = _read_lines(self.path)
        logger.debug("Loaded %s root words from %s", len(words), self.path)
        return words

    def pick_random(self, pool: Sequence[str]) -> str:
        return pick_root(pool, self._rng)


class StaticRootWordSource:
    """In-memory pool; handy for tests and for embedding a fixed word set."""

    def __init__(self, words: Iterable[str], rng: Optional[random.Random] = None) -> None:
        self._words = [w.strip().lower() for w in words if w and w.strip()]
        self._rng = rng

    def list_candidate_roots(self) -> List[str]:
        return list(self._words)

    def pick_random(self, pool: Sequence[str]) -> str:
        return pick_root(pool, self._rng)


__all__ = [
    "RootWordSource",
    "FileRootWordSource",
    "StaticRootWordSource",
    "pick_root",
    "FALLBACK_ROOT_WORD",
    "START_WORDS_FILE",
    "DICTIONARY_FILE",
]
