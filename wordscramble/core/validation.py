"""
Guess validation predicates.

A guess is accepted iff, in this order:
  1) it is non-empty after normalization
  2) it has not been accepted before in this round   (originality)
  3) it can be spelled from the root word's letters  (feasibility)
  4) the dictionary oracle recognizes it             (dictionary validity)

The predicates themselves are pure and independent; the ordering and
short-circuiting live in `core.engine`.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from .dictionary import DEFAULT_LOCALE, DictionaryOracle


def normalize_guess(raw: str) -> str:
    """Trim surrounding whitespace/newlines and lowercase the raw input."""
    return (raw or "").strip().lower()


def is_original(candidate: str, accepted_so_far: Iterable[str]) -> bool:
    """False iff `candidate` was already accepted (case-normalized exact match)."""
    word = normalize_guess(candidate)
    return all(normalize_guess(w) != word for w in accepted_so_far)


def is_possible(candidate: str, root_word: str) -> bool:
    """
    True iff every letter of `candidate` can be taken from `root_word`,
    each root letter used at most as many times as it occurs there.

    Works on a fresh Counter so the root word is never touched.
    """
    available = Counter(root_word)
    for letter in candidate:
        if available[letter] <= 0:
            return False
        available[letter] -= 1  # consume one occurrence
    return True


def is_real(candidate: str, oracle: DictionaryOracle, locale: str = DEFAULT_LOCALE) -> bool:
    """Delegate dictionary membership to the injected oracle."""
    return bool(oracle.check_word(candidate, locale))


__all__ = ["normalize_guess", "is_original", "is_possible", "is_real"]
