from __future__ import annotations

from typing import Iterable

# Bonus tiers, checked in order; the first matching tier wins.
_EXACT_BONUS_LENGTH = 8
_EXACT_BONUS = 8
_LONG_BONUS = 5     # length > 5
_MEDIUM_BONUS = 3   # length > 3


def word_points(word: str) -> int:
    """
    Points earned by a single accepted word.

    Rules
    -----
    - 1 base point for every word.
    - +8 if the word has exactly 8 letters,
      else +5 if it has more than 5 letters,
      else +3 if it has more than 3 letters.
    - Tiers are alternatives: an 8-letter word scores 1 + 8 = 9, never 1 + 8 + 5.
    """
    n = len(word)
    points = 1
    if n == _EXACT_BONUS_LENGTH:
        points += _EXACT_BONUS
    elif n > 5:
        points += _LONG_BONUS
    elif n > 3:
        points += _MEDIUM_BONUS
    return points


def compute_score(accepted_words: Iterable[str]) -> int:
    """
    Total score for a sequence of accepted words.

    Always recomputed from scratch over the whole sequence, so the score can
    never drift from the list of found words. Order does not matter.
    """
    return sum(word_points(w) for w in accepted_words)


__all__ = ["word_points", "compute_score"]
