from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple, Union

from .scoring import compute_score
from .validation import is_possible


class SessionStatus(str, Enum):
    """Lifecycle of a `GameSession`. There is no terminal state."""

    NOT_STARTED = "not_started"
    IN_ROUND = "in_round"


class RejectionReason(str, Enum):
    """Why a guess was refused; one value per validation step."""

    EMPTY_INPUT = "empty_input"
    ALREADY_USED = "already_used"
    NOT_CONSTRUCTIBLE_FROM_ROOT = "not_constructible_from_root"
    NOT_IN_DICTIONARY = "not_in_dictionary"

    @property
    def title(self) -> str:
        return _REJECTION_TITLES[self]

    def message(self, root_word: str) -> str:
        """User-facing explanation; only the feasibility message names the root."""
        return _REJECTION_MESSAGES[self].format(root=root_word)


_REJECTION_TITLES = {
    RejectionReason.EMPTY_INPUT: "Empty Guess",
    RejectionReason.ALREADY_USED: "Already Used!",
    RejectionReason.NOT_CONSTRUCTIBLE_FROM_ROOT: "Not Possible",
    RejectionReason.NOT_IN_DICTIONARY: "Not a Word",
}

_REJECTION_MESSAGES = {
    RejectionReason.EMPTY_INPUT: "Type a word before submitting",
    RejectionReason.ALREADY_USED: "Be more original",
    RejectionReason.NOT_CONSTRUCTIBLE_FROM_ROOT: "Not possible to make that word from {root}",
    RejectionReason.NOT_IN_DICTIONARY: "That's not an actual word ...",
}


@dataclass(frozen=True)
class RoundState:
    """
    Immutable container for one round of the game.

    Notes
    -----
    - Frozen so the engine can "return a new state" after each accepted guess;
      a rejected guess hands back the very same object.
    - `used_words` is most-recent-first. Order is a display convention only.
    - `score` is derived data. It must always equal `compute_score(used_words)`;
      `core.engine` is the only place that builds new states.
    """

    root_word: str
    used_words: Tuple[str, ...] = field(default_factory=tuple)
    score: int = 0

    def __post_init__(self) -> None:
        """
        Normalize and validate fields.

        Normalization
        -------------
        - `root_word` is stripped and lowercased.
        - `used_words` is coerced to a tuple.

        Validation
        ----------
        - `root_word` must be non-empty.
        - every used word must be unique and spellable from `root_word`.
        - `score` must equal `compute_score(used_words)`.
        """
        rw = (self.root_word or "").strip().lower()
        if not rw:
            raise ValueError("`root_word` must be a non-empty string.")
        object.__setattr__(self, "root_word", rw)

        words = tuple(self.used_words or ())
        object.__setattr__(self, "used_words", words)

        if len(set(words)) != len(words):
            raise ValueError("`used_words` must not contain duplicates.")
        for w in words:
            if not is_possible(w, rw):
                raise ValueError(f"`{w}` cannot be made from `{rw}`.")
        if self.score != compute_score(words):
            raise ValueError("`score` must equal compute_score(used_words).")

    @property
    def found_count(self) -> int:
        return len(self.used_words)

    def word_lengths(self) -> Tuple[Tuple[str, int], ...]:
        """(word, length) pairs in display order, for the length badge next to each word."""
        return tuple((w, len(w)) for w in self.used_words)


@dataclass(frozen=True)
class Acceptance:
    """Result of a guess that passed every check."""
    word: str            # normalized accepted word
    points: int          # points this word contributed
    state: RoundState    # the new round state (word prepended, score recomputed)

    accepted = True


@dataclass(frozen=True)
class Rejection:
    """Result of a guess that failed a check; the round state is unchanged."""
    reason: RejectionReason
    word: str            # normalized candidate ("" for empty input)
    title: str           # short alert title
    message: str         # one-sentence explanation

    accepted = False


GuessOutcome = Union[Acceptance, Rejection]


__all__ = [
    "SessionStatus",
    "RejectionReason",
    "RoundState",
    "Acceptance",
    "Rejection",
    "GuessOutcome",
]
