from __future__ import annotations

from typing import Optional

from .dictionary import DEFAULT_LOCALE, DictionaryOracle
from .exceptions import FatalSetupError, SessionNotStartedError
from .scoring import compute_score, word_points
from .state import Acceptance, GuessOutcome, Rejection, RejectionReason, RoundState, SessionStatus
from .validation import is_original, is_possible, is_real, normalize_guess
from .wordlist import RootWordSource
from ..utils.logger import get_logger

logger = get_logger(__name__)


def new_round(source: RootWordSource) -> RoundState:
    """
    Start a fresh round using the provided root word source.

    Parameters
    ----------
    source : RootWordSource
        Supplies the pool and picks from it. The engine does not care whether
        the pool comes from a file, memory or an LLM.

    Returns
    -------
    RoundState
        A new state with no found words and a score of 0.

    Raises
    ------
    FatalSetupError
        If the source cannot supply a pool at all, or picks an empty word.
    """
    pool = source.list_candidate_roots()
    root = (source.pick_random(pool) or "").strip().lower()
    if not root:
        raise FatalSetupError("root word source returned an empty word")
    logger.info("New round with root word %r (pool size %s)", root, len(pool))
    return RoundState(root_word=root)


def _reject(reason: RejectionReason, word: str, state: RoundState) -> Rejection:
    logger.debug("Rejected %r: %s", word, reason.value)
    return Rejection(
        reason=reason,
        word=word,
        title=reason.title,
        message=reason.message(state.root_word),
    )


def submit_guess(
    state: RoundState,
    raw: str,
    oracle: DictionaryOracle,
    locale: str = DEFAULT_LOCALE,
) -> GuessOutcome:
    """
    Validate a raw guess against `state` and return the outcome.

    Behavior
    --------
    - Normalizes the input (trim + lowercase).
    - Checks, stopping at the first failure:
        empty -> originality -> feasibility -> dictionary.
      The oracle is only consulted once the cheap local checks pass.
    - On success, returns an `Acceptance` whose state has the word prepended
      and the score recomputed from the whole word list.
    - On failure, returns a `Rejection`; `state` itself is never modified.
    """
    word = normalize_guess(raw)

    if not word:
        return _reject(RejectionReason.EMPTY_INPUT, word, state)
    if not is_original(word, state.used_words):
        return _reject(RejectionReason.ALREADY_USED, word, state)
    if not is_possible(word, state.root_word):
        return _reject(RejectionReason.NOT_CONSTRUCTIBLE_FROM_ROOT, word, state)
    if not is_real(word, oracle, locale):
        return _reject(RejectionReason.NOT_IN_DICTIONARY, word, state)

    used = (word,) + state.used_words
    new_state = RoundState(root_word=state.root_word, used_words=used, score=compute_score(used))
    logger.debug("Accepted %r; score %s -> %s", word, state.score, new_state.score)
    return Acceptance(word=word, points=word_points(word), state=new_state)


class GameSession:
    """
    Owns the single `RoundState` of one player's session.

    Callers hold a reference to the session and go through `start`,
    `submit_guess`, `restart` and `current_state`; the round state itself is
    immutable, so snapshots handed out can never be mutated behind the
    session's back. Sessions share nothing with each other.
    """

    def __init__(self, source: RootWordSource, oracle: DictionaryOracle, locale: str = DEFAULT_LOCALE) -> None:
        self.source = source
        self.oracle = oracle
        self.locale = locale
        self._state: Optional[RoundState] = None

    @property
    def status(self) -> SessionStatus:
        return SessionStatus.NOT_STARTED if self._state is None else SessionStatus.IN_ROUND

    @property
    def found_count(self) -> int:
        return self.current_state().found_count

    def start(self) -> RoundState:
        """Begin a round. Raises `FatalSetupError` if no root word can be chosen."""
        self._state = new_round(self.source)
        return self._state

    def restart(self) -> RoundState:
        """
        Replace the current round wholesale with a fresh one.

        The new root word may equal the previous one when the pool allows it.
        """
        return self.start()

    def current_state(self) -> RoundState:
        if self._state is None:
            raise SessionNotStartedError("call start() before reading the round state")
        return self._state

    def submit_guess(self, raw: str) -> GuessOutcome:
        """Process one guess; only an `Acceptance` changes the session's state."""
        outcome = submit_guess(self.current_state(), raw, self.oracle, self.locale)
        if isinstance(outcome, Acceptance):
            self._state = outcome.state
        return outcome


__all__ = ["new_round", "submit_guess", "GameSession"]
