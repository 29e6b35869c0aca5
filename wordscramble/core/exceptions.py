"""Exception hierarchy for the word scramble engine.

Per-guess validation failures are NOT exceptions; they are returned as
`Rejection` values by the engine. Only setup and misuse errors are raised.
"""


class WordScrambleError(Exception):
    """Base exception for the word scramble engine."""


class FatalSetupError(WordScrambleError):
    """Raised when the root word pool cannot be loaded at round start."""


class DictionaryLoadError(WordScrambleError):
    """Raised when the local dictionary file cannot be read."""


class SessionNotStartedError(WordScrambleError):
    """Raised when a round operation is used before `start()`."""
