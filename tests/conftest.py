import random
from types import SimpleNamespace

import pytest

from wordscramble.core.dictionary import WordListOracle
from wordscramble.core.wordlist import StaticRootWordSource

WORDS = [
    "stone", "tones", "notes", "onset", "tone", "note", "one", "ton", "net", "ten", "set",
    "silkworm", "silk", "worm", "milk", "slim", "owl", "low", "row", "a", "i",
]


class RecordingOracle:
    """Wraps an oracle and records every lookup."""

    def __init__(self, inner):
        self.inner = inner
        self.calls = []

    def check_word(self, word, locale="en"):
        self.calls.append((word, locale))
        return self.inner.check_word(word, locale)


class FakeOpenAI:
    """Stand-in for `openai.OpenAI`: replies are popped in order; exceptions are raised."""

    def __init__(self, replies):
        self.replies = list(replies)
        self.requests = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def __call__(self, api_key=None):
        return self

    def _create(self, **kwargs):
        self.requests.append(kwargs)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        message = SimpleNamespace(content=reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def oracle():
    return RecordingOracle(WordListOracle(WORDS))


@pytest.fixture
def stone_source():
    return StaticRootWordSource(["stone"], rng=random.Random(0))


@pytest.fixture
def online_env(monkeypatch):
    monkeypatch.setenv("OFFLINE_MODE", "false")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("MODEL_NAME", "test-model")


@pytest.fixture
def offline_env(monkeypatch):
    monkeypatch.setenv("OFFLINE_MODE", "true")
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
