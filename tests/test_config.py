from pathlib import Path

from wordscramble.config import Settings, load_settings
from wordscramble.core.dictionary import WordListOracle
from wordscramble.core.engine import GameSession
from wordscramble.core.state import Acceptance, SessionStatus
from wordscramble.core.wordlist import DICTIONARY_FILE, FileRootWordSource, START_WORDS_FILE
from wordscramble.game import build_session
from wordscramble.services import llm_oracle, llm_picker
from wordscramble.services.llm_oracle import LLMDictionaryOracle
from wordscramble.services.llm_picker import LLMRootPicker

from conftest import FakeOpenAI


def test_load_settings_defaults(monkeypatch):
    for name in ["OFFLINE_MODE", "OPENAI_API_KEY", "MODEL_NAME", "WORDSCRAMBLE_LOCALE",
                 "START_WORDS_PATH", "DICTIONARY_PATH", "LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)
    settings = load_settings(dotenv=False)
    assert settings == Settings()
    assert settings.start_words_path == START_WORDS_FILE
    assert settings.dictionary_path == DICTIONARY_FILE
    assert settings.llm_enabled is False


def test_load_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("OFFLINE_MODE", "False")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("MODEL_NAME", "test-model")
    monkeypatch.setenv("WORDSCRAMBLE_LOCALE", "fr")
    monkeypatch.setenv("START_WORDS_PATH", str(tmp_path / "start.txt"))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    settings = load_settings(dotenv=False)
    assert settings.offline_mode is False
    assert settings.llm_enabled is True
    assert settings.model_name == "test-model"
    assert settings.locale == "fr"
    assert settings.start_words_path == Path(tmp_path / "start.txt")
    assert settings.log_level == "DEBUG"


def _write_lists(tmp_path):
    start = tmp_path / "start.txt"
    start.write_text("stone\n", encoding="utf-8")
    dictionary = tmp_path / "dictionary.txt"
    dictionary.write_text("stone\ntones\nnotes\n", encoding="utf-8")
    return start, dictionary


def test_build_session_offline(tmp_path, offline_env):
    start, dictionary = _write_lists(tmp_path)
    session = build_session(Settings(start_words_path=start, dictionary_path=dictionary))
    assert isinstance(session, GameSession)
    assert isinstance(session.source, FileRootWordSource)
    assert isinstance(session.oracle, WordListOracle)
    assert session.status is SessionStatus.NOT_STARTED

    assert session.start().root_word == "stone"
    assert isinstance(session.submit_guess("Notes"), Acceptance)


def test_build_session_with_llm_uses_settings_not_env(tmp_path, offline_env, monkeypatch):
    start, dictionary = _write_lists(tmp_path)
    fake_picker = FakeOpenAI(["notebook"])
    fake_oracle = FakeOpenAI(["yes"])
    monkeypatch.setattr(llm_picker, "OpenAI", fake_picker)
    monkeypatch.setattr(llm_oracle, "OpenAI", fake_oracle)

    settings = Settings(
        offline_mode=False,
        openai_api_key="sk-test",
        model_name="test-model",
        start_words_path=start,
        dictionary_path=dictionary,
    )
    session = build_session(settings)
    assert isinstance(session.source, LLMRootPicker)
    assert isinstance(session.oracle, LLMDictionaryOracle)

    assert session.start().root_word == "notebook"
    outcome = session.submit_guess("book")  # not in the local word list
    assert isinstance(outcome, Acceptance)
    assert len(fake_picker.requests) == 1
    assert len(fake_oracle.requests) == 1
    assert fake_oracle.requests[0]["model"] == "test-model"


def test_build_session_offline_settings_ignore_online_env(tmp_path, online_env, monkeypatch):
    start, dictionary = _write_lists(tmp_path)
    fake = FakeOpenAI([])
    monkeypatch.setattr(llm_picker, "OpenAI", fake)
    monkeypatch.setattr(llm_oracle, "OpenAI", fake)

    session = build_session(Settings(offline_mode=True, start_words_path=start, dictionary_path=dictionary))
    assert isinstance(session.oracle, WordListOracle)
    assert session.start().root_word == "stone"
    assert isinstance(session.submit_guess("tones"), Acceptance)
    assert fake.requests == []
