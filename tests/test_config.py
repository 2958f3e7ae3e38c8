import pydantic
import pytest

from dfa_validators.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("DFA_VALIDATORS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DFA_VALIDATORS_LOG_JSON", raising=False)
    settings = Settings()
    assert settings.log_level == "WARNING"
    assert settings.log_json is False

def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DFA_VALIDATORS_LOG_LEVEL", "debug")
    monkeypatch.setenv("DFA_VALIDATORS_LOG_JSON", "true")
    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.log_json is True

def test_unknown_level(monkeypatch):
    monkeypatch.setenv("DFA_VALIDATORS_LOG_LEVEL", "chatty")
    with pytest.raises(pydantic.ValidationError):
        Settings()

def test_settings_are_cached(monkeypatch):
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()
