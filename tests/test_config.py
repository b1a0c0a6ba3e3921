import pytest
from pydantic import ValidationError

from config import Settings


def test_settings_defaults(monkeypatch):
    for name in ("WCAL_DEFAULT_MODE", "WCAL_PARSER", "WCAL_SHOW_STEPS", "WCAL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.default_mode == "int"
    assert settings.parser == "top_down"
    assert settings.show_steps is False


def test_settings_read_prefixed_env(monkeypatch):
    monkeypatch.setenv("WCAL_PARSER", "precedence")
    monkeypatch.setenv("WCAL_SHOW_STEPS", "true")

    settings = Settings(_env_file=None)

    assert settings.parser == "precedence"
    assert settings.show_steps is True


def test_settings_reject_unknown_mode(monkeypatch):
    monkeypatch.setenv("WCAL_DEFAULT_MODE", "decimal")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
