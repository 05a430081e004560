"""Tests for settings loading."""

import pytest

from cheer_api.config import Settings, get_settings
from cheer_api.exceptions import ConfigurationError
from cheer_api.models import JokeType


def test_defaults():
    settings = Settings()
    assert settings.default_verse_ref == "Psalm 34:18"
    assert settings.default_song_query == "gospel worship"
    assert 1.2 <= settings.advice_timeout <= 4
    assert settings.quote_list_timeout >= settings.advice_timeout


def test_env_override(monkeypatch):
    monkeypatch.setenv("CHEER_SONG_TIMEOUT", "1.5")
    monkeypatch.setenv("CHEER_DEFAULT_SONG_QUERY", "adele")
    settings = Settings()
    assert settings.song_timeout == 1.5
    assert settings.default_song_query == "adele"


def test_invalid_timeout_is_configuration_error(monkeypatch):
    monkeypatch.setenv("CHEER_VERSE_TIMEOUT", "0")
    get_settings.cache_clear()
    try:
        with pytest.raises(ConfigurationError):
            get_settings()
    finally:
        get_settings.cache_clear()


@pytest.mark.parametrize(
    "raw, expected",
    [("dad", JokeType.DAD), ("Riddle", JokeType.RIDDLE), (" hr ", JokeType.HR), ("", JokeType.DAD), (None, JokeType.DAD), ("xyz", JokeType.DAD)],
)
def test_joke_type_parse(raw, expected):
    assert JokeType.parse(raw) == expected
