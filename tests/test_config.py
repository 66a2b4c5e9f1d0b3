"""Tests for the typed ExpanderConfig dataclass."""

import pytest

from msg_expander.config import DEFAULT_STATUS_TEXT, ExpanderConfig
from msg_expander.domain.errors import ConfigError


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("DISCORD_TOKEN", "EXPANDER_MAX_CONCURRENCY", "EXPANDER_STATUS"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestExpanderConfig:
    def test_defaults(self):
        c = ExpanderConfig()
        assert c.token == ""
        assert c.max_concurrency == 0
        assert c.status_text == DEFAULT_STATUS_TEXT

    def test_from_env(self, clean_env):
        clean_env.setenv("DISCORD_TOKEN", "tok")
        c = ExpanderConfig.from_env()
        assert c.token == "tok"
        assert c.max_concurrency == 0
        assert c.status_text == "message links"

    def test_from_env_custom(self, clean_env):
        clean_env.setenv("DISCORD_TOKEN", " tok ")
        clean_env.setenv("EXPANDER_MAX_CONCURRENCY", "8")
        clean_env.setenv("EXPANDER_STATUS", "links")
        c = ExpanderConfig.from_env()
        assert c.token == "tok"
        assert c.max_concurrency == 8
        assert c.status_text == "links"

    def test_missing_token(self, clean_env):
        with pytest.raises(ConfigError, match="DISCORD_TOKEN"):
            ExpanderConfig.from_env()

    def test_blank_token(self, clean_env):
        clean_env.setenv("DISCORD_TOKEN", "   ")
        with pytest.raises(ConfigError):
            ExpanderConfig.from_env()

    def test_non_integer_concurrency(self, clean_env):
        clean_env.setenv("DISCORD_TOKEN", "tok")
        clean_env.setenv("EXPANDER_MAX_CONCURRENCY", "lots")
        with pytest.raises(ConfigError, match="integer"):
            ExpanderConfig.from_env()

    def test_negative_concurrency(self, clean_env):
        clean_env.setenv("DISCORD_TOKEN", "tok")
        clean_env.setenv("EXPANDER_MAX_CONCURRENCY", "-1")
        with pytest.raises(ConfigError):
            ExpanderConfig.from_env()
