"""
Tests for environment-driven configuration.
"""

import pytest
from pydantic import ValidationError

from cedict_reader.config import ReaderConfig

ENV_VARS = ["CEDICT_SOURCE", "CEDICT_TIMEOUT", "CEDICT_COMMENT_MARKER", "CEDICT_LOG_LEVEL"]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove CEDICT_* variables from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestReaderConfig:
    """Test ReaderConfig."""

    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test defaults when nothing is set."""
        config = ReaderConfig.from_env()
        assert config.source == "cedict_ts.u8"
        assert config.timeout == 30.0
        assert config.comment_marker == "#"
        assert config.log_level == "INFO"

    def test_from_env(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test reading every variable."""
        clean_env.setenv("CEDICT_SOURCE", "https://example.org/cedict_ts.u8")
        clean_env.setenv("CEDICT_TIMEOUT", "12.5")
        clean_env.setenv("CEDICT_COMMENT_MARKER", "%")
        clean_env.setenv("CEDICT_LOG_LEVEL", "debug")

        config = ReaderConfig.from_env()
        assert config.source == "https://example.org/cedict_ts.u8"
        assert config.timeout == 12.5
        assert config.comment_marker == "%"
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("name,value", [
        ("CEDICT_TIMEOUT", "-1"),
        ("CEDICT_TIMEOUT", "soon"),
        ("CEDICT_COMMENT_MARKER", "##"),
        ("CEDICT_LOG_LEVEL", "LOUD"),
    ])
    def test_invalid_values(self, clean_env: pytest.MonkeyPatch, name: str, value: str) -> None:
        """Test that invalid values are rejected at startup."""
        clean_env.setenv(name, value)
        with pytest.raises(ValidationError):
            ReaderConfig.from_env()
