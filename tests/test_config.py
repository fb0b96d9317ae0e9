"""Tests for receipt parsing config loading."""

import os
import tempfile

import pytest

from pantry.receipts.config import ExtractionConfig, ReceiptsConfig, load_config


@pytest.fixture(autouse=True)
def _no_env_keys(monkeypatch):
    for var in ("OPENAI_API_KEY", "ANTHROPIC_API_KEY", "GEMINI_API_KEY"):
        monkeypatch.delenv(var, raising=False)


def _load_toml(content: bytes) -> ReceiptsConfig:
    with tempfile.NamedTemporaryFile(suffix=".toml", delete=False) as f:
        f.write(content)
        f.flush()
        config = load_config(f.name)
    os.unlink(f.name)
    return config


def test_load_config_defaults():
    """Loading with no path returns all defaults."""
    config = load_config()
    assert isinstance(config, ReceiptsConfig)
    assert config.extraction.backend == "openai"
    assert config.extraction.target_language == "English"
    assert config.extraction.timeout == 30.0
    assert config.extraction.openai.model == "gpt-4o-mini"
    assert config.extraction.claude.model == "claude-sonnet-4-5-20250929"
    assert config.extraction.gemini.model == "gemini-2.0-flash"
    assert config.extraction.has_credential is False
    assert config.logging.level == "WARNING"


def test_load_config_nonexistent_file():
    """Loading a nonexistent file returns defaults."""
    config = load_config("/nonexistent/path.toml")
    assert config.extraction.backend == "openai"


def test_load_config_from_toml():
    """Loading a valid TOML file populates config."""
    config = _load_toml(b"""\
[extraction]
backend = "gemini"
target_language = "Spanish"
timeout = 10

[extraction.gemini]
api_key = "test-key-123"
model = "gemini-pro"

[logging]
level = "debug"
""")
    assert config.extraction.backend == "gemini"
    assert config.extraction.target_language == "Spanish"
    assert config.extraction.timeout == 10.0
    assert config.extraction.gemini.api_key == "test-key-123"
    assert config.extraction.api_key == "test-key-123"
    assert config.extraction.model == "gemini-pro"
    assert config.extraction.has_credential is True
    assert config.logging.level == "DEBUG"


def test_load_config_env_override(monkeypatch):
    """Environment variables override empty API keys."""
    monkeypatch.setenv("OPENAI_API_KEY", "env-openai-key")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "env-anthropic-key")
    monkeypatch.setenv("GEMINI_API_KEY", "env-gemini-key")

    config = load_config()
    assert config.extraction.openai.api_key == "env-openai-key"
    assert config.extraction.claude.api_key == "env-anthropic-key"
    assert config.extraction.gemini.api_key == "env-gemini-key"


def test_load_config_file_key_takes_precedence(monkeypatch):
    """Config file API key takes precedence over env var."""
    monkeypatch.setenv("ANTHROPIC_API_KEY", "env-key")
    config = _load_toml(b"""\
[extraction.claude]
api_key = "file-key"
""")
    assert config.extraction.claude.api_key == "file-key"


def test_load_config_partial_toml():
    """Partial TOML uses defaults for missing sections."""
    config = _load_toml(b"""\
[extraction.openai]
model = "gpt-4o"
""")
    assert config.extraction.openai.model == "gpt-4o"
    assert config.extraction.backend == "openai"
    assert config.logging.level == "WARNING"


def test_selected_backend_properties():
    extraction = ExtractionConfig(backend="claude")
    extraction.claude.api_key = "k"
    assert extraction.api_key == "k"
    assert extraction.model == "claude-sonnet-4-5-20250929"
    assert extraction.has_credential is True


def test_unknown_backend_has_no_credential():
    extraction = ExtractionConfig(backend="unknown")
    extraction.openai.api_key = "k"
    assert extraction.api_key == ""
    assert extraction.model == ""
    assert extraction.has_credential is False
