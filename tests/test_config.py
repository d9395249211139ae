"""Tests for configuration and environment loading."""

import os

import pytest

from blueprint.src.config import (
    SAMPLE_ENV_CONTENT,
    LLMConfig,
    create_sample_env_file,
    load_environment,
)
from blueprint.src.errors import ConfigError


def test_llm_config_defaults():
    config = LLMConfig()

    assert config.provider == "openai"
    assert config.model == "gpt-4o"
    assert config.api_key is None
    assert config.base_url is None
    assert config.temperature == 0.7
    assert config.max_tokens == 4000
    assert config.api_key_env_var == "OPENAI_API_KEY"


def test_llm_config_reads_environment(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("OPENAI_MODEL", "gpt-4o-mini")
    monkeypatch.setenv("OPENAI_TEMPERATURE", "0.2")
    monkeypatch.setenv("OPENAI_MAX_TOKENS", "2000")
    monkeypatch.setenv("OPENAI_BASE_URL", "http://localhost:8080/v1")

    config = LLMConfig()

    assert config.api_key == "sk-test"
    assert config.model == "gpt-4o-mini"
    assert config.temperature == 0.2
    assert config.max_tokens == 2000
    assert config.base_url == "http://localhost:8080/v1"


def test_empty_api_key_counts_as_missing(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "")

    assert LLMConfig().api_key is None


def test_provider_override(monkeypatch):
    monkeypatch.setenv("BLUEPRINT_PROVIDER", "Anthropic")

    config = LLMConfig()

    assert config.provider == "anthropic"
    assert config.model == "claude-3-5-sonnet-latest"
    assert config.api_key_env_var == "ANTHROPIC_API_KEY"


def test_unknown_provider_raises(monkeypatch):
    monkeypatch.setenv("BLUEPRINT_PROVIDER", "ollama")

    with pytest.raises(ConfigError, match="not supported"):
        LLMConfig()


def test_invalid_temperature_raises(monkeypatch):
    monkeypatch.setenv("OPENAI_TEMPERATURE", "warm")

    with pytest.raises(ConfigError) as exc_info:
        LLMConfig()

    assert isinstance(exc_info.value.cause, ValueError)


def test_to_dict_masks_api_key():
    data = LLMConfig(api_key="sk-secret").to_dict()

    assert data["api_key"] == "***"
    assert data["model"] == "gpt-4o"


def test_load_environment_reads_env_file(tmp_path):
    (tmp_path / ".env").write_text("OPENAI_API_KEY=from-file\n", encoding="utf-8")

    assert load_environment(tmp_path) is True
    assert os.environ["OPENAI_API_KEY"] == "from-file"


def test_load_environment_does_not_override(tmp_path, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "from-shell")
    (tmp_path / ".env").write_text("OPENAI_API_KEY=from-file\n", encoding="utf-8")

    load_environment(tmp_path)

    assert os.environ["OPENAI_API_KEY"] == "from-shell"


def test_load_environment_without_file(tmp_path):
    assert load_environment(tmp_path) is False


def test_sample_env_leaves_key_commented_out(tmp_path):
    create_sample_env_file(tmp_path)

    assert load_environment(tmp_path) is True
    assert "OPENAI_API_KEY" not in os.environ


def test_create_sample_env_file(tmp_path):
    assert create_sample_env_file(tmp_path) is True

    content = (tmp_path / ".env").read_text(encoding="utf-8")
    assert content == SAMPLE_ENV_CONTENT
    assert "# OPENAI_API_KEY=" in content


def test_create_sample_env_file_keeps_existing(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("OPENAI_API_KEY=mine\n", encoding="utf-8")

    assert create_sample_env_file(tmp_path) is False
    assert env_file.read_text(encoding="utf-8") == "OPENAI_API_KEY=mine\n"
