"""Tests for environment-driven configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from threatscan.config import AnalysisConfig, AppConfig, OpenAIConfig
from threatscan.domain.errors import ConfigurationError

ENV_VARS = (
    "STORAGE_BACKEND",
    "TRANSLATION_ENGINE",
    "LOG_FILE",
    "THREAT_BASE_LANGUAGE",
    "THREAT_CONTEXT_WINDOW",
    "THREAT_DICTIONARY_PATH",
    "WEAVIATE_URL",
    "WEAVIATE_API_KEY",
    "OPENAI_API_KEY",
    "LLM_BINDING_API_KEY",
    "LLM_BINDING_HOST",
    "LLM_MODEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = AppConfig.from_env()

    assert config.storage_backend == "memory"
    assert config.translation_engine == "phrase"
    assert config.weaviate is None
    assert config.openai is None
    assert config.log_file is None
    assert config.analysis == AnalysisConfig()


def test_analysis_settings_from_env(monkeypatch):
    monkeypatch.setenv("THREAT_BASE_LANGUAGE", " English ")
    monkeypatch.setenv("THREAT_CONTEXT_WINDOW", "3")
    monkeypatch.setenv("THREAT_DICTIONARY_PATH", "/tmp/dict.json")

    config = AnalysisConfig.from_env()

    assert config.base_language == "english"
    assert config.context_window == 3
    assert config.dictionary_path == Path("/tmp/dict.json")


@pytest.mark.parametrize("value", ["abc", "-1"])
def test_invalid_context_window(monkeypatch, value):
    monkeypatch.setenv("THREAT_CONTEXT_WINDOW", value)
    with pytest.raises(ConfigurationError):
        AnalysisConfig.from_env()


def test_weaviate_backend_requires_credentials(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "weaviate")
    with pytest.raises(ConfigurationError, match="WEAVIATE_URL"):
        AppConfig.from_env()


def test_weaviate_backend(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "Weaviate")
    monkeypatch.setenv("WEAVIATE_URL", "https://cluster.example")
    monkeypatch.setenv("WEAVIATE_API_KEY", "secret")

    config = AppConfig.from_env()

    assert config.storage_backend == "weaviate"
    assert config.weaviate.url == "https://cluster.example"
    assert config.weaviate.analysis_collection == "ThreatAnalysis"


def test_openai_engine_requires_key(monkeypatch):
    monkeypatch.setenv("TRANSLATION_ENGINE", "openai+phrase")
    with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
        AppConfig.from_env()


def test_llm_binding_key_takes_precedence(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "openai-key")
    monkeypatch.setenv("LLM_BINDING_API_KEY", "binding-key")
    monkeypatch.setenv("LLM_BINDING_HOST", "http://localhost:8000/v1")

    config = OpenAIConfig.from_env()

    assert config.api_key == "binding-key"
    assert config.base_url == "http://localhost:8000/v1"
    assert config.model == "gpt-4o-mini"


def test_unknown_backend_and_engine(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "postgres")
    with pytest.raises(ConfigurationError, match="Unknown storage backend"):
        AppConfig.from_env()

    with pytest.raises(ConfigurationError, match="Unknown translation engine"):
        AppConfig(translation_engine="babelfish")


def test_with_overrides_keeps_original():
    config = AppConfig()

    updated = config.with_overrides({"context_window": 2, "max_context_examples": 1})

    assert updated.analysis.context_window == 2
    assert updated.analysis.max_context_examples == 1
    assert config.analysis.context_window == 5
