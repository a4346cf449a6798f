"""Centralized configuration management for threatscan.

All environment variables and configuration settings are managed here.
Category weights and severity thresholds are deliberately absent: they are
fixed constants in :mod:`threatscan.domain.threat`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from threatscan.domain.errors import ConfigurationError

# Load environment variables
load_dotenv()

STORAGE_BACKENDS = ("memory", "weaviate")
TRANSLATION_ENGINES = ("phrase", "openai", "openai+phrase")


@dataclass
class WeaviateConfig:
    """Weaviate storage configuration."""

    url: str
    api_key: str
    segment_collection: str = "TranscriptSegment"
    translation_collection: str = "Translation"
    analysis_collection: str = "ThreatAnalysis"

    @classmethod
    def from_env(cls) -> WeaviateConfig:
        """Load configuration from environment variables."""
        url = os.getenv("WEAVIATE_URL")
        api_key = os.getenv("WEAVIATE_API_KEY")

        if not url or not api_key:
            raise ConfigurationError(
                "Missing Weaviate credentials. Set WEAVIATE_URL and WEAVIATE_API_KEY"
            )

        return cls(url=url, api_key=api_key)


@dataclass
class OpenAIConfig:
    """OpenAI/LLM API configuration for the translation engine."""

    api_key: str
    model: str = "gpt-4o-mini"
    base_url: Optional[str] = None

    @classmethod
    def from_env(cls) -> OpenAIConfig:
        """Load configuration from environment variables."""
        # Support both custom LLM binding and standard OpenAI
        api_key = os.getenv("LLM_BINDING_API_KEY") or os.getenv("OPENAI_API_KEY")

        if not api_key:
            raise ConfigurationError(
                "Missing OpenAI/LLM credentials. Set OPENAI_API_KEY or LLM_BINDING_API_KEY"
            )

        model = os.getenv("LLM_MODEL", "gpt-4o-mini")
        base_url = os.getenv("LLM_BINDING_HOST")

        return cls(api_key=api_key, model=model, base_url=base_url)


@dataclass
class AnalysisConfig:
    """Tunables for matching and explanation output."""

    base_language: str = "english"
    context_window: int = 5  # Tokens kept on each side of a match
    max_context_examples: int = 3
    max_words_per_category: int = 5
    dictionary_path: Optional[Path] = None

    def __post_init__(self):
        """Normalize and validate values."""
        self.base_language = self.base_language.strip().lower()
        if self.dictionary_path is not None:
            self.dictionary_path = Path(self.dictionary_path)
        if self.context_window < 0:
            raise ConfigurationError(
                f"context_window must be >= 0, got {self.context_window}"
            )

    @classmethod
    def from_env(cls) -> AnalysisConfig:
        """Load configuration from environment variables."""
        dictionary_path = os.getenv("THREAT_DICTIONARY_PATH")
        try:
            return cls(
                base_language=os.getenv("THREAT_BASE_LANGUAGE", "english"),
                context_window=int(os.getenv("THREAT_CONTEXT_WINDOW", "5")),
                dictionary_path=Path(dictionary_path) if dictionary_path else None,
            )
        except ConfigurationError:
            raise
        except ValueError as e:
            raise ConfigurationError(f"Invalid analysis setting: {e}") from e


@dataclass
class AppConfig:
    """Main application configuration combining all sub-configs."""

    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    storage_backend: str = "memory"
    translation_engine: str = "phrase"
    weaviate: Optional[WeaviateConfig] = None
    openai: Optional[OpenAIConfig] = None
    log_file: Optional[Path] = None

    def __post_init__(self):
        if self.storage_backend not in STORAGE_BACKENDS:
            raise ConfigurationError(
                f"Unknown storage backend: {self.storage_backend} "
                f"(expected one of {', '.join(STORAGE_BACKENDS)})"
            )
        if self.translation_engine not in TRANSLATION_ENGINES:
            raise ConfigurationError(
                f"Unknown translation engine: {self.translation_engine} "
                f"(expected one of {', '.join(TRANSLATION_ENGINES)})"
            )

    @classmethod
    def from_env(cls) -> AppConfig:
        """Load complete configuration from environment variables.

        Credentials are only required for the backends actually selected.
        """
        storage_backend = os.getenv("STORAGE_BACKEND", "memory").lower()
        translation_engine = os.getenv("TRANSLATION_ENGINE", "phrase").lower()
        log_file = os.getenv("LOG_FILE")

        return cls(
            analysis=AnalysisConfig.from_env(),
            storage_backend=storage_backend,
            translation_engine=translation_engine,
            weaviate=WeaviateConfig.from_env() if storage_backend == "weaviate" else None,
            openai=(
                OpenAIConfig.from_env() if translation_engine.startswith("openai") else None
            ),
            log_file=Path(log_file) if log_file else None,
        )

    def with_overrides(self, analysis_params: Optional[dict] = None) -> AppConfig:
        """Create a new config with analysis parameter overrides."""
        new_analysis = AnalysisConfig(
            **{**self.analysis.__dict__, **(analysis_params or {})}
        )
        return replace(self, analysis=new_analysis)
