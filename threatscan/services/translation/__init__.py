"""Translation collaborator: pluggable engines and the session service."""

from .engines import (
    FallbackTranslationEngine,
    OpenAITranslationEngine,
    PhraseTranslationEngine,
    TranslationEngine,
    TranslationError,
    create_translation_engine,
)
from .translation_service import TranslationService

__all__ = [
    "FallbackTranslationEngine",
    "OpenAITranslationEngine",
    "PhraseTranslationEngine",
    "TranslationEngine",
    "TranslationError",
    "TranslationService",
    "create_translation_engine",
]
