"""Per-language threat dictionaries with validated fallback lookup."""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from threatscan.data.threat_dictionaries import BASE_LANGUAGE, THREAT_DICTIONARIES
from threatscan.domain.errors import ConfigurationError
from threatscan.domain.threat import ThreatCategory
from threatscan.services.detection.tokenizer import normalize
from threatscan.utils.logging import get_logger

logger = get_logger(__name__)

# Immutable language dictionary: category -> ordered trigger words
CategoryWords = Mapping[ThreatCategory, Tuple[str, ...]]


class DictionaryProvider:
    """Read-only keyword dictionaries keyed by spoken language.

    All validation happens in the constructor, so a provider that exists is
    guaranteed to expose every category for every language and to have a
    fallback dictionary. Instances are safe to share between threads.
    """

    def __init__(
        self,
        dictionaries: Optional[Mapping[str, Mapping[str, List[str]]]] = None,
        fallback_language: str = BASE_LANGUAGE,
    ):
        """Validate and freeze the dictionary set.

        Args:
            dictionaries: language -> category name -> words; defaults to the
                built-in set
            fallback_language: Language used when a lookup misses

        Raises:
            ConfigurationError: If a category is missing or unknown, or the
                fallback language has no dictionary
        """
        raw = THREAT_DICTIONARIES if dictionaries is None else dictionaries
        self.fallback_language = fallback_language.strip().lower()
        self._dictionaries: Dict[str, CategoryWords] = {
            language.strip().lower(): self._freeze(language, categories)
            for language, categories in raw.items()
        }

        if self.fallback_language not in self._dictionaries:
            raise ConfigurationError(
                f"No dictionary for fallback language '{self.fallback_language}'"
            )

        self._index: Dict[str, Dict[str, List[Tuple[ThreatCategory, str]]]] = {
            language: self._build_index(words)
            for language, words in self._dictionaries.items()
        }

        logger.debug(
            f"Loaded threat dictionaries for {len(self._dictionaries)} languages "
            f"(fallback: {self.fallback_language})"
        )

    @classmethod
    def from_file(
        cls, path: Path, fallback_language: str = BASE_LANGUAGE
    ) -> DictionaryProvider:
        """Load dictionaries from a JSON file with the built-in structure."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot load dictionaries from {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Dictionary file {path} must contain an object")

        logger.info(f"Loading threat dictionaries from {path}")
        return cls(data, fallback_language=fallback_language)

    @staticmethod
    def _freeze(language: str, categories: Mapping[str, List[str]]) -> CategoryWords:
        """Validate one language's categories and return an immutable copy."""
        if not isinstance(categories, Mapping):
            raise ConfigurationError(f"Dictionary for '{language}' must be a mapping")

        known = {category.value for category in ThreatCategory}
        unknown = sorted(set(categories) - known)
        if unknown:
            raise ConfigurationError(
                f"Dictionary for '{language}' has unknown categories: {', '.join(unknown)}"
            )

        missing = [c.value for c in ThreatCategory if c.value not in categories]
        if missing:
            raise ConfigurationError(
                f"Dictionary for '{language}' is missing categories: {', '.join(missing)}"
            )

        for category in ThreatCategory:
            if not isinstance(categories[category.value], (list, tuple)):
                raise ConfigurationError(
                    f"Category '{category.value}' for '{language}' must be a list of words"
                )
            bad = [word for word in categories[category.value] if not isinstance(word, str)]
            if bad:
                raise ConfigurationError(
                    f"Category '{category.value}' for '{language}' has non-string "
                    f"entries: {bad!r}"
                )

        return MappingProxyType(
            {category: tuple(categories[category.value]) for category in ThreatCategory}
        )

    @staticmethod
    def _build_index(
        words: CategoryWords,
    ) -> Dict[str, List[Tuple[ThreatCategory, str]]]:
        """Map normalized word -> (category, canonical spelling), in category order.

        Only the first spelling per category is kept for a normalized form.
        """
        index: Dict[str, List[Tuple[ThreatCategory, str]]] = {}
        for category in ThreatCategory:
            for word in words[category]:
                entries = index.setdefault(normalize(word), [])
                if all(existing != category for existing, _ in entries):
                    entries.append((category, word))
        return index

    def resolve_language(self, language: str) -> str:
        """Return the dictionary language used for ``language``."""
        normalized = (language or "").strip().lower()
        if normalized in self._dictionaries:
            return normalized
        return self.fallback_language

    def get(self, language: str) -> CategoryWords:
        """Return the dictionary for a language, or the fallback one."""
        return self._dictionaries[self.resolve_language(language)]

    def lookup(self, token: str, language: str) -> List[Tuple[ThreatCategory, str]]:
        """Return every (category, canonical word) a token matches exactly."""
        index = self._index[self.resolve_language(language)]
        return list(index.get(normalize(token), ()))

    def is_threatening_word(self, word: str, language: str) -> bool:
        """Check whether a word appears in any category for a language."""
        return bool(self.lookup(word, language))

    @staticmethod
    def categories() -> List[ThreatCategory]:
        """All categories in canonical order."""
        return list(ThreatCategory)

    def supported_languages(self) -> List[str]:
        """Languages with a dedicated dictionary, sorted."""
        return sorted(self._dictionaries)
