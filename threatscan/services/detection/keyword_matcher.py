"""Exact word-level keyword matching against threat dictionaries."""

from __future__ import annotations

from typing import List

from threatscan.domain.threat import KeywordMatch
from threatscan.services.detection.dictionary_provider import DictionaryProvider
from threatscan.services.detection.tokenizer import context_window, tokenize
from threatscan.utils.logging import get_logger

logger = get_logger(__name__)


class KeywordMatcher:
    """Scans tokenized text for dictionary words.

    Matching is exact on normalized tokens: no substrings, stemming or
    fuzzy comparison. Output order is token order, then category order.
    """

    def __init__(self, provider: DictionaryProvider, context_size: int = 5):
        """Initialize keyword matcher.

        Args:
            provider: Validated dictionary provider
            context_size: Tokens of context kept on each side of a match
        """
        self.provider = provider
        self.context_size = context_size

    def match(self, text: str, language: str) -> List[KeywordMatch]:
        """Match keywords in text against the language's dictionary.

        Unknown languages use the provider's fallback dictionary. Returned
        matches have an empty ``segment_id`` and zero ``start_time``; the
        caller fills them in.

        Args:
            text: Raw transcript or translation text
            language: Language tag recorded on each match

        Returns:
            List of KeywordMatch objects
        """
        tokens = tokenize(text)
        matches: List[KeywordMatch] = []

        for index, token in enumerate(tokens):
            for category, word in self.provider.lookup(token, language):
                matches.append(
                    KeywordMatch(
                        segment_id="",
                        word=word,
                        category=category,
                        language=language,
                        start_time=0.0,
                        context=context_window(tokens, index, self.context_size),
                    )
                )

        if matches:
            logger.debug(
                f"Matched {len(matches)} keywords in {len(tokens)} tokens ({language})"
            )
        return matches
