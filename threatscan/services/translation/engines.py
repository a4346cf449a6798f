"""Translation engines feeding base-language text to the analysis core.

Engines are interchangeable strategies selected at construction time.
``FallbackTranslationEngine`` wraps a primary and a secondary engine and
switches to the secondary when the primary fails.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple

from threatscan.domain.transcript import TranscriptSegment, TranslationRecord
from threatscan.infrastructure.openai_client import OpenAIClient
from threatscan.utils.logging import get_logger

logger = get_logger(__name__)


class TranslationError(Exception):
    """Raised when an engine cannot translate a text."""

    pass


class TranslationEngine(ABC):
    """Translates source-language text into the base language."""

    name = "base"

    def __init__(self, base_language: str = "english"):
        self.base_language = base_language

    @abstractmethod
    def translate(self, text: str, source_language: str) -> str:
        """Translate ``text``; raises TranslationError on failure."""

    def confidence(self, text: str, source_language: str) -> Optional[float]:
        """Engine's confidence in a translation, if it reports one."""
        return None

    def translate_segment(self, segment: TranscriptSegment) -> TranslationRecord:
        """Translate a transcript segment into a TranslationRecord."""
        return TranslationRecord(
            segment_id=segment.segment_id,
            source_language=segment.language,
            source_text=segment.text,
            translated_text=self.translate(segment.text, segment.language),
            confidence=self.confidence(segment.text, segment.language),
            session_id=segment.session_id,
        )


class PhraseTranslationEngine(TranslationEngine):
    """Offline translation by exact phrase lookup, then word-by-word mapping.

    Unknown words are kept as-is. Confidence is fixed per method so results
    are reproducible.
    """

    name = "phrase"

    PHRASES: Dict[str, Dict[str, str]] = {
        "hindi": {
            "यह एक परीक्षण ऑडियो है": "This is a test audio",
            "कृपया ध्यान से सुनें": "Please listen carefully",
            "धन्यवाद": "Thank you",
        },
        "urdu": {
            "یہ ایک ٹیسٹ آڈیو ہے": "This is a test audio",
            "براہ کرم غور سے سنیں": "Please listen carefully",
            "شکریہ": "Thank you",
        },
        "kashmiri": {
            "یہ اکھ ٹیسٹ آڈیو چھُ": "This is a test audio",
            "مہربأنی کٔرتھ غور سٟتؠ بوزِو": "Please listen carefully",
            "شُکریہ": "Thank you",
        },
    }

    WORDS: Dict[str, Dict[str, str]] = {
        "hindi": {
            "यह": "this", "एक": "a", "है": "is", "परीक्षण": "test", "ऑडियो": "audio",
            "बम": "bomb", "बंदूक": "gun", "हमला": "attack", "पुलिस": "police",
            "सेना": "army", "अभी": "now", "तुरंत": "immediately", "आज": "today",
        },
        "urdu": {
            "یہ": "this", "ایک": "a", "ہے": "is", "ٹیسٹ": "test", "آڈیو": "audio",
            "بم": "bomb", "بندوق": "gun", "حملہ": "attack", "پولیس": "police",
            "فوج": "army", "ابھی": "now", "فوری": "immediately", "آج": "today",
        },
        "kashmiri": {
            "یہ": "this", "اکھ": "a", "چھُ": "is", "ٹیسٹ": "test", "آڈیو": "audio",
            "بم": "bomb", "بندوق": "gun", "حملہ": "attack", "پولیس": "police",
            "فوج": "army", "ابھی": "now", "آج": "today",
        },
    }

    EXACT_CONFIDENCE = 0.95
    WORD_CONFIDENCE = 0.7

    def translate(self, text: str, source_language: str) -> str:
        language = source_language.strip().lower()
        if language == self.base_language:
            return text

        phrase = self.PHRASES.get(language, {}).get(text.strip())
        if phrase:
            return phrase

        mapping = self.WORDS.get(language, {})
        return " ".join(mapping.get(word, word) for word in text.split())

    def confidence(self, text: str, source_language: str) -> Optional[float]:
        language = source_language.strip().lower()
        if language == self.base_language:
            return 1.0
        if text.strip() in self.PHRASES.get(language, {}):
            return self.EXACT_CONFIDENCE
        return self.WORD_CONFIDENCE


class OpenAITranslationEngine(TranslationEngine):
    """LLM translation through the OpenAI chat completions API."""

    name = "openai"

    PROMPT = (
        "Translate the following {language} speech transcript into {target}. "
        "Keep every word that may indicate violence, weapons, targets or urgency. "
        "Output ONLY the translation.\n\n{text}"
    )

    # Kashmiri support is best-effort: models handle it through Urdu overlap
    LANGUAGE_HINTS = {
        "kashmiri": "Kashmiri (Perso-Arabic script, close to Urdu)",
    }

    def __init__(
        self,
        client: OpenAIClient,
        base_language: str = "english",
        temperature: float = 0.0,
    ):
        """Initialize the engine.

        Args:
            client: OpenAI client handle (owned by the caller)
            base_language: Target language
            temperature: Sampling temperature
        """
        super().__init__(base_language)
        self.client = client
        self.temperature = temperature

    def translate(self, text: str, source_language: str) -> str:
        language = source_language.strip().lower()
        if language == self.base_language or not text.strip():
            return text

        prompt = self.PROMPT.format(
            language=self.LANGUAGE_HINTS.get(language, language.title()),
            target=self.base_language.title(),
            text=text,
        )

        try:
            response = self.client.connect().chat.completions.create(
                model=self.client.config.model,
                messages=[
                    {"role": "system", "content": "You are a precise translator."},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
            )
        except Exception as e:
            raise TranslationError(f"OpenAI translation failed: {e}") from e

        content = response.choices[0].message.content
        if not content or not content.strip():
            raise TranslationError("LLM returned empty translation")
        return content.strip()


class FallbackTranslationEngine(TranslationEngine):
    """Tries a primary engine and falls back to a secondary on failure."""

    def __init__(self, primary: TranslationEngine, secondary: TranslationEngine):
        super().__init__(primary.base_language)
        self.primary = primary
        self.secondary = secondary
        self.name = f"{primary.name}+{secondary.name}"

    def translate(self, text: str, source_language: str) -> str:
        return self._translate_with(text, source_language)[0]

    def _translate_with(
        self, text: str, source_language: str
    ) -> Tuple[str, TranslationEngine]:
        """Return the translation and the engine that produced it."""
        try:
            return self.primary.translate(text, source_language), self.primary
        except TranslationError as e:
            logger.warning(
                f"{self.primary.name} engine failed, falling back to "
                f"{self.secondary.name}: {e}"
            )
            return self.secondary.translate(text, source_language), self.secondary

    def translate_segment(self, segment: TranscriptSegment) -> TranslationRecord:
        translated, engine = self._translate_with(segment.text, segment.language)
        return TranslationRecord(
            segment_id=segment.segment_id,
            source_language=segment.language,
            source_text=segment.text,
            translated_text=translated,
            confidence=engine.confidence(segment.text, segment.language),
            session_id=segment.session_id,
        )


def create_translation_engine(
    kind: str = "phrase",
    openai_client: Optional[OpenAIClient] = None,
    base_language: str = "english",
) -> TranslationEngine:
    """Factory for translation engines.

    Args:
        kind: "phrase", "openai" or "openai+phrase" (OpenAI with phrase fallback)
        openai_client: Required for the OpenAI variants
        base_language: Target language

    Raises:
        ValueError: For unknown kinds or a missing OpenAI client
    """
    if kind == "phrase":
        return PhraseTranslationEngine(base_language)

    if kind in ("openai", "openai+phrase"):
        if openai_client is None:
            raise ValueError(f"Translation engine '{kind}' requires an OpenAI client")
        engine = OpenAITranslationEngine(openai_client, base_language)
        if kind == "openai+phrase":
            return FallbackTranslationEngine(engine, PhraseTranslationEngine(base_language))
        return engine

    raise ValueError(f"Unknown translation engine type: {kind}")
