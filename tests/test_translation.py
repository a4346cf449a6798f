"""Tests for translation engines and TranslationService."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from threatscan.services.translation.engines import (
    FallbackTranslationEngine,
    OpenAITranslationEngine,
    PhraseTranslationEngine,
    TranslationEngine,
    TranslationError,
    create_translation_engine,
)
from threatscan.services.translation.translation_service import TranslationService


class BrokenEngine(TranslationEngine):
    name = "broken"

    def translate(self, text, source_language):
        raise TranslationError("service unavailable")


def _openai_client(content):
    client = MagicMock()
    client.config.model = "test-model"
    response = SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )
    client.connect.return_value.chat.completions.create.return_value = response
    return client


def test_phrase_engine_exact_phrase():
    engine = PhraseTranslationEngine()
    assert engine.translate("धन्यवाद", "hindi") == "Thank you"
    assert engine.confidence("धन्यवाद", "hindi") == PhraseTranslationEngine.EXACT_CONFIDENCE


def test_phrase_engine_word_by_word_keeps_unknown_words():
    engine = PhraseTranslationEngine()
    assert engine.translate("बम अभी चलो", "Hindi") == "bomb now चलो"
    assert engine.confidence("बम अभी चलो", "hindi") == PhraseTranslationEngine.WORD_CONFIDENCE


def test_phrase_engine_passes_base_language_through():
    engine = PhraseTranslationEngine()
    assert engine.translate("bomb now", "english") == "bomb now"
    assert engine.confidence("bomb now", "english") == 1.0


def test_translate_segment_builds_record(make_segment):
    segment = make_segment("a", "بم ابھی", language="urdu", session_id="s")

    record = PhraseTranslationEngine().translate_segment(segment)

    assert record.segment_id == "a"
    assert record.session_id == "s"
    assert record.source_language == "urdu"
    assert record.source_text == "بم ابھی"
    assert record.translated_text == "bomb now"
    assert record.confidence == 0.7


def test_openai_engine_returns_stripped_content():
    client = _openai_client("  attack the camp \n")
    engine = OpenAITranslationEngine(client)

    assert engine.translate("حملہ", "kashmiri") == "attack the camp"

    kwargs = client.connect.return_value.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "test-model"
    assert kwargs["temperature"] == 0.0
    assert "Kashmiri (Perso-Arabic script" in kwargs["messages"][1]["content"]


def test_openai_engine_skips_base_language():
    client = _openai_client("unused")
    engine = OpenAITranslationEngine(client)

    assert engine.translate("bomb", "english") == "bomb"
    client.connect.assert_not_called()


def test_openai_engine_wraps_api_errors():
    client = _openai_client("unused")
    client.connect.return_value.chat.completions.create.side_effect = RuntimeError("boom")

    with pytest.raises(TranslationError, match="boom"):
        OpenAITranslationEngine(client).translate("बम", "hindi")


def test_openai_engine_rejects_empty_output():
    with pytest.raises(TranslationError, match="empty"):
        OpenAITranslationEngine(_openai_client("   ")).translate("बम", "hindi")


def test_fallback_uses_secondary_on_failure(make_segment):
    engine = FallbackTranslationEngine(BrokenEngine(), PhraseTranslationEngine())

    record = engine.translate_segment(make_segment("a", "बम", language="hindi"))

    assert engine.name == "broken+phrase"
    assert record.translated_text == "bomb"
    assert record.confidence == PhraseTranslationEngine.WORD_CONFIDENCE


def test_fallback_prefers_primary():
    secondary = MagicMock(spec=TranslationEngine)
    engine = FallbackTranslationEngine(PhraseTranslationEngine(), secondary)

    assert engine.translate("बम", "hindi") == "bomb"
    secondary.translate.assert_not_called()


def test_factory():
    assert isinstance(create_translation_engine("phrase"), PhraseTranslationEngine)

    client = _openai_client("x")
    assert isinstance(create_translation_engine("openai", client), OpenAITranslationEngine)

    combined = create_translation_engine("openai+phrase", client)
    assert isinstance(combined, FallbackTranslationEngine)
    assert combined.name == "openai+phrase"


def test_factory_errors():
    with pytest.raises(ValueError, match="requires an OpenAI client"):
        create_translation_engine("openai")
    with pytest.raises(ValueError, match="Unknown translation engine"):
        create_translation_engine("babelfish")


def test_translation_service_translates_only_foreign_segments(store, make_segment):
    store.save_segments(
        "s",
        [
            make_segment("a", "बम अभी", language="hindi", start_time=0.0, session_id="s"),
            make_segment("b", "hello", language="english", start_time=1.0, session_id="s"),
        ],
    )

    records = TranslationService(store, PhraseTranslationEngine()).translate_session("s")

    assert [r.segment_id for r in records] == ["a"]
    assert store.get_translations("s") == {"a": "bomb now"}


def test_translation_service_nothing_to_translate(make_segment):
    store = MagicMock()
    store.get_transcript_segments.return_value = [make_segment("b", "hello")]

    assert TranslationService(store, PhraseTranslationEngine()).translate_session("s") == []
    store.save_translations.assert_not_called()
