"""Translate a stored session so the analysis core can scan translations."""

from __future__ import annotations

from typing import List

from threatscan.domain.transcript import TranslationRecord
from threatscan.services.storage.base import SessionStore
from threatscan.services.translation.engines import TranslationEngine
from threatscan.utils.logging import get_logger

logger = get_logger(__name__)


class TranslationService:
    """Translates non-base-language segments and stores the results."""

    def __init__(self, store: SessionStore, engine: TranslationEngine):
        """Initialize translation service.

        Args:
            store: Storage collaborator holding the transcripts
            engine: Translation engine strategy
        """
        self.store = store
        self.engine = engine

    def translate_session(self, session_id: str) -> List[TranslationRecord]:
        """Translate every segment not already in the base language.

        Args:
            session_id: Session identifier

        Returns:
            The stored translation records (empty if nothing needed translating)
        """
        segments = self.store.get_transcript_segments(session_id)
        pending = [
            segment
            for segment in segments
            if segment.language.strip().lower() != self.engine.base_language
        ]

        if not pending:
            logger.info(f"Nothing to translate for session {session_id}")
            return []

        logger.info(
            f"Translating {len(pending)}/{len(segments)} segments "
            f"with {self.engine.name} engine"
        )
        translations = [self.engine.translate_segment(segment) for segment in pending]
        self.store.save_translations(session_id, translations)
        return translations
