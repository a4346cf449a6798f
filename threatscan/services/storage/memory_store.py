"""Thread-safe in-memory session store.

Used for local runs, the CLI's JSON input mode and tests. Every mutation
happens under a single lock so concurrent pipeline runs over distinct
sessions never observe a half-written session.
"""

from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Optional

from threatscan.domain.threat import ThreatAnalysisRecord
from threatscan.domain.transcript import (
    TranscriptSegment,
    TranslationLookup,
    TranslationRecord,
)
from threatscan.services.storage.base import SessionStore
from threatscan.utils.logging import get_logger

logger = get_logger(__name__)


class InMemorySessionStore(SessionStore):
    """Dictionary-backed store keyed by session id."""

    def __init__(self) -> None:
        self._segments: Dict[str, Dict[str, TranscriptSegment]] = {}
        self._translations: Dict[str, Dict[str, TranslationRecord]] = {}
        self._analyses: Dict[str, ThreatAnalysisRecord] = {}
        self._lock = threading.Lock()

    def save_segments(self, session_id: str, segments: Iterable[TranscriptSegment]) -> int:
        count = 0
        with self._lock:
            stored = self._segments.setdefault(session_id, {})
            for segment in segments:
                stored[segment.segment_id] = segment
                count += 1
        logger.debug(f"Stored {count} segments for session {session_id}")
        return count

    def get_transcript_segments(self, session_id: str) -> List[TranscriptSegment]:
        with self._lock:
            segments = list(self._segments.get(session_id, {}).values())
        return sorted(segments, key=lambda s: s.start_time)

    def save_translations(
        self, session_id: str, translations: Iterable[TranslationRecord]
    ) -> int:
        count = 0
        with self._lock:
            stored = self._translations.setdefault(session_id, {})
            for translation in translations:
                stored[translation.segment_id] = translation
                count += 1
        logger.debug(f"Stored {count} translations for session {session_id}")
        return count

    def get_translations(self, session_id: str) -> TranslationLookup:
        with self._lock:
            stored = self._translations.get(session_id, {})
            return {seg_id: t.translated_text for seg_id, t in stored.items()}

    def save_analysis(self, record: ThreatAnalysisRecord) -> None:
        with self._lock:
            self._analyses[record.session_id] = record
        logger.info(f"Stored threat analysis {record.analysis_id}")

    def get_analysis(self, session_id: str) -> Optional[ThreatAnalysisRecord]:
        with self._lock:
            return self._analyses.get(session_id)

    def list_analyses(self) -> List[ThreatAnalysisRecord]:
        with self._lock:
            return list(self._analyses.values())

    def delete_analysis(self, session_id: str) -> bool:
        with self._lock:
            removed = self._analyses.pop(session_id, None)
        if removed is not None:
            logger.info(f"Deleted threat analysis for session {session_id}")
        return removed is not None

    def delete_all_analyses(self) -> int:
        with self._lock:
            count = len(self._analyses)
            self._analyses.clear()
        logger.info(f"Deleted {count} threat analyses")
        return count
