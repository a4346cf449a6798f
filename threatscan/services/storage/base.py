"""Storage collaborator interface used by the analysis pipeline."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from threatscan.domain.threat import Severity, ThreatAnalysisRecord
from threatscan.domain.transcript import (
    TranscriptSegment,
    TranslationLookup,
    TranslationRecord,
)


class SessionStore(ABC):
    """Durable home for transcripts, translations and analysis records.

    Analysis records are keyed by session: saving a new record for a
    session replaces the previous one.
    """

    # -- transcripts -------------------------------------------------------
    @abstractmethod
    def save_segments(self, session_id: str, segments: Iterable[TranscriptSegment]) -> int:
        """Store transcript segments; returns the number stored."""

    @abstractmethod
    def get_transcript_segments(self, session_id: str) -> List[TranscriptSegment]:
        """Segments for a session ordered by start time (possibly empty)."""

    # -- translations ------------------------------------------------------
    @abstractmethod
    def save_translations(
        self, session_id: str, translations: Iterable[TranslationRecord]
    ) -> int:
        """Store translations; returns the number stored."""

    @abstractmethod
    def get_translations(self, session_id: str) -> TranslationLookup:
        """segment_id -> translated text (possibly empty)."""

    # -- analyses ----------------------------------------------------------
    @abstractmethod
    def save_analysis(self, record: ThreatAnalysisRecord) -> None:
        """Store a record, superseding any earlier one for the session."""

    @abstractmethod
    def get_analysis(self, session_id: str) -> Optional[ThreatAnalysisRecord]:
        """Most recent record for a session, or None."""

    @abstractmethod
    def list_analyses(self) -> List[ThreatAnalysisRecord]:
        """All stored records."""

    @abstractmethod
    def delete_analysis(self, session_id: str) -> bool:
        """Delete a session's record; returns True if one existed."""

    @abstractmethod
    def delete_all_analyses(self) -> int:
        """Delete every record; returns the number removed."""

    def list_high_risk(self) -> List[ThreatAnalysisRecord]:
        """Records whose severity is HIGH_RISK."""
        return [
            record
            for record in self.list_analyses()
            if record.severity is Severity.HIGH_RISK
        ]

    def close(self) -> None:
        """Release any held resources."""
