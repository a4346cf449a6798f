"""Transcript domain models consumed by the analysis core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

# segment_id -> translated (base-language) text
TranslationLookup = Dict[str, str]


@dataclass(frozen=True, slots=True)
class TranscriptSegment:
    """A single time-bounded slice of a session transcript.

    Produced by the speech-to-text collaborator; read-only to the core.
    ``confidence`` is opaque and passed through untouched.
    """

    segment_id: str
    text: str
    language: str
    start_time: float  # Offset in seconds from session start
    confidence: Optional[float] = None
    session_id: str = ""

    def as_weaviate_properties(self) -> dict:
        """Return a dict of properties expected by Weaviate."""
        properties = {
            "sessionId": self.session_id,
            "segmentId": self.segment_id,
            "text": self.text,
            "language": self.language,
            "startTime": self.start_time,
        }
        if self.confidence is not None:
            properties["confidence"] = float(self.confidence)
        return properties

    @classmethod
    def from_dict(cls, data: dict, session_id: str = "") -> TranscriptSegment:
        """Build a segment from a camelCase or snake_case mapping.

        Raises:
            ValueError: If the mapping has no segment id
        """
        segment_id = data.get("segmentId") or data.get("segment_id")
        if segment_id is None or not str(segment_id).strip():
            raise ValueError(f"Transcript segment has no segment id: {data!r}")

        confidence = data.get("confidence")
        return cls(
            segment_id=str(segment_id),
            text=data.get("text", ""),
            language=data.get("language", ""),
            start_time=float(data.get("startTime", data.get("start_time", 0.0)) or 0.0),
            confidence=float(confidence) if confidence is not None else None,
            session_id=data.get("sessionId") or data.get("session_id") or session_id,
        )


@dataclass(frozen=True, slots=True)
class TranslationRecord:
    """Translated text for one segment, as stored by the translation collaborator."""

    segment_id: str
    source_language: str
    source_text: str
    translated_text: str
    confidence: Optional[float] = None
    session_id: str = ""

    def as_weaviate_properties(self) -> dict:
        """Return a dict of properties expected by Weaviate."""
        properties = {
            "sessionId": self.session_id,
            "segmentId": self.segment_id,
            "sourceLanguage": self.source_language,
            "sourceText": self.source_text,
            "translatedText": self.translated_text,
        }
        if self.confidence is not None:
            properties["confidence"] = float(self.confidence)
        return properties
