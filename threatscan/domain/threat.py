"""Threat analysis domain models."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple

# Suffix appended to the base-language tag for matches found in a translation
TRANSLATED_SUFFIX = " (translated)"


class ThreatCategory(Enum):
    """Closed set of threat-indicator classes."""

    VIOLENT_ACTIONS = "violent_actions"
    WEAPONS = "weapons"
    EVENTS = "events"
    TARGETS = "targets"
    URGENCY = "urgency"

    @classmethod
    def from_string(cls, value: str) -> ThreatCategory:
        """Convert string to ThreatCategory."""
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(f"Invalid threat category: {value}")

    @property
    def weight(self) -> int:
        """Fixed scoring weight for one match in this category."""
        return CATEGORY_WEIGHTS[self]

    @property
    def label(self) -> str:
        """Singular display name."""
        return CATEGORY_LABELS[self]


CATEGORY_WEIGHTS: Dict[ThreatCategory, int] = {
    ThreatCategory.VIOLENT_ACTIONS: 2,
    ThreatCategory.WEAPONS: 3,
    ThreatCategory.EVENTS: 2,
    ThreatCategory.TARGETS: 2,
    ThreatCategory.URGENCY: 1,
}

CATEGORY_LABELS: Dict[ThreatCategory, str] = {
    ThreatCategory.VIOLENT_ACTIONS: "Violent action",
    ThreatCategory.WEAPONS: "Weapon",
    ThreatCategory.EVENTS: "Event",
    ThreatCategory.TARGETS: "Target",
    ThreatCategory.URGENCY: "Urgency",
}


class Severity(Enum):
    """Three-band classification derived purely from score."""

    SAFE = "SAFE"
    SUSPICIOUS = "SUSPICIOUS"
    HIGH_RISK = "HIGH_RISK"

    @classmethod
    def from_score(cls, score: int) -> Severity:
        """Map a score to its band; the highest qualifying band wins."""
        for severity, minimum in SEVERITY_THRESHOLDS:
            if score >= minimum:
                return severity
        return cls.SAFE

    @property
    def display_name(self) -> str:
        """Human-readable label ("HIGH RISK")."""
        return self.value.replace("_", " ")


# Inclusive lower bounds, highest band first
SEVERITY_THRESHOLDS: Tuple[Tuple[Severity, int], ...] = (
    (Severity.HIGH_RISK, 6),
    (Severity.SUSPICIOUS, 3),
    (Severity.SAFE, 0),
)


def empty_category_counts() -> Dict[ThreatCategory, int]:
    """All-zero count for every category, in canonical order."""
    return {category: 0 for category in ThreatCategory}


@dataclass(frozen=True, slots=True)
class KeywordMatch:
    """A single dictionary hit inside a transcript segment."""

    segment_id: str
    word: str  # Canonical dictionary spelling
    category: ThreatCategory
    language: str
    start_time: float
    context: str = ""

    @property
    def is_translated(self) -> bool:
        """True when the match came from the base-language translation."""
        return self.language.endswith(TRANSLATED_SUFFIX)

    @property
    def dictionary_language(self) -> str:
        """Language whose dictionary produced this match."""
        if self.is_translated:
            return self.language[: -len(TRANSLATED_SUFFIX)]
        return self.language


@dataclass(frozen=True, slots=True)
class ChunkAnalysis:
    """Per-segment match set and chunk-level score."""

    segment_id: str
    matches: Tuple[KeywordMatch, ...]
    score: int

    @property
    def has_threats(self) -> bool:
        return len(self.matches) > 0


@dataclass(frozen=True, slots=True)
class SessionAggregate:
    """Session-level fold of every ChunkAnalysis in a run."""

    total_matches: int
    category_counts: Dict[ThreatCategory, int]
    unique_words: frozenset
    chunks_involved: int
    all_matches: Tuple[KeywordMatch, ...]

    @classmethod
    def empty(cls) -> SessionAggregate:
        return cls(
            total_matches=0,
            category_counts=empty_category_counts(),
            unique_words=frozenset(),
            chunks_involved=0,
            all_matches=(),
        )


@dataclass(frozen=True, slots=True)
class ScoreBreakdown:
    """Weighted contribution per category plus the combined bonus term."""

    category_scores: Dict[ThreatCategory, int]
    repetition_bonus: int = 0  # Repetition and spread bonuses combined

    @property
    def total(self) -> int:
        return sum(self.category_scores.values()) + self.repetition_bonus

    def to_dict(self) -> dict:
        data = {category.value: value for category, value in self.category_scores.items()}
        data["repetition_bonus"] = self.repetition_bonus
        return data

    @classmethod
    def from_dict(cls, data: dict) -> ScoreBreakdown:
        return cls(
            category_scores={
                category: int(data.get(category.value, 0)) for category in ThreatCategory
            },
            repetition_bonus=int(data.get("repetition_bonus", 0)),
        )


@dataclass(frozen=True, slots=True)
class ThreatScore:
    """Numeric score, its severity, and the breakdown it was summed from."""

    score: int
    severity: Severity
    breakdown: ScoreBreakdown


@dataclass(frozen=True, slots=True)
class TriggeredKeyword:
    """A matched word with its category and occurrence count."""

    word: str
    category: ThreatCategory
    count: int

    def to_dict(self) -> dict:
        return {
            "word": self.word,
            "category": self.category.value,
            "count": self.count,
        }


@dataclass(frozen=True, slots=True)
class Explanation:
    """Human-readable rationale for a session's score."""

    summary: str
    details: Tuple[str, ...] = ()
    triggered_keywords: Tuple[TriggeredKeyword, ...] = ()
    category_explanations: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ThreatAnalysisRecord:
    """Final output of one pipeline run, handed to storage and presentation."""

    analysis_id: str
    session_id: str
    score: int
    severity: Severity
    triggered_keywords: Tuple[TriggeredKeyword, ...]
    breakdown: ScoreBreakdown
    category_counts: Dict[ThreatCategory, int]
    explanation_text: str
    chunks_involved: int
    created_at: datetime
    details: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            "analysis_id": self.analysis_id,
            "session_id": self.session_id,
            "score": self.score,
            "severity": self.severity.value,
            "triggered_keywords": [kw.to_dict() for kw in self.triggered_keywords],
            "breakdown": self.breakdown.to_dict(),
            "category_counts": {
                category.value: count for category, count in self.category_counts.items()
            },
            "explanation_text": self.explanation_text,
            "details": list(self.details),
            "chunks_involved": self.chunks_involved,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> ThreatAnalysisRecord:
        """Rebuild a record from :meth:`to_dict` output."""
        created_at = data["created_at"]
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at)
        counts = data.get("category_counts", {})
        return cls(
            analysis_id=data["analysis_id"],
            session_id=data["session_id"],
            score=int(data["score"]),
            severity=Severity(data["severity"]),
            triggered_keywords=tuple(
                TriggeredKeyword(
                    word=kw["word"],
                    category=ThreatCategory.from_string(kw["category"]),
                    count=int(kw["count"]),
                )
                for kw in data.get("triggered_keywords", [])
            ),
            breakdown=ScoreBreakdown.from_dict(data.get("breakdown", {})),
            category_counts={
                category: int(counts.get(category.value, 0)) for category in ThreatCategory
            },
            explanation_text=data.get("explanation_text", ""),
            details=tuple(data.get("details", [])),
            chunks_involved=int(data.get("chunks_involved", 0)),
            created_at=created_at,
        )

    def as_weaviate_properties(self) -> dict:
        """Flatten to Weaviate properties; nested values are stored as JSON text."""
        return {
            "analysisId": self.analysis_id,
            "sessionId": self.session_id,
            "score": self.score,
            "severity": self.severity.value,
            "triggeredKeywords": json.dumps(
                [kw.to_dict() for kw in self.triggered_keywords], ensure_ascii=False
            ),
            "breakdown": json.dumps(self.breakdown.to_dict()),
            "categoryCounts": json.dumps(
                {category.value: count for category, count in self.category_counts.items()}
            ),
            "explanationText": self.explanation_text,
            "details": list(self.details),
            "chunksInvolved": self.chunks_involved,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_weaviate_properties(cls, props: dict) -> ThreatAnalysisRecord:
        created_at: Optional[datetime] = props.get("createdAt")
        return cls.from_dict(
            {
                "analysis_id": props.get("analysisId", ""),
                "session_id": props.get("sessionId", ""),
                "score": props.get("score", 0),
                "severity": props.get("severity", Severity.SAFE.value),
                "triggered_keywords": json.loads(props.get("triggeredKeywords") or "[]"),
                "breakdown": json.loads(props.get("breakdown") or "{}"),
                "category_counts": json.loads(props.get("categoryCounts") or "{}"),
                "explanation_text": props.get("explanationText", ""),
                "details": props.get("details") or [],
                "chunks_involved": props.get("chunksInvolved", 0),
                "created_at": created_at,
            }
        )
