"""Domain models - pure data structures with no external dependencies.

These models represent the core entities shared across services.
"""

from .errors import ConfigurationError, NotFoundError
from .threat import (
    CATEGORY_WEIGHTS,
    SEVERITY_THRESHOLDS,
    TRANSLATED_SUFFIX,
    ChunkAnalysis,
    Explanation,
    KeywordMatch,
    ScoreBreakdown,
    SessionAggregate,
    Severity,
    ThreatAnalysisRecord,
    ThreatCategory,
    ThreatScore,
    TriggeredKeyword,
    empty_category_counts,
)
from .transcript import TranscriptSegment, TranslationLookup, TranslationRecord

__all__ = [
    # Errors
    "ConfigurationError",
    "NotFoundError",
    # Transcript models
    "TranscriptSegment",
    "TranslationLookup",
    "TranslationRecord",
    # Threat models
    "CATEGORY_WEIGHTS",
    "SEVERITY_THRESHOLDS",
    "TRANSLATED_SUFFIX",
    "ChunkAnalysis",
    "Explanation",
    "KeywordMatch",
    "ScoreBreakdown",
    "SessionAggregate",
    "Severity",
    "ThreatAnalysisRecord",
    "ThreatCategory",
    "ThreatScore",
    "TriggeredKeyword",
    "empty_category_counts",
]
