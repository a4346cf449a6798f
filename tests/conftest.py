"""Shared fixtures for threatscan tests."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from threatscan.domain.transcript import TranscriptSegment
from threatscan.services.analysis.analysis_service import ThreatAnalysisService
from threatscan.services.detection.chunk_analyzer import ChunkAnalyzer
from threatscan.services.detection.dictionary_provider import DictionaryProvider
from threatscan.services.detection.keyword_matcher import KeywordMatcher
from threatscan.services.detection.session_aggregator import SessionAggregator
from threatscan.services.explanation.explanation_generator import ExplanationGenerator
from threatscan.services.scoring.threat_scorer import ThreatScorer
from threatscan.services.storage.memory_store import InMemorySessionStore

FIXED_NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def build_segment(
    segment_id: str,
    text: str,
    language: str = "english",
    start_time: float = 0.0,
    session_id: str = "session-1",
) -> TranscriptSegment:
    return TranscriptSegment(
        segment_id=segment_id,
        text=text,
        language=language,
        start_time=start_time,
        confidence=0.9,
        session_id=session_id,
    )


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def make_segment():
    return build_segment


@pytest.fixture
def provider() -> DictionaryProvider:
    return DictionaryProvider()


@pytest.fixture
def matcher(provider) -> KeywordMatcher:
    return KeywordMatcher(provider, context_size=5)


@pytest.fixture
def chunk_analyzer(matcher) -> ChunkAnalyzer:
    return ChunkAnalyzer(matcher, base_language="english")


@pytest.fixture
def store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def service(store, chunk_analyzer) -> ThreatAnalysisService:
    return ThreatAnalysisService(
        store=store,
        chunk_analyzer=chunk_analyzer,
        aggregator=SessionAggregator(),
        scorer=ThreatScorer(),
        explainer=ExplanationGenerator(),
        clock=lambda: FIXED_NOW,
    )
