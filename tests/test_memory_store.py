"""Tests for InMemorySessionStore."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

from threatscan.domain.threat import (
    ScoreBreakdown,
    Severity,
    ThreatAnalysisRecord,
    empty_category_counts,
)
from threatscan.domain.transcript import TranslationRecord
from threatscan.services.storage.memory_store import InMemorySessionStore


def _record(session_id, severity=Severity.SAFE, score=0):
    return ThreatAnalysisRecord(
        analysis_id=f"analysis-{session_id}-0",
        session_id=session_id,
        score=score,
        severity=severity,
        triggered_keywords=(),
        breakdown=ScoreBreakdown(category_scores=empty_category_counts()),
        category_counts=empty_category_counts(),
        explanation_text="",
        chunks_involved=0,
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
    )


def test_segments_returned_in_start_time_order(store, make_segment):
    store.save_segments(
        "s",
        [
            make_segment("late", "c", start_time=9.0),
            make_segment("early", "a", start_time=1.0),
            make_segment("middle", "b", start_time=5.0),
        ],
    )

    ids = [segment.segment_id for segment in store.get_transcript_segments("s")]

    assert ids == ["early", "middle", "late"]


def test_segment_upsert_by_id(store, make_segment):
    store.save_segments("s", [make_segment("a", "first")])
    store.save_segments("s", [make_segment("a", "second")])

    (segment,) = store.get_transcript_segments("s")
    assert segment.text == "second"


def test_unknown_session_is_empty(store):
    assert store.get_transcript_segments("nope") == []
    assert store.get_translations("nope") == {}
    assert store.get_analysis("nope") is None


def test_sessions_are_isolated(store, make_segment):
    store.save_segments("one", [make_segment("a", "x")])
    store.save_segments("two", [make_segment("b", "y")])

    assert [s.segment_id for s in store.get_transcript_segments("one")] == ["a"]


def test_translations_lookup(store):
    count = store.save_translations(
        "s",
        [
            TranslationRecord("a", "hindi", "बम", "bomb"),
            TranslationRecord("b", "urdu", "شکریہ", "Thank you"),
        ],
    )

    assert count == 2
    assert store.get_translations("s") == {"a": "bomb", "b": "Thank you"}


def test_analysis_replace_list_and_delete(store):
    store.save_analysis(_record("a", Severity.HIGH_RISK, 9))
    store.save_analysis(_record("b", Severity.SUSPICIOUS, 4))
    store.save_analysis(_record("a", Severity.SAFE, 0))

    assert store.get_analysis("a").severity is Severity.SAFE
    assert len(store.list_analyses()) == 2

    assert store.delete_analysis("a") is True
    assert store.delete_analysis("a") is False
    assert store.delete_all_analyses() == 1
    assert store.list_analyses() == []


def test_list_high_risk(store):
    store.save_analysis(_record("a", Severity.HIGH_RISK, 12))
    store.save_analysis(_record("b", Severity.SUSPICIOUS, 4))

    assert [r.session_id for r in store.list_high_risk()] == ["a"]


def test_concurrent_writes_to_distinct_sessions(make_segment):
    store = InMemorySessionStore()

    def write(n):
        session_id = f"session-{n}"
        segments = [
            make_segment(f"seg-{i}", "bomb", start_time=float(i), session_id=session_id)
            for i in range(20)
        ]
        store.save_segments(session_id, segments)
        store.save_analysis(_record(session_id))

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(write, range(16)))

    assert len(store.list_analyses()) == 16
    assert all(len(store.get_transcript_segments(f"session-{n}")) == 20 for n in range(16))
