"""Tests for ChunkAnalyzer."""

from __future__ import annotations

from threatscan.domain.threat import ThreatCategory


def test_segment_without_hits(chunk_analyzer, make_segment):
    analysis = chunk_analyzer.analyze(make_segment("s1", "good morning everyone"))

    assert analysis.segment_id == "s1"
    assert analysis.matches == ()
    assert analysis.score == 0
    assert not analysis.has_threats


def test_matches_are_stamped_with_segment(chunk_analyzer, make_segment):
    segment = make_segment("s7", "bomb now", start_time=12.5)

    analysis = chunk_analyzer.analyze(segment)

    assert {m.segment_id for m in analysis.matches} == {"s7"}
    assert {m.start_time for m in analysis.matches} == {12.5}


def test_chunk_score_is_sum_of_weights(chunk_analyzer, make_segment):
    analysis = chunk_analyzer.analyze(make_segment("s1", "bomb the police camp now"))
    # weapon 3 + two targets 2 each + urgency 1
    assert analysis.score == 8


def test_translation_matches_are_tagged(chunk_analyzer, make_segment):
    segment = make_segment("h1", "कल मिलते हैं", language="hindi")

    analysis = chunk_analyzer.analyze(segment, "attack the army camp")

    assert analysis.has_threats
    assert {m.language for m in analysis.matches} == {"english (translated)"}
    assert all(m.is_translated for m in analysis.matches)
    assert all(m.dictionary_language == "english" for m in analysis.matches)


def test_source_and_translation_both_count(chunk_analyzer, make_segment):
    segment = make_segment("h1", "बम", language="hindi")

    analysis = chunk_analyzer.analyze(segment, "bomb")

    assert [(m.word, m.language) for m in analysis.matches] == [
        ("बम", "hindi"),
        ("bomb", "english (translated)"),
    ]
    assert all(m.category is ThreatCategory.WEAPONS for m in analysis.matches)
    assert analysis.score == 6


def test_base_language_segment_ignores_translation(chunk_analyzer, make_segment):
    segment = make_segment("e1", "hello there", language="English")

    analysis = chunk_analyzer.analyze(segment, "bomb")

    assert not analysis.has_threats


def test_analyze_segments_pairs_translations(chunk_analyzer, make_segment):
    segments = [
        make_segment("a", "नमस्ते", language="hindi", start_time=0.0),
        make_segment("b", "hello", start_time=4.0),
    ]

    analyses = chunk_analyzer.analyze_segments(segments, {"a": "gun", "b": "gun"})

    assert [a.segment_id for a in analyses] == ["a", "b"]
    assert analyses[0].score == 3
    assert analyses[1].score == 0


def test_analyze_segments_without_translations(chunk_analyzer, make_segment):
    analyses = chunk_analyzer.analyze_segments([make_segment("a", "gun")])
    assert analyses[0].score == 3
