"""Per-segment threat detection."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Optional

from threatscan.domain.threat import TRANSLATED_SUFFIX, ChunkAnalysis, KeywordMatch
from threatscan.domain.transcript import TranscriptSegment, TranslationLookup
from threatscan.services.detection.keyword_matcher import KeywordMatcher
from threatscan.utils.logging import get_logger

logger = get_logger(__name__)


class ChunkAnalyzer:
    """Applies the keyword matcher to one segment and its translation."""

    def __init__(self, matcher: KeywordMatcher, base_language: str = "english"):
        """Initialize chunk analyzer.

        Args:
            matcher: Keyword matcher
            base_language: Language translations are written in
        """
        self.matcher = matcher
        self.base_language = base_language.strip().lower()

    def analyze(
        self, segment: TranscriptSegment, translated_text: Optional[str] = None
    ) -> ChunkAnalysis:
        """Detect threats in a single transcript segment.

        The source text is always matched in the segment's language. A
        translation is matched too, with the base-language dictionary, when
        the segment is not already in the base language; those matches are
        tagged ``"<base> (translated)"`` but count toward the same categories.

        Args:
            segment: Transcript segment
            translated_text: Optional base-language translation

        Returns:
            ChunkAnalysis for the segment
        """
        matches = self._stamp(
            self.matcher.match(segment.text, segment.language), segment
        )

        if translated_text and segment.language.strip().lower() != self.base_language:
            translated = self.matcher.match(translated_text, self.base_language)
            matches.extend(
                self._stamp(
                    translated,
                    segment,
                    language=f"{self.base_language}{TRANSLATED_SUFFIX}",
                )
            )

        score = sum(match.category.weight for match in matches)
        return ChunkAnalysis(
            segment_id=segment.segment_id, matches=tuple(matches), score=score
        )

    def analyze_segments(
        self,
        segments: Iterable[TranscriptSegment],
        translations: Optional[TranslationLookup] = None,
    ) -> List[ChunkAnalysis]:
        """Analyze every segment in order, pairing each with its translation."""
        translations = translations or {}
        analyses = [
            self.analyze(segment, translations.get(segment.segment_id))
            for segment in segments
        ]
        flagged = sum(1 for analysis in analyses if analysis.has_threats)
        logger.info(f"Analyzed {len(analyses)} segments ({flagged} with threats)")
        return analyses

    @staticmethod
    def _stamp(
        matches: List[KeywordMatch],
        segment: TranscriptSegment,
        language: Optional[str] = None,
    ) -> List[KeywordMatch]:
        """Attach segment id, start time and optionally a language tag."""
        return [
            replace(
                match,
                segment_id=segment.segment_id,
                start_time=segment.start_time,
                language=language or match.language,
            )
            for match in matches
        ]
