"""Pipeline entry point: session id in, persisted analysis record out."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

from threatscan.config import AnalysisConfig
from threatscan.domain.errors import NotFoundError
from threatscan.domain.threat import ThreatAnalysisRecord
from threatscan.services.detection.chunk_analyzer import ChunkAnalyzer
from threatscan.services.detection.dictionary_provider import DictionaryProvider
from threatscan.services.detection.keyword_matcher import KeywordMatcher
from threatscan.services.detection.session_aggregator import SessionAggregator
from threatscan.services.explanation.explanation_generator import ExplanationGenerator
from threatscan.services.scoring.threat_scorer import ThreatScorer
from threatscan.services.storage.base import SessionStore
from threatscan.utils.logging import get_logger

logger = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ThreatAnalysisService:
    """Sequences fetch, detect, aggregate, score, explain and persist.

    Holds no per-run state, so one instance can serve concurrent calls for
    different sessions.
    """

    def __init__(
        self,
        store: SessionStore,
        chunk_analyzer: ChunkAnalyzer,
        aggregator: SessionAggregator,
        scorer: ThreatScorer,
        explainer: ExplanationGenerator,
        clock: Callable[[], datetime] = _utcnow,
    ):
        """Initialize analysis service.

        Args:
            store: Storage collaborator for inputs and the output record
            chunk_analyzer: Per-segment detector
            aggregator: Session fold
            scorer: Threat scorer
            explainer: Explanation generator
            clock: Source of record timestamps
        """
        self.store = store
        self.chunk_analyzer = chunk_analyzer
        self.aggregator = aggregator
        self.scorer = scorer
        self.explainer = explainer
        self.clock = clock

    @classmethod
    def from_config(
        cls,
        store: SessionStore,
        config: Optional[AnalysisConfig] = None,
        provider: Optional[DictionaryProvider] = None,
    ) -> ThreatAnalysisService:
        """Wire the default components from configuration.

        Dictionaries are loaded and validated here, so a bad dictionary file
        fails at startup with ConfigurationError.
        """
        config = config or AnalysisConfig()
        if provider is None:
            if config.dictionary_path:
                provider = DictionaryProvider.from_file(
                    config.dictionary_path, fallback_language=config.base_language
                )
            else:
                provider = DictionaryProvider(fallback_language=config.base_language)

        matcher = KeywordMatcher(provider, context_size=config.context_window)
        return cls(
            store=store,
            chunk_analyzer=ChunkAnalyzer(matcher, base_language=config.base_language),
            aggregator=SessionAggregator(),
            scorer=ThreatScorer(),
            explainer=ExplanationGenerator(
                max_words_per_category=config.max_words_per_category,
                max_context_examples=config.max_context_examples,
            ),
        )

    def analyze_session(self, session_id: str, persist: bool = True) -> ThreatAnalysisRecord:
        """Analyze threats for a session.

        Args:
            session_id: Session identifier
            persist: Whether to hand the record to the store

        Returns:
            The assembled ThreatAnalysisRecord

        Raises:
            NotFoundError: If the session has no transcript segments
        """
        logger.info(f"Analyzing threats for session: {session_id}")

        segments = self.store.get_transcript_segments(session_id)
        if not segments:
            raise NotFoundError(session_id)

        translations = self.store.get_translations(session_id)
        if not translations:
            logger.debug(f"No translations for session {session_id}")

        chunk_analyses = self.chunk_analyzer.analyze_segments(segments, translations)
        aggregate = self.aggregator.aggregate(chunk_analyses)
        threat_score = self.scorer.score(aggregate)
        explanation = self.explainer.explain(
            threat_score.severity,
            threat_score.score,
            aggregate.all_matches,
            aggregate.category_counts,
            aggregate.chunks_involved,
        )

        created_at = self.clock()
        record = ThreatAnalysisRecord(
            analysis_id=f"analysis-{session_id}-{int(created_at.timestamp() * 1000)}",
            session_id=session_id,
            score=threat_score.score,
            severity=threat_score.severity,
            triggered_keywords=explanation.triggered_keywords,
            breakdown=threat_score.breakdown,
            category_counts=dict(aggregate.category_counts),
            explanation_text=explanation.summary,
            details=explanation.details,
            chunks_involved=aggregate.chunks_involved,
            created_at=created_at,
        )

        if persist:
            self.store.save_analysis(record)

        logger.info(
            f"Threat analysis complete: {record.severity.value} (score: {record.score})"
        )
        return record
