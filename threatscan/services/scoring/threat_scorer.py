"""Weighted threat scoring with repetition and spread bonuses."""

from __future__ import annotations

from threatscan.domain.threat import (
    ScoreBreakdown,
    SessionAggregate,
    Severity,
    ThreatCategory,
    ThreatScore,
)
from threatscan.utils.logging import get_logger

logger = get_logger(__name__)

# Spread bonus applies only above this many involved segments
SPREAD_MIN_CHUNKS = 2


class ThreatScorer:
    """Converts a session aggregate into a score and severity.

    The score is always the exact sum of the returned breakdown. Severity is
    derived from the score alone.
    """

    def score(self, aggregate: SessionAggregate) -> ThreatScore:
        """Calculate the threat score for a session.

        Steps:
            1. Base score: count x weight per category
            2. Repetition bonus: floor((total - unique) / 2) when words repeat
            3. Spread bonus: floor(chunks / 2) when more than two chunks hit
            4. Both bonuses are recorded as one combined breakdown field
            5. Severity from the final score

        Args:
            aggregate: Session aggregate

        Returns:
            ThreatScore with breakdown
        """
        category_scores = {
            category: aggregate.category_counts.get(category, 0) * category.weight
            for category in ThreatCategory
        }

        total = sum(aggregate.category_counts.get(c, 0) for c in ThreatCategory)
        bonus = self.repetition_bonus(total, len(aggregate.unique_words))
        bonus += self.spread_bonus(aggregate.chunks_involved)

        breakdown = ScoreBreakdown(category_scores=category_scores, repetition_bonus=bonus)
        score = breakdown.total
        severity = Severity.from_score(score)

        logger.debug(
            f"Scored session: base={score - bonus}, bonus={bonus}, "
            f"score={score}, severity={severity.value}"
        )
        return ThreatScore(score=score, severity=severity, breakdown=breakdown)

    @staticmethod
    def repetition_bonus(total_matches: int, unique_words: int) -> int:
        """Extra points when occurrences exceed distinct words (sub-linear)."""
        if unique_words > 0 and total_matches > unique_words:
            return (total_matches - unique_words) // 2
        return 0

    @staticmethod
    def spread_bonus(chunks_involved: int) -> int:
        """Extra points when threats recur across more than two segments."""
        if chunks_involved > SPREAD_MIN_CHUNKS:
            return chunks_involved // 2
        return 0
