"""Fold per-segment analyses into a session aggregate."""

from __future__ import annotations

from typing import Iterable

from threatscan.domain.threat import (
    ChunkAnalysis,
    SessionAggregate,
    empty_category_counts,
)


class SessionAggregator:
    """Aggregates matches across all chunks in a session."""

    def aggregate(self, chunk_analyses: Iterable[ChunkAnalysis]) -> SessionAggregate:
        """Sum category counts, collect unique words and concatenate matches.

        Chunk order is preserved in ``all_matches``. Empty input yields an
        all-zero aggregate.
        """
        category_counts = empty_category_counts()
        unique_words = set()
        all_matches = []
        chunks_involved = 0

        for analysis in chunk_analyses:
            if analysis.has_threats:
                chunks_involved += 1

            for match in analysis.matches:
                category_counts[match.category] += 1
                unique_words.add(match.word.lower())
                all_matches.append(match)

        return SessionAggregate(
            total_matches=len(all_matches),
            category_counts=category_counts,
            unique_words=frozenset(unique_words),
            chunks_involved=chunks_involved,
            all_matches=tuple(all_matches),
        )
