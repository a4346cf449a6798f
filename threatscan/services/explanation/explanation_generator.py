"""Human-readable explanations for threat detections."""

from __future__ import annotations

from typing import Dict, List, Mapping, Sequence

from threatscan.domain.threat import (
    Explanation,
    KeywordMatch,
    Severity,
    ThreatCategory,
    TriggeredKeyword,
)

SAFE_SUMMARY = "Session classified as SAFE. No significant threat indicators detected."


class ExplanationGenerator:
    """Builds summaries and itemized rationale from score evidence.

    Score, severity and counts are read-only inputs here; nothing in this
    class recomputes them.
    """

    def __init__(self, max_words_per_category: int = 5, max_context_examples: int = 3):
        """Initialize explanation generator.

        Args:
            max_words_per_category: Distinct words listed per category line
            max_context_examples: Context excerpts appended to the details
        """
        self.max_words_per_category = max_words_per_category
        self.max_context_examples = max_context_examples

    def explain(
        self,
        severity: Severity,
        score: int,
        matches: Sequence[KeywordMatch],
        category_counts: Mapping[ThreatCategory, int],
        chunks_involved: int,
    ) -> Explanation:
        """Generate the explanation for one session.

        Args:
            severity: Severity from the scorer
            score: Score from the scorer
            matches: All matches in segment order
            category_counts: Match count per category
            chunks_involved: Segments with at least one match

        Returns:
            Explanation with summary, details and triggered keywords
        """
        summary = self.summary(severity, score, len(matches), chunks_involved)
        triggered_keywords = self.triggered_keywords(matches)

        category_explanations = []
        for category in ThreatCategory:
            count = category_counts.get(category, 0)
            if count > 0:
                category_explanations.append(
                    self._category_explanation(
                        category,
                        count,
                        [m for m in matches if m.category == category],
                    )
                )

        details = list(category_explanations)
        if chunks_involved > 1:
            details.append(f"Threats detected across {chunks_involved} audio segments")

        examples = self.context_examples(matches)
        if examples:
            details.append("Context examples:")
            details.extend(f'  • "{example}"' for example in examples)

        return Explanation(
            summary=summary,
            details=tuple(details),
            triggered_keywords=tuple(triggered_keywords),
            category_explanations=tuple(category_explanations),
        )

    @staticmethod
    def summary(
        severity: Severity, score: int, match_count: int, chunks_involved: int
    ) -> str:
        """One-sentence summary; fixed text for SAFE sessions."""
        if severity is Severity.SAFE:
            return SAFE_SUMMARY

        keywords = "keyword" if match_count == 1 else "keywords"
        segments = "segment" if chunks_involved == 1 else "segments"
        return (
            f"Session flagged as {severity.display_name} (score: {score}) due to "
            f"{match_count} threat-related {keywords} detected across "
            f"{chunks_involved} audio {segments}."
        )

    @staticmethod
    def triggered_keywords(matches: Sequence[KeywordMatch]) -> List[TriggeredKeyword]:
        """Group matches by lowercased word, most frequent first.

        The category is the one seen first for that word. Ties keep
        first-seen order.
        """
        counts: Dict[str, int] = {}
        categories: Dict[str, ThreatCategory] = {}
        for match in matches:
            key = match.word.lower()
            if key not in counts:
                counts[key] = 0
                categories[key] = match.category
            counts[key] += 1

        keywords = [
            TriggeredKeyword(word=word, category=categories[word], count=count)
            for word, count in counts.items()
        ]
        return sorted(keywords, key=lambda kw: kw.count, reverse=True)

    def context_examples(self, matches: Sequence[KeywordMatch]) -> List[str]:
        """Distinct context windows in first-seen order, capped."""
        examples: List[str] = []
        seen = set()

        for match in matches:
            if len(examples) >= self.max_context_examples:
                break
            if not match.context:
                continue

            normalized = match.context.lower().strip()
            if normalized in seen:
                continue

            seen.add(normalized)
            examples.append(match.context)

        return examples

    def _category_explanation(
        self, category: ThreatCategory, count: int, matches: Sequence[KeywordMatch]
    ) -> str:
        unique_words = list(dict.fromkeys(m.word for m in matches))
        word_list = ", ".join(
            f'"{word}"' for word in unique_words[: self.max_words_per_category]
        )

        if count == 1:
            return f"{category.label} keyword detected: {word_list}"

        more = ""
        if len(unique_words) > self.max_words_per_category:
            more = f" and {len(unique_words) - self.max_words_per_category} more"
        return f"{count} {category.label} keywords detected: {word_list}{more}"


def short_explanation(severity: Severity, score: int) -> str:
    """Badge-length description of a severity."""
    if severity is Severity.SAFE:
        return "No threats detected"
    if severity is Severity.SUSPICIOUS:
        return f"Potential threat indicators (score: {score})"
    return f"High-risk content detected (score: {score})"


def format_for_export(explanation: Explanation) -> str:
    """Plain-text rendering: summary, then a bulleted Details section."""
    text = explanation.summary + "\n\n"
    if explanation.details:
        text += "Details:\n"
        text += "".join(f"- {detail}\n" for detail in explanation.details)
    return text
