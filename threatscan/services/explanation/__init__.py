"""Explanation generation for scored sessions."""

from .explanation_generator import (
    ExplanationGenerator,
    format_for_export,
    short_explanation,
)

__all__ = ["ExplanationGenerator", "format_for_export", "short_explanation"]
