"""Threat scoring service."""

from .threat_scorer import ThreatScorer

__all__ = ["ThreatScorer"]
