"""Session analysis orchestration."""

from .analysis_service import ThreatAnalysisService

__all__ = ["ThreatAnalysisService"]
