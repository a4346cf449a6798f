"""Deterministic keyword-and-rule threat analysis for speech transcripts."""

__version__ = "0.1.0"
