"""Static keyword data shipped with threatscan."""

from .threat_dictionaries import BASE_LANGUAGE, THREAT_DICTIONARIES

__all__ = ["BASE_LANGUAGE", "THREAT_DICTIONARIES"]
