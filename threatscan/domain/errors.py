"""Error taxonomy for the threat analysis pipeline."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised at load time when dictionaries or settings are unusable.

    This is a deployment defect, never a per-call condition: a dictionary
    missing a category would make scores incomparable across languages.
    """

    pass


class NotFoundError(LookupError):
    """Raised when a session has no transcript segments to analyze."""

    def __init__(self, session_id: str, message: str | None = None):
        self.session_id = session_id
        super().__init__(
            message
            or f"No transcripts found for session {session_id}: "
            "transcribe audio before analyzing"
        )
