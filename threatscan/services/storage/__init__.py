"""Storage collaborators for transcripts, translations and analyses."""

from .base import SessionStore
from .memory_store import InMemorySessionStore
from .weaviate_store import WeaviateSessionStore

__all__ = ["InMemorySessionStore", "SessionStore", "WeaviateSessionStore"]
