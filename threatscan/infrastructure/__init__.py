"""Infrastructure layer - External service clients."""

from .openai_client import OpenAIClient
from .weaviate_client import WeaviateClient

__all__ = ["OpenAIClient", "WeaviateClient"]
