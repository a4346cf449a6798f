"""Weaviate client handle for session storage."""

from __future__ import annotations

from typing import Optional

import weaviate
from weaviate.classes.init import Auth

from threatscan.config import WeaviateConfig
from threatscan.utils.logging import get_logger

logger = get_logger(__name__)


class WeaviateClient:
    """Owns one Weaviate connection for its lifetime.

    Construct it explicitly, pass it to the storage layer and close it when
    done; nothing in threatscan keeps a module-level connection.
    """

    def __init__(self, config: WeaviateConfig):
        """Initialize Weaviate client.

        Args:
            config: Weaviate configuration
        """
        self.config = config
        self.client: Optional[weaviate.WeaviateClient] = None

    def connect(self) -> weaviate.WeaviateClient:
        """Establish connection to Weaviate.

        Returns:
            Connected Weaviate client
        """
        if self.client and self.client.is_ready():
            return self.client

        logger.info(f"Connecting to Weaviate at {self.config.url}")

        self.client = weaviate.connect_to_weaviate_cloud(
            cluster_url=self.config.url,
            auth_credentials=Auth.api_key(self.config.api_key),
        )

        if self.client.is_ready():
            logger.info("Successfully connected to Weaviate")
        else:
            logger.error("Failed to connect to Weaviate")

        return self.client

    def is_ready(self) -> bool:
        """Check if client is connected and ready."""
        return self.client is not None and self.client.is_ready()

    def collection(self, name: str):
        """Return a collection handle, requiring a live connection."""
        if not self.is_ready():
            raise RuntimeError("Weaviate client not connected")
        return self.client.collections.get(name)

    def close(self):
        """Close the Weaviate connection."""
        if self.client:
            self.client.close()
            logger.info("Closed Weaviate connection")
            self.client = None
