"""OpenAI client handle for the translation engine."""

from __future__ import annotations

from typing import Optional

import openai

from threatscan.config import OpenAIConfig
from threatscan.utils.logging import get_logger

logger = get_logger(__name__)


class OpenAIClient:
    """Lazily opened, explicitly closed OpenAI connection."""

    def __init__(self, config: OpenAIConfig):
        """Initialize OpenAI client handle.

        Args:
            config: OpenAI configuration
        """
        self.config = config
        self.client: Optional[openai.OpenAI] = None

    def connect(self) -> openai.OpenAI:
        """Create the underlying client on first use."""
        if self.client:
            return self.client

        if self.config.base_url:
            self.client = openai.OpenAI(
                api_key=self.config.api_key, base_url=self.config.base_url
            )
            logger.info(f"Using custom LLM endpoint: {self.config.base_url}")
        else:
            self.client = openai.OpenAI(api_key=self.config.api_key)

        logger.info(f"Initialized OpenAI client with model: {self.config.model}")
        return self.client

    def close(self):
        """Close the underlying HTTP client."""
        if self.client:
            self.client.close()
            logger.info("Closed OpenAI client")
            self.client = None
