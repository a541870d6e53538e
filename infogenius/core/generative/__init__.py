"""Gemini-backed research and image clients."""

from infogenius.core.generative.client_factory import GeminiClientFactory
from infogenius.core.generative.image_client import ImageClient
from infogenius.core.generative.research_client import ResearchClient

__all__ = ["GeminiClientFactory", "ImageClient", "ResearchClient"]
