"""
Gemini client factory.

Builds a fresh `genai.Client` for every request so a key selected at runtime
takes effect on the next call without restarting the service.

Dependencies: google.genai
System role: Credential holder for the generative clients
"""

import logging

from google import genai

logger = logging.getLogger(__name__)


class GeminiClientFactory:
    """Callable returning a Gemini client bound to the current API key."""

    def __init__(self, api_key: str | None = None) -> None:
        self._api_key = api_key or None

    @property
    def has_api_key(self) -> bool:
        return bool(self._api_key)

    def set_api_key(self, api_key: str) -> None:
        """Replace the key used by subsequent requests."""
        if not api_key or not api_key.strip():
            raise ValueError("api_key cannot be empty")
        self._api_key = api_key.strip()
        logger.info(f"{__name__}:set_api_key - Gemini API key updated")

    def __call__(self) -> genai.Client:
        return genai.Client(api_key=self._api_key)
