"""
Gemini model configuration.

API credential and model identifiers for research, generation and editing.

Dependencies: pydantic_settings
System role: Generative AI provider configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeminiSettings(BaseSettings):
    """Settings for the hosted Gemini text and image models."""

    model_config = SettingsConfigDict(
        env_prefix="GEMINI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("API_KEY", "GEMINI_API_KEY"),
        description="Gemini API key (API_KEY wins over GEMINI_API_KEY)",
    )
    text_model: str = Field(
        default="gemini-3-pro-preview",
        description="Model used for search-grounded topic research",
    )
    image_model: str = Field(
        default="gemini-3-pro-image-preview",
        description="Model used for infographic generation",
    )
    edit_model: str = Field(
        default="gemini-3-pro-image-preview",
        description="Model used for iterative image edits",
    )
