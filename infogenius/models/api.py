"""API request/response models.

Defines Pydantic DTOs for the HTTP contract.

Dependencies: pydantic
System role: API data models for infographic, history, context and storage endpoints
"""

from pydantic import BaseModel, Field

from infogenius.models.context import ContextSource
from infogenius.models.infographic import (
    AspectRatio,
    ComplexityLevel,
    GeneratedImage,
    ImageResolution,
    SearchResultItem,
    VisualStyle,
)
from infogenius.models.storage import StorageSource


class GenerateRequest(BaseModel):
    """Request to research a topic and render an infographic."""

    topic: str = Field(default="", description="Topic to visualize; may be blank when context sources exist")
    level: ComplexityLevel = Field(default=ComplexityLevel.EXPERT)
    style: VisualStyle = Field(default=VisualStyle.DEFAULT)
    language: str = Field(default="English", min_length=1)
    aspect_ratio: AspectRatio = Field(default=AspectRatio.LANDSCAPE_16_9)
    resolution: ImageResolution = Field(default=ImageResolution.RES_1K)


class EditRequest(BaseModel):
    """Request to modify the active image."""

    instruction: str = Field(min_length=1, description="Edit instruction or correction")
    fix: bool = Field(
        default=False,
        description="Wrap the instruction in the simplify-and-fix directive",
    )


class FileContextRequest(BaseModel):
    name: str = Field(min_length=1, description="Original file name")
    content: str = Field(description="File text content")


class LinkContextRequest(BaseModel):
    url: str = Field(description="Link to use as research context")


class StorageOverrideRequest(BaseModel):
    """Manual GCS overrides. Blank values remove the override."""

    bucket: str | None = None
    token: str | None = None


class CredentialsRequest(BaseModel):
    api_key: str = Field(min_length=1, description="Gemini API key")


class HistoryEntryResponse(BaseModel):
    """History entry without the image payload."""

    id: str
    prompt: str
    timestamp: int
    level: ComplexityLevel
    style: VisualStyle
    language: str
    aspect_ratio: AspectRatio
    resolution: ImageResolution

    @classmethod
    def from_image(cls, image: GeneratedImage) -> "HistoryEntryResponse":
        return cls(**image.model_dump(exclude={"data"}))


class AppStateResponse(BaseModel):
    """Presented application state."""

    history: list[HistoryEntryResponse]
    active_image_id: str | None
    active_image: GeneratedImage | None = Field(
        default=None,
        description="Active entry including its data URI",
    )
    context_sources: list[ContextSource]
    is_loading: bool
    loading_step: int
    loading_message: str
    loading_facts: list[str]
    search_results: list[SearchResultItem]
    error: str | None
    error_kind: str | None
    has_api_key: bool
    is_syncing: bool


class StorageConfigResponse(BaseModel):
    """Resolved storage configuration with the token masked."""

    bucket: str | None
    token_set: bool
    is_configured: bool
    source: StorageSource
