"""Pydantic domain models and API contracts."""

from infogenius.models.context import ContextSource, ContextSourceType
from infogenius.models.infographic import (
    AspectRatio,
    ComplexityLevel,
    GeneratedImage,
    ImageResolution,
    ResearchResult,
    SearchResultItem,
    VerificationResult,
    VisualStyle,
)
from infogenius.models.storage import ConfigSource, StorageConfig, StorageSource, UploadStatus

__all__ = [
    "AspectRatio",
    "ComplexityLevel",
    "ConfigSource",
    "ContextSource",
    "ContextSourceType",
    "GeneratedImage",
    "ImageResolution",
    "ResearchResult",
    "SearchResultItem",
    "StorageConfig",
    "StorageSource",
    "UploadStatus",
    "VerificationResult",
    "VisualStyle",
]
