"""
Infographic domain models.

Generation parameters, history entries and research output.

Dependencies: pydantic
System role: Core data structures shared by clients, controller and API
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ComplexityLevel(str, Enum):
    """Target audience of the infographic."""

    ELEMENTARY = "Elementary"
    HIGH_SCHOOL = "High School"
    COLLEGE = "College"
    EXPERT = "Expert"


class VisualStyle(str, Enum):
    """Aesthetic applied to the rendered infographic."""

    DEFAULT = "Default"
    MINIMALIST = "Minimalist"
    REALISTIC = "Realistic"
    CARTOON = "Cartoon"
    VINTAGE = "Vintage"
    FUTURISTIC = "Futuristic"
    RENDER_3D = "3D Render"
    SKETCH = "Sketch"


class AspectRatio(str, Enum):
    """Aspect ratios accepted by the image model."""

    SQUARE = "1:1"
    PORTRAIT_2_3 = "2:3"
    LANDSCAPE_3_2 = "3:2"
    PORTRAIT_3_4 = "3:4"
    LANDSCAPE_4_3 = "4:3"
    PORTRAIT_4_5 = "4:5"
    LANDSCAPE_5_4 = "5:4"
    PORTRAIT_9_16 = "9:16"
    LANDSCAPE_16_9 = "16:9"
    ULTRAWIDE_21_9 = "21:9"


class ImageResolution(str, Enum):
    """Output size tier of the image model."""

    RES_1K = "1K"
    RES_2K = "2K"
    RES_4K = "4K"


class SearchResultItem(BaseModel):
    """Web citation returned by search grounding."""

    title: str = Field(description="Page title reported by the search tool")
    url: str = Field(description="Cited page URI")


class ResearchResult(BaseModel):
    """Output of the research stage, consumed by image generation."""

    image_prompt: str = Field(description="Prompt handed to the image model")
    facts: list[str] = Field(default_factory=list, description="Up to 5 researched facts")
    search_results: list[SearchResultItem] = Field(
        default_factory=list,
        description="Citations deduplicated by URL",
    )


class VerificationResult(BaseModel):
    """Outcome of the accuracy check."""

    is_accurate: bool
    critique: str


class GeneratedImage(BaseModel):
    """One entry of the image history. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Time-derived identifier (epoch milliseconds)")
    data: str = Field(description="PNG data URI of the image")
    prompt: str = Field(description="Topic or edit instruction that produced the image")
    timestamp: int = Field(description="Creation time in epoch milliseconds")
    level: ComplexityLevel
    style: VisualStyle
    language: str
    aspect_ratio: AspectRatio
    resolution: ImageResolution
