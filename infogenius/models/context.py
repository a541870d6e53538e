"""
User-supplied research context.

Dependencies: pydantic
System role: Session-scoped context sources prepended to research prompts
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ContextSourceType(str, Enum):
    FILE = "file"
    URL = "url"


class ContextSource(BaseModel):
    """File content or link supplied as extra grounding material."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Random token identifying the source in this session")
    type: ContextSourceType
    name: str = Field(description="File name or the URL itself")
    content: str = Field(description="Raw text content for files, the URL for links")
