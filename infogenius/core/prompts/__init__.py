"""Prompt templates for research and image editing."""

from infogenius.core.prompts.edit_prompt import get_fix_prompt
from infogenius.core.prompts.research_prompt import (
    build_fallback_image_prompt,
    build_research_prompt,
    get_level_instruction,
    get_style_instruction,
)

__all__ = [
    "build_fallback_image_prompt",
    "build_research_prompt",
    "get_fix_prompt",
    "get_level_instruction",
    "get_style_instruction",
]
