"""Tests for research and fix prompt assembly."""

from infogenius.core.prompts import (
    build_fallback_image_prompt,
    build_research_prompt,
    get_fix_prompt,
    get_level_instruction,
    get_style_instruction,
)
from infogenius.core.prompts.research_prompt import (
    DEFAULT_LEVEL_INSTRUCTION,
    DEFAULT_STYLE_INSTRUCTION,
)
from infogenius.models.infographic import ComplexityLevel, VisualStyle


class TestInstructions:
    """Test audience and aesthetic phrasing lookups."""

    def test_level_instruction_per_level(self):
        """Each level maps to its own audience phrasing."""
        assert "Elementary School" in get_level_instruction(ComplexityLevel.ELEMENTARY)
        assert "High School" in get_level_instruction(ComplexityLevel.HIGH_SCHOOL)
        assert "University" in get_level_instruction(ComplexityLevel.COLLEGE)
        assert "Industry Expert" in get_level_instruction(ComplexityLevel.EXPERT)

    def test_unknown_level_falls_back_to_general_public(self):
        """Unknown level strings use the General Public phrasing."""
        assert get_level_instruction("Toddler") == DEFAULT_LEVEL_INSTRUCTION

    def test_style_instruction_accepts_plain_strings(self):
        """Enum values and their string forms resolve identically."""
        assert get_style_instruction("3D Render") == get_style_instruction(VisualStyle.RENDER_3D)
        assert "Isometric" in get_style_instruction("3D Render")

    def test_default_style_uses_generic_illustration(self):
        """The Default style has no dedicated entry."""
        assert get_style_instruction(VisualStyle.DEFAULT) == DEFAULT_STYLE_INSTRUCTION


class TestBuildResearchPrompt:
    """Test the research instruction sent to the text model."""

    def test_prompt_contains_topic_and_format_markers(self):
        """Prompt names the topic, language and the two response sections."""
        prompt = build_research_prompt(
            "Photosynthesis", ComplexityLevel.HIGH_SCHOOL, VisualStyle.DEFAULT, "English"
        )

        assert '"Photosynthesis"' in prompt
        assert "Language: English" in prompt
        assert "FACTS:" in prompt
        assert "IMAGE_PROMPT:" in prompt
        assert "Google Search" in prompt

    def test_prompt_without_context_has_no_context_block(self):
        """No BEGIN CONTEXT marker when context is absent."""
        prompt = build_research_prompt("Volcanoes", "Expert", "Minimalist", "French")
        assert "BEGIN CONTEXT" not in prompt

    def test_prompt_with_context_wraps_it_in_markers(self):
        """Context appears between the BEGIN/END markers."""
        prompt = build_research_prompt(
            "Volcanoes", "Expert", "Minimalist", "French", context="SOURCE 1 (File: notes.txt):\nlava"
        )

        begin = prompt.index("--- BEGIN CONTEXT ---")
        end = prompt.index("--- END CONTEXT ---")
        assert begin < prompt.index("lava") < end

    def test_fallback_image_prompt_contains_topic(self):
        """Fallback prompt embeds the topic and both instruction phrasings."""
        prompt = build_fallback_image_prompt("Tides", ComplexityLevel.ELEMENTARY, VisualStyle.SKETCH)

        assert prompt.startswith("Create a detailed infographic about Tides.")
        assert get_level_instruction(ComplexityLevel.ELEMENTARY) in prompt
        assert get_style_instruction(VisualStyle.SKETCH) in prompt


def test_fix_prompt_wraps_correction():
    """Correction is embedded in the simplify-and-fix directive."""
    prompt = get_fix_prompt("Remove the duplicated label")

    assert "Goal: Simplify and Fix." in prompt
    assert "Instruction: Remove the duplicated label." in prompt
