"""Research prompt templates for search-grounded topic research.

Holds the fixed audience/aesthetic phrasing per complexity level and visual
style, and assembles the single instruction sent to the text model.

Dependencies: infogenius.models.infographic
System role: Instruction set for the research stage
"""

from infogenius.models.infographic import ComplexityLevel, VisualStyle

LEVEL_INSTRUCTIONS: dict[str, str] = {
    ComplexityLevel.ELEMENTARY.value: (
        "Target Audience: Elementary School (Ages 6-10). Style: Bright, simple, fun. "
        "Use large clear icons and very minimal text labels."
    ),
    ComplexityLevel.HIGH_SCHOOL.value: (
        "Target Audience: High School. Style: Standard Textbook. Clean lines, clear labels, "
        "accurate maps or diagrams. Avoid cartoony elements."
    ),
    ComplexityLevel.COLLEGE.value: (
        "Target Audience: University. Style: Academic Journal. High detail, data-rich, "
        "precise cross-sections or complex schematics."
    ),
    ComplexityLevel.EXPERT.value: (
        "Target Audience: Industry Expert. Style: Technical Blueprint/Schematic. Extremely dense "
        "detail, monochrome or technical coloring, precise annotations."
    ),
}
DEFAULT_LEVEL_INSTRUCTION = "Target Audience: General Public. Style: Clear and engaging."

STYLE_INSTRUCTIONS: dict[str, str] = {
    VisualStyle.MINIMALIST.value: (
        "Aesthetic: Bauhaus Minimalist. Flat vector art, limited color palette (2-3 colors), "
        "reliance on negative space and simple geometric shapes."
    ),
    VisualStyle.REALISTIC.value: (
        "Aesthetic: Photorealistic Composite. Cinematic lighting, 8k resolution, highly detailed "
        "textures. Looks like a photograph."
    ),
    VisualStyle.CARTOON.value: (
        "Aesthetic: Educational Comic. Vibrant colors, thick outlines, expressive cel-shaded style."
    ),
    VisualStyle.VINTAGE.value: (
        "Aesthetic: 19th Century Scientific Lithograph. Engraving style, sepia tones, textured "
        "paper background, fine hatch lines."
    ),
    VisualStyle.FUTURISTIC.value: (
        "Aesthetic: Cyberpunk HUD. Glowing neon blue/cyan lines on dark background, holographic "
        "data visualization, 3D wireframes."
    ),
    VisualStyle.RENDER_3D.value: (
        "Aesthetic: 3D Isometric Render. Claymorphism or high-gloss plastic texture, studio "
        "lighting, soft shadows, looks like a physical model."
    ),
    VisualStyle.SKETCH.value: (
        "Aesthetic: Da Vinci Notebook. Ink on parchment sketch, handwritten annotations style, "
        "rough but accurate lines."
    ),
}
DEFAULT_STYLE_INSTRUCTION = (
    "Aesthetic: High-quality digital scientific illustration. Clean, modern, highly detailed."
)

CONTEXT_BLOCK_TEMPLATE = """
ADDITIONAL USER CONTEXT:
The user has provided the following context.
If it is a file content, use it as a primary source.
If it is a URL, use the Google Search tool to visit and verify the content of the URL if needed, and use it as a primary source.

--- BEGIN CONTEXT ---
{context}
--- END CONTEXT ---
"""

RESEARCH_PROMPT_TEMPLATE = """
You are an expert visual researcher.
Your goal is to research the topic: "{topic}" and create a plan for an infographic.

**IMPORTANT: Use the Google Search tool to find the most accurate, up-to-date information about this topic.**

Context:
{level_instruction}
{style_instruction}
Language: {language}
{context_block}
Please provide your response in the following format EXACTLY:

FACTS:
- [Fact 1]
- [Fact 2]
- [Fact 3]

IMAGE_PROMPT:
[A highly detailed image generation prompt describing the visual composition, colors, and layout for the infographic. Do not include citations in the prompt.]
"""


def _value(member: ComplexityLevel | VisualStyle | str) -> str:
    return getattr(member, "value", member)


def get_level_instruction(level: ComplexityLevel | str) -> str:
    """Audience phrasing for a complexity level, General Public when unknown."""
    return LEVEL_INSTRUCTIONS.get(_value(level), DEFAULT_LEVEL_INSTRUCTION)


def get_style_instruction(style: VisualStyle | str) -> str:
    """Aesthetic phrasing for a visual style, generic illustration when unknown."""
    return STYLE_INSTRUCTIONS.get(_value(style), DEFAULT_STYLE_INSTRUCTION)


def build_research_prompt(
    topic: str,
    level: ComplexityLevel | str,
    style: VisualStyle | str,
    language: str,
    context: str | None = None,
) -> str:
    """Assemble the research instruction sent to the grounded text model.

    Args:
        topic: Topic to research (or the synthesized topic for context-only requests)
        level: Target complexity level
        style: Target visual style
        language: Output language for facts and labels
        context: Optional concatenated user context sources

    Returns:
        str: Complete instruction text
    """
    context_block = CONTEXT_BLOCK_TEMPLATE.format(context=context) if context else ""
    return RESEARCH_PROMPT_TEMPLATE.format(
        topic=topic,
        level_instruction=get_level_instruction(level),
        style_instruction=get_style_instruction(style),
        language=language,
        context_block=context_block,
    )


def build_fallback_image_prompt(
    topic: str,
    level: ComplexityLevel | str,
    style: VisualStyle | str,
) -> str:
    """Image prompt used when the research response has no IMAGE_PROMPT section."""
    return (
        f"Create a detailed infographic about {topic}. "
        f"{get_level_instruction(level)} {get_style_instruction(style)}"
    )
