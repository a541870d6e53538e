"""Edit prompt templates for iterative image modification.

Dependencies: None (pure prompt templates)
System role: Instruction wrapper for the "fix" edit mode
"""

FIX_PROMPT_TEMPLATE = """
Edit this image.
Goal: Simplify and Fix.
Instruction: {correction}.
Ensure the design is clean and any text is large and legible.
"""


def get_fix_prompt(correction: str) -> str:
    """Wrap a correction in the simplify/clarify directive.

    Args:
        correction: User-supplied correction

    Returns:
        str: Instruction sent alongside the current image
    """
    return FIX_PROMPT_TEMPLATE.format(correction=correction)
