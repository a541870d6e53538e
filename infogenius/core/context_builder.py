"""
Research context builder.

Turns session context sources into the context block of the research prompt
and derives the topic used when the user supplied sources only.

Dependencies: infogenius.models.context
System role: Formatting helpers for the generation cycle
"""

from collections.abc import Sequence

from infogenius.models.context import ContextSource, ContextSourceType

SOURCE_SEPARATOR = "\n\n---\n\n"


def format_context_source(index: int, source: ContextSource) -> str:
    """Format one source as a numbered SOURCE block (1-based index)."""
    if source.type == ContextSourceType.FILE:
        return f"SOURCE {index} (File: {source.name}):\n{source.content}"
    return (
        f"SOURCE {index} (URL: {source.content}):\n"
        "Please visit this URL to gather relevant context."
    )


def build_context_data(sources: Sequence[ContextSource]) -> str | None:
    """
    Concatenate context sources for the research prompt.

    Args:
        sources: Context sources in the order they were added

    Returns:
        str | None: Joined SOURCE blocks, or None when there are no sources
    """
    if not sources:
        return None
    return SOURCE_SEPARATOR.join(
        format_context_source(index, source) for index, source in enumerate(sources, start=1)
    )


def build_effective_topic(topic: str, sources: Sequence[ContextSource]) -> str:
    """
    Derive the topic sent to research.

    A blank topic with sources becomes a request to visualize the sources.

    Args:
        topic: Raw topic from the user
        sources: Current context sources

    Returns:
        str: Trimmed topic, or the synthesized sources topic
    """
    effective_topic = topic.strip()
    if not effective_topic and sources:
        source_names = ", ".join(source.name for source in sources)
        effective_topic = (
            "Create a comprehensive infographic visualizing the key concepts "
            f"from the provided sources ({source_names})."
        )
    return effective_topic
