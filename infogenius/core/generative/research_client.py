"""Search-grounded research client.

Sends one research instruction to the Gemini text model with the Google
Search tool enabled, then parses the plain-text answer into facts and an
image-generation prompt and collects web citations from grounding metadata.

Dependencies: logging, asyncio, re, google.genai, prompts, models
System role: First stage of the generation cycle
"""

import asyncio
import logging
import re
from typing import Any, Callable

from google import genai
from google.genai import types

from infogenius.core.prompts.research_prompt import (
    build_fallback_image_prompt,
    build_research_prompt,
)
from infogenius.models.infographic import (
    ComplexityLevel,
    ResearchResult,
    SearchResultItem,
    VisualStyle,
)

logger = logging.getLogger(__name__)

MAX_FACTS = 5

_FACTS_PATTERN = re.compile(r"FACTS:\s*(.*?)(?=IMAGE_PROMPT:|\Z)", re.IGNORECASE | re.DOTALL)
_IMAGE_PROMPT_PATTERN = re.compile(r"IMAGE_PROMPT:\s*(.*)\Z", re.IGNORECASE | re.DOTALL)
_BULLET_PREFIX = re.compile(r"^-\s*")


def parse_facts(text: str) -> list[str]:
    """Extract up to five facts from the FACTS: block.

    Args:
        text: Raw model response text

    Returns:
        list[str]: Facts in original order, bullet dashes stripped
    """
    match = _FACTS_PATTERN.search(text)
    if not match:
        return []
    facts = []
    for line in match.group(1).strip().split("\n"):
        fact = _BULLET_PREFIX.sub("", line).strip()
        if fact:
            facts.append(fact)
    return facts[:MAX_FACTS]


def parse_image_prompt(text: str, fallback: str) -> str:
    """Extract the IMAGE_PROMPT: block, or return the fallback when absent."""
    match = _IMAGE_PROMPT_PATTERN.search(text)
    if not match:
        return fallback
    return match.group(1).strip()


def extract_search_results(response: Any) -> list[SearchResultItem]:
    """Collect web citations from the first candidate's grounding chunks.

    Only chunks carrying both a web title and URI are kept. Duplicate URLs
    are dropped, the first occurrence wins.
    """
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    results: list[SearchResultItem] = []
    seen_urls: set[str] = set()
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        uri = getattr(web, "uri", None)
        title = getattr(web, "title", None)
        if not uri or not title or uri in seen_urls:
            continue
        seen_urls.add(uri)
        results.append(SearchResultItem(title=title, url=uri))
    return results


class ResearchClient:
    """Grounded text-model client producing a `ResearchResult` per topic."""

    def __init__(
        self,
        client_factory: Callable[[], genai.Client],
        model_id: str = "gemini-3-pro-preview",
    ) -> None:
        """
        Initialize research client.

        Args:
            client_factory: Returns a Gemini client for each request
            model_id: Text model identifier
        """
        self._client_factory = client_factory
        self._model_id = model_id

    async def research_topic(
        self,
        topic: str,
        level: ComplexityLevel | str,
        style: VisualStyle | str,
        language: str,
        context: str | None = None,
    ) -> ResearchResult:
        """Research a topic and plan the infographic.

        Makes exactly one model call. Transport and parsing exceptions
        propagate to the caller unchanged.

        Args:
            topic: Topic to research
            level: Target complexity level
            style: Target visual style
            language: Output language
            context: Optional concatenated user context

        Returns:
            ResearchResult: Image prompt, facts and deduplicated citations
        """
        logger.info(
            f"{__name__}:research_topic - START "
            f"topic_len={len(topic)}, has_context={bool(context)}"
        )
        prompt = build_research_prompt(topic, level, style, language, context)

        response = await asyncio.to_thread(
            self._client_factory().models.generate_content,
            model=self._model_id,
            contents=prompt,
            config=types.GenerateContentConfig(
                tools=[types.Tool(google_search=types.GoogleSearch())],
            ),
        )

        text = response.text or ""
        facts = parse_facts(text)
        image_prompt = parse_image_prompt(
            text, build_fallback_image_prompt(topic, level, style)
        )
        search_results = extract_search_results(response)

        logger.info(
            f"{__name__}:research_topic - END "
            f"facts={len(facts)}, citations={len(search_results)}, "
            f"prompt_len={len(image_prompt)}"
        )
        return ResearchResult(
            image_prompt=image_prompt,
            facts=facts,
            search_results=search_results,
        )
