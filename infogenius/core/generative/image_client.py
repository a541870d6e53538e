"""Gemini image client for infographic generation and editing.

Generate renders a research-derived prompt at the requested aspect ratio and
size tier. Edit and fix resubmit the current image bytes with an instruction.
Every operation makes one network attempt and returns the first inline image
part of the response as a PNG data URI.

Dependencies: logging, asyncio, base64, re, google.genai, prompts, exceptions
System role: Second stage of the generation cycle and the edit cycle
"""

import asyncio
import base64
import logging
import re
from typing import Any, Callable

from google import genai
from google.genai import types

from infogenius.core.exceptions import ImageGenerationError
from infogenius.core.prompts.edit_prompt import get_fix_prompt
from infogenius.models.infographic import (
    AspectRatio,
    ComplexityLevel,
    ImageResolution,
    VerificationResult,
    VisualStyle,
)

logger = logging.getLogger(__name__)

PNG_DATA_URI_PREFIX = "data:image/png;base64,"
EDIT_SOURCE_MIME_TYPE = "image/jpeg"

_DATA_URI_PREFIX = re.compile(r"^data:image/(png|jpeg|jpg);base64,")


def strip_data_uri(image: str) -> str:
    """Drop a PNG/JPEG data-URI prefix, leaving the base64 payload."""
    return _DATA_URI_PREFIX.sub("", image, count=1)


def extract_image_data_uri(response: Any) -> str | None:
    """Return the first inline image part as a PNG data URI, or None.

    Parts are scanned in order since text parts may precede the image.
    """
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    for part in parts:
        inline_data = getattr(part, "inline_data", None)
        data = getattr(inline_data, "data", None)
        if not data:
            continue
        if isinstance(data, bytes):
            data = base64.b64encode(data).decode("utf-8")
        return f"{PNG_DATA_URI_PREFIX}{data}"
    return None


class ImageClient:
    """Client for the Gemini image model."""

    def __init__(
        self,
        client_factory: Callable[[], genai.Client],
        image_model: str = "gemini-3-pro-image-preview",
        edit_model: str = "gemini-3-pro-image-preview",
    ) -> None:
        """
        Initialize image client.

        Args:
            client_factory: Returns a Gemini client for each request
            image_model: Model used for generation
            edit_model: Model used for edit and fix
        """
        self._client_factory = client_factory
        self._image_model = image_model
        self._edit_model = edit_model

    async def generate_infographic_image(
        self,
        prompt: str,
        aspect_ratio: AspectRatio | str,
        resolution: ImageResolution | str,
    ) -> str:
        """Render an infographic from a prompt.

        Args:
            prompt: Image-generation prompt from the research stage
            aspect_ratio: Requested aspect ratio (e.g. "16:9")
            resolution: Requested size tier ("1K", "2K", "4K")

        Returns:
            str: PNG data URI

        Raises:
            ImageGenerationError: If the response carries no inline image
        """
        aspect_ratio = getattr(aspect_ratio, "value", aspect_ratio)
        resolution = getattr(resolution, "value", resolution)
        logger.info(
            f"{__name__}:generate_infographic_image - START "
            f"prompt_len={len(prompt)}, aspect_ratio={aspect_ratio}, resolution={resolution}"
        )

        response = await asyncio.to_thread(
            self._client_factory().models.generate_content,
            model=self._image_model,
            contents=[types.Part.from_text(text=prompt)],
            config=types.GenerateContentConfig(
                image_config=types.ImageConfig(
                    aspect_ratio=aspect_ratio,
                    image_size=resolution,
                ),
            ),
        )

        data_uri = extract_image_data_uri(response)
        if data_uri is None:
            logger.error(f"{__name__}:generate_infographic_image - No image part in response")
            raise ImageGenerationError("Failed to generate image", model=self._image_model)

        logger.info(
            f"{__name__}:generate_infographic_image - END image_len={len(data_uri)}"
        )
        return data_uri

    async def edit_infographic_image(self, current_image: str, edit_instruction: str) -> str:
        """Apply a free-form edit instruction to an existing image.

        Args:
            current_image: PNG/JPEG data URI of the active image
            edit_instruction: Instruction sent with the image

        Returns:
            str: PNG data URI of the edited image

        Raises:
            ImageGenerationError: If the response carries no inline image
        """
        return await self._resubmit(current_image, edit_instruction, "Failed to edit image")

    async def fix_infographic_image(self, current_image: str, correction_prompt: str) -> str:
        """Apply a correction wrapped in the simplify/clarify directive."""
        return await self._resubmit(
            current_image, get_fix_prompt(correction_prompt), "Failed to fix image"
        )

    async def verify_infographic_accuracy(
        self,
        image: str,
        topic: str,
        level: ComplexityLevel | str,
        style: VisualStyle | str,
        language: str,
    ) -> VerificationResult:
        """Accuracy check against the original topic.

        Placeholder kept for callers of the public contract: it makes no model
        call and always reports the image as accurate. The real check is not
        defined yet.
        """
        return VerificationResult(is_accurate=True, critique="Verification bypassed.")

    async def _resubmit(self, current_image: str, instruction: str, failure_message: str) -> str:
        logger.info(
            f"{__name__}:_resubmit - START "
            f"image_len={len(current_image)}, instruction_len={len(instruction)}"
        )
        image_bytes = base64.b64decode(strip_data_uri(current_image))

        response = await asyncio.to_thread(
            self._client_factory().models.generate_content,
            model=self._edit_model,
            contents=[
                types.Part.from_bytes(data=image_bytes, mime_type=EDIT_SOURCE_MIME_TYPE),
                types.Part.from_text(text=instruction),
            ],
        )

        data_uri = extract_image_data_uri(response)
        if data_uri is None:
            logger.error(f"{__name__}:_resubmit - No image part in response")
            raise ImageGenerationError(failure_message, model=self._edit_model)

        logger.info(f"{__name__}:_resubmit - END image_len={len(data_uri)}")
        return data_uri
