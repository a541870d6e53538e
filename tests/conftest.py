"""
Shared test fixtures and configuration for entire test suite.

Provides: sample images, fake Gemini responses, local store, controller wiring
Dependencies: pytest, unittest.mock, httpx
System role: Test infrastructure and fixture management
"""

import base64
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from infogenius.application.services import InfographicService
from infogenius.boundary.gcs.gcs_uploader import GCSImageUploader
from infogenius.boundary.local_store import HistoryRepository, LocalKeyValueStore
from infogenius.core.generative.image_client import ImageClient
from infogenius.core.generative.research_client import ResearchClient
from infogenius.models.infographic import (
    AspectRatio,
    ComplexityLevel,
    GeneratedImage,
    ImageResolution,
    ResearchResult,
    VisualStyle,
)
from infogenius.models.storage import UploadStatus

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"infographic-pixels"


@pytest.fixture
def png_bytes() -> bytes:
    """Raw bytes of a tiny fake PNG."""
    return PNG_BYTES


@pytest.fixture
def png_data_uri() -> str:
    """PNG data URI as produced by the image client."""
    return "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode("utf-8")


@pytest.fixture
def make_image(png_data_uri):
    """Factory for history entries."""

    def _make(image_id: str = "1700000000000", prompt: str = "Volcanoes", **overrides):
        fields = dict(
            id=image_id,
            data=png_data_uri,
            prompt=prompt,
            timestamp=int(image_id) if image_id.isdigit() else 0,
            level=ComplexityLevel.HIGH_SCHOOL,
            style=VisualStyle.DEFAULT,
            language="English",
            aspect_ratio=AspectRatio.LANDSCAPE_16_9,
            resolution=ImageResolution.RES_1K,
        )
        fields.update(overrides)
        return GeneratedImage(**fields)

    return _make


@pytest.fixture
def make_text_response():
    """Factory for grounded text responses shaped like GenerateContentResponse."""

    def _make(text: str | None, citations: list[tuple[str | None, str | None]] | None = None):
        chunks = [
            SimpleNamespace(web=SimpleNamespace(title=title, uri=uri))
            for title, uri in (citations or [])
        ]
        candidate = SimpleNamespace(
            content=SimpleNamespace(parts=[SimpleNamespace(text=text, inline_data=None)]),
            grounding_metadata=SimpleNamespace(grounding_chunks=chunks) if chunks else None,
        )
        return SimpleNamespace(text=text, candidates=[candidate])

    return _make


@pytest.fixture
def make_image_response():
    """Factory for image responses: optional leading text part, then inline data."""

    def _make(image_data: bytes | str | None, leading_text: str | None = "Here is your image"):
        parts = []
        if leading_text is not None:
            parts.append(SimpleNamespace(text=leading_text, inline_data=None))
        if image_data is not None:
            parts.append(
                SimpleNamespace(
                    text=None,
                    inline_data=SimpleNamespace(data=image_data, mime_type="image/png"),
                )
            )
        candidate = SimpleNamespace(content=SimpleNamespace(parts=parts), grounding_metadata=None)
        return SimpleNamespace(text=leading_text, candidates=[candidate])

    return _make


@pytest.fixture
def mock_genai_client() -> MagicMock:
    """Stand-in for google.genai.Client; configure models.generate_content per test."""
    return MagicMock()


@pytest.fixture
def client_factory(mock_genai_client):
    """Client factory returning the mock client."""
    return lambda: mock_genai_client


@pytest.fixture
def local_store(tmp_path) -> LocalKeyValueStore:
    """Key-value store backed by a temp file."""
    return LocalKeyValueStore(tmp_path / "local_store.json")


@pytest.fixture
def history_repository(local_store) -> HistoryRepository:
    return HistoryRepository(local_store)


@pytest.fixture
def mock_research_client() -> AsyncMock:
    """Research client returning a two-fact result."""
    client = AsyncMock(spec=ResearchClient)
    client.research_topic.return_value = ResearchResult(
        image_prompt="Create an infographic about photosynthesis",
        facts=["Fact A", "Fact B"],
        search_results=[],
    )
    return client


@pytest.fixture
def mock_image_client(png_data_uri) -> AsyncMock:
    """Image client returning the sample PNG for every operation."""
    client = AsyncMock(spec=ImageClient)
    client.generate_infographic_image.return_value = png_data_uri
    client.edit_infographic_image.return_value = png_data_uri
    client.fix_infographic_image.return_value = png_data_uri
    return client


@pytest.fixture
def mock_uploader() -> MagicMock:
    """Configured uploader that succeeds immediately."""
    uploader = MagicMock(spec=GCSImageUploader)
    uploader.is_configured.return_value = True
    uploader.upload_image = AsyncMock(return_value=UploadStatus.UPLOADED)
    return uploader


@pytest.fixture
def infographic_service(
    mock_research_client,
    mock_image_client,
    mock_uploader,
    history_repository,
) -> InfographicService:
    """Controller wired with mocked clients, real history persistence, no sync delay."""
    return InfographicService(
        research_client=mock_research_client,
        image_client=mock_image_client,
        uploader=mock_uploader,
        history_repository=history_repository,
        sync_display_delay=0,
    )
