"""
Health check API endpoints.

Routes: GET /health, GET /health/gemini, GET /health/storage

Dependencies: infogenius.api.deps
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from infogenius.api.deps import get_infographic_service, get_storage_config
from infogenius.application.services import InfographicService
from infogenius.models.storage import StorageConfig


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/gemini", response_model=HealthResponse)
async def health_check_gemini(
    service: InfographicService = Depends(get_infographic_service),
) -> HealthResponse:
    """Report whether a usable Gemini key is held."""
    if service.state.has_api_key:
        return HealthResponse(status="healthy", message="Gemini API key selected")
    return HealthResponse(status="degraded", message="Gemini API key missing or rejected")


@router.get("/storage", response_model=HealthResponse)
async def health_check_storage(
    config: StorageConfig = Depends(get_storage_config),
) -> HealthResponse:
    """Report whether background GCS backup is configured."""
    if config.is_configured:
        return HealthResponse(
            status="healthy", message=f"GCS backup enabled ({config.source.value})"
        )
    return HealthResponse(status="degraded", message="GCS backup not configured")
