"""GCS backup configuration endpoints.

Routes:
- GET /storage/config - Resolved configuration (token masked)
- PUT /storage/config - Set manual bucket/token overrides
- DELETE /storage/config - Remove manual overrides

Dependencies: infogenius.api.deps, infogenius.boundary.local_store.override_store
System role: Storage override HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from infogenius.api.deps import get_service_cache
from infogenius.api.deps.dependencies import ServiceCache
from infogenius.models.api import StorageConfigResponse, StorageOverrideRequest
from infogenius.models.storage import StorageConfig

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/storage", tags=["storage"])


def _to_response(config: StorageConfig) -> StorageConfigResponse:
    return StorageConfigResponse(
        bucket=config.bucket,
        token_set=bool(config.token),
        is_configured=config.is_configured,
        source=config.source,
    )


@router.get("/config", response_model=StorageConfigResponse)
async def read_storage_config(
    cache: ServiceCache = Depends(get_service_cache),
) -> StorageConfigResponse:
    """Report where uploads go and which layer configured them."""
    return _to_response(cache.storage_config())


@router.put("/config", response_model=StorageConfigResponse)
async def set_storage_overrides(
    request: StorageOverrideRequest,
    cache: ServiceCache = Depends(get_service_cache),
) -> StorageConfigResponse:
    """Store manual overrides; they take precedence over the environment."""
    cache.override_store.set_overrides(bucket=request.bucket, token=request.token)
    config = cache.storage_config()
    logger.info(
        f"{__name__}:set_storage_overrides - source={config.source.value}, "
        f"configured={config.is_configured}"
    )
    return _to_response(config)


@router.delete("/config", response_model=StorageConfigResponse)
async def clear_storage_overrides(
    cache: ServiceCache = Depends(get_service_cache),
) -> StorageConfigResponse:
    """Fall back to environment configuration."""
    cache.override_store.clear()
    return _to_response(cache.storage_config())
