"""API-specific dependencies."""

from .dependencies import (
    get_infographic_service,
    get_service_cache,
    get_storage_config,
)

__all__ = [
    "get_infographic_service",
    "get_service_cache",
    "get_storage_config",
]
