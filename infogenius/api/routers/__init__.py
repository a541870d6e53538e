"""API routers."""

from .context import router as context_router
from .credentials import router as credentials_router
from .health import router as health_router
from .history import router as history_router
from .infographics import router as infographics_router
from .storage import router as storage_router

__all__ = [
    "context_router",
    "credentials_router",
    "health_router",
    "history_router",
    "infographics_router",
    "storage_router",
]
