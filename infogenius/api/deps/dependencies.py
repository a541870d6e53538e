"""
Dependency injection container.

Factory functions for FastAPI dependencies. The controller is a process-wide
singleton: it owns the application state shared by every request.

Dependencies: infogenius.configs, infogenius.application, infogenius.boundary
System role: DI container for service injection
"""

from infogenius.configs import get_settings
from infogenius.models.storage import StorageConfig


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._local_store = None
        self._override_store = None
        self._client_factory = None
        self._uploader = None
        self._infographic_service = None

    @property
    def local_store(self):
        """Get cached local key-value store."""
        if self._local_store is None:
            from infogenius.boundary.local_store import LocalKeyValueStore

            self._local_store = LocalKeyValueStore(get_settings().local_store.path)
        return self._local_store

    @property
    def override_store(self):
        """Get cached storage override store."""
        if self._override_store is None:
            from infogenius.boundary.local_store import OverrideStore

            self._override_store = OverrideStore(self.local_store)
        return self._override_store

    @property
    def client_factory(self):
        """Get cached Gemini client factory."""
        if self._client_factory is None:
            from infogenius.core.generative import GeminiClientFactory

            self._client_factory = GeminiClientFactory(get_settings().gemini.api_key)
        return self._client_factory

    def storage_config(self) -> StorageConfig:
        """Resolve storage config from current overrides and environment."""
        from infogenius.boundary.gcs import build_storage_sources, resolve_storage_config

        return resolve_storage_config(
            build_storage_sources(self.override_store, get_settings().gcs)
        )

    @property
    def uploader(self):
        """Get cached GCS uploader."""
        if self._uploader is None:
            from infogenius.boundary.gcs import GCSImageUploader

            settings = get_settings()
            self._uploader = GCSImageUploader(
                config_provider=self.storage_config,
                base_url=settings.gcs.upload_base_url,
                timeout=settings.gcs.timeout,
            )
        return self._uploader

    @property
    def infographic_service(self):
        """Get cached infographic controller with history loaded."""
        if self._infographic_service is None:
            from infogenius.application.services import InfographicService
            from infogenius.boundary.local_store import HistoryRepository
            from infogenius.core.generative import ImageClient, ResearchClient

            settings = get_settings()
            service = InfographicService(
                research_client=ResearchClient(
                    self.client_factory,
                    model_id=settings.gemini.text_model,
                ),
                image_client=ImageClient(
                    self.client_factory,
                    image_model=settings.gemini.image_model,
                    edit_model=settings.gemini.edit_model,
                ),
                uploader=self.uploader,
                history_repository=HistoryRepository(self.local_store),
                client_factory=self.client_factory,
                max_context_file_bytes=settings.local_store.max_context_file_bytes,
                sync_display_delay=settings.gcs.sync_display_delay,
            )
            service.load_history()
            self._infographic_service = service
        return self._infographic_service

    async def aclose(self) -> None:
        """Drain background uploads and close network clients."""
        if self._infographic_service is not None:
            await self._infographic_service.shutdown()
        if self._uploader is not None:
            await self._uploader.aclose()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._local_store = None
        self._override_store = None
        self._client_factory = None
        self._uploader = None
        self._infographic_service = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_infographic_service():
    """Get the process-wide infographic controller."""
    return get_service_cache().infographic_service


def get_storage_config() -> StorageConfig:
    """Resolve the current storage configuration."""
    return get_service_cache().storage_config()
