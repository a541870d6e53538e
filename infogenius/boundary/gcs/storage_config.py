"""
Storage configuration resolver.

Layers manual overrides from the local store over environment settings.
Sources are evaluated in priority order; each field takes the first
non-empty value.

Dependencies: infogenius.models.storage, infogenius.configs.storage
System role: Decides whether and where background uploads go
"""

from collections.abc import Sequence

from infogenius.boundary.local_store.override_store import OverrideStore
from infogenius.configs.storage import GCSSettings
from infogenius.models.storage import ConfigSource, StorageConfig, StorageSource


def resolve_storage_config(sources: Sequence[ConfigSource]) -> StorageConfig:
    """
    Resolve bucket and token from ordered configuration sources.

    Pure function: absent values produce an unconfigured result, never an error.

    Args:
        sources: Configuration layers, highest priority first

    Returns:
        StorageConfig: Resolved bucket/token, configured flag and origin
    """
    bucket = next((source.bucket for source in sources if source.bucket), None)
    token = next((source.token for source in sources if source.token), None)
    origin = next(
        (source.origin for source in sources if source.has_value),
        StorageSource.NONE,
    )
    return StorageConfig(
        bucket=bucket,
        token=token,
        is_configured=bool(bucket and token),
        source=origin,
    )


def build_storage_sources(
    override_store: OverrideStore,
    settings: GCSSettings,
) -> list[ConfigSource]:
    """
    Assemble the manual and environment layers in priority order.

    Args:
        override_store: Local store holding manual overrides
        settings: Environment-backed GCS settings

    Returns:
        list[ConfigSource]: [manual, env]
    """
    return [
        ConfigSource(
            origin=StorageSource.MANUAL,
            bucket=override_store.get_bucket(),
            token=override_store.get_token(),
        ),
        ConfigSource(
            origin=StorageSource.ENV,
            bucket=settings.bucket_name or None,
            token=settings.env_token,
        ),
    ]
