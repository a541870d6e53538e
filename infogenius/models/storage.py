"""
Object storage configuration and upload outcome models.

Dependencies: pydantic
System role: Data structures for the GCS backup path
"""

from enum import Enum

from pydantic import BaseModel, Field


class StorageSource(str, Enum):
    """Origin of the resolved storage configuration."""

    MANUAL = "manual"
    ENV = "env"
    NONE = "none"


class ConfigSource(BaseModel):
    """One layer of storage configuration, evaluated in priority order."""

    origin: StorageSource
    bucket: str | None = None
    token: str | None = None

    @property
    def has_value(self) -> bool:
        return bool(self.bucket) or bool(self.token)


class StorageConfig(BaseModel):
    """Resolved bucket/token pair."""

    bucket: str | None = Field(default=None, description="Target bucket name")
    token: str | None = Field(default=None, description="Bearer access token")
    is_configured: bool = Field(description="True iff both bucket and token resolved")
    source: StorageSource = Field(description="manual, env or none")


class UploadStatus(str, Enum):
    """Result of one upload attempt."""

    UPLOADED = "uploaded"
    SKIPPED = "skipped"
    FAILED = "failed"
