"""
Google Cloud Storage backup configuration.

Environment-supplied bucket and access token for the background uploader.
Manual overrides live in the local store and are layered on top by
`infogenius.boundary.gcs.storage_config`.

Dependencies: pydantic_settings
System role: GCS upload configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GCSSettings(BaseSettings):
    """Settings for the GCS infographic backup."""

    model_config = SettingsConfigDict(
        env_prefix="GCS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    bucket_name: str | None = Field(
        default=None,
        description="Target bucket (GCS_BUCKET_NAME)",
    )
    access_token: str | None = Field(
        default=None,
        description="OAuth bearer token (GCS_ACCESS_TOKEN)",
    )
    credentials: str | None = Field(
        default=None,
        description="Alternate token variable (GCS_CREDENTIALS), used when GCS_ACCESS_TOKEN is empty",
    )
    upload_base_url: str = Field(
        default="https://storage.googleapis.com/upload/storage/v1",
        description="GCS JSON API upload root",
    )
    sync_display_delay: float = Field(
        default=2.0,
        description="Seconds the syncing indicator stays on after an upload finishes",
    )
    timeout: float | None = Field(
        default=None,
        description="HTTP timeout for uploads in seconds (None disables)",
    )

    @property
    def env_token(self) -> str | None:
        """Token from the environment, first non-empty variable wins."""
        return self.access_token or self.credentials or None
