"""
Local store configuration.

Location of the JSON key-value store that holds persisted history and
storage overrides, plus limits applied to user-supplied context.

Dependencies: pydantic_settings
System role: Local persistence configuration
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LocalStoreSettings(BaseSettings):
    """Settings for the local key-value store."""

    model_config = SettingsConfigDict(
        env_prefix="LOCAL_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    data_dir: Path = Field(
        default=Path(".infogenius"),
        description="Directory holding the local store file",
    )
    file_name: str = Field(
        default="local_store.json",
        description="File name of the JSON key-value store",
    )
    max_context_file_bytes: int = Field(
        default=1024 * 1024,
        description="Largest accepted context file (1MB)",
    )

    @property
    def path(self) -> Path:
        return self.data_dir / self.file_name
