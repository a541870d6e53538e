"""
Server settings.

Process-level options shared by the CLI launcher and the API app: where the
server listens, how verbose it logs, and whether it runs with auto-reload.

Dependencies: pydantic_settings
System role: Root of the aggregated settings
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Server options read from the environment or `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production"] = Field(
        default="development",
        description="development enables uvicorn auto-reload",
    )
    host: str = Field(default="0.0.0.0", description="Bind address (HOST)")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port (PORT)")
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    @property
    def reload(self) -> bool:
        return self.environment == "development"
