"""
Exception hierarchy for the InfoGenius application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class InfoGeniusException(Exception):
    """Base exception for all InfoGenius application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(InfoGeniusException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ImageGenerationError(InfoGeniusException):
    """Raised when the image model response carries no inline image."""

    def __init__(
        self,
        message: str,
        model: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize image generation error.

        Args:
            message: Error message
            model: Model identifier that was called
            details: Additional context
        """
        details = details or {}
        if model:
            details["model"] = model
        super().__init__(message, details)


class StorageUploadError(InfoGeniusException):
    """Base exception for object storage upload failures (never user-facing)."""

    pass


class GCSUploadError(StorageUploadError):
    """Raised when the GCS upload endpoint answers with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        body: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize GCS upload error.

        Args:
            status_code: HTTP status returned by GCS
            body: Response body, kept as diagnostic text only
            details: Additional context
        """
        self.status_code = status_code
        self.body = body
        details = details or {}
        details["status_code"] = status_code
        super().__init__(f"GCS API error ({status_code}): {body}", details)

    @property
    def credential_expired(self) -> bool:
        """401/403 usually means the access token expired or lacks scope."""
        return self.status_code in (401, 403)


class HistoryStoreError(InfoGeniusException):
    """Raised when the local store cannot be written."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize history store error.

        Args:
            message: Error message
            key: Store key involved in the failed operation
            details: Additional context
        """
        details = details or {}
        if key:
            details["key"] = key
        super().__init__(message, details)
