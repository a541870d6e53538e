"""Application services."""

from infogenius.application.services.infographic_service import InfographicService

__all__ = ["InfographicService"]
