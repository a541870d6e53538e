"""Image history endpoints.

Routes:
- GET /history - History entries, newest first (without image data)
- DELETE /history - Clear all entries
- PUT /history/{image_id}/active - Make an entry the active image
- GET /history/{image_id}/image - Decoded image bytes

Dependencies: infogenius.application.services.infographic_service
System role: Session archive HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from infogenius.api.deps import get_infographic_service
from infogenius.api.routers.router_utils import to_state_response
from infogenius.application.services import InfographicService
from infogenius.boundary.gcs.gcs_uploader import split_data_uri
from infogenius.core.exceptions import HistoryStoreError, ValidationError
from infogenius.models.api import AppStateResponse, HistoryEntryResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/history", tags=["history"])


@router.get("", response_model=list[HistoryEntryResponse])
async def list_history(
    service: InfographicService = Depends(get_infographic_service),
) -> list[HistoryEntryResponse]:
    """List history entries, newest first."""
    return [HistoryEntryResponse.from_image(img) for img in service.state.history]


@router.delete("", response_model=AppStateResponse)
async def clear_history(
    service: InfographicService = Depends(get_infographic_service),
) -> AppStateResponse:
    """Clear all session archives. This cannot be undone."""
    try:
        return to_state_response(service.clear_history())
    except HistoryStoreError as e:
        logger.error(f"{__name__}:clear_history - {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to clear saved history",
        ) from e


@router.put("/{image_id}/active", response_model=AppStateResponse)
async def select_image(
    image_id: str,
    service: InfographicService = Depends(get_infographic_service),
) -> AppStateResponse:
    """Make a history entry the active image."""
    try:
        return to_state_response(service.select_image(image_id))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e


@router.get("/{image_id}/image")
async def get_image(
    image_id: str,
    service: InfographicService = Depends(get_infographic_service),
) -> Response:
    """Return the decoded image of a history entry."""
    image = next((img for img in service.state.history if img.id == image_id), None)
    if image is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Image not found: {image_id}")
    try:
        mime_type, image_bytes = split_data_uri(image.data)
    except ValueError as e:
        logger.error(f"{__name__}:get_image - Corrupt image data id={image_id}: {e}")
        raise HTTPException(status_code=500, detail="Stored image data is corrupt") from e
    return Response(content=image_bytes, media_type=mime_type)
