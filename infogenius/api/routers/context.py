"""Research context endpoints.

Routes:
- POST /context/files - Add file content as context
- POST /context/links - Add a link as context
- DELETE /context/{source_id} - Remove one source

Dependencies: infogenius.application.services.infographic_service
System role: Session context source HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from infogenius.api.deps import get_infographic_service
from infogenius.api.routers.router_utils import to_state_response
from infogenius.application.services import InfographicService
from infogenius.core.exceptions import ValidationError
from infogenius.models.api import AppStateResponse, FileContextRequest, LinkContextRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/context", tags=["context"])


@router.post("/files", response_model=AppStateResponse, status_code=201)
async def add_file_source(
    request: FileContextRequest,
    service: InfographicService = Depends(get_infographic_service),
) -> AppStateResponse:
    """Add file text as research context (files over the size limit are rejected)."""
    try:
        return to_state_response(service.add_file_source(request.name, request.content))
    except ValidationError as e:
        logger.info(f"{__name__}:add_file_source - {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e


@router.post("/links", response_model=AppStateResponse, status_code=201)
async def add_link_source(
    request: LinkContextRequest,
    service: InfographicService = Depends(get_infographic_service),
) -> AppStateResponse:
    """Add a link for the research model to visit."""
    try:
        return to_state_response(service.add_link_source(request.url))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e


@router.delete("/{source_id}", response_model=AppStateResponse)
async def remove_context_source(
    source_id: str,
    service: InfographicService = Depends(get_infographic_service),
) -> AppStateResponse:
    """Remove one context source."""
    return to_state_response(service.remove_context_source(source_id))
