"""Infographic generation endpoints.

Routes:
- GET /state - Current application state
- POST /infographics - Research a topic and render an infographic
- POST /infographics/edit - Modify the active infographic
- POST /session/new - Start a new session (history is kept)

Dependencies: infogenius.application.services.infographic_service
System role: Generation and edit cycle HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from infogenius.api.deps import get_infographic_service
from infogenius.api.routers.router_utils import raise_for_cycle_error, to_state_response
from infogenius.application.services import InfographicService
from infogenius.models.api import AppStateResponse, EditRequest, GenerateRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["infographics"])


def _ensure_idle(service: InfographicService) -> None:
    if service.state.is_loading:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="A generation is already in progress",
        )


@router.get("/state", response_model=AppStateResponse)
async def get_state(
    service: InfographicService = Depends(get_infographic_service),
) -> AppStateResponse:
    """Return the presented state: loading phase, facts, citations, errors, history."""
    return to_state_response(service.state)


@router.post("/infographics", response_model=AppStateResponse, status_code=201)
async def generate_infographic(
    request: GenerateRequest,
    service: InfographicService = Depends(get_infographic_service),
) -> AppStateResponse:
    """Research a topic and render an infographic.

    1. Research (Gemini text model with Google Search grounding) - facts, citations, image prompt
    2. Design (Gemini image model) - infographic at the requested aspect ratio and size
    3. Record the image as the newest, active history entry and back it up to GCS in the background

    Args:
        request: Topic, audience level, style, language, aspect ratio and resolution
        service: Injected infographic controller

    Returns:
        AppStateResponse: State with the new active image

    Raises:
        HTTPException(400): Empty topic and no context sources
        HTTPException(403): API key lacks access to the models
        HTTPException(409): Another cycle is in progress
        HTTPException(502): Research or image generation failed
    """
    _ensure_idle(service)
    result = await service.handle_generate(request)
    raise_for_cycle_error(result)
    return to_state_response(result.state)


@router.post("/infographics/edit", response_model=AppStateResponse, status_code=201)
async def edit_infographic(
    request: EditRequest,
    service: InfographicService = Depends(get_infographic_service),
) -> AppStateResponse:
    """Modify the active infographic and record the result as a new entry.

    Raises:
        HTTPException(404): No active image
        HTTPException(403): API key lacks access to the models
        HTTPException(409): Another cycle is in progress
        HTTPException(502): The model returned no image
    """
    _ensure_idle(service)
    if service.state.active_image is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No active image to edit")
    result = await service.handle_edit(request.instruction, fix=request.fix)
    raise_for_cycle_error(result)
    return to_state_response(result.state)


@router.post("/session/new", response_model=AppStateResponse)
async def new_session(
    service: InfographicService = Depends(get_infographic_service),
) -> AppStateResponse:
    """Clear context sources, selection, facts and errors."""
    return to_state_response(service.new_session())
