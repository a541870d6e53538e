"""Gemini credential endpoint.

Routes:
- PUT /credentials - Select the Gemini API key used for subsequent requests

Dependencies: infogenius.application.services.infographic_service
System role: Re-authorization after access-denied errors
"""

from fastapi import APIRouter, Depends, HTTPException, status

from infogenius.api.deps import get_infographic_service
from infogenius.api.routers.router_utils import to_state_response
from infogenius.application.services import InfographicService
from infogenius.core.exceptions import ValidationError
from infogenius.models.api import AppStateResponse, CredentialsRequest

router = APIRouter(prefix="/credentials", tags=["credentials"])


@router.put("", response_model=AppStateResponse)
async def select_api_key(
    request: CredentialsRequest,
    service: InfographicService = Depends(get_infographic_service),
) -> AppStateResponse:
    """Switch the API key and clear a pending access-denied error."""
    try:
        return to_state_response(service.select_api_key(request.api_key))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
