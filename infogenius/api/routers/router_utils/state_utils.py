"""
State response helpers.

Converts the controller state into the API response model and maps cycle
errors to HTTP status codes.

Dependencies: fastapi, infogenius.application.state, infogenius.models.api
System role: Shared helpers for routers returning application state
"""

from fastapi import HTTPException, status

from infogenius.application.state import AppState, CycleResult, ErrorKind
from infogenius.models.api import AppStateResponse, HistoryEntryResponse

ERROR_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ACCESS_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorKind.SERVICE_UNAVAILABLE: status.HTTP_502_BAD_GATEWAY,
    ErrorKind.MODIFICATION_FAILED: status.HTTP_502_BAD_GATEWAY,
}


def to_state_response(state: AppState) -> AppStateResponse:
    """Build the API view of the state. History entries omit image data."""
    return AppStateResponse(
        history=[HistoryEntryResponse.from_image(img) for img in state.history],
        active_image_id=state.active_image_id,
        active_image=state.active_image,
        context_sources=list(state.context_sources),
        is_loading=state.is_loading,
        loading_step=int(state.loading_step),
        loading_message=state.loading_message,
        loading_facts=list(state.loading_facts),
        search_results=list(state.search_results),
        error=state.error,
        error_kind=state.error_kind.value if state.error_kind else None,
        has_api_key=state.has_api_key,
        is_syncing=state.is_syncing,
    )


def raise_for_cycle_error(result: CycleResult) -> None:
    """
    Raise an HTTPException when the cycle itself ended with an error.

    Errors left in the shared state by other requests are ignored.

    Args:
        result: Outcome returned by the controller

    Raises:
        HTTPException: 400 validation, 403 access denied, 502 generation failure
    """
    if result.error_kind is None:
        return
    raise HTTPException(
        status_code=ERROR_STATUS_CODES[result.error_kind],
        detail=result.error,
    )
