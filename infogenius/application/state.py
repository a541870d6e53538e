"""
Application state and pure transitions.

The controller owns one `AppState` and replaces it with the result of these
functions; none of them mutates its input. Together they encode the
generation cycle: Idle -> Researching -> Designing -> Idle, with either one
new history entry or an error at the end.

Dependencies: pydantic, infogenius.models
System role: Presented state of the application (loading phase, errors, results)
"""

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field

from infogenius.models.context import ContextSource
from infogenius.models.infographic import GeneratedImage, ResearchResult, SearchResultItem

RESEARCHING_MESSAGE = "Researching..."
DESIGNING_MESSAGE = "Designing Infographic..."


class LoadingStep(IntEnum):
    IDLE = 0
    RESEARCHING = 1
    DESIGNING = 2


class ErrorKind(str, Enum):
    """Category of the error currently shown."""

    VALIDATION = "validation"
    ACCESS_DENIED = "access_denied"
    SERVICE_UNAVAILABLE = "service_unavailable"
    MODIFICATION_FAILED = "modification_failed"


class AppState(BaseModel):
    """Everything the presentation layer renders."""

    model_config = ConfigDict(frozen=True)

    history: tuple[GeneratedImage, ...] = Field(default=(), description="Newest first")
    active_image_id: str | None = None
    context_sources: tuple[ContextSource, ...] = ()
    is_loading: bool = False
    loading_step: LoadingStep = LoadingStep.IDLE
    loading_message: str = ""
    loading_facts: tuple[str, ...] = ()
    search_results: tuple[SearchResultItem, ...] = ()
    error: str | None = None
    error_kind: ErrorKind | None = None
    has_api_key: bool = True
    is_syncing: bool = False

    @property
    def active_image(self) -> GeneratedImage | None:
        if self.active_image_id is None:
            return None
        return next((img for img in self.history if img.id == self.active_image_id), None)


class CycleResult(BaseModel):
    """Outcome of one generate or edit cycle.

    Carries the cycle's own error rather than whatever `AppState.error`
    holds, since other requests may change the shared state while the
    cycle awaits the model.
    """

    model_config = ConfigDict(frozen=True)

    state: AppState
    error: str | None = None
    error_kind: ErrorKind | None = None


def history_loaded(state: AppState, history: list[GeneratedImage]) -> AppState:
    """Install persisted history and activate its newest entry."""
    return state.model_copy(
        update={
            "history": tuple(history),
            "active_image_id": history[0].id if history else None,
        }
    )


def validation_failed(state: AppState, message: str) -> AppState:
    return state.model_copy(update={"error": message, "error_kind": ErrorKind.VALIDATION})


def research_started(state: AppState) -> AppState:
    return state.model_copy(
        update={
            "is_loading": True,
            "error": None,
            "error_kind": None,
            "loading_step": LoadingStep.RESEARCHING,
            "loading_facts": (),
            "search_results": (),
            "loading_message": RESEARCHING_MESSAGE,
        }
    )


def research_completed(state: AppState, result: ResearchResult) -> AppState:
    return state.model_copy(
        update={
            "loading_facts": tuple(result.facts),
            "search_results": tuple(result.search_results),
            "loading_step": LoadingStep.DESIGNING,
            "loading_message": DESIGNING_MESSAGE,
        }
    )


def edit_started(state: AppState, instruction: str) -> AppState:
    return state.model_copy(
        update={
            "is_loading": True,
            "error": None,
            "error_kind": None,
            "loading_step": LoadingStep.DESIGNING,
            "loading_message": f'Processing Modification: "{instruction}"...',
        }
    )


def image_created(state: AppState, image: GeneratedImage) -> AppState:
    """Prepend the new entry, make it active and drop any stale error."""
    return state.model_copy(
        update={
            "history": (image, *state.history),
            "active_image_id": image.id,
            "error": None,
            "error_kind": None,
        }
    )


def cycle_failed(state: AppState, message: str, kind: ErrorKind) -> AppState:
    """Surface an error. Access-denied also drops the credential flag."""
    update: dict = {"error": message, "error_kind": kind}
    if kind == ErrorKind.ACCESS_DENIED:
        update["has_api_key"] = False
    return state.model_copy(update=update)


def cycle_finished(state: AppState) -> AppState:
    return state.model_copy(update={"is_loading": False, "loading_step": LoadingStep.IDLE})


def syncing_changed(state: AppState, is_syncing: bool) -> AppState:
    return state.model_copy(update={"is_syncing": is_syncing})


def api_key_selected(state: AppState) -> AppState:
    return state.model_copy(update={"has_api_key": True, "error": None, "error_kind": None})


def image_selected(state: AppState, image_id: str) -> AppState:
    return state.model_copy(update={"active_image_id": image_id})


def session_reset(state: AppState) -> AppState:
    """Start a new session: history and credentials survive, the rest resets."""
    return state.model_copy(
        update={
            "context_sources": (),
            "active_image_id": None,
            "search_results": (),
            "error": None,
            "error_kind": None,
            "loading_facts": (),
            "loading_step": LoadingStep.IDLE,
            "loading_message": "",
        }
    )


def history_cleared(state: AppState) -> AppState:
    return state.model_copy(
        update={"history": (), "active_image_id": None, "search_results": ()}
    )


def context_source_added(state: AppState, source: ContextSource) -> AppState:
    return state.model_copy(
        update={
            "context_sources": (*state.context_sources, source),
            "error": None,
            "error_kind": None,
        }
    )


def context_source_removed(state: AppState, source_id: str) -> AppState:
    return state.model_copy(
        update={
            "context_sources": tuple(
                source for source in state.context_sources if source.id != source_id
            )
        }
    )
