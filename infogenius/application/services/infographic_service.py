"""Infographic service layer.

Application controller for the generation and edit cycles.

Generation: validate input -> research (grounded text model) -> design
(image model) -> prepend to history, persist, start a detached GCS upload.
Edits skip research and reuse the active entry's parameters.

Errors from research or design abort the cycle without touching history and
are reduced to a user-facing message; upload outcomes only drive the
syncing indicator.

Dependencies: logging, asyncio, clients, uploader, history repository, state
System role: Orchestrator between API layer and generative/storage boundaries
"""

import asyncio
import logging
import time
import uuid
from typing import Callable

from infogenius.application import state as transitions
from infogenius.application.state import AppState, CycleResult, ErrorKind
from infogenius.boundary.gcs.gcs_uploader import GCSImageUploader
from infogenius.boundary.local_store.history_repository import HistoryRepository
from infogenius.core.context_builder import build_context_data, build_effective_topic
from infogenius.core.exceptions import HistoryStoreError, ValidationError
from infogenius.core.generative.client_factory import GeminiClientFactory
from infogenius.core.generative.image_client import ImageClient
from infogenius.core.generative.research_client import ResearchClient
from infogenius.models.api import GenerateRequest
from infogenius.models.context import ContextSource, ContextSourceType
from infogenius.models.infographic import GeneratedImage
from infogenius.models.storage import UploadStatus

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Please enter a topic or provide context (File/URL) to visualize."
GENERATE_ACCESS_DENIED_MESSAGE = (
    "Access denied. The selected API key does not have access to the required models. "
    "Please select a project with billing enabled."
)
EDIT_ACCESS_DENIED_MESSAGE = "Access denied. Please select a valid API key with billing enabled."
GENERATE_FAILED_MESSAGE = "The image generation service is temporarily unavailable. Please try again."
EDIT_FAILED_MESSAGE = "Modification failed. Try a different command."

ACCESS_DENIED_MARKERS = ("Requested entity was not found", "404", "403")


def is_access_denied(error: Exception) -> bool:
    """True when the error text points at a missing model entitlement."""
    message = str(error)
    return any(marker in message for marker in ACCESS_DENIED_MARKERS)


class InfographicService:
    """Owns the application state and drives every user action.

    Cycles never overlap: a trigger arriving while one is in flight is
    ignored. All state changes go through the pure functions in
    `infogenius.application.state`.
    """

    def __init__(
        self,
        research_client: ResearchClient,
        image_client: ImageClient,
        uploader: GCSImageUploader,
        history_repository: HistoryRepository,
        client_factory: GeminiClientFactory | None = None,
        max_context_file_bytes: int = 1024 * 1024,
        sync_display_delay: float = 2.0,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize service with dependencies.

        Args:
            research_client: Grounded research client
            image_client: Image generation/edit client
            uploader: Background GCS uploader
            history_repository: Persistence port for history
            client_factory: Holder of the Gemini key (enables key selection)
            max_context_file_bytes: Largest accepted context file
            sync_display_delay: Seconds the syncing indicator lingers after an upload
            clock: Time source in seconds, used for image ids and timestamps
        """
        self._research_client = research_client
        self._image_client = image_client
        self._uploader = uploader
        self._history_repository = history_repository
        self._client_factory = client_factory
        self._max_context_file_bytes = max_context_file_bytes
        self._sync_display_delay = sync_display_delay
        self._clock = clock

        self._upload_tasks: set[asyncio.Task] = set()
        self._uploads_in_flight = 0
        self._last_image_ms = 0

        has_api_key = client_factory.has_api_key if client_factory is not None else True
        self._state = AppState(has_api_key=has_api_key)

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def pending_uploads(self) -> set[asyncio.Task]:
        return set(self._upload_tasks)

    def load_history(self) -> AppState:
        """Read persisted history once and activate the newest entry."""
        history = self._history_repository.load()
        self._state = transitions.history_loaded(self._state, history)
        numeric_ids = [int(img.id) for img in history if img.id.isdigit()]
        self._last_image_ms = max(numeric_ids, default=self._last_image_ms)
        return self._state

    async def handle_generate(self, request: GenerateRequest) -> CycleResult:
        """Run one research -> design cycle.

        Args:
            request: Topic and generation parameters

        Returns:
            CycleResult: State after the cycle and the error of this cycle, if any
        """
        if self._state.is_loading:
            logger.warning(f"{__name__}:handle_generate - Ignored, a cycle is already running")
            return CycleResult(state=self._state)

        sources = self._state.context_sources
        if not request.topic.strip() and not sources:
            logger.info(f"{__name__}:handle_generate - Rejected empty topic without context")
            self._state = transitions.validation_failed(self._state, EMPTY_INPUT_MESSAGE)
            return CycleResult(
                state=self._state, error=EMPTY_INPUT_MESSAGE, error_kind=ErrorKind.VALIDATION
            )

        self._state = transitions.research_started(self._state)
        error: str | None = None
        error_kind: ErrorKind | None = None
        context_data = build_context_data(sources)
        effective_topic = build_effective_topic(request.topic, sources)

        try:
            logger.info(
                f"{__name__}:handle_generate - START "
                f"topic_len={len(effective_topic)}, sources={len(sources)}, "
                f"level={request.level.value}, style={request.style.value}"
            )
            research = await self._research_client.research_topic(
                effective_topic,
                request.level,
                request.style,
                request.language,
                context_data,
            )
            self._state = transitions.research_completed(self._state, research)

            data_uri = await self._image_client.generate_infographic_image(
                research.image_prompt,
                request.aspect_ratio,
                request.resolution,
            )

            image = self._new_image(
                data=data_uri,
                prompt=effective_topic,
                level=request.level,
                style=request.style,
                language=request.language,
                aspect_ratio=request.aspect_ratio,
                resolution=request.resolution,
            )
            self._commit_image(image)
            logger.info(f"{__name__}:handle_generate - END image_id={image.id}")

        except Exception as e:
            logger.error(f"{__name__}:handle_generate - {type(e).__name__}: {e}", exc_info=True)
            if is_access_denied(e):
                error, error_kind = GENERATE_ACCESS_DENIED_MESSAGE, ErrorKind.ACCESS_DENIED
            else:
                error, error_kind = GENERATE_FAILED_MESSAGE, ErrorKind.SERVICE_UNAVAILABLE
            self._state = transitions.cycle_failed(self._state, error, error_kind)
        finally:
            self._state = transitions.cycle_finished(self._state)

        return CycleResult(state=self._state, error=error, error_kind=error_kind)

    async def handle_edit(self, instruction: str, fix: bool = False) -> CycleResult:
        """Modify the active image and record the result as a new entry.

        Ignored when a cycle is running or no image is active.

        Args:
            instruction: Edit instruction (or correction when fix=True)
            fix: Wrap the instruction in the simplify-and-fix directive

        Returns:
            CycleResult: State after the edit and the error of this edit, if any
        """
        if self._state.is_loading:
            logger.warning(f"{__name__}:handle_edit - Ignored, a cycle is already running")
            return CycleResult(state=self._state)
        current = self._state.active_image
        if current is None:
            logger.info(f"{__name__}:handle_edit - Ignored, no active image")
            return CycleResult(state=self._state)

        self._state = transitions.edit_started(self._state, instruction)
        error: str | None = None
        error_kind: ErrorKind | None = None
        try:
            logger.info(
                f"{__name__}:handle_edit - START "
                f"source_id={current.id}, fix={fix}, instruction_len={len(instruction)}"
            )
            if fix:
                data_uri = await self._image_client.fix_infographic_image(current.data, instruction)
            else:
                data_uri = await self._image_client.edit_infographic_image(current.data, instruction)

            image = self._new_image(
                data=data_uri,
                prompt=instruction,
                level=current.level,
                style=current.style,
                language=current.language,
                aspect_ratio=current.aspect_ratio,
                resolution=current.resolution,
            )
            self._commit_image(image)
            logger.info(f"{__name__}:handle_edit - END image_id={image.id}")

        except Exception as e:
            logger.error(f"{__name__}:handle_edit - {type(e).__name__}: {e}", exc_info=True)
            if is_access_denied(e):
                error, error_kind = EDIT_ACCESS_DENIED_MESSAGE, ErrorKind.ACCESS_DENIED
            else:
                error, error_kind = EDIT_FAILED_MESSAGE, ErrorKind.MODIFICATION_FAILED
            self._state = transitions.cycle_failed(self._state, error, error_kind)
        finally:
            self._state = transitions.cycle_finished(self._state)

        return CycleResult(state=self._state, error=error, error_kind=error_kind)

    def new_session(self) -> AppState:
        """Reset topic context, selection and messages. History is kept."""
        self._state = transitions.session_reset(self._state)
        return self._state

    def clear_history(self) -> AppState:
        """Drop every history entry, on disk and then in memory.

        Raises:
            HistoryStoreError: If the persisted history cannot be removed; the
                in-memory history is left unchanged
        """
        self._history_repository.clear()
        self._state = transitions.history_cleared(self._state)
        logger.info(f"{__name__}:clear_history - History cleared")
        return self._state

    def select_image(self, image_id: str) -> AppState:
        """Make a history entry the active image.

        Raises:
            ValidationError: If no entry has this id
        """
        if not any(img.id == image_id for img in self._state.history):
            raise ValidationError(f"Image not found: {image_id}", field="image_id")
        self._state = transitions.image_selected(self._state, image_id)
        return self._state

    def add_file_source(self, name: str, content: str, size: int | None = None) -> AppState:
        """Add file content as research context.

        Args:
            name: File name shown to the user
            content: File text
            size: Size in bytes (defaults to the UTF-8 length of content)

        Raises:
            ValidationError: If the file exceeds the size limit
        """
        size = size if size is not None else len(content.encode("utf-8"))
        if size > self._max_context_file_bytes:
            limit_mb = self._max_context_file_bytes // (1024 * 1024) or 1
            message = f'File "{name}" is too large. Please upload files smaller than {limit_mb}MB.'
            self._state = transitions.validation_failed(self._state, message)
            raise ValidationError(message, field="content", details={"size": size})

        source = ContextSource(
            id=self._new_source_id(), type=ContextSourceType.FILE, name=name, content=content
        )
        self._state = transitions.context_source_added(self._state, source)
        logger.info(f"{__name__}:add_file_source - Added {name} ({size} bytes)")
        return self._state

    def add_link_source(self, url: str) -> AppState:
        """Add a link as research context.

        Raises:
            ValidationError: If the link is blank
        """
        url = url.strip()
        if not url:
            raise ValidationError("Link cannot be empty", field="url")
        source = ContextSource(
            id=self._new_source_id(), type=ContextSourceType.URL, name=url, content=url
        )
        self._state = transitions.context_source_added(self._state, source)
        logger.info(f"{__name__}:add_link_source - Added link")
        return self._state

    def remove_context_source(self, source_id: str) -> AppState:
        self._state = transitions.context_source_removed(self._state, source_id)
        return self._state

    def select_api_key(self, api_key: str) -> AppState:
        """Switch the Gemini key used by subsequent requests.

        Raises:
            ValidationError: If the key is blank or key selection is unavailable
        """
        if self._client_factory is None:
            raise ValidationError("API key selection is not available")
        try:
            self._client_factory.set_api_key(api_key)
        except ValueError as e:
            raise ValidationError(str(e), field="api_key") from e
        self._state = transitions.api_key_selected(self._state)
        return self._state

    async def shutdown(self) -> None:
        """Wait for detached uploads still in flight."""
        if self._upload_tasks:
            logger.info(
                f"{__name__}:shutdown - Waiting for {len(self._upload_tasks)} pending uploads"
            )
            await asyncio.gather(*self._upload_tasks, return_exceptions=True)

    def _new_image(self, **fields) -> GeneratedImage:
        now_ms = int(self._clock() * 1000)
        # ids must stay unique when two cycles finish in the same millisecond
        if now_ms <= self._last_image_ms:
            now_ms = self._last_image_ms + 1
        self._last_image_ms = now_ms
        return GeneratedImage(id=str(now_ms), timestamp=now_ms, **fields)

    @staticmethod
    def _new_source_id() -> str:
        return uuid.uuid4().hex[:9]

    def _commit_image(self, image: GeneratedImage) -> None:
        self._state = transitions.image_created(self._state, image)
        try:
            self._history_repository.save(list(self._state.history))
        except HistoryStoreError as e:
            logger.error(f"{__name__}:_commit_image - History not persisted: {e}")
        self._start_background_upload(image)

    def _start_background_upload(self, image: GeneratedImage) -> None:
        task = asyncio.create_task(self._background_upload(image.data, image.id))
        self._upload_tasks.add(task)
        task.add_done_callback(self._on_upload_done)

    def _on_upload_done(self, task: asyncio.Task) -> None:
        self._upload_tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(
                f"{__name__}:_on_upload_done - Background upload crashed: "
                f"{type(error).__name__}: {error}",
                exc_info=error,
            )

    async def _background_upload(self, data_uri: str, image_id: str) -> UploadStatus:
        if not self._uploader.is_configured():
            return await self._uploader.upload_image(data_uri, image_id)

        self._uploads_in_flight += 1
        self._state = transitions.syncing_changed(self._state, True)
        try:
            status = await self._uploader.upload_image(data_uri, image_id)
            logger.info(
                f"{__name__}:_background_upload - image_id={image_id}, status={status.value}"
            )
            await asyncio.sleep(self._sync_display_delay)
            return status
        finally:
            self._uploads_in_flight -= 1
            if self._uploads_in_flight == 0:
                self._state = transitions.syncing_changed(self._state, False)
