"""WorkflowStore: client-held state machine for the categorization wizard.

The store walks A -> B -> C -> complete. Selection setters mark the workflow
as a dirty draft and stamp ``last_saved``; nothing leaves the process unless a
``WorkflowApiClient`` is attached, in which case ``sync_draft`` and
``submit_workflow`` go through the workflow API and surface its failures.

A partial snapshot is written through an ``IStateStorage`` after every change
and read back on construction. ``current_step``, ``validation_errors`` and the
transient submit/sync fields are never persisted, so a reloaded store always
resumes at step A.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

from doccat.core.config import AppSettings
from doccat.core.exceptions import WorkflowSyncError
from doccat.core.logging import get_logger
from doccat.core.protocols import IStateStorage
from doccat.models.category import CategorySelection
from doccat.models.document import Document
from doccat.models.tags import Tag
from doccat.models.workflow import ALL_STEPS, WorkflowStep, utcnow
from doccat.persistence.file_backend import JsonFileStateStorage
from doccat.persistence.memory_backend import MemoryStateStorage
from doccat.workflow.client import WorkflowApiClient
from doccat.workflow.validation import DEFAULT_REQUIRED_DIMENSIONS, validate_step

LOGGER = get_logger(__name__)

STORAGE_NAME = "document-workflow-storage"
STORAGE_VERSION = 0

PERSISTED_FIELDS = frozenset({
    "current_document",
    "belonging_rating",
    "selected_category",
    "selected_tags",
    "custom_tags",
    "completed_steps",
    "is_draft",
    "last_saved",
})


class WorkflowState(BaseModel):
    current_step: WorkflowStep = WorkflowStep.A
    current_document: Optional[Document] = None

    # Step A: statement of belonging
    belonging_rating: Optional[int] = None

    # Step B: primary category
    selected_category: Optional[CategorySelection] = None

    # Step C: secondary tags, dimension id -> tag ids
    selected_tags: dict[str, list[str]] = Field(default_factory=dict)
    custom_tags: list[Tag] = Field(default_factory=list)

    completed_steps: list[str] = Field(default_factory=list)
    validation_errors: dict[str, str] = Field(default_factory=dict)
    is_draft: bool = False
    last_saved: Optional[str] = None

    is_submitting: bool = False
    workflow_id: Optional[str] = None


class WorkflowStore:
    """Explicit state holder passed to whatever drives the wizard."""

    def __init__(
        self,
        storage: IStateStorage | None = None,
        *,
        remote: WorkflowApiClient | None = None,
        required_dimensions: tuple[str, ...] | list[str] = DEFAULT_REQUIRED_DIMENSIONS,
        submit_delay: float = 2.0,
    ) -> None:
        self._storage = storage if storage is not None else MemoryStateStorage()
        self._remote = remote
        self._required_dimensions = tuple(required_dimensions)
        self._submit_delay = submit_delay
        self._state = WorkflowState()
        self._hydrate()

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None,
                      remote: WorkflowApiClient | None = None) -> WorkflowStore:
        settings = settings or AppSettings()
        return cls(
            JsonFileStateStorage(settings.workflow.state_dir),
            remote=remote,
            required_dimensions=settings.workflow.required_dimensions,
            submit_delay=settings.workflow.submit_delay_seconds,
        )

    @property
    def state(self) -> WorkflowState:
        return self._state.model_copy(deep=True)

    # ---- persistence boundary ----

    def snapshot(self) -> dict[str, Any]:
        """The persisted subset of the state, JSON-ready."""
        return self._state.model_dump(mode="json", include=set(PERSISTED_FIELDS))

    def _persist(self) -> None:
        self._storage.save(STORAGE_NAME, {"state": self.snapshot(), "version": STORAGE_VERSION})

    def _hydrate(self) -> None:
        stored = self._storage.load(STORAGE_NAME)
        if not stored or not isinstance(stored.get("state"), dict):
            return
        data = {k: v for k, v in stored["state"].items() if k in PERSISTED_FIELDS}
        try:
            self._state = WorkflowState.model_validate(data)
        except ValidationError as exc:
            LOGGER.warning("Discarding invalid persisted workflow state: %s", exc)

    def _set(self, **changes: Any) -> None:
        self._state = self._state.model_copy(update=changes)
        self._persist()

    # ---- navigation ----

    def set_current_document(self, document: Document) -> None:
        self._set(current_document=document, current_step=WorkflowStep.A)

    def set_current_step(self, step: WorkflowStep | str) -> None:
        self._set(current_step=WorkflowStep(step))

    # ---- selections ----

    def set_belonging_rating(self, rating: int) -> None:
        self._set(belonging_rating=rating, is_draft=True)
        self.save_draft()

    def set_selected_category(self, category: CategorySelection) -> None:
        self._set(selected_category=category, is_draft=True)
        self.save_draft()

    def set_selected_tags(self, dimension_id: str, tags: list[str]) -> None:
        selected = {k: list(v) for k, v in self._state.selected_tags.items()}
        selected[dimension_id] = list(tags)
        self._set(selected_tags=selected, is_draft=True)
        self.save_draft()

    def add_custom_tag(self, dimension_id: str, tag: Tag) -> None:
        custom = [*self._state.custom_tags, tag]
        selected = {k: list(v) for k, v in self._state.selected_tags.items()}
        selected.setdefault(dimension_id, []).append(tag.id)
        self._set(custom_tags=custom, selected_tags=selected, is_draft=True)
        self.save_draft()

    # ---- progress ----

    def mark_step_complete(self, step: str) -> None:
        if step in self._state.completed_steps:
            return
        self._set(completed_steps=[*self._state.completed_steps, step])

    def validate_step(self, step: str) -> bool:
        category = self._state.selected_category
        errors = validate_step(
            step,
            belonging_rating=self._state.belonging_rating,
            selected_category=category.id if category else None,
            selected_tags=self._state.selected_tags,
            required_dimensions=self._required_dimensions,
        )
        self._set(validation_errors=errors)
        return not errors

    def save_draft(self) -> None:
        """Record a local draft save; no network call."""
        self._set(is_draft=True, last_saved=utcnow().isoformat())

    def reset_workflow(self) -> None:
        self._state = WorkflowState()
        self._persist()

    # ---- remote ----

    def _payload(self) -> dict[str, Any]:
        state = self._state
        if state.current_document is None:
            raise WorkflowSyncError("No document selected")
        return {
            "documentId": state.current_document.id,
            "step": state.current_step.value,
            "belongingRating": state.belonging_rating,
            "selectedCategory": state.selected_category.id if state.selected_category else None,
            "selectedTags": state.selected_tags,
            "customTags": [t.model_dump(by_alias=True, exclude_none=True) for t in state.custom_tags],
        }

    def _record_error(self, key: str, message: str) -> None:
        errors = dict(self._state.validation_errors)
        errors[key] = message
        self._set(validation_errors=errors)

    async def sync_draft(self) -> Optional[str]:
        """Save locally, then push the draft to the workflow API if attached.

        Returns the server-side workflow id, or None without a remote.

        Raises:
            WorkflowSyncError: the API rejected or never received the draft;
                the message is also recorded under ``validation_errors["draft"]``.
        """
        self.save_draft()
        if self._remote is None:
            return None
        try:
            result = await self._remote.save_draft(self._payload())
        except WorkflowSyncError as exc:
            self._record_error("draft", exc.message)
            raise
        workflow_id = result.get("workflowId")
        errors = {k: v for k, v in self._state.validation_errors.items() if k != "draft"}
        self._set(workflow_id=workflow_id, validation_errors=errors)
        return workflow_id

    async def submit_workflow(self) -> None:
        """Finalize the workflow.

        Without a remote this waits ``submit_delay`` seconds and marks the
        workflow complete. With one, the submit goes to the API; on failure the
        draft is left untouched, the message lands in
        ``validation_errors["submit"]`` and ``WorkflowSyncError`` propagates.
        """
        self._set(is_submitting=True)
        try:
            workflow_id = self._state.workflow_id
            if self._remote is not None:
                try:
                    result = await self._remote.submit(self._payload())
                except WorkflowSyncError as exc:
                    self._record_error("submit", exc.message)
                    raise
                workflow_id = result.get("workflowId", workflow_id)
            else:
                await asyncio.sleep(self._submit_delay)

            errors = {k: v for k, v in self._state.validation_errors.items() if k != "submit"}
            self._set(
                current_step=WorkflowStep.COMPLETE,
                is_draft=False,
                completed_steps=[s.value for s in ALL_STEPS],
                last_saved=utcnow().isoformat(),
                workflow_id=workflow_id,
                validation_errors=errors,
            )
        finally:
            self._set(is_submitting=False)
