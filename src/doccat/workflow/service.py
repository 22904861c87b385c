"""WorkflowService: draft save, submit and validate for categorization sessions."""

from __future__ import annotations

from typing import Any

from doccat.core.config import WorkflowConfig
from doccat.core.exceptions import DocCatError, IncompleteWorkflowError, PersistenceError, SessionNotFoundError
from doccat.core.logging import get_logger
from doccat.core.protocols import ISessionStore
from doccat.models.document import DocumentStatus
from doccat.models.workflow import (
    ALL_STEPS,
    SaveDraftRequest,
    SubmitRequest,
    ValidateRequest,
    WorkflowSession,
    WorkflowStep,
    utcnow,
)
from doccat.workflow.validation import validate_step

LOGGER = get_logger(__name__)


class WorkflowService:
    """Applies decoded workflow requests to the session store.

    Draft saves and submits upsert on (document_id, user_id), so repeated
    writes for the same pair update one session and the latest write wins.
    """

    def __init__(self, sessions: ISessionStore, config: WorkflowConfig | None = None) -> None:
        self._sessions = sessions
        self._config = config or WorkflowConfig()

    def _upsert(self, session: WorkflowSession, failure_message: str) -> WorkflowSession:
        try:
            return self._sessions.upsert(session)
        except Exception as exc:
            underlying = exc.message if isinstance(exc, DocCatError) else str(exc)
            LOGGER.error("%s for document=%s user=%s: %s",
                         failure_message, session.document_id, session.user_id, underlying)
            raise PersistenceError(failure_message, details=underlying) from exc

    def save_draft(self, request: SaveDraftRequest, user_id: str) -> dict[str, Any]:
        try:
            existing = self._sessions.get(request.document_id, user_id)
        except Exception as exc:
            underlying = exc.message if isinstance(exc, DocCatError) else str(exc)
            raise PersistenceError("Failed to save draft", details=underlying) from exc
        now = utcnow()
        session = WorkflowSession(
            document_id=request.document_id,
            user_id=user_id,
            step=request.step or WorkflowStep.A,
            belonging_rating=request.belonging_rating,
            selected_category_id=request.selected_category,
            selected_tags=request.selected_tags or {},
            custom_tags=request.custom_tags,
            is_draft=True,
            completed_steps=existing.completed_steps if existing else [],
            updated_at=now,
        )
        stored = self._upsert(session, "Failed to save draft")
        LOGGER.info("Saved draft %s for document=%s user=%s", stored.id, stored.document_id, user_id)
        return {
            "message": "Draft saved successfully",
            "workflowId": stored.id,
            "savedAt": now.isoformat(),
            "documentStatus": DocumentStatus.CATEGORIZING.value,
            "success": True,
        }

    def submit(self, request: SubmitRequest, user_id: str) -> dict[str, Any]:
        missing = request.missing_fields()
        if self._config.enforce_required_tags and not missing:
            errors = validate_step(
                "C",
                selected_tags=request.selected_tags,
                required_dimensions=self._config.required_dimensions,
            )
            missing = sorted(errors)
        if missing:
            LOGGER.info("Rejected incomplete submit for document=%s: missing %s",
                        request.document_id, ", ".join(missing))
            raise IncompleteWorkflowError(missing)

        now = utcnow()
        session = WorkflowSession(
            document_id=request.document_id,
            user_id=user_id,
            step=WorkflowStep.COMPLETE,
            belonging_rating=request.belonging_rating,
            selected_category_id=request.selected_category,
            selected_tags=request.selected_tags or {},
            custom_tags=request.custom_tags,
            is_draft=False,
            completed_steps=list(ALL_STEPS),
            updated_at=now,
            submitted_at=now,
        )
        stored = self._upsert(session, "Failed to submit workflow")
        LOGGER.info("Submitted workflow %s for document=%s user=%s", stored.id, stored.document_id, user_id)
        return {
            "message": "Workflow submitted successfully",
            "workflowId": stored.id,
            "submittedAt": now.isoformat(),
            "processingEstimate": self._config.processing_estimate,
            "documentStatus": DocumentStatus.COMPLETED.value,
            "success": True,
        }

    def validate(self, request: ValidateRequest) -> dict[str, Any]:
        errors = validate_step(
            request.step,
            belonging_rating=request.belonging_rating,
            selected_category=request.selected_category,
            selected_tags=request.selected_tags,
            required_dimensions=self._config.required_dimensions,
        )
        return {"valid": not errors, "errors": errors, "success": True}

    def get_session(self, document_id: str, user_id: str) -> WorkflowSession:
        session = self._sessions.get(document_id, user_id)
        if session is None:
            raise SessionNotFoundError(document_id, user_id)
        return session
