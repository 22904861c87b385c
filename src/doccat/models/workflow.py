"""Workflow session and workflow API request models."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import StrEnum
from typing import Annotated, Any, Literal, Optional, Union
from uuid import uuid4

from pydantic import BaseModel, Field, TypeAdapter, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from doccat.core.exceptions import BadRequestError, InvalidActionError
from doccat.models.tags import Tag


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WorkflowStep(StrEnum):
    A = "A"
    B = "B"
    C = "C"
    COMPLETE = "complete"


ALL_STEPS: list[WorkflowStep] = [WorkflowStep.A, WorkflowStep.B, WorkflowStep.C]


class WorkflowAction(StrEnum):
    SAVE_DRAFT = "save_draft"
    SUBMIT = "submit"
    VALIDATE = "validate"


class WorkflowSession(BaseModel):
    """Persisted record of one user's categorization of one document.

    ``(document_id, user_id)`` is the composite key: stores upsert on it, so
    there is at most one session per pair.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    document_id: str
    user_id: str
    step: WorkflowStep = WorkflowStep.A
    belonging_rating: Optional[int] = None
    selected_category_id: Optional[str] = None
    selected_tags: dict[str, list[str]] = Field(default_factory=dict)
    custom_tags: list[Tag] = Field(default_factory=list)
    is_draft: bool = True
    completed_steps: list[WorkflowStep] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    submitted_at: Optional[datetime] = None


# ---------------------------------------------------------------------------
# POST /api/workflow body, decoded once into one variant per action
# ---------------------------------------------------------------------------

class _WorkflowRequestBase(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    document_id: str = Field(min_length=1)
    belonging_rating: Optional[int] = None
    selected_category: Optional[str] = None
    selected_tags: Optional[dict[str, list[str]]] = None

    @field_validator("selected_category", mode="before")
    @classmethod
    def _category_id(cls, value: Any) -> Any:
        # clients send either the category id or the whole category object
        if isinstance(value, dict):
            return value.get("id")
        return value


class SaveDraftRequest(_WorkflowRequestBase):
    action: Literal["save_draft"]
    step: Optional[WorkflowStep] = None
    custom_tags: list[Tag] = Field(default_factory=list)


class SubmitRequest(_WorkflowRequestBase):
    action: Literal["submit"]
    custom_tags: list[Tag] = Field(default_factory=list)

    def missing_fields(self) -> list[str]:
        missing = []
        if self.belonging_rating is None:
            missing.append("belongingRating")
        if not self.selected_category:
            missing.append("selectedCategory")
        if not self.selected_tags:
            missing.append("selectedTags")
        return missing


class ValidateRequest(_WorkflowRequestBase):
    action: Literal["validate"]
    # unknown steps validate trivially, so this stays a plain string
    step: Optional[str] = None


WorkflowRequest = Annotated[
    Union[SaveDraftRequest, SubmitRequest, ValidateRequest],
    Field(discriminator="action"),
]

_request_adapter = TypeAdapter(WorkflowRequest)


def decode_workflow_request(body: Any) -> SaveDraftRequest | SubmitRequest | ValidateRequest:
    """Decode a raw JSON body into the request variant for its action.

    Raises:
        BadRequestError: body is not an object, lacks documentId/action, or
            carries wrongly-typed fields.
        InvalidActionError: action is not a known workflow action.
    """
    if not isinstance(body, dict):
        raise BadRequestError("Invalid request body")
    if not body.get("documentId") or not body.get("action"):
        raise BadRequestError("Missing required fields")

    action = body["action"]
    if not isinstance(action, str) or action not in {a.value for a in WorkflowAction}:
        raise InvalidActionError(str(action))

    try:
        return _request_adapter.validate_python(body)
    except ValidationError as exc:
        raise BadRequestError("Invalid workflow request", details=str(exc)) from exc
