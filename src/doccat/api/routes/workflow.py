"""Workflow session endpoints: draft save, submit, validate."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from doccat.api.deps import authenticate, get_identity, get_workflow_service, require_user_id
from doccat.core.exceptions import BadRequestError, DocCatError
from doccat.core.logging import get_logger
from doccat.core.protocols import IIdentityService
from doccat.models.workflow import SaveDraftRequest, ValidateRequest, decode_workflow_request
from doccat.workflow.service import WorkflowService

LOGGER = get_logger(__name__)

router = APIRouter(tags=["workflow"])


@router.post("/workflow")
async def workflow_action(
    request: Request,
    service: WorkflowService = Depends(get_workflow_service),
    identity: IIdentityService = Depends(get_identity),
) -> dict:
    """Dispatch one workflow action.

    ``validate`` is anonymous and side-effect free; ``save_draft`` and
    ``submit`` require a bearer token and upsert the caller's session.
    """
    try:
        body = await request.json()
    except ValueError as exc:
        raise BadRequestError("Invalid JSON body") from exc

    action = decode_workflow_request(body)

    try:
        if isinstance(action, ValidateRequest):
            return service.validate(action)

        user_id = authenticate(request, identity)
        if isinstance(action, SaveDraftRequest):
            return service.save_draft(action, user_id)
        return service.submit(action, user_id)
    except DocCatError:
        raise
    except Exception as exc:
        LOGGER.exception("Workflow %s failed for document=%s", action.action, action.document_id)
        raise DocCatError("Workflow operation failed", details=str(exc)) from exc


@router.get("/workflow/{document_id}")
async def get_workflow_session(
    document_id: str,
    user_id: str = Depends(require_user_id),
    service: WorkflowService = Depends(get_workflow_service),
) -> dict:
    session = service.get_session(document_id, user_id)
    return {"session": session.model_dump(mode="json"), "success": True}
