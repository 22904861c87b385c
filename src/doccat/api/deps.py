"""FastAPI dependencies resolving app-scoped services and the caller identity."""

from __future__ import annotations

from fastapi import Depends, Request

from doccat.catalog.catalog import ReferenceCatalog
from doccat.core.exceptions import AuthenticationError
from doccat.core.logging import get_logger
from doccat.core.protocols import IIdentityService
from doccat.workflow.service import WorkflowService

LOGGER = get_logger(__name__)


def get_catalog(request: Request) -> ReferenceCatalog:
    return request.app.state.catalog


def get_workflow_service(request: Request) -> WorkflowService:
    return request.app.state.workflow_service


def get_identity(request: Request) -> IIdentityService:
    return request.app.state.identity


def authenticate(request: Request, identity: IIdentityService) -> str:
    """Resolve the bearer token in ``Authorization`` to a user id.

    Raises:
        AuthenticationError: header missing, not a Bearer token, or rejected
            by the identity service.
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        LOGGER.warning("Missing Authorization header for %s", request.url.path)
        raise AuthenticationError("Authentication required")

    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        LOGGER.warning("Invalid Authorization header format for %s", request.url.path)
        raise AuthenticationError("Invalid authentication scheme. Use Bearer token.")

    user_id = identity.verify(token.strip())
    LOGGER.debug("Authenticated user %s for %s", user_id, request.url.path)
    return user_id


def require_user_id(
    request: Request, identity: IIdentityService = Depends(get_identity)
) -> str:
    return authenticate(request, identity)
