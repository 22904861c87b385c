"""FastAPI application with lifespan, error handlers and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from doccat.api.routes import categories, documents, health, steps, tags, workflow
from doccat.auth.identity import create_identity_service
from doccat.catalog.catalog import ReferenceCatalog
from doccat.core.config import AppSettings
from doccat.core.exceptions import AuthenticationError, DocCatError
from doccat.core.logging import configure_logging, get_logger
from doccat.core.protocols import IIdentityService, ISessionStore
from doccat.persistence import create_persistence
from doccat.workflow.service import WorkflowService

LOGGER = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and announce the wiring for this process."""
    settings: AppSettings = app.state.settings
    configure_logging(settings.log_level)
    LOGGER.info("doccat starting (environment=%s, persistence=%s)",
                settings.environment, settings.persistence)
    yield
    LOGGER.info("doccat shutting down")


async def doccat_error_handler(request: Request, exc: DocCatError) -> JSONResponse:
    content: dict = {"error": exc.message, "success": False}
    if exc.details:
        content["details"] = exc.details
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    if exc.status_code >= 500:
        LOGGER.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.details)
    return JSONResponse(status_code=exc.status_code, content=content, headers=headers)


def create_app(
    settings: AppSettings | None = None,
    *,
    session_store: ISessionStore | None = None,
    identity: IIdentityService | None = None,
    catalog: ReferenceCatalog | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Collaborators not passed in are built from ``settings``.
    """
    settings = settings or AppSettings()
    if session_store is None:
        session_store, _ = create_persistence(settings)

    app = FastAPI(
        title="doccat Document Categorization Service",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.catalog = catalog or ReferenceCatalog()
    app.state.identity = identity or create_identity_service(settings.auth)
    app.state.workflow_service = WorkflowService(session_store, settings.workflow)

    app.add_exception_handler(DocCatError, doccat_error_handler)

    app.include_router(health.router)
    for module in (categories, documents, tags, workflow, steps):
        app.include_router(module.router, prefix="/api")
    return app
