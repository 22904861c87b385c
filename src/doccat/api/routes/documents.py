"""Document endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from doccat.api.deps import get_catalog
from doccat.catalog.catalog import ReferenceCatalog
from doccat.core.exceptions import BadRequestError, DocCatError
from doccat.core.logging import get_logger
from doccat.models.document import DocumentCreate

LOGGER = get_logger(__name__)

router = APIRouter(tags=["documents"])


@router.get("/documents")
async def list_documents(
    catalog: ReferenceCatalog = Depends(get_catalog),
    search: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
) -> dict:
    try:
        documents = catalog.list_documents(search=search, status=status_filter)
    except Exception as exc:
        LOGGER.exception("Document listing failed")
        raise DocCatError("Failed to fetch documents") from exc

    return {
        "documents": [d.model_dump(mode="json", by_alias=True) for d in documents],
        "total": len(documents),
        "success": True,
    }


@router.post("/documents", status_code=status.HTTP_201_CREATED)
async def create_document(
    request: Request, catalog: ReferenceCatalog = Depends(get_catalog)
) -> JSONResponse:
    """Echo back a new pending document; nothing is persisted."""
    try:
        body = await request.json()
        payload = DocumentCreate.model_validate(body)
    except (ValueError, ValidationError) as exc:
        raise BadRequestError("Missing required fields") from exc

    try:
        document = catalog.create_document(payload)
    except Exception as exc:
        LOGGER.exception("Document creation failed")
        raise DocCatError("Failed to create document") from exc

    LOGGER.info("Created document %s for author %s", document.id, document.author_id)
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={"document": document.model_dump(mode="json", by_alias=True), "success": True},
    )
