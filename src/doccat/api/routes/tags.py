"""Tag dimension endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from doccat.api.deps import get_catalog
from doccat.catalog.catalog import ReferenceCatalog
from doccat.core.exceptions import BadRequestError, DocCatError
from doccat.core.logging import get_logger
from doccat.models.tags import TagCreate

LOGGER = get_logger(__name__)

router = APIRouter(tags=["tags"])


@router.get("/tags")
async def list_tag_dimensions(
    catalog: ReferenceCatalog = Depends(get_catalog),
    dimension: Optional[str] = Query(None),
    required: Optional[str] = Query(None),
) -> dict:
    try:
        dimensions = catalog.list_tag_dimensions(dimension=dimension, required=required)
    except Exception as exc:
        LOGGER.exception("Tag dimension listing failed")
        raise DocCatError("Failed to fetch tag dimensions") from exc

    return {
        "dimensions": [d.model_dump(mode="json", by_alias=True, exclude_none=True) for d in dimensions],
        "total": len(dimensions),
        "success": True,
    }


@router.post("/tags", status_code=status.HTTP_201_CREATED)
async def create_custom_tag(
    request: Request, catalog: ReferenceCatalog = Depends(get_catalog)
) -> JSONResponse:
    """Echo back a custom tag for a dimension; nothing is persisted."""
    try:
        payload = TagCreate.model_validate(await request.json())
    except (ValueError, ValidationError) as exc:
        raise BadRequestError("Missing required fields") from exc

    try:
        tag = catalog.create_tag(payload)
    except Exception as exc:
        LOGGER.exception("Custom tag creation failed")
        raise DocCatError("Failed to create custom tag") from exc

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={
            "tag": tag.model_dump(mode="json", by_alias=True, exclude_none=True),
            "dimensionId": payload.dimension_id,
            "success": True,
        },
    )
