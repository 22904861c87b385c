"""Wizard step data endpoints (category step B, tag step C)."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from doccat.api.deps import get_catalog
from doccat.catalog.catalog import ReferenceCatalog
from doccat.catalog.steps import load_step_b, load_step_c

router = APIRouter(tags=["steps"])


@router.get("/steps/B/{document_id}")
async def step_b(document_id: str, catalog: ReferenceCatalog = Depends(get_catalog)) -> dict:
    data = load_step_b(catalog, document_id)
    return {**data.model_dump(mode="json", by_alias=True, exclude_none=True), "success": True}


@router.get("/steps/C/{document_id}")
async def step_c(
    document_id: str,
    catalog: ReferenceCatalog = Depends(get_catalog),
    category_id: Optional[str] = Query(None, alias="categoryId"),
) -> dict:
    data = load_step_c(catalog, document_id, category_id)
    # suggestions is null rather than absent when there are none
    return {**data.model_dump(mode="json", by_alias=True, exclude_none=True),
            "suggestions": data.suggestions, "success": True}
