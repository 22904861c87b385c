"""Primary category endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from doccat.api.deps import get_catalog
from doccat.catalog.catalog import ReferenceCatalog
from doccat.core.exceptions import DocCatError
from doccat.core.logging import get_logger

LOGGER = get_logger(__name__)

router = APIRouter(tags=["categories"])


@router.get("/categories")
async def list_categories(
    catalog: ReferenceCatalog = Depends(get_catalog),
    high_value: Optional[str] = Query(None, alias="highValue"),
    include_analytics: Optional[str] = Query(None, alias="includeAnalytics"),
) -> dict:
    """Return categories, optionally filtered by high-value flag and enriched with analytics."""
    try:
        categories = catalog.list_categories(
            high_value=high_value,
            include_analytics=include_analytics == "true",
        )
    except Exception as exc:
        LOGGER.exception("Category listing failed")
        raise DocCatError("Failed to fetch categories") from exc

    return {
        "categories": [c.model_dump(mode="json", by_alias=True, exclude_none=True) for c in categories],
        "total": len(categories),
        "success": True,
    }
