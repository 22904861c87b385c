"""Data loaders for the category (B) and tag (C) wizard steps."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from doccat.catalog.catalog import ReferenceCatalog
from doccat.models.category import CategorySelection
from doccat.models.document import Document
from doccat.models.tags import TagDimension


class StepBData(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    document: Document
    categories: list[CategorySelection] = Field(default_factory=list)


class StepCData(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    document: Document
    tag_dimensions: list[TagDimension] = Field(default_factory=list)
    suggestions: Optional[dict[str, list[str]]] = None


def load_step_b(catalog: ReferenceCatalog, document_id: str) -> StepBData:
    """Document plus every category, each with an analytics snapshot.

    Raises:
        DocumentNotFoundError: unknown ``document_id``.
    """
    document = catalog.get_document(document_id)
    return StepBData(
        document=document,
        categories=catalog.list_categories(include_analytics=True),
    )


def load_step_c(
    catalog: ReferenceCatalog, document_id: str, category_id: str | None = None
) -> StepCData:
    """Document, tag dimensions, and tag suggestions for the chosen category.

    Raises:
        DocumentNotFoundError: unknown ``document_id``.
    """
    document = catalog.get_document(document_id)
    return StepCData(
        document=document,
        tag_dimensions=catalog.list_tag_dimensions(),
        suggestions=catalog.get_tag_suggestions(category_id),
    )
