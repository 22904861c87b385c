"""ReferenceCatalog: read-mostly queries over the static reference collections."""

from __future__ import annotations

import random
import time
from datetime import date
from typing import Optional

from doccat.catalog import reference_data
from doccat.catalog.analytics import with_analytics
from doccat.core.exceptions import DocumentNotFoundError
from doccat.models.category import CategorySelection
from doccat.models.document import Document, DocumentCreate, DocumentStatus
from doccat.models.tags import Tag, TagCreate, TagDimension


def _parse_flag(value: str | None) -> Optional[bool]:
    """Map a ``true``/``false`` query value to a bool; anything else means unset."""
    if value == "true":
        return True
    if value == "false":
        return False
    return None


class ReferenceCatalog:
    """Serves request-local copies of documents, categories and tag dimensions.

    Creation methods synthesize records without storing them.
    """

    def __init__(
        self,
        documents: list[Document] | None = None,
        categories: list[CategorySelection] | None = None,
        dimensions: list[TagDimension] | None = None,
        suggestions: dict[str, dict[str, list[str]]] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._documents = documents if documents is not None else reference_data.DOCUMENTS
        self._categories = categories if categories is not None else reference_data.CATEGORIES
        self._dimensions = dimensions if dimensions is not None else reference_data.TAG_DIMENSIONS
        self._suggestions = suggestions if suggestions is not None else reference_data.TAG_SUGGESTIONS
        self._rng = rng or random.Random()

    # ---- categories ----

    def list_categories(
        self, high_value: str | None = None, include_analytics: bool = False
    ) -> list[CategorySelection]:
        categories = [c.model_copy(deep=True) for c in self._categories]

        flag = _parse_flag(high_value)
        if flag is not None:
            categories = [c for c in categories if c.is_high_value is flag]

        if include_analytics:
            categories = with_analytics(categories, self._rng)
        return categories

    # ---- documents ----

    def list_documents(self, search: str | None = None, status: str | None = None) -> list[Document]:
        documents = [d.model_copy(deep=True) for d in self._documents]

        if search:
            needle = search.lower()
            documents = [
                d for d in documents
                if needle in d.title.lower() or needle in d.summary.lower()
            ]

        if status and status != "all":
            documents = [d for d in documents if d.status == status]
        return documents

    def get_document(self, document_id: str) -> Document:
        for document in self._documents:
            if document.id == document_id:
                return document.model_copy(deep=True)
        raise DocumentNotFoundError(document_id)

    def create_document(self, payload: DocumentCreate) -> Document:
        return Document(
            id=f"doc_{int(time.time() * 1000)}",
            title=payload.title,
            content=payload.content,
            summary=payload.summary,
            author_id=payload.author_id,
            created_at=date.today().isoformat(),
            status=DocumentStatus.PENDING,
        )

    # ---- tags ----

    def list_tag_dimensions(
        self, dimension: str | None = None, required: str | None = None
    ) -> list[TagDimension]:
        dimensions = [d.model_copy(deep=True) for d in self._dimensions]

        if dimension:
            dimensions = [d for d in dimensions if d.id == dimension]

        flag = _parse_flag(required)
        if flag is not None:
            dimensions = [d for d in dimensions if d.required is flag]
        return dimensions

    def create_tag(self, payload: TagCreate) -> Tag:
        return Tag(
            id=f"custom_{int(time.time() * 1000)}",
            name=payload.name,
            description=payload.description,
            risk_level=payload.risk_level or None,
        )

    def get_tag_suggestions(self, category_id: str | None) -> dict[str, list[str]] | None:
        if category_id and category_id in self._suggestions:
            return {dim: list(tags) for dim, tags in self._suggestions[category_id].items()}
        return None
