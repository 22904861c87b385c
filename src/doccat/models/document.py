"""Document model and its creation payload."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class DocumentStatus(StrEnum):
    PENDING = "pending"
    CATEGORIZING = "categorizing"
    COMPLETED = "completed"


class Document(BaseModel):
    """A document awaiting or finished with categorization."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    id: str
    title: str
    content: str
    summary: str
    created_at: str  # ISO date, YYYY-MM-DD
    author_id: str
    status: DocumentStatus = DocumentStatus.PENDING


class DocumentCreate(BaseModel):
    """Body of ``POST /api/documents``; every field must be non-empty."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    summary: str = Field(min_length=1)
    author_id: str = Field(min_length=1)
