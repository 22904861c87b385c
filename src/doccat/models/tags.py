"""Tag dimensions and tags (step C)."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class Tag(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    id: str
    name: str
    description: str = ""
    icon: Optional[str] = None
    risk_level: Optional[int] = None


class TagDimension(BaseModel):
    """A named axis of classification holding an ordered set of tags."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    id: str
    name: str
    description: str
    tags: list[Tag] = Field(default_factory=list)
    multi_select: bool = False
    required: bool = False


class TagCreate(BaseModel):
    """Body of ``POST /api/tags``."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    dimension_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    risk_level: Optional[int] = None
