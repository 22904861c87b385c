"""Primary category reference data (step B)."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class UsageAnalytics(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    total_selections: int
    recent_activity: int


class ValueDistribution(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    high_value: int
    medium_value: int
    standard_value: int


class CategorySelection(BaseModel):
    """A selectable primary category.

    ``usage_analytics`` and ``value_distribution`` are snapshots attached per
    request and are never part of the stored reference data.
    """

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    id: str
    name: str
    description: str
    examples: list[str] = Field(default_factory=list)
    is_high_value: bool = False
    impact: str = ""
    detailed_description: Optional[str] = None
    processing_strategy: Optional[str] = None
    business_value_classification: Optional[str] = None
    usage_analytics: Optional[UsageAnalytics] = None
    value_distribution: Optional[ValueDistribution] = None
