"""Field-presence validation for the wizard steps."""

from __future__ import annotations

from typing import Any, Mapping, Optional

DEFAULT_REQUIRED_DIMENSIONS: tuple[str, ...] = ("authorship", "disclosure-risk", "intended-use")

RATING_ERROR = "Please provide a relationship rating"
CATEGORY_ERROR = "Please select a primary category"


def dimension_error(dimension_id: str) -> str:
    return f"Please select at least one {dimension_id.replace('-', ' ', 1)} tag"


def validate_step(
    step: Optional[str],
    *,
    belonging_rating: Optional[int] = None,
    selected_category: Any = None,
    selected_tags: Optional[Mapping[str, list[str]]] = None,
    required_dimensions: tuple[str, ...] | list[str] = DEFAULT_REQUIRED_DIMENSIONS,
) -> dict[str, str]:
    """Return a field -> message map of what ``step`` is missing.

    Step A needs a rating, step B a category, step C at least one tag in each
    required dimension. Any other step is trivially valid.
    """
    errors: dict[str, str] = {}

    if step == "A":
        if belonging_rating is None:
            errors["belongingRating"] = RATING_ERROR
    elif step == "B":
        if not selected_category:
            errors["selectedCategory"] = CATEGORY_ERROR
    elif step == "C":
        tags = selected_tags or {}
        for dimension_id in required_dimensions:
            if not tags.get(dimension_id):
                errors[dimension_id] = dimension_error(dimension_id)

    return errors
