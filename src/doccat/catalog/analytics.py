"""Per-request usage analytics attached to categories.

The numbers are placeholders drawn at random on every call; there is no
analytics pipeline behind them. Pass a seeded ``random.Random`` to get
reproducible values.
"""

from __future__ import annotations

import random

from doccat.models.category import CategorySelection, UsageAnalytics, ValueDistribution


def random_usage_analytics(rng: random.Random) -> UsageAnalytics:
    return UsageAnalytics(
        total_selections=rng.randint(100, 1099),
        recent_activity=rng.randint(5, 54),
    )


def random_value_distribution(rng: random.Random) -> ValueDistribution:
    return ValueDistribution(
        high_value=rng.randint(10, 49),
        medium_value=rng.randint(15, 49),
        standard_value=rng.randint(20, 49),
    )


def with_analytics(
    categories: list[CategorySelection], rng: random.Random | None = None
) -> list[CategorySelection]:
    """Return copies of ``categories`` carrying fresh analytics snapshots."""
    rng = rng or random.Random()
    return [
        category.model_copy(update={
            "usage_analytics": random_usage_analytics(rng),
            "value_distribution": random_value_distribution(rng),
        })
        for category in categories
    ]
