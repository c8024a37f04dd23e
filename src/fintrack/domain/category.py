"""Suggested categories and their icons."""

from typing import Union

from fintrack.domain.entities import Direction


# Suggested category tags per direction, in display order
SUGGESTED_CATEGORIES = {
    Direction.INCOME: ("salary", "investments", "other"),
    Direction.EXPENSE: ("food", "housing", "transport", "leisure", "health", "investments", "other"),
}

CATEGORY_ICONS = {
    Direction.INCOME: {
        "salary": "briefcase",
        "investments": "bar-chart",
        "other": "dollar-sign",
    },
    Direction.EXPENSE: {
        "food": "shopping-cart",
        "housing": "home",
        "transport": "truck",
        "leisure": "film",
        "health": "heart",
        "investments": "trending-down",
        "other": "tag",
    },
}

FALLBACK_ICONS = {
    Direction.INCOME: "dollar-sign",
    Direction.EXPENSE: "tag",
}


def suggested_categories(direction: Union[Direction, str]) -> tuple[str, ...]:
    """Return the suggested category tags for a direction."""
    return SUGGESTED_CATEGORIES[Direction(direction)]


def category_icon(category: str, direction: Union[Direction, str]) -> str:
    """Return the icon key for a category, falling back per direction."""
    direction = Direction(direction)
    return CATEGORY_ICONS[direction].get(category, FALLBACK_ICONS[direction])
