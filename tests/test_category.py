"""Tests for suggested categories and icons."""

import pytest

from fintrack.domain.category import category_icon, suggested_categories
from fintrack.domain.entities import Direction


@pytest.mark.parametrize(
    "category, icon",
    [("salary", "briefcase"), ("investments", "bar-chart"), ("other", "dollar-sign"), ("lottery", "dollar-sign")],
)
def test_income_icons(category, icon):
    assert category_icon(category, Direction.INCOME) == icon


@pytest.mark.parametrize(
    "category, icon",
    [
        ("food", "shopping-cart"),
        ("housing", "home"),
        ("transport", "truck"),
        ("leisure", "film"),
        ("health", "heart"),
        ("investments", "trending-down"),
        ("other", "tag"),
        ("salary", "tag"),
    ],
)
def test_expense_icons(category, icon):
    assert category_icon(category, Direction.EXPENSE) == icon


def test_direction_as_string():
    assert category_icon("food", "expense") == "shopping-cart"


def test_suggested_categories():
    assert suggested_categories(Direction.INCOME) == ("salary", "investments", "other")
    assert "food" in suggested_categories(Direction.EXPENSE)
    assert "salary" not in suggested_categories(Direction.EXPENSE)
