"""Static menu data and the category index built from it."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Sequence

from order_entry.constant import MENU_ROWS
from order_entry.models import MenuItem


def categories_for(catalog: Iterable[MenuItem]) -> list[str]:
    """Distinct categories in plain ascending order."""
    return sorted({item.category for item in catalog})


def group_by_category(catalog: Sequence[MenuItem]) -> dict[str, list[MenuItem]]:
    """Map each category to its items, keeping catalog order within a group."""
    return {
        category: [item for item in catalog if item.category == category]
        for category in categories_for(catalog)
    }


MENU: tuple[MenuItem, ...] = tuple(
    MenuItem(name=row["name"], category=row["category"], price=Decimal(row["price"])) for row in MENU_ROWS
)

CATEGORIES: list[str] = categories_for(MENU)

ITEMS_BY_CATEGORY: dict[str, list[MenuItem]] = group_by_category(MENU)
