"""Editable static menu configuration."""

from __future__ import annotations

# Prices are kept as strings so order_entry.data can build exact Decimal values from them.
MENU_ROWS: list[dict[str, str]] = [
    {"name": "Beer", "category": "Beer", "price": "2.00"},
    {"name": "Cola", "category": "Refreshments", "price": "1.75"},
]

CATEGORY_BADGE_STYLES: tuple[str, ...] = (
    "bold #0b1f0f on #5fbf72",
    "bold #ffffff on #b23a48",
    "bold #ffffff on #2f6db5",
)
