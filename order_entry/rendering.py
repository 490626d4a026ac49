"""Rendering helpers for prices, menu options and order lines."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from rich.text import Text

from order_entry.config import CURRENCY_SYMBOL, PRICE_DECIMALS
from order_entry.constant import CATEGORY_BADGE_STYLES
from order_entry.data import CATEGORIES
from order_entry.models import MenuItem, OrderLine


def format_price(value: Decimal) -> str:
    """Two-decimal display price. Rounds for presentation only."""
    return f"{CURRENCY_SYMBOL}{value:.{PRICE_DECIMALS}f}"


def badge_style(category: str, categories: Sequence[str] = CATEGORIES) -> str:
    """Return a consistent badge style for a category's position among `categories`."""
    if category not in categories:
        return CATEGORY_BADGE_STYLES[0]
    return CATEGORY_BADGE_STYLES[list(categories).index(category) % len(CATEGORY_BADGE_STYLES)]


def menu_option_label(item: MenuItem) -> str:
    return f"{item.name} - {format_price(item.price)}"


def format_category_header(category: str) -> Text:
    return Text(category, style="bold")


def format_line_label(line: OrderLine, categories: Sequence[str] = CATEGORIES) -> Text:
    """Render an order line name with its colored category tag."""
    text = Text()
    text.append(f" {line.category} ", style=badge_style(line.category, categories))
    text.append(f" {line.name}", style="bold")
    return text


def format_line_detail(line: OrderLine) -> str:
    return f"{line.quantity} x {format_price(line.price)}"


def format_selection(item: MenuItem | None) -> str:
    if item is None:
        return "No item selected"
    return f"Selected: {menu_option_label(item)}"
