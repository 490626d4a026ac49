"""Domain models for order-entry."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from order_entry.config import DEFAULT_QUANTITY


@dataclass(frozen=True)
class MenuItem:
    """A catalog entry. Identity is the (name, category) pair."""

    name: str
    category: str
    price: Decimal


@dataclass(frozen=True)
class OrderLine:
    """A line on the running order, with fields copied from its menu item."""

    line_id: str
    name: str
    category: str
    price: Decimal
    quantity: int

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity


@dataclass(frozen=True)
class Idle:
    """No menu item is chosen."""


@dataclass(frozen=True)
class Selecting:
    """A menu item is chosen and a quantity is staged for it."""

    item: MenuItem
    quantity: int = DEFAULT_QUANTITY


Selection = Idle | Selecting
