"""In-memory order state: customer name, pending selection and order lines."""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Callable, Sequence
from uuid import uuid4

from order_entry.config import DEFAULT_QUANTITY, MAX_QUANTITY_DIGITS, MIN_QUANTITY
from order_entry.data import MENU
from order_entry.models import Idle, MenuItem, OrderLine, Selecting, Selection

_LEADING_INT = re.compile(rf"\s*([+-]?\d{{1,{MAX_QUANTITY_DIGITS}}})")


def _new_line_id() -> str:
    return uuid4().hex


def coerce_quantity(raw: object) -> int:
    """
    Normalize quantity input the way a forgiving numeric field would.

    Strings contribute their leading integer ("3", " 4 ", "2.5", "7abc"),
    capped at MAX_QUANTITY_DIGITS digits.
    Anything non-numeric becomes the default, and the result never drops
    below MIN_QUANTITY.
    """
    value: int | None = None
    if isinstance(raw, int) and not isinstance(raw, bool):
        value = raw
    elif isinstance(raw, float):
        if math.isfinite(raw):
            value = int(raw)
    elif isinstance(raw, Decimal):
        if raw.is_finite():
            value = int(raw)
    elif isinstance(raw, str):
        match = _LEADING_INT.match(raw)
        if match:
            value = int(match.group(1))

    if value is None:
        value = DEFAULT_QUANTITY
    return max(MIN_QUANTITY, value)


class OrderState:
    """All mutable state owned by one order-entry widget."""

    def __init__(
        self,
        catalog: Sequence[MenuItem] = MENU,
        id_factory: Callable[[], str] = _new_line_id,
    ) -> None:
        self.catalog: tuple[MenuItem, ...] = tuple(catalog)
        self.customer_name: str | None = None
        self.name_draft = ""
        self.selection: Selection = Idle()
        self.lines: list[OrderLine] = []
        self._id_factory = id_factory

    # Customer name

    def update_name_draft(self, text: str) -> None:
        self.name_draft = text

    def confirm_name(self) -> bool:
        """Commit the trimmed draft. Blank drafts are ignored."""
        normalized = self.name_draft.strip()
        if not normalized:
            return False
        self.customer_name = normalized
        self.name_draft = ""
        return True

    # Selection

    @property
    def selected_item(self) -> MenuItem | None:
        if isinstance(self.selection, Selecting):
            return self.selection.item
        return None

    @property
    def quantity(self) -> int:
        if isinstance(self.selection, Selecting):
            return self.selection.quantity
        return DEFAULT_QUANTITY

    @property
    def can_add(self) -> bool:
        return isinstance(self.selection, Selecting)

    def select_item(self, item: MenuItem | None) -> None:
        if item is None:
            self.selection = Idle()
            return

        if isinstance(self.selection, Selecting):
            self.selection = Selecting(item=item, quantity=self.selection.quantity)
        else:
            self.selection = Selecting(item=item)

    def set_quantity(self, raw: object) -> int:
        """Stage a coerced quantity for the current selection and return it."""
        if not isinstance(self.selection, Selecting):
            return DEFAULT_QUANTITY

        quantity = coerce_quantity(raw)
        self.selection = Selecting(item=self.selection.item, quantity=quantity)
        return quantity

    def confirm_add(self) -> OrderLine | None:
        if not isinstance(self.selection, Selecting):
            return None

        item = self.selection.item
        line = OrderLine(
            line_id=self._id_factory(),
            name=item.name,
            category=item.category,
            price=item.price,
            quantity=self.selection.quantity,
        )
        self.lines.append(line)
        self.selection = Idle()
        return line

    # Order lines

    def remove_line(self, line_id: str) -> bool:
        remaining = [line for line in self.lines if line.line_id != line_id]
        if len(remaining) == len(self.lines):
            return False
        self.lines = remaining
        return True

    @property
    def total(self) -> Decimal:
        return sum((line.subtotal for line in self.lines), Decimal("0"))
