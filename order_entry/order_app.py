"""Main Textual app class."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

from rich.text import Text
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.widgets import Button, Footer, Header, Input, OptionList, Static
from textual.widgets.option_list import Option

from order_entry.config import DEBUG_LOG_PATH, DEFAULT_QUANTITY, MAX_QUANTITY_DIGITS
from order_entry.data import MENU, categories_for, group_by_category
from order_entry.models import MenuItem, OrderLine
from order_entry.rendering import (
    format_category_header,
    format_line_detail,
    format_line_label,
    format_price,
    format_selection,
    menu_option_label,
)
from order_entry.state import OrderState

NO_ITEM_OPTION_ID = "no-item"


class RemoveLineButton(Button):
    """Removal trigger bound to a single order line."""

    def __init__(self, line_id: str) -> None:
        super().__init__("✕ Remove", classes="remove-line")
        self.line_id = line_id


class OrderLineRow(Horizontal):
    """One rendered order line: name, unit pricing, subtotal and remove button."""

    def __init__(self, line: OrderLine, categories: Sequence[str]) -> None:
        super().__init__(classes="order-line")
        self.line = line
        self.categories = categories

    def compose(self) -> ComposeResult:
        with Vertical(classes="line-info"):
            yield Static(format_line_label(self.line, self.categories), classes="line-name")
            yield Static(format_line_detail(self.line), classes="line-detail")
        yield Static(format_price(self.line.subtotal), classes="line-subtotal")
        yield RemoveLineButton(self.line.line_id)


class OrderEntryApp(App):
    """A Textual app for building a customer order from a fixed menu."""

    TITLE = "Order Management"
    SUB_TITLE = "Order entry"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
        padding: 0 1;
    }

    .pane {
        height: auto;
        border: round $primary;
        padding: 0 1;
        margin-bottom: 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }

    .field-label {
        color: $text-muted;
    }

    .input-row {
        height: auto;
    }

    #name-input {
        width: 1fr;
    }

    #customer-label {
        margin-top: 1;
    }

    #menu-options {
        height: auto;
        max-height: 12;
        margin-bottom: 1;
    }

    #selection-status {
        margin-bottom: 1;
    }

    #quantity-input {
        width: 12;
    }

    #add-item {
        width: 100%;
        margin-top: 1;
    }

    #order-lines {
        height: auto;
    }

    .order-line {
        height: auto;
        border: tall $surface;
        padding: 0 1;
    }

    .line-info {
        width: 1fr;
        height: auto;
    }

    .line-detail {
        color: $text-muted;
    }

    .line-subtotal {
        width: 12;
        text-style: bold;
        content-align: right middle;
    }

    #total-bar {
        height: 3;
        margin-top: 1;
        padding: 0 1;
        background: $primary-darken-2;
    }

    #total-label {
        width: 1fr;
        text-style: bold;
        content-align: left middle;
    }

    #order-total {
        width: auto;
        text-style: bold;
        content-align: right middle;
    }
    """

    BINDINGS = [
        Binding("escape", "clear_selection", "Clear selection"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        catalog: Sequence[MenuItem] = MENU,
        debug_log_path: Path | str | None = None,
    ) -> None:
        super().__init__()
        self.state = OrderState(catalog)
        self._categories = categories_for(self.state.catalog)
        self._items_by_option_id: dict[str, MenuItem] = {}
        self._debug_log_path = Path(debug_log_path or DEBUG_LOG_PATH)
        self._log_debug("app_init")

    def _log_debug(self, message: str) -> None:
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self._debug_log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._debug_log_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except OSError:
            # Logging must never interfere with app flow.
            return

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="main-layout"):
            with Vertical(id="customer-pane", classes="pane"):
                yield Static("Customer Name", classes="pane-title")
                with Horizontal(classes="input-row"):
                    yield Input(placeholder="Enter customer name...", id="name-input")
                    yield Button("Set", id="set-name", variant="primary")
                yield Static(id="customer-label")

            with Vertical(id="items-pane", classes="pane"):
                yield Static("Add Items", classes="pane-title")
                yield Static("Select Item", classes="field-label")
                yield OptionList(*self._menu_options(), id="menu-options")
                yield Static(id="selection-status")
                yield Static("Quantity", classes="field-label")
                with Horizontal(classes="input-row"):
                    yield Button("−", id="quantity-down")
                    yield Input(
                        value=str(DEFAULT_QUANTITY),
                        type="integer",
                        max_length=MAX_QUANTITY_DIGITS,
                        id="quantity-input",
                    )
                    yield Button("+", id="quantity-up")
                yield Button("Add to Order", id="add-item", variant="primary")

            with Vertical(id="order-section", classes="pane"):
                yield Static("Order Items", classes="pane-title")
                yield Vertical(id="order-lines")
                with Horizontal(id="total-bar"):
                    yield Static("Total", id="total-label")
                    yield Static(id="order-total")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_all()

    def _menu_options(self) -> list[Option]:
        self._items_by_option_id.clear()
        options = [Option("Choose an item...", id=NO_ITEM_OPTION_ID)]
        for category_index, (category, items) in enumerate(group_by_category(self.state.catalog).items()):
            options.append(
                Option(format_category_header(category), id=f"category-{category_index}", disabled=True)
            )
            for item in items:
                option_id = f"item-{len(self._items_by_option_id)}"
                self._items_by_option_id[option_id] = item
                options.append(Option(f"  {menu_option_label(item)}", id=option_id))
        return options

    def option_id_for(self, item: MenuItem) -> str | None:
        for option_id, candidate in self._items_by_option_id.items():
            if candidate == item:
                return option_id
        return None

    # Customer name

    @on(Input.Changed, "#name-input")
    def handle_name_changed(self, event: Input.Changed) -> None:
        self.state.update_name_draft(event.value)

    @on(Input.Submitted, "#name-input")
    @on(Button.Pressed, "#set-name")
    def handle_confirm_name(self, event: Input.Submitted | Button.Pressed) -> None:
        confirmed = self.state.confirm_name()
        self._log_debug(f"confirm_name accepted={confirmed} customer={self.state.customer_name!r}")
        if confirmed:
            self.query_one("#name-input", Input).value = ""
        self._refresh_customer()

    # Selection

    @on(OptionList.OptionSelected, "#menu-options")
    def handle_menu_selected(self, event: OptionList.OptionSelected) -> None:
        item = self._items_by_option_id.get(event.option_id or "")
        self.state.select_item(item)
        self._log_debug(f"select_item item={item!r}")
        self._sync_quantity_input()
        self._refresh_selection()

    @on(Input.Changed, "#quantity-input")
    def handle_quantity_changed(self, event: Input.Changed) -> None:
        if not self.state.can_add:
            return
        self.state.set_quantity(event.value)
        # An empty field is left alone while the user is still typing.
        if event.value.strip():
            self._sync_quantity_input()

    @on(Button.Pressed, "#quantity-up")
    def handle_quantity_up(self, event: Button.Pressed) -> None:
        self._step_quantity(1)

    @on(Button.Pressed, "#quantity-down")
    def handle_quantity_down(self, event: Button.Pressed) -> None:
        self._step_quantity(-1)

    @on(Button.Pressed, "#add-item")
    @on(Input.Submitted, "#quantity-input")
    def handle_add(self, event: Button.Pressed | Input.Submitted) -> None:
        self.action_add_to_order()

    def action_add_to_order(self) -> None:
        line = self.state.confirm_add()
        if line is None:
            self._log_debug("add_blocked reason=no_selection")
            return

        self._log_debug(f"add_line id={line.line_id} name={line.name!r} qty={line.quantity}")
        self._reset_menu_highlight()
        self._sync_quantity_input()
        self._refresh_selection()
        self._refresh_order()

    def action_clear_selection(self) -> None:
        if not self.state.can_add:
            return
        self.state.select_item(None)
        self._log_debug("select_item item=None")
        self._reset_menu_highlight()
        self._sync_quantity_input()
        self._refresh_selection()

    # Order lines

    @on(Button.Pressed, ".remove-line")
    def handle_remove_line(self, event: Button.Pressed) -> None:
        button = event.button
        if not isinstance(button, RemoveLineButton):
            return
        removed = self.state.remove_line(button.line_id)
        self._log_debug(f"remove_line id={button.line_id} removed={removed}")
        self._refresh_order()

    def _step_quantity(self, delta: int) -> None:
        if not self.state.can_add:
            return
        self.state.set_quantity(self.state.quantity + delta)
        self._sync_quantity_input()

    def _reset_menu_highlight(self) -> None:
        try:
            self.query_one("#menu-options", OptionList).highlighted = 0
        except NoMatches:
            return

    def _sync_quantity_input(self) -> None:
        try:
            quantity_input = self.query_one("#quantity-input", Input)
        except NoMatches:
            return
        shown = str(self.state.quantity)
        if quantity_input.value != shown:
            quantity_input.value = shown

    def _refresh_all(self) -> None:
        self._refresh_customer()
        self._refresh_selection()
        self._refresh_order()

    def _refresh_customer(self) -> None:
        try:
            label = self.query_one("#customer-label", Static)
        except NoMatches:
            return
        if self.state.customer_name is None:
            label.display = False
            return

        text = Text("Customer: ")
        text.append(self.state.customer_name, style="bold")
        label.update(text)
        label.display = True

    def _refresh_selection(self) -> None:
        try:
            status = self.query_one("#selection-status", Static)
        except NoMatches:
            return
        status.update(format_selection(self.state.selected_item))

        idle = not self.state.can_add
        for selector in ("#quantity-input", "#quantity-down", "#quantity-up", "#add-item"):
            self.query_one(selector).disabled = idle

    def _refresh_order(self) -> None:
        try:
            section = self.query_one("#order-section", Vertical)
            lines_widget = self.query_one("#order-lines", Vertical)
            total_widget = self.query_one("#order-total", Static)
        except NoMatches:
            return

        # Empty orders hide the whole section, total included.
        section.display = bool(self.state.lines)
        lines_widget.remove_children()
        if self.state.lines:
            lines_widget.mount(*(OrderLineRow(line, self._categories) for line in self.state.lines))
        total_widget.update(format_price(self.state.total))
