"""Entry point for the order-entry Textual app."""

from __future__ import annotations

from order_entry.order_app import OrderEntryApp


def main() -> None:
    """Run the Textual application."""
    OrderEntryApp().run()


if __name__ == "__main__":
    main()
