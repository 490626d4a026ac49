"""Runtime configuration defaults for the order-entry widget."""

from __future__ import annotations

import os

DEBUG_LOG_PATH = os.environ.get("ORDER_ENTRY_DEBUG_LOG", "/tmp/order-entry-debug.log")

CURRENCY_SYMBOL = "$"
PRICE_DECIMALS = 2

DEFAULT_QUANTITY = 1
MIN_QUANTITY = 1
# Longest digit run read from typed quantity text.
MAX_QUANTITY_DIGITS = 9
