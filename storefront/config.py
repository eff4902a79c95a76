"""Runtime configuration defaults for the order log and logging."""

from __future__ import annotations

import os

ORDER_LOG_PATH = os.environ.get("STOREFRONT_ORDER_LOG", "orders.log")
DEBUG_LOG_PATH = os.environ.get("STOREFRONT_DEBUG_LOG", "/tmp/storefront-debug.log")
LOG_LEVEL = os.environ.get("STOREFRONT_LOG_LEVEL", "INFO")

ORDER_ID_PREFIX = "ORD"
CURRENCY_SYMBOL = "$"

# Slot count of the in-memory order history.
MEMORY_ORDER_SLOTS = 100
