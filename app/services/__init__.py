"""
                        Services Module

Contains the in-memory stores backing the API and the scheduler.

Services:
    - menu_store: Thread-safe menu with upsert-by-name
    - order_store: Order placement, lookup and status advancement

Both stores are process-wide singletons sharing one lock; use the
factory functions below rather than constructing them directly.
"""

import logging
from functools import lru_cache

from app.services.menu_store import MenuStore, validate_menu_item
from app.services.order_store import AdvanceResult, OrderStore

logger = logging.getLogger(__name__)


@lru_cache()
def get_menu_store() -> MenuStore:
    """Get the shared menu store."""
    logger.debug("Creating shared MenuStore")
    return MenuStore()


@lru_cache()
def get_order_store() -> OrderStore:
    """Get the shared order store, bound to the shared menu store."""
    logger.debug("Creating shared OrderStore")
    return OrderStore(get_menu_store())


def reset_stores() -> None:
    """Clear the cached store instances."""
    get_order_store.cache_clear()
    get_menu_store.cache_clear()


__all__ = [
    "MenuStore",
    "OrderStore",
    "AdvanceResult",
    "validate_menu_item",
    "get_menu_store",
    "get_order_store",
    "reset_stores",
]
