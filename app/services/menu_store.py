"""
Menu Store with Concurrency Control

Thread-safe in-memory menu:
- Upsert by name (create or update price/category)
- Listing in insertion order
- Lookup by id

The store owns the lock that also guards the order store, so every
mutation in the system goes through a single serialization point.

Author: Khalil Bannouri
Version: 1.0.0
"""

import logging
import math
import threading
from dataclasses import replace
from typing import Any, Optional

from app.core.exceptions import ValidationError
from app.models import MenuCategory, MenuItem

logger = logging.getLogger(__name__)

CATEGORY_LIST = "Starter, Main Course, Dessert, or Beverage"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_menu_item(name: Any, price: Any, category: Any) -> MenuCategory:
    """
    Validate raw menu item fields.

    Rules are checked in order and the first failure is raised.

    Returns:
        MenuCategory: The parsed category

    Raises:
        ValidationError: If any field is missing or malformed
    """
    if not isinstance(name, str) or not name:
        raise ValidationError("Name is required and must be a string.")

    # NaN fails the comparison; infinities cannot be rendered as JSON
    if not _is_number(price) or not price > 0 or (isinstance(price, float) and math.isinf(price)):
        raise ValidationError("Price must be a positive number.")

    try:
        return MenuCategory(category)
    except ValueError:
        raise ValidationError(f"Category must be one of {CATEGORY_LIST}.")


class MenuStore:
    """Thread-safe menu keyed by id, upserted by name."""

    def __init__(self, lock: Optional[threading.RLock] = None):
        self.lock = lock or threading.RLock()
        self._items: list[MenuItem] = []
        self._last_id = 0

    def upsert(self, name: Any, price: Any, category: Any) -> tuple[MenuItem, bool]:
        """
        Insert a new item or update the item with the same name.

        Args:
            name: Item name, matched case-sensitively
            price: Positive number
            category: One of the MenuCategory values

        Returns:
            tuple: (snapshot of the stored item, True if it was created)

        Raises:
            ValidationError: Input failed validation; the menu is unchanged
        """
        parsed_category = validate_menu_item(name, price, category)

        with self.lock:
            existing = self._find_by_name(name)
            if existing is not None:
                existing.price = price
                existing.category = parsed_category
                logger.info(f"Menu item #{existing.id} '{name}' updated")
                return replace(existing), False

            self._last_id += 1
            item = MenuItem(
                id=self._last_id,
                name=name,
                price=price,
                category=parsed_category,
            )
            self._items.append(item)
            logger.info(f"Menu item #{item.id} '{name}' added")
            return replace(item), True

    def list_items(self) -> list[MenuItem]:
        """Return all items in insertion order."""
        with self.lock:
            return [replace(item) for item in self._items]

    def find_by_id(self, item_id: Any) -> Optional[MenuItem]:
        """Return the item with this id, or None."""
        with self.lock:
            item = self._find_by_id(item_id)
            return replace(item) if item is not None else None

    def exists_by_id(self, item_id: Any) -> bool:
        with self.lock:
            return self._find_by_id(item_id) is not None

    def __len__(self) -> int:
        with self.lock:
            return len(self._items)

    def _find_by_name(self, name: str) -> Optional[MenuItem]:
        return next((item for item in self._items if item.name == name), None)

    def _find_by_id(self, item_id: Any) -> Optional[MenuItem]:
        # Numeric ids only: 1 and 1.0 match item #1, "1" and True do not.
        if not _is_number(item_id):
            return None
        return next((item for item in self._items if item.id == item_id), None)
