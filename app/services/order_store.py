"""
Order Store

Thread-safe in-memory orders:
- Placement, validated against the menu
- Detail lookup with live-resolved menu items
- Status advancement along Preparing -> Out for Delivery -> Delivered

Shares the menu store's lock, so placement, menu upserts and the
scheduled status sweep never interleave.

Author: Khalil Bannouri
Version: 1.0.0
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from app.core.exceptions import InvalidReferenceError, NotFoundError, ValidationError
from app.models import Order, OrderDetails, OrderStatus, utc_now
from app.services.menu_store import MenuStore

logger = logging.getLogger(__name__)


@dataclass
class AdvanceResult:
    """Outcome of one sweep over the stored orders."""
    advanced: int = 0
    delivered: int = 0
    total: int = 0


class OrderStore:
    """Thread-safe order collection bound to a menu."""

    def __init__(self, menu_store: MenuStore):
        self.menu_store = menu_store
        self.lock = menu_store.lock
        self._orders: list[Order] = []
        self._last_id = 0

    def place(self, item_ids: Any) -> Order:
        """
        Create an order for the given menu item ids.

        Every id is checked against the menu; all unknown ids are
        reported together.

        Args:
            item_ids: List of menu item ids (may be empty)

        Returns:
            Order: Snapshot of the stored order

        Raises:
            ValidationError: item_ids is missing or not a list
            InvalidReferenceError: One or more ids are not on the menu
        """
        if not isinstance(item_ids, list):
            raise ValidationError("Items must be an array of menu item IDs.")

        with self.lock:
            invalid = [i for i in item_ids if not self.menu_store.exists_by_id(i)]
            if invalid:
                logger.warning(f"Order rejected, unknown item ids: {invalid}")
                raise InvalidReferenceError(invalid)

            self._last_id += 1
            order = Order(
                id=self._last_id,
                items=[int(i) for i in item_ids],
                status=OrderStatus.PREPARING,
                created_at=utc_now(),
            )
            self._orders.append(order)
            logger.info(f"Order #{order.id} placed with {len(order.items)} item(s)")
            return self._snapshot(order)

    def get_details(self, order_id: Any) -> OrderDetails:
        """
        Return an order with its menu items resolved.

        Items that can no longer be found resolve to None instead of
        failing the lookup.

        Raises:
            NotFoundError: No order has this id
        """
        with self.lock:
            order = self._find_by_id(order_id)
            if order is None:
                raise NotFoundError("Order not found.")

            return OrderDetails(
                id=order.id,
                status=order.status,
                created_at=order.created_at,
                items=[self.menu_store.find_by_id(i) for i in order.items],
            )

    def advance_all(self) -> AdvanceResult:
        """Move every undelivered order one step along the pipeline."""
        result = AdvanceResult()
        with self.lock:
            for order in self._orders:
                if order.advance():
                    result.advanced += 1
                if order.status.is_terminal:
                    result.delivered += 1
            result.total = len(self._orders)
        return result

    def __len__(self) -> int:
        with self.lock:
            return len(self._orders)

    def _find_by_id(self, order_id: Any) -> Optional[Order]:
        return next((o for o in self._orders if o.id == order_id), None)

    @staticmethod
    def _snapshot(order: Order) -> Order:
        return Order(
            id=order.id,
            items=list(order.items),
            status=order.status,
            created_at=order.created_at,
        )
