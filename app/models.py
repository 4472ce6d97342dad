"""
In-Memory Domain Models

Menu items and orders live only for the lifetime of the process.
Orders reference menu items by id; the items are resolved at read time.

Author: Khalil Bannouri
Version: 1.0.0
"""

import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional


class MenuCategory(str, enum.Enum):
    """Fixed set of menu categories."""
    STARTER = "Starter"
    MAIN_COURSE = "Main Course"
    DESSERT = "Dessert"
    BEVERAGE = "Beverage"


class OrderStatus(str, enum.Enum):
    """Order status workflow, in pipeline order."""
    PREPARING = "Preparing"
    OUT_FOR_DELIVERY = "Out for Delivery"
    DELIVERED = "Delivered"

    @property
    def is_terminal(self) -> bool:
        return self is OrderStatus.DELIVERED

    def next(self) -> "OrderStatus":
        """Return the following status; Delivered stays Delivered."""
        if self.is_terminal:
            return self
        pipeline = list(OrderStatus)
        return pipeline[pipeline.index(self) + 1]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as UTC ISO-8601 with milliseconds and a Z suffix."""
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class MenuItem:
    """A dish on the menu. ``name`` is the upsert key."""
    id: int
    name: str
    price: float
    category: MenuCategory

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "category": self.category.value,
        }


@dataclass
class Order:
    """
    A placed order.

    Attributes:
        id: Sequential order number
        items: Menu item ids, in the order they were requested
        status: Current position in the delivery pipeline
        created_at: Placement time (UTC)
    """
    id: int
    items: List[int]
    status: OrderStatus = OrderStatus.PREPARING
    created_at: datetime = field(default_factory=utc_now)

    def advance(self) -> bool:
        """Move one step along the pipeline. Returns False if already delivered."""
        if self.status.is_terminal:
            return False
        self.status = self.status.next()
        return True


@dataclass
class OrderDetails:
    """An order with its menu items resolved; missing items are None."""
    id: int
    status: OrderStatus
    created_at: datetime
    items: List[Optional[MenuItem]]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "status": self.status.value,
            "createdAt": format_timestamp(self.created_at),
            "items": [item.to_dict() if item else None for item in self.items],
        }
