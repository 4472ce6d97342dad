"""
Domain Exceptions

Raised by the menu and order stores and translated into JSON error
responses by the handlers registered in app.main.

Author: Khalil Bannouri
Version: 1.0.0
"""

from typing import Any, Sequence


class OrderingError(Exception):
    """Base class for errors reported back to the API caller."""

    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(OrderingError):
    """Malformed menu item or order input."""

    status_code = 400


class InvalidReferenceError(OrderingError):
    """An order referenced menu item ids that do not exist."""

    status_code = 400

    def __init__(self, invalid_ids: Sequence[Any]):
        self.invalid_ids = list(invalid_ids)
        joined = ", ".join(str(item_id) for item_id in self.invalid_ids)
        super().__init__(f"Invalid item IDs: {joined}")


class NotFoundError(OrderingError):
    """Lookup miss on an order id."""

    status_code = 404
