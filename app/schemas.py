"""
Pydantic Schemas for Request/Response Validation

Request bodies accept loosely typed fields: the stores own validation so
that rule order and error messages stay identical whichever caller
reaches them. Response schemas describe the JSON wire format.

Author: Khalil Bannouri
Version: 1.0.0
"""

from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class MenuItemUpsert(BaseModel):
    """Request schema for adding or updating a menu item."""
    name: Any = Field(None, examples=["Pizza"])
    price: Any = Field(None, examples=[10])
    category: Any = Field(None, examples=["Main Course"])


class OrderCreate(BaseModel):
    """Request schema for placing an order."""
    items: Any = Field(None, examples=[[1, 2]])


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class MenuItemResponse(BaseModel):
    """A menu item as returned by the API."""
    id: int
    name: str
    price: Union[int, float]
    category: str


class MessageResponse(BaseModel):
    """Acknowledgement for a menu upsert."""
    message: str


class OrderCreateResponse(BaseModel):
    """Response after successfully placing an order."""
    model_config = ConfigDict(populate_by_name=True)

    message: str
    order_id: int = Field(..., alias="orderId")


class OrderDetailsResponse(BaseModel):
    """An order with its menu items resolved; unknown items are null."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    status: str
    created_at: str = Field(..., alias="createdAt")
    items: List[Optional[MenuItemResponse]]


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    scheduler: str
    menu_items: int
    orders: int
    timestamp: datetime
