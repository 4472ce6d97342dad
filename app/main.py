"""
FastAPI Application Entry Point

Food Ordering Service - in-memory menu and orders with a timed
delivery-status pipeline.

Endpoints:
    - POST /menu: Add a menu item, or update the item with the same name
    - GET /menu: List menu items
    - POST /orders: Place an order
    - GET /orders/{order_id}: Order details with resolved menu items
    - GET /health: System health check

Author: Khalil Bannouri
Version: 1.0.0
"""

import logging
import re
from contextlib import asynccontextmanager
from typing import Any, List, Optional

import uvicorn
from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import get_settings, setup_logging
from app.core.exceptions import NotFoundError, OrderingError
from app.models import utc_now
from app.scheduler import StatusScheduler
from app.schemas import (
    ErrorResponse,
    HealthResponse,
    MenuItemResponse,
    MenuItemUpsert,
    MessageResponse,
    OrderCreate,
    OrderCreateResponse,
    OrderDetailsResponse,
)
from app.services import MenuStore, OrderStore, get_menu_store, get_order_store

# Initialize configuration and logging
settings = get_settings()
setup_logging()
logger = logging.getLogger(__name__)


# =============================================================================
# APPLICATION LIFECYCLE
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application startup and shutdown events.
    """
    # Startup
    logger.info("=" * 60)
    logger.info(f"🚀 Starting {settings.app_name}")
    logger.info(f"   Version: {settings.app_version}")
    logger.info(f"   Environment: {settings.env_mode.value}")
    logger.info(f"   Debug: {settings.debug}")
    logger.info("=" * 60)

    status_scheduler = None
    if settings.status_scheduler_enabled:
        status_scheduler = StatusScheduler(get_order_store(), settings)
        status_scheduler.start()
    else:
        logger.warning("⚠️ Status scheduler disabled, orders will not advance")
    app.state.status_scheduler = status_scheduler

    logger.info("✅ Application ready!")

    yield  # Application runs

    # Shutdown
    logger.info("Shutting down...")
    if status_scheduler is not None:
        status_scheduler.shutdown()
    app.state.status_scheduler = None
    logger.info("✅ Cleanup complete")


# =============================================================================
# APPLICATION INSTANCE
# =============================================================================

app = FastAPI(
    title=settings.app_name,
    description=(
        "Minimal food ordering backend: menu management, order placement "
        "and a timed delivery status pipeline."
    ),
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_order_id(raw: str) -> Optional[int]:
    """Parse the leading integer of a path segment ("12abc" -> 12)."""
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Beyond the interpreter's digit limit; no order can have that id.
        return None


# =============================================================================
# ROOT & HEALTH ENDPOINTS
# =============================================================================

@app.get("/", tags=["Root"])
async def root() -> dict[str, str]:
    """API root with navigation links."""
    return {
        "message": f"🍕 Welcome to {settings.app_name}",
        "version": settings.app_version,
        "environment": settings.env_mode.value,
        "documentation": "/docs",
        "health": "/health",
    }


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="System Health Check",
)
def health_check(
    request: Request,
    menu_store: MenuStore = Depends(get_menu_store),
    order_store: OrderStore = Depends(get_order_store),
) -> HealthResponse:
    """Report scheduler state and store sizes."""
    status_scheduler = getattr(request.app.state, "status_scheduler", None)
    if status_scheduler is None:
        scheduler_status = "disabled"
    elif status_scheduler.running:
        scheduler_status = "running"
    else:
        scheduler_status = "stopped"

    overall = "operational" if scheduler_status == "running" else "degraded"

    return HealthResponse(
        status=overall,
        scheduler=scheduler_status,
        menu_items=len(menu_store),
        orders=len(order_store),
        timestamp=utc_now(),
    )


# =============================================================================
# MENU ENDPOINTS
# =============================================================================

@app.post(
    "/menu",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={200: {"model": MessageResponse}, 400: {"model": ErrorResponse}},
    tags=["Menu"],
    summary="Add or Update Menu Item",
)
def upsert_menu_item(
    response: Response,
    payload: Optional[MenuItemUpsert] = None,
    menu_store: MenuStore = Depends(get_menu_store),
) -> MessageResponse:
    """
    Add a menu item, or update price and category of the item with the same name.

    Returns 201 when the item is new and 200 when an existing item was updated.
    """
    if payload is None:
        payload = MenuItemUpsert()
    _, created = menu_store.upsert(payload.name, payload.price, payload.category)

    if created:
        return MessageResponse(message="Menu item added successfully.")

    response.status_code = status.HTTP_200_OK
    return MessageResponse(message="Menu item updated successfully.")


@app.get(
    "/menu",
    response_model=List[MenuItemResponse],
    tags=["Menu"],
    summary="List Menu Items",
)
def list_menu_items(
    menu_store: MenuStore = Depends(get_menu_store),
) -> List[MenuItemResponse]:
    """Retrieve every menu item in insertion order."""
    return [MenuItemResponse(**item.to_dict()) for item in menu_store.list_items()]


# =============================================================================
# ORDER ENDPOINTS
# =============================================================================

@app.post(
    "/orders",
    response_model=OrderCreateResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    tags=["Orders"],
    summary="Place Order",
)
def place_order(
    payload: Optional[OrderCreate] = None,
    order_store: OrderStore = Depends(get_order_store),
) -> OrderCreateResponse:
    """Place an order for a list of menu item ids."""
    if payload is None:
        payload = OrderCreate()
    order = order_store.place(payload.items)

    return OrderCreateResponse(message="Order placed successfully.", order_id=order.id)


@app.get(
    "/orders/{order_id}",
    response_model=OrderDetailsResponse,
    responses={404: {"model": ErrorResponse}},
    tags=["Orders"],
    summary="Get Order Details",
)
def get_order(
    order_id: str,
    order_store: OrderStore = Depends(get_order_store),
) -> OrderDetailsResponse:
    """Get a specific order with its menu items resolved."""
    parsed_id = parse_order_id(order_id)
    if parsed_id is None:
        raise NotFoundError("Order not found.")

    details = order_store.get_details(parsed_id)
    return OrderDetailsResponse.model_validate(details.to_dict())


# =============================================================================
# ERROR HANDLERS
# =============================================================================

@app.exception_handler(OrderingError)
async def ordering_error_handler(request: Request, exc: OrderingError) -> JSONResponse:
    """Translate domain errors to their status code and message."""
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unparseable request bodies as 400 instead of 422."""
    logger.warning(f"{request.method} {request.url.path} malformed request: {exc.errors()}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Request body must be a JSON object."},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all exception handler."""
    logger.exception(f"Unhandled exception: {exc}")

    content: dict[str, Any] = {"error": "Internal Server Error"}
    if settings.debug:
        content["detail"] = str(exc)

    return JSONResponse(status_code=500, content=content)


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.api_host,
        port=settings.api_port,
    )
