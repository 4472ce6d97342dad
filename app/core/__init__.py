"""
Core module initialization.
Exports configuration, logging utilities and domain exceptions.
"""

from app.core.config import get_settings, setup_logging, Settings, EnvironmentMode
from app.core.exceptions import (
    OrderingError,
    ValidationError,
    InvalidReferenceError,
    NotFoundError,
)

__all__ = [
    "get_settings",
    "setup_logging",
    "Settings",
    "EnvironmentMode",
    "OrderingError",
    "ValidationError",
    "InvalidReferenceError",
    "NotFoundError",
]
