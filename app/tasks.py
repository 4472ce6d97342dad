"""
Scheduled Tasks
Background jobs run by the status scheduler.
"""

import logging
import time

from app.services import OrderStore

logger = logging.getLogger(__name__)


def advance_order_statuses(order_store: OrderStore) -> dict:
    """
    Advance every undelivered order by one status step.

    Args:
        order_store: Store whose orders are advanced

    Returns:
        dict: Counts from the sweep
    """
    start_time = time.time()

    try:
        result = order_store.advance_all()
    except Exception:
        logger.exception("Order status update failed")
        raise

    elapsed = round(time.time() - start_time, 3)
    logger.info("Order statuses updated.")
    logger.debug(
        f"Advanced {result.advanced}/{result.total} order(s), "
        f"{result.delivered} delivered, in {elapsed}s"
    )

    return {
        "advanced": result.advanced,
        "delivered": result.delivered,
        "total": result.total,
        "processing_time_seconds": elapsed,
    }
